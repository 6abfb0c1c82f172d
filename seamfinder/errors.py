"""
Exceptions raised by seam computation.

All of them subclass ValueError, so code that already catches ValueError
for a bad direction keeps working.
"""


class SeamError(ValueError):
    """Base class for seamfinder errors."""


class InvalidArgumentError(SeamError):
    """Unrecognised direction, or a cost field that is not a single-channel 2-D map."""


class ShapeMismatchError(SeamError):
    """Cumulative and predecessor tables do not describe the same field."""
