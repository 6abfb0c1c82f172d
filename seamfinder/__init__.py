"""
Minimum-energy seam finding for content-aware image resizing.

Based on "Seam Carving for Content-Aware Image Resizing"
by Avidan & Shamir, 2007.
"""

__version__ = "0.1.0"

from .errors import SeamError, InvalidArgumentError, ShapeMismatchError
from .orientation import (VERTICAL, HORIZONTAL, DIRECTIONS,
                          normalize_orientation, restore_orientation)
from .seam import (SeamResult, find_seam, cumulative_energy, backtrack_seam,
                   seam_energy)

__all__ = [
    'SeamError',
    'InvalidArgumentError',
    'ShapeMismatchError',
    'VERTICAL',
    'HORIZONTAL',
    'DIRECTIONS',
    'normalize_orientation',
    'restore_orientation',
    'SeamResult',
    'find_seam',
    'cumulative_energy',
    'backtrack_seam',
    'seam_energy',
]
