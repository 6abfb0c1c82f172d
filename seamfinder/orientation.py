"""
Direction handling for seam computation.

Seams are always computed top to bottom. A left-to-right request is mapped
onto that case by transposing the cost field, and the result tables are
transposed back afterwards.
"""

import torch

from .errors import InvalidArgumentError

VERTICAL = 'vertical'      # top to bottom, one column index per row
HORIZONTAL = 'horizontal'  # left to right, one row index per column
DIRECTIONS = (VERTICAL, HORIZONTAL)


def validate_direction(direction: str) -> str:
    if direction not in DIRECTIONS:
        raise InvalidArgumentError(
            f"Invalid direction: {direction!r}. Must be 'vertical' or 'horizontal'.")
    return direction


def as_cost_field(energy) -> torch.Tensor:
    """
    Coerce an energy map to a 2-D floating tensor.

    Accepts (H, W) or (H, W, 1). Non-floating inputs are promoted to the
    default float dtype; floating inputs keep their dtype and device.

    Args:
        energy: Tensor, numpy array or nested sequence

    Returns:
        Energy map (H, W)
    """
    energy = torch.as_tensor(energy)

    if energy.dim() == 3:
        if energy.shape[2] != 1:
            raise InvalidArgumentError(
                f"Energy map must have a single channel, got shape {tuple(energy.shape)}")
        energy = energy[:, :, 0]
    elif energy.dim() != 2:
        raise InvalidArgumentError(
            f"Energy map must be (H, W) or (H, W, 1), got shape {tuple(energy.shape)}")

    if energy.numel() == 0:
        raise InvalidArgumentError(f"Energy map is empty: shape {tuple(energy.shape)}")

    if not energy.is_floating_point():
        energy = energy.to(torch.get_default_dtype())

    return energy


def normalize_orientation(energy, direction: str = VERTICAL) -> torch.Tensor:
    """
    Map a cost field onto the canonical top-to-bottom layout.

    Args:
        energy: Energy map (H, W) or (H, W, 1)
        direction: 'vertical' or 'horizontal'

    Returns:
        (H, W) for vertical, (W, H) for horizontal. The caller's data is
        never written to.
    """
    validate_direction(direction)
    energy = as_cost_field(energy)

    if direction == HORIZONTAL:
        return energy.t()
    return energy


def restore_orientation(table: torch.Tensor, direction: str = VERTICAL) -> torch.Tensor:
    """Undo normalize_orientation on a 2-D result table."""
    validate_direction(direction)
    if direction == HORIZONTAL:
        return table.t().contiguous()
    return table
