"""
Minimum-energy seam computation.

Dynamic programming (Avidan & Shamir 2007):
1. Forward sweep: cumulative energy M(i, j) = e(i, j) + min of the three
   neighbours of (i, j) in row i-1, with a predecessor table recording
   which neighbour won.
2. Backtrack from the cheapest cell of the last row.

Ties are broken towards the smallest index, at every row and when picking
the end of the seam, so repeated calls give the same seam.
"""

import torch
from typing import NamedTuple, Tuple

from .errors import InvalidArgumentError, ShapeMismatchError
from .orientation import (VERTICAL, as_cost_field, normalize_orientation,
                          restore_orientation)


class SeamResult(NamedTuple):
    """Seam plus the DP tables it was traced through, in the caller's orientation."""
    seam: torch.Tensor
    cumulative: torch.Tensor
    predecessor: torch.Tensor


def _neighbour_columns(W: int, device: torch.device) -> torch.Tensor:
    """(3, W) candidate predecessor columns, ordered left, center, right.

    Out-of-range neighbours are clamped onto the edge column, which already
    appears as a candidate, so they never win a tie against a real one.
    """
    cols = torch.arange(W, device=device)
    return torch.stack([(cols - 1).clamp(min=0), cols, (cols + 1).clamp(max=W - 1)])


def cumulative_energy(energy) -> Tuple[torch.Tensor, torch.Tensor]:
    """
    Forward DP sweep over a top-to-bottom energy map.

    Each row depends only on the finished previous row, so all columns of a
    row are computed in one vectorised step.

    Args:
        energy: Energy map (H, W) or (H, W, 1)

    Returns:
        cumulative: (H, W) minimum cost to reach each pixel from row 0
        predecessor: (H, W) long, column in row i-1 the path came from
                     (row 0 is -1)
    """
    energy = as_cost_field(energy)
    H, W = energy.shape

    candidates = _neighbour_columns(W, energy.device)

    cumulative = torch.empty((H, W), dtype=energy.dtype, device=energy.device)
    predecessor = torch.full((H, W), -1, dtype=torch.long, device=energy.device)
    cumulative[0] = energy[0]

    for i in range(1, H):
        options = cumulative[i - 1][candidates]
        # argmin returns the first minimum, i.e. the leftmost neighbour
        choice = torch.argmin(options, dim=0, keepdim=True)
        predecessor[i] = candidates.gather(0, choice).squeeze(0)
        cumulative[i] = energy[i] + options.gather(0, choice).squeeze(0)

    return cumulative, predecessor


def backtrack_seam(cumulative: torch.Tensor, predecessor: torch.Tensor) -> torch.Tensor:
    """
    Trace the minimum seam back through the predecessor table.

    Both tables must be in top-to-bottom layout, as returned by
    cumulative_energy.

    Returns:
        Seam (H,) with a column index per row
    """
    if cumulative.dim() != 2 or predecessor.dim() != 2:
        raise ShapeMismatchError(
            f"Expected 2-D tables, got {tuple(cumulative.shape)} and {tuple(predecessor.shape)}")
    if cumulative.shape != predecessor.shape:
        raise ShapeMismatchError(
            f"Table shapes differ: cumulative {tuple(cumulative.shape)}, "
            f"predecessor {tuple(predecessor.shape)}")

    H = cumulative.shape[0]
    seam = torch.zeros(H, dtype=torch.long, device=cumulative.device)

    col = torch.argmin(cumulative[H - 1]).item()
    seam[H - 1] = col
    for i in range(H - 1, 0, -1):
        col = predecessor[i, col].item()
        seam[i - 1] = col

    return seam


def find_seam(energy, direction: str = VERTICAL) -> SeamResult:
    """
    Find the minimum-energy seam with dynamic programming.

    Args:
        energy: Energy map (H, W) or (H, W, 1)
        direction: 'vertical' (top to bottom) or 'horizontal' (left to right)

    Returns:
        SeamResult(seam, cumulative, predecessor):
            seam - for vertical: (H,) with column index per row
                   for horizontal: (W,) with row index per column
            cumulative, predecessor - (H, W), laid out like the input.
                   For horizontal the sweep runs along columns, so column 0
                   of cumulative equals column 0 of energy and
                   predecessor[i, j] is a row index in column j-1.
    """
    canonical = normalize_orientation(energy, direction)
    cumulative, predecessor = cumulative_energy(canonical)
    seam = backtrack_seam(cumulative, predecessor)

    return SeamResult(seam,
                      restore_orientation(cumulative, direction),
                      restore_orientation(predecessor, direction))


def seam_energy(energy, seam, direction: str = VERTICAL) -> float:
    """Total energy of the pixels along a seam."""
    canonical = normalize_orientation(energy, direction)
    seam = torch.as_tensor(seam, dtype=torch.long, device=canonical.device)

    n, m = canonical.shape
    if seam.shape != (n,):
        raise InvalidArgumentError(
            f"A {direction} seam needs {n} indices, got shape {tuple(seam.shape)}")
    if seam.min().item() < 0 or seam.max().item() >= m:
        raise InvalidArgumentError(f"Seam indices must lie in [0, {m - 1}]")

    rows = torch.arange(canonical.shape[0], device=canonical.device)
    return canonical[rows, seam].sum().item()
