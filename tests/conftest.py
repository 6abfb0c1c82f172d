"""Shared test fixtures for the seamfinder test suite."""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import itertools

import torch
import pytest


@pytest.fixture
def grid_energy():
    """3x3 energy map 1..9, row-major."""
    return torch.tensor([[1.0, 2.0, 3.0],
                         [4.0, 5.0, 6.0],
                         [7.0, 8.0, 9.0]])


@pytest.fixture
def random_energy():
    """Seeded non-negative 40x30 energy map."""
    torch.manual_seed(42)
    return torch.rand(40, 30, dtype=torch.float64)


def brute_force_min_energy(energy):
    """Cheapest connected vertical seam by enumerating every path."""
    H, W = energy.shape
    best = float('inf')
    for path in itertools.product(range(W), repeat=H):
        if any(abs(a - b) > 1 for a, b in zip(path, path[1:])):
            continue
        total = sum(energy[i, j].item() for i, j in enumerate(path))
        best = min(best, total)
    return best
