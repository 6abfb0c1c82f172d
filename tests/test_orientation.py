"""Tests for direction handling and cost field validation."""

import torch
import pytest
from seamfinder.errors import InvalidArgumentError, SeamError
from seamfinder.orientation import (as_cost_field, normalize_orientation,
                                    restore_orientation, validate_direction)


class TestValidateDirection:
    def test_accepts_known_directions(self):
        assert validate_direction('vertical') == 'vertical'
        assert validate_direction('horizontal') == 'horizontal'

    @pytest.mark.parametrize('direction', ['diagonal', 'Vertical', '', None])
    def test_rejects_unknown_direction(self, direction):
        with pytest.raises(InvalidArgumentError):
            validate_direction(direction)

    def test_error_is_a_value_error(self):
        """Callers catching ValueError still see bad directions."""
        with pytest.raises(ValueError, match="Invalid direction"):
            validate_direction('sideways')


class TestAsCostField:
    def test_squeezes_single_channel(self):
        energy = torch.rand(5, 7, 1)
        field = as_cost_field(energy)
        assert field.shape == (5, 7)
        assert torch.equal(field, energy[:, :, 0])

    def test_rejects_multi_channel(self):
        with pytest.raises(InvalidArgumentError, match="single channel"):
            as_cost_field(torch.rand(5, 7, 3))

    @pytest.mark.parametrize('shape', [(5,), (2, 3, 4, 1)])
    def test_rejects_wrong_rank(self, shape):
        with pytest.raises(InvalidArgumentError):
            as_cost_field(torch.rand(*shape))

    @pytest.mark.parametrize('shape', [(0, 4), (4, 0)])
    def test_rejects_empty(self, shape):
        with pytest.raises(SeamError, match="empty"):
            as_cost_field(torch.zeros(*shape))

    def test_promotes_integers_to_float(self):
        field = as_cost_field([[1, 2], [3, 4]])
        assert field.is_floating_point()
        assert field.tolist() == [[1.0, 2.0], [3.0, 4.0]]

    def test_keeps_float64(self):
        field = as_cost_field(torch.rand(3, 3, dtype=torch.float64))
        assert field.dtype == torch.float64


class TestNormalizeOrientation:
    def test_vertical_passes_through(self):
        energy = torch.rand(4, 6)
        assert torch.equal(normalize_orientation(energy, 'vertical'), energy)

    def test_horizontal_transposes(self):
        energy = torch.rand(4, 6)
        normalized = normalize_orientation(energy, 'horizontal')
        assert normalized.shape == (6, 4)
        assert torch.equal(normalized, energy.t())

    def test_direction_checked_before_field(self):
        """A bad direction is reported even when the field is also bad."""
        with pytest.raises(InvalidArgumentError, match="Invalid direction"):
            normalize_orientation(torch.rand(3, 3, 2), 'diagonal')

    def test_restore_inverts_normalize(self):
        energy = torch.rand(4, 6)
        for direction in ('vertical', 'horizontal'):
            restored = restore_orientation(normalize_orientation(energy, direction), direction)
            assert torch.equal(restored, energy)
