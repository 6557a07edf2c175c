"""
Unit tests for the squash table.

Tests the squash functions in src/evograph/activations/basic_activations.py,
their autograd-derived derivatives, and the name lookup.
"""

import math
import pytest
from evograph.activations.basic_activations import (
    Squash,
    squashes,
    squash_codes,
    get_squash,
    identity_activation,
    sigmoid_activation,
    tanh_activation,
    relu_activation,
    clamped_activation,
    gaussian_activation,
)
from evograph.errors import EvographError, UnknownSquashError


class TestSquashTable:
    """Test the squashes dictionary."""

    def test_expected_names_registered(self):
        """Test that all squash functions are registered."""
        expected_names = ['identity', 'sigmoid', 'tanh', 'relu', 'clamped',
                          'sin', 'gaussian', 'abs', 'square']
        for name in expected_names:
            assert name in squashes, f"{name} not found in squash table"

    def test_entries_are_squash_tuples(self):
        """Test that every entry carries its name, function and derivative."""
        for name, entry in squashes.items():
            assert isinstance(entry, Squash)
            assert entry.name == name
            assert callable(entry.function)
            assert callable(entry.derivative)

    def test_every_squash_has_a_code(self):
        """Test that every squash function has a 3-letter code."""
        for name in squashes:
            assert len(squash_codes[name]) == 3

    def test_entry_is_callable(self):
        """Test that calling an entry applies its function."""
        assert squashes['tanh'](0.5) == pytest.approx(math.tanh(0.5))


class TestGetSquash:
    """Test squash lookup by name."""

    def test_known_name(self):
        assert get_squash('sigmoid') is squashes['sigmoid']

    def test_unknown_name_raises(self):
        with pytest.raises(UnknownSquashError, match="nope"):
            get_squash('nope')

    def test_unknown_name_error_hierarchy(self):
        with pytest.raises(EvographError):
            get_squash('nope')
        with pytest.raises(LookupError):
            get_squash('nope')

    def test_error_records_name(self):
        with pytest.raises(UnknownSquashError) as exc_info:
            get_squash('legendre')
        assert exc_info.value.name == 'legendre'


class TestSquashFunctions:
    """Test squash function values."""

    def test_identity(self):
        assert identity_activation(-3.5) == -3.5

    def test_sigmoid_midpoint(self):
        assert sigmoid_activation(0.0) == pytest.approx(0.5)

    def test_sigmoid_standard_logistic(self):
        assert sigmoid_activation(1.0) == pytest.approx(1.0 / (1.0 + math.exp(-1.0)))

    def test_sigmoid_extreme_values_do_not_overflow(self):
        assert sigmoid_activation(1e6) == pytest.approx(1.0)
        assert sigmoid_activation(-1e6) == pytest.approx(0.0)

    def test_tanh(self):
        assert tanh_activation(1.0) == pytest.approx(math.tanh(1.0))

    def test_relu(self):
        assert relu_activation(-2.0) == 0.0
        assert relu_activation(2.0) == 2.0

    def test_clamped(self):
        assert clamped_activation(5.0) == 1.0
        assert clamped_activation(-5.0) == -1.0
        assert clamped_activation(0.3) == pytest.approx(0.3)

    def test_gaussian_peak(self):
        assert gaussian_activation(0.0) == pytest.approx(1.0)


class TestSquashDerivatives:
    """Test the derivatives computed with autograd."""

    def test_identity_derivative(self):
        assert get_squash('identity').derivative(7.0) == pytest.approx(1.0)

    def test_sigmoid_derivative_at_zero(self):
        assert get_squash('sigmoid').derivative(0.0) == pytest.approx(0.25)

    def test_sigmoid_derivative_matches_closed_form(self):
        s = sigmoid_activation(0.7)
        assert get_squash('sigmoid').derivative(0.7) == pytest.approx(s * (1.0 - s))

    def test_tanh_derivative(self):
        assert get_squash('tanh').derivative(0.5) == pytest.approx(1.0 - math.tanh(0.5) ** 2)

    def test_relu_derivative(self):
        assert get_squash('relu').derivative(-1.0) == pytest.approx(0.0)
        assert get_squash('relu').derivative(2.0) == pytest.approx(1.0)

    def test_square_derivative(self):
        assert get_squash('square').derivative(3.0) == pytest.approx(6.0)

    def test_clamped_derivative_outside_range(self):
        assert get_squash('clamped').derivative(2.0) == pytest.approx(0.0)

    def test_derivative_accepts_integers(self):
        assert get_squash('square').derivative(2) == pytest.approx(4.0)
