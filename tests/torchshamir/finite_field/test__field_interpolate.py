"""Tests for polynomial evaluation and interpolation over GF(p)."""

import pytest
import torch

from torchshamir.finite_field import (
    MERSENNE_PRIME_31,
    field_evaluate,
    field_lagrange_interpolate,
)
from torchshamir.polynomial import polynomial


def _evaluate_python(coeffs, x, p):
    return sum(c * pow(x, i, p) for i, c in enumerate(coeffs)) % p


class TestFieldEvaluate:
    """Tests for field_evaluate."""

    def test_vs_python(self):
        """Horner mod p matches a direct sum."""
        p = MERSENNE_PRIME_31
        coeffs = [123456789, p - 1, 42, 2**30]
        x = [1, 2, 3, 1000, p - 1]

        result = field_evaluate(
            polynomial(torch.tensor(coeffs)), torch.tensor(x), p
        )

        assert result.tolist() == [_evaluate_python(coeffs, xi, p) for xi in x]

    def test_batched_shape(self):
        """Batch dimensions come first."""
        p = 257
        poly = polynomial(torch.tensor([[1, 2], [3, 4], [5, 6]]))
        result = field_evaluate(poly, torch.tensor([1, 2]), p)
        assert result.shape == (3, 2)
        assert result.tolist() == [[3, 5], [7, 11], [11, 17]]

    def test_at_zero_gives_constant_term(self):
        """p(0) is the constant term."""
        poly = polynomial(torch.tensor([99, 5, 7]))
        assert field_evaluate(poly, torch.tensor(0), 101).item() == 99

    def test_deterministic(self):
        """Same x, same y."""
        poly = polynomial(torch.tensor([3, 1, 4, 1, 5]))
        x = torch.tensor([9, 2, 6])
        assert torch.equal(
            field_evaluate(poly, x, 65521), field_evaluate(poly, x, 65521)
        )


class TestFieldLagrangeInterpolate:
    """Tests for field_lagrange_interpolate."""

    def test_recovers_constant_term(self):
        """Interpolating k points at 0 gives the constant term."""
        p = MERSENNE_PRIME_31
        coeffs = [1234, 987654321, 55555, 2**31 - 100]
        x_nodes = torch.tensor([1, 2, 3, 4])
        y_nodes = field_evaluate(polynomial(torch.tensor(coeffs)), x_nodes, p)

        secret = field_lagrange_interpolate(
            x_nodes, y_nodes, torch.tensor(0), p
        )

        assert secret.item() == 1234

    def test_reproduces_polynomial(self):
        """Interpolant agrees with the polynomial at new points."""
        p = 65521
        poly = polynomial(torch.tensor([7, 11, 13]))
        x_nodes = torch.tensor([5, 100, 60000])
        x = torch.tensor([0, 1, 2, 3, 65520])

        result = field_lagrange_interpolate(
            x_nodes, field_evaluate(poly, x_nodes, p), x, p
        )

        assert torch.equal(result, field_evaluate(poly, x, p))

    def test_vector_values(self):
        """Trailing y dimensions are interpolated independently."""
        p = 257
        poly = polynomial(torch.tensor([[1, 2], [3, 4]]))  # 1 + 2x, 3 + 4x
        x_nodes = torch.tensor([1, 2])
        y_nodes = field_evaluate(poly, x_nodes, p).T  # (2 nodes, 2 values)

        result = field_lagrange_interpolate(
            x_nodes, y_nodes, torch.tensor(0), p
        )

        assert result.tolist() == [1, 3]

    def test_nodes_equal_mod_p_raise(self):
        """Nodes that coincide mod p are rejected."""
        with pytest.raises(ValueError, match="distinct"):
            field_lagrange_interpolate(
                torch.tensor([1, 8]),
                torch.tensor([2, 3]),
                torch.tensor(0),
                7,
            )

    def test_length_mismatch_raises(self):
        """x_nodes and y_nodes must agree in length."""
        with pytest.raises(ValueError, match="same length"):
            field_lagrange_interpolate(
                torch.tensor([1, 2]),
                torch.tensor([2]),
                torch.tensor(0),
                7,
            )
