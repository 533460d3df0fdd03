"""Tests for real-domain Lagrange interpolation."""

import pytest
import torch

from torchshamir.polynomial import lagrange_interpolate, polynomial


class TestLagrangeInterpolate:
    """Tests for lagrange_interpolate."""

    def test_recovers_constant_term(self):
        """Interpolating at 0 returns p(0)."""
        p = polynomial(torch.tensor([5.0, 2.0, -3.0, 2.0], dtype=torch.float64))
        x_nodes = torch.tensor([-2.0, -1.0, 1.0, 2.0], dtype=torch.float64)

        secret = lagrange_interpolate(
            x_nodes, p(x_nodes), torch.tensor(0.0, dtype=torch.float64)
        )

        torch.testing.assert_close(
            secret, torch.tensor(5.0, dtype=torch.float64)
        )

    def test_reproduces_polynomial_everywhere(self):
        """n nodes of a degree n - 1 polynomial determine it."""
        p = polynomial(torch.tensor([1.0, -4.0, 0.5], dtype=torch.float64))
        x_nodes = torch.tensor([-1.0, 0.5, 3.0], dtype=torch.float64)
        x = torch.linspace(-5.0, 5.0, 21, dtype=torch.float64)

        torch.testing.assert_close(
            lagrange_interpolate(x_nodes, p(x_nodes), x), p(x)
        )

    def test_passes_through_nodes(self):
        """The interpolant equals y at every node."""
        x_nodes = torch.tensor([0.0, 1.0, 3.0, 4.0], dtype=torch.float64)
        y_nodes = torch.tensor([2.0, -1.0, 7.0, 0.0], dtype=torch.float64)

        torch.testing.assert_close(
            lagrange_interpolate(x_nodes, y_nodes, x_nodes), y_nodes
        )

    def test_vector_values(self):
        """y_nodes with trailing dimensions interpolate per column."""
        x_nodes = torch.tensor([1.0, 2.0], dtype=torch.float64)
        # Columns: 3 + x and -1 + 2x
        y_nodes = torch.tensor([[4.0, 1.0], [5.0, 3.0]], dtype=torch.float64)

        result = lagrange_interpolate(
            x_nodes, y_nodes, torch.tensor([0.0, 10.0], dtype=torch.float64)
        )

        assert result.shape == (2, 2)
        torch.testing.assert_close(
            result,
            torch.tensor([[3.0, -1.0], [13.0, 19.0]], dtype=torch.float64),
        )

    def test_single_node(self):
        """One node gives a constant."""
        result = lagrange_interpolate(
            torch.tensor([3.0]), torch.tensor([8.0]), torch.tensor(0.0)
        )
        torch.testing.assert_close(result, torch.tensor(8.0))

    def test_integer_inputs_use_default_dtype(self):
        """Integer nodes are interpolated in floating point."""
        result = lagrange_interpolate(
            torch.tensor([1, 2]), torch.tensor([3, 5]), torch.tensor(0)
        )
        assert result.dtype == torch.get_default_dtype()
        torch.testing.assert_close(result, torch.tensor(1.0))

    def test_duplicate_nodes_raise(self):
        """Repeated x-coordinates are rejected."""
        with pytest.raises(ValueError, match="distinct"):
            lagrange_interpolate(
                torch.tensor([1.0, 1.0]),
                torch.tensor([2.0, 3.0]),
                torch.tensor(0.0),
            )

    def test_length_mismatch_raises(self):
        """x_nodes and y_nodes must agree in length."""
        with pytest.raises(ValueError, match="same length"):
            lagrange_interpolate(
                torch.tensor([1.0, 2.0]),
                torch.tensor([2.0]),
                torch.tensor(0.0),
            )

    def test_empty_raises(self):
        """At least one node is required."""
        with pytest.raises(ValueError, match="At least one node"):
            lagrange_interpolate(
                torch.tensor([]), torch.tensor([]), torch.tensor(0.0)
            )
