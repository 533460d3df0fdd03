"""Tests for polynomial fitting."""

from __future__ import annotations

import numpy as np
import pytest
import torch

from torchshamir.polynomial import (
    DegreeError,
    PolynomialError,
    polynomial,
    polynomial_evaluate,
    polynomial_fit,
    polynomial_vandermonde,
)


class TestPolynomialVandermonde:
    """Tests for polynomial_vandermonde."""

    def test_vandermonde_shape(self):
        """Vandermonde matrix has correct shape."""
        x = torch.tensor([1.0, 2.0, 3.0, 4.0])
        V = polynomial_vandermonde(x, degree=3)
        assert V.shape == (4, 4)  # (n_points, degree+1)

    def test_vandermonde_values(self):
        """Vandermonde matrix has correct values."""
        x = torch.tensor([1.0, 2.0, 3.0])
        V = polynomial_vandermonde(x, degree=2)

        # V[i, j] = x[i]^j
        expected = torch.tensor(
            [
                [1.0, 1.0, 1.0],
                [1.0, 2.0, 4.0],
                [1.0, 3.0, 9.0],
            ]
        )
        assert torch.allclose(V, expected)

    def test_vandermonde_vs_numpy(self):
        """Compare against NumPy's vander."""
        x = torch.tensor([1.0, 2.0, 3.0, 4.0, 5.0])
        V = polynomial_vandermonde(x, degree=3)

        # NumPy vander uses descending order by default
        np_V = np.vander(x.numpy(), N=4, increasing=True)

        assert torch.allclose(V, torch.tensor(np_V, dtype=torch.float32))

    def test_vandermonde_degree_zero(self):
        """Degree 0 gives column of ones."""
        V = polynomial_vandermonde(torch.tensor([1.0, 2.0, 3.0]), degree=0)
        assert torch.allclose(V, torch.ones(3, 1))

    def test_vandermonde_integer_exact(self):
        """Integer points give exact integer powers."""
        x = torch.tensor([3, -7, 12])
        V = polynomial_vandermonde(x, degree=6)

        assert V.dtype == torch.int64
        assert V.tolist() == [[xi**j for j in range(7)] for xi in [3, -7, 12]]


class TestPolynomialFit:
    """Tests for polynomial_fit."""

    def test_fit_line(self):
        """Fit y = 1 + 2x."""
        x = torch.tensor([0.0, 1.0, 2.0, 3.0], dtype=torch.float64)
        y = 1.0 + 2.0 * x
        p = polynomial_fit(x, y, degree=1)

        torch.testing.assert_close(
            p.coeffs, torch.tensor([1.0, 2.0], dtype=torch.float64)
        )

    def test_exact_interpolation(self):
        """degree = n_points - 1 recovers the polynomial exactly."""
        true = polynomial(
            torch.tensor([5.0, 2.0, -3.0, 2.0], dtype=torch.float64)
        )
        x = torch.tensor([-2.0, -1.0, 1.0, 2.0], dtype=torch.float64)

        p = polynomial_fit(x, polynomial_evaluate(true, x), degree=3)

        torch.testing.assert_close(p.coeffs, true.coeffs)

    def test_vector_valued(self):
        """Vector-valued y puts the coefficient dimension last."""
        x = torch.tensor([1.0, 2.0, 3.0], dtype=torch.float64)
        y = torch.stack([1.0 + x, 2.0 - x], dim=-1)  # (3, 2)

        p = polynomial_fit(x, y, degree=1)

        assert p.coeffs.shape == (2, 2)
        torch.testing.assert_close(
            p.coeffs,
            torch.tensor([[1.0, 1.0], [2.0, -1.0]], dtype=torch.float64),
        )

    def test_weighted_vs_numpy(self):
        """Weighted least squares matches numpy.polynomial."""
        x = np.linspace(-1.0, 1.0, 9)
        y = np.cos(3.0 * x)
        w = np.linspace(0.5, 2.0, 9)

        # numpy weights multiply residuals, torchshamir weights squared residuals
        expected = np.polynomial.polynomial.polyfit(x, y, 2, w=np.sqrt(w))
        p = polynomial_fit(
            torch.from_numpy(x),
            torch.from_numpy(y),
            degree=2,
            weights=torch.from_numpy(w),
        )

        np.testing.assert_allclose(p.coeffs.numpy(), expected, rtol=1e-8)

    def test_underdetermined_raises(self):
        """degree >= n_points is rejected."""
        x = torch.tensor([1.0, 2.0])
        with pytest.raises(DegreeError):
            polynomial_fit(x, x, degree=2)

    def test_degree_error_hierarchy(self):
        """DegreeError is both a PolynomialError and a ValueError."""
        assert issubclass(DegreeError, PolynomialError)
        assert issubclass(DegreeError, ValueError)

    def test_negative_degree_raises(self):
        """Negative degree is rejected."""
        x = torch.tensor([1.0, 2.0])
        with pytest.raises(DegreeError):
            polynomial_fit(x, x, degree=-1)
