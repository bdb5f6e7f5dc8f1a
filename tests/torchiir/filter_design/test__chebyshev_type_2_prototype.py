"""Tests for the Chebyshev Type II analog lowpass prototype."""

import math

import numpy as np
import pytest
import scipy.signal
import torch

from torchiir.filter_analysis import frequency_response_layout
from torchiir.filter_design import (
    InvalidArgumentError,
    InvalidAttenuationError,
    InvalidOrderError,
    chebyshev_type_2_prototype,
)


class TestChebyshevType2PrototypeShape:
    """Pole and zero counts."""

    @pytest.mark.parametrize("order", [1, 2, 3, 4, 5, 6, 7, 8])
    def test_pole_count_equals_order(self, order: int) -> None:
        layout = chebyshev_type_2_prototype(order, 40.0, dtype=torch.float64)

        assert layout.num_poles() == order
        assert layout.all_poles().numel() == order

    @pytest.mark.parametrize("order", [2, 4, 6, 8])
    def test_even_order_has_order_zeros(self, order: int) -> None:
        layout = chebyshev_type_2_prototype(order, 40.0, dtype=torch.float64)

        assert layout.num_zeros() == order
        assert layout.real_zeros.numel() == 0

    @pytest.mark.parametrize("order", [1, 3, 5, 7])
    def test_odd_order_omits_zero_at_infinity(self, order: int) -> None:
        layout = chebyshev_type_2_prototype(order, 40.0, dtype=torch.float64)

        assert layout.num_zeros() == order - 1
        assert layout.real_poles.numel() == 1

    def test_pairs_stored_once(self) -> None:
        layout = chebyshev_type_2_prototype(6, 40.0, dtype=torch.float64)

        assert layout.pole_pairs.numel() == 3
        assert torch.all(layout.pole_pairs.imag > 0)
        assert torch.all(layout.zero_pairs.imag > 0)


class TestChebyshevType2PrototypeValues:
    """Pole, zero and gain values."""

    @pytest.mark.parametrize("order", [1, 2, 3, 4, 5, 6, 9])
    @pytest.mark.parametrize("attenuation", [10.0, 20.0, 40.0, 60.0])
    def test_matches_scipy(self, order: int, attenuation: float) -> None:
        layout = chebyshev_type_2_prototype(
            order, attenuation, dtype=torch.float64
        )
        z_scipy, p_scipy, k_scipy = scipy.signal.cheb2ap(order, attenuation)

        np.testing.assert_allclose(
            _by_imag(layout.all_poles().numpy()),
            _by_imag(p_scipy),
            rtol=1e-10,
            atol=1e-12,
        )
        np.testing.assert_allclose(
            _by_imag(layout.all_zeros().numpy()),
            _by_imag(z_scipy),
            rtol=1e-10,
            atol=1e-12,
        )
        assert math.isclose(float(layout.gain), float(k_scipy), rel_tol=1e-9)

    @pytest.mark.parametrize("order", [1, 2, 3, 4, 7, 10])
    def test_poles_in_left_half_plane(self, order: int) -> None:
        layout = chebyshev_type_2_prototype(order, 50.0, dtype=torch.float64)

        assert layout.is_stable()

    def test_zeros_on_imaginary_axis(self) -> None:
        layout = chebyshev_type_2_prototype(6, 40.0, dtype=torch.float64)
        zeros = layout.all_zeros()

        torch.testing.assert_close(
            zeros.real, torch.zeros_like(zeros.real), rtol=0, atol=1e-12
        )
        assert torch.all(zeros.imag.abs() >= 1.0)

    @pytest.mark.parametrize("order", [1, 2, 3, 4, 5, 8])
    @pytest.mark.parametrize("attenuation", [3.0, 40.0, 80.0])
    def test_unity_dc_gain(self, order: int, attenuation: float) -> None:
        layout = chebyshev_type_2_prototype(
            order, attenuation, dtype=torch.float64
        )
        h = frequency_response_layout(
            layout, torch.zeros(1, dtype=torch.float64)
        )

        assert abs(h.abs().item() - 1.0) < 1e-9

    @pytest.mark.parametrize("order", [2, 3, 4, 5])
    def test_stopband_edge_reaches_attenuation(self, order: int) -> None:
        layout = chebyshev_type_2_prototype(order, 40.0, dtype=torch.float64)
        h = frequency_response_layout(
            layout, torch.ones(1, dtype=torch.float64)
        )

        torch.testing.assert_close(
            20 * torch.log10(h.abs()),
            torch.tensor([-40.0], dtype=torch.float64),
        )

    @pytest.mark.parametrize("order", [3, 4])
    def test_stopband_never_exceeds_attenuation(self, order: int) -> None:
        layout = chebyshev_type_2_prototype(order, 40.0, dtype=torch.float64)
        w = torch.logspace(0, 3, 2000, dtype=torch.float64)
        h = frequency_response_layout(layout, w)

        assert torch.all(h.abs() <= 10 ** (-40.0 / 20) * (1 + 1e-9))


class TestChebyshevType2PrototypeDtype:
    """Output dtype and the single precision warning."""

    def test_float32(self) -> None:
        layout = chebyshev_type_2_prototype(4, 40.0, dtype=torch.float32)

        assert layout.pole_pairs.dtype == torch.complex64
        assert layout.gain.dtype == torch.float32

    def test_float64(self) -> None:
        layout = chebyshev_type_2_prototype(5, 40.0, dtype=torch.float64)

        assert layout.pole_pairs.dtype == torch.complex128
        assert layout.real_poles.dtype == torch.complex128
        assert layout.gain.dtype == torch.float64

    def test_high_order_float32_warns(self) -> None:
        with pytest.warns(RuntimeWarning, match="float32"):
            chebyshev_type_2_prototype(10, 40.0, dtype=torch.float32)

    def test_unsupported_dtype_raises(self) -> None:
        with pytest.raises(ValueError, match="Unsupported dtype"):
            chebyshev_type_2_prototype(4, 40.0, dtype=torch.int32)


class TestChebyshevType2PrototypeErrors:
    """Argument validation."""

    @pytest.mark.parametrize("order", [0, -1])
    def test_non_positive_order(self, order: int) -> None:
        with pytest.raises(InvalidOrderError):
            chebyshev_type_2_prototype(order, 40.0)

    @pytest.mark.parametrize("order", [2.5, "4", True])
    def test_non_integer_order(self, order) -> None:
        with pytest.raises(InvalidOrderError):
            chebyshev_type_2_prototype(order, 40.0)

    @pytest.mark.parametrize(
        "attenuation", [0.0, -10.0, math.inf, math.nan]
    )
    def test_invalid_attenuation(self, attenuation: float) -> None:
        with pytest.raises(InvalidAttenuationError):
            chebyshev_type_2_prototype(4, attenuation)

    def test_errors_are_value_errors(self) -> None:
        with pytest.raises(ValueError):
            chebyshev_type_2_prototype(0, 40.0)

        assert issubclass(InvalidOrderError, InvalidArgumentError)
        assert issubclass(InvalidAttenuationError, InvalidArgumentError)


def _by_imag(x: np.ndarray) -> np.ndarray:
    # Imaginary parts are distinct; real parts of a pair may differ in ulp
    return x[np.argsort(x.imag, kind="stable")]
