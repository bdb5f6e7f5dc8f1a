"""Tests for the analog frequency transforms."""

import numpy as np
import pytest
import scipy.signal
import torch

from torchiir.filter_design import (
    InvalidShapeError,
    chebyshev_type_2_prototype,
    frequency_transform,
)


def _prototype(order: int):
    layout = chebyshev_type_2_prototype(order, 40.0, dtype=torch.float64)
    return layout.all_zeros(), layout.all_poles(), layout.gain


def _response(z, p, k, w: np.ndarray) -> np.ndarray:
    _, h = scipy.signal.freqs_zpk(z, p, k, worN=w)
    return h


class TestFrequencyTransform:
    """Each shape against the matching scipy transform."""

    w = np.logspace(-2, 2, 300)

    @pytest.mark.parametrize("order", [1, 2, 3, 4])
    def test_lowpass(self, order: int) -> None:
        z, p, k = _prototype(order)
        cutoff = torch.tensor(2.5, dtype=torch.float64)

        z_t, p_t, k_t = frequency_transform(z, p, k, "lowpass", cutoff)
        z_s, p_s, k_s = scipy.signal.lp2lp_zpk(
            z.numpy(), p.numpy(), k.item(), wo=2.5
        )

        np.testing.assert_allclose(
            np.abs(_response(z_t.numpy(), p_t.numpy(), k_t.item(), self.w)),
            np.abs(_response(z_s, p_s, k_s, self.w)),
            rtol=1e-9,
            atol=1e-12,
        )

    @pytest.mark.parametrize("order", [1, 2, 3, 4])
    def test_highpass(self, order: int) -> None:
        z, p, k = _prototype(order)
        cutoff = torch.tensor(0.7, dtype=torch.float64)

        z_t, p_t, k_t = frequency_transform(z, p, k, "highpass", cutoff)
        z_s, p_s, k_s = scipy.signal.lp2hp_zpk(
            z.numpy(), p.numpy(), k.item(), wo=0.7
        )

        assert z_t.numel() == p_t.numel() == order
        np.testing.assert_allclose(
            np.abs(_response(z_t.numpy(), p_t.numpy(), k_t.item(), self.w)),
            np.abs(_response(z_s, p_s, k_s, self.w)),
            rtol=1e-9,
            atol=1e-12,
        )

    @pytest.mark.parametrize("order", [1, 2, 3, 4])
    @pytest.mark.parametrize("shape", ["bandpass", "bandstop"])
    def test_band(self, order: int, shape: str) -> None:
        z, p, k = _prototype(order)
        edges = torch.tensor([0.8, 1.6], dtype=torch.float64)
        center = float(np.sqrt(0.8 * 1.6))
        bandwidth = 0.8

        z_t, p_t, k_t = frequency_transform(z, p, k, shape, edges)
        transform = (
            scipy.signal.lp2bp_zpk
            if shape == "bandpass"
            else scipy.signal.lp2bs_zpk
        )
        z_s, p_s, k_s = transform(
            z.numpy(), p.numpy(), k.item(), wo=center, bw=bandwidth
        )

        assert p_t.numel() == 2 * order
        np.testing.assert_allclose(
            np.abs(_response(z_t.numpy(), p_t.numpy(), k_t.item(), self.w)),
            np.abs(_response(z_s, p_s, k_s, self.w)),
            rtol=1e-9,
            atol=1e-12,
        )

    def test_bandstop_adds_notch_for_odd_order(self) -> None:
        z, p, k = _prototype(3)
        edges = torch.tensor([1.0, 4.0], dtype=torch.float64)

        z_t, _, _ = frequency_transform(z, p, k, "bandstop", edges)

        assert z_t.numel() == 6
        notch = torch.isclose(
            z_t, torch.tensor(2.0j, dtype=torch.complex128)
        )
        assert notch.any()

    def test_shelf_shapes_share_substitutions(self) -> None:
        z, p, k = _prototype(4)
        cutoff = torch.tensor(1.3, dtype=torch.float64)

        pairs = (("lowpass", "lowshelf"), ("highpass", "highshelf"))
        for plain, shelf in pairs:
            a = frequency_transform(z, p, k, plain, cutoff)
            b = frequency_transform(z, p, k, shelf, cutoff)
            for x, y in zip(a, b):
                torch.testing.assert_close(x, y)

    def test_unknown_shape(self) -> None:
        z, p, k = _prototype(2)

        with pytest.raises(InvalidShapeError):
            frequency_transform(z, p, k, "allpass", torch.tensor(1.0))
