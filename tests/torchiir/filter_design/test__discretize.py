"""Tests for bilinear_transform_zpk and zpk_to_sos."""

import numpy as np
import pytest
import scipy.signal
import torch

from torchiir.filter_design import (
    bilinear_transform_zpk,
    chebyshev_type_2_prototype,
    frequency_transform,
    zpk_to_sos,
)


class TestBilinearTransformZpk:
    """Tests for bilinear_transform_zpk."""

    @pytest.mark.parametrize("order", [1, 2, 3, 4, 5])
    @pytest.mark.parametrize("sampling_frequency", [2.0, 100.0])
    def test_matches_scipy(
        self, order: int, sampling_frequency: float
    ) -> None:
        layout = chebyshev_type_2_prototype(order, 40.0, dtype=torch.float64)
        z = layout.all_zeros()
        p = layout.all_poles()
        k = layout.gain

        z_d, p_d, k_d = bilinear_transform_zpk(z, p, k, sampling_frequency)
        z_s, p_s, k_s = scipy.signal.bilinear_zpk(
            z.numpy(), p.numpy(), k.item(), fs=sampling_frequency
        )

        assert z_d.numel() == p_d.numel() == order
        np.testing.assert_allclose(k_d.item(), k_s, rtol=1e-10)

        _, h = scipy.signal.freqz_zpk(z_d.numpy(), p_d.numpy(), k_d.item())
        _, h_s = scipy.signal.freqz_zpk(z_s, p_s, k_s)
        np.testing.assert_allclose(np.abs(h), np.abs(h_s), atol=1e-12)

    def test_stable_poles_inside_unit_circle(self) -> None:
        layout = chebyshev_type_2_prototype(8, 60.0, dtype=torch.float64)

        _, p_d, _ = bilinear_transform_zpk(
            layout.all_zeros(), layout.all_poles(), layout.gain, 2.0
        )

        assert torch.all(p_d.abs() < 1)

    def test_zeros_at_infinity_map_to_nyquist(self) -> None:
        p = torch.tensor([-1.0 + 0.0j], dtype=torch.complex128)
        z = torch.empty(0, dtype=torch.complex128)
        k = torch.tensor(1.0, dtype=torch.float64)

        z_d, _, _ = bilinear_transform_zpk(z, p, k, 2.0)

        torch.testing.assert_close(
            z_d, torch.tensor([-1.0 + 0.0j], dtype=torch.complex128)
        )


class TestZpkToSos:
    """Tests for zpk_to_sos."""

    def _digital(self, order: int, shape: str):
        layout = chebyshev_type_2_prototype(order, 40.0, dtype=torch.float64)
        warped = (
            torch.tensor([0.6, 1.4], dtype=torch.float64)
            if shape in ("bandpass", "bandstop")
            else torch.tensor(1.0, dtype=torch.float64)
        )
        z, p, k = frequency_transform(
            layout.all_zeros(), layout.all_poles(), layout.gain, shape, warped
        )
        return bilinear_transform_zpk(z, p, k, 2.0)

    @pytest.mark.parametrize("order", [1, 2, 3, 4, 5, 6])
    @pytest.mark.parametrize(
        "shape", ["lowpass", "highpass", "bandpass", "bandstop"]
    )
    def test_response_matches_zpk(self, order: int, shape: str) -> None:
        z, p, k = self._digital(order, shape)

        sos = zpk_to_sos(z, p, k)

        n_poles = p.numel()
        assert sos.shape == ((n_poles + 1) // 2, 6)
        torch.testing.assert_close(
            sos[:, 3], torch.ones(sos.shape[0], dtype=torch.float64)
        )

        _, h_sos = scipy.signal.sosfreqz(sos.numpy(), worN=256)
        _, h_zpk = scipy.signal.freqz_zpk(
            z.numpy(), p.numpy(), k.item(), worN=256
        )
        np.testing.assert_allclose(
            np.abs(h_sos), np.abs(h_zpk), rtol=1e-8, atol=1e-10
        )

    def test_first_order_section_last(self) -> None:
        z, p, k = self._digital(5, "lowpass")

        sos = zpk_to_sos(z, p, k)

        assert sos[-1, 2].item() == 0.0
        assert sos[-1, 5].item() == 0.0
        assert torch.all(sos[:-1, 5] != 0)

    def test_negative_gain(self) -> None:
        z = torch.tensor([0.5 + 0.0j], dtype=torch.complex128)
        p = torch.tensor([0.2 + 0.3j, 0.2 - 0.3j], dtype=torch.complex128)
        k = torch.tensor(-2.0, dtype=torch.float64)

        sos = zpk_to_sos(z, p, k)

        w, h_sos = scipy.signal.sosfreqz(sos.numpy(), worN=64)
        _, h_zpk = scipy.signal.freqz_zpk(
            z.numpy(), p.numpy(), k.item(), worN=64
        )
        # The padded zero at the origin advances the response by one sample
        np.testing.assert_allclose(
            h_sos, np.exp(1j * w) * h_zpk, rtol=1e-10, atol=1e-12
        )

    def test_no_poles(self) -> None:
        empty = torch.empty(0, dtype=torch.complex128)

        sos = zpk_to_sos(empty, empty, torch.tensor(1.0, dtype=torch.float64))

        assert sos.shape == (0, 6)

    def test_more_zeros_than_poles(self) -> None:
        z = torch.tensor([0.1 + 0.0j, 0.2 + 0.0j], dtype=torch.complex128)
        p = torch.tensor([0.5 + 0.0j], dtype=torch.complex128)

        with pytest.raises(ValueError):
            zpk_to_sos(z, p, torch.tensor(1.0, dtype=torch.float64))
