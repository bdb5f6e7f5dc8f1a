"""Frequency response of a second-order-section cascade."""

import math
from typing import Optional, Tuple, Union

import torch
from torch import Tensor


def frequency_response_sos(
    sos: Tensor,
    frequencies: Union[Tensor, int] = 512,
    sampling_frequency: Optional[float] = None,
) -> Tuple[Tensor, Tensor]:
    """
    Compute the frequency response of a digital filter in SOS form.

    Parameters
    ----------
    sos : Tensor
        Second-order sections, shape (n_sections, 6).
        Each row is [b0, b1, b2, a0, a1, a2].
    frequencies : Tensor or int, default 512
        If int: number of points evenly spaced from 0 up to (but not
        including) Nyquist, as in scipy.signal.sosfreqz.
        If Tensor: specific frequency points at which to evaluate.
    sampling_frequency : float, optional
        If None: frequencies are normalized, 1 = Nyquist.
        If provided: frequencies are in the unit of the sampling frequency.

    Returns
    -------
    frequencies : Tensor
        Frequency points, float64.
    response : Tensor
        Complex frequency response H(e^{jw}), complex128.

    Examples
    --------
    >>> from torchiir.filter_design import (
    ...     CutoffParameters,
    ...     chebyshev_type_2_design,
    ... )
    >>> from torchiir.filter_analysis import frequency_response_sos
    >>> sos = chebyshev_type_2_design(
    ...     "lowpass", 4, 48000.0, CutoffParameters(1000.0), 40.0
    ... )
    >>> freqs, response = frequency_response_sos(sos, 1024, 48000.0)
    >>> magnitude_db = 20 * torch.log10(torch.abs(response))
    """
    device = sos.device

    if isinstance(frequencies, int):
        if sampling_frequency is None:
            max_freq = 1.0
        else:
            max_freq = sampling_frequency / 2

        freq_points = torch.linspace(
            0, max_freq, frequencies + 1, dtype=torch.float64, device=device
        )[:-1]
    else:
        freq_points = torch.as_tensor(frequencies).to(
            dtype=torch.float64, device=device
        )

    if sampling_frequency is not None:
        w = 2 * math.pi * freq_points / sampling_frequency
    else:
        w = math.pi * freq_points

    z_inv = torch.exp(-1j * w)

    response = torch.ones_like(z_inv)

    for section in sos.to(torch.float64):
        b0, b1, b2, a0, a1, a2 = section

        num = b0 + b1 * z_inv + b2 * z_inv**2
        den = a0 + a1 * z_inv + a2 * z_inv**2

        response = response * (num / den)

    return freq_points, response
