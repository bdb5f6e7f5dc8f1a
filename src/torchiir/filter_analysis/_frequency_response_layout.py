"""Frequency response of an analog pole/zero layout."""

import torch
from torch import Tensor

from torchiir.filter_design import PoleZeroLayout


def frequency_response_layout(layout: PoleZeroLayout, w: Tensor) -> Tensor:
    """
    Evaluate an analog layout on the imaginary axis.

    Parameters
    ----------
    layout : PoleZeroLayout
        Analog poles, zeros and gain.
    w : Tensor
        Angular frequencies, any shape.

    Returns
    -------
    response : Tensor
        H(jw), complex128, same shape as w.

    Notes
    -----
    .. math::
        H(j\\omega) = k \\frac{\\prod_i (j\\omega - z_i)}{\\prod_i (j\\omega - p_i)}
    """
    s = 1j * torch.as_tensor(w).to(torch.float64)

    zeros = layout.all_zeros().to(device=s.device, dtype=torch.complex128)
    poles = layout.all_poles().to(device=s.device, dtype=torch.complex128)

    # prod over an empty last dim is 1
    num = torch.prod(s.unsqueeze(-1) - zeros, dim=-1)
    den = torch.prod(s.unsqueeze(-1) - poles, dim=-1)

    gain = layout.gain.to(device=s.device, dtype=torch.complex128)

    return gain * num / den
