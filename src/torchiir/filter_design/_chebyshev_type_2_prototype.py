"""Chebyshev Type II analog lowpass filter prototype."""

import math
from typing import Optional

import torch

from ._pole_zero_layout import PoleZeroLayout
from ._validation import check_attenuation, check_order, complex_dtype_for


def chebyshev_type_2_prototype(
    order: int,
    stopband_attenuation_db: float,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> PoleZeroLayout:
    """
    Design an analog Chebyshev Type II lowpass filter prototype.

    Returns the pole/zero layout of a normalized analog Chebyshev Type II
    (inverse Chebyshev) lowpass filter. The passband is maximally flat and
    the stopband, which starts at 1 rad/s, is equiripple with at least the
    requested attenuation.

    Parameters
    ----------
    order : int
        The order of the filter. Must be positive.
    stopband_attenuation_db : float
        Minimum attenuation in the stopband in decibels. Must be positive.
        Common values: 20 dB, 40 dB, 60 dB.
    dtype : torch.dtype, optional
        Output dtype. Defaults to torch.get_default_dtype().
    device : torch.device, optional
        Output device. Defaults to CPU.

    Returns
    -------
    layout : PoleZeroLayout
        Conjugate pole and zero pairs, the real pole of an odd order filter,
        and the gain normalizing the response at s = 0 to 1.

    Raises
    ------
    InvalidOrderError
        If order < 1.
    InvalidAttenuationError
        If stopband_attenuation_db <= 0.

    Notes
    -----
    With

    .. math::
        \\epsilon = 1 / \\sqrt{10^{R_s/10} - 1}, \\quad
        \\mu = \\operatorname{asinh}(1/\\epsilon) / n, \\quad
        \\theta_k = \\pi (2k - 1) / (2n)

    the poles are the reciprocals of the Chebyshev Type I poles,

    .. math::
        p_k = 1 / (-\\sinh(\\mu) \\sin(\\theta_k) + j \\cosh(\\mu) \\cos(\\theta_k))

    and the zeros lie on the imaginary axis at :math:`z_k = j / \\cos(\\theta_k)`.

    For odd order the middle angle is :math:`\\pi/2`; its pole is real and its
    zero lies at infinity, so there are n - 1 finite zeros.

    Examples
    --------
    >>> import torch
    >>> from torchiir.filter_design import chebyshev_type_2_prototype
    >>> layout = chebyshev_type_2_prototype(4, stopband_attenuation_db=40.0)
    >>> layout.num_poles(), layout.num_zeros()
    (4, 4)
    """
    order = check_order(order)
    stopband_attenuation_db = check_attenuation(stopband_attenuation_db)

    dtype, complex_dtype = complex_dtype_for(dtype, order)
    if device is None:
        device = torch.device("cpu")

    # eps = 1 / sqrt(10^(Rs/10) - 1)
    inverse_eps = math.sqrt(
        math.expm1(stopband_attenuation_db * math.log(10) / 10)
    )
    mu = math.asinh(inverse_eps) / order

    # Angles below pi/2 only, their mirrors are the conjugates
    k = torch.arange(1, order // 2 + 1, dtype=torch.float64, device=device)
    theta = math.pi * (2 * k - 1) / (2 * order)

    type_1_poles = torch.complex(
        -math.sinh(mu) * torch.sin(theta),
        math.cosh(mu) * torch.cos(theta),
    )
    pole_pairs = 1.0 / type_1_poles

    zero_pairs = torch.complex(torch.zeros_like(theta), 1.0 / torch.cos(theta))

    real_pole = None
    if order % 2 == 1:
        # theta = pi/2: real pole, zero at infinity
        real_pole = torch.tensor(
            -1.0 / math.sinh(mu), dtype=torch.complex128, device=device
        )

    layout = PoleZeroLayout.from_conjugate_pairs(
        pole_pairs,
        zero_pairs,
        torch.tensor(1.0, dtype=torch.float64, device=device),
        real_pole=real_pole,
    )

    poles = layout.all_poles()
    zeros = layout.all_zeros()

    num = torch.prod(-poles)
    den = torch.prod(-zeros)
    gain = (num / den).real

    return PoleZeroLayout.from_conjugate_pairs(
        layout.pole_pairs.to(complex_dtype),
        layout.zero_pairs.to(complex_dtype),
        gain.to(dtype),
        real_pole=real_pole,
    )
