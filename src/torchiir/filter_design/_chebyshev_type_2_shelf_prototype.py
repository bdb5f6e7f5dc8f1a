"""Chebyshev Type II analog low-shelf filter prototype."""

import math
from typing import Optional

import torch
from torch import Tensor

from ._pole_zero_layout import PoleZeroLayout
from ._validation import (
    check_attenuation,
    check_gain,
    check_order,
    complex_dtype_for,
)


def chebyshev_type_2_shelf_prototype(
    order: int,
    gain_db: float,
    stopband_attenuation_db: float,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> PoleZeroLayout:
    """
    Design an analog Chebyshev Type II low-shelf filter prototype.

    The response is flat at ``gain_db`` around s = 0 and settles to 0 dB
    above the normalized corner frequency of 1 rad/s, where it ripples with
    a depth controlled by the stopband attenuation.

    Parameters
    ----------
    order : int
        The order of the filter. Must be positive.
    gain_db : float
        Gain at s = 0 in decibels. Negative values give a cut. 0 dB gives a
        flat unity response.
    stopband_attenuation_db : float
        How far the stopband ripple is pushed down relative to the shelf, in
        decibels. Must be positive.
    dtype : torch.dtype, optional
        Output dtype. Defaults to torch.get_default_dtype().
    device : torch.device, optional
        Output device. Defaults to CPU.

    Returns
    -------
    layout : PoleZeroLayout
        Pole and zero layout with n poles, n finite zeros and unit gain.

    Raises
    ------
    InvalidOrderError
        If order < 1.
    InvalidAttenuationError
        If stopband_attenuation_db <= 0.
    InvalidGainError
        If gain_db is not finite.

    Notes
    -----
    Poles and zeros sit on the angles of the lowpass prototype,
    :math:`\\theta_k = \\pi (2k - 1) / (2n)`, as reciprocals of Chebyshev
    Type I points with two different stretch factors u (poles) and v (zeros):

    .. math::
        p_k = 1 / q_k(u), \\quad z_k = 1 / q_k(v), \\quad
        q_k(a) = -\\sinh(a) \\sin(\\theta_k) + j \\cosh(a) \\cos(\\theta_k)

    The squared magnitude is then

    .. math::
        |H(j\\omega)|^2 = \\frac{P(u)^2}{P(v)^2}
            \\frac{\\sinh^2(nv) + T_n^2(1/\\omega)}{\\sinh^2(nu) + T_n^2(1/\\omega)}

    with :math:`P(a) = \\sinh(na)` for odd and :math:`\\cosh(na)` for even n,
    so :math:`|H(0)| = P(u)/P(v) = G` and :math:`|H(j\\infty)| = 1` exactly.
    For :math:`\\omega > 1` the response ripples between 0 dB and
    :math:`\\pm |g| \\cdot 10^{-R_s/20}` dB, which fixes
    :math:`\\tanh(nu) = G^{10^{-R_s/20}} \\tanh(nv)`.

    Examples
    --------
    >>> import torch
    >>> from torchiir.filter_design import chebyshev_type_2_shelf_prototype
    >>> layout = chebyshev_type_2_shelf_prototype(3, 6.0, 40.0)
    >>> layout.num_poles(), layout.num_zeros()
    (3, 3)
    """
    order = check_order(order)
    gain_db = check_gain(gain_db)
    stopband_attenuation_db = check_attenuation(stopband_attenuation_db)

    dtype, complex_dtype = complex_dtype_for(dtype, order)
    if device is None:
        device = torch.device("cpu")

    if gain_db == 0:
        # Flat: poles and zeros coincide on the lowpass pole positions
        inverse_eps = math.sqrt(
            math.expm1(stopband_attenuation_db * math.log(10) / 10)
        )
        u = v = math.asinh(inverse_eps) / order
    else:
        u, v = _stretch_factors(order, gain_db, stopband_attenuation_db)

    k = torch.arange(1, order // 2 + 1, dtype=torch.float64, device=device)
    theta = math.pi * (2 * k - 1) / (2 * order)

    pole_pairs = 1.0 / _type_1_points(u, theta)
    zero_pairs = 1.0 / _type_1_points(v, theta)

    real_pole = None
    real_zero = None
    if order % 2 == 1:
        real_pole = torch.tensor(
            -1.0 / math.sinh(u), dtype=torch.complex128, device=device
        )
        real_zero = torch.tensor(
            -1.0 / math.sinh(v), dtype=torch.complex128, device=device
        )

    return PoleZeroLayout.from_conjugate_pairs(
        pole_pairs.to(complex_dtype),
        zero_pairs.to(complex_dtype),
        torch.tensor(1.0, dtype=dtype, device=device),
        real_pole=real_pole,
        real_zero=real_zero,
    )


def _type_1_points(a: float, theta: Tensor) -> Tensor:
    return torch.complex(
        -math.sinh(a) * torch.sin(theta),
        math.cosh(a) * torch.cos(theta),
    )


def _stretch_factors(
    order: int, gain_db: float, stopband_attenuation_db: float
) -> tuple[float, float]:
    """Solve for the pole (u) and zero (v) stretch factors.

    With x = n*u, y = n*v, G = e^L and d = 10^(-Rs/20):

    odd:  sinh(x) = G sinh(y),  tanh(x) = G^d tanh(y)
    even: cosh(x) = G cosh(y),  tanh(x) = G^d tanh(y)
    """
    log_gain = gain_db * math.log(10) / 20
    delta = 10 ** (-stopband_attenuation_db / 20)

    if order % 2 == 1:
        sinh_y_sq = math.expm1(2 * (1 - delta) * log_gain) / (
            math.exp(2 * log_gain) * -math.expm1(-2 * delta * log_gain)
        )
        sinh_y = math.sqrt(sinh_y_sq)
        sinh_x = math.exp(log_gain) * sinh_y
    else:
        sinh_y_sq = (
            math.exp(-2 * (1 + delta) * log_gain)
            * math.expm1(2 * log_gain)
            / -math.expm1(-2 * delta * log_gain)
        )
        sinh_y = math.sqrt(sinh_y_sq)
        sinh_x = math.exp((1 + delta) * log_gain) * sinh_y

    return math.asinh(sinh_x) / order, math.asinh(sinh_y) / order
