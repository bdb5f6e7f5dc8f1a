"""Bilinear discretization and second-order-section factoring."""

from typing import Tuple, Union

import torch
from torch import Tensor


def bilinear_transform_zpk(
    zeros: Tensor,
    poles: Tensor,
    gain: Tensor,
    sampling_frequency: Union[float, Tensor],
) -> Tuple[Tensor, Tensor, Tensor]:
    """
    Transform an analog filter to a digital filter using bilinear transform.

    The bilinear transform maps the s-plane to the z-plane using:
    s = (2*sampling_frequency) * (z - 1) / (z + 1)

    Parameters
    ----------
    zeros : Tensor
        Zeros of the analog filter.
    poles : Tensor
        Poles of the analog filter.
    gain : Tensor
        System gain of the analog filter.
    sampling_frequency : float or Tensor
        Sampling frequency (Hz).

    Returns
    -------
    zeros_digital, poles_digital, gain_digital : Tuple[Tensor, Tensor, Tensor]
        The digital filter. Poles of a stable analog filter land inside the
        unit circle; each zero at infinity becomes a zero at z = -1.
    """
    if not isinstance(sampling_frequency, Tensor):
        sampling_frequency = torch.as_tensor(
            sampling_frequency, dtype=gain.dtype, device=gain.device
        )

    fs2 = 2 * sampling_frequency

    degree_diff = poles.numel() - zeros.numel()

    poles_digital = (fs2 + poles) / (fs2 - poles)

    zeros_digital = torch.cat(
        [
            (fs2 + zeros) / (fs2 - zeros),
            -torch.ones(degree_diff, dtype=poles.dtype, device=poles.device),
        ]
    )

    # prod over an empty tensor is 1
    gain_digital = gain * torch.real(
        torch.prod(fs2 - zeros) / torch.prod(fs2 - poles)
    )

    return zeros_digital, poles_digital, gain_digital


def zpk_to_sos(zeros: Tensor, poles: Tensor, gain: Tensor) -> Tensor:
    """
    Convert zeros, poles, and gain to second-order sections.

    Parameters
    ----------
    zeros : Tensor
        Zeros of the filter, no more than there are poles.
    poles : Tensor
        Poles of the filter.
    gain : Tensor
        System gain.

    Returns
    -------
    sos : Tensor
        Second-order sections, shape (ceil(n_poles / 2), 6).
        Each row is [b0, b1, b2, a0, a1, a2] with a0 = 1.

    Notes
    -----
    Missing zeros are placed at the origin, which only shifts the output by
    a sample. Conjugate pairs always share a section, real roots are paired
    after sorting, and the one first-order factor of an odd-order filter
    goes to the last section. Complex zeros and poles are matched by angle,
    so each section's zeros sit near the frequency of its poles. The gain
    is spread evenly over the sections.
    """
    n_poles = poles.numel()
    n_zeros = zeros.numel()

    if n_zeros > n_poles:
        raise ValueError(
            f"Cannot factor {n_zeros} zeros over {n_poles} poles"
        )

    if n_poles == 0:
        return torch.zeros((0, 6), dtype=gain.dtype, device=gain.device)

    padding = torch.zeros(
        n_poles - n_zeros, dtype=poles.dtype, device=poles.device
    )
    zeros = torch.cat([zeros.to(poles.dtype), padding])

    numerator = _quadratic_factors(zeros, gain.dtype)
    denominator = _quadratic_factors(poles, gain.dtype)

    n_sections = denominator.shape[0]

    gain_per_section = gain.abs() ** (1.0 / n_sections)
    scale = torch.full(
        (n_sections, 1), 1.0, dtype=gain.dtype, device=gain.device
    )
    scale = scale * gain_per_section
    if gain < 0:
        sign = torch.ones_like(scale)
        sign[0, 0] = -1.0
        scale = scale * sign

    return torch.cat([numerator * scale, denominator], dim=1)


def _quadratic_factors(roots: Tensor, dtype: torch.dtype) -> Tensor:
    """Monic [1, c1, c2] rows whose product has the given roots."""
    real_roots, complex_roots = _separate_real_complex(roots)

    complex_roots = complex_roots[torch.argsort(torch.angle(complex_roots))]
    real_roots, _ = torch.sort(real_roots)

    rows = []

    for root in complex_roots:
        rows.append(
            torch.stack(
                [
                    torch.ones((), dtype=torch.float64, device=roots.device),
                    -2 * root.real,
                    root.real**2 + root.imag**2,
                ]
            )
        )

    for index in range(0, real_roots.numel() - 1, 2):
        a = real_roots[index]
        b = real_roots[index + 1]
        rows.append(torch.stack([torch.ones_like(a), -(a + b), a * b]))

    if real_roots.numel() % 2 == 1:
        a = real_roots[-1]
        rows.append(torch.stack([torch.ones_like(a), -a, torch.zeros_like(a)]))

    return torch.stack(rows).to(dtype)


def _separate_real_complex(x: Tensor) -> Tuple[Tensor, Tensor]:
    """Separate real and complex values, keeping only one of each conjugate pair.

    A value is considered "real" if:
    - Its imaginary part is negligible relative to its real part (1e-6 relative tol)
    - OR if the entire value is very small (< 1e-6), treat as real at origin

    For complex values, we keep only the one with positive imaginary part
    from each conjugate pair.
    """
    x = x.to(torch.complex128)

    rel_tol = 1e-6 * x.real.abs() + 1e-10
    is_negligible = x.abs() < 1e-6
    is_real = (x.imag.abs() < rel_tol) | is_negligible

    real_vals = x[is_real].real

    complex_mask = ~is_real & (x.imag > 0)
    complex_vals = x[complex_mask]

    return real_vals, complex_vals
