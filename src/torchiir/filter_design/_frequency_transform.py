"""Analog frequency transforms of a normalized lowpass or low-shelf layout."""

from typing import Tuple

import torch
from torch import Tensor

from ._exceptions import InvalidShapeError
from ._shape_parameters import Shape


def frequency_transform(
    zeros: Tensor,
    poles: Tensor,
    gain: Tensor,
    shape: Shape,
    warped: Tensor,
) -> Tuple[Tensor, Tensor, Tensor]:
    """
    Move a normalized prototype to its target band in the s-plane.

    Parameters
    ----------
    zeros, poles : Tensor
        Finite zeros and poles of the prototype, conjugates expanded.
    gain : Tensor
        Prototype gain.
    shape : str
        Response shape tag.
    warped : Tensor
        Target angular frequencies (rad/s). A scalar cutoff for the lowpass,
        highpass and shelf shapes; ``[low, high]`` band edges otherwise.

    Returns
    -------
    zeros, poles, gain : Tuple[Tensor, Tensor, Tensor]
        The transformed analog filter.

    Notes
    -----
    ================================  ==================================
    shape                             substitution
    ================================  ==================================
    lowpass, lowshelf                 s -> s / wc
    highpass, highshelf               s -> wc / s
    bandpass, bandshelf               s -> (s^2 + w0^2) / (B s)
    bandstop                          s -> B s / (s^2 + w0^2)
    ================================  ==================================

    with :math:`w_0 = \\sqrt{w_l w_h}` and :math:`B = w_h - w_l`.
    """
    if shape in ("lowpass", "lowshelf"):
        return _lowpass_to_lowpass(zeros, poles, gain, warped)
    elif shape in ("highpass", "highshelf"):
        return _lowpass_to_highpass(zeros, poles, gain, warped)
    elif shape in ("bandpass", "bandshelf", "bandstop"):
        center = torch.sqrt(warped[0] * warped[1])
        bandwidth = warped[1] - warped[0]
        if shape == "bandstop":
            return _lowpass_to_bandstop(zeros, poles, gain, center, bandwidth)
        return _lowpass_to_bandpass(zeros, poles, gain, center, bandwidth)
    else:
        raise InvalidShapeError(f"Invalid shape: {shape}")


def _lowpass_to_lowpass(
    zeros: Tensor, poles: Tensor, gain: Tensor, cutoff: Tensor
) -> Tuple[Tensor, Tensor, Tensor]:
    degree_diff = poles.numel() - zeros.numel()

    return zeros * cutoff, poles * cutoff, gain * cutoff**degree_diff


def _lowpass_to_highpass(
    zeros: Tensor, poles: Tensor, gain: Tensor, cutoff: Tensor
) -> Tuple[Tensor, Tensor, Tensor]:
    degree_diff = poles.numel() - zeros.numel()

    # Gain from the ORIGINAL zeros and poles, prod(-zeros) = 1 when empty
    gain = gain * torch.real(torch.prod(-zeros) / torch.prod(-poles))

    zeros = torch.cat(
        [cutoff / zeros, _repeat(0.0, degree_diff, like=poles)]
    )

    return zeros, cutoff / poles, gain


def _lowpass_to_bandpass(
    zeros: Tensor,
    poles: Tensor,
    gain: Tensor,
    center: Tensor,
    bandwidth: Tensor,
) -> Tuple[Tensor, Tensor, Tensor]:
    degree_diff = poles.numel() - zeros.numel()

    # Each root r splits into (B r / 2) +- sqrt((B r / 2)^2 - w0^2)
    poles = _split(bandwidth * poles / 2, center)
    zeros = torch.cat(
        [
            _split(bandwidth * zeros / 2, center),
            _repeat(0.0, degree_diff, like=poles),
        ]
    )

    return zeros, poles, gain * bandwidth**degree_diff


def _lowpass_to_bandstop(
    zeros: Tensor,
    poles: Tensor,
    gain: Tensor,
    center: Tensor,
    bandwidth: Tensor,
) -> Tuple[Tensor, Tensor, Tensor]:
    degree_diff = poles.numel() - zeros.numel()

    gain = gain * torch.real(torch.prod(-zeros) / torch.prod(-poles))

    # Each root r splits into (B / 2r) +- sqrt((B / 2r)^2 - w0^2)
    poles = _split(bandwidth / (2 * poles), center)
    notch = (1j * center).to(poles.dtype)
    zeros = torch.cat(
        [
            _split(bandwidth / (2 * zeros), center),
            notch.expand(degree_diff),
            notch.conj().resolve_conj().expand(degree_diff),
        ]
    )

    return zeros, poles, gain


def _split(half: Tensor, center: Tensor) -> Tensor:
    root = torch.sqrt(half * half - center * center)

    return torch.cat([half + root, half - root])


def _repeat(value: float, count: int, like: Tensor) -> Tensor:
    return torch.full((count,), value, dtype=like.dtype, device=like.device)
