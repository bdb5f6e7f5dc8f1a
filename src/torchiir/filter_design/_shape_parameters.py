"""Response shapes and their parameter records."""

import math
import warnings
from typing import Literal, NamedTuple, Tuple, Union

from ._exceptions import (
    InvalidBandwidthError,
    InvalidCutoffError,
    InvalidSamplingFrequencyError,
    InvalidShapeError,
    NyquistViolationError,
    ParameterRecordError,
)
from ._validation import check_gain

Shape = Literal[
    "lowpass",
    "highpass",
    "bandpass",
    "bandstop",
    "lowshelf",
    "highshelf",
    "bandshelf",
]

SHAPES: Tuple[str, ...] = (
    "lowpass",
    "highpass",
    "bandpass",
    "bandstop",
    "lowshelf",
    "highshelf",
    "bandshelf",
)

SHELF_SHAPES: Tuple[str, ...] = ("lowshelf", "highshelf", "bandshelf")

# Fraction of the sample rate under Nyquist where prewarping gets steep
_NEAR_NYQUIST = 1e-3


class CutoffParameters(NamedTuple):
    """Lowpass and highpass parameters.

    Parameters
    ----------
    cutoff : float
        Stopband edge frequency, in units of the sampling frequency.
    """

    cutoff: float


class BandParameters(NamedTuple):
    """Bandpass and bandstop parameters.

    Parameters
    ----------
    center : float
        Center frequency of the band.
    width : float
        Width of the band; the edges are ``center -+ width / 2``.
    """

    center: float
    width: float


class ShelfParameters(NamedTuple):
    """Low-shelf and high-shelf parameters.

    Parameters
    ----------
    cutoff : float
        Corner frequency of the shelf.
    gain_db : float
        Shelf gain in decibels. The other side of the corner is at 0 dB.
    """

    cutoff: float
    gain_db: float


class BandShelfParameters(NamedTuple):
    """Band-shelf parameters.

    Parameters
    ----------
    center : float
        Center frequency of the shelf band.
    width : float
        Width of the shelf band.
    gain_db : float
        Gain inside the band in decibels. Outside the band is at 0 dB.
    """

    center: float
    width: float
    gain_db: float


ShapeParameters = Union[
    CutoffParameters,
    BandParameters,
    ShelfParameters,
    BandShelfParameters,
]

_RECORDS = {
    "lowpass": CutoffParameters,
    "highpass": CutoffParameters,
    "bandpass": BandParameters,
    "bandstop": BandParameters,
    "lowshelf": ShelfParameters,
    "highshelf": ShelfParameters,
    "bandshelf": BandShelfParameters,
}


def parameter_record(shape: Shape) -> type:
    """Return the parameter record type of a shape."""
    if shape not in _RECORDS:
        raise InvalidShapeError(
            f"Invalid shape: {shape!r}, expected one of {SHAPES}"
        )

    return _RECORDS[shape]


def validate_shape_parameters(
    shape: Shape,
    sampling_frequency: float,
    parameters: ShapeParameters,
) -> Tuple[float, ...]:
    """
    Check shape parameters and express their frequencies per sample.

    Parameters
    ----------
    shape : str
        Response shape tag.
    sampling_frequency : float
        Sampling frequency, in the unit of the frequency parameters.
    parameters : ShapeParameters
        The record matching ``shape``.

    Returns
    -------
    frequencies : tuple of float
        ``(cutoff,)`` or ``(low_edge, high_edge)`` as fractions of the
        sampling frequency, all strictly inside (0, 0.5).

    Raises
    ------
    InvalidShapeError
        If the shape tag is unknown.
    ParameterRecordError
        If the record type does not belong to the shape.
    InvalidSamplingFrequencyError
        If the sampling frequency is not positive and finite.
    InvalidCutoffError
        If a cutoff or center frequency is not positive.
    NyquistViolationError
        If a cutoff or upper band edge reaches Nyquist.
    InvalidBandwidthError
        If the width is not positive or the lower band edge is not above 0.
    InvalidGainError
        If a shelf gain is not finite.
    """
    record = parameter_record(shape)
    if not isinstance(parameters, record):
        raise ParameterRecordError(
            f"Shape {shape!r} expects {record.__name__}, "
            f"got {type(parameters).__name__}"
        )

    if not (math.isfinite(sampling_frequency) and sampling_frequency > 0):
        raise InvalidSamplingFrequencyError(
            f"Sampling frequency must be positive, got {sampling_frequency}"
        )

    nyquist = sampling_frequency / 2.0

    if isinstance(parameters, (ShelfParameters, BandShelfParameters)):
        check_gain(parameters.gain_db)

    if isinstance(parameters, (CutoffParameters, ShelfParameters)):
        cutoff = parameters.cutoff
        if not (math.isfinite(cutoff) and cutoff > 0):
            raise InvalidCutoffError(
                f"Cutoff frequency must be positive, got {cutoff}"
            )
        if cutoff >= nyquist:
            raise NyquistViolationError(
                f"Cutoff frequency must be below Nyquist ({nyquist}), "
                f"got {cutoff}"
            )
        frequencies = (cutoff / sampling_frequency,)
    else:
        center = parameters.center
        width = parameters.width
        if not (math.isfinite(center) and center > 0):
            raise InvalidCutoffError(
                f"Center frequency must be positive, got {center}"
            )
        if not (math.isfinite(width) and width > 0):
            raise InvalidBandwidthError(
                f"Band width must be positive, got {width}"
            )
        low = center - width / 2
        high = center + width / 2
        if low <= 0:
            raise InvalidBandwidthError(
                f"Band [{low}, {high}] must start above 0, "
                f"got center={center}, width={width}"
            )
        if high >= nyquist:
            raise NyquistViolationError(
                f"Band [{low}, {high}] must end below Nyquist ({nyquist}), "
                f"got center={center}, width={width}"
            )
        frequencies = (low / sampling_frequency, high / sampling_frequency)

    if 0.5 - frequencies[-1] < _NEAR_NYQUIST:
        warnings.warn(
            f"Frequency {frequencies[-1] * sampling_frequency} is very close "
            f"to Nyquist ({nyquist}); the bilinear prewarp is steep there.",
            RuntimeWarning,
            stacklevel=3,
        )

    return frequencies
