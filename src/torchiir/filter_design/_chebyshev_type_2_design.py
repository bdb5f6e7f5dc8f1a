"""Chebyshev Type II digital filter design for all response shapes."""

import math
from typing import Optional, Sequence

import torch
from torch import Tensor

from ._chebyshev_type_2_prototype import chebyshev_type_2_prototype
from ._chebyshev_type_2_shelf_prototype import (
    chebyshev_type_2_shelf_prototype,
)
from ._discretize import bilinear_transform_zpk, zpk_to_sos
from ._frequency_transform import frequency_transform
from ._pole_zero_layout import PoleZeroLayout
from ._shape_parameters import (
    SHELF_SHAPES,
    Shape,
    ShapeParameters,
    validate_shape_parameters,
)
from ._validation import check_attenuation, check_order, complex_dtype_for


def transform_and_discretize(
    layout: PoleZeroLayout,
    shape: Shape,
    frequencies: Sequence[float],
) -> Tensor:
    """
    Turn a normalized analog prototype into a digital SOS cascade.

    Parameters
    ----------
    layout : PoleZeroLayout
        Lowpass or low-shelf prototype with unit cutoff.
    shape : str
        Response shape tag selecting the s-plane transform.
    frequencies : sequence of float
        ``(cutoff,)`` or ``(low_edge, high_edge)`` as fractions of the
        sampling frequency, inside (0, 0.5).

    Returns
    -------
    sos : Tensor
        float64 second-order sections, shape (n_sections, 6).

    Notes
    -----
    The target frequencies are prewarped, :math:`\\Omega = 4 \\tan(\\pi f)`,
    so that the bilinear transform with a sampling frequency of 2 puts them
    exactly at :math:`f` after discretization.
    """
    device = layout.gain.device

    normalized = torch.tensor(
        list(frequencies), dtype=torch.float64, device=device
    )
    warped = 4.0 * torch.tan(math.pi * normalized)
    if warped.numel() == 1:
        warped = warped[0]

    z_analog, p_analog, k_analog = frequency_transform(
        layout.all_zeros().to(torch.complex128),
        layout.all_poles().to(torch.complex128),
        layout.gain.to(torch.float64),
        shape,
        warped,
    )

    z_digital, p_digital, k_digital = bilinear_transform_zpk(
        z_analog, p_analog, k_analog, sampling_frequency=2.0
    )

    return zpk_to_sos(z_digital, p_digital, k_digital)


def chebyshev_type_2_design(
    shape: Shape,
    order: int,
    sampling_frequency: float,
    parameters: ShapeParameters,
    stopband_attenuation_db: float,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """Design a digital Chebyshev Type II filter of any response shape.

    Parameters
    ----------
    shape : {"lowpass", "highpass", "bandpass", "bandstop", "lowshelf", \
"highshelf", "bandshelf"}
        Response shape.
    order : int
        Prototype order. Band shapes produce twice as many poles.
    sampling_frequency : float
        Sampling frequency, in the unit of the frequency parameters.
    parameters : ShapeParameters
        ``CutoffParameters`` (lowpass, highpass), ``BandParameters``
        (bandpass, bandstop), ``ShelfParameters`` (lowshelf, highshelf) or
        ``BandShelfParameters`` (bandshelf).
    stopband_attenuation_db : float
        Minimum stopband attenuation in decibels. Must be positive.
    dtype : torch.dtype, optional
        Output dtype. Defaults to torch.get_default_dtype().
    device : torch.device, optional
        Output device. Defaults to CPU.

    Returns
    -------
    sos : Tensor
        Second-order sections, shape (n_sections, 6). Lowpass, highpass and
        the two shelves have ceil(order / 2) sections, band shapes have
        ``order`` sections.

    Raises
    ------
    InvalidArgumentError
        If any argument is out of range. Nothing is computed in that case.

    Notes
    -----
    Plain shapes start from :func:`chebyshev_type_2_prototype`, shelves from
    :func:`chebyshev_type_2_shelf_prototype`. For lowpass and highpass the
    cutoff is the stopband edge, where the attenuation first reaches
    ``stopband_attenuation_db``.

    Examples
    --------
    >>> from torchiir.filter_design import (
    ...     CutoffParameters,
    ...     chebyshev_type_2_design,
    ... )
    >>> sos = chebyshev_type_2_design(
    ...     "lowpass", 4, 48000.0, CutoffParameters(1000.0), 40.0
    ... )
    >>> sos.shape
    torch.Size([2, 6])
    """
    order = check_order(order)
    stopband_attenuation_db = check_attenuation(stopband_attenuation_db)
    frequencies = validate_shape_parameters(
        shape, sampling_frequency, parameters
    )
    dtype, _ = complex_dtype_for(dtype, order)

    if shape in SHELF_SHAPES:
        layout = chebyshev_type_2_shelf_prototype(
            order,
            parameters.gain_db,
            stopband_attenuation_db,
            dtype=torch.float64,
            device=device,
        )
    else:
        layout = chebyshev_type_2_prototype(
            order,
            stopband_attenuation_db,
            dtype=torch.float64,
            device=device,
        )

    sos = transform_and_discretize(layout, shape, frequencies)

    return sos.to(dtype=dtype)
