"""Chebyshev Type II prototypes, transforms and digital design."""

from ._chebyshev_type_2_design import (
    chebyshev_type_2_design,
    transform_and_discretize,
)
from ._chebyshev_type_2_prototype import chebyshev_type_2_prototype
from ._chebyshev_type_2_shelf_prototype import (
    chebyshev_type_2_shelf_prototype,
)
from ._discretize import bilinear_transform_zpk, zpk_to_sos
from ._exceptions import (
    CapacityExceededError,
    FilterDesignError,
    FilterNotConfiguredError,
    InvalidArgumentError,
    InvalidAttenuationError,
    InvalidBandwidthError,
    InvalidCutoffError,
    InvalidGainError,
    InvalidOrderError,
    InvalidSamplingFrequencyError,
    InvalidShapeError,
    NyquistViolationError,
    ParameterRecordError,
)
from ._frequency_transform import frequency_transform
from ._pole_zero_layout import PoleZeroLayout
from ._shape_parameters import (
    SHAPES,
    SHELF_SHAPES,
    BandParameters,
    BandShelfParameters,
    CutoffParameters,
    Shape,
    ShapeParameters,
    ShelfParameters,
    parameter_record,
    validate_shape_parameters,
)

__all__ = [
    # Prototypes
    "PoleZeroLayout",
    "chebyshev_type_2_prototype",
    "chebyshev_type_2_shelf_prototype",
    # Design
    "chebyshev_type_2_design",
    "transform_and_discretize",
    # Transforms
    "bilinear_transform_zpk",
    "frequency_transform",
    "zpk_to_sos",
    # Shapes
    "SHAPES",
    "SHELF_SHAPES",
    "BandParameters",
    "BandShelfParameters",
    "CutoffParameters",
    "Shape",
    "ShapeParameters",
    "ShelfParameters",
    "parameter_record",
    "validate_shape_parameters",
    # Exceptions
    "CapacityExceededError",
    "FilterDesignError",
    "FilterNotConfiguredError",
    "InvalidArgumentError",
    "InvalidAttenuationError",
    "InvalidBandwidthError",
    "InvalidCutoffError",
    "InvalidGainError",
    "InvalidOrderError",
    "InvalidSamplingFrequencyError",
    "InvalidShapeError",
    "NyquistViolationError",
    "ParameterRecordError",
]
