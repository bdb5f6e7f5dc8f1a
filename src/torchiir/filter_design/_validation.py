"""Argument checks shared by the prototypes and the shape mappers."""

import math
import operator
import warnings
from typing import Optional

import torch

from ._exceptions import (
    InvalidAttenuationError,
    InvalidGainError,
    InvalidOrderError,
)

# Above this order single precision coefficients start to lose the stopband
_FLOAT32_ORDER_LIMIT = 8


def check_order(order: int) -> int:
    if isinstance(order, bool):
        raise InvalidOrderError(
            f"Filter order must be an integer, got {order!r}"
        )

    try:
        order = operator.index(order)
    except TypeError:
        raise InvalidOrderError(
            f"Filter order must be an integer, got {order!r}"
        ) from None

    if order < 1:
        raise InvalidOrderError(f"Filter order must be positive, got {order}")

    return order


def check_attenuation(stopband_attenuation_db: float) -> float:
    if not (
        math.isfinite(stopband_attenuation_db) and stopband_attenuation_db > 0
    ):
        raise InvalidAttenuationError(
            "Stopband attenuation must be positive, "
            f"got {stopband_attenuation_db}"
        )

    return float(stopband_attenuation_db)


def check_gain(gain_db: float) -> float:
    if not math.isfinite(gain_db):
        raise InvalidGainError(f"Shelf gain must be finite, got {gain_db}")

    return float(gain_db)


def complex_dtype_for(
    dtype: Optional[torch.dtype], order: int
) -> tuple[torch.dtype, torch.dtype]:
    """Resolve the real and complex output dtypes of a design."""
    if dtype is None:
        dtype = torch.get_default_dtype()

    if dtype == torch.float32:
        complex_dtype = torch.complex64
    elif dtype == torch.float64:
        complex_dtype = torch.complex128
    else:
        raise ValueError(f"Unsupported dtype: {dtype}")

    if dtype == torch.float32 and order > _FLOAT32_ORDER_LIMIT:
        warnings.warn(
            f"Designing an order {order} filter in float32 may not reach the "
            f"requested stopband attenuation. Consider using float64.",
            RuntimeWarning,
            stacklevel=3,
        )

    return dtype, complex_dtype
