"""Chebyshev Type II filters for each response shape."""

from ._filters import (
    BandPass,
    BandShelf,
    BandStop,
    HighPass,
    HighShelf,
    LowPass,
    LowShelf,
)

__all__ = [
    "BandPass",
    "BandShelf",
    "BandStop",
    "HighPass",
    "HighShelf",
    "LowPass",
    "LowShelf",
]
