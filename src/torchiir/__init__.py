"""torchiir: Chebyshev Type II recursive filter synthesis for PyTorch."""

from . import (
    chebyshev_type_2,
    filter,
    filter_analysis,
    filter_design,
)

__all__ = [
    "chebyshev_type_2",
    "filter",
    "filter_analysis",
    "filter_design",
]

__version__ = "0.1.0"
