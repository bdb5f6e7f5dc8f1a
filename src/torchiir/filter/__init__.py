"""Running realizations of second-order-section cascades."""

from ._cascade_filter import CascadeFilter
from ._sosfilt import Topology, sosfilt, sosfilt_state_size

__all__ = [
    "CascadeFilter",
    "Topology",
    "sosfilt",
    "sosfilt_state_size",
]
