"""Frequency response of analog layouts and digital cascades."""

from ._frequency_response_layout import frequency_response_layout
from ._frequency_response_sos import frequency_response_sos

__all__ = [
    "frequency_response_layout",
    "frequency_response_sos",
]
