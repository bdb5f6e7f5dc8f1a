"""Exceptions for filter design module."""


class FilterDesignError(Exception):
    """Base exception for filter design errors."""

    pass


class InvalidArgumentError(FilterDesignError, ValueError):
    """Raised when a design or setup argument is outside its valid range.

    Every argument check runs before any coefficient or state buffer is
    written, so a filter that raises this keeps its previous configuration.
    """

    pass


class InvalidOrderError(InvalidArgumentError):
    """Raised when filter order is invalid.

    This occurs when:
    - Order is not a positive integer
    """

    pass


class CapacityExceededError(InvalidOrderError):
    """Raised when the requested order exceeds the capacity of a filter."""

    pass


class InvalidAttenuationError(InvalidArgumentError):
    """Raised when the stopband attenuation is not a positive number of dB."""

    pass


class InvalidSamplingFrequencyError(InvalidArgumentError):
    """Raised when the sampling frequency is not positive and finite."""

    pass


class InvalidCutoffError(InvalidArgumentError):
    """Raised when cutoff or center frequency is invalid.

    This occurs when:
    - Frequency is zero, negative or not finite
    """

    pass


class NyquistViolationError(InvalidCutoffError):
    """Raised when frequency reaches or exceeds the Nyquist frequency.

    This occurs when:
    - Cutoff >= sampling_frequency / 2
    - Upper band edge >= sampling_frequency / 2
    """

    pass


class InvalidBandwidthError(InvalidArgumentError):
    """Raised when a band width is invalid.

    This occurs when:
    - Width is zero or negative
    - The lower band edge (center - width / 2) is at or below 0 Hz
    """

    pass


class InvalidGainError(InvalidArgumentError):
    """Raised when a shelf gain is not a finite number of dB."""

    pass


class InvalidShapeError(InvalidArgumentError):
    """Raised when a response shape tag is not recognised."""

    pass


class ParameterRecordError(InvalidArgumentError):
    """Raised when the parameter record does not belong to the shape."""

    pass


class FilterNotConfiguredError(FilterDesignError, RuntimeError):
    """Raised when a filter is used before its first successful setup."""

    pass
