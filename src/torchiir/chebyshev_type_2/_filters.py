"""Chebyshev Type II filters with a fixed maximum order."""

from typing import Optional

from torchiir.filter import CascadeFilter
from torchiir.filter_design import (
    BandParameters,
    BandShelfParameters,
    CutoffParameters,
    ShelfParameters,
)


class LowPass(CascadeFilter):
    """Chebyshev Type II lowpass filter.

    Flat passband below the cutoff, equiripple stopband above it.

    Parameters
    ----------
    max_order : int
        Largest order :meth:`setup` accepts. Reserves ``ceil(max_order / 2)``
        second-order sections.
    topology : {"direct_form_2_transposed", "direct_form_1"}
        Recursion used when filtering.
    dtype : torch.dtype, optional
        Dtype of the coefficients and state.
    device : torch.device, optional
        Device of the coefficients and state.

    Examples
    --------
    >>> import torch
    >>> from torchiir.chebyshev_type_2 import LowPass
    >>> f = LowPass(4, dtype=torch.float64)
    >>> f.setup(48000.0, 1000.0, 40.0)
    >>> y = f(torch.randn(256, dtype=torch.float64))
    >>> y.shape
    torch.Size([256])
    """

    shape = "lowpass"

    def setup(
        self,
        sampling_frequency: float,
        cutoff: float,
        stopband_attenuation_db: float,
        *,
        order: Optional[int] = None,
    ) -> None:
        """
        Design the coefficients and clear the running state.

        Parameters
        ----------
        sampling_frequency : float
            Sampling frequency.
        cutoff : float
            Stopband edge, in the unit of ``sampling_frequency``. Must lie
            in (0, sampling_frequency / 2).
        stopband_attenuation_db : float
            Minimum stopband attenuation in decibels.
        order : int, optional
            Filter order, at most ``max_order``. Defaults to ``max_order``.

        Raises
        ------
        CapacityExceededError
            If ``order`` is larger than ``max_order``.
        InvalidArgumentError
            If any other argument is out of range.
        """
        self._setup(
            order,
            sampling_frequency,
            CutoffParameters(cutoff),
            stopband_attenuation_db,
        )


class HighPass(CascadeFilter):
    """Chebyshev Type II highpass filter.

    Mirror image of :class:`LowPass`: the stopband lies below the cutoff.
    Parameters are the same as for :class:`LowPass`.
    """

    shape = "highpass"

    def setup(
        self,
        sampling_frequency: float,
        cutoff: float,
        stopband_attenuation_db: float,
        *,
        order: Optional[int] = None,
    ) -> None:
        """Design the coefficients and clear the running state.

        See :meth:`LowPass.setup`.
        """
        self._setup(
            order,
            sampling_frequency,
            CutoffParameters(cutoff),
            stopband_attenuation_db,
        )


class BandPass(CascadeFilter):
    """Chebyshev Type II bandpass filter.

    The band transform doubles the order, so ``max_order`` second-order
    sections are reserved.
    """

    shape = "bandpass"

    def setup(
        self,
        sampling_frequency: float,
        center: float,
        width: float,
        stopband_attenuation_db: float,
        *,
        order: Optional[int] = None,
    ) -> None:
        """
        Design the coefficients and clear the running state.

        Parameters
        ----------
        sampling_frequency : float
            Sampling frequency.
        center : float
            Center of the band, in the unit of ``sampling_frequency``.
        width : float
            Width of the band. Both edges ``center -+ width / 2`` must lie
            in (0, sampling_frequency / 2).
        stopband_attenuation_db : float
            Minimum stopband attenuation in decibels.
        order : int, optional
            Prototype order, at most ``max_order``. Defaults to
            ``max_order``.
        """
        self._setup(
            order,
            sampling_frequency,
            BandParameters(center, width),
            stopband_attenuation_db,
        )


class BandStop(CascadeFilter):
    """Chebyshev Type II bandstop (notch) filter.

    Rejects the band ``center -+ width / 2`` by at least the stopband
    attenuation. Reserves ``max_order`` second-order sections.
    """

    shape = "bandstop"

    def setup(
        self,
        sampling_frequency: float,
        center: float,
        width: float,
        stopband_attenuation_db: float,
        *,
        order: Optional[int] = None,
    ) -> None:
        """Design the coefficients and clear the running state.

        See :meth:`BandPass.setup`.
        """
        self._setup(
            order,
            sampling_frequency,
            BandParameters(center, width),
            stopband_attenuation_db,
        )


class LowShelf(CascadeFilter):
    """Chebyshev Type II low-shelf filter.

    Applies ``gain_db`` below the cutoff and 0 dB above it. The
    stopband attenuation bounds how far the response above the cutoff
    may ripple away from 0 dB, relative to ``gain_db``.
    """

    shape = "lowshelf"

    def setup(
        self,
        sampling_frequency: float,
        cutoff: float,
        gain_db: float,
        stopband_attenuation_db: float,
        *,
        order: Optional[int] = None,
    ) -> None:
        """
        Design the coefficients and clear the running state.

        Parameters
        ----------
        sampling_frequency : float
            Sampling frequency.
        cutoff : float
            Shelf corner, in (0, sampling_frequency / 2).
        gain_db : float
            Shelf gain in decibels, any finite value.
        stopband_attenuation_db : float
            Ripple attenuation in decibels.
        order : int, optional
            Filter order, at most ``max_order``. Defaults to ``max_order``.
        """
        self._setup(
            order,
            sampling_frequency,
            ShelfParameters(cutoff, gain_db),
            stopband_attenuation_db,
        )


class HighShelf(CascadeFilter):
    """Chebyshev Type II high-shelf filter.

    Applies ``gain_db`` above the cutoff and 0 dB below it.
    """

    shape = "highshelf"

    def setup(
        self,
        sampling_frequency: float,
        cutoff: float,
        gain_db: float,
        stopband_attenuation_db: float,
        *,
        order: Optional[int] = None,
    ) -> None:
        """Design the coefficients and clear the running state.

        See :meth:`LowShelf.setup`.
        """
        self._setup(
            order,
            sampling_frequency,
            ShelfParameters(cutoff, gain_db),
            stopband_attenuation_db,
        )


class BandShelf(CascadeFilter):
    """Chebyshev Type II band-shelf filter.

    Applies ``gain_db`` inside the band ``center -+ width / 2`` and 0 dB
    outside it. Reserves ``max_order`` second-order sections.
    """

    shape = "bandshelf"

    def setup(
        self,
        sampling_frequency: float,
        center: float,
        width: float,
        gain_db: float,
        stopband_attenuation_db: float,
        *,
        order: Optional[int] = None,
    ) -> None:
        """
        Design the coefficients and clear the running state.

        Parameters
        ----------
        sampling_frequency : float
            Sampling frequency.
        center : float
            Center of the shelf band.
        width : float
            Width of the shelf band. Both edges must lie in
            (0, sampling_frequency / 2).
        gain_db : float
            Gain inside the band in decibels.
        stopband_attenuation_db : float
            Ripple attenuation in decibels.
        order : int, optional
            Prototype order, at most ``max_order``. Defaults to
            ``max_order``.
        """
        self._setup(
            order,
            sampling_frequency,
            BandShelfParameters(center, width, gain_db),
            stopband_attenuation_db,
        )
