"""Fixed-capacity running cascade of second-order sections."""

from __future__ import annotations

from typing import Optional

import torch
import torch.nn as nn
from torch import Tensor

from torchiir.filter_design import (
    CapacityExceededError,
    FilterNotConfiguredError,
    Shape,
    ShapeParameters,
    chebyshev_type_2_design,
)
from torchiir.filter_design._validation import check_order

from ._sosfilt import Topology, sosfilt, sosfilt_state_size

_BAND_SHAPES = ("bandpass", "bandstop", "bandshelf")

_IDENTITY_SECTION = (1.0, 0.0, 0.0, 1.0, 0.0, 0.0)


class CascadeFilter(nn.Module):
    """Running Chebyshev Type II filter with storage reserved up front.

    The coefficient and state buffers are sized for ``max_order`` when the
    module is created and are only ever written in place afterwards, so a
    configured filter never allocates storage on reconfiguration.

    Subclasses fix the response ``shape`` and expose a ``setup`` method with
    the parameters of that shape.

    Parameters
    ----------
    max_order : int
        Largest prototype order the filter can be set up with. Band shapes
        reserve ``max_order`` sections, the others ``ceil(max_order / 2)``.
    topology : {"direct_form_2_transposed", "direct_form_1"}
        Recursion used by :meth:`forward`.
    dtype : torch.dtype, optional
        Dtype of the coefficient and state buffers. Defaults to
        torch.get_default_dtype().
    device : torch.device, optional
        Device of the buffers. Defaults to CPU.

    Notes
    -----
    A filter starts unconfigured. :meth:`forward`, :meth:`filter_sample` and
    :meth:`reset` raise :class:`FilterNotConfiguredError` until the first
    successful ``setup``. Every ``setup`` validates and designs before it
    touches the buffers: a rejected call leaves the previous coefficients
    and state as they were, an accepted one replaces the coefficients and
    clears the state.

    Reconfiguring concurrently with :meth:`forward` on the same instance is
    not supported; separate instances are independent.
    """

    shape: Shape

    def __init__(
        self,
        max_order: int,
        *,
        topology: Topology = "direct_form_2_transposed",
        dtype: Optional[torch.dtype] = None,
        device: Optional[torch.device] = None,
    ):
        super().__init__()

        self.max_order = check_order(max_order)
        self.topology = topology

        if dtype is None:
            dtype = torch.get_default_dtype()

        n_sections = self.sections_for(self.max_order)
        state_size = sosfilt_state_size(topology)

        identity = torch.tensor(_IDENTITY_SECTION, dtype=dtype, device=device)

        self.register_buffer("_sos", identity.repeat(n_sections, 1))
        self.register_buffer(
            "_state",
            torch.zeros(n_sections, state_size, dtype=dtype, device=device),
        )
        self.register_buffer(
            "_order", torch.zeros((), dtype=torch.int64, device=device)
        )
        self.register_buffer(
            "_sampling_frequency",
            torch.zeros((), dtype=torch.float64, device=device),
        )

    @classmethod
    def sections_for(cls, order: int) -> int:
        """Number of second-order sections an order needs for this shape."""
        if cls.shape in _BAND_SHAPES:
            return order
        return (order + 1) // 2

    @property
    def order(self) -> int:
        """Configured order, 0 while unconfigured."""
        return int(self._order.item())

    @property
    def is_configured(self) -> bool:
        return self.order > 0

    @property
    def sampling_frequency(self) -> Optional[float]:
        if not self.is_configured:
            return None
        return float(self._sampling_frequency.item())

    @property
    def num_sections(self) -> int:
        return self.sections_for(self.order) if self.is_configured else 0

    @property
    def capacity(self) -> int:
        """Number of reserved second-order sections."""
        return self._sos.shape[0]

    @property
    def sos(self) -> Tensor:
        """Active second-order sections, shape (num_sections, 6)."""
        return self._sos[: self.num_sections].clone()

    def _setup(
        self,
        order: Optional[int],
        sampling_frequency: float,
        parameters: ShapeParameters,
        stopband_attenuation_db: float,
    ) -> None:
        if order is None:
            order = self.max_order
        order = check_order(order)
        if order > self.max_order:
            raise CapacityExceededError(
                f"Requested order {order} exceeds the capacity of this "
                f"filter ({self.max_order})"
            )

        sos = chebyshev_type_2_design(
            self.shape,
            order,
            sampling_frequency,
            parameters,
            stopband_attenuation_db,
            dtype=self._sos.dtype,
            device=self._sos.device,
        )

        n_sections = sos.shape[0]

        with torch.no_grad():
            self._sos[:n_sections].copy_(sos)
            self._sos[n_sections:].zero_()
            self._sos[n_sections:, 0] = 1.0
            self._sos[n_sections:, 3] = 1.0
            self._state.zero_()
            self._order.fill_(order)
            self._sampling_frequency.fill_(float(sampling_frequency))

    def _check_configured(self) -> None:
        if not self.is_configured:
            raise FilterNotConfiguredError(
                f"{type(self).__name__} must be set up before use"
            )

    def reset(self) -> None:
        """Clear the running history, keeping the coefficients."""
        self._check_configured()

        with torch.no_grad():
            self._state.zero_()

    def forward(self, x: Tensor) -> Tensor:
        """Filter a block of samples, continuing from the previous block.

        Parameters
        ----------
        x : Tensor
            Signal block, shape (n_samples,).

        Returns
        -------
        y : Tensor
            Filtered block, same shape as x.
        """
        self._check_configured()

        if x.ndim != 1:
            raise ValueError(
                f"Expected a 1-D signal block, got shape {tuple(x.shape)}"
            )

        n_sections = self.num_sections

        y, state = sosfilt(
            self._sos[:n_sections],
            x,
            zi=self._state[:n_sections],
            topology=self.topology,
        )

        with torch.no_grad():
            self._state[:n_sections].copy_(state.detach())

        return y

    def filter_sample(self, sample: float) -> float:
        """Filter a single sample."""
        x = torch.tensor(
            [sample], dtype=self._sos.dtype, device=self._sos.device
        )

        return float(self(x)[0].item())

    def extra_repr(self) -> str:
        return f"max_order={self.max_order}, topology={self.topology!r}"
