"""Second-order sections filter implementation."""

from typing import Literal, Optional, Tuple

import torch
from torch import Tensor

Topology = Literal["direct_form_1", "direct_form_2_transposed"]

_STATE_SIZE = {
    "direct_form_1": 4,
    "direct_form_2_transposed": 2,
}


def sosfilt_state_size(topology: Topology) -> int:
    """Number of state values each section keeps for a topology."""
    if topology not in _STATE_SIZE:
        raise ValueError(
            f"Invalid topology: {topology!r}, "
            f"expected one of {tuple(_STATE_SIZE)}"
        )

    return _STATE_SIZE[topology]


def sosfilt(
    sos: Tensor,
    x: Tensor,
    zi: Optional[Tensor] = None,
    *,
    topology: Topology = "direct_form_2_transposed",
) -> Tuple[Tensor, Tensor]:
    """
    Filter data along the last dimension using cascaded second-order sections.

    Parameters
    ----------
    sos : Tensor
        Second-order sections, shape (n_sections, 6).
        Each row is [b0, b1, b2, a0, a1, a2].
    x : Tensor
        Input signal, shape (..., n_samples).
    zi : Tensor, optional
        Initial state, shape (..., n_sections, state_size) where state_size
        is 2 for "direct_form_2_transposed" and 4 for "direct_form_1".
        If None, zero initial conditions are used.
    topology : {"direct_form_2_transposed", "direct_form_1"}
        Recursion used inside each section.

    Returns
    -------
    y : Tensor
        Filtered signal, same shape as x.
    zf : Tensor
        Final state, same shape as zi. Feeding it back as ``zi`` continues
        the recursion as if the two blocks were one signal.

    Notes
    -----
    Direct Form I keeps ``[x[n-1], x[n-2], y[n-1], y[n-2]]`` per section.
    Transposed Direct Form II keeps the two delay registers ``[s1, s2]``.
    """
    state_size = sosfilt_state_size(topology)

    batch_shape = x.shape[:-1]
    n_samples = x.shape[-1]
    n_sections = sos.shape[0]

    if zi is None:
        states = torch.zeros(
            *batch_shape,
            n_sections,
            state_size,
            dtype=x.dtype,
            device=x.device,
        )
    else:
        states = zi.expand(*batch_shape, n_sections, state_size).clone()

    # Normalize by a0
    coefficients = sos / sos[:, 3:4]

    y = x
    for section_idx in range(n_sections):
        b0, b1, b2, _, a1, a2 = coefficients[section_idx]
        state = states[..., section_idx, :]

        y_section = torch.zeros_like(y)

        if topology == "direct_form_2_transposed":
            s1 = state[..., 0]
            s2 = state[..., 1]
            for i in range(n_samples):
                x_i = y[..., i]
                y_i = b0 * x_i + s1
                s1 = b1 * x_i - a1 * y_i + s2
                s2 = b2 * x_i - a2 * y_i
                y_section[..., i] = y_i
            final = torch.stack([s1, s2], dim=-1)
        else:
            x1 = state[..., 0]
            x2 = state[..., 1]
            y1 = state[..., 2]
            y2 = state[..., 3]
            for i in range(n_samples):
                x_i = y[..., i]
                y_i = b0 * x_i + b1 * x1 + b2 * x2 - a1 * y1 - a2 * y2
                x2 = x1
                x1 = x_i
                y2 = y1
                y1 = y_i
                y_section[..., i] = y_i
            final = torch.stack([x1, x2, y1, y2], dim=-1)

        states[..., section_idx, :] = final
        y = y_section

    return y, states
