"""Pole/zero layout of an analog filter prototype."""

from typing import Optional

import torch
from tensordict.tensorclass import tensorclass
from torch import Tensor


@tensorclass
class PoleZeroLayout:
    """Poles, zeros and gain of an s-plane filter with real coefficients.

    Complex poles and zeros always come in conjugate pairs, so only one
    representative of each pair is stored (the one with non-negative
    imaginary part). At most one purely real pole and one purely real zero
    complete an odd-order layout. Zeros at infinity are not represented.

    Attributes
    ----------
    pole_pairs : Tensor
        Complex tensor, one representative per conjugate pole pair.
    real_poles : Tensor
        Complex tensor with zero or one real pole.
    zero_pairs : Tensor
        Complex tensor, one representative per conjugate zero pair.
    real_zeros : Tensor
        Complex tensor with zero or one real zero.
    gain : Tensor
        Real scalar gain.

    Examples
    --------
    >>> from torchiir.filter_design import chebyshev_type_2_prototype
    >>> layout = chebyshev_type_2_prototype(5, 40.0)
    >>> layout.num_poles(), layout.num_zeros()
    (5, 4)
    >>> layout.all_poles().shape
    torch.Size([5])
    """

    pole_pairs: Tensor
    real_poles: Tensor
    zero_pairs: Tensor
    real_zeros: Tensor
    gain: Tensor

    @classmethod
    def from_conjugate_pairs(
        cls,
        pole_pairs: Tensor,
        zero_pairs: Tensor,
        gain: Tensor,
        real_pole: Optional[Tensor] = None,
        real_zero: Optional[Tensor] = None,
    ) -> "PoleZeroLayout":
        """Build a layout from conjugate-pair representatives.

        Representatives with a negative imaginary part are conjugated so the
        stored half is always the upper half-plane.
        """
        pole_pairs = _upper_half(pole_pairs)
        zero_pairs = _upper_half(zero_pairs.to(pole_pairs.dtype))

        real_poles = _single(real_pole, pole_pairs)
        real_zeros = _single(real_zero, pole_pairs)

        return cls(
            pole_pairs=pole_pairs,
            real_poles=real_poles,
            zero_pairs=zero_pairs,
            real_zeros=real_zeros,
            gain=gain,
            batch_size=[],
        )

    def num_poles(self) -> int:
        return 2 * self.pole_pairs.numel() + self.real_poles.numel()

    def num_zeros(self) -> int:
        return 2 * self.zero_pairs.numel() + self.real_zeros.numel()

    def all_poles(self) -> Tensor:
        """All poles, conjugates expanded: pairs, their conjugates, reals."""
        conjugates = self.pole_pairs.conj().resolve_conj()

        return torch.cat([self.pole_pairs, conjugates, self.real_poles])

    def all_zeros(self) -> Tensor:
        """All finite zeros, conjugates expanded: pairs, conjugates, reals."""
        conjugates = self.zero_pairs.conj().resolve_conj()

        return torch.cat([self.zero_pairs, conjugates, self.real_zeros])

    def is_stable(self) -> bool:
        """True if every pole lies strictly in the left half-plane."""
        poles = self.all_poles()
        return bool((poles.real < 0).all())


def _upper_half(x: Tensor) -> Tensor:
    x = x.reshape(-1)
    return torch.where(x.imag < 0, x.conj().resolve_conj(), x)


def _single(value: Optional[Tensor], like: Tensor) -> Tensor:
    if value is None:
        return torch.empty(0, dtype=like.dtype, device=like.device)

    value = torch.as_tensor(value, device=like.device).to(like.dtype)

    return value.reshape(1)
