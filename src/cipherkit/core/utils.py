from __future__ import annotations

from typing import Iterable, Sequence

from .alphabet import MODULUS


def floor_mod(value: int, modulus: int = MODULUS) -> int:
    """
    Floored (Euclidean) modulus: always in [0, modulus - 1].

    Python's % already floors for a positive modulus; this keeps the
    contract explicit at the call sites that subtract.
    """
    if modulus <= 0:
        raise ValueError("Modulus must be positive.")
    return value % modulus


def shift_index(index: int, offset: int, modulus: int = MODULUS) -> int:
    """Shift one alphabet index by offset (can be negative)."""
    return floor_mod(index + offset, modulus)


def shift_indices(indices: Sequence[int], offsets: Iterable[int], *, sign: int) -> list[int]:
    """
    Pair indices with offsets position by position and shift each one.

    offsets may be infinite (a cycled key); running out before the last
    index is a ValueError, never a shortened result.
    """
    if sign not in (1, -1):
        raise ValueError("sign must be +1 (encrypt) or -1 (decrypt).")
    it = iter(offsets)
    out = []
    for pos, i in enumerate(indices):
        try:
            off = next(it)
        except StopIteration:
            raise ValueError(f"Ran out of offsets at position {pos} of {len(indices)}.") from None
        out.append(shift_index(i, sign * off))
    return out
