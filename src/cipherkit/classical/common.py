from __future__ import annotations

from typing import Iterable

from cipherkit.core.alphabet import TABLE
from cipherkit.core.errors import InvalidKey
from cipherkit.core.utils import shift_indices


def key_offsets(key: str, *, cipher_name: str, allow_empty: bool = False) -> list[int]:
    """
    Map every key symbol to its offset (its alphabet index).

    Raises InvalidKey for an empty key unless allow_empty, and UnknownSymbol
    for any key symbol outside the alphabet.
    """
    if not key and not allow_empty:
        raise InvalidKey(f"{cipher_name} key must contain at least one symbol (A-Z or space).")
    return TABLE.to_indices(key)


def apply_offsets(data: str, offsets: Iterable[int], *, decrypt: bool) -> str:
    """
    Shift each data symbol by the matching offset.

    The whole input is validated before anything is produced; offsets
    must yield at least len(data) values.
    """
    indices = TABLE.to_indices(data)
    shifted = shift_indices(indices, offsets, sign=-1 if decrypt else 1)
    return TABLE.from_indices(shifted)
