from __future__ import annotations

import string
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping

from .errors import IndexOutOfRange, UnknownSymbol

ALPHABET = string.ascii_uppercase + " "
MODULUS = len(ALPHABET)  # 27


@dataclass(frozen=True)
class AlphabetTable:
    """
    Bidirectional mapping between the 27 symbols and 0..26.

    A..Z map to 0..25 and space maps to 26. Both views are read-only,
    so a single table can be shared by every cipher.
    """

    symbols: str = ALPHABET
    _to_index: Mapping[str, int] = field(init=False, repr=False, compare=False)
    _to_symbol: Mapping[int, str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if len(set(self.symbols)) != len(self.symbols):
            raise ValueError("Alphabet symbols must be unique.")
        object.__setattr__(
            self, "_to_index", MappingProxyType({ch: i for i, ch in enumerate(self.symbols)})
        )
        object.__setattr__(
            self, "_to_symbol", MappingProxyType({i: ch for i, ch in enumerate(self.symbols)})
        )

    @property
    def size(self) -> int:
        return len(self.symbols)

    def symbol_to_index(self, symbol: str) -> int:
        if not isinstance(symbol, str) or len(symbol) != 1:
            raise UnknownSymbol(str(symbol))
        # only ASCII folds; "ı".upper() would otherwise become "I"
        key = symbol.upper() if symbol.isascii() else symbol
        try:
            return self._to_index[key]
        except KeyError:
            raise UnknownSymbol(symbol) from None

    def index_to_symbol(self, index: int) -> str:
        # bool is an int subclass; True/False are not indices
        if isinstance(index, bool) or not isinstance(index, int):
            raise IndexOutOfRange(index)
        try:
            return self._to_symbol[index]
        except KeyError:
            raise IndexOutOfRange(index) from None

    def to_indices(self, text: str) -> list[int]:
        """Map every symbol of text to its index, reporting the first bad position."""
        out = []
        for pos, ch in enumerate(text):
            try:
                out.append(self.symbol_to_index(ch))
            except UnknownSymbol:
                raise UnknownSymbol(ch, pos) from None
        return out

    def from_indices(self, indices: Iterable[int]) -> str:
        return "".join(self.index_to_symbol(i) for i in indices)

    def canonicalize(self, text: str) -> str:
        """Uppercase text after checking that every symbol is in the alphabet."""
        return self.from_indices(self.to_indices(text))

    def items(self) -> list[tuple[int, str]]:
        return sorted(self._to_symbol.items())


TABLE = AlphabetTable()


def symbol_to_index(symbol: str) -> int:
    return TABLE.symbol_to_index(symbol)


def index_to_symbol(index: int) -> str:
    return TABLE.index_to_symbol(index)


def canonicalize(text: str) -> str:
    return TABLE.canonicalize(text)
