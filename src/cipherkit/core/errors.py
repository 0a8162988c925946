from __future__ import annotations

from typing import Iterable


class CipherError(ValueError):
    """Base class for every recoverable error raised by cipherkit."""


class UnknownSymbol(CipherError):
    def __init__(self, symbol: str, position: int | None = None) -> None:
        self.symbol = symbol
        self.position = position
        where = f" at position {position}" if position is not None else ""
        super().__init__(f"Unknown symbol {symbol!r}{where}; expected A-Z or space.")


class IndexOutOfRange(CipherError):
    def __init__(self, index: object) -> None:
        self.index = index
        super().__init__(f"Index {index!r} is outside the alphabet range 0..26.")


class InvalidKey(CipherError):
    pass


class KeyTooShort(CipherError):
    def __init__(self, key_length: int, data_length: int) -> None:
        self.key_length = key_length
        self.data_length = data_length
        super().__init__(
            f"One-time pad key has {key_length} symbols but data has {data_length}; "
            "the key must be at least as long as the data."
        )


class UnknownCipher(CipherError):
    def __init__(self, name: str, available: Iterable[str]) -> None:
        self.name = name
        self.available = sorted(available)
        super().__init__(f"Unknown cipher '{name}'. Available: {', '.join(self.available)}")
