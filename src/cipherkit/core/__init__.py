from .alphabet import ALPHABET, MODULUS, TABLE, AlphabetTable, canonicalize
from .errors import (
    CipherError,
    IndexOutOfRange,
    InvalidKey,
    KeyTooShort,
    UnknownCipher,
    UnknownSymbol,
)
from .registry import CipherKind, decrypt, encrypt, get_plugin, list_plugins, register_plugin
from .results import CipherResult

__all__ = [
    "ALPHABET",
    "MODULUS",
    "TABLE",
    "AlphabetTable",
    "canonicalize",
    "CipherError",
    "IndexOutOfRange",
    "InvalidKey",
    "KeyTooShort",
    "UnknownCipher",
    "UnknownSymbol",
    "CipherKind",
    "encrypt",
    "decrypt",
    "get_plugin",
    "list_plugins",
    "register_plugin",
    "CipherResult",
]
