from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Protocol, Union

from .errors import UnknownCipher
from .results import CipherResult

logger = logging.getLogger(__name__)


class CipherKind(str, enum.Enum):
    CAESAR = "caesar"
    VIGENERE = "vigenere"
    OTP = "otp"


class CipherPlugin(Protocol):
    name: str

    def encrypt(self, key: str, data: str) -> str:
        ...

    def decrypt(self, key: str, data: str) -> str:
        ...


@dataclass
class _PluginEntry:
    plugin: CipherPlugin
    description: str = ""


_PLUGINS: dict[str, _PluginEntry] = {}

KindLike = Union[str, CipherKind]


def _normalize_name(kind: KindLike) -> str:
    if isinstance(kind, CipherKind):
        return kind.value
    return str(kind).lower().strip()


def register_plugin(plugin: CipherPlugin, *, description: str = "") -> None:
    key = _normalize_name(plugin.name)
    if not key:
        raise ValueError("Plugin must have a non-empty name.")
    _PLUGINS[key] = _PluginEntry(plugin=plugin, description=description)
    logger.debug("registered cipher plugin %r", key)


def list_plugins() -> list[str]:
    _ensure_registered()
    return sorted(_PLUGINS.keys())


def describe_plugins() -> list[tuple[str, str]]:
    return [(name, _PLUGINS[name].description) for name in list_plugins()]


def _ensure_registered() -> None:
    # Importing a single cipher module registers only that cipher, so
    # check for the full built-in set rather than an empty registry.
    if not all(kind.value in _PLUGINS for kind in CipherKind):
        from cipherkit.classical import register_all

        register_all()


def get_plugin(kind: KindLike) -> CipherPlugin:
    _ensure_registered()
    name = _normalize_name(kind)
    if name not in _PLUGINS:
        raise UnknownCipher(str(kind), _PLUGINS.keys())
    return _PLUGINS[name].plugin


def encrypt(kind: KindLike, key: str, data: str) -> str:
    """Encrypt data with the named cipher. Raises a CipherError on bad input."""
    plugin = get_plugin(kind)
    logger.debug("encrypt cipher=%s key_len=%d data_len=%d", plugin.name, len(key), len(data))
    return plugin.encrypt(key, data)


def decrypt(kind: KindLike, key: str, data: str) -> str:
    """Decrypt data with the named cipher. Raises a CipherError on bad input."""
    plugin = get_plugin(kind)
    logger.debug("decrypt cipher=%s key_len=%d data_len=%d", plugin.name, len(key), len(data))
    return plugin.decrypt(key, data)


def run(kind: KindLike, operation: str, key: str, data: str) -> CipherResult:
    """
    Dispatch by operation name and wrap the output in a CipherResult.
    Used by the CLI so it can print either plain text or JSON.
    """
    op = operation.lower().strip()
    if op == "encrypt":
        text = encrypt(kind, key, data)
    elif op == "decrypt":
        text = decrypt(kind, key, data)
    else:
        raise ValueError(f"Unknown operation '{operation}'. Expected 'encrypt' or 'decrypt'.")

    plugin = get_plugin(kind)
    return CipherResult(
        cipher_name=plugin.name,
        operation=op,
        text=text,
        key_length=len(key),
        meta={"data_length": len(data)},
    )
