from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class CipherResult:
    cipher_name: str
    operation: str  # "encrypt" or "decrypt"
    text: str

    # Lengths only; key material is never stored on the result
    key_length: int = 0

    meta: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "cipher_name": self.cipher_name,
            "operation": self.operation,
            "text": self.text,
            "key_length": self.key_length,
            "meta": dict(self.meta),
        }
