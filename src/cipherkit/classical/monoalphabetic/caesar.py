from __future__ import annotations

from itertools import repeat

from cipherkit.core.registry import register_plugin
from cipherkit.classical.common import apply_offsets, key_offsets


def _offset(key: str) -> int:
    # Only the first symbol sets the shift, but the whole key must be valid.
    return key_offsets(key, cipher_name="Caesar")[0]


class CaesarCipher:
    name = "caesar"

    def encrypt(self, key: str, data: str) -> str:
        return apply_offsets(data, repeat(_offset(key)), decrypt=False)

    def decrypt(self, key: str, data: str) -> str:
        return apply_offsets(data, repeat(_offset(key)), decrypt=True)


register_plugin(CaesarCipher(), description="Fixed shift by the first key symbol")
