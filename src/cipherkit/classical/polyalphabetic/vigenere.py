from __future__ import annotations

from itertools import cycle

from cipherkit.core.registry import register_plugin
from cipherkit.classical.common import apply_offsets, key_offsets


class VigenereCipher:
    """
    Repeating-key shift: data symbol i uses offsets[i % len(key)].

    Spaces in the key are offsets too (26), and spaces in the data
    consume a key position like any other symbol.
    """

    name = "vigenere"

    def encrypt(self, key: str, data: str) -> str:
        offsets = key_offsets(key, cipher_name="Vigenère")
        return apply_offsets(data, cycle(offsets), decrypt=False)

    def decrypt(self, key: str, data: str) -> str:
        offsets = key_offsets(key, cipher_name="Vigenère")
        return apply_offsets(data, cycle(offsets), decrypt=True)


register_plugin(VigenereCipher(), description="Repeating-key shift over the 27-symbol alphabet")
