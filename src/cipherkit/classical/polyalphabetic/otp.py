from __future__ import annotations

import logging
import secrets

from cipherkit.core.alphabet import ALPHABET, TABLE
from cipherkit.core.errors import KeyTooShort
from cipherkit.core.registry import register_plugin
from cipherkit.classical.common import apply_offsets, key_offsets

logger = logging.getLogger(__name__)


def generate_pad(length: int) -> str:
    """Random key of `length` alphabet symbols, suitable for a single OTP message."""
    if length < 0:
        raise ValueError("Pad length must be non-negative.")
    logger.debug("generating pad of %d symbols", length)
    return "".join(secrets.choice(ALPHABET) for _ in range(length))


def _pad_offsets(key: str, data: str) -> list[int]:
    # A bad data symbol is reported ahead of a short key.
    TABLE.to_indices(data)
    offsets = key_offsets(key, cipher_name="OTP", allow_empty=True)
    if len(offsets) < len(data):
        raise KeyTooShort(len(offsets), len(data))
    return offsets


class OTPCipher:
    """
    One-time pad: data symbol i uses offsets[i], never cycling.

    Each call is independent; nothing stops a caller from reusing a pad,
    which is exactly what makes a reused pad breakable.
    """

    name = "otp"

    def encrypt(self, key: str, data: str) -> str:
        return apply_offsets(data, _pad_offsets(key, data), decrypt=False)

    def decrypt(self, key: str, data: str) -> str:
        return apply_offsets(data, _pad_offsets(key, data), decrypt=True)


register_plugin(OTPCipher(), description="Non-repeating key, at least as long as the data")
