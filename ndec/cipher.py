"""
NDEC Cipher Context
===================
Bundles the key material derived from a password pair and runs the three
rounds over a working buffer.

    password1 ─► gamma (255 B) ─► gamma_hash
    password2 ─────────────────► password2_hash

    encrypt:  Round1 → Round2(iv, password2_hash) → Round3(password2, gamma_hash)
    decrypt:  Round3⁻¹ → Round2⁻¹ → Round1⁻¹

Bundle format: iv(1) || ciphertext   (ciphertext length == plaintext length)

No authentication, no key stretching. This reproduces a legacy format
bit-for-bit; it is not a modern cipher.

The context is immutable after construction. Per-call state (counters,
rolling IV, rolling hash) lives in the round functions, so one instance can
be shared freely.
"""

import os
import logging
from typing import Union

from .direction import Direction
from .gamma import gamma, gamma_hash
from .password import password_hash
from .rounds.round1_diffusion import round1
from .rounds.round2_rotation import round2
from .rounds.round3_feedback import round3

logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]


def _as_bytes(value: Union[str, BytesLike]) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8")
    return bytes(value)


class NDECCipher:
    """NDEC two-password byte cipher."""

    IV_SIZE = 1

    def __init__(self, password1: Union[str, BytesLike],
                 password2: Union[str, BytesLike]):
        self._gamma      = gamma(_as_bytes(password1))
        self._gamma_hash = gamma_hash(self._gamma)
        self._password2  = _as_bytes(password2)
        self._pw2_hash   = password_hash(self._password2)
        logger.debug(f"NDEC context: gamma={len(self._gamma)}B "
                     f"gamma_hash=0x{self._gamma_hash:02x} "
                     f"pw2_hash=0x{self._pw2_hash:02x}")

    @property
    def gamma(self) -> bytes:
        return self._gamma

    @property
    def gamma_hash(self) -> int:
        return self._gamma_hash

    @property
    def password2(self) -> bytes:
        return self._password2

    @property
    def password2_hash(self) -> int:
        return self._pw2_hash

    @staticmethod
    def random_iv() -> int:
        return os.urandom(NDECCipher.IV_SIZE)[0]

    @staticmethod
    def _check_iv(iv: int) -> int:
        if not 0 <= iv <= 0xFF:
            raise ValueError("IV must be a single byte (0-255).")
        return iv

    def encrypt(self, plaintext: BytesLike, iv: int) -> bytes:
        """
        Encrypt plaintext with the given IV byte.
        Returns the bare ciphertext (same length, no IV prefix).
        """
        iv   = self._check_iv(iv)
        data = bytearray(plaintext)
        round1(data, self._gamma, Direction.ENCRYPT)
        round2(data, self._gamma, iv, self._pw2_hash, Direction.ENCRYPT)
        round3(data, self._password2, self._gamma_hash, Direction.ENCRYPT)
        logger.debug(f"Encrypt: {len(data)}B iv=0x{iv:02x}")
        return bytes(data)

    def seal(self, plaintext: BytesLike, iv: int = None) -> bytes:
        """
        Encrypt and prefix the IV.
        Omit iv to draw one from os.urandom.
        Returns: iv(1) || ciphertext
        """
        if iv is None:
            iv = self.random_iv()
        return bytes([self._check_iv(iv)]) + self.encrypt(plaintext, iv)

    def decrypt(self, bundle: BytesLike) -> bytes:
        """
        Split off the leading IV byte and decrypt the rest.
        Raises ValueError on an empty bundle.
        """
        if len(bundle) < self.IV_SIZE:
            raise ValueError("Bundle too short.")
        iv   = bundle[0]
        data = bytearray(bundle[self.IV_SIZE:])
        round3(data, self._password2, self._gamma_hash, Direction.DECRYPT)
        round2(data, self._gamma, iv, self._pw2_hash, Direction.DECRYPT)
        round1(data, self._gamma, Direction.DECRYPT)
        logger.debug(f"Decrypt: {len(data)}B iv=0x{iv:02x}")
        return bytes(data)

    def __repr__(self):
        return (f"NDECCipher(gamma_hash=0x{self._gamma_hash:02x}, "
                f"pw2_hash=0x{self._pw2_hash:02x})")
