"""
Password Digest
===============
Single-byte digest of a password, used as Round 2 key material.

Same accumulator shape as gamma_hash but a different recurrence (add
instead of subtract, plus a complement of the state on every byte). The
password is zero-padded / truncated to 255 bytes first, so the trailing
zeros are folded in as well.
"""

from .byteops import pad_key, u8
from .gamma import GAMMA_SIZE


def password_hash(password: bytes) -> int:
    hash_, state = 0, 0
    for b in pad_key(password, GAMMA_SIZE):
        hash_ = u8(hash_ + b)
        state = u8(state - hash_)
        hash_ ^= state
        state ^= 0xFF
    return hash_
