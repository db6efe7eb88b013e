"""
Round 3 — Password-Chained Feedback Cipher
==========================================
Walks the raw password 2 bytes plus one trailing zero as a repeating key,
with a one-byte feedback state seeded from the gamma digest.

    p      = keyseq[i % len(keyseq)]
    enc    = -((b - p) ^ p) - p - state
    dec    = ((-b - p - state) ^ p) + p
    state  = -rotr(state, ctr) ^ p

ctr counts down from len(data). The state never sees data bytes, so
encryption and decryption produce the same state sequence.
"""

from ..byteops import rotate_right, u8
from ..direction import Direction


def round3(data: bytearray, password: bytes, gamma_hash: int,
           direction: Direction) -> None:
    """Apply Round 3 to `data` in place."""
    keyseq = bytes(password) + b"\x00"
    ctr = len(data)
    state = gamma_hash

    for i, b in enumerate(data):
        p = keyseq[i % len(keyseq)]

        if direction == Direction.ENCRYPT:
            data[i] = u8(-(u8(b - p) ^ p) - p - state)
        else:
            data[i] = u8((u8(-b - p - state) ^ p) + p)

        state = u8(-rotate_right(state, ctr)) ^ p
        ctr -= 1
