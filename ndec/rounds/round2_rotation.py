"""
Round 2 — Keystream-Chained Rotation Cipher
===========================================
Each byte is mixed with the IV and a gamma byte offset by the password 2
digest, then rotated by a countdown that starts at the buffer length.

Per byte (ctr = len(data), len(data) - 1, ..., 1):

    x    = gamma[gi] + pw_hash        (zero gamma byte -> gamma[0], gi = 0)
    enc  = rotr(((b ^ iv) + x) ^ x - x, ctr)
    dec  = (((rotl(b, ctr) + x) ^ x) - x) ^ iv
    iv   = rotr(iv, ctr)

The IV chain and the gamma cursor depend only on position, so both
directions walk the same sequence.

The cursor falls back to gamma[0] when it hits a zero byte. Past the end
of the 255-byte buffer counts as zero as well; this only happens when
password 1 fills the whole tail with non-zero bytes.
"""

from ..byteops import rotate_left, rotate_right, u8
from ..direction import Direction


def _key_byte(gamma: bytes, gi: int):
    x = gamma[gi] if gi < len(gamma) else 0
    if x == 0:
        x, gi = gamma[0], 0
    return x, gi + 1


def round2(data: bytearray, gamma: bytes, iv: int, pw_hash: int,
           direction: Direction) -> None:
    """Apply Round 2 to `data` in place."""
    ctr = len(data)
    gi = 0

    for i, b in enumerate(data):
        x, gi = _key_byte(gamma, gi)
        x = u8(x + pw_hash)

        if direction == Direction.ENCRYPT:
            t = u8((u8((b ^ iv) + x) ^ x) - x)
            data[i] = rotate_right(t, ctr)
        else:
            t = rotate_left(b, ctr)
            data[i] = u8((u8(t + x) ^ x) - x) ^ iv

        iv = rotate_right(iv, ctr)
        ctr -= 1
