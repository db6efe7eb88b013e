"""
Keystream Generator — Gamma
===========================
Derives the 255-byte "gamma" buffer from password 1 with a two-register
feedback recurrence, plus the single-byte digest taken over it.

Layout of the returned buffer:

    [0   .. 124]  generator output (125 iterations, one byte each)
    [125 .. 254]  untouched zero-padded copy of password 1

The tail is never overwritten and every consumer (gamma_hash, Round 1,
Round 2) reads the full 255 bytes, so the leftover password bytes are part
of the effective keystream. Existing ciphertexts depend on this.

Each iteration reads two source bytes at j, j+1 (j = 2, 4, ...) and writes
one output byte at i (i = 0, 1, ...). Since j > i throughout, reads only
ever see the original password copy.
"""

from .byteops import pad_key, rotate_left, u8

GAMMA_SIZE  = 0xFF   # 255-byte buffer
GAMMA_ITERS = 0x7D   # 125 generated bytes


def gamma(password: bytes) -> bytes:
    """Build the full 255-byte gamma buffer for `password`."""
    data = pad_key(password, GAMMA_SIZE)
    st1 = 0xFF ^ data[0]
    st2 = 0xFF ^ data[1]
    i, j = 0, 2

    # the counter runs negative; rotl by a negative count is a rotr
    for k in range(-GAMMA_ITERS, 0):
        st1 = u8(st1 - 1)
        cur = 0xFF ^ u8(data[j] - data[j + 1]) ^ st1
        data[i] = cur
        i += 1
        j += 2

        st1 = rotate_left(st1, k) ^ st2
        st2 = u8(-(st2 << 1) - cur)
        st1 = u8(st1 + st2)

    return bytes(data)


def gamma_hash(gamma_buf: bytes) -> int:
    """Single-byte digest of the whole gamma buffer."""
    hash_, state = 0, 0
    for b in gamma_buf:
        hash_ = u8(hash_ - b)
        state ^= hash_
        hash_ = u8(-hash_ - state)
    return hash_
