"""
Round 1 — Global XOR/Sum Diffusion
==================================
Folds the whole gamma buffer into two bytes, its running XOR and its
wraparound sum, and applies them to the data by position mod 3:

    i % 3 == 0   byte ^= xor
    i % 3 == 1   byte -= sum
    i % 3 == 2   byte += sum

For decryption the sum is multiplied by Direction.DECRYPT (0xFF, i.e. -1),
which swaps the add/subtract lanes. XOR is its own inverse.
"""

from ..byteops import u8
from ..direction import Direction


def round1(data: bytearray, gamma: bytes, direction: Direction) -> None:
    """Apply Round 1 to `data` in place."""
    xor, total = 0, 0
    for b in gamma:
        xor ^= b
        total = u8(total + b)
    total = u8(total * direction)

    for i, b in enumerate(data):
        lane = i % 3
        if lane == 0:
            data[i] = b ^ xor
        elif lane == 1:
            data[i] = u8(b - total)
        else:
            data[i] = u8(b + total)
