"""
Transform direction
===================
ENCRYPT and DECRYPT also carry their byte value as a sign multiplier:
0xFF is -1 under byte arithmetic, which Round 1 uses to negate its sum.
Rounds 2 and 3 branch on the member itself.
"""

from enum import IntEnum


class Direction(IntEnum):
    ENCRYPT = 0x01
    DECRYPT = 0xFF   # -1 as a byte
