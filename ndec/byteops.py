"""
Byte arithmetic helpers
=======================
Every NDEC accumulator is a single unsigned byte. Python ints do not wrap,
so each step is masked back into 0..255 here.

Rotation counts are taken mod 8: rotating a byte by n is the same as
rotating it by n & 7, negative counts included.
"""

MASK = 0xFF


def u8(value: int) -> int:
    """Wrap an int into an unsigned byte."""
    return value & MASK


def rotate_left(b: int, n: int) -> int:
    n &= 7
    if n == 0:
        return b
    return ((b << n) | (b >> (8 - n))) & MASK


def rotate_right(b: int, n: int) -> int:
    n &= 7
    if n == 0:
        return b
    return ((b >> n) | (b << (8 - n))) & MASK


def pad_key(key: bytes, size: int) -> bytearray:
    """
    Copy `key` over a zero-filled buffer of `size` bytes.
    Longer keys are truncated, shorter ones left-aligned and zero-padded.
    """
    buf = bytearray(size)
    head = bytes(key[:size])
    buf[:len(head)] = head
    return buf
