from __future__ import annotations

import struct

from .primitives import MASK_32, check_data, check_seed, fmix32, rotl32

_C1 = 0xCC9E2D51
_C2 = 0x1B873593


def hash32(data: bytes, seed: int = 0) -> int:
    """
    Compute the MurmurHash3 x86_32 digest of a complete buffer.

    Args:
        data: Bytes-like input of any length, including empty
        seed: Unsigned 32-bit seed (default: 0)

    Returns:
        Unsigned 32-bit digest as an int.

    Raises:
        TypeError: If data is not bytes-like or seed is not an int
        ValueError: If seed does not fit in 32 bits
    """
    view = check_data(data)
    h1 = check_seed(seed, 32)

    length = len(view)
    tail_index = length - (length & 3)

    for (k1,) in struct.iter_unpack("<I", view[:tail_index]):
        k1 = (k1 * _C1) & MASK_32
        k1 = rotl32(k1, 15)
        k1 = (k1 * _C2) & MASK_32

        h1 ^= k1
        h1 = rotl32(h1, 13)
        h1 = (h1 * 5 + 0xE6546B64) & MASK_32

    # Tail bytes mix into h1 without the add-constant step.
    tail = view[tail_index:]
    if tail:
        k1 = 0
        for idx, value in enumerate(tail):
            k1 |= value << (8 * idx)
        k1 = (k1 * _C1) & MASK_32
        k1 = rotl32(k1, 15)
        k1 = (k1 * _C2) & MASK_32
        h1 ^= k1

    h1 ^= length & MASK_32
    return fmix32(h1)


__all__ = ["hash32"]
