from __future__ import annotations

MASK_32 = 0xFFFFFFFF
MASK_64 = 0xFFFFFFFFFFFFFFFF


def rotl32(x: int, r: int) -> int:
    """Rotate left for 32-bit values."""
    return ((x << r) | (x >> (32 - r))) & MASK_32


def rotl64(x: int, r: int) -> int:
    """Rotate left for 64-bit values."""
    return ((x << r) | (x >> (64 - r))) & MASK_64


def fmix32(k: int) -> int:
    """Avalanche a 32-bit value so every input bit affects every output bit."""
    k ^= k >> 16
    k = (k * 0x85EBCA6B) & MASK_32
    k ^= k >> 13
    k = (k * 0xC2B2AE35) & MASK_32
    k ^= k >> 16
    return k


def fmix64(k: int) -> int:
    """Avalanche a 64-bit lane."""
    k ^= k >> 33
    k = (k * 0xFF51AFD7ED558CCD) & MASK_64
    k ^= k >> 33
    k = (k * 0xC4CEB9FE1A85EC53) & MASK_64
    k ^= k >> 33
    return k


def check_data(data) -> memoryview:
    if isinstance(data, memoryview):
        if not data.c_contiguous:
            return memoryview(data.tobytes())
        return data.cast("B") if data.format != "B" or data.ndim != 1 else data
    if not isinstance(data, (bytes, bytearray)):
        raise TypeError("data must be bytes-like")
    return memoryview(data)


def check_seed(seed: int, bits: int) -> int:
    if isinstance(seed, bool) or not isinstance(seed, int):
        raise TypeError("seed must be an int")
    if seed < 0 or seed >> bits:
        raise ValueError(f"seed must be an unsigned {bits}-bit integer")
    return seed


__all__ = [
    "MASK_32",
    "MASK_64",
    "rotl32",
    "rotl64",
    "fmix32",
    "fmix64",
    "check_data",
    "check_seed",
]
