from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import Tuple

from .primitives import MASK_64, check_data, check_seed, fmix64, rotl64

C1 = 0x87C37B91114253D5
C2 = 0x4CF5AD432745937F

BLOCK_SIZE = 16
DIGEST_SIZE = 16

_LANES = struct.Struct("<QQ")


@dataclass(frozen=True)
class Digest128:
    """
    Finalized MurmurHash3 x64_128 lane pair.

    The serialized form is h1 as little-endian bytes 0-7 followed by h2 as
    little-endian bytes 8-15.
    """

    h1: int
    h2: int

    def lanes(self) -> Tuple[int, int]:
        return self.h1, self.h2

    def bytes(self) -> bytes:
        return _LANES.pack(self.h1, self.h2)

    def digest(self) -> bytes:
        return self.bytes()

    def hexdigest(self) -> str:
        return self.bytes().hex()

    def intdigest(self) -> int:
        return int.from_bytes(self.bytes(), byteorder="little", signed=False)

    def write_into(self, buffer, offset: int = 0) -> None:
        """
        Serialize the digest directly into a caller-owned writable buffer.

        Args:
            buffer: Writable bytes-like object (bytearray, memoryview, ...)
            offset: Position of the first digest byte in buffer

        Raises:
            TypeError: If buffer is read-only
            ValueError: If buffer holds fewer than offset + 16 bytes
        """
        _check_output(buffer, offset)
        _LANES.pack_into(buffer, offset, self.h1, self.h2)


def _check_output(buffer, offset: int) -> None:
    view = memoryview(buffer)
    if view.readonly:
        raise TypeError("output buffer must be writable")
    if offset < 0 or view.nbytes - offset < DIGEST_SIZE:
        raise ValueError(
            f"output buffer needs at least {DIGEST_SIZE} bytes from offset {offset}"
        )


def _mix_k1(k1: int) -> int:
    k1 = (k1 * C1) & MASK_64
    k1 = rotl64(k1, 31)
    return (k1 * C2) & MASK_64


def _mix_k2(k2: int) -> int:
    k2 = (k2 * C2) & MASK_64
    k2 = rotl64(k2, 33)
    return (k2 * C1) & MASK_64


def mix_block128(h1: int, h2: int, k1: int, k2: int) -> Tuple[int, int]:
    """Fold one 16-byte block, given as two little-endian words, into the lanes."""
    h1 ^= _mix_k1(k1)
    h1 = rotl64(h1, 27)
    h1 = (h1 + h2) & MASK_64
    h1 = (h1 * 5 + 0x52DCE729) & MASK_64

    h2 ^= _mix_k2(k2)
    h2 = rotl64(h2, 31)
    h2 = (h2 + h1) & MASK_64
    h2 = (h2 * 5 + 0x38495AB5) & MASK_64
    return h1, h2


def mix_blocks128(h1: int, h2: int, blocks) -> Tuple[int, int]:
    """Fold a block-aligned buffer into the lanes."""
    for k1, k2 in _LANES.iter_unpack(blocks):
        h1, h2 = mix_block128(h1, h2, k1, k2)
    return h1, h2


def finalize128(h1: int, h2: int, tail, length: int) -> Digest128:
    """
    Mix the 0-15 trailing bytes and the total length into the lanes.

    Pure function of its arguments; the streaming writer calls it with a
    snapshot of its state.
    """
    k1 = 0
    k2 = 0
    for idx, value in enumerate(tail):
        if idx < 8:
            k1 |= value << (8 * idx)
        else:
            k2 |= value << (8 * (idx - 8))

    # Tail words only mix into the lanes, no lane-combine step.
    if len(tail) > 8:
        h2 ^= _mix_k2(k2)
    if len(tail) > 0:
        h1 ^= _mix_k1(k1)

    length &= MASK_64
    h1 ^= length
    h2 ^= length

    h1 = (h1 + h2) & MASK_64
    h2 = (h2 + h1) & MASK_64

    h1 = fmix64(h1)
    h2 = fmix64(h2)

    h1 = (h1 + h2) & MASK_64
    h2 = (h2 + h1) & MASK_64
    return Digest128(h1, h2)


def hash128(data: bytes, seed: int = 0) -> Digest128:
    """
    Compute the MurmurHash3 x64_128 digest of a complete buffer.

    Args:
        data: Bytes-like input of any length, including empty
        seed: Unsigned 64-bit seed, used as the initial value of both lanes

    Returns:
        Digest128 with lanes(), bytes(), hexdigest() and write_into().

    Raises:
        TypeError: If data is not bytes-like or seed is not an int
        ValueError: If seed does not fit in 64 bits
    """
    view = check_data(data)
    seed = check_seed(seed, 64)

    length = len(view)
    tail_index = length - (length % BLOCK_SIZE)

    h1, h2 = mix_blocks128(seed, seed, view[:tail_index])
    return finalize128(h1, h2, view[tail_index:], length)


def hash128_x64(data: bytes, seed: int = 0) -> bytes:
    """Return the 16-byte little-endian serialization of hash128(data, seed)."""
    return hash128(data, seed).bytes()


def write_hash128_x64(data: bytes, out, seed: int = 0) -> None:
    """Hash data and serialize the digest into the first 16 bytes of out."""
    hash128(data, seed).write_into(out)


__all__ = [
    "Digest128",
    "hash128",
    "hash128_x64",
    "write_hash128_x64",
    "mix_block128",
    "mix_blocks128",
    "finalize128",
]
