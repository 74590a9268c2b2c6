from __future__ import annotations

from typing import Optional

from .murmur128 import (
    BLOCK_SIZE,
    DIGEST_SIZE,
    Digest128,
    finalize128,
    mix_blocks128,
)
from .primitives import check_data, check_seed


class HashWriter128:
    """
    Streaming MurmurHash3 x64_128 accumulator.

    Input may arrive in chunks of any size; the digest equals hash128() of
    the concatenated input. Reading the digest does not disturb the state,
    so writing may continue afterwards.

    Instances are not thread-safe; callers sharing one writer must lock.
    """

    name = "murmur3_x64_128"
    digest_size = DIGEST_SIZE
    block_size = BLOCK_SIZE

    def __init__(self, seed: int = 0):
        self._seed = check_seed(seed, 64)
        self.reset()

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def size(self) -> int:
        return DIGEST_SIZE

    def reset(self) -> None:
        self._h1 = self._seed
        self._h2 = self._seed
        self._tail = b""
        self._total_len = 0

    def copy(self) -> "HashWriter128":
        dup = self.__class__.__new__(self.__class__)
        dup._seed = self._seed
        dup._h1 = self._h1
        dup._h2 = self._h2
        dup._tail = self._tail
        dup._total_len = self._total_len
        return dup

    def write(self, data: bytes) -> int:
        """Append data and return the number of bytes consumed."""
        view = check_data(data)
        size = len(view)
        if not size:
            return 0

        raw = self._tail + view.tobytes()
        offset_limit = len(raw) - (len(raw) % BLOCK_SIZE)
        if offset_limit:
            self._h1, self._h2 = mix_blocks128(
                self._h1, self._h2, memoryview(raw)[:offset_limit]
            )

        self._tail = raw[offset_limit:]
        self._total_len += size
        return size

    def write_text(self, text: str, encoding: str = "utf-8") -> int:
        if not isinstance(text, str):
            raise TypeError("text must be str")
        return self.write(text.encode(encoding))

    def update(self, data: bytes) -> "HashWriter128":
        self.write(data)
        return self

    def add_bytes(self, data: bytes) -> None:
        """Append data without reporting the consumed length."""
        self.write(data)

    def sum128(self) -> Digest128:
        return finalize128(self._h1, self._h2, self._tail, self._total_len)

    def sum(self, prefix: Optional[bytes] = None) -> bytes:
        """Return prefix with the 16-byte digest appended."""
        digest = self.sum128().bytes()
        if prefix is None:
            return digest
        return bytes(check_data(prefix)) + digest

    def digest(self) -> bytes:
        return self.sum128().bytes()

    def hexdigest(self) -> str:
        return self.digest().hex()

    def intdigest(self) -> int:
        return self.sum128().intdigest()


def murmur3_128(data: bytes = b"", seed: int = 0) -> HashWriter128:
    """Convenience constructor matching hashlib-style usage."""
    writer = HashWriter128(seed)
    writer.write(data)
    return writer


__all__ = ["HashWriter128", "murmur3_128"]
