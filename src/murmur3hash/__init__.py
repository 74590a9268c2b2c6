"""
Pure-Python MurmurHash3 (x86_32 and x64_128) with one-shot and streaming APIs.
"""

from .murmur32 import hash32
from .murmur128 import Digest128, hash128, hash128_x64, write_hash128_x64
from .writer import HashWriter128, murmur3_128
from .vectorized import (
    hash_arrow_array,
    hash_pandas_series,
    hash_polars_series,
)

__all__ = [
    "hash32",
    "hash128",
    "hash128_x64",
    "write_hash128_x64",
    "Digest128",
    "HashWriter128",
    "murmur3_128",
    "hash_arrow_array",
    "hash_pandas_series",
    "hash_polars_series",
]
