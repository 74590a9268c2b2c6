from __future__ import annotations

from typing import Any, Callable

from .murmur128 import hash128
from .murmur32 import hash32


def _hash128_lane(data: bytes, seed: int) -> int:
    return hash128(data, seed).h1


def _select_hasher(algo: str) -> Callable[[bytes, int], int]:
    algo_normalized = algo.lower()
    if algo_normalized == "murmur3_32":
        return hash32
    if algo_normalized == "murmur3_128":
        return _hash128_lane
    raise ValueError(f"Unsupported algorithm: {algo}")


def _to_bytes(value: Any) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    raise TypeError(f"Unsupported type for column hashing: {type(value)!r}")


def _hash_values(values, seed: int, algo: str):
    hasher = _select_hasher(algo)
    return [hasher(_to_bytes(val), seed) for val in values]


def _dtype_bits(algo: str) -> int:
    return 32 if algo.lower() == "murmur3_32" else 64


def hash_pandas_series(series: Any, seed: int = 0, algo: str = "murmur3_128"):
    """
    Hash a pandas Series of str/bytes values into a uint32 or uint64 Series.

    "murmur3_32" yields the x86_32 digest; "murmur3_128" yields the first
    lane of the x64_128 digest.
    """
    try:
        import pandas as pd  # type: ignore
    except ModuleNotFoundError as exc:  # pragma: no cover - optional dependency
        raise ImportError(
            "Install pandas to use hash_pandas_series: pip install pandas"
        ) from exc

    hashes = _hash_values(series, seed, algo)
    return pd.Series(
        hashes,
        index=getattr(series, "index", None),
        dtype=f"uint{_dtype_bits(algo)}",
    )


def hash_arrow_array(array: Any, seed: int = 0, algo: str = "murmur3_128"):
    """
    Hash a pyarrow Array (or values coercible to one) into a uint32/uint64 Array.
    """
    try:
        import pyarrow as pa  # type: ignore
    except ModuleNotFoundError as exc:  # pragma: no cover - optional dependency
        raise ImportError(
            "Install pyarrow to use hash_arrow_array: pip install pyarrow"
        ) from exc

    arr = array if hasattr(array, "to_pylist") else pa.array(array)
    values = [val.as_py() if hasattr(val, "as_py") else val for val in arr]
    hashes = _hash_values(values, seed, algo)
    arrow_type = pa.uint32() if _dtype_bits(algo) == 32 else pa.uint64()
    return pa.array(hashes, type=arrow_type)


def hash_polars_series(series: Any, seed: int = 0, algo: str = "murmur3_128"):
    """
    Hash a polars Series into a UInt32/UInt64 Series.
    """
    try:
        import polars as pl  # type: ignore
    except ModuleNotFoundError as exc:  # pragma: no cover - optional dependency
        raise ImportError(
            "Install polars to use hash_polars_series: pip install polars"
        ) from exc

    ser = series if hasattr(series, "dtype") else pl.Series(series)
    hashes = _hash_values(ser, seed, algo)
    name = getattr(ser, "name", None) or "hash"
    dtype = pl.UInt32 if _dtype_bits(algo) == 32 else pl.UInt64
    return pl.Series(name=name, values=hashes, dtype=dtype)


__all__ = ["hash_arrow_array", "hash_pandas_series", "hash_polars_series"]
