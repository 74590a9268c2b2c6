import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "../src")))

import pytest

from murmur3hash import hash32, hash128
import murmur3hash.vectorized as vectorized

VALUES = ["hello", b"Winter is coming", ""]
EXPECTED_128 = [hash128(b"hello").h1, hash128(b"Winter is coming").h1, 0]
EXPECTED_32 = [0x248BFA47, 0x43617E8F, 0]


def test_select_hasher_rejects_unknown_algo():
    with pytest.raises(ValueError):
        vectorized._select_hasher("md5")
    assert vectorized._select_hasher("MURMUR3_32") is hash32


def test_unsupported_value_type():
    with pytest.raises(TypeError) as excinfo:
        vectorized._hash_values([1], seed=0, algo="murmur3_32")
    assert "Unsupported type" in str(excinfo.value)


def test_pandas_series():
    pd = pytest.importorskip("pandas")
    series = pd.Series(VALUES, index=["a", "b", "c"])
    out = vectorized.hash_pandas_series(series)
    assert str(out.dtype) == "uint64"
    assert list(out.index) == ["a", "b", "c"]
    assert [int(v) for v in out] == EXPECTED_128

    out32 = vectorized.hash_pandas_series(series, algo="murmur3_32")
    assert str(out32.dtype) == "uint32"
    assert [int(v) for v in out32] == EXPECTED_32


def test_pandas_seed():
    pd = pytest.importorskip("pandas")
    out = vectorized.hash_pandas_series(pd.Series(["hello"]), seed=1, algo="murmur3_32")
    assert int(out.iloc[0]) == hash32(b"hello", 1)


def test_arrow_array():
    pa = pytest.importorskip("pyarrow")
    out = vectorized.hash_arrow_array(pa.array(["hello", "Winter is coming", ""]))
    assert out.type == pa.uint64()
    assert out.to_pylist() == EXPECTED_128

    out32 = vectorized.hash_arrow_array(["hello"], algo="murmur3_32")
    assert out32.type == pa.uint32()
    assert out32.to_pylist() == [0x248BFA47]


def test_polars_series():
    pl = pytest.importorskip("polars")
    out = vectorized.hash_polars_series(pl.Series("words", ["hello", "Winter is coming", ""]))
    assert out.name == "words"
    assert out.dtype == pl.UInt64
    assert out.to_list() == EXPECTED_128

    out32 = vectorized.hash_polars_series(["hello"], algo="murmur3_32")
    assert out32.name == "hash"
    assert out32.to_list() == [0x248BFA47]
