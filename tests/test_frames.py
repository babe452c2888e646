"""
Unit tests for pandas column helpers.
"""
import logging

import pandas as pd
import pytest

from ocinumber.codec import encode
from ocinumber.exceptions import ConfigurationError, CorruptBuffer, InvalidDigit
from ocinumber.frames import decode_column, encode_column
from ocinumber.schema import NUMBER_SIZE, PackedDecimal

CORRUPT = bytes([21]) + bytes(NUMBER_SIZE - 1)


def test_decode_column():
    """Test buffers decode and NULL/missing become None."""
    series = pd.Series(
        [encode("12.34").to_bytes(), PackedDecimal.null(), None, encode("-5")],
        name="amount",
    )
    result = decode_column(series)
    assert result.tolist() == ["1234", None, None, "-5"]
    assert result.name == "amount"
    assert result.index.equals(series.index)


def test_decode_column_raise():
    """Test corrupt buffers raise by default."""
    with pytest.raises(CorruptBuffer):
        decode_column(pd.Series([CORRUPT]))


def test_decode_column_coerce(caplog):
    """Test corrupt buffers become None and are logged."""
    series = pd.Series([encode("7").to_bytes(), CORRUPT], index=["a", "b"])
    with caplog.at_level(logging.WARNING, logger="ocinumber.frames"):
        result = decode_column(series, errors="coerce")
    assert result.tolist() == ["7", None]
    assert "'b'" in caplog.text


def test_encode_column():
    """Test texts encode and missing values become NULL buffers."""
    result = encode_column(pd.Series(["-5", None, float("nan"), ""]))
    null = PackedDecimal.null().to_bytes()
    assert result.tolist() == [encode("-5").to_bytes(), null, null, null]


def test_encode_column_raise():
    """Test invalid text raises by default."""
    with pytest.raises(InvalidDigit):
        encode_column(pd.Series(["1", "abc"]))


def test_encode_column_coerce():
    """Test invalid text becomes None with errors='coerce'."""
    result = encode_column(pd.Series(["1", "abc", "1" * 39]), errors="coerce")
    assert result.tolist() == [encode("1").to_bytes(), None, None]


def test_encode_column_precision():
    """Test the precision limit is forwarded."""
    result = encode_column(pd.Series(["1" * 40]), max_precision=40)
    assert PackedDecimal(raw=result.iloc[0]).length == 20


def test_invalid_policy():
    """Test unknown error policies are rejected."""
    with pytest.raises(ConfigurationError):
        decode_column(pd.Series([]), errors="ignore")
    with pytest.raises(ConfigurationError):
        encode_column(pd.Series([]), errors="ignore")


def test_decode_column_coerce_non_buffer():
    """Test values that are not buffers become None with errors='coerce'."""
    result = decode_column(pd.Series([12345, "12", encode("7").to_bytes()]), errors="coerce")
    assert result.tolist() == [None, None, "7"]


def test_decode_column_raise_non_buffer():
    """Test values that are not buffers raise by default."""
    with pytest.raises(CorruptBuffer):
        decode_column(pd.Series(["12"]))
