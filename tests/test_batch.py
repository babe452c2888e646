"""
Unit tests for NUMBER array packing.
"""
import pytest

from ocinumber.batch import iter_buffers, pack_array, unpack_array
from ocinumber.exceptions import CorruptBuffer, InvalidDigit
from ocinumber.schema import NUMBER_SIZE, PackedDecimal


def test_pack_array_stride():
    """Test each value occupies 22 bytes."""
    data = pack_array(["1", None, "-5"])
    assert len(data) == 3 * NUMBER_SIZE
    assert data[NUMBER_SIZE] == 0xFF


def test_pack_unpack():
    """Test array values survive packing."""
    data = pack_array(["1", None, "", "-5", "12.34"])
    assert unpack_array(data) == ["1", "", "", "-5", "1234"]


def test_pack_array_empty():
    """Test an empty input packs to no bytes."""
    assert pack_array([]) == b""
    assert unpack_array(b"") == []


def test_pack_array_propagates_errors():
    """Test invalid text stops packing."""
    with pytest.raises(InvalidDigit):
        pack_array(["1", "x"])


def test_iter_buffers():
    """Test elements come back as PackedDecimal values."""
    values = list(iter_buffers(pack_array(["7", "-7"])))
    assert all(isinstance(value, PackedDecimal) for value in values)
    assert [value.negative for value in values] == [False, True]


def test_unpack_array_bad_size():
    """Test a size that is not a multiple of 22 is corrupt."""
    with pytest.raises(CorruptBuffer) as exc_info:
        unpack_array(bytes(NUMBER_SIZE + 1))
    assert exc_info.value.details["size"] == NUMBER_SIZE + 1


def test_unpack_array_corrupt_element():
    """Test a corrupt element is reported."""
    data = pack_array(["1"]) + bytes([21]) + bytes(NUMBER_SIZE - 1)
    with pytest.raises(CorruptBuffer):
        unpack_array(data)
