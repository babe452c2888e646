"""
Contiguous arrays of NUMBER buffers.
Array binds at the native boundary exchange values packed at a fixed stride of 22 bytes.
"""
from typing import Iterable, Iterator, List, Optional

from ocinumber.codec import decode, encode
from ocinumber.exceptions import CorruptBuffer
from ocinumber.logger import setup_logger
from ocinumber.schema import NUMBER_SIZE, PackedDecimal

logger = setup_logger(__name__)


def pack_array(texts: Iterable[Optional[str]], max_precision: Optional[int] = None) -> bytes:
    """
    Encode decimal texts into one contiguous array buffer.
    
    Args:
        texts: Decimal texts; None and "" become NULL
        max_precision: Maximum number of digits per value (defaults to configured value)
    
    Returns:
        Bytes of length 22 * number of values
    """
    chunks = []
    for text in texts:
        value = encode("" if text is None else text, max_precision=max_precision)
        chunks.append(value.to_bytes())
    
    logger.debug(f"Packed {len(chunks)} NUMBER values")
    return b"".join(chunks)


def iter_buffers(data: bytes) -> Iterator[PackedDecimal]:
    """
    Split a contiguous array buffer into individual values.
    
    Args:
        data: Bytes whose size is a multiple of 22
    
    Yields:
        PackedDecimal per element
    
    Raises:
        CorruptBuffer: If the size is not a multiple of 22
    """
    if len(data) % NUMBER_SIZE:
        raise CorruptBuffer(
            f"Array buffer of {len(data)} bytes is not a multiple of {NUMBER_SIZE}",
            details={"size": len(data), "stride": NUMBER_SIZE}
        )
    
    view = memoryview(data)
    for offset in range(0, len(data), NUMBER_SIZE):
        yield PackedDecimal(raw=bytes(view[offset:offset + NUMBER_SIZE]))


def unpack_array(data: bytes) -> List[str]:
    """
    Decode every element of a contiguous array buffer.
    
    Args:
        data: Bytes whose size is a multiple of 22
    
    Returns:
        Decoded digit streams, "" for NULL elements
    """
    values = [decode(value) for value in iter_buffers(data)]
    logger.debug(f"Unpacked {len(values)} NUMBER values")
    return values
