"""
Pydantic model for the fixed-size Oracle NUMBER buffer.

Layout (22 bytes):
    0       length       populated mantissa bytes, 0..20; 0xFF marks NULL
    1       exponent     bit 7 set for non-negative values, biased base-100 exponent
    2..21   mantissa     base-100 digits, one per byte, biased by sign
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

NUMBER_SIZE = 22
NULL_LENGTH = 0xFF
MAX_MANTISSA_BYTES = 20

SIGN_BIT = 0x80
EXPONENT_MASK = 0x7F
# Exponent byte of a non-negative value whose base-100 exponent is 0
EXPONENT_BIAS = 0xC0
# Exponent byte Oracle uses for zero
ZERO_EXPONENT = 0x80
# Trailing byte Oracle appends to negative values shorter than 20 mantissa bytes
NEGATIVE_TERMINATOR = 102


def invert_byte(value: int) -> int:
    """One's complement within a single unsigned byte."""
    return value ^ 0xFF


class PackedDecimal(BaseModel):
    """
    Immutable 22-byte Oracle NUMBER value.

    The model only carries bytes; arithmetic lives in ocinumber.codec.
    """
    model_config = ConfigDict(frozen=True)
    
    raw: bytes = Field(
        ...,
        strict=True,
        min_length=NUMBER_SIZE,
        max_length=NUMBER_SIZE,
        description="Raw buffer as exchanged with the native client library"
    )
    
    @classmethod
    def from_bytes(cls, data: bytes) -> "PackedDecimal":
        """
        Copy a native buffer into a new value.
        
        Shorter input is zero-padded and longer input truncated to 22 bytes.
        
        Args:
            data: Bytes-like buffer
        
        Returns:
            PackedDecimal holding a copy of the data
        """
        buf = bytearray(NUMBER_SIZE)
        chunk = bytes(data[:NUMBER_SIZE])
        buf[:len(chunk)] = chunk
        return cls(raw=bytes(buf))
    
    @classmethod
    def null(cls) -> "PackedDecimal":
        """Return the NULL sentinel."""
        return cls(raw=bytes([NULL_LENGTH]) + bytes(NUMBER_SIZE - 1))
    
    @classmethod
    def from_string(cls, text: str, max_precision: Optional[int] = None) -> "PackedDecimal":
        """Encode decimal text; see ocinumber.codec.encode."""
        from ocinumber.codec import encode
        return encode(text, max_precision=max_precision)
    
    @property
    def length(self) -> int:
        return self.raw[0]
    
    @property
    def is_null(self) -> bool:
        return self.raw[0] == NULL_LENGTH
    
    @property
    def is_zero(self) -> bool:
        return self.raw[0] == 0
    
    @property
    def negative(self) -> bool:
        """True when the sign bit of the exponent byte is clear."""
        if self.is_null or self.is_zero:
            return False
        return not self.raw[1] & SIGN_BIT
    
    @property
    def exponent(self) -> Optional[int]:
        """
        Base-100 exponent: the number of base-100 digit pairs before the point.
        
        None for NULL and zero, which carry no exponent.
        """
        if self.is_null or self.is_zero:
            return None
        exponent_byte = self.raw[1]
        if self.negative:
            exponent_byte = invert_byte(exponent_byte)
        return (exponent_byte & EXPONENT_MASK) - (EXPONENT_BIAS & EXPONENT_MASK)
    
    @property
    def mantissa(self) -> bytes:
        """
        Populated mantissa bytes (empty for NULL and zero).
        
        The 102 terminator Oracle appends to negative values is not included.
        """
        if self.is_null:
            return b""
        mantissa = self.raw[2:2 + min(self.length, MAX_MANTISSA_BYTES)]
        if self.negative and len(mantissa) > 1 and mantissa[-1] == NEGATIVE_TERMINATOR:
            mantissa = mantissa[:-1]
        return mantissa
    
    def to_bytes(self) -> bytes:
        return self.raw
    
    def __str__(self) -> str:
        from ocinumber.codec import decode
        return decode(self)
