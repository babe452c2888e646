"""
Oracle NUMBER packed-decimal codec.

This package contains:
- batch: Packing of contiguous NUMBER buffer arrays
- codec: Encoding/decoding between 22-byte buffers and decimal text
- config: Library configuration and settings
- exceptions: Custom exception classes
- frames: pandas column helpers
- logger: Logging configuration
- schema: PackedDecimal value model
"""
from ocinumber.codec import decode, encode
from ocinumber.schema import NUMBER_SIZE, PackedDecimal

__all__ = ["NUMBER_SIZE", "PackedDecimal", "decode", "encode"]
