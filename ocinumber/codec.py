"""
Codec between Oracle NUMBER buffers and decimal text.

Both directions are pure functions over caller-owned values: no logging,
no shared state, every error raised to the caller.
"""
from typing import Optional, Union

from ocinumber.config import MAX_MANTISSA_DIGITS, get_settings
from ocinumber.exceptions import CorruptBuffer, InvalidDigit, InvalidFormat, PrecisionOverflow
from ocinumber.schema import (
    EXPONENT_BIAS,
    MAX_MANTISSA_BYTES,
    NEGATIVE_TERMINATOR,
    NULL_LENGTH,
    NUMBER_SIZE,
    SIGN_BIT,
    ZERO_EXPONENT,
    PackedDecimal,
    invert_byte,
)

DIGITS = "0123456789"
TEXT_CHARS = frozenset(DIGITS + "-.")

# Mantissa byte bias: non-negative digits are stored as digit + 1,
# negative digits as 101 - digit
POSITIVE_DIGIT_OFFSET = 1
NEGATIVE_DIGIT_BASE = 101

Buffer = Union[PackedDecimal, bytes, bytearray, memoryview]


def _mantissa_digit(value: int, negative: bool, position: int) -> int:
    """Unbias one mantissa byte into a base-100 digit."""
    if negative:
        digit = NEGATIVE_DIGIT_BASE - value
    else:
        digit = value - POSITIVE_DIGIT_OFFSET
    if not (0 <= digit <= 99):
        raise CorruptBuffer(
            f"Mantissa byte {value} at position {position} is out of range",
            details={"position": position, "value": value, "negative": negative}
        )
    return digit


def _mantissa_byte(digit: int, negative: bool) -> int:
    """Bias one base-100 digit into a mantissa byte."""
    if negative:
        return NEGATIVE_DIGIT_BASE - digit
    return digit + POSITIVE_DIGIT_OFFSET


def _exponent_byte(dot: int, negative: bool) -> int:
    """
    Build the exponent byte for a value with `dot` decimal digits before the point.

    The base-100 exponent is ceil(dot / 2). Negative values store the
    one's complement of the non-negative byte, which also clears the sign bit.
    """
    exponent = (dot + 1) // 2
    value = EXPONENT_BIAS + exponent
    if negative:
        return invert_byte(value)
    return value


def decode(buffer: Buffer) -> str:
    """
    Decode a NUMBER buffer into its decimal digit stream.

    The result carries a leading '-' for negative values and no decimal
    point: the point position is implied by the exponent, which callers
    read from PackedDecimal.exponent. The single '0' that encode appends
    to odd-length input is dropped again.

    Args:
        buffer: PackedDecimal or bytes-like object with at least length + 2 bytes

    Returns:
        Digit stream, "0" for zero, "" for NULL

    Raises:
        CorruptBuffer: If the buffer is not bytes-like, the length byte or a
            mantissa byte is out of range, or the buffer is shorter than its
            length byte claims
    """
    if isinstance(buffer, PackedDecimal):
        data = buffer.to_bytes()
    elif isinstance(buffer, (bytes, bytearray, memoryview)):
        data = bytes(buffer)
    else:
        raise CorruptBuffer(
            "NUMBER buffer must be bytes-like or PackedDecimal",
            details={"type": type(buffer).__name__}
        )
    if not data:
        raise CorruptBuffer("Empty NUMBER buffer", details={"size": 0})

    length = data[0]
    if length == NULL_LENGTH:
        return ""
    if length > MAX_MANTISSA_BYTES:
        raise CorruptBuffer(
            f"Length byte {length} exceeds {MAX_MANTISSA_BYTES} mantissa bytes",
            details={"length": length}
        )
    if len(data) < length + 2:
        raise CorruptBuffer(
            f"Buffer of {len(data)} bytes is too short for {length} mantissa bytes",
            details={"length": length, "size": len(data)}
        )
    if length == 0:
        return "0"

    negative = not data[1] & SIGN_BIT
    mantissa = data[2:2 + length]
    if negative and length > 1 and mantissa[-1] == NEGATIVE_TERMINATOR:
        mantissa = mantissa[:-1]

    digits = "".join(
        f"{_mantissa_digit(value, negative, i):02d}"
        for i, value in enumerate(mantissa)
    )
    if digits.endswith("0"):
        digits = digits[:-1]

    return "-" + digits if negative else digits


def _split_text(text: str):
    """
    Validate decimal text and split it into sign, digits and point position.

    Returns:
        Tuple of (negative, digits, dot)
    """
    for position, char in enumerate(text):
        if char not in TEXT_CHARS:
            raise InvalidDigit(
                f"Invalid character {char!r} at position {position}",
                details={"text": text, "position": position, "char": char}
            )

    negative = text.startswith("-")
    body = text[1:] if negative else text
    if "-" in body:
        raise InvalidFormat(
            "Sign must appear once, at the start",
            details={"text": text, "position": text.index("-", 1)}
        )

    integer_part, point, fraction = body.partition(".")
    if "." in fraction:
        raise InvalidFormat("More than one decimal point", details={"text": text})
    if not integer_part:
        raise InvalidFormat("Missing integer digits", details={"text": text})
    if point and not fraction:
        raise InvalidFormat("Missing fractional digits after decimal point", details={"text": text})

    return negative, integer_part + fraction, len(integer_part)


def encode(text: str, max_precision: Optional[int] = None) -> PackedDecimal:
    """
    Encode decimal text into a NUMBER buffer.

    Leading zeros are not stripped; they take part in exponent placement.

    Args:
        text: Optional '-', integer digits, optional '.' and fractional digits.
            Empty string encodes NULL.
        max_precision: Maximum number of digits (defaults to configured value)

    Returns:
        PackedDecimal value

    Raises:
        InvalidDigit: If text contains a character other than 0-9, '-' or '.'
        InvalidFormat: If '-' or '.' is misplaced or duplicated
        PrecisionOverflow: If text has more digits than max_precision allows
    """
    if not isinstance(text, str):
        raise InvalidFormat(
            "Decimal text must be a string",
            details={"type": type(text).__name__}
        )
    if text == "":
        return PackedDecimal.null()

    negative, digits, dot = _split_text(text)

    if not digits.strip("0"):
        raw = bytes([0, ZERO_EXPONENT])
        return PackedDecimal(raw=raw + bytes(NUMBER_SIZE - len(raw)))

    limit = max_precision if max_precision is not None else get_settings().max_precision
    limit = min(limit, MAX_MANTISSA_DIGITS)
    if len(digits) > limit:
        raise PrecisionOverflow(
            f"{len(digits)} digits exceed the maximum precision of {limit}",
            details={"text": text, "digits": len(digits), "max_precision": limit}
        )

    # Right-pad so digits pack two per byte; the extra digit is fractional
    if len(digits) % 2:
        digits += "0"

    mantissa = bytes(
        _mantissa_byte(int(digits[i:i + 2]), negative)
        for i in range(0, len(digits), 2)
    )
    raw = bytes([len(mantissa), _exponent_byte(dot, negative)]) + mantissa
    return PackedDecimal(raw=raw + bytes(NUMBER_SIZE - len(raw)))
