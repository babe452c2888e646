"""
pandas helpers for NUMBER columns.
Applies the codec element-wise with a caller-selected error policy.
"""
from typing import Any, Callable, Optional

import pandas as pd

from ocinumber.codec import decode, encode
from ocinumber.exceptions import ConfigurationError, OciNumberException
from ocinumber.logger import setup_logger
from ocinumber.schema import PackedDecimal

logger = setup_logger(__name__)

ERROR_POLICIES = ("raise", "coerce")


def _validate_policy(errors: str) -> None:
    if errors not in ERROR_POLICIES:
        raise ConfigurationError(
            f"errors must be one of {ERROR_POLICIES}, got {errors!r}",
            details={"errors": errors}
        )


def _is_missing(value: Any) -> bool:
    return value is None or value is pd.NA or (isinstance(value, float) and pd.isna(value))


def _apply(series: pd.Series, func: Callable[[Any], Any], errors: str, action: str) -> pd.Series:
    """Run func over non-missing values, honouring the error policy."""
    results = []
    failed = 0
    missing = 0
    for index, value in series.items():
        if _is_missing(value):
            missing += 1
            results.append(func(None))
            continue
        try:
            results.append(func(value))
        except OciNumberException as e:
            if errors == "raise":
                raise
            failed += 1
            logger.warning(f"Failed to {action} value at index {index!r}: {e.message}")
            results.append(None)
    
    logger.info(
        f"{action.capitalize()}d {len(series)} values "
        f"({missing} missing, {failed} coerced to None)"
    )
    return pd.Series(results, index=series.index, name=series.name, dtype=object)


def decode_column(series: pd.Series, errors: str = "raise") -> pd.Series:
    """
    Decode a column of NUMBER buffers into digit streams.
    
    Args:
        series: Values that are PackedDecimal, bytes-like, or missing
        errors: "raise" to propagate codec errors, "coerce" to turn them into None
    
    Returns:
        Series of digit strings; NULL buffers and missing values become None
    
    Raises:
        ConfigurationError: If errors is not a known policy
        CorruptBuffer: On a malformed buffer when errors="raise"
    """
    _validate_policy(errors)
    
    def _decode(value: Any) -> Optional[str]:
        if value is None:
            return None
        return decode(value) or None
    
    return _apply(series, _decode, errors, "decode")


def encode_column(
    series: pd.Series,
    errors: str = "raise",
    max_precision: Optional[int] = None
) -> pd.Series:
    """
    Encode a column of decimal texts into raw NUMBER buffers.
    
    Args:
        series: Decimal strings or missing values
        errors: "raise" to propagate codec errors, "coerce" to turn them into None
        max_precision: Maximum number of digits (defaults to configured value)
    
    Returns:
        Series of 22-byte values; missing values become the NULL buffer
    
    Raises:
        ConfigurationError: If errors is not a known policy
        EncodeError: On invalid text when errors="raise"
    """
    _validate_policy(errors)
    
    def _encode(value: Any) -> bytes:
        if value is None:
            return PackedDecimal.null().to_bytes()
        return encode(value, max_precision=max_precision).to_bytes()
    
    return _apply(series, _encode, errors, "encode")
