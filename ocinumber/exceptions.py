"""
Custom exceptions for codec error reporting.
"""
from typing import Any, Dict, Optional


class OciNumberException(Exception):
    """Base exception for all NUMBER codec errors."""
    
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        """
        Initialize exception.
        
        Args:
            message: Error message
            details: Additional error details
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class DecodeError(OciNumberException):
    """Raised when a NUMBER buffer cannot be decoded."""
    pass


class CorruptBuffer(DecodeError):
    """Raised when a buffer's length byte or mantissa bytes are out of range."""
    pass


class EncodeError(OciNumberException):
    """Raised when decimal text cannot be encoded."""
    pass


class InvalidDigit(EncodeError):
    """Raised when text contains a character other than 0-9, '-' or '.'."""
    pass


class InvalidFormat(EncodeError):
    """Raised when '-' or '.' is misplaced or duplicated."""
    pass


class PrecisionOverflow(EncodeError):
    """Raised when the value needs more mantissa digits than allowed."""
    pass


class ConfigurationError(OciNumberException):
    """Raised when configuration is invalid."""
    pass
