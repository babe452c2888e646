"""
Centralized configuration management.
All environment variables and settings are defined here.
"""
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Mantissa bytes in a NUMBER buffer; 2 decimal digits each
MAX_MANTISSA_DIGITS = 40
# Digits Oracle guarantees to be accurate (19 mantissa bytes)
ACCURATE_DIGITS = 38


class Settings(BaseSettings):
    """Library settings loaded from environment variables."""
    
    log_level: str = Field(default="INFO", alias="OCINUMBER_LOG_LEVEL")
    max_precision: int = Field(default=ACCURATE_DIGITS, alias="OCINUMBER_MAX_PRECISION")
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )
    
    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level is one of the standard levels."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v_upper
    
    @field_validator("max_precision")
    @classmethod
    def validate_max_precision(cls, v):
        """Validate precision fits in the mantissa."""
        if not (1 <= v <= MAX_MANTISSA_DIGITS):
            raise ValueError(f"Max precision must be between 1 and {MAX_MANTISSA_DIGITS}")
        return v


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get library settings singleton.
    
    Returns:
        Settings instance
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings singleton (useful for testing)."""
    global _settings
    _settings = None
