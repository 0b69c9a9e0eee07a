"""
Configuration Module

Environment-based settings via pydantic-settings. Every field can be
overridden with a ``YIELDCALC_``-prefixed environment variable.
"""

from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class YieldCalcConfig(BaseSettings):
    """yieldcalc service configuration"""

    model_config = SettingsConfigDict(env_prefix="YIELDCALC_")

    # API configuration
    api_host: str = "127.0.0.1"
    api_port: int = 5000
    debug: bool = False
    cors_origins: List[str] = [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]

    # Logging configuration
    log_level: str = "INFO"
    log_format: str = "json"  # json or text

    # Upper bound on series length served over HTTP (100 years of days)
    max_projection_days: int = 36500


@lru_cache(maxsize=1)
def get_config() -> YieldCalcConfig:
    """Get the process-wide configuration instance"""
    return YieldCalcConfig()
