# -*- coding: utf-8 -*-
"""
GoodBuy Valuation Reports - Configuration

This module uses pydantic-settings to manage global configuration with automatic
loading from environment variables and .env files.

Covers:
- Chart rendering resolution and print quality
- Chart cache sizing and expiry
- Batch chart generation worker pool
- Report branding defaults
"""

from pathlib import Path
from typing import Optional

from loguru import logger
from pydantic import Field, ConfigDict
from pydantic_settings import BaseSettings


# Determine .env file priority: prioritize current working directory, fallback to project root
PROJECT_ROOT: Path = Path(__file__).resolve().parent.parent
CWD_ENV: Path = Path.cwd() / ".env"
ENV_FILE: str = str(CWD_ENV if CWD_ENV.exists() else (PROJECT_ROOT / ".env"))


def _check_env_file() -> None:
    """
    Warn when no .env file is present. All settings have working defaults,
    so the report pipeline still runs without one.
    """
    env_path = Path(ENV_FILE)
    if not env_path.exists():
        env_example = PROJECT_ROOT / ".env.example"
        if env_example.exists():
            logger.debug(f".env not found, defaults in use (template available at {env_example})")


_check_env_file()


class Settings(BaseSettings):
    """
    Global configuration with automatic loading from .env and environment variables.
    All variable names use UPPERCASE for consistency and easy environment overrides.
    """

    # ================== Section 1: Chart Rendering ====================
    CHART_WIDTH: int = Field(
        1200,
        description="Logical chart width in pixels (before device pixel ratio scaling)"
    )
    CHART_HEIGHT: int = Field(
        800,
        description="Logical chart height in pixels (before device pixel ratio scaling)"
    )
    CHART_DPI: int = Field(
        300,
        description="Print resolution recorded in generated images (300 = print quality)"
    )
    CHART_DEVICE_PIXEL_RATIO: float = Field(
        2.0,
        description="Supersampling factor applied to the logical chart size"
    )
    CHART_BACKGROUND_COLOR: str = Field(
        "#ffffff",
        description="Figure background color for rendered charts"
    )
    CHART_QUALITY: str = Field(
        "print",
        description="Quality preset: low | medium | high | print"
    )

    # ================== Section 2: Chart Cache ====================
    CHART_CACHE_MAX_SIZE: int = Field(
        100,
        description="Maximum number of rendered charts kept in memory (oldest inserted evicted first)"
    )
    CHART_CACHE_TTL_SECONDS: float = Field(
        1800.0,
        description="Seconds before a cached chart expires (0 disables expiry)"
    )
    STYLESHEET_CACHE_MAX_SIZE: int = Field(
        32,
        description="Maximum number of assembled stylesheets (tier plus custom CSS) kept in memory"
    )

    # ================== Section 3: Batch Generation ====================
    CHART_BATCH_MAX_WORKERS: int = Field(
        4,
        description="Thread pool size for best-effort batch chart generation"
    )

    # ================== Section 4: Branding ====================
    BRAND_COMPANY_NAME: str = Field(
        "GoodBuy Business Analysis",
        description="Company name shown in report branding"
    )
    BRAND_LOGO_URL: Optional[str] = Field(
        None,
        description="Optional logo URL embedded in report headers"
    )

    # ================== Section 5: Logging ====================
    LOG_LEVEL: str = Field(
        "INFO",
        description="Minimum log level for the command-line entry point"
    )

    # Pydantic Settings Configuration
    model_config = ConfigDict(
        env_file=ENV_FILE,
        env_prefix="",
        case_sensitive=False,
        extra="allow"
    )


# Create global configuration instance
settings = Settings()


def reload_settings() -> Settings:
    """
    Reload configuration from .env file and environment variables.

    Returns:
        Settings: Newly created configuration instance
    """
    global settings
    settings = Settings()
    return settings
