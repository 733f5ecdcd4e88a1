"""Configuration management for the Gallery API.

This module provides centralized configuration management using Pydantic Settings.
All configuration is loaded from environment variables with the GALLERY_ prefix,
allowing easy customization without code changes.

Environment Variable Loading
-----------------------------
Configuration values are loaded in the following priority order:
1. Environment variables (GALLERY_* prefix)
2. .env file in the project root
3. Default values defined in GalleryConfig

Example .env file:
    GALLERY_SERVER_PORT=8080
    GALLERY_IMAGES_DIR=images
    GALLERY_LOG_LEVEL=DEBUG

Global Configuration Instance
------------------------------
A global `config` instance is created automatically at module import time.
The images directory is not created here; ``create_app()`` creates it when
the static mount is set up.

Usage Example
-------------
    from gallery_api.core.config import config

    print(config.server_port)
    print(config.images_dir)
"""

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class GalleryConfig(BaseSettings):
    """Main configuration for the Gallery API.

    Attributes
    ----------
    Server:
        server_host : str
            Bind address for uvicorn (0.0.0.0 for local network)
        server_port : int
            TCP port (1024-65535)

    Static images:
        images_dir : Path
            Directory whose files are served under ``images_url_prefix``
        images_url_prefix : str
            URL prefix of the static mount, always starting with ``/``

    Logging:
        log_level : Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
            Root log level applied by :func:`configure_logging`

    Examples
    --------
        >>> custom = GalleryConfig(server_port=9000, images_dir="/srv/images")
        >>> custom.images_url_prefix
        '/images'
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="GALLERY_",
        case_sensitive=False,
        extra="ignore",
    )

    # Server settings
    server_host: str = Field(
        default="0.0.0.0",
        description="Server bind address (0.0.0.0 for local network)",
    )
    server_port: int = Field(
        default=8080,
        description="Server port",
        ge=1024,
        le=65535,
    )

    # Static image settings
    images_dir: Path = Field(
        default=Path("images"),
        description="Directory containing the gallery image files",
    )
    images_url_prefix: str = Field(
        default="/images",
        description="URL prefix under which image files are served",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Root log level",
    )

    @field_validator("images_url_prefix")
    @classmethod
    def _normalise_prefix(cls, value: str) -> str:
        """Force a single leading slash and strip trailing slashes."""
        stripped = value.strip().strip("/")
        if not stripped:
            raise ValueError("images_url_prefix must not be empty")
        return f"/{stripped}"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        if isinstance(value, str):
            return value.upper()
        return value


# Global configuration instance
# Loads values from environment variables (GALLERY_* prefix) and .env file.
config = GalleryConfig()
