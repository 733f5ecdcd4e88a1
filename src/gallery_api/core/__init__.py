"""Core configuration and logging for the Gallery API.

- **GalleryConfig**: Configuration management using Pydantic Settings
- **config**: Global configuration instance (loads from environment variables)
- **configure_logging**: Root logger setup shared by the CLI and the app
"""

from gallery_api.core.config import GalleryConfig, config
from gallery_api.core.logging_config import configure_logging

__all__ = [
    "GalleryConfig",
    "config",
    "configure_logging",
]
