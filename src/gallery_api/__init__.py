"""Gallery API - in-memory gallery item CRUD service with static image serving."""

__version__ = "0.1.0"

from gallery_api.core.config import GalleryConfig, config

__all__ = [
    "GalleryConfig",
    "config",
]
