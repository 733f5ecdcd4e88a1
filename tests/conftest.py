"""Shared pytest fixtures for Gallery API tests."""

import pytest
from pathlib import Path
import tempfile
import shutil
from typing import Generator

from fastapi import FastAPI
from fastapi.testclient import TestClient

from gallery_api.api.gallery_store import GalleryStore
from gallery_api.api.main import create_app
from gallery_api.api.models import GalleryItemPayload
from gallery_api.core.config import GalleryConfig

# Smallest valid PNG (1x1 transparent pixel).
PNG_BYTES = (
    b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\x00\x00\x00\x01\x00\x00\x00\x01"
    b"\x08\x06\x00\x00\x00\x1f\x15\xc4\x89\x00\x00\x00\rIDATx\x9cc\xf8\x0f"
    b"\x00\x00\x01\x01\x00\x05\x18\xd8N\x00\x00\x00\x00IEND\xaeB`\x82"
)


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files.

    Yields:
        Path to temporary directory

    Cleanup:
        Directory is removed after test completes
    """
    temp_path = Path(tempfile.mkdtemp())
    try:
        yield temp_path
    finally:
        shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def png_bytes() -> bytes:
    """Raw bytes of the sample image written to ``images_dir``."""
    return PNG_BYTES


@pytest.fixture
def images_dir(temp_dir: Path) -> Path:
    """Create an images directory holding one sample PNG.

    Returns:
        Path to the images directory
    """
    path = temp_dir / "images"
    path.mkdir()
    (path / "gundam.png").write_bytes(PNG_BYTES)
    return path


@pytest.fixture
def test_config(images_dir: Path) -> GalleryConfig:
    """Create a test configuration pointing at the temporary images directory.

    Returns:
        GalleryConfig instance for testing
    """
    return GalleryConfig(
        _env_file=None,
        images_dir=str(images_dir),
        server_port=8080,
        log_level="DEBUG",
    )


@pytest.fixture
def gallery_store() -> GalleryStore:
    """Create a store holding the three seed items."""
    return GalleryStore.with_seed_items()


@pytest.fixture
def test_app(test_config: GalleryConfig, gallery_store: GalleryStore) -> FastAPI:
    """Build an application around the test config and a fresh store."""
    return create_app(test_config, store=gallery_store)


@pytest.fixture
def test_client(test_app: FastAPI) -> Generator[TestClient, None, None]:
    """Provide a TestClient with the application lifespan running.

    Yields:
        TestClient bound to ``test_app``
    """
    with TestClient(test_app) as client:
        yield client


@pytest.fixture
def sample_payload() -> GalleryItemPayload:
    """A valid create/update payload."""
    return GalleryItemPayload(name="X", image="/images/x.png", detail="d")
