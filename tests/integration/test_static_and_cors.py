"""Integration tests for static image serving and CORS handling.

Tests cover:
- ``GET /images/{filename}`` — raw file bytes, content type, 404.
- CORS headers on API, error and static responses.
- ``OPTIONS`` preflights on every route, with and without browser headers.
- A custom images URL prefix.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from gallery_api.api.cors import CORS_HEADERS
from gallery_api.api.main import create_app
from gallery_api.core.config import GalleryConfig


def assert_cors(resp) -> None:
    """Assert that *resp* carries the permissive CORS headers."""
    assert resp.headers["access-control-allow-origin"] == "*"
    assert resp.headers["access-control-allow-methods"] == "GET, POST, PUT, DELETE, OPTIONS"
    assert resp.headers["access-control-allow-headers"] == "Content-Type"


# ---------------------------------------------------------------------------
# Static image tests.
# ---------------------------------------------------------------------------


class TestStaticImages:
    """Test GET /images/{filename}."""

    def test_serves_file_bytes(self, test_client, png_bytes):
        """An existing image should be returned byte for byte."""
        resp = test_client.get("/images/gundam.png")
        assert resp.status_code == 200
        assert resp.content == png_bytes
        assert resp.headers["content-type"] == "image/png"

    def test_missing_file(self, test_client):
        """A missing image should return 404."""
        assert test_client.get("/images/missing.png").status_code == 404

    def test_custom_prefix(self, images_dir):
        """The mount should follow images_url_prefix."""
        settings = GalleryConfig(_env_file=None, images_dir=str(images_dir), images_url_prefix="media")
        client = TestClient(create_app(settings))
        assert client.get("/media/gundam.png").status_code == 200
        assert client.get("/images/gundam.png").status_code == 404

    def test_missing_images_dir_is_created(self, temp_dir):
        """A configured images directory that does not exist yet is created."""
        target = temp_dir / "not-yet"
        settings = GalleryConfig(_env_file=None, images_dir=str(target))
        client = TestClient(create_app(settings))
        assert target.is_dir()
        assert client.get("/images/anything.png").status_code == 404


# ---------------------------------------------------------------------------
# CORS header tests.
# ---------------------------------------------------------------------------


class TestCorsHeaders:
    """Every response should carry the CORS headers."""

    @pytest.mark.parametrize(
        ("method", "path"),
        [
            ("GET", "/api/gallery"),
            ("GET", "/api/gallery/1"),
            ("GET", "/api/gallery/99"),
            ("GET", "/api/gallery/abc"),
            ("PATCH", "/api/gallery/1"),
            ("DELETE", "/api/gallery/3"),
            ("GET", "/images/gundam.png"),
            ("GET", "/images/missing.png"),
        ],
    )
    def test_headers_present(self, test_client, method, path):
        """Successful and failed responses alike should be decorated."""
        resp = test_client.request(method, path)
        assert_cors(resp)

    def test_headers_on_create(self, test_client):
        """POST responses should be decorated as well."""
        resp = test_client.post("/api/gallery", json={"name": "X"})
        assert resp.status_code == 201
        assert_cors(resp)

    def test_header_constant(self):
        """The exported header map should match the documented values."""
        assert CORS_HEADERS == {
            "Access-Control-Allow-Origin": "*",
            "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
            "Access-Control-Allow-Headers": "Content-Type",
        }


# ---------------------------------------------------------------------------
# Preflight tests.
# ---------------------------------------------------------------------------


class TestPreflight:
    """Test OPTIONS handling."""

    @pytest.mark.parametrize(
        "path",
        ["/api/gallery", "/api/gallery/1", "/api/gallery/abc", "/images/gundam.png"],
    )
    def test_options_empty_200(self, test_client, path):
        """OPTIONS on any route should return 200 with an empty body."""
        resp = test_client.options(path)
        assert resp.status_code == 200
        assert resp.content == b""
        assert_cors(resp)

    def test_browser_preflight(self, test_client):
        """A real browser preflight should get the same answer."""
        resp = test_client.options(
            "/api/gallery/1",
            headers={
                "Origin": "http://localhost:3000",
                "Access-Control-Request-Method": "PUT",
                "Access-Control-Request-Headers": "Content-Type",
            },
        )
        assert resp.status_code == 200
        assert resp.content == b""
        assert_cors(resp)

    def test_options_does_not_touch_store(self, test_client):
        """A preflight must not reach the route handlers."""
        test_client.options("/api/gallery/1")
        assert len(test_client.get("/api/gallery").json()) == 3
