"""Pydantic request and response models for the Gallery API.

These models define the JSON schema for every API endpoint.  FastAPI uses
them for request decoding, serialisation, and OpenAPI documentation
generation.

Models
------
GalleryItem
    A stored gallery record — the response body of every item endpoint.
GalleryItemPayload
    Body of ``POST /api/gallery`` and ``PUT /api/gallery/{id}``.
DeleteResponse
    Confirmation returned by ``DELETE /api/gallery/{id}``.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class GalleryItemPayload(BaseModel):
    """Request body for creating or replacing a gallery item.

    No validation is applied beyond JSON decoding: a missing field or a JSON
    ``null`` decodes to the empty string, while a value of any other wrong
    JSON type (for example a number for ``name``) is a decoding error.  Any
    ``id`` sent by the client is ignored, as are unknown keys.

    Attributes:
        name: Display name of the item.
        image: Image path, usually under ``/images/``.  Not checked against
            the images directory.
        detail: Free-text description.
    """

    model_config = ConfigDict(extra="ignore")

    name: str = Field(default="", description="Display name of the item.")
    image: str = Field(default="", description="Image path (e.g. '/images/gundam.png').")
    detail: str = Field(default="", description="Free-text description.")

    @field_validator("name", "image", "detail", mode="before")
    @classmethod
    def _null_as_empty(cls, value):
        if value is None:
            return ""
        return value


class GalleryItem(BaseModel):
    """A gallery record as held by the store.

    Fields are declared in wire order: ``id`` first.

    Attributes:
        id: Store-assigned identifier, unique among present items and never
            reused after deletion.
        name: Display name of the item.
        image: Image path.
        detail: Free-text description.
    """

    id: int = Field(..., description="Store-assigned item identifier.")
    name: str = Field(default="", description="Display name of the item.")
    image: str = Field(default="", description="Image path (e.g. '/images/gundam.png').")
    detail: str = Field(default="", description="Free-text description.")


class DeleteResponse(BaseModel):
    """Response body for ``DELETE /api/gallery/{id}``."""

    message: str = Field(default="Deleted successfully")
    id: int = Field(..., description="Identifier of the removed item.")
