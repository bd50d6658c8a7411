"""Test configuration and fixtures for thumbnail_view.

This module provides:
- Synthetic image factories (Pillow, in memory)
- Pipeline and view fixtures with default settings
- API client fixture wrapping the thumbnail route factory
"""

from collections.abc import Callable
from io import BytesIO

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from PIL import Image, ImageDraw

from thumbnail_view import ThumbnailPipeline, ThumbnailSettings, ThumbnailView, create_router

ImageFactory = Callable[..., bytes]


# ============================================================================
# Image Fixtures
# ============================================================================


def render_image(
    size: tuple[int, int] = (400, 200),
    fmt: str = "PNG",
    mode: str = "RGB",
    **save_kwargs: object,
) -> bytes:
    """Render a synthetic test image with a grid and a circle."""
    width, height = size
    img = Image.new("RGB", size, color=(73, 109, 137))
    draw = ImageDraw.Draw(img)

    for x in range(0, width, 20):
        draw.line([(x, 0), (x, height)], fill=(255, 255, 255), width=2)
    for y in range(0, height, 20):
        draw.line([(0, y), (width, y)], fill=(255, 255, 255), width=2)

    radius = min(width, height) // 4
    cx, cy = width // 2, height // 2
    draw.ellipse([cx - radius, cy - radius, cx + radius, cy + radius], fill=(200, 100, 100))

    if mode != "RGB":
        img = img.convert(mode)

    buffer = BytesIO()
    img.save(buffer, format=fmt, **save_kwargs)
    return buffer.getvalue()


@pytest.fixture
def make_image() -> ImageFactory:
    """Provide a factory for encoded synthetic images."""
    return render_image


@pytest.fixture
def jpeg_400x200() -> bytes:
    return render_image((400, 200), "JPEG", quality=90)


@pytest.fixture
def png_400x200() -> bytes:
    return render_image((400, 200), "PNG")


@pytest.fixture
def png_100x100() -> bytes:
    return render_image((100, 100), "PNG")


# ============================================================================
# Pipeline / View Fixtures
# ============================================================================


@pytest.fixture
def settings() -> ThumbnailSettings:
    return ThumbnailSettings()


@pytest.fixture
def pipeline(settings: ThumbnailSettings) -> ThumbnailPipeline:
    return ThumbnailPipeline(settings)


@pytest.fixture
def view(settings: ThumbnailSettings) -> ThumbnailView:
    return ThumbnailView(settings)


@pytest.fixture
def image_store(jpeg_400x200: bytes, png_400x200: bytes) -> dict[str, bytes]:
    """In-memory image source keyed by id."""
    return {
        "landscape.jpg": jpeg_400x200,
        "landscape.png": png_400x200,
        "notes.txt": b"plain text, definitely not an image\n",
    }


@pytest.fixture
def api_client(view: ThumbnailView, image_store: dict[str, bytes]) -> TestClient:
    """Provide FastAPI TestClient for route testing."""
    app = FastAPI()
    app.include_router(create_router(view, image_store.get))

    return TestClient(app)
