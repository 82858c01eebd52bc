from __future__ import annotations

import io
from pathlib import Path

import pytest
from PIL import Image, ImageDraw


def make_png(width: int, height: int, color=(255, 0, 0, 255)) -> bytes:
    image = Image.new("RGBA", (width, height), (0, 0, 0, 0))
    draw = ImageDraw.Draw(image)
    draw.ellipse((10, 10, width - 10, height - 10), fill=color, outline=(0, 0, 0, 255), width=3)
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def red_circle_png() -> bytes:
    return make_png(100, 100)


@pytest.fixture
def wide_png() -> bytes:
    return make_png(200, 100, color=(0, 0, 255, 255))


@pytest.fixture
def red_circle_path(tmp_path: Path, red_circle_png: bytes) -> Path:
    path = tmp_path / "circle.png"
    path.write_bytes(red_circle_png)
    return path


@pytest.fixture
def png_factory():
    return make_png
