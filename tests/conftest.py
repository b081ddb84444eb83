"""Shared test fixtures."""

from __future__ import annotations

import io

import pytest
from PIL import Image

from models import ImageAttributes, PhotoUpload


def png_bytes(size=(64, 48), color=(180, 140, 90)) -> bytes:
    buf = io.BytesIO()
    Image.new("RGB", size, color).save(buf, format="PNG")
    return buf.getvalue()


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Keep the error log out of the repo and never hit a real model."""
    monkeypatch.setenv("ERROR_LOG", str(tmp_path / "last_error.log"))
    monkeypatch.setenv("CLASSIFIER_BACKEND", "offline")
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)


@pytest.fixture
def error_log(tmp_path):
    return tmp_path / "last_error.log"


@pytest.fixture
def make_photo(tmp_path):
    def _make(name: str, data: bytes | None = None) -> PhotoUpload:
        path = tmp_path / name
        path.write_bytes(png_bytes() if data is None else data)
        return PhotoUpload(filename=name, path=str(path))
    return _make


@pytest.fixture
def baptism_photo() -> ImageAttributes:
    return ImageAttributes(name="baptism_sunday.jpg", size_bytes=204800)
