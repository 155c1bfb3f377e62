# /tests/test_storage_service.py

import io
import struct
from types import SimpleNamespace

import pytest
from PIL import Image

from qa_suite.services import storage_service

SESSION_A = {"X-Session-Id": "browser-a"}


def _png_bytes() -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", (4, 4), color="red").save(buffer, format="PNG")
    return buffer.getvalue()


def _png_with_bad_idat_crc() -> bytes:
    content = bytearray(_png_bytes())
    offset = 8
    while True:
        length, chunk_type = struct.unpack(">I4s", content[offset:offset + 8])
        crc_offset = offset + 8 + length
        if chunk_type == b"IDAT":
            content[crc_offset] ^= 0xFF
            return bytes(content)
        offset = crc_offset + 4


@pytest.fixture
def uploads_dir(tmp_path, monkeypatch):
    monkeypatch.setattr(storage_service, "SCREENSHOT_UPLOADS_DIR", str(tmp_path))
    monkeypatch.setattr(storage_service, "PUBLIC_BASE_URL", "http://qa.test")
    return tmp_path


def test_safe_basename_strips_paths_and_odd_characters():
    assert storage_service._safe_basename("../../etc/my shot!.png") == "my_shot_.png"
    assert storage_service._safe_basename("") == "screenshot.png"


def test_upload_stores_file_and_returns_public_url(client, uploads_dir):
    content = _png_bytes()

    response = client.post(
        "/api/uploads/screenshots",
        files={"screenshot": ("bug.png", content, "image/png")},
        headers=SESSION_A,
    )

    assert response.status_code == 201
    body = response.json()
    assert body["filename"].endswith("-bug.png")
    assert body["url"] == f"http://qa.test/uploads/{body['filename']}"
    assert (uploads_dir / body["filename"]).read_bytes() == content


def test_unsupported_extension_is_rejected(client, uploads_dir):
    response = client.post(
        "/api/uploads/screenshots",
        files={"screenshot": ("notes.txt", b"hello", "text/plain")},
        headers=SESSION_A,
    )

    assert response.status_code == 422
    assert "Unsupported screenshot type" in response.json()["detail"]
    assert list(uploads_dir.iterdir()) == []


def test_bytes_that_are_not_an_image_are_rejected(client, uploads_dir):
    response = client.post(
        "/api/uploads/screenshots",
        files={"screenshot": ("fake.png", b"definitely not a png", "image/png")},
        headers=SESSION_A,
    )

    assert response.status_code == 422
    assert "not a valid image" in response.json()["detail"]


def test_oversized_upload_is_rejected(client, uploads_dir, monkeypatch):
    monkeypatch.setattr(storage_service, "MAX_SCREENSHOT_BYTES", 10)

    response = client.post(
        "/api/uploads/screenshots",
        files={"screenshot": ("big.png", _png_bytes(), "image/png")},
        headers=SESSION_A,
    )

    assert response.status_code == 422
    assert "at most" in response.json()["detail"]


def test_png_with_a_damaged_chunk_is_a_validation_error(client, uploads_dir):
    response = client.post(
        "/api/uploads/screenshots",
        files={"screenshot": ("broken.png", _png_with_bad_idat_crc(), "image/png")},
        headers=SESSION_A,
    )

    assert response.status_code == 422
    assert "not a valid image" in response.json()["detail"]
    assert list(uploads_dir.iterdir()) == []


def test_same_name_in_the_same_millisecond_keeps_both_files(client, uploads_dir, monkeypatch):
    monkeypatch.setattr(storage_service, "time", SimpleNamespace(time=lambda: 1700000000.0))
    first_content = _png_bytes()
    buffer = io.BytesIO()
    Image.new("RGB", (2, 2), color="blue").save(buffer, format="PNG")
    second_content = buffer.getvalue()

    first = client.post(
        "/api/uploads/screenshots", files={"screenshot": ("bug.png", first_content, "image/png")}, headers=SESSION_A
    ).json()
    second = client.post(
        "/api/uploads/screenshots", files={"screenshot": ("bug.png", second_content, "image/png")}, headers=SESSION_A
    ).json()

    assert first["filename"] != second["filename"]
    assert (uploads_dir / first["filename"]).read_bytes() == first_content
    assert (uploads_dir / second["filename"]).read_bytes() == second_content
