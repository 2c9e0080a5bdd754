import asyncio

import pytest

from models import UnboxingPhoto
from services import storage_service
from services.errors import InvalidInput
from services.storage_service import resolve_upload_path

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64


def _upload(client, headers, content=PNG_BYTES, content_type="image/png", filename="haul.png", caption=None):
    data = {"caption": caption} if caption is not None else {}
    return client.post(
        "/api/unboxing/upload",
        headers=headers,
        files={"image": (filename, content, content_type)},
        data=data,
    )


def test_upload_stores_file_and_row(client, admin_headers):
    response = _upload(client, admin_headers, caption="Proof unboxing")

    assert response.status_code == 201
    photo = response.json()["photo"]
    assert photo["image_url"].startswith("/uploads/unboxing/")
    assert photo["image_url"].endswith(".png")
    assert photo["caption"] == "Proof unboxing"
    assert photo["user_name"] == "Admin User"
    assert resolve_upload_path(photo["image_url"]).read_bytes() == PNG_BYTES


def test_gallery_is_public_and_newest_first(client, admin_headers):
    first = _upload(client, admin_headers, caption="one").json()["photo"]
    second = _upload(client, admin_headers, caption="two").json()["photo"]

    response = client.get("/api/unboxing")

    assert response.status_code == 200
    assert [p["id"] for p in response.json()["photos"]] == [second["id"], first["id"]]


def test_upload_rejects_non_image(client, admin_headers, db):
    response = _upload(client, admin_headers, content=b"%PDF-1.4", content_type="application/pdf", filename="a.pdf")

    assert response.status_code == 400
    assert response.json()["message"] == "Only image files (JPEG, PNG, WebP) are allowed"
    assert db.query(UnboxingPhoto).count() == 0


def test_upload_rejects_oversized_file(client, admin_headers, db):
    response = _upload(client, admin_headers, content=b"\x00" * 4096)

    assert response.status_code == 400
    assert response.json()["message"] == "File too large"
    assert db.query(UnboxingPhoto).count() == 0


def test_upload_requires_file(client, admin_headers):
    response = client.post("/api/unboxing/upload", headers=admin_headers, data={"caption": "no file"})

    assert response.status_code == 400
    assert response.json()["message"] == "Image file is required"


def test_upload_is_admin_only(client, customer_headers):
    assert _upload(client, customer_headers).status_code == 403


def test_delete_removes_row_and_file(client, admin_headers, db):
    photo = _upload(client, admin_headers).json()["photo"]
    path = resolve_upload_path(photo["image_url"])
    assert path.exists()

    response = client.delete(f"/api/unboxing/{photo['id']}", headers=admin_headers)

    assert response.status_code == 200
    assert not path.exists()
    assert db.query(UnboxingPhoto).count() == 0


def test_delete_survives_missing_file(client, admin_headers, db):
    photo = _upload(client, admin_headers).json()["photo"]
    resolve_upload_path(photo["image_url"]).unlink()

    response = client.delete(f"/api/unboxing/{photo['id']}", headers=admin_headers)

    assert response.status_code == 200
    assert db.query(UnboxingPhoto).count() == 0


def test_delete_missing_photo_is_404(client, admin_headers):
    assert client.delete("/api/unboxing/77", headers=admin_headers).status_code == 404


class EndlessUpload:
    """Upload stand-in that never runs out of bytes."""
    filename = "endless.png"
    content_type = "image/png"

    def __init__(self):
        self.bytes_read = 0

    async def read(self, size=-1):
        self.bytes_read += size
        return b"\x00" * size


def test_oversized_upload_stops_reading_at_the_cap():
    upload = EndlessUpload()

    with pytest.raises(InvalidInput, match="File too large"):
        asyncio.run(storage_service.save_image(upload, "unboxing"))

    assert upload.bytes_read <= storage_service.MAX_FILE_SIZE + storage_service.READ_CHUNK_SIZE
