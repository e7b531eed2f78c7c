"""
Restaurant Finder - Upload API Tests
=====================================

What:  Tests for POST /upload and GET /uploads/{path} through the app.
How:   The upload_service fixture roots storage in tmp_path so each test
       starts with an empty uploads tree.
"""

import re
from unittest.mock import AsyncMock

import pytest

from restaurant_finder.exceptions import FileStorageError


def _stored_files(service):
    if not service.images_dir.exists():
        return []
    return list(service.images_dir.iterdir())


class TestUploadAccepted:

    @pytest.mark.asyncio
    async def test_valid_jpeg(self, test_client, upload_service, sample_jpeg_bytes):
        response = await test_client.post(
            "/upload",
            files={"image": ("storefront.jpg", sample_jpeg_bytes, "image/jpeg")},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Image uploaded successfully!"
        image_url = body["data"]["image_url"]
        assert re.fullmatch(r"/uploads/Images/\d+\.jpg", image_url)

        stored = upload_service.images_dir / image_url.rsplit("/", 1)[1]
        assert stored.read_bytes() == sample_jpeg_bytes

    @pytest.mark.asyncio
    async def test_uploaded_image_is_served(self, test_client, upload_service, sample_jpeg_bytes):
        upload = await test_client.post(
            "/upload",
            files={"image": ("dish.png", sample_jpeg_bytes, "image/png")},
        )
        image_url = upload.json()["data"]["image_url"]

        response = await test_client.get(image_url)

        assert response.status_code == 200
        assert response.content == sample_jpeg_bytes
        assert response.headers["content-type"] == "image/png"

    @pytest.mark.asyncio
    async def test_two_uploads_get_distinct_names(self, test_client, upload_service, sample_jpeg_bytes):
        urls = set()
        for _ in range(2):
            response = await test_client.post(
                "/upload",
                files={"image": ("a.gif", sample_jpeg_bytes, "image/gif")},
            )
            urls.add(response.json()["data"]["image_url"])

        assert len(urls) == 2
        assert len(_stored_files(upload_service)) == 2

    @pytest.mark.asyncio
    async def test_uploaded_url_can_be_stored_on_restaurant(
        self, test_client, upload_service, sample_jpeg_bytes, sample_restaurant
    ):
        upload = await test_client.post(
            "/upload",
            files={"image": ("front.jpeg", sample_jpeg_bytes, "image/jpeg")},
        )
        image_url = upload.json()["data"]["image_url"]

        created = await test_client.post(
            "/api/v1/restaurants", json={**sample_restaurant, "image_url": image_url}
        )

        assert created.json()["data"]["restaurants"]["image_url"] == image_url


class TestUploadRejected:

    @pytest.mark.asyncio
    async def test_disallowed_type(self, test_client, upload_service):
        response = await test_client.post(
            "/upload",
            files={"image": ("menu.pdf", b"%PDF-1.4", "application/pdf")},
        )

        assert response.status_code == 400
        assert response.json()["error"] == "Only JPEG, JPG, PNG, and GIF images are allowed!"
        assert _stored_files(upload_service) == []

    @pytest.mark.asyncio
    async def test_image_extension_with_wrong_mime(self, test_client, upload_service):
        response = await test_client.post(
            "/upload",
            files={"image": ("photo.jpg", b"hello", "text/plain")},
        )

        assert response.status_code == 400
        assert _stored_files(upload_service) == []

    @pytest.mark.asyncio
    async def test_oversized(self, test_client, upload_service):
        content = b"\xff" * (2 * 1024 * 1024 + 1)

        response = await test_client.post(
            "/upload",
            files={"image": ("big.jpg", content, "image/jpeg")},
        )

        assert response.status_code == 400
        assert response.json()["error"] == "Upload error: File too large"
        assert _stored_files(upload_service) == []

    @pytest.mark.asyncio
    async def test_body_far_over_cap_rejected_before_route(
        self, test_client, upload_service, monkeypatch
    ):
        store = AsyncMock()
        monkeypatch.setattr(upload_service, "validate_and_store", store)
        content = b"\xff" * (3 * 1024 * 1024)

        response = await test_client.post(
            "/upload",
            files={"image": ("huge.jpg", content, "image/jpeg")},
        )

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "Upload error: File too large"
        assert body["request_id"] == response.headers["X-Request-ID"]
        store.assert_not_awaited()
        assert _stored_files(upload_service) == []

    @pytest.mark.asyncio
    async def test_missing_file(self, test_client, upload_service):
        response = await test_client.post("/upload", data={"note": "no file here"})

        assert response.status_code == 400
        assert response.json()["error"] == "No file uploaded or invalid file type."

    @pytest.mark.asyncio
    async def test_unexpected_field(self, test_client, upload_service, sample_jpeg_bytes):
        response = await test_client.post(
            "/upload",
            files={"photo": ("a.jpg", sample_jpeg_bytes, "image/jpeg")},
        )

        assert response.status_code == 400
        assert response.json()["error"] == "Upload error: Unexpected field"
        assert _stored_files(upload_service) == []

    @pytest.mark.asyncio
    async def test_two_files_in_image_field(self, test_client, upload_service, sample_jpeg_bytes):
        response = await test_client.post(
            "/upload",
            files=[
                ("image", ("a.jpg", sample_jpeg_bytes, "image/jpeg")),
                ("image", ("b.jpg", sample_jpeg_bytes, "image/jpeg")),
            ],
        )

        assert response.status_code == 400
        assert response.json()["error"].startswith("Upload error: ")
        assert _stored_files(upload_service) == []


class TestUploadStorageFailure:

    @pytest.mark.asyncio
    async def test_write_failure_is_500(
        self, test_client, upload_service, sample_jpeg_bytes, monkeypatch
    ):
        monkeypatch.setattr(
            upload_service,
            "store_file",
            AsyncMock(
                side_effect=FileStorageError(
                    message="Failed to save uploaded image. Please try again.",
                    context={"directory": str(upload_service.images_dir)},
                )
            ),
        )

        response = await test_client.post(
            "/upload",
            files={"image": ("storefront.jpg", sample_jpeg_bytes, "image/jpeg")},
        )

        assert response.status_code == 500
        assert response.json() == {
            "status": "Error",
            "error": "Failed to save uploaded image. Please try again.",
            "request_id": response.headers["X-Request-ID"],
        }


class TestServeUploads:

    @pytest.mark.asyncio
    async def test_missing_file_is_404(self, test_client, upload_service):
        response = await test_client.get("/uploads/Images/1234.jpg")

        assert response.status_code == 404


class TestHealth:

    @pytest.mark.asyncio
    async def test_health_reports_database(self, test_client):
        response = await test_client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["database"] == "connected"
