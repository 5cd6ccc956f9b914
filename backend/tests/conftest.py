"""
Shared fixtures for Invite API tests
"""
import asyncio
import base64
import pytest
from io import BytesIO
from PIL import Image
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from core.config import Settings
from server import create_app

FRONTEND_URL = "https://invites.example.com"


@pytest.fixture
def settings():
    return Settings(
        mongo_url="mongodb://localhost:27017",
        db_name="invites_test",
        frontend_url=FRONTEND_URL,
        cors_origins=(FRONTEND_URL,),
    )


@pytest.fixture
def db():
    """In-memory MongoDB database"""
    return AsyncMongoMockClient()["invites_test"]


@pytest.fixture
def api_client(settings, db):
    """TestClient for an app wired to the in-memory database"""
    app = create_app(settings, db=db)
    with TestClient(app, raise_server_exceptions=False) as client:
        yield client


@pytest.fixture
def count_invites(db):
    """Number of stored invite documents"""
    def count():
        return asyncio.run(db.invites.count_documents({}))
    return count


@pytest.fixture
def invite_payload():
    """The Ali & Sara nikkah form, as the web client posts it"""
    return {
        "eventCategory": "NIKKAH",
        "eventTitle": "Ali & Sara",
        "primaryNames": "Ali, Sara",
        "eventDate": "2025-06-01",
        "eventTime": "18:00",
        "venueName": "Grand Hall",
        "address": "123 Main St",
        "language": "EN"
    }


@pytest.fixture
def created_slug(api_client, invite_payload):
    response = api_client.post("/api/invites", json=invite_payload)
    assert response.status_code == 201, f"Create failed: {response.text}"
    return response.json()["slug"]


@pytest.fixture
def png_bytes_factory():
    """Factory to create PNG images"""
    def create_image(size=(120, 180), color='red', mode='RGB'):
        img = Image.new(mode, size, color=color)
        img_bytes = BytesIO()
        img.save(img_bytes, format='PNG')
        return img_bytes.getvalue()
    return create_image


@pytest.fixture
def png_data_uri(png_bytes_factory):
    encoded = base64.b64encode(png_bytes_factory()).decode('utf-8')
    return f"data:image/png;base64,{encoded}"
