import os

# Settings are read on import of the app, before any fixture runs.
os.environ.setdefault("MONGODB_URI", "mongodb://localhost:27017")
os.environ.setdefault("ENVIRONMENT", "development")

import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from rental_api.database import get_database
from rental_api.dependencies import get_file_store
from rental_api.main import app
from rental_api.uploads import FileStore


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def mongo_db():
    return AsyncMongoMockClient()["rental_test"]


@pytest.fixture
def file_store(tmp_path):
    store = FileStore(tmp_path / "uploads")
    store.ensure_directory()
    return store


@pytest.fixture
def client(mongo_db, file_store):
    async def override_database():
        return mongo_db

    app.dependency_overrides[get_database] = override_database
    app.dependency_overrides[get_file_store] = lambda: file_store
    # not used as a context manager: the lifespan would connect to a real MongoDB
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def vehicle_payload():
    return {
        "name": "Peugeot 208",
        "image": "/uploads/1700000000000-42.jpg",
        "gallery": ["/uploads/1700000000001-7.jpg", "/uploads/1700000000002-8.png"],
        "price": "350 DH/jour",
        "features": ["Climatisation", "Bluetooth"],
        "description": "Citadine économique",
        "rating": 4.5,
        "isPopular": True,
        "specs": {
            "transmission": "Manuelle",
            "fuel": "Diesel",
            "power": "100 ch",
            "seats": 5,
            "consumption": "4.5L/100km",
            "luggage": "2 valises",
        },
    }


@pytest.fixture
def reservation_payload():
    return {
        "vehicleId": "64b7f0c2a1b2c3d4e5f60718",
        "vehicleName": "Peugeot 208",
        "startDate": "2025-06-01T10:00:00",
        "endDate": "2025-06-05T10:00:00",
        "licenseNumber": "B-123456",
        "pickupLocation": "Casablanca Airport",
        "dropoffLocation": "Rabat Centre",
    }
