import asyncio
import os

os.environ.setdefault("JWT_SECRET", "test-secret-for-pytest")

import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from database import ensure_indexes, get_database, CATEGORIES, SUBCATEGORIES
from main import app
from services.auth_service import create_access_token
from services.collection_gateway import CollectionGateway


@pytest.fixture
def mongo_db():
    db = AsyncMongoMockClient()["nesswearDB_test"]
    asyncio.run(ensure_indexes(db))
    return db


@pytest.fixture
def categories(mongo_db):
    return CollectionGateway(mongo_db[CATEGORIES])


@pytest.fixture
def subcategories(mongo_db):
    return CollectionGateway(mongo_db[SUBCATEGORIES])


@pytest.fixture
def client(mongo_db):
    # No context manager: the lifespan (real Mongo connection) is skipped
    app.dependency_overrides[get_database] = lambda: mongo_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    token = create_access_token({"_id": "user-1", "email": "admin@nesswear.com"})
    return {"Authorization": f"Bearer {token}"}
