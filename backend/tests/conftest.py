"""
Pytest fixtures and configuration for the lessons API tests

MongoDB is replaced by mongomock, so no server is needed.
"""
import pytest
import mongomock
from bson import ObjectId
from fastapi.testclient import TestClient

from app.main import create_app
from app.services.seed_service import reseed


@pytest.fixture(scope="function")
def mongo_db():
    """
    Provides an empty in-memory database for each test

    Scope: function (new database per test)
    """
    client = mongomock.MongoClient()
    yield client["courseworkDB_test"]
    client.close()


@pytest.fixture(scope="function")
def seeded_db(mongo_db):
    """Database holding the 13 seed lessons"""
    reseed(mongo_db)
    return mongo_db


@pytest.fixture(scope="function")
def client(mongo_db):
    """
    Provides a TestClient bound to the in-memory database

    The lifespan runs inside the with-block; with a database injected it
    does not try to reach a real MongoDB server.
    """
    app = create_app(database=mongo_db)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def sample_lesson_data():
    """Lesson document using the canonical field names"""
    return {
        "subject": "Music Ensemble",
        "location": "Music Room",
        "price": 37,
        "spaces": 5,
        "description": "Contemporary charts and small-group performance skills.",
        "image": "/images/music-ensemble.svg"
    }


@pytest.fixture
def legacy_lesson_data():
    """Same lesson stored with the legacy field names topic/space"""
    return {
        "topic": "Music Ensemble",
        "location": "Music Room",
        "price": 37,
        "space": 5,
        "description": "Contemporary charts and small-group performance skills.",
        "image": "/images/music-ensemble.svg"
    }


@pytest.fixture
def sample_order_data():
    """Order request body referencing a (not necessarily existing) lesson"""
    return {
        "name": "Ada Lovelace",
        "phone": "07700 900123",
        "email": "ada@example.com",
        "items": [{"lessonId": str(ObjectId()), "spaces": 2}]
    }
