"""
MongoDB connection handling

The API creates one MongoClient in the application lifespan and stores the
database handle on app.state. Route handlers receive it through the
get_database dependency and pass it to repositories explicitly.
"""
import time
import logging
from typing import Any, Optional, Tuple

from bson import ObjectId
from bson.errors import InvalidId
from fastapi import Request
from pymongo import MongoClient
from pymongo.database import Database
from pymongo.errors import PyMongoError

from .config import settings
from .errors import InvalidIdentifierError, StoreError

logger = logging.getLogger(__name__)


def connect(uri: Optional[str] = None, db_name: Optional[str] = None) -> Tuple[MongoClient, Database]:
    """
    Open a MongoClient and verify the server answers a ping

    Args:
        uri: MongoDB connection string (default: settings.MONGODB_URI)
        db_name: Database name (default: settings.DB_NAME)

    Returns:
        Tuple of (client, database)

    Raises:
        StoreError: If no connection string is configured or the ping fails
    """
    uri = uri or settings.MONGODB_URI
    db_name = db_name or settings.DB_NAME

    if not uri:
        raise StoreError("MONGODB_URI is not set. Please configure it in .env")

    client = MongoClient(uri)
    try:
        client.admin.command("ping")
    except PyMongoError as e:
        client.close()
        logger.error(f"Could not connect to MongoDB: {e}")
        raise StoreError(f"Could not connect to MongoDB: {e}") from e

    logger.info(f"Connected to MongoDB database \"{db_name}\"")
    return client, client[db_name]


def get_database(request: Request) -> Database:
    """
    FastAPI dependency returning the database handle opened at startup

    Usage:
        @router.get("/items")
        def read_items(db: Database = Depends(get_database)):
            ...
    """
    db = getattr(request.app.state, "db", None)
    if db is None:
        raise StoreError("Database connection is not initialised")
    return db


def ping(db: Database) -> float:
    """Run a ping against the server and return the round trip in ms"""
    started = time.time()
    db.command("ping")
    return round((time.time() - started) * 1000, 2)


def to_object_id(value: Any, field: str = "id") -> ObjectId:
    """
    Convert a client-supplied identifier into an ObjectId

    Raises:
        InvalidIdentifierError: If the value is not a 24-char hex string
            (or an ObjectId already)
    """
    if isinstance(value, ObjectId):
        return value
    if not isinstance(value, str):
        raise InvalidIdentifierError(value, field)
    try:
        return ObjectId(value)
    except (InvalidId, TypeError) as e:
        raise InvalidIdentifierError(value, field) from e
