"""MongoDB connection management for durable draft storage."""

from __future__ import annotations

import os
from typing import Optional

from pymongo import MongoClient
from pymongo.database import Database

from cvletter.utils.config import env_flag

DEFAULT_MONGODB_URI = "mongodb://localhost:27017/"
DEFAULT_DATABASE_NAME = "cvletter_app"

_client: Optional[MongoClient] = None
_database: Optional[Database] = None


def mongodb_enabled() -> bool:
    """Return True when draft persistence is switched on for this process."""
    return env_flag("ENABLE_MONGODB")


def get_mongo_client() -> MongoClient:
    """Get or lazily create the shared MongoDB client."""
    global _client
    if _client is None:
        _client = MongoClient(os.getenv("MONGODB_URI", DEFAULT_MONGODB_URI))
    return _client


def get_database() -> Database:
    """Get the configured MongoDB database."""
    global _database
    if _database is None:
        _database = get_mongo_client()[os.getenv("MONGODB_DATABASE", DEFAULT_DATABASE_NAME)]
    return _database


def close_mongo_connection() -> None:
    global _client, _database
    if _client is not None:
        _client.close()
        _client = None
        _database = None
