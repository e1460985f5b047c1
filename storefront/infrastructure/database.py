"""Database Manager — process-wide async MongoDB client with error mapping and health checks.

Invariants:
    - One AsyncMongoClient per process, created on startup and closed on shutdown
    - All PyMongo exceptions mapped to DatabaseError (core/errors.py) via mongo_errors()
    - Client uses Stable API v1 (strict, deprecation errors)

Design Decisions:
    - Singleton db_manager initialized in the FastAPI lifespan (no import-time connection)
    - get_database() is the single FastAPI dependency that hands out the database handle;
      tests override the repository dependencies built on top of it
"""

import logging
from contextlib import contextmanager
from typing import Iterator

from pymongo import AsyncMongoClient
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import (
    ConnectionFailure, DuplicateKeyError, OperationFailure, PyMongoError,
)
from pymongo.server_api import ServerApi

from storefront.core.errors import DatabaseError

logger = logging.getLogger(__name__)


@contextmanager
def mongo_errors(operation: str) -> Iterator[None]:
    """Translate driver failures raised inside the block into DatabaseError."""
    try:
        yield
    except DuplicateKeyError as e:
        logger.error(f"Mongo duplicate key during {operation}: {e}")
        raise DatabaseError("Duplicate key", operation)
    except ConnectionFailure as e:
        logger.error(f"Mongo connection failure during {operation}: {e}")
        raise DatabaseError("Connection error", operation)
    except OperationFailure as e:
        logger.error(f"Mongo operation failure during {operation}: {e}")
        raise DatabaseError("Operation rejected by server", operation)
    except PyMongoError as e:
        logger.error(f"Mongo error during {operation}: {e}")
        raise DatabaseError("Database operation failed", operation)


class MongoManager:
    """Owns the shared client and the application database handle."""

    def __init__(self, uri: str, database_name: str):
        self.client: AsyncMongoClient = AsyncMongoClient(
            uri,
            server_api=ServerApi("1", strict=True, deprecation_errors=True),
        )
        self.database: AsyncDatabase = self.client[database_name]

    async def ping(self) -> bool:
        """Check connectivity (for startup log and readiness probe)."""
        try:
            await self.client.admin.command("ping")
            return True
        except PyMongoError as e:
            logger.error(f"Mongo ping failed: {e}")
            return False

    async def close(self) -> None:
        await self.client.close()


# Singleton (initialized on startup)
db_manager: MongoManager | None = None


def init_db(uri: str, database_name: str) -> MongoManager:
    global db_manager
    db_manager = MongoManager(uri, database_name)
    return db_manager


async def close_db() -> None:
    global db_manager
    if db_manager is not None:
        await db_manager.close()
        db_manager = None


def get_database() -> AsyncDatabase:
    """FastAPI dependency for the application database."""
    if not db_manager:
        raise RuntimeError("Database not initialized")
    return db_manager.database
