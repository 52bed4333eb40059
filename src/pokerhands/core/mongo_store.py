"""Hand stores — persistence for classified hands.

MongoHandStore writes one document per classified hand, synchronously, so
that a failed write can fail the request that produced it. MemoryHandStore
keeps records in-process for tests and local runs.
"""

from __future__ import annotations

import logging
import threading
from datetime import datetime, timezone
from typing import Protocol

from pymongo import ASCENDING, MongoClient
from pymongo.errors import PyMongoError

from pokerhands.core.errors import StorageError
from pokerhands.core.hand import HandRecord

logger = logging.getLogger(__name__)

_PING_TIMEOUT_MS = 5000


class HandStore(Protocol):
    """Anything that can persist a HandRecord. Raises StorageError on failure."""

    def save(self, record: HandRecord) -> None: ...


class MemoryHandStore:
    """Keeps saved records in a list. Thread-safe."""

    def __init__(self) -> None:
        self._records: list[HandRecord] = []
        self._lock = threading.Lock()

    def save(self, record: HandRecord) -> None:
        with self._lock:
            self._records.append(record)

    @property
    def records(self) -> list[HandRecord]:
        with self._lock:
            return list(self._records)


class MongoHandStore:
    """Synchronous MongoDB writer for classified hands.

    Connects and pings at construction. If the server cannot be reached
    the store stays up but unavailable: the failure is logged once and
    every save raises StorageError, so each request fails instead of
    silently dropping its records.
    """

    def __init__(
        self,
        uri: str,
        db_name: str,
        collection: str = "poker_results",
    ) -> None:
        self._uri = uri
        self._db_name = db_name
        self._collection_name = collection
        self._available = False
        self._closed = False
        self._lock = threading.Lock()
        self._client = None
        self._collection = None

        try:
            self._client = MongoClient(uri, serverSelectionTimeoutMS=_PING_TIMEOUT_MS)
            self._client.admin.command("ping")
        except PyMongoError as exc:
            logger.warning("MongoDB connection failed, hands will not be stored: %s", exc)
            return

        self._collection = self._client[db_name][collection]
        self._available = True
        self._ensure_indexes()
        logger.info("Connected to MongoDB %s.%s", db_name, collection)

    # ------------------------------------------------------------------
    # Context manager
    # ------------------------------------------------------------------

    def __enter__(self) -> MongoHandStore:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def available(self) -> bool:
        return self._available and not self._closed

    def save(self, record: HandRecord) -> None:
        """Insert one record. Raises StorageError if it was not written."""
        if not self.available:
            raise StorageError("MongoDB store is not available")

        doc = {
            "request_id": record.request_id,
            "hand": record.hand,
            "result": record.result,
            "timestamp": datetime.now(timezone.utc),
        }
        with self._lock:
            try:
                result = self._collection.insert_one(doc)
            except PyMongoError as exc:
                logger.warning("Failed to insert hand %s: %s", record.request_id, exc)
                raise StorageError(f"Failed to insert hand {record.request_id}") from exc

        logger.debug(
            "Stored hand %s (%s) as %s, _id=%s",
            record.request_id, record.hand, record.result, result.inserted_id,
        )

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._client:
            self._client.close()

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _ensure_indexes(self) -> None:
        """Create indexes for lookups by request and time."""
        try:
            self._collection.create_index("request_id")
            self._collection.create_index("timestamp")
            self._collection.create_index([("result", ASCENDING), ("timestamp", ASCENDING)])
        except PyMongoError as exc:
            logger.warning("Failed to create indexes: %s", exc)
