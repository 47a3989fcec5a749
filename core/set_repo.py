"""
MongoDB repository for flashcard sets.

The study engine only needs two operations from the set store: fetch a set by
id and delete a set by id. Everything else about sets lives elsewhere.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from bson import ObjectId
from dotenv import load_dotenv
from pydantic import ValidationError
from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from core.errors import SetDeleteError, SetFetchError, SetNotFoundError
from core.schemas import FlashcardSet

# Load environment
load_dotenv()

logger = logging.getLogger(__name__)

# Configuration
DEFAULT_DB_NAME = "flashcards"
COLLECTION_NAME = "flashcard_sets"

# Global connection pool (reused across requests)
_client: Optional[MongoClient] = None
_collection: Optional[Collection] = None


# ---- Connection Management ----

def get_collection() -> Collection:
    """
    Get a connection to the MongoDB flashcard set collection.

    Uses a persistent connection pool that's reused across Streamlit reruns.

    Returns:
        MongoDB collection object
    """
    global _client, _collection

    if _collection is not None:
        return _collection

    mongo_uri = os.getenv("MONGO_URI")
    if not mongo_uri:
        raise ValueError("MONGO_URI not found in environment variables")

    _client = MongoClient(
        mongo_uri,
        maxPoolSize=10,
        minPoolSize=1,
        maxIdleTimeMS=60000
    )
    db = _client[os.getenv("MONGO_DB_NAME", DEFAULT_DB_NAME)]
    _collection = db[COLLECTION_NAME]

    return _collection


def _id_query(set_id: str) -> dict:
    """
    Match either an ObjectId or a plain string `_id`.
    """
    if ObjectId.is_valid(set_id):
        return {"_id": {"$in": [ObjectId(set_id), set_id]}}
    return {"_id": set_id}


def _to_flashcard_set(doc: dict) -> FlashcardSet:
    return FlashcardSet(
        id=str(doc["_id"]),
        name=doc.get("name") or "",
        cards=doc.get("cards") or [],
    )


# ---- Repository ----

class MongoSetRepository:
    """
    Fetch/delete access to flashcard sets stored in MongoDB.

    Args:
        collection: Collection to use; defaults to the shared pooled collection
    """

    def __init__(self, collection: Optional[Collection] = None):
        self._collection = collection

    @property
    def collection(self) -> Collection:
        if self._collection is None:
            self._collection = get_collection()
        return self._collection

    def fetch_set_by_id(self, set_id: str) -> FlashcardSet:
        """
        Load a set and its cards.

        Raises:
            SetNotFoundError: No set has this id
            SetFetchError: The database failed, is not configured, or the
                document is malformed
        """
        if not set_id:
            raise SetNotFoundError(set_id)

        try:
            doc = self.collection.find_one(_id_query(set_id))
        except PyMongoError as exc:
            logger.error("Fetching set %s failed: %s", set_id, exc)
            raise SetFetchError(set_id, f"Could not load flashcard set: {exc}") from exc
        except ValueError as exc:
            logger.error("Set store is not configured: %s", exc)
            raise SetFetchError(set_id, str(exc)) from exc

        if doc is None:
            raise SetNotFoundError(set_id)

        try:
            flashcard_set = _to_flashcard_set(doc)
        except ValidationError as exc:
            logger.error("Set %s has malformed cards: %s", set_id, exc)
            raise SetFetchError(set_id, "Flashcard set data is malformed") from exc

        logger.info("Loaded set %s with %d cards", set_id, len(flashcard_set.cards))
        return flashcard_set

    def delete_set(self, set_id: str) -> None:
        """
        Delete a set.

        Raises:
            SetDeleteError: Nothing was deleted (missing set, database failure
                or no database configured)
        """
        try:
            result = self.collection.delete_one(_id_query(set_id))
        except PyMongoError as exc:
            logger.error("Deleting set %s failed: %s", set_id, exc)
            raise SetDeleteError(set_id) from exc
        except ValueError as exc:
            logger.error("Set store is not configured: %s", exc)
            raise SetDeleteError(set_id, str(exc)) from exc

        if result.deleted_count == 0:
            raise SetDeleteError(set_id, f"Flashcard set {set_id!r} not found")

        logger.info("Deleted set %s", set_id)
