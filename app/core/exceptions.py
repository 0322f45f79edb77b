"""
Repository-level exceptions.

Lookups signal absence with None; these cover the write paths only.
Driver failures (pymongo.errors.PyMongoError) are never wrapped.
"""

from bson import ObjectId


class RepositoryError(Exception):
    """Base class for errors raised by the app.crud layer."""
    pass


class StaleEntityError(RepositoryError):
    """Raised when a save loses an optimistic-concurrency race."""

    def __init__(self, collection: str, entity_id: ObjectId, expected_version: int):
        self.collection = collection
        self.entity_id = entity_id
        self.expected_version = expected_version
        super().__init__(
            f"{collection} document {entity_id} was modified concurrently "
            f"(expected version {expected_version})"
        )


class ReferenceNotFoundError(RepositoryError):
    """Raised when a write references a document that does not exist."""

    def __init__(self, collection: str, entity_id: ObjectId):
        self.collection = collection
        self.entity_id = entity_id
        super().__init__(f"Referenced {collection} document {entity_id} does not exist")
