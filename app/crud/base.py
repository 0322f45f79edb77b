"""
Shared MongoDB data-access helpers.

Each entity module in app.crud builds on these. Every query is an
explicit equality filter on one named field; nothing is derived from
method names.
"""

import logging
from typing import Any, List, Mapping, Optional, Type, TypeVar
from bson import ObjectId
from pymongo import ASCENDING
from pymongo.database import Database

from app.core.exceptions import StaleEntityError
from app.models.base import MongoDocument

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=MongoDocument)

# Oldest first: ObjectIds embed their creation time
CREATION_ORDER = [("_id", ASCENDING)]


def _version_filter(entity_id: ObjectId, expected_version: int) -> dict:
    """Match the document at expected_version. Documents without a version field count as version 0."""
    if expected_version == 0:
        return {"_id": entity_id, "$or": [{"version": 0}, {"version": {"$exists": False}}]}
    return {"_id": entity_id, "version": expected_version}


def save(db: Database, entity: T) -> T:
    """
    Insert or fully replace an entity.

    - id unset: insert, MongoDB assigns the id, version starts at 0
    - id set: replace the stored document only if its version still
      matches entity.version, then bump the version. A missing document
      is inserted under the given id.

    Args:
        db: MongoDB database
        entity: Entity to persist (updated in place)

    Returns:
        The same entity with id and version set

    Raises:
        StaleEntityError: If the stored document has a different version
    """
    collection = db[entity.collection_name]

    if entity.id is None:
        entity.version = 0
        result = collection.insert_one(entity.to_document())
        entity.id = result.inserted_id
        logger.debug(f"Inserted {entity.collection_name} document {entity.id}")
        return entity

    expected_version = entity.version
    document = entity.to_document()
    document["version"] = expected_version + 1

    result = collection.replace_one(_version_filter(entity.id, expected_version), document)
    if result.matched_count == 0:
        if collection.count_documents({"_id": entity.id}, limit=1):
            logger.warning(
                f"Stale save of {entity.collection_name} document {entity.id} "
                f"at version {expected_version}"
            )
            raise StaleEntityError(entity.collection_name, entity.id, expected_version)
        collection.insert_one(document)
        logger.debug(f"Inserted {entity.collection_name} document {entity.id} with caller-supplied id")

    entity.version = expected_version + 1
    return entity


def find_one(
    db: Database,
    model: Type[T],
    query: Mapping[str, Any],
    sort: Optional[list] = None,
) -> Optional[T]:
    """Return the first document matching query as an entity, or None."""
    document = db[model.collection_name].find_one(dict(query), sort=sort)
    if document is None:
        return None
    return model.from_document(document)


def find_many(
    db: Database,
    model: Type[T],
    query: Optional[Mapping[str, Any]] = None,
    sort: Optional[list] = None,
    skip: int = 0,
    limit: int = 0,
) -> List[T]:
    """
    Return all documents matching query as entities.

    limit=0 means no limit (pymongo convention).
    """
    cursor = db[model.collection_name].find(dict(query or {}), sort=sort, skip=skip, limit=limit)
    return [model.from_document(document) for document in cursor]


def get_by_id(db: Database, model: Type[T], entity_id: ObjectId) -> Optional[T]:
    """Point lookup on _id. None if absent."""
    return find_one(db, model, {"_id": entity_id})


def delete(db: Database, model: Type[T], entity_id: ObjectId) -> bool:
    """
    Delete a document by id.

    Returns:
        True if deleted, False if it did not exist
    """
    result = db[model.collection_name].delete_one({"_id": entity_id})
    return result.deleted_count > 0
