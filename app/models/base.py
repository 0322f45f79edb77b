"""
Base document model shared by all MongoDB-backed entities.

Entities are pydantic models whose fields mirror the stored document.
Python attributes are snake_case; stored keys come from the field aliases
(``_id``, ``jobId``, ``jobIds``).
"""

from typing import Any, ClassVar, Dict, Mapping, Optional
from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field


class MongoDocument(BaseModel):
    """
    A persisted domain record.

    - id: assigned by MongoDB on first save, immutable afterwards
    - version: optimistic-concurrency token, bumped on every replace
    """
    model_config = ConfigDict(arbitrary_types_allowed=True, populate_by_name=True)

    collection_name: ClassVar[str]

    id: Optional[ObjectId] = Field(default=None, alias="_id")
    version: int = 0

    def to_document(self) -> Dict[str, Any]:
        """Return the MongoDB document for this entity (without _id when unset)."""
        document = self.model_dump(by_alias=True)
        if document.get("_id") is None:
            document.pop("_id", None)
        return document

    @classmethod
    def from_document(cls, document: Mapping[str, Any]):
        return cls.model_validate(dict(document))
