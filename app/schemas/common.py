"""
Identifier adapters shared by the response schemas.

MongoDB identifiers are bson ObjectIds internally and 24-character
lowercase hex strings everywhere outside the app.
"""

from typing import Iterable, List, Optional
from bson import ObjectId
from bson.errors import InvalidId


def object_id_to_str(value: Optional[ObjectId]) -> Optional[str]:
    """Convert an ObjectId to its hex form. None passes through."""
    if value is None:
        return None
    return str(value)


def object_ids_to_str(values: Optional[Iterable[ObjectId]]) -> Optional[List[str]]:
    """
    Convert a sequence of ObjectIds to hex strings, preserving order.

    None stays None so the field serializes as an explicit null rather
    than an empty list.
    """
    if values is None:
        return None
    return [str(value) for value in values]


def parse_object_id(value) -> ObjectId:
    """
    Parse a hex string into an ObjectId.

    Raises:
        ValueError: If value is not a valid 24-character hex ObjectId
    """
    if isinstance(value, ObjectId):
        return value
    # ObjectId(None) would generate a fresh id
    if value is None:
        raise ValueError("ObjectId value is required")
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        raise ValueError(f"'{value}' is not a valid ObjectId")


def validate_object_id_str(value: str) -> str:
    """field_validator helper: accept a valid hex id, normalised to lowercase."""
    return str(parse_object_id(value))
