"""
FastAPI dependencies shared by the endpoints.
"""

from bson import ObjectId
from fastapi import HTTPException, status

from app.schemas.common import parse_object_id


def path_object_id(value: str, name: str = "id") -> ObjectId:
    """
    Parse a hex id taken from the URL.

    Raises:
        HTTPException 400: If value is not a valid ObjectId
    """
    try:
        return parse_object_id(value)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid {name}: {value}"
        )
