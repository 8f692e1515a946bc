# rental_api/utils/object_id.py
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from bson import ObjectId, errors


def parse_object_id(value: str) -> Optional[ObjectId]:
    """Return the ObjectId for ``value``, or None when it is not a valid id."""
    try:
        return ObjectId(value)
    except (errors.InvalidId, TypeError):
        return None


def as_utc(value: datetime) -> datetime:
    # BSON dates are UTC; naive values coming back from the driver are UTC too
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def serialize_value(value: Any) -> Any:
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, datetime):
        return as_utc(value)
    return value


def serialize_document(document: Dict[str, Any]) -> Dict[str, Any]:
    """Stringify ObjectIds and mark stored dates as UTC."""
    return {key: serialize_value(value) for key, value in document.items()}
