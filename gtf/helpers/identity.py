"""ObjectID helpers.

ObjectID-like values are ``uuid.UUID`` instances or objects with a 12-byte
``binary`` attribute such as ``bson.ObjectId``; both render as lowercase hex.
"""

from typing import Any

from .base import helper, object_hex


@helper(fallback=None)
def to_value(value: Any) -> Any:
    """Hex string for ObjectID-like values, anything else unchanged."""
    oid = object_hex(value)
    return value if oid is None else oid


@helper(fallback="")
def object_id(value: Any) -> str:
    """Hex string for ObjectID-like values; strings pass through."""
    oid = object_hex(value)
    if oid is not None:
        return oid
    if isinstance(value, str):
        return value
    return ""


@helper(fallback=False)
def exist_object_id(values: Any, id: str) -> bool:
    if not isinstance(values, (list, tuple)):
        return False
    return any(object_hex(value) == id for value in values)


@helper(fallback=False)
def same_object_id(value: Any, id: str) -> bool:
    oid = object_hex(value)
    if oid is not None:
        return oid == id
    return str(value) == id


HELPERS: dict[str, Any] = {
    "toValue": to_value,
    "objectId": object_id,
    "existobjectid": exist_object_id,
    "sameobjectid": same_object_id,
}
