# backend/serializers.py

from datetime import datetime

from bson import ObjectId


def to_json(value):
    """
    Recursively converts a Mongo document into JSON-safe data.
    ObjectId -> hex string, datetime -> ISO-8601 (UTC "Z" suffix when naive).
    """
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.isoformat() + "Z"
        return value.isoformat()
    if isinstance(value, dict):
        return {k: to_json(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_json(v) for v in value]
    return value
