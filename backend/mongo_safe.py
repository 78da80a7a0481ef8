# backend/mongo_safe.py
from __future__ import annotations

from typing import Optional

from bson import ObjectId

from backend.errors import ApiError

# Prevent spamming logs on every request
_WARNED = False


def get_db() -> Optional[object]:
    """
    Returns mongo.db if initialized, else None.
    Safe to call anywhere (won't crash at import time).
    """
    global _WARNED

    from backend.mongo import mongo  # Flask-PyMongo instance
    db = getattr(mongo, "db", None)

    if db is None and not _WARNED:
        _WARNED = True
        print("⚠️ Mongo is not initialized (mongo.db is None).")
    return db


def get_col(name: str):
    """
    Collection accessor used by every service:
      col = get_col("offers")
    Raises ApiError when there is no database handle.
    """
    db = get_db()
    if db is None:
        raise ApiError("Database unavailable", status_code=503)
    return db[name]


def to_oid(value):
    """
    Casts a reference to ObjectId. Falsy values stay None;
    a populated document is reduced to its _id.
    Raises bson.errors.InvalidId for malformed ids.
    """
    if isinstance(value, dict):
        value = value.get("_id")
    if not value:
        return None
    if isinstance(value, ObjectId):
        return value
    return ObjectId(str(value))


def populate(doc: dict, field: str, col_name: str, fields=None) -> dict:
    """
    Replaces doc[field] (an ObjectId reference) with the referenced
    document, or None when it no longer exists. ``fields`` limits the
    projection; _id is always included.
    """
    ref = doc.get(field)
    if not ref:
        return doc
    projection = {f: 1 for f in fields} if fields else None
    doc[field] = get_col(col_name).find_one({"_id": ref}, projection)
    return doc
