# backend/mongo.py
from __future__ import annotations

from flask_pymongo import PyMongo

# Process-wide client, reused across requests
mongo = PyMongo()


def init_mongo(app):
    """
    Initializes Flask-PyMongo.
    Requires app.config["MONGO_URI"] (set by load_config).
    Call this during app startup (create_app).
    """
    if app.config.get("DISABLE_MONGO"):
        print("⚠️ Mongo disabled by DISABLE_MONGO=1")
        return mongo

    if not app.config.get("MONGO_URI"):
        print("⚠️ MONGO_URI not set. Mongo will not be initialized.")
        return mongo

    try:
        mongo.init_app(app)
        _ = mongo.db  # triggers db property
        print("✅ Mongo initialized")
    except Exception as e:
        # keep app running; get_db() reports the missing handle later
        print(f"⚠️ Mongo init failed: {e}")

    return mongo
