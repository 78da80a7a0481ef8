# tests/conftest.py

from datetime import datetime, timedelta, timezone

import mongomock
import pytest
from bson import ObjectId

from app import create_app
from backend.mongo import mongo


@pytest.fixture
def app():
    app = create_app({"TESTING": True, "DISABLE_MONGO": True, "LOG_LEVEL": "DEBUG"})
    mongo.cx = mongomock.MongoClient()
    mongo.db = mongo.cx["farmconnect_test"]
    yield app
    mongo.cx = None
    mongo.db = None


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def db(app):
    return mongo.db


def _ts(minutes_ago=0):
    return datetime.now(timezone.utc) - timedelta(minutes=minutes_ago)


@pytest.fixture
def make_user(db):
    def _make(name="Ravi", role="farmer", **extra):
        doc = {
            "name": name,
            "email": f"{name.lower()}@example.com",
            "phone": "9999999999",
            "role": role,
            "password": "hashed",
            **extra,
        }
        doc["_id"] = db.users.insert_one(doc).inserted_id
        return doc
    return _make


@pytest.fixture
def make_crop(db):
    def _make(farmer=None, name="Wheat", quantity="500 kg", price="₹20/kg", status="active", minutes_ago=0):
        doc = {
            "farmer": farmer or ObjectId(),
            "name": name,
            "quantity": quantity,
            "price": price,
            "status": status,
            "image": None,
            "createdAt": _ts(minutes_ago),
        }
        doc["_id"] = db.crops.insert_one(doc).inserted_id
        return doc
    return _make


@pytest.fixture
def make_need(db):
    def _make(buyer=None, cropName="Rice", quantity="100", status="open", minutes_ago=0):
        doc = {
            "buyer": buyer or ObjectId(),
            "cropName": cropName,
            "quantity": quantity,
            "unit": "kg",
            "status": status,
            "createdAt": _ts(minutes_ago),
        }
        doc["_id"] = db.buyer_needs.insert_one(doc).inserted_id
        return doc
    return _make


@pytest.fixture
def make_offer(db):
    def _make(minutes_ago=0, **fields):
        doc = {
            "offerType": "crop",
            "buyerName": "Local Buyer",
            "providerName": "Service Provider",
            "status": "pending",
            "trackingUpdates": [],
            "createdAt": _ts(minutes_ago),
        }
        doc.update(fields)
        doc["_id"] = db.offers.insert_one(doc).inserted_id
        return doc
    return _make
