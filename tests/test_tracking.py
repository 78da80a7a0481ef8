import pytest
from bson import ObjectId


def _track(client, offer, **body):
    return client.post(f"/api/offers/{offer['_id']}/tracking", json=body)


@pytest.mark.parametrize("status", ["accepted", "shipped", "delivered"])
def test_main_statuses_move_offer_status(client, db, make_offer, status):
    offer = make_offer(status="pending")

    res = _track(client, offer, status=status, location="Pune", note="on the way")

    assert res.status_code == 200
    body = res.get_json()
    assert body["status"] == status
    assert body["trackingUpdates"][-1]["status"] == status
    assert db.offers.find_one({"_id": offer["_id"]})["status"] == status


def test_other_status_appends_but_keeps_offer_status(client, db, make_offer):
    offer = make_offer(status="accepted")

    res = _track(client, offer, status="in_transit", location="Nashik", note="left the farm")

    body = res.get_json()
    assert body["status"] == "accepted"
    assert len(body["trackingUpdates"]) == 1
    entry = body["trackingUpdates"][0]
    assert entry["status"] == "in_transit"
    assert entry["location"] == "Nashik"
    assert entry["note"] == "left the farm"
    assert entry["timestamp"]


def test_entries_are_appended_in_arrival_order_without_checks(client, make_offer):
    offer = make_offer(status="accepted")

    _track(client, offer, status="delivered")
    res = _track(client, offer, status="shipped")

    body = res.get_json()
    assert [e["status"] for e in body["trackingUpdates"]] == ["delivered", "shipped"]
    assert body["status"] == "shipped"


def test_tracking_does_not_touch_inventory_or_notify(client, db, make_crop, make_offer):
    crop = make_crop(quantity="500 kg")
    offer = make_offer(crop=crop["_id"], provider=ObjectId(), quantityRequested=100)

    _track(client, offer, status="accepted")

    assert db.crops.find_one({"_id": crop["_id"]})["quantity"] == "500 kg"
    assert db.notifications.count_documents({}) == 0


def test_tracking_missing_offer_is_404(client):
    res = client.post(f"/api/offers/{ObjectId()}/tracking", json={"status": "shipped"})
    assert res.status_code == 404
    assert res.get_json() == {"message": "Order not found"}


def test_tracking_malformed_id_is_500(client):
    res = client.post("/api/offers/nope/tracking", json={"status": "shipped"})
    assert res.status_code == 500
