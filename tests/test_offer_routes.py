from bson import ObjectId


# ------------------------------------------------------------
# GET /api/offers
# ------------------------------------------------------------
def test_list_filters_by_farmer_and_status(client, make_offer):
    farmer = ObjectId()
    mine = make_offer(farmer=farmer, status="accepted")
    make_offer(farmer=farmer, status="pending")
    make_offer(farmer=ObjectId(), status="accepted")

    res = client.get(f"/api/offers?farmerId={farmer}&status=accepted")

    assert res.status_code == 200
    assert [o["_id"] for o in res.get_json()] == [str(mine["_id"])]


def test_dummy_farmer_id_is_ignored(client, make_offer):
    make_offer(farmer=ObjectId())
    make_offer(farmer=ObjectId())

    res = client.get("/api/offers?farmerId=dummy")

    assert len(res.get_json()) == 2


def test_list_filters_by_provider_buyer_need_and_broadcast(client, make_offer):
    provider, buyer, need, broadcast = ObjectId(), ObjectId(), ObjectId(), ObjectId()
    by_provider = make_offer(provider=provider)
    by_buyer = make_offer(buyer=buyer)
    by_need = make_offer(buyerNeed=need)
    by_broadcast = make_offer(serviceBroadcast=broadcast)

    def ids(qs):
        return [o["_id"] for o in client.get(f"/api/offers?{qs}").get_json()]

    assert ids(f"providerId={provider}") == [str(by_provider["_id"])]
    assert ids(f"buyerId={buyer}") == [str(by_buyer["_id"])]
    assert ids(f"buyerNeed={need}") == [str(by_need["_id"])]
    assert ids(f"serviceBroadcast={broadcast}") == [str(by_broadcast["_id"])]


def test_list_is_newest_first(client, make_offer):
    old = make_offer(minutes_ago=30)
    new = make_offer(minutes_ago=1)
    mid = make_offer(minutes_ago=10)

    ids = [o["_id"] for o in client.get("/api/offers").get_json()]

    assert ids == [str(new["_id"]), str(mid["_id"]), str(old["_id"])]


def test_list_populates_references(client, db, make_user, make_crop, make_need, make_offer):
    farmer = make_user("Ravi", "farmer", location="Nashik", latitude=20.0, longitude=73.8)
    buyer = make_user("Asha", "buyer")
    provider = make_user("Kiran", "provider")
    crop = make_crop(farmer=farmer["_id"], quantity="80 kg")
    need = make_need(buyer=buyer["_id"])
    request_id = db.service_requests.insert_one({"type": "Vehicle", "farmer": farmer["_id"]}).inserted_id

    make_offer(
        farmer=farmer["_id"],
        buyer=buyer["_id"],
        provider=provider["_id"],
        crop=crop["_id"],
        buyerNeed=need["_id"],
        serviceRequest=request_id,
    )

    offer = client.get("/api/offers").get_json()[0]

    assert offer["crop"]["quantity"] == "80 kg"
    assert offer["serviceRequest"]["type"] == "Vehicle"
    assert offer["buyerNeed"]["cropName"] == "Rice"
    assert offer["buyerNeed"]["buyer"] == {
        "_id": str(buyer["_id"]), "name": "Asha", "email": "asha@example.com", "phone": "9999999999",
    }
    assert offer["farmer"]["location"] == "Nashik"
    assert offer["farmer"]["latitude"] == 20.0
    assert "password" not in offer["farmer"]
    assert set(offer["provider"]) == {"_id", "name", "email", "phone"}
    assert offer["buyer"]["name"] == "Asha"


def test_list_populates_missing_reference_as_null(client, make_offer):
    make_offer(crop=ObjectId())

    offer = client.get("/api/offers").get_json()[0]

    assert offer["crop"] is None


def test_list_with_malformed_filter_is_500(client):
    res = client.get("/api/offers?buyerId=xyz")
    assert res.status_code == 500
    assert "message" in res.get_json()


# ------------------------------------------------------------
# POST /api/offers
# ------------------------------------------------------------
def test_create_crop_offer_with_defaults(client, db, make_crop):
    crop = make_crop(quantity="500 kg")
    buyer = ObjectId()

    res = client.post("/api/offers", json={
        "farmer": str(crop["farmer"]),
        "buyer": str(buyer),
        "crop": str(crop["_id"]),
        "quantityRequested": "50",
        "bidAmount": "₹1,000",
        "buyerName": "",
    })

    assert res.status_code == 201
    body = res.get_json()
    assert body["status"] == "pending"
    assert body["offerType"] == "crop"
    assert body["buyerName"] == "Local Buyer"
    assert body["providerName"] == "Service Provider"
    assert body["trackingUpdates"] == []
    assert body["crop"]["_id"] == str(crop["_id"])
    assert body["crop"]["quantity"] == "500 kg"
    assert "provider" not in body

    stored = db.offers.find_one({"_id": ObjectId(body["_id"])})
    assert stored["buyer"] == buyer
    assert stored["quantityRequested"] == "50"


def test_create_service_offer_populates_service_request(client, db):
    request_id = db.service_requests.insert_one({"type": "Manpower", "budget": "₹5000"}).inserted_id

    res = client.post("/api/offers", json={
        "farmer": str(ObjectId()),
        "provider": str(ObjectId()),
        "serviceRequest": str(request_id),
        "offerType": "service",
        "bidAmount": 4500,
    })

    assert res.status_code == 201
    body = res.get_json()
    assert body["serviceRequest"]["type"] == "Manpower"
    assert body["bidAmount"] == 4500


def test_create_accepts_populated_farmer_from_crop_listing(client, db, make_user):
    farmer = make_user("Ravi")
    client.post("/api/crops", json={
        "farmer": str(farmer["_id"]), "name": "Onion", "quantity": "750 kg", "price": "₹18/kg",
    })
    crop = client.get("/api/crops").get_json()[0]
    assert crop["farmer"] == {"_id": str(farmer["_id"]), "name": "Ravi"}

    res = client.post("/api/offers", json={
        "farmer": crop["farmer"],
        "buyer": str(ObjectId()),
        "crop": crop["_id"],
        "quantityRequested": "20",
    })

    assert res.status_code == 201
    stored = db.offers.find_one({"_id": ObjectId(res.get_json()["_id"])})
    assert stored["farmer"] == farmer["_id"]
    assert stored["crop"] == ObjectId(crop["_id"])


def test_create_rejects_unknown_offer_type(client):
    res = client.post("/api/offers", json={"farmer": str(ObjectId()), "offerType": "barter"})
    assert res.status_code == 400
    assert "offerType" in res.get_json()["message"]


def test_create_rejects_malformed_reference(client):
    res = client.post("/api/offers", json={"farmer": "farmer-1"})
    assert res.status_code == 400


# ------------------------------------------------------------
# DELETE /api/offers/<id>
# ------------------------------------------------------------
def test_delete_offer(client, db, make_offer):
    offer = make_offer()

    res = client.delete(f"/api/offers/{offer['_id']}")

    assert res.status_code == 200
    assert res.get_json() == {"message": "Offer deleted successfully"}
    assert db.offers.count_documents({}) == 0


def test_delete_missing_offer_is_404(client):
    res = client.delete(f"/api/offers/{ObjectId()}")
    assert res.status_code == 404
    assert res.get_json() == {"message": "Offer not found"}


def test_delete_malformed_id_is_500(client):
    assert client.delete("/api/offers/123").status_code == 500
