# backend/services/marketplace/offer_service.py
"""
Offers are bids between two parties on a crop, a service or a buyer's
standing requirement.

Accepting an offer fans out into separate writes on crops, buyer needs
and notifications. The writes are independent round trips with no
transaction: whatever ran before a failure stays committed.
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from flask import current_app

from backend.errors import ApiError, NotFoundError
from backend.models.marketplace.offer_models import (
    TRACKED_MAIN_STATUSES,
    OfferCreateModel,
    TrackingUpdateModel,
)
from backend.mongo_safe import get_col, populate, to_oid
from backend.services.marketplace.buyer_need_service import BuyerNeedService
from backend.services.marketplace.crop_service import CropService
from backend.services.marketplace.notification_service import NotificationService

ACCEPTED = "accepted"

REF_FIELDS = ("farmer", "provider", "buyer", "crop", "buyerNeed", "serviceBroadcast", "serviceRequest")

CONTACT_FIELDS = ["name", "email", "phone"]
FARMER_FIELDS = ["name", "email", "phone", "location", "latitude", "longitude"]


class OfferService:
    COLLECTION = "offers"

    # =========================
    # READ
    # =========================
    @staticmethod
    def build_query(args) -> Dict[str, Any]:
        """Maps the listing query string onto a Mongo filter."""
        query: Dict[str, Any] = {}

        farmer_id = args.get("farmerId")
        if farmer_id and farmer_id != "dummy":
            query["farmer"] = to_oid(farmer_id)
        if args.get("providerId"):
            query["provider"] = to_oid(args["providerId"])
        if args.get("buyerId"):
            query["buyer"] = to_oid(args["buyerId"])
        if args.get("buyerNeed"):
            query["buyerNeed"] = to_oid(args["buyerNeed"])
        if args.get("serviceBroadcast"):
            query["serviceBroadcast"] = to_oid(args["serviceBroadcast"])
        if args.get("status"):
            query["status"] = args["status"]
        return query

    @staticmethod
    def populate_offer(doc: Dict[str, Any]) -> Dict[str, Any]:
        populate(doc, "crop", "crops")
        populate(doc, "serviceRequest", "service_requests")
        populate(doc, "buyerNeed", "buyer_needs")
        if isinstance(doc.get("buyerNeed"), dict):
            populate(doc["buyerNeed"], "buyer", "users", CONTACT_FIELDS)
        populate(doc, "farmer", "users", FARMER_FIELDS)
        populate(doc, "provider", "users", CONTACT_FIELDS)
        populate(doc, "buyer", "users", CONTACT_FIELDS)
        return doc

    @staticmethod
    def list_offers(args) -> List[Dict[str, Any]]:
        query = OfferService.build_query(args)
        current_app.logger.debug("Constructed Query: %s", query)

        docs = list(get_col(OfferService.COLLECTION).find(query).sort("createdAt", -1))
        return [OfferService.populate_offer(d) for d in docs]

    @staticmethod
    def get_offer(offer_id) -> Optional[Dict[str, Any]]:
        return get_col(OfferService.COLLECTION).find_one({"_id": to_oid(offer_id)})

    # =========================
    # CREATE / DELETE
    # =========================
    @staticmethod
    def create_offer(data: OfferCreateModel) -> Dict[str, Any]:
        doc = {
            "farmer": to_oid(data.farmer),
            "provider": to_oid(data.provider),
            "buyer": to_oid(data.buyer),
            "crop": to_oid(data.crop),
            "buyerNeed": to_oid(data.buyerNeed),
            "serviceBroadcast": to_oid(data.serviceBroadcast),
            "serviceRequest": to_oid(data.serviceRequest),
            "offerType": data.offerType,
            "buyerName": data.buyerName,
            "providerName": data.providerName,
            "pricePerUnit": data.pricePerUnit,
            "quantityRequested": data.quantityRequested,
            "bidAmount": data.bidAmount,
            "message": data.message,
            "status": "pending",
            "trackingUpdates": [],
            "createdAt": datetime.now(timezone.utc),
        }
        # unset references are not stored at all
        for key in REF_FIELDS:
            if doc[key] is None:
                del doc[key]

        inserted = get_col(OfferService.COLLECTION).insert_one(doc)

        created = OfferService.get_offer(inserted.inserted_id)
        if created["offerType"] == "service":
            populate(created, "serviceRequest", "service_requests")
        else:
            populate(created, "crop", "crops")
        return created

    @staticmethod
    def delete_offer(offer_id: str) -> None:
        col = get_col(OfferService.COLLECTION)
        offer = OfferService.get_offer(offer_id)
        if not offer:
            raise NotFoundError("Offer not found")
        col.delete_one({"_id": offer["_id"]})

    # =========================
    # STATUS UPDATE (accept / reject / ...)
    # =========================
    @staticmethod
    def update_status(offer_id: str, status: str) -> Dict[str, Any]:
        """
        Writes the new status, then, on acceptance, applies the side effects
        in order: crop inventory, buyer-need fulfilment, one notification.

        Returns the offer as written by the status update; crop and buyer
        need changes are not reflected in it.
        """
        col = get_col(OfferService.COLLECTION)

        offer = OfferService.get_offer(offer_id)
        if not offer:
            raise NotFoundError("Offer not found")

        col.update_one({"_id": offer["_id"]}, {"$set": {"status": status}})
        offer["status"] = status
        updated = dict(offer)

        if status == ACCEPTED and offer.get("crop"):
            OfferService._apply_inventory(offer)

        if status == ACCEPTED:
            if offer.get("offerType") == "need_fulfillment" and offer.get("buyerNeed"):
                BuyerNeedService.mark_fulfilled(offer["buyerNeed"])
            OfferService._notify_acceptance(offer)

        return updated

    @staticmethod
    def _apply_inventory(offer: Dict[str, Any]) -> None:
        current_app.logger.info(
            "[Offer Accept] Processing offer %s for crop %s", offer["_id"], offer["crop"]
        )
        crop = CropService.get_crop(offer["crop"])
        if not crop:
            raise ApiError(f"Crop {offer['crop']} not found for offer {offer['_id']}")

        CropService.deduct_for_offer(crop, offer.get("quantityRequested"), offer_id=offer["_id"])

    @staticmethod
    def _notify_acceptance(offer: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        One notice per acceptance: provider first, otherwise farmer.
        The buyer side is never notified.
        """
        if offer.get("provider"):
            what = "Service" if offer.get("offerType") == "service" else "Crop"
            return NotificationService.create(
                offer["provider"],
                "bid_accepted",
                f"Your bid for {what} has been accepted!",
                related_id=offer["_id"],
            )
        if offer.get("farmer"):
            return NotificationService.create(
                offer["farmer"],
                "bid_accepted",
                "Your bid for Buyer Requirement has been accepted!",
                related_id=offer["_id"],
            )
        return None

    # =========================
    # TRACKING
    # =========================
    @staticmethod
    def add_tracking_update(offer_id: str, data: TrackingUpdateModel) -> Dict[str, Any]:
        """
        Appends to the tracking history. Only accepted/shipped/delivered
        also move the offer's status; order of entries is not checked.
        """
        col = get_col(OfferService.COLLECTION)

        offer = OfferService.get_offer(offer_id)
        if not offer:
            raise NotFoundError("Order not found")

        entry = {
            "status": data.status,
            "location": data.location,
            "note": data.note,
            "timestamp": datetime.now(timezone.utc),
        }

        update: Dict[str, Any] = {"$push": {"trackingUpdates": entry}}
        if data.status in TRACKED_MAIN_STATUSES:
            update["$set"] = {"status": data.status}

        col.update_one({"_id": offer["_id"]}, update)
        return OfferService.get_offer(offer["_id"])
