# backend/services/marketplace/crop_service.py

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from flask import current_app

from backend.errors import NotFoundError
from backend.models.marketplace.crop_models import CropCreateModel, CropUpdateModel
from backend.mongo_safe import get_col, populate, to_oid
from backend.services.marketplace.quantity import deduct, parse_quantity, parse_requested


class CropService:
    COLLECTION = "crops"

    # ------------------------------------------------------------
    # READ
    # ------------------------------------------------------------
    @staticmethod
    def list_crops(farmer_id: Optional[str] = None) -> List[Dict[str, Any]]:
        query = {}
        if farmer_id:
            query["farmer"] = to_oid(farmer_id)

        docs = list(get_col(CropService.COLLECTION).find(query).sort("createdAt", -1))
        for d in docs:
            populate(d, "farmer", "users", ["name"])
        return docs

    @staticmethod
    def get_crop(crop_id) -> Optional[Dict[str, Any]]:
        return get_col(CropService.COLLECTION).find_one({"_id": to_oid(crop_id)})

    # ------------------------------------------------------------
    # WRITE
    # ------------------------------------------------------------
    @staticmethod
    def create_crop(data: CropCreateModel) -> Dict[str, Any]:
        doc = {
            "farmer": to_oid(data.farmer),
            "name": data.name,
            "quantity": data.quantity,
            "price": data.price,
            "status": "active",
            "image": data.image,
            "createdAt": datetime.now(timezone.utc),
        }
        inserted = get_col(CropService.COLLECTION).insert_one(doc)
        doc["_id"] = inserted.inserted_id
        return doc

    @staticmethod
    def update_crop(crop_id: str, data: CropUpdateModel) -> Dict[str, Any]:
        col = get_col(CropService.COLLECTION)
        oid = to_oid(crop_id)

        crop = col.find_one({"_id": oid})
        if not crop:
            raise NotFoundError("Crop not found")

        # blank values keep what is stored; image may be cleared explicitly
        patch = {}
        for key in ("name", "quantity", "price", "status"):
            value = getattr(data, key)
            if value:
                patch[key] = value
        if "image" in data.model_fields_set:
            patch["image"] = data.image

        if patch:
            col.update_one({"_id": oid}, {"$set": patch})
            crop.update(patch)
        return crop

    @staticmethod
    def delete_crop(crop_id: str) -> None:
        col = get_col(CropService.COLLECTION)
        oid = to_oid(crop_id)
        if not col.find_one({"_id": oid}):
            raise NotFoundError("Crop not found")
        col.delete_one({"_id": oid})

    @staticmethod
    def save_stock(crop_id, quantity: str, status: str) -> None:
        get_col(CropService.COLLECTION).update_one(
            {"_id": to_oid(crop_id)},
            {"$set": {"quantity": quantity, "status": status}},
        )

    # ------------------------------------------------------------
    # INVENTORY (offer acceptance)
    # ------------------------------------------------------------
    @staticmethod
    def deduct_for_offer(crop: Dict[str, Any], quantity_requested, offer_id=None) -> bool:
        """
        Subtracts the offer's requested quantity from the crop snapshot and
        writes the result back. Read-modify-write on a snapshot, so two
        acceptances racing on one crop can overwrite each other.

        Returns False (nothing written) when the requested quantity is not
        a positive number.
        """
        log = current_app.logger

        log.info("[Offer Accept] Raw Crop Quantity: %r", crop.get("quantity"))
        current = parse_quantity(crop.get("quantity"))
        requested = parse_requested(quantity_requested)
        log.info("[Offer Accept] Current: %s, Requested: %s", current.amount, requested)

        if requested <= 0:
            log.warning("[Offer Accept] Invalid requested quantity: %s (offer %s)", requested, offer_id)
            return False

        remaining, sold_out = deduct(current, requested)
        new_status = "sold" if sold_out else crop.get("status")
        if sold_out:
            log.info("[Offer Accept] Crop sold out!")

        crop["quantity"] = str(remaining)
        crop["status"] = new_status
        CropService.save_stock(crop["_id"], crop["quantity"], new_status)

        log.info("[Inventory] Updated Crop: %s, Status: %s", crop["quantity"], new_status)
        return True
