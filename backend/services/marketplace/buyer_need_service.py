# backend/services/marketplace/buyer_need_service.py

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from backend.errors import NotFoundError
from backend.models.marketplace.buyer_need_models import BuyerNeedCreateModel, BuyerNeedUpdateModel
from backend.mongo_safe import get_col, to_oid


class BuyerNeedService:
    COLLECTION = "buyer_needs"

    @staticmethod
    def list_needs(buyer_id: Optional[str] = None) -> List[Dict[str, Any]]:
        query = {}
        if buyer_id:
            query["buyer"] = to_oid(buyer_id)
        return list(get_col(BuyerNeedService.COLLECTION).find(query).sort("createdAt", -1))

    @staticmethod
    def get_need(need_id) -> Optional[Dict[str, Any]]:
        return get_col(BuyerNeedService.COLLECTION).find_one({"_id": to_oid(need_id)})

    @staticmethod
    def create_need(data: BuyerNeedCreateModel) -> Dict[str, Any]:
        doc = data.model_dump()
        doc["buyer"] = to_oid(data.buyer)
        doc["status"] = "open"
        doc["createdAt"] = datetime.now(timezone.utc)

        inserted = get_col(BuyerNeedService.COLLECTION).insert_one(doc)
        doc["_id"] = inserted.inserted_id
        return doc

    @staticmethod
    def update_need(need_id: str, data: BuyerNeedUpdateModel) -> Dict[str, Any]:
        col = get_col(BuyerNeedService.COLLECTION)
        oid = to_oid(need_id)

        need = col.find_one({"_id": oid})
        if not need:
            raise NotFoundError("Buyer need not found")

        patch = data.model_dump(exclude_unset=True)
        if patch:
            col.update_one({"_id": oid}, {"$set": patch})
            need.update(patch)
        return need

    @staticmethod
    def delete_need(need_id: str) -> None:
        col = get_col(BuyerNeedService.COLLECTION)
        oid = to_oid(need_id)
        if not col.find_one({"_id": oid}):
            raise NotFoundError("Buyer need not found")
        col.delete_one({"_id": oid})

    @staticmethod
    def mark_fulfilled(need_id) -> bool:
        """
        Full fulfilment, no quantity bookkeeping.
        Returns False when the need no longer exists.
        """
        need = BuyerNeedService.get_need(need_id)
        if not need:
            return False
        get_col(BuyerNeedService.COLLECTION).update_one(
            {"_id": need["_id"]},
            {"$set": {"status": "fulfilled"}},
        )
        return True
