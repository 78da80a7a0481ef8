# backend/services/marketplace/notification_service.py

from datetime import datetime, timezone
from typing import Any, Dict, List

from backend.errors import NotFoundError
from backend.mongo_safe import get_col, to_oid


class NotificationService:
    COLLECTION = "notifications"

    @staticmethod
    def create(recipient, type_: str, message: str, related_id=None) -> Dict[str, Any]:
        doc = {
            "recipient": to_oid(recipient),
            "type": type_,
            "message": message,
            "relatedId": related_id,
            "createdAt": datetime.now(timezone.utc),
        }
        inserted = get_col(NotificationService.COLLECTION).insert_one(doc)
        doc["_id"] = inserted.inserted_id
        return doc

    @staticmethod
    def list_for_recipient(user_id: str) -> List[Dict[str, Any]]:
        return list(
            get_col(NotificationService.COLLECTION)
            .find({"recipient": to_oid(user_id)})
            .sort("createdAt", -1)
        )

    @staticmethod
    def mark_read(notification_id: str) -> None:
        """
        Notices have no read state; a read notice is removed so the
        recipient's feed stops returning it.
        """
        result = get_col(NotificationService.COLLECTION).delete_one({"_id": to_oid(notification_id)})
        if result.deleted_count == 0:
            raise NotFoundError("Notification not found")
