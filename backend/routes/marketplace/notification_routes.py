# backend/routes/marketplace/notification_routes.py

from flask import Blueprint, current_app, jsonify, request

from backend.errors import ApiError, error_response
from backend.serializers import to_json
from backend.services.marketplace.notification_service import NotificationService

notification_bp = Blueprint("notification_bp", __name__, url_prefix="/api/notifications")


@notification_bp.get("")
@notification_bp.get("/")
def list_notifications():
    user_id = (request.args.get("userId") or "").strip()
    if not user_id:
        return error_response("User ID required", 400)

    try:
        rows = NotificationService.list_for_recipient(user_id)
        return jsonify(to_json(rows)), 200
    except Exception as e:
        current_app.logger.exception("Error listing notifications: %s", e)
        return error_response("Server Error", 500)


@notification_bp.put("/<notification_id>/read")
def mark_notification_read(notification_id):
    try:
        NotificationService.mark_read(notification_id)
        return jsonify({"message": "Notification marked as read"}), 200
    except ApiError as e:
        return error_response(e.message, e.status_code)
    except Exception as e:
        current_app.logger.exception("Error marking notification %s read: %s", notification_id, e)
        return error_response("Server Error", 500)
