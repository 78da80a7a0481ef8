# backend/routes/marketplace/offer_routes.py

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from backend.errors import ApiError, error_response, validation_message
from backend.models.marketplace.offer_models import (
    OfferCreateModel,
    OfferStatusModel,
    TrackingUpdateModel,
)
from backend.serializers import to_json
from backend.services.marketplace.offer_service import OfferService

offer_bp = Blueprint("offer_bp", __name__, url_prefix="/api/offers")


def _payload() -> dict:
    return request.get_json(silent=True) or {}


# ------------------------------------------------------------
# List (filtered by farmer, provider, buyer, need, broadcast, status)
# ------------------------------------------------------------
@offer_bp.get("")
@offer_bp.get("/")
def list_offers():
    try:
        offers = OfferService.list_offers(request.args)
        return jsonify(to_json(offers)), 200
    except Exception as e:
        current_app.logger.exception("Error listing offers")
        return error_response(str(e), 500)


# ------------------------------------------------------------
# Create
# ------------------------------------------------------------
@offer_bp.post("")
@offer_bp.post("/")
def create_offer():
    try:
        data = OfferCreateModel.model_validate(_payload())
        offer = OfferService.create_offer(data)
        return jsonify(to_json(offer)), 201
    except ValidationError as e:
        return error_response(validation_message(e), 400)
    except ApiError as e:
        return error_response(e.message, e.status_code)
    except Exception as e:
        current_app.logger.exception("Error creating offer")
        return error_response(str(e), 400)


# ------------------------------------------------------------
# Status update (accept / reject / ...)
# ------------------------------------------------------------
@offer_bp.put("/<offer_id>")
def update_offer_status(offer_id):
    try:
        data = OfferStatusModel.model_validate(_payload())
        offer = OfferService.update_status(offer_id, data.status)
        return jsonify(to_json(offer)), 200
    except ValidationError as e:
        return error_response(validation_message(e), 400)
    except ApiError as e:
        if e.status_code != 404:
            current_app.logger.error("Error updating offer %s: %s", offer_id, e.message)
        return error_response(e.message, e.status_code)
    except Exception as e:
        current_app.logger.exception("Error updating offer %s", offer_id)
        return error_response(str(e), 400)


# ------------------------------------------------------------
# Delete
# ------------------------------------------------------------
@offer_bp.delete("/<offer_id>")
def delete_offer(offer_id):
    try:
        OfferService.delete_offer(offer_id)
        return jsonify({"message": "Offer deleted successfully"}), 200
    except ApiError as e:
        return error_response(e.message, e.status_code)
    except Exception as e:
        current_app.logger.exception("Error deleting offer %s", offer_id)
        return error_response(str(e), 500)


# ------------------------------------------------------------
# Tracking updates (shipment / delivery history)
# ------------------------------------------------------------
@offer_bp.post("/<offer_id>/tracking")
def add_tracking_update(offer_id):
    try:
        data = TrackingUpdateModel.model_validate(_payload())
        offer = OfferService.add_tracking_update(offer_id, data)
        return jsonify(to_json(offer)), 200
    except ValidationError as e:
        return error_response(validation_message(e), 400)
    except ApiError as e:
        return error_response(e.message, e.status_code)
    except Exception as e:
        current_app.logger.exception("Error adding tracking update to %s", offer_id)
        return error_response(str(e), 500)
