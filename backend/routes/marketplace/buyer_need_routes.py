# backend/routes/marketplace/buyer_need_routes.py

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from backend.errors import ApiError, error_response, validation_message
from backend.models.marketplace.buyer_need_models import BuyerNeedCreateModel, BuyerNeedUpdateModel
from backend.serializers import to_json
from backend.services.marketplace.buyer_need_service import BuyerNeedService

buyer_need_bp = Blueprint("buyer_need_bp", __name__, url_prefix="/api/buyer-needs")


@buyer_need_bp.get("")
@buyer_need_bp.get("/")
def list_buyer_needs():
    try:
        needs = BuyerNeedService.list_needs(request.args.get("buyerId"))
        return jsonify(to_json(needs)), 200
    except Exception as e:
        current_app.logger.exception("Error listing buyer needs: %s", e)
        return error_response("Server Error", 500)


@buyer_need_bp.post("")
@buyer_need_bp.post("/")
def create_buyer_need():
    try:
        data = BuyerNeedCreateModel.model_validate(request.get_json(silent=True) or {})
        need = BuyerNeedService.create_need(data)
        return jsonify(to_json(need)), 201
    except ValidationError as e:
        return error_response(validation_message(e), 400)
    except Exception as e:
        current_app.logger.exception("Error creating buyer need: %s", e)
        return error_response("Server Error", 500)


@buyer_need_bp.put("/<need_id>")
def update_buyer_need(need_id):
    try:
        data = BuyerNeedUpdateModel.model_validate(request.get_json(silent=True) or {})
        need = BuyerNeedService.update_need(need_id, data)
        return jsonify(to_json(need)), 200
    except ValidationError as e:
        return error_response(validation_message(e), 400)
    except ApiError as e:
        return error_response(e.message, e.status_code)
    except Exception as e:
        current_app.logger.exception("Error updating buyer need %s: %s", need_id, e)
        return error_response("Server Error", 500)


@buyer_need_bp.delete("/<need_id>")
def delete_buyer_need(need_id):
    try:
        BuyerNeedService.delete_need(need_id)
        return jsonify({"message": "Requirement removed"}), 200
    except ApiError as e:
        return error_response(e.message, e.status_code)
    except Exception as e:
        current_app.logger.exception("Error deleting buyer need %s: %s", need_id, e)
        return error_response("Server Error", 500)
