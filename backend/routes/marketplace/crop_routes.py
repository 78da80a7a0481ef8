# backend/routes/marketplace/crop_routes.py

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from backend.errors import ApiError, error_response, validation_message
from backend.models.marketplace.crop_models import CropCreateModel, CropUpdateModel
from backend.serializers import to_json
from backend.services.marketplace.crop_service import CropService

crop_bp = Blueprint("crop_bp", __name__, url_prefix="/api/crops")


# ------------------  LIST (optionally by farmer) ------------------
@crop_bp.get("")
@crop_bp.get("/")
def list_crops():
    try:
        crops = CropService.list_crops(request.args.get("farmerId"))
        return jsonify(to_json(crops)), 200
    except Exception as e:
        current_app.logger.exception("Error listing crops: %s", e)
        return error_response("Server Error", 500)


# ------------------  CREATE ------------------
@crop_bp.post("")
@crop_bp.post("/")
def create_crop():
    try:
        data = CropCreateModel.model_validate(request.get_json(silent=True) or {})
        crop = CropService.create_crop(data)
        return jsonify(to_json(crop)), 201
    except ValidationError as e:
        return error_response(validation_message(e), 400)
    except Exception as e:
        current_app.logger.exception("Error creating crop: %s", e)
        return error_response("Server Error", 500)


# ------------------  UPDATE ------------------
@crop_bp.put("/<crop_id>")
def update_crop(crop_id):
    try:
        data = CropUpdateModel.model_validate(request.get_json(silent=True) or {})
        crop = CropService.update_crop(crop_id, data)
        return jsonify(to_json(crop)), 200
    except ValidationError as e:
        return error_response(validation_message(e), 400)
    except ApiError as e:
        return error_response(e.message, e.status_code)
    except Exception as e:
        current_app.logger.exception("Error updating crop %s: %s", crop_id, e)
        return error_response("Server Error", 500)


# ------------------  DELETE ------------------
@crop_bp.delete("/<crop_id>")
def delete_crop(crop_id):
    try:
        CropService.delete_crop(crop_id)
        return jsonify({"message": "Crop removed"}), 200
    except ApiError as e:
        return error_response(e.message, e.status_code)
    except Exception as e:
        current_app.logger.exception("Error deleting crop %s: %s", crop_id, e)
        return error_response("Server Error", 500)
