# backend/models/marketplace/offer_models.py

from pydantic import BaseModel, field_validator
from typing import Literal, Optional, Union

# tracking statuses that also move the offer's top-level status
TRACKED_MAIN_STATUSES = ("accepted", "shipped", "delivered")


class OfferCreateModel(BaseModel):
    farmer: Optional[str] = None
    provider: Optional[str] = None
    buyer: Optional[str] = None

    crop: Optional[str] = None
    buyerNeed: Optional[str] = None
    serviceBroadcast: Optional[str] = None
    serviceRequest: Optional[str] = None

    offerType: Literal["crop", "service", "need_fulfillment"] = "crop"
    buyerName: str = "Local Buyer"
    providerName: str = "Service Provider"

    # free text on the wire ("₹5,000", "50 kg") or plain numbers
    pricePerUnit: Optional[Union[float, str]] = None
    quantityRequested: Optional[Union[float, str]] = None
    bidAmount: Optional[Union[float, str]] = None
    message: Optional[str] = None

    @field_validator(
        "farmer", "provider", "buyer", "crop", "buyerNeed", "serviceBroadcast", "serviceRequest",
        mode="before",
    )
    @classmethod
    def _unwrap_reference(cls, v):
        # populated documents come back as {"_id": ..., "name": ...}
        if isinstance(v, dict):
            return v.get("_id")
        return v

    @field_validator("offerType", "buyerName", "providerName", mode="before")
    @classmethod
    def _blank_means_default(cls, v, info):
        if v in (None, ""):
            return cls.model_fields[info.field_name].default
        return v


class OfferStatusModel(BaseModel):
    # any status string is written as-is
    status: str


class TrackingUpdateModel(BaseModel):
    status: Optional[str] = None
    location: Optional[str] = None
    note: Optional[str] = None
