# backend/models/marketplace/crop_models.py

from pydantic import BaseModel, Field, field_validator
from typing import Literal, Optional, Union

CropStatus = Literal["active", "pending", "sold"]


class CropCreateModel(BaseModel):
    farmer: str = Field(..., description="ID of the farmer")
    name: str
    quantity: Union[str, float] = Field(..., description='Display text, e.g. "500 kg"')
    price: Union[str, float] = Field(..., description='Display text, e.g. "₹20/kg"')
    image: Optional[str] = None


class CropUpdateModel(BaseModel):
    name: Optional[str] = None
    quantity: Optional[Union[str, float]] = None
    price: Optional[Union[str, float]] = None
    status: Optional[CropStatus] = None
    image: Optional[str] = None

    @field_validator("status", mode="before")
    @classmethod
    def _blank_status_keeps_stored(cls, v):
        return v or None
