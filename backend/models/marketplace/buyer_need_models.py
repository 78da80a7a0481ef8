# backend/models/marketplace/buyer_need_models.py

from pydantic import BaseModel, Field
from typing import Literal, Optional, Union

BuyerNeedStatus = Literal["open", "fulfilled", "closed"]


class BuyerNeedCreateModel(BaseModel):
    buyer: str = Field(..., description="ID of the buyer posting the requirement")
    cropName: str
    quantity: Union[str, float]
    unit: str = "kg"
    minPrice: Optional[Union[str, float]] = None
    maxPrice: Optional[Union[str, float]] = None
    deadline: Optional[str] = None
    description: Optional[str] = None


class BuyerNeedUpdateModel(BaseModel):
    cropName: Optional[str] = None
    quantity: Optional[Union[str, float]] = None
    unit: Optional[str] = None
    minPrice: Optional[Union[str, float]] = None
    maxPrice: Optional[Union[str, float]] = None
    deadline: Optional[str] = None
    description: Optional[str] = None
    status: Optional[BuyerNeedStatus] = None
