"""Application DTOs for loyalty points."""

from datetime import datetime

from pydantic import BaseModel, Field


class UserPointsDTO(BaseModel):
    user_id: str
    available_points: int = Field(..., ge=0)
    total_points: int = Field(..., ge=0)
    last_updated: datetime

    model_config = {"frozen": True}


class PrizeQuoteDTO(BaseModel):
    """Points needed to redeem a product of a given price."""

    price: str = Field(..., description="Formatted price")
    conversion_rate: int = Field(..., gt=0)
    points_required: int = Field(..., ge=0)

    model_config = {"frozen": True}
