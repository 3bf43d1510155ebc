"""
Loyalty points endpoints.
"""
from decimal import Decimal
import logging

from fastapi import APIRouter, Depends, Query

from fry_core.application.dtos import PrizeQuoteDTO, UserPointsDTO
from fry_core.application.mappers import points_to_dto
from fry_core.application.services import LoyaltyService
from fry_core.domain.value_objects import format_price
from fry_api.dependencies import get_loyalty_service


logger = logging.getLogger(__name__)
router = APIRouter()


@router.get(
    "/prizes/quote",
    response_model=PrizeQuoteDTO,
    summary="Points needed for a prize",
)
async def quote_prize(
    price: Decimal = Query(..., ge=0, description="Product price"),
    service: LoyaltyService = Depends(get_loyalty_service),
):
    return PrizeQuoteDTO(
        price=format_price(price),
        conversion_rate=service.conversion_rate,
        points_required=service.points_required_for(price),
    )


@router.get(
    "/{user_id}",
    response_model=UserPointsDTO,
    summary="Customer points balance",
)
async def get_points(
    user_id: str,
    service: LoyaltyService = Depends(get_loyalty_service),
):
    return points_to_dto(await service.get_points(user_id))
