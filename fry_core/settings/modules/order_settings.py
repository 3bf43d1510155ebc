from __future__ import annotations

from pydantic import Field

from fry_core.settings.base import FryBaseSettings


class OrderSettings(FryBaseSettings):
    """
    Order numbering, cancellation and currency settings.
    Loaded from .env file with exact variable name matching.
    """

    number_prefix: str = Field("FRY", alias="ORDER_NUMBER_PREFIX", pattern=r"^[A-Z]+$")
    cancellation_window_minutes: int = Field(
        5, alias="ORDER_CANCELLATION_WINDOW_MINUTES", ge=0
    )
    currency: str = Field("HNL", alias="ORDER_CURRENCY", min_length=3, max_length=3)
