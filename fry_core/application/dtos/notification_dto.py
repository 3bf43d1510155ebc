"""Application DTOs for branch notifications."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from fry_core.domain.enums import NotificationType


class BranchNotificationDTO(BaseModel):
    id: str
    branch_id: str
    type: NotificationType
    order_id: str
    title: str
    message: str
    delivery_id: Optional[str] = None
    read: bool = False
    created_at: datetime

    model_config = {"frozen": True}


class NotificationListDTO(BaseModel):
    notifications: List[BranchNotificationDTO] = Field(default_factory=list)
    unread: int = Field(..., ge=0)

    model_config = {"frozen": True}
