"""Branch notification entity."""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional
import uuid

from ..enums import NotificationType


@dataclass
class BranchNotification:
    """In-app message for a branch about one of its orders."""
    branch_id: str
    type: NotificationType
    order_id: str
    title: str
    message: str
    delivery_id: Optional[str] = None
    read: bool = False
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def mark_read(self) -> None:
        self.read = True
