"""In-memory branch notification storage."""
from dataclasses import replace
from typing import Dict, List, Optional
import logging

from fry_core.domain.entities.notification import BranchNotification
from fry_core.domain.repositories.notification_repository import NotificationRepository


logger = logging.getLogger(__name__)


class InMemoryNotificationRepository(NotificationRepository):

    def __init__(self):
        self._storage: Dict[str, BranchNotification] = {}

    async def add(self, notification: BranchNotification) -> None:
        self._storage[notification.id] = replace(notification)
        logger.info(
            f"Notification {notification.type.value} for branch {notification.branch_id} "
            f"(order {notification.order_id})"
        )

    async def find_by_id(self, notification_id: str) -> Optional[BranchNotification]:
        notification = self._storage.get(notification_id)
        return replace(notification) if notification else None

    async def list_for_branch(
        self, branch_id: str, unread_only: bool = False
    ) -> List[BranchNotification]:
        notifications = [
            replace(n)
            for n in self._storage.values()
            if n.branch_id == branch_id and not (unread_only and n.read)
        ]
        # Newest first; insertion order breaks ties.
        return sorted(notifications, key=lambda n: n.created_at, reverse=True)

    async def save(self, notification: BranchNotification) -> None:
        self._storage[notification.id] = replace(notification)
