"""Repository interface for branch notifications."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..entities.notification import BranchNotification


class NotificationRepository(ABC):
    """Abstract repository for BranchNotification."""

    @abstractmethod
    async def add(self, notification: BranchNotification) -> None:
        pass

    @abstractmethod
    async def find_by_id(self, notification_id: str) -> Optional[BranchNotification]:
        pass

    @abstractmethod
    async def list_for_branch(
        self, branch_id: str, unread_only: bool = False
    ) -> List[BranchNotification]:
        """Notifications for a branch, newest first.

        Args:
            branch_id: Branch identifier
            unread_only: Skip notifications already read
        """
        pass

    @abstractmethod
    async def save(self, notification: BranchNotification) -> None:
        pass
