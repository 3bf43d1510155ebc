"""Repository interface for loyalty balances."""

from abc import ABC, abstractmethod
from typing import Optional

from ..entities.points import UserPoints


class PointsRepository(ABC):
    """Abstract repository for UserPoints."""

    @abstractmethod
    async def get(self, user_id: str) -> Optional[UserPoints]:
        pass

    @abstractmethod
    async def save(self, points: UserPoints) -> None:
        pass
