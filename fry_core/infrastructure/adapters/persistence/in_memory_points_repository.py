"""In-memory loyalty balance storage."""
from dataclasses import replace
from typing import Dict, Optional
import logging

from fry_core.domain.entities.points import UserPoints
from fry_core.domain.repositories.points_repository import PointsRepository


logger = logging.getLogger(__name__)


class InMemoryPointsRepository(PointsRepository):

    def __init__(self):
        self._storage: Dict[str, UserPoints] = {}

    async def get(self, user_id: str) -> Optional[UserPoints]:
        points = self._storage.get(user_id)
        return replace(points) if points else None

    async def save(self, points: UserPoints) -> None:
        self._storage[points.user_id] = replace(points)
        logger.info(
            f"Points saved for user {points.user_id}: "
            f"available={points.available_points}, total={points.total_points}"
        )
