"""
Branch notification endpoints.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status

from fry_core.application.dtos import BranchNotificationDTO, NotificationListDTO
from fry_core.application.mappers import notification_to_dto
from fry_core.domain.repositories import NotificationRepository
from fry_api.dependencies import get_notification_repository


logger = logging.getLogger(__name__)
router = APIRouter()


@router.get(
    "/branches/{branch_id}/notifications",
    response_model=NotificationListDTO,
    summary="Notifications for a branch, newest first",
)
async def list_branch_notifications(
    branch_id: str,
    unread_only: bool = Query(default=False),
    repository: NotificationRepository = Depends(get_notification_repository),
):
    notifications = await repository.list_for_branch(branch_id, unread_only=unread_only)
    return NotificationListDTO(
        notifications=[notification_to_dto(n) for n in notifications],
        unread=sum(1 for n in notifications if not n.read),
    )


@router.post(
    "/notifications/{notification_id}/read",
    response_model=BranchNotificationDTO,
    summary="Mark a notification as read",
)
async def mark_notification_read(
    notification_id: str,
    repository: NotificationRepository = Depends(get_notification_repository),
):
    notification = await repository.find_by_id(notification_id)
    if notification is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Notification not found: {notification_id}",
        )
    notification.mark_read()
    await repository.save(notification)
    return notification_to_dto(notification)
