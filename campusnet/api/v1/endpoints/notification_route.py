from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from campusnet.api.deps import get_db
from campusnet.api.auth.auth import get_current_active_user
from campusnet.crud import notification_crud
from campusnet.exceptions import NotFoundError, PermissionDeniedError
from campusnet.schemas import notification_schema
from campusnet.schemas.auth_schema import AuthenticatedUser

router = APIRouter()


def _get_own_notification(db: Session, notification_id: int, current_user: AuthenticatedUser):
    db_notification = notification_crud.get_notification(db, notification_id)
    if not db_notification:
        raise NotFoundError("Notification", notification_id)
    if db_notification.recipient_id != current_user.user_id:
        raise PermissionDeniedError()
    return db_notification


@router.get(
    "",
    response_model=List[notification_schema.NotificationRead],
    summary="List my notifications, newest first",
)
def get_notifications(
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db),
    current_user: AuthenticatedUser = Depends(get_current_active_user),
):
    return notification_crud.get_notifications_by_recipient_id(
        db, recipient_id=current_user.user_id, skip=skip, limit=limit
    )


@router.put(
    "/read-all",
    response_model=dict,
    summary="Mark all my notifications as read",
)
def mark_all_notifications_as_read(
    db: Session = Depends(get_db),
    current_user: AuthenticatedUser = Depends(get_current_active_user),
):
    updated = notification_crud.mark_all_read(db, current_user.user_id)
    return {"message": "All notifications marked as read", "updated": updated}


@router.put(
    "/{notification_id}/read",
    response_model=notification_schema.NotificationRead,
    summary="Mark one notification as read",
)
def mark_notification_as_read(
    notification_id: int,
    db: Session = Depends(get_db),
    current_user: AuthenticatedUser = Depends(get_current_active_user),
):
    """
    Users can only update notifications addressed to them.
    """
    db_notification = _get_own_notification(db, notification_id, current_user)
    return notification_crud.update_is_read_status(db, db_notification, is_read=True)


@router.delete("/{notification_id}", response_model=dict, summary="Delete a notification")
def delete_notification(
    notification_id: int,
    db: Session = Depends(get_db),
    current_user: AuthenticatedUser = Depends(get_current_active_user),
):
    db_notification = _get_own_notification(db, notification_id, current_user)
    notification_crud.delete_notification(db, db_notification)
    return {"message": "Notification deleted successfully"}
