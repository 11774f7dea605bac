from typing import List, Optional
from sqlalchemy.orm import Session
from campusnet.models.notification_model import Notification, NotificationType


def get_notification(db: Session, notification_id: int) -> Optional[Notification]:
    """Fetch one notification by id."""
    return db.query(Notification).filter(Notification.notification_id == notification_id).first()


def get_notifications_by_recipient_id(db: Session, recipient_id: int, skip: int = 0, limit: int = 100) -> List[Notification]:
    """Newest first."""
    return (
        db.query(Notification)
        .filter(Notification.recipient_id == recipient_id)
        .order_by(Notification.created_at.desc(), Notification.notification_id.desc())
        .offset(skip)
        .limit(limit)
        .all()
    )


def add_notification(
    db: Session,
    recipient_id: int,
    notif_type: NotificationType,
    reference_id: int,
    content: str,
) -> Notification:
    db_notification = Notification(
        recipient_id=recipient_id,
        type=notif_type,
        reference_id=reference_id,
        content=content,
        is_read=False,
    )
    db.add(db_notification)
    return db_notification


def update_is_read_status(db: Session, db_notification: Notification, is_read: bool = True) -> Notification:
    """
    Flip the `is_read` flag of a single notification.
    """
    db_notification.is_read = is_read
    db.commit()
    db.refresh(db_notification)
    return db_notification


def mark_all_read(db: Session, recipient_id: int) -> int:
    updated = (
        db.query(Notification)
        .filter(Notification.recipient_id == recipient_id, Notification.is_read == False)  # noqa: E712
        .update({Notification.is_read: True}, synchronize_session=False)
    )
    db.commit()
    return updated


def delete_notification(db: Session, db_notification: Notification) -> Notification:
    db.delete(db_notification)
    db.commit()
    return db_notification
