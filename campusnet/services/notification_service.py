# campusnet/services/notification_service.py
import logging
from dataclasses import dataclass
from typing import Iterable

from sqlalchemy.orm import Session

from campusnet.crud import notification_crud
from campusnet.models.notification_model import NotificationType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NotificationEvent:
    recipient_id: int
    type: NotificationType
    reference_id: int
    content: str


def notify(
    db: Session,
    recipient_id: int,
    notif_type: NotificationType,
    reference_id: int,
    content: str,
) -> None:
    """
    Write one notification in its own transaction.

    Best effort: any failure is logged and rolled back, never raised, so the
    action that triggered it is unaffected.
    """
    try:
        notification_crud.add_notification(
            db,
            recipient_id=recipient_id,
            notif_type=notif_type,
            reference_id=reference_id,
            content=content,
        )
        db.commit()
    except Exception:
        logger.exception(
            "Failed to create %s notification for user %s (reference %s)",
            notif_type, recipient_id, reference_id,
        )
        try:
            db.rollback()
        except Exception:
            logger.exception("Rollback after failed notification also failed")


def dispatch_events(db: Session, events: Iterable[NotificationEvent]) -> None:
    """Deliver each event separately so one failure does not drop the others."""
    for event in events:
        notify(db, event.recipient_id, event.type, event.reference_id, event.content)


def commit_then_notify(db: Session, events: Iterable[NotificationEvent]) -> None:
    """
    Commit the primary mutation, then dispatch its notifications.

    A failing commit is rolled back and re-raised before anything is
    dispatched; dispatch itself never raises.
    """
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
    dispatch_events(db, list(events))
