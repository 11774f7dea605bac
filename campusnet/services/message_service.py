# campusnet/services/message_service.py
import logging

from sqlalchemy.orm import Session

from campusnet.crud import message_crud, user_crud
from campusnet.exceptions import NotFoundError, PermissionDeniedError
from campusnet.models.message_model import Message, MessageType
from campusnet.models.notification_model import NotificationType
from campusnet.models.user_model import RoleEnum
from campusnet.schemas.message_schema import MessageCreate
from campusnet.services import permission_service, recipient_service
from campusnet.services.notification_service import NotificationEvent, commit_then_notify

logger = logging.getLogger(__name__)


def send_message(db: Session, sender, message_in: MessageCreate) -> Message:
    """
    Send a message: permission gate, recipient resolution, persistence, then
    one notification per recipient once the message is committed.
    """
    gate_role = message_in.target_role or RoleEnum.STUDENT
    if not permission_service.can_send(sender, gate_role, message_in.target_branch):
        raise PermissionDeniedError("Insufficient permissions to send message")

    message_type, recipient_ids = recipient_service.resolve_recipients(
        db,
        sender,
        recipient_ids=message_in.recipient_ids,
        target_role=message_in.target_role,
        target_branch=message_in.target_branch,
    )

    if message_type == MessageType.INDIVIDUAL:
        missing = set(recipient_ids) - set(user_crud.get_existing_user_ids(db, recipient_ids))
        if missing:
            raise NotFoundError("User", ", ".join(str(user_id) for user_id in sorted(missing)))

    db_message = message_crud.add_message(
        db,
        sender_id=sender.user_id,
        content=message_in.content,
        message_type=message_type,
        recipient_ids=recipient_ids,
        target_role=message_in.target_role,
        target_branch=message_in.target_branch,
    )
    message_id = db_message.message_id

    events = [
        NotificationEvent(
            recipient_id=recipient_id,
            type=NotificationType.message,
            reference_id=message_id,
            content=f"New message from {sender.name or 'a user'}",
        )
        for recipient_id in recipient_ids
        if recipient_id != sender.user_id
    ]
    commit_then_notify(db, events)
    logger.info(f"User {sender.user_id} sent {message_type.value} message {message_id} to {len(recipient_ids)} users")

    return message_crud.get_message(db, message_id)


def mark_message_as_read(db: Session, actor, message_id: int) -> Message:
    """Only a recipient can flip the (message level) read flag."""
    db_message = message_crud.get_message(db, message_id)
    if not db_message:
        raise NotFoundError("Message", message_id)
    if actor.user_id not in db_message.recipient_ids:
        raise PermissionDeniedError()
    return message_crud.mark_read(db, db_message)


def delete_message(db: Session, actor, message_id: int) -> None:
    db_message = message_crud.get_message(db, message_id)
    if not db_message:
        raise NotFoundError("Message", message_id)
    if db_message.sender_id != actor.user_id:
        raise PermissionDeniedError()
    message_crud.delete_message(db, db_message)
