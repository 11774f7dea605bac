from typing import List, Optional
from sqlalchemy.orm import Session, selectinload
from sqlalchemy import or_, and_, select

from campusnet.models.message_model import Message, MessageType
from campusnet.models.user_model import User, RoleEnum
from campusnet.models.association_tables import message_recipients


def get_message(db: Session, message_id: int) -> Optional[Message]:
    return db.query(Message).filter(Message.message_id == message_id).first()


def add_message(
    db: Session,
    sender_id: int,
    content: str,
    message_type: MessageType,
    recipient_ids: List[int],
    target_role: Optional[RoleEnum] = None,
    target_branch: Optional[str] = None,
) -> Message:
    """
    Stage a message and its recipient snapshot in the current transaction.
    The caller commits.
    """
    recipients = []
    if recipient_ids:
        recipients = db.query(User).filter(User.user_id.in_(recipient_ids)).all()

    db_message = Message(
        sender_id=sender_id,
        content=content,
        message_type=message_type,
        target_role=target_role,
        target_branch=target_branch,
        is_read=False,
        recipients=recipients,
    )
    db.add(db_message)
    db.flush()
    return db_message


def _is_recipient(user_id: int):
    """Filter clause: `user_id` is in the frozen recipient set."""
    return Message.message_id.in_(
        select(message_recipients.c.message_id).where(message_recipients.c.user_id == user_id)
    )


def get_messages_for_user(db: Session, user_id: int) -> List[Message]:
    """Messages the user sent or received, unordered."""
    return (
        db.query(Message)
        .options(selectinload(Message.sender))
        .filter(or_(Message.sender_id == user_id, _is_recipient(user_id)))
        .all()
    )


def get_messages_between(db: Session, user_a_id: int, user_b_id: int) -> List[Message]:
    """Messages A->B and B->A, unordered."""
    return (
        db.query(Message)
        .options(selectinload(Message.sender))
        .filter(
            or_(
                and_(Message.sender_id == user_a_id, _is_recipient(user_b_id)),
                and_(Message.sender_id == user_b_id, _is_recipient(user_a_id)),
            )
        )
        .all()
    )


def mark_read(db: Session, db_message: Message) -> Message:
    db_message.is_read = True
    db.commit()
    db.refresh(db_message)
    return db_message


def delete_message(db: Session, db_message: Message) -> Message:
    db.delete(db_message)
    db.commit()
    return db_message
