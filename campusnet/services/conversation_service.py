# campusnet/services/conversation_service.py
from typing import Iterable, List

from sqlalchemy.orm import Session

from campusnet.crud import message_crud
from campusnet.models.message_model import Message


def merge_thread(messages: Iterable[Message], newest_first: bool = False) -> List[Message]:
    """
    Order messages by creation time. Equal timestamps keep insertion order,
    i.e. the order of their primary keys.
    """
    return sorted(
        messages,
        key=lambda message: (message.created_at, message.message_id),
        reverse=newest_first,
    )


def assemble_thread(db: Session, user_a_id: int, user_b_id: int) -> List[Message]:
    """Both directions of a two-party conversation, oldest first."""
    return merge_thread(message_crud.get_messages_between(db, user_a_id, user_b_id))


def assemble_inbox(db: Session, user_id: int) -> List[Message]:
    """Everything the user sent or received, newest first."""
    return merge_thread(message_crud.get_messages_for_user(db, user_id), newest_first=True)
