from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List

from campusnet.api.deps import get_db
from campusnet.api.auth.auth import get_current_active_user
from campusnet.crud import user_crud
from campusnet.exceptions import NotFoundError
from campusnet.schemas.auth_schema import AuthenticatedUser
from campusnet.schemas import message_schema
from campusnet.services import conversation_service, message_service

router = APIRouter()


@router.post(
    "/send",
    response_model=message_schema.MessageWithRecipients,
    status_code=status.HTTP_201_CREATED,
    summary="Send a message",
)
def send_message(
    message_in: message_schema.MessageCreate,
    db: Session = Depends(get_db),
    current_user: AuthenticatedUser = Depends(get_current_active_user),
):
    """
    Send to an explicit list of users, or to every user of a role
    (optionally narrowed to a branch).

    - **OFFICIAL**: anyone
    - **TEACHER**: students of their own branch
    - **STUDENT**: other students
    """
    return message_service.send_message(db, current_user, message_in)


@router.get(
    "/conversations",
    response_model=List[message_schema.MessageRead],
    summary="Inbox: messages sent or received, newest first",
)
def get_conversations(
    db: Session = Depends(get_db),
    current_user: AuthenticatedUser = Depends(get_current_active_user),
):
    return conversation_service.assemble_inbox(db, current_user.user_id)


@router.get(
    "/conversation/{user_id}",
    response_model=List[message_schema.MessageRead],
    summary="Conversation with one user, oldest first",
)
def get_conversation_with_user(
    user_id: int,
    db: Session = Depends(get_db),
    current_user: AuthenticatedUser = Depends(get_current_active_user),
):
    if user_crud.get_user(db, user_id) is None:
        raise NotFoundError("User", user_id)
    return conversation_service.assemble_thread(db, current_user.user_id, user_id)


@router.put(
    "/{message_id}/read",
    response_model=message_schema.MessageRead,
    summary="Mark a received message as read",
)
def mark_message_as_read(
    message_id: int,
    db: Session = Depends(get_db),
    current_user: AuthenticatedUser = Depends(get_current_active_user),
):
    return message_service.mark_message_as_read(db, current_user, message_id)


@router.delete("/{message_id}", response_model=dict, summary="Delete a sent message")
def delete_message(
    message_id: int,
    db: Session = Depends(get_db),
    current_user: AuthenticatedUser = Depends(get_current_active_user),
):
    message_service.delete_message(db, current_user, message_id)
    return {"message": "Message deleted successfully"}
