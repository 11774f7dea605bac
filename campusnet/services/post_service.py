# campusnet/services/post_service.py
import logging
from typing import Tuple

from sqlalchemy.orm import Session

from campusnet.crud import comment_crud, post_crud
from campusnet.exceptions import NotFoundError, PermissionDeniedError
from campusnet.models.comment_model import Comment
from campusnet.models.notification_model import NotificationType
from campusnet.models.post_model import Post
from campusnet.schemas.post_schema import CommentCreate, CommentUpdate, PostUpdate
from campusnet.services import engagement_service
from campusnet.services.engagement_service import EntityKind
from campusnet.services.notification_service import NotificationEvent, commit_then_notify

logger = logging.getLogger(__name__)


# ----------------- Helpers -----------------
def _get_owned_post(db: Session, actor, post_id: int) -> Post:
    db_post = post_crud.get_post(db, post_id)
    if not db_post:
        raise NotFoundError("Post", post_id)
    if db_post.author_id != actor.user_id:
        raise PermissionDeniedError()
    return db_post


def _get_owned_comment(db: Session, actor, comment_id: int) -> Comment:
    db_comment = comment_crud.get_comment(db, comment_id)
    if not db_comment:
        raise NotFoundError("Comment", comment_id)
    if db_comment.author_id != actor.user_id:
        raise PermissionDeniedError()
    return db_comment


def _actor_name(actor) -> str:
    return getattr(actor, "name", None) or "Someone"


# ----------------- Posts -----------------
def update_post(db: Session, actor, post_id: int, post_update: PostUpdate) -> Post:
    """
    Edit a post's content. Everyone who commented on it is told.
    """
    db_post = _get_owned_post(db, actor, post_id)
    db_post.content = post_update.content

    events = [
        NotificationEvent(
            recipient_id=commenter_id,
            type=NotificationType.post,
            reference_id=post_id,
            content=f"{_actor_name(actor)} updated a post you commented on.",
        )
        for commenter_id in post_crud.get_commenter_ids(db, post_id)
        if commenter_id != actor.user_id
    ]
    commit_then_notify(db, events)
    return post_crud.get_post(db, post_id)


def delete_post(db: Session, actor, post_id: int) -> None:
    db_post = _get_owned_post(db, actor, post_id)
    post_crud.delete_post(db, db_post)
    logger.info(f"Post {post_id} deleted by user {actor.user_id}")


# ----------------- Comments -----------------
def create_comment(db: Session, actor, post_id: int, comment_in: CommentCreate) -> Comment:
    """
    Add a comment and bump the post's comment_count in one transaction.
    """
    db_post = post_crud.get_post(db, post_id)
    if not db_post:
        raise NotFoundError("Post", post_id)
    post_author_id = db_post.author_id

    try:
        db_comment = comment_crud.add_comment(db, post_id=post_id, author_id=actor.user_id, content=comment_in.content)
        engagement_service.adjust_comment_count(db, post_id, +1)
    except Exception:
        db.rollback()
        raise
    comment_id = db_comment.comment_id

    events = []
    if post_author_id != actor.user_id:
        events.append(NotificationEvent(
            recipient_id=post_author_id,
            type=NotificationType.comment,
            reference_id=comment_id,
            content=f"{_actor_name(actor)} commented on your post.",
        ))
    commit_then_notify(db, events)
    return comment_crud.get_comment(db, comment_id)


def update_comment(db: Session, actor, comment_id: int, comment_update: CommentUpdate) -> Comment:
    db_comment = _get_owned_comment(db, actor, comment_id)
    return comment_crud.update_comment_content(db, db_comment, comment_update.content)


def delete_comment(db: Session, actor, comment_id: int) -> int:
    """
    Remove a comment and decrement its post's comment_count (floored at 0).
    Returns the post's new comment_count.
    """
    db_comment = _get_owned_comment(db, actor, comment_id)
    post_id = db_comment.post_id
    try:
        db.delete(db_comment)
        db.flush()
        remaining = engagement_service.adjust_comment_count(db, post_id, -1)
        db.commit()
    except Exception:
        db.rollback()
        raise
    return remaining


# ----------------- Likes -----------------
def like_entity(db: Session, actor, entity_kind: EntityKind, entity_id: int) -> Tuple[bool, int]:
    """
    Toggle the actor's like and tell the author on a new like.
    Unliking is silent.
    """
    liked, likes = engagement_service.toggle_like(db, entity_kind, entity_id, actor.user_id)

    if liked:
        if entity_kind == EntityKind.post:
            target = post_crud.get_post(db, entity_id)
        else:
            target = comment_crud.get_comment(db, entity_id)

        if target is not None and target.author_id != actor.user_id:
            commit_then_notify(db, [NotificationEvent(
                recipient_id=target.author_id,
                type=NotificationType.like,
                reference_id=entity_id,
                content=f"{_actor_name(actor)} liked your {EntityKind(entity_kind).value}.",
            )])

    return liked, likes
