# campusnet/services/engagement_service.py
"""
Like toggles and comment counters.

Every change to `likes`/`comment_count` goes through this module. The like
toggle runs as a single transaction: the entity row is locked
(SELECT ... FOR UPDATE), membership is checked, the like row and the counter
are changed together and committed. Where the row lock is not honoured
(SQLite ignores FOR UPDATE) two guards catch a concurrent toggle: the
composite primary key rejects a second like row, and an unlike that removes
no row is refused. Either way the loser is rolled back whole and gets a
ConflictError.
"""
import enum
import logging
from typing import Tuple

from sqlalchemy import case, delete, insert, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from campusnet.exceptions import ConflictError, NotFoundError, ValidationFailedError
from campusnet.models.association_tables import comment_likes, post_likes
from campusnet.models.comment_model import Comment
from campusnet.models.post_model import Post

logger = logging.getLogger(__name__)


class EntityKind(str, enum.Enum):
    post = "post"
    comment = "comment"


# kind -> (model, primary key column, like table, like table foreign key)
LIKE_TARGETS = {
    EntityKind.post: (Post, Post.post_id, post_likes, post_likes.c.post_id),
    EntityKind.comment: (Comment, Comment.comment_id, comment_likes, comment_likes.c.comment_id),
}


def toggle_like(db: Session, entity_kind: EntityKind, entity_id: int, user_id: int) -> Tuple[bool, int]:
    """
    Like the entity if `user_id` has not liked it yet, unlike it otherwise.

    Returns (liked, likes) as committed. State is unchanged on any error.
    """
    model, pk_column, like_table, like_fk = LIKE_TARGETS[EntityKind(entity_kind)]
    membership = (like_fk == entity_id) & (like_table.c.user_id == user_id)

    try:
        entity = db.execute(
            select(model).where(pk_column == entity_id).with_for_update()
        ).scalar_one_or_none()
        if entity is None:
            raise NotFoundError(EntityKind(entity_kind).value.capitalize(), entity_id)

        already_liked = db.execute(select(like_table.c.user_id).where(membership)).first() is not None

        if already_liked:
            removed = db.execute(delete(like_table).where(membership)).rowcount
            if removed == 0:
                raise ConflictError("The like state changed concurrently, please retry")
            delta = -1
        else:
            db.execute(insert(like_table).values({like_fk.key: entity_id, "user_id": user_id}))
            delta = 1

        db.execute(
            update(model)
            .where(pk_column == entity_id)
            .values(likes=model.likes + delta)
            .execution_options(synchronize_session=False)
        )
        likes = db.execute(select(model.likes).where(pk_column == entity_id)).scalar_one()
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.warning(f"Concurrent like toggle on {entity_kind} {entity_id} by user {user_id}")
        raise ConflictError("The like state changed concurrently, please retry")
    except ConflictError:
        db.rollback()
        logger.warning(f"Concurrent unlike on {entity_kind} {entity_id} by user {user_id}")
        raise
    except Exception:
        db.rollback()
        raise

    return not already_liked, likes


def adjust_comment_count(db: Session, post_id: int, delta: int) -> int:
    """
    Move `comment_count` of a post by +1 or -1 inside the caller's
    transaction and return the new value. Never goes below 0.
    """
    if delta not in (1, -1):
        raise ValidationFailedError("Comment count can only change by +1 or -1")

    if delta == 1:
        new_value = Post.comment_count + 1
    else:
        new_value = case((Post.comment_count > 0, Post.comment_count - 1), else_=0)

    result = db.execute(
        update(Post)
        .where(Post.post_id == post_id)
        .values(comment_count=new_value)
        .execution_options(synchronize_session=False)
    )
    if result.rowcount == 0:
        raise NotFoundError("Post", post_id)

    return db.execute(select(Post.comment_count).where(Post.post_id == post_id)).scalar_one()
