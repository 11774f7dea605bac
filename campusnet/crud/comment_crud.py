from typing import List, Optional
from sqlalchemy.orm import Session, selectinload

from campusnet.models.comment_model import Comment


def get_comment(db: Session, comment_id: int) -> Optional[Comment]:
    return db.query(Comment).filter(Comment.comment_id == comment_id).first()


def get_comments_by_post_id(db: Session, post_id: int, skip: int = 0, limit: int = 10) -> List[Comment]:
    return (
        db.query(Comment)
        .options(selectinload(Comment.author))
        .filter(Comment.post_id == post_id)
        .order_by(Comment.created_at.asc(), Comment.comment_id.asc())
        .offset(skip)
        .limit(limit)
        .all()
    )


def count_comments_by_post_id(db: Session, post_id: int) -> int:
    return db.query(Comment).filter(Comment.post_id == post_id).count()


def add_comment(db: Session, post_id: int, author_id: int, content: str) -> Comment:
    """Stage a new comment; the caller commits together with the counter update."""
    db_comment = Comment(post_id=post_id, author_id=author_id, content=content, likes=0)
    db.add(db_comment)
    db.flush()
    return db_comment


def update_comment_content(db: Session, db_comment: Comment, content: str) -> Comment:
    db_comment.content = content
    db.commit()
    db.refresh(db_comment)
    return db_comment
