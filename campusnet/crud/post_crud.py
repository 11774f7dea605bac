from typing import List, Optional
from sqlalchemy.orm import Session, selectinload

from campusnet.models.post_model import Post
from campusnet.models.comment_model import Comment
from campusnet.schemas.post_schema import PostCreate


def get_post(db: Session, post_id: int) -> Optional[Post]:
    return db.query(Post).filter(Post.post_id == post_id).first()


def get_post_with_comments(db: Session, post_id: int) -> Optional[Post]:
    return (
        db.query(Post)
        .options(
            selectinload(Post.author),
            selectinload(Post.comments).selectinload(Comment.author),
        )
        .filter(Post.post_id == post_id)
        .first()
    )


def get_posts(db: Session, skip: int = 0, limit: int = 10) -> List[Post]:
    return (
        db.query(Post)
        .options(selectinload(Post.author))
        .order_by(Post.created_at.desc(), Post.post_id.desc())
        .offset(skip)
        .limit(limit)
        .all()
    )


def count_posts(db: Session) -> int:
    return db.query(Post).count()


def create_post(db: Session, author_id: int, post: PostCreate) -> Post:
    db_post = Post(
        author_id=author_id,
        content=post.content,
        media_url=post.media_url,
        media_type=post.media_type,
        likes=0,
        comment_count=0,
    )
    db.add(db_post)
    db.commit()
    db.refresh(db_post)
    return db_post


def delete_post(db: Session, db_post: Post) -> Post:
    """Delete a post together with its comments and like rows."""
    db.delete(db_post)
    db.commit()
    return db_post


def get_commenter_ids(db: Session, post_id: int) -> List[int]:
    rows = (
        db.query(Comment.author_id)
        .filter(Comment.post_id == post_id)
        .distinct()
        .order_by(Comment.author_id)
        .all()
    )
    return [row.author_id for row in rows]
