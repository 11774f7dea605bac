from sqlalchemy import Column, Integer, ForeignKey, DateTime, Text, String
from sqlalchemy.orm import relationship
from campusnet.models.base_model import Base
from campusnet.models.association_tables import post_likes
from datetime import datetime, timezone


class Post(Base):
    """
    Model for the posts table.

    `likes` is a denormalized counter over the `post_likes` rows and
    `comment_count` over the live comments. Both are only changed through
    engagement_service.
    """
    __tablename__ = "posts"

    post_id = Column(Integer, primary_key=True, index=True)
    author_id = Column(Integer, ForeignKey("users.user_id", ondelete="CASCADE"), nullable=False, index=True)
    content = Column(Text, nullable=False)
    media_url = Column(String, nullable=True)
    media_type = Column(String, nullable=True)
    likes = Column(Integer, nullable=False, default=0)
    comment_count = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc), index=True)
    updated_at = Column(
        DateTime,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    author = relationship("User", back_populates="posts")
    comments = relationship(
        "Comment",
        back_populates="post",
        cascade="all, delete-orphan",
        order_by="Comment.created_at",
    )
    likers = relationship("User", secondary=post_likes, lazy="selectin")

    @property
    def liked_by(self):
        return [user.user_id for user in self.likers]

    def __repr__(self):
        return f"<Post(post_id={self.post_id}, author_id={self.author_id}, likes={self.likes})>"
