from sqlalchemy import Column, Integer, ForeignKey, DateTime, Text
from sqlalchemy.orm import relationship
from campusnet.models.base_model import Base
from campusnet.models.association_tables import comment_likes
from datetime import datetime, timezone


class Comment(Base):
    """
    Model for the comments table.
    """
    __tablename__ = "comments"

    comment_id = Column(Integer, primary_key=True, index=True)
    post_id = Column(Integer, ForeignKey("posts.post_id", ondelete="CASCADE"), nullable=False, index=True)
    author_id = Column(Integer, ForeignKey("users.user_id", ondelete="CASCADE"), nullable=False, index=True)
    content = Column(Text, nullable=False)
    likes = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc), index=True)
    updated_at = Column(
        DateTime,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    post = relationship("Post", back_populates="comments")
    author = relationship("User", back_populates="comments")
    likers = relationship("User", secondary=comment_likes, lazy="selectin")

    @property
    def liked_by(self):
        return [user.user_id for user in self.likers]

    def __repr__(self):
        return f"<Comment(comment_id={self.comment_id}, post_id={self.post_id}, likes={self.likes})>"
