from sqlalchemy import Column, Integer, String, DateTime, Enum
from sqlalchemy.orm import relationship
from campusnet.models.base_model import Base
from enum import Enum as PyEnum
from datetime import datetime, timezone
from passlib.context import CryptContext

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


class RoleEnum(str, PyEnum):
    """Closed set of community roles, highest authority first."""
    OFFICIAL = "OFFICIAL"
    TEACHER = "TEACHER"
    STUDENT = "STUDENT"


class User(Base):
    """
    Model for the users table.

    `role` is written once at registration and never updated.
    `position` only means something for officials, `branch` only for
    teachers and students.
    """
    __tablename__ = "users"

    user_id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    password = Column(String, nullable=False)
    name = Column(String, nullable=False)
    role = Column(Enum(RoleEnum, name="role_enum"), nullable=False, index=True)
    position = Column(String, nullable=True)
    branch = Column(String, nullable=True, index=True)
    profile_image = Column(String, nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))
    updated_at = Column(
        DateTime,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    posts = relationship("Post", back_populates="author", cascade="all, delete-orphan", passive_deletes=True)
    comments = relationship("Comment", back_populates="author", cascade="all, delete-orphan", passive_deletes=True)
    sent_messages = relationship("Message", back_populates="sender", cascade="all, delete-orphan", passive_deletes=True)
    notifications = relationship("Notification", back_populates="recipient", cascade="all, delete-orphan", passive_deletes=True)

    def __repr__(self):
        return f"<User(user_id={self.user_id}, email='{self.email}', role={self.role})>"

    def verify_password(self, plain_password: str) -> bool:
        return pwd_context.verify(plain_password.encode('utf-8')[:72], self.password)