# campusnet/models/notification_model.py
from sqlalchemy import Boolean, Column, Integer, ForeignKey, DateTime, Text, Enum
from sqlalchemy.orm import relationship
from campusnet.models.base_model import Base
from datetime import datetime, timezone
import enum

class NotificationType(str, enum.Enum):
    """Event that produced the notification."""
    message = "message"
    post = "post"
    comment = "comment"
    like = "like"


class Notification(Base):
    """
    Model for the notifications table.
    Rows are only written by notification_service as a side effect of
    another action.
    """
    __tablename__ = 'notifications'
    notification_id = Column(Integer, primary_key=True)
    recipient_id = Column(Integer, ForeignKey('users.user_id', ondelete="CASCADE"), nullable=False, index=True)
    type = Column(Enum(NotificationType, name="notification_type_enum"), nullable=False)
    reference_id = Column(Integer, nullable=False)
    content = Column(Text, nullable=False)
    is_read = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc), index=True)

    recipient = relationship("User", back_populates="notifications")
