from sqlalchemy import Boolean, Column, Integer, ForeignKey, DateTime, Text, String, Enum
from sqlalchemy.orm import relationship
from campusnet.models.base_model import Base
from campusnet.models.association_tables import message_recipients
from campusnet.models.user_model import RoleEnum
from datetime import datetime, timezone
import enum


class MessageType(str, enum.Enum):
    INDIVIDUAL = "INDIVIDUAL"
    GROUP = "GROUP"


class Message(Base):
    """
    Model for the messages table.
    The recipient set is resolved once when the message is sent and is not
    recomputed when users later change branch.
    """
    __tablename__ = "messages"

    message_id = Column(Integer, primary_key=True, index=True)
    sender_id = Column(Integer, ForeignKey("users.user_id", ondelete="CASCADE"), nullable=False, index=True)
    content = Column(Text, nullable=False)
    message_type = Column(Enum(MessageType, name="message_type_enum"), nullable=False, default=MessageType.INDIVIDUAL)
    target_role = Column(Enum(RoleEnum, name="role_enum"), nullable=True)
    target_branch = Column(String, nullable=True)
    is_read = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc), index=True)

    sender = relationship("User", back_populates="sent_messages")
    recipients = relationship("User", secondary=message_recipients, lazy="selectin")

    @property
    def recipient_ids(self):
        return [user.user_id for user in self.recipients]

    def __repr__(self):
        return f"<Message(message_id={self.message_id}, sender_id={self.sender_id}, type={self.message_type})>"
