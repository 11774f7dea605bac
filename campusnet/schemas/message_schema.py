from pydantic import BaseModel, Field, model_validator
from typing import List, Optional
from datetime import datetime
from campusnet.models.user_model import RoleEnum
from campusnet.models.message_model import MessageType
from campusnet.schemas.user_schema import UserBrief


class MessageCreate(BaseModel):
    """
    Input for sending a message. Either an explicit recipient list or a
    target role must be present.
    """
    content: str = Field(..., min_length=1, example="Lab session moved to Friday.")
    target_role: Optional[RoleEnum] = Field(None, example=RoleEnum.STUDENT)
    target_branch: Optional[str] = Field(None, example="CSE")
    recipient_ids: Optional[List[int]] = Field(None, example=[4, 5])

    @model_validator(mode="after")
    def require_target(self):
        if not self.content.strip():
            raise ValueError("content must not be blank")
        if not self.recipient_ids and self.target_role is None:
            raise ValueError("either recipient_ids or target_role is required")
        return self


class MessageRead(BaseModel):
    message_id: int
    sender_id: int
    content: str
    message_type: MessageType
    target_role: Optional[RoleEnum] = None
    target_branch: Optional[str] = None
    recipient_ids: List[int] = []
    is_read: bool
    created_at: datetime
    sender: Optional[UserBrief] = None

    class Config:
        from_attributes = True


class MessageWithRecipients(MessageRead):
    recipients: List[UserBrief] = []
