from pydantic import BaseModel, Field
from datetime import datetime
from campusnet.models.notification_model import NotificationType


class NotificationRead(BaseModel):
    """
    Schema for reading a Notification row.
    There is no create schema: clients never create notifications directly.
    """
    notification_id: int = Field(..., example=1)
    recipient_id: int = Field(..., example=2)
    type: NotificationType = Field(..., example=NotificationType.comment)
    reference_id: int = Field(..., example=10)
    content: str = Field(..., example="Alice Johnson commented on your post.")
    is_read: bool = Field(default=False, example=False)
    created_at: datetime

    class Config:
        from_attributes = True
