from pydantic import BaseModel, Field, field_validator
from typing import List, Literal, Optional
from datetime import datetime
from campusnet.schemas.user_schema import UserBrief


def _not_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("content must not be blank")
    return value


# -------------------------------
# Posts
# -------------------------------
class PostCreate(BaseModel):
    content: str = Field(..., min_length=1, example="Hackathon registrations are open!")
    media_url: Optional[str] = Field(None, example="/uploads/media-1700000000.png")
    media_type: Optional[Literal["image", "video"]] = Field(None, example="image")

    @field_validator("content")
    @classmethod
    def content_not_blank(cls, value: str) -> str:
        return _not_blank(value)


class PostUpdate(BaseModel):
    content: str = Field(..., min_length=1, example="Registrations close on Monday.")

    @field_validator("content")
    @classmethod
    def content_not_blank(cls, value: str) -> str:
        return _not_blank(value)


class PostRead(BaseModel):
    post_id: int
    author_id: int
    content: str
    media_url: Optional[str] = None
    media_type: Optional[str] = None
    likes: int
    liked_by: List[int] = []
    comment_count: int
    created_at: datetime
    author: Optional[UserBrief] = None

    class Config:
        from_attributes = True


# -------------------------------
# Comments
# -------------------------------
class CommentCreate(BaseModel):
    content: str = Field(..., min_length=1, example="Count me in.")

    @field_validator("content")
    @classmethod
    def content_not_blank(cls, value: str) -> str:
        return _not_blank(value)


class CommentUpdate(CommentCreate):
    pass


class CommentRead(BaseModel):
    comment_id: int
    post_id: int
    author_id: int
    content: str
    likes: int
    liked_by: List[int] = []
    created_at: datetime
    author: Optional[UserBrief] = None

    class Config:
        from_attributes = True


class PostDetail(PostRead):
    comments: List[CommentRead] = []


# -------------------------------
# Responses
# -------------------------------
class Pagination(BaseModel):
    page: int
    limit: int
    total: int
    pages: int


class PostPage(BaseModel):
    posts: List[PostRead]
    pagination: Pagination


class CommentPage(BaseModel):
    comments: List[CommentRead]
    pagination: Pagination


class LikeToggleResult(BaseModel):
    liked: bool = Field(..., example=True)
    likes: int = Field(..., example=3)
    message: str = Field(..., example="Post liked")
