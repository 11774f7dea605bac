from pydantic import BaseModel, Field, EmailStr, model_validator
from typing import Optional
from datetime import datetime
from campusnet.models.user_model import RoleEnum

# -------------------------------
# Base schema shared by the user views
# -------------------------------
class UserBase(BaseModel):
    email: EmailStr = Field(..., example="prof.john@college.edu")
    name: str = Field(..., min_length=1, example="Prof. John")
    role: RoleEnum = Field(..., example=RoleEnum.TEACHER)
    position: Optional[str] = Field(None, example="Director")
    branch: Optional[str] = Field(None, example="CSE")
    profile_image: Optional[str] = Field(None, example="/uploads/avatar.png")


class UserCreate(UserBase):
    password: str = Field(..., min_length=6, example="teacher123")

    @model_validator(mode="after")
    def drop_fields_for_role(self):
        # Officials carry a position and no branch, everyone else the reverse.
        if self.role == RoleEnum.OFFICIAL:
            self.branch = None
        else:
            self.position = None
        return self


class UserUpdate(BaseModel):
    """Role is deliberately absent: it is fixed at registration."""
    name: Optional[str] = Field(None, min_length=1)
    position: Optional[str] = None
    branch: Optional[str] = None
    profile_image: Optional[str] = None


class UserBrief(BaseModel):
    user_id: int
    name: str
    email: EmailStr
    role: RoleEnum
    branch: Optional[str] = None
    profile_image: Optional[str] = None

    class Config:
        from_attributes = True


class UserOut(UserBase):
    user_id: int = Field(..., example=1)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
