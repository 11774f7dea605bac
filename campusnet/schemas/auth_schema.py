from pydantic import BaseModel, EmailStr, Field
from typing import Optional
from campusnet.models.user_model import RoleEnum
from campusnet.schemas.user_schema import UserOut

# JWT payload
class TokenData(BaseModel):
    user_id: Optional[int] = None

# Identity handed explicitly to every service call
class AuthenticatedUser(BaseModel):
    user_id: int = Field(..., example=1, description="ID of the user")
    email: Optional[EmailStr] = Field(None, example="student1@college.edu")
    name: Optional[str] = Field(None, example="Alice Johnson")
    role: RoleEnum = Field(..., example=RoleEnum.STUDENT)
    branch: Optional[str] = Field(None, example="CSE")
    position: Optional[str] = Field(None, example=None)

    class Config:
        from_attributes = True


class LoginRequest(BaseModel):
    email: EmailStr = Field(..., example="student1@college.edu")
    password: str = Field(..., min_length=6, example="student123")


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    message: Optional[str] = "Login successful"
    user: UserOut
