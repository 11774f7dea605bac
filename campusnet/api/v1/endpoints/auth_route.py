# campusnet/api/v1/endpoints/auth_route.py
import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from campusnet.api.deps import get_db
from campusnet.api.auth.auth import create_token_for_user, get_current_active_user
from campusnet.crud import user_crud
from campusnet.schemas.auth_schema import AuthenticatedUser, LoginRequest, TokenResponse
from campusnet.schemas.user_schema import UserCreate, UserOut

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/register",
    response_model=TokenResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
)
def register(user_in: UserCreate, db: Session = Depends(get_db)):
    """
    Create an account. The role chosen here is permanent.
    """
    if user_crud.get_user_by_email(db, user_in.email):
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="User already exists")

    user = user_crud.create_user(db, user_in)
    logger.info(f"Registered user {user.user_id} with role {user.role.value}")
    return TokenResponse(
        access_token=create_token_for_user(user),
        message="User registered successfully",
        user=UserOut.model_validate(user),
    )


@router.post("/login", response_model=TokenResponse, summary="Log in with email and password")
def login(data: LoginRequest, db: Session = Depends(get_db)):
    user = user_crud.get_user_by_email(db, data.email)
    logger.info(f"Attempting login for user: {data.email}")

    if not user or not user.verify_password(data.password):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")

    return TokenResponse(
        access_token=create_token_for_user(user),
        user=UserOut.model_validate(user),
    )


@router.get("/me", response_model=UserOut, summary="Current user profile")
def read_me(
    db: Session = Depends(get_db),
    current_user: AuthenticatedUser = Depends(get_current_active_user),
):
    return user_crud.get_user(db, current_user.user_id)


@router.post("/logout", summary="Log out")
def logout(current_user: AuthenticatedUser = Depends(get_current_active_user)):
    # Tokens are stateless; the client simply drops its copy.
    return {"message": "Logout successful"}
