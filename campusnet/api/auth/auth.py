# campusnet/api/auth/auth.py
from datetime import datetime, timedelta, timezone
from typing import Dict, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError, jwt  # type: ignore
from sqlalchemy.orm import Session

from campusnet.api.deps import get_db
from campusnet.config import ACCESS_TOKEN_EXPIRE_MINUTES, SECRET_KEY
from campusnet.models.user_model import User
from campusnet.schemas.auth_schema import AuthenticatedUser, TokenData

ALGORITHM = "HS256"

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/v1/auth/login")


def create_access_token(data: Dict, expires_delta: Optional[timedelta] = None) -> str:
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES))
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)


def create_token_for_user(user: User) -> str:
    return create_access_token({"sub": str(user.user_id), "role": user.role.value})


def verify_token(token: str) -> TokenData:
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Not authenticated",
        headers={"WWW-Authenticate": "Bearer"},
    )
    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
        user_id = payload.get("sub")
        if user_id is None:
            raise credentials_exception
        return TokenData(user_id=int(user_id))
    except (JWTError, ValueError):
        raise credentials_exception


def to_authenticated_user(user: User) -> AuthenticatedUser:
    return AuthenticatedUser(
        user_id=user.user_id,
        email=user.email,
        name=user.name,
        role=user.role,
        branch=user.branch,
        position=user.position,
    )


def get_current_active_user(token: str = Depends(oauth2_scheme), db: Session = Depends(get_db)) -> AuthenticatedUser:
    token_data = verify_token(token)
    user = db.query(User).filter(User.user_id == token_data.user_id).first()
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return to_authenticated_user(user)

