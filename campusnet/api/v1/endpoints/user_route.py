from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List, Optional

from campusnet.api.deps import get_db
from campusnet.api.auth.auth import get_current_active_user
from campusnet.crud import user_crud
from campusnet.exceptions import NotFoundError, PermissionDeniedError
from campusnet.models.user_model import RoleEnum
from campusnet.schemas.auth_schema import AuthenticatedUser
from campusnet.schemas.user_schema import UserOut, UserUpdate
from campusnet.services import permission_service

router = APIRouter()


@router.get(
    "",
    response_model=List[UserOut],
    summary="List users, optionally by role and branch",
)
def get_all_users(
    role: Optional[RoleEnum] = None,
    branch: Optional[str] = None,
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db),
    current_user: AuthenticatedUser = Depends(get_current_active_user),
):
    return user_crud.get_users(db, role=role, branch=branch, skip=skip, limit=limit)


@router.get(
    "/branch/{branch}",
    response_model=List[UserOut],
    summary="List the users of one branch",
)
def get_users_by_branch(
    branch: str,
    db: Session = Depends(get_db),
    current_user: AuthenticatedUser = Depends(get_current_active_user),
):
    """
    Officials can browse every branch; teachers and students only their own.
    """
    if current_user.role != RoleEnum.OFFICIAL and current_user.branch != branch:
        raise PermissionDeniedError("Access denied to this branch")
    return user_crud.get_users(db, branch=branch)


@router.get("/{user_id}", response_model=UserOut, summary="Get one user")
def get_user(
    user_id: int,
    db: Session = Depends(get_db),
    current_user: AuthenticatedUser = Depends(get_current_active_user),
):
    db_user = user_crud.get_user(db, user_id)
    if db_user is None:
        raise NotFoundError("User", user_id)
    return db_user


@router.put(
    "/{user_id}",
    response_model=UserOut,
    status_code=status.HTTP_200_OK,
    summary="Update a user profile",
)
def update_user(
    user_id: int,
    user_update: UserUpdate,
    db: Session = Depends(get_db),
    current_user: AuthenticatedUser = Depends(get_current_active_user),
):
    """
    Allowed for the profile owner and for officials. The role never changes.
    """
    db_user = user_crud.get_user(db, user_id)
    if db_user is None:
        raise NotFoundError("User", user_id)
    if not permission_service.can_manage_user(current_user, user_id):
        raise PermissionDeniedError()
    return user_crud.update_user(db, db_user, user_update)
