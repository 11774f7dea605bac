from typing import List, Optional
from sqlalchemy.orm import Session

from campusnet.models.user_model import User, RoleEnum, pwd_context
from campusnet.schemas.user_schema import UserCreate, UserUpdate


def get_user(db: Session, user_id: int) -> Optional[User]:
    return db.query(User).filter(User.user_id == user_id).first()


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == email).first()


def get_users(
    db: Session,
    role: Optional[RoleEnum] = None,
    branch: Optional[str] = None,
    skip: int = 0,
    limit: int = 100,
) -> List[User]:
    """
    List users, optionally filtered by role and/or branch.
    """
    query = db.query(User)
    if role is not None:
        query = query.filter(User.role == role)
    if branch is not None:
        query = query.filter(User.branch == branch)
    return query.order_by(User.user_id).offset(skip).limit(limit).all()


def get_user_ids(db: Session, role: RoleEnum, branch: Optional[str] = None) -> List[int]:
    """Ids of every user holding `role`, narrowed to `branch` when given."""
    query = db.query(User.user_id).filter(User.role == role)
    if branch is not None:
        query = query.filter(User.branch == branch)
    return [row.user_id for row in query.order_by(User.user_id).all()]


def get_existing_user_ids(db: Session, user_ids: List[int]) -> List[int]:
    if not user_ids:
        return []
    rows = db.query(User.user_id).filter(User.user_id.in_(user_ids)).all()
    return [row.user_id for row in rows]


def create_user(db: Session, user: UserCreate) -> User:
    """
    Create a user. The password is stored as a bcrypt hash.
    """
    db_user = User(
        email=user.email,
        name=user.name,
        role=user.role,
        position=user.position,
        branch=user.branch,
        profile_image=user.profile_image,
        password=pwd_context.hash(user.password.encode('utf-8')[:72]),
    )
    db.add(db_user)
    db.commit()
    db.refresh(db_user)
    return db_user


def update_user(db: Session, db_user: User, user_update: UserUpdate) -> User:
    """
    Apply a profile update. Officials may change their position but not a
    branch; teachers and students the other way round.
    """
    update_data = user_update.model_dump(exclude_unset=True)
    if db_user.role == RoleEnum.OFFICIAL:
        update_data.pop("branch", None)
    else:
        update_data.pop("position", None)

    for key, value in update_data.items():
        setattr(db_user, key, value)

    db.add(db_user)
    db.commit()
    db.refresh(db_user)
    return db_user
