# campusnet/services/permission_service.py
"""
Messaging permission rules.

Authority runs OFFICIAL > TEACHER > STUDENT. Officials may reach anyone,
teachers only the students of their own branch, students only other
students (in any branch).
"""
from typing import Optional

from campusnet.models.user_model import RoleEnum


def can_send(sender, target_role: Optional[RoleEnum], target_branch: Optional[str]) -> bool:
    """
    Decide whether `sender` may message users of `target_role`/`target_branch`.

    `sender` is anything exposing `role` and `branch` (an ORM User or an
    AuthenticatedUser). Pure function, first matching rule wins.
    """
    role = getattr(sender, "role", None)

    if role == RoleEnum.OFFICIAL:
        return True

    if role == RoleEnum.TEACHER:
        return target_role == RoleEnum.STUDENT and target_branch == sender.branch

    if role == RoleEnum.STUDENT:
        return target_role == RoleEnum.STUDENT

    return False


def can_manage_user(actor, user_id: int) -> bool:
    """Profiles can be edited by their owner or by an official."""
    return actor.user_id == user_id or actor.role == RoleEnum.OFFICIAL
