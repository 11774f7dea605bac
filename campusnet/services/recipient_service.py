# campusnet/services/recipient_service.py
import logging
from typing import List, Optional, Tuple

from sqlalchemy.orm import Session

from campusnet.crud import user_crud
from campusnet.exceptions import ValidationFailedError
from campusnet.models.message_model import MessageType
from campusnet.models.user_model import RoleEnum

logger = logging.getLogger(__name__)


def resolve_recipients(
    db: Session,
    sender,
    recipient_ids: Optional[List[int]] = None,
    target_role: Optional[RoleEnum] = None,
    target_branch: Optional[str] = None,
) -> Tuple[MessageType, List[int]]:
    """
    Expand a send request into a concrete list of recipient ids.

    - explicit ids win and give an INDIVIDUAL message with exactly those ids
    - otherwise a target role gives a GROUP message over every user holding
      that role; the branch filter is `target_branch` when given, none for
      officials, and the teacher's own branch for teachers

    The returned list is a snapshot, the caller stores it as is. An empty
    group is a valid result.
    """
    if recipient_ids:
        unique_ids = list(dict.fromkeys(recipient_ids))
        return MessageType.INDIVIDUAL, unique_ids

    if target_role is None:
        raise ValidationFailedError("Either recipient_ids or target_role is required")

    branch = target_branch
    if branch is None and sender.role == RoleEnum.TEACHER:
        branch = sender.branch
    # Officials without an explicit branch reach every branch.

    resolved = user_crud.get_user_ids(db, role=target_role, branch=branch)
    logger.info(
        "Resolved group message from user %s: role=%s branch=%s -> %d recipients",
        sender.user_id, target_role, branch, len(resolved),
    )
    return MessageType.GROUP, resolved
