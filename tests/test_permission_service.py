from types import SimpleNamespace

import pytest

from campusnet.models.user_model import RoleEnum
from campusnet.services.permission_service import can_manage_user, can_send

BRANCHES = ["CSE", "IT", "ECE", None]


def sender(role, branch=None, user_id=1):
    return SimpleNamespace(user_id=user_id, role=role, branch=branch)


@pytest.mark.parametrize("target_role", list(RoleEnum))
@pytest.mark.parametrize("target_branch", BRANCHES)
def test_official_can_message_anyone(target_role, target_branch):
    assert can_send(sender(RoleEnum.OFFICIAL), target_role, target_branch) is True


def test_teacher_limited_to_students_of_own_branch():
    teacher = sender(RoleEnum.TEACHER, "CSE")

    assert can_send(teacher, RoleEnum.STUDENT, "CSE") is True
    assert can_send(teacher, RoleEnum.STUDENT, "IT") is False
    assert can_send(teacher, RoleEnum.STUDENT, None) is False
    assert can_send(teacher, RoleEnum.OFFICIAL, "CSE") is False


@pytest.mark.parametrize("target_branch", BRANCHES)
def test_teacher_cannot_message_teachers(target_branch):
    assert can_send(sender(RoleEnum.TEACHER, "CSE"), RoleEnum.TEACHER, target_branch) is False


@pytest.mark.parametrize("target_branch", BRANCHES)
def test_student_can_message_students_in_any_branch(target_branch):
    assert can_send(sender(RoleEnum.STUDENT, "CSE"), RoleEnum.STUDENT, target_branch) is True


@pytest.mark.parametrize("target_role", [RoleEnum.TEACHER, RoleEnum.OFFICIAL])
@pytest.mark.parametrize("target_branch", BRANCHES)
def test_student_cannot_message_upwards(target_role, target_branch):
    assert can_send(sender(RoleEnum.STUDENT, "CSE"), target_role, target_branch) is False


def test_plain_strings_compare_like_roles():
    assert can_send(sender(RoleEnum.TEACHER, "IT"), "STUDENT", "IT") is True


@pytest.mark.parametrize("role", [None, "ADMIN", "PARENT"])
def test_unknown_role_is_denied(role):
    assert can_send(sender(role, "CSE"), RoleEnum.STUDENT, "CSE") is False


def test_profile_management_rights():
    student = sender(RoleEnum.STUDENT, "CSE", user_id=7)
    official = sender(RoleEnum.OFFICIAL, user_id=1)

    assert can_manage_user(student, 7) is True
    assert can_manage_user(student, 8) is False
    assert can_manage_user(official, 8) is True
