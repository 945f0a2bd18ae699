# PATH: apps/domains/forms/services/access_policy.py
"""
폼 접근 정책 (단일 진실)

- 작성자 전용 조회: 소유자 불일치 / 없음 / soft delete → 404 (존재 여부 비노출)
- 코드 기반 공개 조회: status=public 만, 그 외 404
- 재제출 가드: 퀴즈는 항상 1인 1회, 설문은 FORMS_SURVEY_SINGLE_SUBMISSION 일 때만
- 제출 삭제: 없으면 404, 폼 소유자가 아니면 403
"""
from __future__ import annotations

from typing import Optional

from django.conf import settings
from rest_framework.exceptions import NotFound, PermissionDenied

from apps.api.common.exceptions import AlreadyAnswered
from apps.domains.forms.models import Form
from apps.domains.submissions.models import Submission

PERMITTED = "permitted"
ALREADY_ANSWERED = "already_answered"


# ---------------------------------------------------------------------
# 작성자
# ---------------------------------------------------------------------

def owned_forms(user, *, form_type: Optional[str] = None):
    qs = Form.objects.filter(user=user).exclude(status=Form.Status.DELETED)
    if form_type:
        qs = qs.filter(type=form_type)
    return qs


def get_owned_form(user, form_id, *, form_type: Optional[str] = None) -> Form:
    form = owned_forms(user, form_type=form_type).filter(pk=form_id).first()
    if form is None:
        raise NotFound("Form not found.")
    return form


# ---------------------------------------------------------------------
# 응답자 (code)
# ---------------------------------------------------------------------

def public_forms():
    return Form.objects.filter(status=Form.Status.PUBLIC)


def get_public_form(code: str) -> Form:
    form = public_forms().filter(code=(code or "").strip().upper()).first()
    if form is None:
        raise NotFound("Form not found or not public.")
    return form


# ---------------------------------------------------------------------
# 재제출 가드
# ---------------------------------------------------------------------

def is_single_submission(form: Form) -> bool:
    if form.type == Form.Type.QUIZ:
        return True
    return bool(getattr(settings, "FORMS_SURVEY_SINGLE_SUBMISSION", False))


def has_answered(form: Form, user) -> bool:
    if user is None or not user.is_authenticated:
        return False
    return Submission.objects.filter(form=form, user=user).exists()


def resolve_permission(form: Form, user) -> str:
    if is_single_submission(form) and has_answered(form, user):
        return ALREADY_ANSWERED
    return PERMITTED


def ensure_can_submit(form: Form, user) -> None:
    """선조회. 동시 요청은 부분 unique 제약이 최종 차단한다."""
    if resolve_permission(form, user) == ALREADY_ANSWERED:
        raise AlreadyAnswered()


# ---------------------------------------------------------------------
# 제출 삭제
# ---------------------------------------------------------------------

def get_deletable_submission(user, submission_id) -> Submission:
    submission = (
        Submission.objects.select_related("form")
        .filter(pk=submission_id)
        .first()
    )
    if submission is None:
        raise NotFound("Submission not found.")
    if submission.form.user_id != user.id:
        raise PermissionDenied("You are not the owner of this form.")
    return submission
