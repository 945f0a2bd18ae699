# PATH: apps/domains/forms/services/form_service.py
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence

from django.conf import settings
from django.db import IntegrityError, transaction
from rest_framework.exceptions import ValidationError

from apps.domains.forms.form_code import generate_unique_form_code
from apps.domains.forms.models import Attachment, Form, Option, Question
from apps.infrastructure.storage.object_storage import UploadBatch

logger = logging.getLogger(__name__)

# 동시 생성으로 code unique 충돌 시 재시도 횟수
CODE_ATTEMPTS = 3

QUESTION_FIELDS = (
    "type",
    "text",
    "required",
    "total_score",
    "answer",
    "placeholder",
    "min_length",
    "max_length",
    "min_selection",
    "max_selection",
    "allowed_file_types",
    "scale_min",
    "scale_max",
    "scale_label_min",
    "scale_label_max",
)


def _write_questions(
    *,
    form: Form,
    questions: Sequence[Dict[str, Any]],
    files_by_question: Dict[int, List[Any]],
    uploads: UploadBatch,
    reusable_paths: frozenset = frozenset(),
) -> None:
    """
    문항 / 보기 / 첨부를 입력 순서(position) 그대로 생성
    첨부 = (수정 시 유지 요청한 기존 첨부) + (이번 요청의 업로드 파일)
    """
    for q_pos, q in enumerate(questions):
        question = Question.objects.create(
            form=form,
            position=q_pos,
            **{f: q.get(f) for f in QUESTION_FIELDS if f in q},
        )

        Option.objects.bulk_create([
            Option(
                question=question,
                position=o_pos,
                text=o["text"],
                is_correct=o["is_correct"],
                score=o["score"],
            )
            for o_pos, o in enumerate(q.get("options") or [])
        ])

        attachments: List[Attachment] = []
        for ref in q.get("attachments") or []:
            if ref["file_path"] not in reusable_paths:
                raise ValidationError({
                    "questions": {q_pos: {"attachments": "Unknown attachment reference."}}
                })
            attachments.append(
                Attachment(question=question, file_path=ref["file_path"], file_type=ref.get("file_type") or "")
            )

        for f in files_by_question.get(q_pos, []):
            stored = uploads.upload(f, folder=settings.STORAGE_ATTACHMENTS_FOLDER)
            attachments.append(
                Attachment(question=question, file_path=stored.url, file_type=stored.content_type)
            )

        for a_pos, a in enumerate(attachments):
            a.position = a_pos
        Attachment.objects.bulk_create(attachments)


def _insert_form(*, user, data: Dict[str, Any]) -> Form:
    """
    선조회로 고른 code 가 동시 생성과 겹치면 unique 제약에서 막힌다.
    savepoint 로 되돌리고 새 code 로 다시 시도.
    """
    for attempt in range(1, CODE_ATTEMPTS + 1):
        code = generate_unique_form_code()
        try:
            with transaction.atomic():
                return Form.objects.create(
                    user=user,
                    title=data["title"],
                    description=data.get("description"),
                    status=data.get("status") or Form.Status.DRAFT,
                    type=data["type"],
                    code=code,
                )
        except IntegrityError:
            if attempt == CODE_ATTEMPTS or not Form.objects.filter(code=code).exists():
                raise
            logger.warning("form code collision, retrying: code=%s attempt=%s", code, attempt)


def create_form(
    *,
    user,
    data: Dict[str, Any],
    files_by_question: Optional[Dict[int, List[Any]]] = None,
) -> Form:
    """
    Form + Question + Option + Attachment 생성 (all-or-nothing)
    업로드 실패 시 UploadFailed, 이미 올린 파일은 정리된다.
    """
    with UploadBatch() as uploads, transaction.atomic():
        form = _insert_form(user=user, data=data)
        _write_questions(
            form=form,
            questions=data["questions"],
            files_by_question=files_by_question or {},
            uploads=uploads,
        )

    logger.info(
        "form created: id=%s type=%s code=%s user=%s questions=%s",
        form.id, form.type, form.code, user.id, len(data["questions"]),
    )
    return form


def update_form(
    *,
    form: Form,
    data: Dict[str, Any],
    files_by_question: Optional[Dict[int, List[Any]]] = None,
) -> Form:
    """
    문항 전체 교체 (replace-all)
    - 기존 Question/Option/Attachment 삭제 후 재생성
    - 기존 Response 는 question=NULL 로 남는다 (채점 시 제외)
    - type 은 변경 불가 (serializer 에서 검증)
    """
    if data.get("type") and data["type"] != form.type:
        raise ValidationError({"type": "Form type cannot be changed."})

    with UploadBatch() as uploads, transaction.atomic():
        reusable = frozenset(
            Attachment.objects.filter(question__form=form).values_list("file_path", flat=True)
        )

        form.title = data["title"]
        form.description = data.get("description")
        form.status = data.get("status") or form.status
        form.save(update_fields=["title", "description", "status", "updated_at"])

        form.questions.all().delete()

        _write_questions(
            form=form,
            questions=data["questions"],
            files_by_question=files_by_question or {},
            uploads=uploads,
            reusable_paths=reusable,
        )

    logger.info(
        "form updated: id=%s questions=%s",
        form.id, len(data["questions"]),
    )
    return form


@transaction.atomic
def soft_delete_form(form: Form) -> None:
    form.status = Form.Status.DELETED
    form.save(update_fields=["status", "updated_at"])
    logger.info("form deleted (soft): id=%s", form.id)


def load_form_tree(form_id) -> Form:
    """문항/보기/첨부 prefetch 된 Form"""
    return (
        Form.objects
        .prefetch_related("questions__options", "questions__attachments")
        .get(pk=form_id)
    )
