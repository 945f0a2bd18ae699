# apps/domains/submissions/services/submission_service.py
"""
submissions 처리의 유일한 퍼블릭 서비스
- 원본 응답 저장만 수행 (채점은 results 도메인)
- Submission + Response 는 하나의 트랜잭션
- 1인 1회 규칙: 선조회 + 부분 unique 제약, IntegrityError → AlreadyAnswered
"""
from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional, Sequence

from django.conf import settings
from django.db import IntegrityError, transaction
from rest_framework.exceptions import ValidationError

from apps.api.common.exceptions import AlreadyAnswered
from apps.domains.forms.models import Form
from apps.domains.forms.services import access_policy
from apps.domains.submissions.models import Response as FormResponse
from apps.domains.submissions.models import Submission
from apps.infrastructure.storage.object_storage import UploadBatch

logger = logging.getLogger(__name__)


def serialize_answer(value: Any) -> Optional[str]:
    """Response.answer_text 직렬화: 목록은 JSON 배열, 스칼라는 문자열"""
    if value is None:
        return None
    if isinstance(value, (list, tuple)):
        return json.dumps([v for v in value if v is not None], ensure_ascii=False)
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _check_questions(answers: Sequence[Dict[str, Any]], question_ids) -> None:
    unknown = [a["question_id"] for a in answers if a["question_id"] not in question_ids]
    if unknown:
        raise ValidationError({
            "answers": f"Questions {unknown} do not belong to this form."
        })


def _actor(user):
    return user if user is not None and user.is_authenticated else None


def submit_quiz(*, form: Form, user, answers: Sequence[Dict[str, Any]]) -> Submission:
    """
    퀴즈 1회 제출
    - 모든 문항에 대해 Response 생성 (미응답은 answer_text=None)
    """
    if form.type != Form.Type.QUIZ:
        raise ValidationError({"form": "This form is not a quiz."})

    questions = list(form.questions.all())
    _check_questions(answers, {q.id for q in questions})
    by_qid = {a["question_id"]: a.get("value") for a in answers}

    try:
        with transaction.atomic():
            access_policy.ensure_can_submit(form, user)

            submission = Submission.objects.create(
                form=form,
                user=user,
                single_per_user=True,
            )
            FormResponse.objects.bulk_create([
                FormResponse(
                    submission=submission,
                    form=form,
                    question=q,
                    user=user,
                    answer_text=serialize_answer(by_qid.get(q.id)),
                )
                for q in questions
            ])
    except IntegrityError:
        logger.warning("duplicate quiz submission blocked: form=%s user=%s", form.id, user.id)
        raise AlreadyAnswered()

    logger.info("quiz submitted: form=%s user=%s submission=%s", form.id, user.id, submission.id)
    return submission


def submit_survey(
    *,
    form: Form,
    user,
    answers: Sequence[Dict[str, Any]],
    files_by_index: Optional[Dict[int, List[Any]]] = None,
) -> Submission:
    """
    설문 응답 저장
    - 전달된 응답만 저장 (필수 문항 강제 없음)
    - 익명 허용 (user=None)
    - 파일 응답은 업로드 후 URL 저장, 실패 시 UploadFailed 로 전체 중단
    """
    if form.type != Form.Type.SURVEY:
        raise ValidationError({"form": "This form is not a survey."})

    actor = _actor(user)
    question_ids = set(form.questions.values_list("id", flat=True))
    _check_questions(answers, question_ids)

    files_by_index = files_by_index or {}
    single = actor is not None and access_policy.is_single_submission(form)

    with UploadBatch() as uploads:
        try:
            with transaction.atomic():
                if single:
                    access_policy.ensure_can_submit(form, actor)

                submission = Submission.objects.create(
                    form=form,
                    user=actor,
                    single_per_user=single,
                )

                rows: List[FormResponse] = []
                for idx, item in enumerate(answers):
                    value = item.get("value")
                    files = files_by_index.get(idx)
                    if files:
                        value = uploads.upload(
                            files[0], folder=settings.STORAGE_RESPONSES_FOLDER
                        ).url
                    rows.append(
                        FormResponse(
                            submission=submission,
                            form=form,
                            question_id=item["question_id"],
                            user=actor,
                            answer_text=serialize_answer(value),
                        )
                    )
                FormResponse.objects.bulk_create(rows)
        except IntegrityError:
            logger.warning("duplicate survey submission blocked: form=%s user=%s", form.id, actor and actor.id)
            raise AlreadyAnswered()

    logger.info(
        "survey submitted: form=%s user=%s submission=%s answers=%s",
        form.id, actor and actor.id, submission.id, len(answers),
    )
    return submission


@transaction.atomic
def delete_submission(submission: Submission) -> None:
    sid, form_id = submission.id, submission.form_id
    submission.delete()
    logger.info("submission deleted: id=%s form=%s", sid, form_id)
