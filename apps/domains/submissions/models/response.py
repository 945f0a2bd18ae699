# apps/domains/submissions/models/response.py
from __future__ import annotations

from django.db import models
from django.conf import settings

from apps.api.common.models import TimestampModel


class Response(TimestampModel):
    """
    문항별 원본 응답

    answer_text 직렬화 규칙
    - 단일 값: 문자열 그대로
    - 다중 선택(checkbox 등): JSON 배열 문자열
    - 파일 응답: 오브젝트 URL
    - 미응답: None

    question 은 폼 수정(문항 전체 교체) 시 NULL 이 된다.
    """

    submission = models.ForeignKey(
        "submissions.Submission",
        on_delete=models.CASCADE,
        related_name="responses",
    )
    form = models.ForeignKey(
        "forms.Form",
        on_delete=models.CASCADE,
        related_name="responses",
    )
    question = models.ForeignKey(
        "forms.Question",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="responses",
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="form_responses",
    )

    answer_text = models.TextField(null=True, blank=True)

    class Meta:
        app_label = "submissions"
        ordering = ["id"]

    def __str__(self):
        return f"Response#{self.id} submission={self.submission_id} q={self.question_id}"
