# apps/domains/submissions/models/submission.py
from __future__ import annotations

from django.db import models
from django.conf import settings

from apps.api.common.models import TimestampModel


class Submission(TimestampModel):
    """
    submissions = "제출 행위 + 원본 보관"
    - 계산/채점/정답비교 금지 (results 도메인 책임)
    - user=None: 익명 설문 응답
    - single_per_user=True: 1인 1회 규칙이 적용된 제출 (부분 unique 제약 대상)
    """

    form = models.ForeignKey(
        "forms.Form",
        on_delete=models.CASCADE,
        related_name="submissions",
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="submissions",
    )

    single_per_user = models.BooleanField(default=False)

    class Meta:
        app_label = "submissions"
        ordering = ["-created_at", "-id"]
        constraints = [
            models.UniqueConstraint(
                fields=["form", "user"],
                condition=models.Q(single_per_user=True),
                name="uniq_single_submission_per_user",
            ),
        ]
        indexes = [
            models.Index(fields=["user", "created_at"], name="submission_user_created_idx"),
        ]

    def __str__(self):
        return f"Submission#{self.id} form={self.form_id} user={self.user_id}"
