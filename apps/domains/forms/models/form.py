# PATH: apps/domains/forms/models/form.py
from django.conf import settings
from django.db import models

from apps.api.common.models import TimestampModel


class Form(TimestampModel):
    """
    퀴즈 / 설문 공통 정의 (단일 테이블)

    - type 은 생성 시 고정, 이후 변경 불가
    - code 로 공개 응답 (status=public 만)
    - 삭제는 soft delete (status=deleted)
    """

    class Status(models.TextChoices):
        DRAFT = "draft", "Draft"
        PUBLIC = "public", "Public"
        PRIVATE = "private", "Private"
        DISABLED = "disabled", "Disabled"
        DELETED = "deleted", "Deleted"

    class Type(models.TextChoices):
        QUIZ = "quiz", "Quiz"
        SURVEY = "survey", "Survey"

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="forms",
    )

    title = models.CharField(max_length=255)
    description = models.TextField(blank=True, null=True)

    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.DRAFT,
        db_index=True,
    )
    type = models.CharField(max_length=10, choices=Type.choices, db_index=True)

    # [A-Z0-9]{8}, 대문자 저장
    code = models.CharField(max_length=16, unique=True)

    class Meta:
        app_label = "forms"
        ordering = ["-created_at", "-id"]

    def __str__(self):
        return f"[{self.type}] {self.title} ({self.code})"

    def save(self, *args, **kwargs):
        if self.code:
            self.code = self.code.upper()
        super().save(*args, **kwargs)

    @property
    def is_quiz(self) -> bool:
        return self.type == self.Type.QUIZ
