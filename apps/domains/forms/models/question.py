# PATH: apps/domains/forms/models/question.py
from django.core.validators import MinValueValidator
from django.db import models

from apps.api.common.models import PositionedModel
from apps.domains.forms import question_types


class Question(PositionedModel):
    """
    폼 문항 정의

    answer 저장 형식 (채점은 results 도메인 책임)
    - text-input / date: JSON 배열(허용 답안 목록) 또는 단일 문자열
    - scale: 정수 문자열
    - 선택형: 사용하지 않음 (Option.is_correct 사용)

    placeholder ~ scale_label_max 는 화면 표시용 메타데이터 (채점 무관)
    """

    class Type(models.TextChoices):
        TEXT_INPUT = question_types.TEXT_INPUT, "Text input"
        DATE = question_types.DATE, "Date"
        MULTIPLE_CHOICE = question_types.MULTIPLE_CHOICE, "Multiple choice"
        CHECKBOX = question_types.CHECKBOX, "Checkbox"
        RADIO_BUTTON = question_types.RADIO_BUTTON, "Radio button"
        DROPDOWN = question_types.DROPDOWN, "Dropdown"
        SCALE = question_types.SCALE, "Scale"
        FILE = question_types.FILE, "File upload"

    form = models.ForeignKey(
        "forms.Form",
        on_delete=models.CASCADE,
        related_name="questions",
    )

    type = models.CharField(max_length=20, choices=Type.choices)
    text = models.TextField()
    required = models.BooleanField(default=True)

    total_score = models.FloatField(
        null=True,
        blank=True,
        validators=[MinValueValidator(0)],
    )
    answer = models.TextField(null=True, blank=True)

    # ---------------------------
    # presentation
    # ---------------------------
    placeholder = models.CharField(max_length=255, null=True, blank=True)
    min_length = models.PositiveIntegerField(null=True, blank=True)
    max_length = models.PositiveIntegerField(null=True, blank=True)
    min_selection = models.PositiveIntegerField(null=True, blank=True)
    max_selection = models.PositiveIntegerField(null=True, blank=True)
    allowed_file_types = models.CharField(max_length=255, null=True, blank=True)
    scale_min = models.IntegerField(null=True, blank=True)
    scale_max = models.IntegerField(null=True, blank=True)
    scale_label_min = models.CharField(max_length=255, null=True, blank=True)
    scale_label_max = models.CharField(max_length=255, null=True, blank=True)

    class Meta(PositionedModel.Meta):
        app_label = "forms"

    def __str__(self):
        return f"Q{self.position} [{self.type}] {self.text[:40]}"

    @property
    def is_choice(self) -> bool:
        return question_types.is_choice(self.type)

    @property
    def allowed_file_type_list(self):
        if not self.allowed_file_types:
            return []
        return [t.strip() for t in self.allowed_file_types.split(",") if t.strip()]
