# PATH: apps/domains/forms/models/option.py
from django.core.validators import MinValueValidator
from django.db import models

from apps.api.common.models import PositionedModel


class Option(PositionedModel):
    """
    선택형 문항의 보기
    - score 는 is_correct=True 일 때만 의미 있음
    - 응답은 id가 아니라 text 로 매칭된다
    """

    question = models.ForeignKey(
        "forms.Question",
        on_delete=models.CASCADE,
        related_name="options",
    )

    text = models.CharField(max_length=500)
    is_correct = models.BooleanField(default=False)
    score = models.FloatField(
        null=True,
        blank=True,
        validators=[MinValueValidator(0)],
    )

    class Meta(PositionedModel.Meta):
        app_label = "forms"

    def __str__(self):
        return self.text
