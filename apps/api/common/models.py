# PATH: apps/api/common/models.py
from django.db import models


class TimestampModel(models.Model):
    """
    생성 / 수정 시간 자동 기록 추상 모델
    """
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True


class PositionedModel(TimestampModel):
    """
    부모 안에서 입력 순서(position)를 보존하는 하위 항목
    (문항 / 보기 / 첨부). 수정은 replace-all 이라 position 은 0..n-1 로 다시 매겨진다.
    """
    position = models.PositiveIntegerField(default=0)

    class Meta:
        abstract = True
        ordering = ["position", "id"]
