# PATH: apps/domains/forms/models/attachment.py
from django.db import models

from apps.api.common.models import PositionedModel


class Attachment(PositionedModel):
    """
    문항 첨부 파일 (오브젝트 스토리지 업로드 결과)
    - file_path: 공개 URL
    - file_type: MIME
    """

    question = models.ForeignKey(
        "forms.Question",
        on_delete=models.CASCADE,
        related_name="attachments",
    )

    file_path = models.URLField(max_length=1000)
    file_type = models.CharField(max_length=100, blank=True, default="")

    class Meta(PositionedModel.Meta):
        app_label = "forms"

    def __str__(self):
        return self.file_path
