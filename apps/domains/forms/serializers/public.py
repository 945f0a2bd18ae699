# apps/domains/forms/serializers/public.py
"""
응답자용 (code 기반) 직렬화

정답 관련 필드 비노출
- Option: is_correct, score
- Question: answer, total_score
"""
from rest_framework import serializers

from apps.domains.forms.models import Form, Question, Option
from apps.domains.forms.serializers.form_read import AttachmentSerializer


class PublicOptionSerializer(serializers.ModelSerializer):
    class Meta:
        model = Option
        fields = ["id", "position", "text"]


class PublicQuestionSerializer(serializers.ModelSerializer):
    options = PublicOptionSerializer(many=True, read_only=True)
    attachments = AttachmentSerializer(many=True, read_only=True)
    allowed_file_types = serializers.ListField(
        source="allowed_file_type_list",
        child=serializers.CharField(),
        read_only=True,
    )

    class Meta:
        model = Question
        fields = [
            "id",
            "position",
            "type",
            "text",
            "required",
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
            "options",
            "attachments",
        ]


class PublicFormSerializer(serializers.ModelSerializer):
    questions = PublicQuestionSerializer(many=True, read_only=True)

    class Meta:
        model = Form
        fields = ["id", "title", "description", "type", "code", "questions"]


class FormPermissionSerializer(serializers.Serializer):
    permission = serializers.ChoiceField(choices=["permitted", "already_answered"])
    title = serializers.CharField()
    description = serializers.CharField(allow_null=True, allow_blank=True)
    type = serializers.CharField()
