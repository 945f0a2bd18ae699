# apps/domains/forms/serializers/form_read.py
from rest_framework import serializers

from apps.domains.forms.models import Form, Question, Option, Attachment


class OptionSerializer(serializers.ModelSerializer):
    class Meta:
        model = Option
        fields = ["id", "position", "text", "is_correct", "score"]


class AttachmentSerializer(serializers.ModelSerializer):
    class Meta:
        model = Attachment
        fields = ["id", "position", "file_path", "file_type"]


class QuestionSerializer(serializers.ModelSerializer):
    options = OptionSerializer(many=True, read_only=True)
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
            "options",
            "attachments",
        ]


class FormDetailSerializer(serializers.ModelSerializer):
    """작성자용: 정답 정보 포함"""
    questions = QuestionSerializer(many=True, read_only=True)

    class Meta:
        model = Form
        fields = [
            "id",
            "title",
            "description",
            "status",
            "type",
            "code",
            "created_at",
            "updated_at",
            "questions",
        ]


class FormSummarySerializer(serializers.ModelSerializer):
    """대시보드 요약 (questions_count / answered 는 annotate 값)"""
    questions_count = serializers.IntegerField(read_only=True)
    answered = serializers.IntegerField(read_only=True)

    class Meta:
        model = Form
        fields = [
            "id",
            "title",
            "description",
            "status",
            "type",
            "code",
            "questions_count",
            "answered",
            "created_at",
            "updated_at",
        ]
