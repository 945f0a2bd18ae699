# apps/domains/forms/serializers/form_write.py
from __future__ import annotations

import json
from numbers import Number

from rest_framework import serializers

from apps.domains.forms import question_types
from apps.domains.forms.models import Form


# 사용자가 직접 지정할 수 있는 상태 (deleted 는 삭제 API 전용)
WRITABLE_STATUSES = [
    Form.Status.DRAFT,
    Form.Status.PUBLIC,
    Form.Status.PRIVATE,
    Form.Status.DISABLED,
]


class OptionInputField(serializers.Field):
    """
    보기 입력: "Paris" 또는 {"text": "Paris", "is_correct": true, "score": 10}
    """

    default_error_messages = {
        "invalid": "Option must be a string or an object with a text.",
        "blank": "Option text may not be blank.",
        "score": "Option score must be a non-negative number.",
    }

    def to_internal_value(self, data):
        if isinstance(data, str):
            text, is_correct, score = data, False, None
        elif isinstance(data, dict):
            text = data.get("text")
            is_correct = data.get("is_correct", False)
            score = data.get("score")
        else:
            self.fail("invalid")

        if not isinstance(text, str):
            self.fail("invalid")
        text = text.strip()
        if not text:
            self.fail("blank")

        if isinstance(is_correct, str):
            is_correct = is_correct.strip().lower() in ("1", "true", "yes", "on")

        if score in ("", None):
            score = None
        elif isinstance(score, bool):
            self.fail("score")
        else:
            try:
                score = float(score)
            except (TypeError, ValueError):
                self.fail("score")
            if score < 0:
                self.fail("score")

        return {"text": text, "is_correct": bool(is_correct), "score": score}

    def to_representation(self, value):
        return value


class AttachmentRefSerializer(serializers.Serializer):
    """수정 시 기존 첨부 유지용 참조 (새 파일은 multipart 로 전송)"""
    file_path = serializers.URLField(max_length=1000)
    file_type = serializers.CharField(max_length=100, required=False, allow_blank=True, default="")


class QuestionWriteSerializer(serializers.Serializer):
    type = serializers.ChoiceField(choices=question_types.ALL_TYPES)
    text = serializers.CharField()
    required = serializers.BooleanField(default=True)

    total_score = serializers.FloatField(min_value=0, required=False, allow_null=True)
    answer = serializers.JSONField(required=False, allow_null=True)
    options = serializers.ListField(child=OptionInputField(), required=False, default=list)
    attachments = serializers.ListField(child=AttachmentRefSerializer(), required=False, default=list)

    placeholder = serializers.CharField(max_length=255, required=False, allow_blank=True, allow_null=True)
    min_length = serializers.IntegerField(min_value=0, required=False, allow_null=True)
    max_length = serializers.IntegerField(min_value=0, required=False, allow_null=True)
    min_selection = serializers.IntegerField(min_value=0, required=False, allow_null=True)
    max_selection = serializers.IntegerField(min_value=0, required=False, allow_null=True)
    allowed_file_types = serializers.JSONField(required=False, allow_null=True)
    scale_min = serializers.IntegerField(required=False, allow_null=True)
    scale_max = serializers.IntegerField(required=False, allow_null=True)
    scale_label_min = serializers.CharField(max_length=255, required=False, allow_blank=True, allow_null=True)
    scale_label_max = serializers.CharField(max_length=255, required=False, allow_blank=True, allow_null=True)

    def to_internal_value(self, data):
        # 프론트 별칭: min/max, labels.min/labels.max
        if isinstance(data, dict):
            data = dict(data)
            if data.get("scale_min") is None and "min" in data:
                data["scale_min"] = data.pop("min")
            if data.get("scale_max") is None and "max" in data:
                data["scale_max"] = data.pop("max")
            labels = data.get("labels")
            if isinstance(labels, dict):
                data.setdefault("scale_label_min", labels.get("min"))
                data.setdefault("scale_label_max", labels.get("max"))
        return super().to_internal_value(data)

    def validate_allowed_file_types(self, value):
        if value in (None, "", []):
            return None
        if isinstance(value, str):
            items = value.split(",")
        elif isinstance(value, list):
            items = value
        else:
            raise serializers.ValidationError("Expected a list or a comma-separated string.")
        cleaned = [str(v).strip() for v in items if str(v).strip()]
        return ",".join(cleaned) or None

    def validate_answer(self, value):
        """목록이면 JSON 배열 문자열, 스칼라는 문자열로 저장"""
        if value is None:
            return None
        if isinstance(value, list):
            return json.dumps(value, ensure_ascii=False)
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Number)):
            return str(value)
        raise serializers.ValidationError("Answer must be a string, a number or a list.")

    def validate(self, attrs):
        qtype = attrs["type"]
        options = attrs.get("options") or []

        if question_types.is_choice(qtype):
            if not options:
                raise serializers.ValidationError(
                    {"options": "Choice questions need at least one option."}
                )
        elif options:
            raise serializers.ValidationError(
                {"options": f"Questions of type '{qtype}' cannot have options."}
            )

        lo, hi = attrs.get("scale_min"), attrs.get("scale_max")
        if lo is not None and hi is not None and lo > hi:
            raise serializers.ValidationError({"scale_max": "scale_max must be >= scale_min."})

        return attrs


class FormWriteSerializer(serializers.Serializer):
    """
    폼 생성 / 수정 입력

    - questions 최소 1개
    - type 은 생성 시 필수, 수정 시 기존 값과 달라지면 거부
    - 퀴즈 문항의 total_score 미지정 시 정답 보기 점수 합으로 채움
    """

    title = serializers.CharField(max_length=255)
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    status = serializers.ChoiceField(choices=WRITABLE_STATUSES, required=False)
    type = serializers.ChoiceField(choices=Form.Type.choices, required=False)
    questions = QuestionWriteSerializer(many=True, allow_empty=False)

    def validate_type(self, value):
        instance = self.instance
        if instance is not None and value != instance.type:
            raise serializers.ValidationError("Form type cannot be changed.")
        return value

    def validate(self, attrs):
        form_type = attrs.get("type") or getattr(self.instance, "type", None)
        if not form_type:
            raise serializers.ValidationError({"type": "This field is required."})
        attrs["type"] = form_type

        if not attrs.get("status"):
            attrs["status"] = getattr(self.instance, "status", None) or Form.Status.DRAFT

        if form_type == Form.Type.QUIZ:
            for q in attrs["questions"]:
                if q.get("total_score") is None and q.get("options"):
                    q["total_score"] = sum(
                        (o["score"] or 0) for o in q["options"] if o["is_correct"]
                    )

        return attrs
