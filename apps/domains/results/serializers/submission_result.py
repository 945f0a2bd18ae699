# apps/domains/results/serializers/submission_result.py
"""
채점 결과 직렬화

점수는 DB 에 저장하지 않는다. View 가 scoring.score_submission(s) 결과를
context["scores"] = {submission_id: SubmissionScore | None} 로 넘긴다.
"""
from __future__ import annotations

from django.contrib.auth import get_user_model
from rest_framework import serializers

from apps.domains.submissions.models import Response as FormResponse
from apps.domains.submissions.models import Submission

User = get_user_model()

DELETED_QUESTION_TEXT = "This question has been deleted"


class RespondentSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = ["id", "username", "name", "email", "avatar"]


class ScoredResponseSerializer(serializers.ModelSerializer):
    question_text = serializers.SerializerMethodField()
    question_type = serializers.SerializerMethodField()
    score = serializers.SerializerMethodField()
    max_score = serializers.SerializerMethodField()
    is_correct = serializers.SerializerMethodField()

    class Meta:
        model = FormResponse
        fields = [
            "id",
            "question_id",
            "question_text",
            "question_type",
            "answer_text",
            "score",
            "max_score",
            "is_correct",
        ]

    def _row(self, obj):
        return (self.context.get("response_scores") or {}).get(obj.id)

    def get_question_text(self, obj):
        return obj.question.text if obj.question_id else DELETED_QUESTION_TEXT

    def get_question_type(self, obj):
        return obj.question.type if obj.question_id else None

    def get_score(self, obj):
        row = self._row(obj)
        return row.points if row else None

    def get_max_score(self, obj):
        row = self._row(obj)
        return row.max_points if row else None

    def get_is_correct(self, obj):
        row = self._row(obj)
        return row.is_correct if row else None


class _ScoredSubmissionMixin:
    def _score(self, obj):
        return (self.context.get("scores") or {}).get(obj.id)

    def get_score(self, obj):
        s = self._score(obj)
        return s.score if s else None

    def get_max_score(self, obj):
        s = self._score(obj)
        return s.max_score if s else None

    def get_percentage(self, obj):
        s = self._score(obj)
        return s.percentage if s else None

    def get_correct_answers(self, obj):
        s = self._score(obj)
        return s.correct_count if s else None

    def get_incorrect_answers(self, obj):
        s = self._score(obj)
        return s.incorrect_count if s else None

    def get_is_perfect(self, obj):
        s = self._score(obj)
        return s.is_perfect if s else None

    def get_responses(self, obj):
        s = self._score(obj)
        return ScoredResponseSerializer(
            obj.responses.all(),
            many=True,
            context={"response_scores": s.by_response_id() if s else {}},
        ).data


class FormSubmissionResultSerializer(_ScoredSubmissionMixin, serializers.ModelSerializer):
    """작성자 결과 화면 row"""
    user = RespondentSerializer(read_only=True, allow_null=True)
    score = serializers.SerializerMethodField()
    max_score = serializers.SerializerMethodField()
    percentage = serializers.SerializerMethodField()
    correct_answers = serializers.SerializerMethodField()
    incorrect_answers = serializers.SerializerMethodField()
    responses = serializers.SerializerMethodField()

    class Meta:
        model = Submission
        fields = [
            "id",
            "user",
            "created_at",
            "updated_at",
            "score",
            "max_score",
            "percentage",
            "correct_answers",
            "incorrect_answers",
            "responses",
        ]


class MySubmissionSerializer(_ScoredSubmissionMixin, serializers.ModelSerializer):
    """응답자 본인 이력 row"""
    form = serializers.SerializerMethodField()
    author = serializers.SerializerMethodField()
    score = serializers.SerializerMethodField()
    max_score = serializers.SerializerMethodField()
    percentage = serializers.SerializerMethodField()
    correct_answers = serializers.SerializerMethodField()
    incorrect_answers = serializers.SerializerMethodField()
    responses = serializers.SerializerMethodField()

    class Meta:
        model = Submission
        fields = [
            "id",
            "created_at",
            "form",
            "author",
            "score",
            "max_score",
            "percentage",
            "correct_answers",
            "incorrect_answers",
            "responses",
        ]

    def get_form(self, obj):
        f = obj.form
        return {
            "id": f.id,
            "title": f.title,
            "description": f.description,
            "type": f.type,
            "code": f.code,
            "status": f.status,
        }

    def get_author(self, obj):
        u = obj.form.user
        return {"id": u.id, "name": u.display_name, "avatar": u.avatar}


class RecentActivitySerializer(_ScoredSubmissionMixin, serializers.ModelSerializer):
    form_id = serializers.IntegerField(source="form.id", read_only=True)
    form_title = serializers.CharField(source="form.title", read_only=True)
    form_type = serializers.CharField(source="form.type", read_only=True)
    form_code = serializers.CharField(source="form.code", read_only=True)
    score = serializers.SerializerMethodField()
    max_score = serializers.SerializerMethodField()
    percentage = serializers.SerializerMethodField()
    is_perfect = serializers.SerializerMethodField()

    class Meta:
        model = Submission
        fields = [
            "id",
            "created_at",
            "form_id",
            "form_title",
            "form_type",
            "form_code",
            "score",
            "max_score",
            "percentage",
            "is_perfect",
        ]
