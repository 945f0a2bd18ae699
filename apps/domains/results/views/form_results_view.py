# apps/domains/results/views/form_results_view.py
from __future__ import annotations

from rest_framework.filters import SearchFilter
from rest_framework.generics import ListAPIView
from rest_framework.permissions import IsAuthenticated

from apps.domains.forms.services import access_policy
from apps.domains.results.serializers.submission_result import FormSubmissionResultSerializer
from apps.domains.results.services.scoring import max_score_of, score_submissions

# ?sort= 화이트리스트
SORT_FIELDS = {
    "created_at": "created_at",
    "updated_at": "updated_at",
    "id": "id",
    "user": "user__name",
}


class FormResultsView(ListAPIView):
    """
    GET forms/<form_id>/results/?search=&sort=&direction=

    - 작성자 전용 (아니면 404)
    - search: 응답자 이름
    - 퀴즈: 제출/문항별 점수 포함, 설문: 점수 필드 null
    - 점수는 현재 페이지 분량만 계산
    """

    permission_classes = [IsAuthenticated]
    serializer_class = FormSubmissionResultSerializer
    filter_backends = [SearchFilter]
    search_fields = ["user__name", "user__username"]

    def get_form(self):
        if not hasattr(self, "_form"):
            self._form = access_policy.get_owned_form(self.request.user, self.kwargs["form_id"])
        return self._form

    def get_queryset(self):
        form = self.get_form()

        sort = SORT_FIELDS.get(self.request.query_params.get("sort") or "", "created_at")
        direction = (self.request.query_params.get("direction") or "desc").lower()
        prefix = "" if direction == "asc" else "-"

        return (
            form.submissions
            .select_related("user")
            .prefetch_related("responses__question")
            .order_by(f"{prefix}{sort}", f"{prefix}id")
        )

    def list(self, request, *args, **kwargs):
        form = self.get_form()
        questions = list(form.questions.prefetch_related("options"))

        page = self.paginate_queryset(self.filter_queryset(self.get_queryset()))
        scores = score_submissions(form, questions, page)

        data = self.get_serializer(page, many=True, context={
            **self.get_serializer_context(),
            "scores": scores,
        }).data

        response = self.get_paginated_response(data)
        response.data["form"] = {
            "id": form.id,
            "title": form.title,
            "type": form.type,
            "code": form.code,
            "status": form.status,
            "questions_count": len(questions),
            "max_score": max_score_of(questions) if form.is_quiz else None,
        }
        return response
