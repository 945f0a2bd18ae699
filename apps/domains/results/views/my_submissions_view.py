# apps/domains/results/views/my_submissions_view.py
from __future__ import annotations

from django.conf import settings
from rest_framework.filters import SearchFilter
from rest_framework.generics import ListAPIView
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.domains.forms.models import Form
from apps.domains.results.serializers.submission_result import (
    MySubmissionSerializer,
    RecentActivitySerializer,
)
from apps.domains.results.services.scoring import score_submission
from apps.domains.submissions.models import Submission

SORT_ORDERING = {
    "date_desc": ("-created_at", "-id"),
    "date_asc": ("created_at", "id"),
    "alpha_asc": ("form__title", "-created_at"),
    "alpha_desc": ("-form__title", "-created_at"),
}


def _my_submissions(user):
    return (
        Submission.objects
        .filter(user=user)
        .select_related("form__user")
        .prefetch_related("form__questions__options", "responses__question")
    )


def _scores(submissions):
    return {
        s.id: score_submission(s.form, s.form.questions.all(), s.responses.all())
        for s in submissions
    }


class MySubmissionsView(ListAPIView):
    """
    GET submissions/mine/?type=quiz|survey&search=<form title>&sort=date_desc|date_asc|alpha_asc|alpha_desc
    """

    permission_classes = [IsAuthenticated]
    serializer_class = MySubmissionSerializer
    filter_backends = [SearchFilter]
    search_fields = ["form__title"]

    def get_queryset(self):
        qs = _my_submissions(self.request.user)

        form_type = self.request.query_params.get("type")
        if form_type in Form.Type.values:
            qs = qs.filter(form__type=form_type)

        sort = self.request.query_params.get("sort") or "date_desc"
        return qs.order_by(*SORT_ORDERING.get(sort, SORT_ORDERING["date_desc"]))

    def list(self, request, *args, **kwargs):
        page = self.paginate_queryset(self.filter_queryset(self.get_queryset()))
        data = self.get_serializer(page, many=True, context={
            **self.get_serializer_context(),
            "scores": _scores(page),
        }).data
        return self.get_paginated_response(data)


class RecentActivityView(APIView):
    """GET submissions/recent/ : 최근 제출 N건 (점수 / 만점 여부)"""

    permission_classes = [IsAuthenticated]

    def get(self, request):
        limit = settings.FORMS_RECENT_ACTIVITY_LIMIT
        submissions = list(_my_submissions(request.user).order_by("-created_at", "-id")[:limit])
        data = RecentActivitySerializer(
            submissions,
            many=True,
            context={"scores": _scores(submissions)},
        ).data
        return Response(data)
