# PATH: apps/domains/forms/views/form_view.py

from django.db.models import Count

from rest_framework import mixins, status, viewsets
from rest_framework.decorators import action
from rest_framework.exceptions import NotFound
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from django_filters.rest_framework import DjangoFilterBackend
from rest_framework.filters import SearchFilter

from drf_yasg.utils import swagger_auto_schema

from apps.api.common.payload import indexed_files, list_field
from apps.domains.forms.filters import FormFilter
from apps.domains.forms.models import Form
from apps.domains.forms.serializers.form_read import (
    FormDetailSerializer,
    FormSummarySerializer,
)
from apps.domains.forms.serializers.form_write import FormWriteSerializer
from apps.domains.forms.services import access_policy, form_service

SCALAR_FIELDS = ("title", "description", "status", "type")


def _form_payload(request) -> dict:
    """JSON / multipart(questions=JSON 문자열 또는 bracket 키) 공통 dict 로 변환"""
    data = request.data
    payload = {k: data.get(k) for k in SCALAR_FIELDS if data.get(k) is not None}
    payload["questions"] = list_field(request, "questions")
    return payload


# ======================================================
# Form (작성자 전용)
# ======================================================

class FormViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    viewsets.GenericViewSet,
):
    """
    내 폼 관리

    ✔ 소유자만 접근 (불일치 / 삭제됨 → 404)
    ✔ 수정은 문항 전체 교체
    ✔ 삭제는 soft delete
    ✔ form_type 이 지정된 하위 클래스는 quiz / survey 로 고정
    """

    permission_classes = [IsAuthenticated]
    parser_classes = [JSONParser, MultiPartParser, FormParser]
    serializer_class = FormDetailSerializer
    pagination_class = None

    filter_backends = [DjangoFilterBackend, SearchFilter]
    filterset_class = FormFilter
    search_fields = ["title", "description"]

    form_type = None

    def get_queryset(self):
        qs = access_policy.owned_forms(self.request.user, form_type=self.form_type)

        if self.action == "summary":
            return qs.annotate(
                questions_count=Count("questions", distinct=True),
                answered=Count("submissions", distinct=True),
            ).order_by("-updated_at", "-id")

        return qs.prefetch_related("questions__options", "questions__attachments")

    def get_object(self):
        form = self.get_queryset().filter(pk=self.kwargs["pk"]).first()
        if form is None:
            raise NotFound("Form not found.")
        return form

    # ------------------------------
    # 생성
    # ------------------------------
    @swagger_auto_schema(request_body=FormWriteSerializer)
    def create(self, request, *args, **kwargs):
        payload = _form_payload(request)
        if self.form_type:
            payload["type"] = self.form_type

        serializer = FormWriteSerializer(data=payload)
        serializer.is_valid(raise_exception=True)

        form = form_service.create_form(
            user=request.user,
            data=serializer.validated_data,
            files_by_question=indexed_files(request.FILES, "questions", "attachments"),
        )
        return Response(
            {
                "message": f"{form.type.capitalize()} created successfully",
                "form_id": form.id,
                "form_code": form.code,
            },
            status=status.HTTP_201_CREATED,
        )

    # ------------------------------
    # 수정 (replace-all)
    # ------------------------------
    @swagger_auto_schema(request_body=FormWriteSerializer)
    def update(self, request, *args, **kwargs):
        form = self.get_object()

        serializer = FormWriteSerializer(instance=form, data=_form_payload(request))
        serializer.is_valid(raise_exception=True)

        form_service.update_form(
            form=form,
            data=serializer.validated_data,
            files_by_question=indexed_files(request.FILES, "questions", "attachments"),
        )
        return Response({
            "message": f"{form.type.capitalize()} updated successfully",
            "form_id": form.id,
        })

    # ------------------------------
    # 삭제 (soft)
    # ------------------------------
    def destroy(self, request, *args, **kwargs):
        form = self.get_object()
        form_service.soft_delete_form(form)
        return Response({"message": "Form deleted successfully"})

    # ------------------------------
    # 대시보드 요약
    # ------------------------------
    @action(detail=False, methods=["get"])
    def summary(self, request):
        qs = self.filter_queryset(self.get_queryset())
        return Response(FormSummarySerializer(qs, many=True).data)


class QuizViewSet(FormViewSet):
    form_type = Form.Type.QUIZ


class SurveyViewSet(FormViewSet):
    form_type = Form.Type.SURVEY
