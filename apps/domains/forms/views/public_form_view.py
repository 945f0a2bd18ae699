# PATH: apps/domains/forms/views/public_form_view.py
"""
code 기반 공개 조회 (응답자 화면)

GET public/forms/<code>/questions/   : 누구나, 정답 정보 제거
GET public/forms/<code>/permission/  : 로그인 필요, 응답 가능 여부
"""
from rest_framework.views import APIView
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response

from drf_yasg.utils import swagger_auto_schema

from apps.domains.forms.serializers.public import (
    FormPermissionSerializer,
    PublicFormSerializer,
)
from apps.domains.forms.services import access_policy, form_service


class PublicFormQuestionsView(APIView):
    permission_classes = [AllowAny]

    @swagger_auto_schema(responses={200: PublicFormSerializer})
    def get(self, request, code):
        form = access_policy.get_public_form(code)
        form = form_service.load_form_tree(form.id)
        return Response(PublicFormSerializer(form).data)


class FormPermissionView(APIView):
    permission_classes = [IsAuthenticated]

    @swagger_auto_schema(responses={200: FormPermissionSerializer})
    def get(self, request, code):
        form = access_policy.get_public_form(code)
        permission = access_policy.resolve_permission(form, request.user)
        return Response({
            "permission": permission,
            "title": form.title,
            "description": form.description,
            "type": form.type,
        })
