# apps/core/views.py

from rest_framework.views import APIView
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from drf_yasg.utils import swagger_auto_schema

from apps.core.serializers import MeSerializer
from apps.domains.forms.models import Form
from apps.domains.submissions.models import Submission


# --------------------------------------------------
# Auth: /core/me/
# --------------------------------------------------

class MeView(APIView):
    """
    로그인 사용자 정보 + 활동 카운트
    - quizzes_count / surveys_count: 내가 만든 폼 (삭제 제외)
    - quizzes_taken / surveys_taken: 내가 제출한 응답 수
    """
    permission_classes = [IsAuthenticated]

    @swagger_auto_schema(responses={200: MeSerializer})
    def get(self, request):
        user = request.user

        owned = Form.objects.filter(user=user).exclude(status=Form.Status.DELETED)
        taken = Submission.objects.filter(user=user)

        user.quizzes_count = owned.filter(type=Form.Type.QUIZ).count()
        user.surveys_count = owned.filter(type=Form.Type.SURVEY).count()
        user.quizzes_taken = taken.filter(form__type=Form.Type.QUIZ).count()
        user.surveys_taken = taken.filter(form__type=Form.Type.SURVEY).count()

        return Response(MeSerializer(user).data)
