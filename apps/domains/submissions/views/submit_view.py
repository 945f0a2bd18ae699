# PATH: apps/domains/submissions/views/submit_view.py
"""
code 기반 응답 제출

POST public/forms/<code>/quiz-submissions/  (로그인 필수, 1회)
POST public/forms/<code>/responses/         (익명 허용, 파일 응답 가능)
"""
from __future__ import annotations

from rest_framework import status
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from drf_yasg.utils import swagger_auto_schema

from apps.api.common.payload import indexed_files, list_field
from apps.domains.forms.services import access_policy
from apps.domains.results.services.scoring import score_submission
from apps.domains.submissions.serializers.answer import SubmitAnswersSerializer
from apps.domains.submissions.services import submission_service


def _answers(request):
    serializer = SubmitAnswersSerializer(data={"answers": list_field(request, "answers")})
    serializer.is_valid(raise_exception=True)
    return serializer.validated_data["answers"]


class QuizSubmitView(APIView):
    """
    응답:
    {
      "message", "submission_id",
      "score", "max_score", "percentage",
      "correct_answers", "incorrect_answers"
    }
    """

    permission_classes = [IsAuthenticated]
    parser_classes = [JSONParser, MultiPartParser, FormParser]

    @swagger_auto_schema(request_body=SubmitAnswersSerializer)
    def post(self, request, code):
        form = access_policy.get_public_form(code)
        answers = _answers(request)

        submission = submission_service.submit_quiz(
            form=form,
            user=request.user,
            answers=answers,
        )

        questions = form.questions.prefetch_related("options")
        result = score_submission(form, questions, submission.responses.all())

        return Response(
            {
                "message": "Quiz submitted successfully",
                "submission_id": submission.id,
                "score": result.score,
                "max_score": result.max_score,
                "percentage": result.percentage,
                "correct_answers": result.correct_count,
                "incorrect_answers": result.incorrect_count,
            },
            status=status.HTTP_201_CREATED,
        )


class SurveySubmitView(APIView):
    permission_classes = [AllowAny]
    parser_classes = [JSONParser, MultiPartParser, FormParser]

    @swagger_auto_schema(request_body=SubmitAnswersSerializer)
    def post(self, request, code):
        form = access_policy.get_public_form(code)
        answers = _answers(request)

        submission = submission_service.submit_survey(
            form=form,
            user=request.user,
            answers=answers,
            files_by_index=indexed_files(request.FILES, "answers", "value"),
        )

        return Response(
            {
                "message": "Response submitted successfully",
                "submission_id": submission.id,
            },
            status=status.HTTP_201_CREATED,
        )
