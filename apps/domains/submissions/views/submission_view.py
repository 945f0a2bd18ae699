# PATH: apps/domains/submissions/views/submission_view.py
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.domains.forms.services import access_policy
from apps.domains.submissions.services import submission_service


class SubmissionDeleteView(APIView):
    """
    DELETE submissions/<id>/
    - 폼 소유자만 (없으면 404, 소유자 아니면 403)
    - 응답(Response)까지 cascade 삭제
    """

    permission_classes = [IsAuthenticated]

    def delete(self, request, pk: int):
        submission = access_policy.get_deletable_submission(request.user, pk)
        submission_service.delete_submission(submission)
        return Response({"message": "Submission deleted successfully"})
