# apps/domains/submissions/urls.py
from django.urls import path

from .views.submit_view import QuizSubmitView, SurveySubmitView
from .views.submission_view import SubmissionDeleteView

urlpatterns = [
    path(
        "public/forms/<str:code>/quiz-submissions/",
        QuizSubmitView.as_view(),
        name="quiz-submit",
    ),
    path(
        "public/forms/<str:code>/responses/",
        SurveySubmitView.as_view(),
        name="survey-submit",
    ),
    path(
        "submissions/<int:pk>/",
        SubmissionDeleteView.as_view(),
        name="submission-delete",
    ),
]
