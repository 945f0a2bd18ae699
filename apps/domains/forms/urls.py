# apps/domains/forms/urls.py
from django.urls import path
from rest_framework.routers import DefaultRouter

from .views.form_view import FormViewSet, QuizViewSet, SurveyViewSet
from .views.public_form_view import FormPermissionView, PublicFormQuestionsView

router = DefaultRouter()
router.register("forms", FormViewSet, basename="form")
router.register("quizzes", QuizViewSet, basename="quiz")
router.register("surveys", SurveyViewSet, basename="survey")

urlpatterns = router.urls + [
    path(
        "public/forms/<str:code>/questions/",
        PublicFormQuestionsView.as_view(),
        name="public-form-questions",
    ),
    path(
        "public/forms/<str:code>/permission/",
        FormPermissionView.as_view(),
        name="public-form-permission",
    ),
]
