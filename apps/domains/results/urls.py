# PATH: apps/domains/results/urls.py

from django.urls import path

from apps.domains.results.views.form_results_view import FormResultsView
from apps.domains.results.views.my_submissions_view import (
    MySubmissionsView,
    RecentActivityView,
)

urlpatterns = [
    # ======================================================
    # 작성자
    # ======================================================
    path("forms/<int:form_id>/results/", FormResultsView.as_view(), name="form-results"),

    # ======================================================
    # 응답자
    # ======================================================
    path("submissions/mine/", MySubmissionsView.as_view(), name="my-submissions"),
    path("submissions/recent/", RecentActivityView.as_view(), name="recent-activity"),
]
