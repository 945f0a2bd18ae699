import pytest
from unittest import mock

from django.contrib.auth import get_user_model
from rest_framework.test import APIClient

from apps.domains.forms.models import Form

User = get_user_model()


@pytest.fixture
def user(db):
    return User.objects.create_user(username="author", password="pw-123456", name="Author Kim")


@pytest.fixture
def respondent(db):
    return User.objects.create_user(username="alice", password="pw-123456", name="Alice")


@pytest.fixture
def other_user(db):
    return User.objects.create_user(username="bob", password="pw-123456", name="Bob")


@pytest.fixture
def client_for():
    def _make(u=None):
        c = APIClient()
        if u is not None:
            c.force_authenticate(user=u)
        return c
    return _make


@pytest.fixture
def api_client(client_for, user):
    return client_for(user)


@pytest.fixture
def s3_client():
    """boto3 클라이언트 대체 (네트워크 없음)"""
    fake = mock.MagicMock()
    with mock.patch(
        "apps.infrastructure.storage.object_storage._get_s3_client",
        return_value=fake,
    ):
        yield fake


QUIZ_PAYLOAD = {
    "title": "Capitals",
    "description": "World capitals",
    "status": "public",
    "questions": [
        {
            "type": "multiple-choice",
            "text": "Capital of France?",
            "total_score": 10,
            "options": [
                {"text": "Paris", "is_correct": True, "score": 10},
                {"text": "London", "is_correct": False},
            ],
        },
        {
            "type": "text-input",
            "text": "Capital of Japan?",
            "total_score": 5,
            "answer": ["Tokyo", "Tokio"],
        },
        {
            "type": "scale",
            "text": "Pick seven",
            "total_score": 5,
            "answer": "7",
            "min": 1,
            "max": 10,
            "labels": {"min": "low", "max": "high"},
        },
    ],
}

SURVEY_PAYLOAD = {
    "title": "Feedback",
    "status": "public",
    "questions": [
        {"type": "text-input", "text": "Your name?", "required": False},
        {"type": "radio-button", "text": "Favourite colour?", "options": ["Red", "Blue"]},
        {"type": "file", "text": "Upload your CV", "allowed_file_types": ["pdf", "docx"]},
    ],
}


@pytest.fixture
def make_quiz(api_client):
    def _make(payload=None):
        resp = api_client.post("/api/v1/quizzes/", payload or QUIZ_PAYLOAD, format="json")
        assert resp.status_code == 201, resp.data
        return Form.objects.get(pk=resp.data["form_id"])
    return _make


@pytest.fixture
def make_survey(api_client):
    def _make(payload=None):
        resp = api_client.post("/api/v1/surveys/", payload or SURVEY_PAYLOAD, format="json")
        assert resp.status_code == 201, resp.data
        return Form.objects.get(pk=resp.data["form_id"])
    return _make
