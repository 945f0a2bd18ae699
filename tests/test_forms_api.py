import copy
import json
import re
from unittest import mock

import pytest
from django.core.files.uploadedfile import SimpleUploadedFile

from apps.domains.forms.models import Attachment, Form, Question
from tests.conftest import QUIZ_PAYLOAD, SURVEY_PAYLOAD

pytestmark = pytest.mark.django_db


class TestCreateForm:
    def test_create_quiz(self, api_client, user):
        resp = api_client.post("/api/v1/quizzes/", QUIZ_PAYLOAD, format="json")

        assert resp.status_code == 201
        assert resp.data["message"] == "Quiz created successfully"
        form = Form.objects.get(pk=resp.data["form_id"])
        assert form.user == user
        assert form.type == Form.Type.QUIZ
        assert form.code == resp.data["form_code"]
        assert re.fullmatch(r"[A-Z0-9]{8}", form.code)

    def test_round_trip_keeps_order(self, api_client, make_quiz):
        form = make_quiz()
        resp = api_client.get(f"/api/v1/forms/{form.id}/")

        assert resp.status_code == 200
        questions = resp.data["questions"]
        assert [q["text"] for q in questions] == [q["text"] for q in QUIZ_PAYLOAD["questions"]]
        assert [o["text"] for o in questions[0]["options"]] == ["Paris", "London"]
        assert questions[0]["options"][0]["is_correct"] is True

    def test_answer_list_is_stored_as_json(self, make_quiz):
        form = make_quiz()
        q = form.questions.get(position=1)
        assert json.loads(q.answer) == ["Tokyo", "Tokio"]

    def test_scale_aliases(self, make_quiz):
        q = make_quiz().questions.get(position=2)
        assert (q.scale_min, q.scale_max) == (1, 10)
        assert (q.scale_label_min, q.scale_label_max) == ("low", "high")
        assert q.answer == "7"

    def test_status_defaults_to_draft(self, api_client):
        payload = copy.deepcopy(SURVEY_PAYLOAD)
        payload.pop("status")
        resp = api_client.post("/api/v1/surveys/", payload, format="json")
        assert Form.objects.get(pk=resp.data["form_id"]).status == Form.Status.DRAFT

    def test_plain_string_options(self, make_survey):
        q = make_survey().questions.get(position=1)
        assert [o.text for o in q.options.all()] == ["Red", "Blue"]
        assert not any(o.is_correct for o in q.options.all())

    def test_allowed_file_types_csv(self, api_client, make_survey):
        form = make_survey()
        q = form.questions.get(position=2)
        assert q.allowed_file_types == "pdf,docx"

        resp = api_client.get(f"/api/v1/forms/{form.id}/")
        assert resp.data["questions"][2]["allowed_file_types"] == ["pdf", "docx"]

    def test_quiz_total_score_defaults_to_correct_option_sum(self, api_client):
        payload = {
            "title": "Defaults",
            "questions": [{
                "type": "checkbox",
                "text": "Pick primes",
                "options": [
                    {"text": "2", "is_correct": True, "score": 1},
                    {"text": "3", "is_correct": True, "score": 2},
                    {"text": "4", "is_correct": False},
                ],
            }],
        }
        resp = api_client.post("/api/v1/quizzes/", payload, format="json")
        q = Question.objects.get(form_id=resp.data["form_id"])
        assert q.total_score == 3

    def test_generic_endpoint_requires_type(self, api_client):
        payload = copy.deepcopy(SURVEY_PAYLOAD)
        resp = api_client.post("/api/v1/forms/", payload, format="json")
        assert resp.status_code == 400
        assert "type" in resp.data

        payload["type"] = "survey"
        resp = api_client.post("/api/v1/forms/", payload, format="json")
        assert resp.status_code == 201

    def test_requires_authentication(self, client_for):
        resp = client_for().post("/api/v1/quizzes/", QUIZ_PAYLOAD, format="json")
        assert resp.status_code == 401

    def test_code_collision_is_retried(self, api_client, make_quiz):
        existing = make_quiz()
        with mock.patch(
            "apps.domains.forms.services.form_service.generate_unique_form_code",
            side_effect=[existing.code, "RETRY001"],
        ):
            resp = api_client.post("/api/v1/quizzes/", QUIZ_PAYLOAD, format="json")

        assert resp.status_code == 201, resp.data
        assert resp.data["form_code"] == "RETRY001"
        assert Form.objects.count() == 2


class TestCreateFormValidation:
    def _post(self, api_client, questions):
        return api_client.post(
            "/api/v1/surveys/",
            {"title": "x", "questions": questions},
            format="json",
        )

    def test_at_least_one_question(self, api_client):
        resp = self._post(api_client, [])
        assert resp.status_code == 400
        assert "questions" in resp.data

    def test_choice_needs_options(self, api_client):
        resp = self._post(api_client, [{"type": "dropdown", "text": "Pick"}])
        assert resp.status_code == 400

    def test_non_choice_cannot_have_options(self, api_client):
        resp = self._post(api_client, [{"type": "text-input", "text": "Name", "options": ["a"]}])
        assert resp.status_code == 400

    def test_unknown_question_type(self, api_client):
        resp = self._post(api_client, [{"type": "matrix", "text": "?"}])
        assert resp.status_code == 400

    def test_negative_score(self, api_client):
        resp = self._post(api_client, [{
            "type": "radio-button",
            "text": "?",
            "options": [{"text": "a", "is_correct": True, "score": -1}],
        }])
        assert resp.status_code == 400

    def test_deleted_status_not_writable(self, api_client):
        resp = api_client.post(
            "/api/v1/surveys/",
            {**SURVEY_PAYLOAD, "status": "deleted"},
            format="json",
        )
        assert resp.status_code == 400

    def test_nothing_written_on_failure(self, api_client):
        self._post(api_client, [{"type": "text-input", "text": "ok"}, {"type": "dropdown", "text": "bad"}])
        assert Form.objects.count() == 0


class TestMultipartCreate:
    def test_attachments_are_uploaded(self, api_client, s3_client):
        image = SimpleUploadedFile("map.png", b"\x89PNG", content_type="image/png")
        resp = api_client.post(
            "/api/v1/quizzes/",
            {
                "title": "With image",
                "status": "draft",
                "questions": json.dumps(QUIZ_PAYLOAD["questions"]),
                "questions[0][attachments]": image,
            },
            format="multipart",
        )

        assert resp.status_code == 201, resp.data
        attachment = Attachment.objects.get()
        assert attachment.question.position == 0
        assert attachment.file_type == "image/png"
        assert attachment.file_path.startswith("http://storage.test/public/forms-test/attachments/")
        assert attachment.file_path.endswith("_map.png")
        assert s3_client.upload_fileobj.call_count == 1

    def test_upload_failure_aborts_everything(self, api_client, s3_client):
        from botocore.exceptions import ClientError

        s3_client.upload_fileobj.side_effect = ClientError(
            {"Error": {"Code": "500", "Message": "boom"}}, "PutObject"
        )
        resp = api_client.post(
            "/api/v1/quizzes/",
            {
                "title": "With image",
                "questions": json.dumps(QUIZ_PAYLOAD["questions"]),
                "questions[1][attachments]": SimpleUploadedFile("a.png", b"x", content_type="image/png"),
            },
            format="multipart",
        )

        assert resp.status_code == 502
        assert resp.data["code"] == "upload_failed"
        assert Form.objects.count() == 0

    def test_nested_option_keys_rejected(self, api_client):
        resp = api_client.post(
            "/api/v1/quizzes/",
            {
                "title": "Bracket options",
                "questions[0][type]": "radio-button",
                "questions[0][text]": "Capital of France?",
                "questions[0][options][0][text]": "Paris",
                "questions[0][options][0][is_correct]": "1",
                "questions[0][options][1][text]": "London",
            },
            format="multipart",
        )

        assert resp.status_code == 400
        assert "questions" in resp.data
        assert Form.objects.count() == 0


class TestUpdateForm:
    def test_replace_all(self, api_client, make_quiz):
        form = make_quiz()
        old_ids = set(form.questions.values_list("id", flat=True))

        payload = {
            "title": "Capitals v2",
            "questions": [{"type": "text-input", "text": "Capital of Italy?", "total_score": 2, "answer": "Rome"}],
        }
        resp = api_client.put(f"/api/v1/quizzes/{form.id}/", payload, format="json")

        assert resp.status_code == 200
        assert resp.data == {"message": "Quiz updated successfully", "form_id": form.id}
        form.refresh_from_db()
        assert form.title == "Capitals v2"
        assert form.status == Form.Status.PUBLIC
        assert not Question.objects.filter(id__in=old_ids).exists()
        assert list(form.questions.values_list("text", flat=True)) == ["Capital of Italy?"]

    def test_type_is_immutable(self, api_client, make_quiz):
        form = make_quiz()
        resp = api_client.put(
            f"/api/v1/forms/{form.id}/",
            {**QUIZ_PAYLOAD, "type": "survey"},
            format="json",
        )
        assert resp.status_code == 400
        form.refresh_from_db()
        assert form.type == Form.Type.QUIZ

    def test_typed_endpoint_hides_other_type(self, api_client, make_quiz):
        form = make_quiz()
        resp = api_client.put(f"/api/v1/surveys/{form.id}/", SURVEY_PAYLOAD, format="json")
        assert resp.status_code == 404

    def test_other_owner_gets_404(self, client_for, other_user, make_quiz):
        form = make_quiz()
        resp = client_for(other_user).put(f"/api/v1/forms/{form.id}/", QUIZ_PAYLOAD, format="json")
        assert resp.status_code == 404

    def test_existing_attachment_can_be_kept(self, api_client, make_quiz):
        form = make_quiz()
        q = form.questions.first()
        Attachment.objects.create(question=q, file_path="http://storage.test/public/a.png", file_type="image/png")

        questions = copy.deepcopy(QUIZ_PAYLOAD["questions"])
        questions[0]["attachments"] = [{"file_path": "http://storage.test/public/a.png", "file_type": "image/png"}]
        resp = api_client.put(f"/api/v1/forms/{form.id}/", {"title": "t", "questions": questions}, format="json")

        assert resp.status_code == 200
        assert Attachment.objects.get().file_path == "http://storage.test/public/a.png"

    def test_foreign_attachment_reference_rejected(self, api_client, make_quiz):
        form = make_quiz()
        questions = copy.deepcopy(QUIZ_PAYLOAD["questions"])
        questions[0]["attachments"] = [{"file_path": "http://evil.test/x.png"}]
        resp = api_client.put(f"/api/v1/forms/{form.id}/", {"title": "t", "questions": questions}, format="json")
        assert resp.status_code == 400
        assert form.questions.count() == 3


class TestReadAndDelete:
    def test_fetch_other_owner_404(self, client_for, other_user, make_quiz):
        form = make_quiz()
        assert client_for(other_user).get(f"/api/v1/forms/{form.id}/").status_code == 404

    def test_soft_delete(self, api_client, make_quiz):
        form = make_quiz()
        resp = api_client.delete(f"/api/v1/forms/{form.id}/")

        assert resp.status_code == 200
        form.refresh_from_db()
        assert form.status == Form.Status.DELETED
        assert api_client.get(f"/api/v1/forms/{form.id}/").status_code == 404
        assert api_client.get("/api/v1/forms/").data == []

    def test_list_filters(self, api_client, make_quiz, make_survey):
        quiz = make_quiz()
        survey = make_survey()

        ids = [f["id"] for f in api_client.get("/api/v1/forms/").data]
        assert ids == [survey.id, quiz.id]

        assert [f["id"] for f in api_client.get("/api/v1/forms/?type=quiz").data] == [quiz.id]
        assert [f["id"] for f in api_client.get("/api/v1/surveys/").data] == [survey.id]
        assert api_client.get("/api/v1/forms/?status=draft").data == []

    def test_list_only_own(self, client_for, other_user, make_quiz):
        make_quiz()
        assert client_for(other_user).get("/api/v1/forms/").data == []

    def test_summary_counts(self, api_client, client_for, respondent, make_quiz):
        form = make_quiz()
        client_for(respondent).post(
            f"/api/v1/public/forms/{form.code}/quiz-submissions/",
            {"answers": []},
            format="json",
        )

        resp = api_client.get("/api/v1/forms/summary/")
        assert resp.status_code == 200
        row = resp.data[0]
        assert row["id"] == form.id
        assert row["questions_count"] == 3
        assert row["answered"] == 1
        assert "questions" not in row


class TestPublicForm:
    def test_questions_without_answer_key(self, client_for, make_quiz):
        form = make_quiz()
        resp = client_for().get(f"/api/v1/public/forms/{form.code.lower()}/questions/")

        assert resp.status_code == 200
        q = resp.data["questions"][0]
        assert "answer" not in q
        assert "total_score" not in q
        assert set(q["options"][0].keys()) == {"id", "position", "text"}

    def test_not_public_is_404(self, api_client, client_for, make_quiz):
        form = make_quiz()
        Form.objects.filter(pk=form.pk).update(status=Form.Status.PRIVATE)
        assert client_for().get(f"/api/v1/public/forms/{form.code}/questions/").status_code == 404

    def test_unknown_code_is_404(self, client_for, db):
        assert client_for().get("/api/v1/public/forms/NOPE0000/questions/").status_code == 404

    def test_permission(self, client_for, respondent, make_quiz):
        form = make_quiz()
        c = client_for(respondent)

        resp = c.get(f"/api/v1/public/forms/{form.code}/permission/")
        assert resp.status_code == 200
        assert resp.data["permission"] == "permitted"
        assert resp.data["title"] == "Capitals"
        assert resp.data["type"] == "quiz"

        c.post(f"/api/v1/public/forms/{form.code}/quiz-submissions/", {"answers": []}, format="json")
        resp = c.get(f"/api/v1/public/forms/{form.code}/permission/")
        assert resp.data["permission"] == "already_answered"

    def test_permission_requires_login(self, client_for, make_quiz):
        form = make_quiz()
        assert client_for().get(f"/api/v1/public/forms/{form.code}/permission/").status_code == 401
