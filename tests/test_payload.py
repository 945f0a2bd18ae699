import pytest

from django.http import QueryDict
from rest_framework.exceptions import ValidationError

from apps.api.common.payload import (
    indexed_entries,
    indexed_files,
    load_json_field,
)


class TestLoadJsonField:
    def test_decodes_strings(self):
        assert load_json_field('[{"a": 1}]', field="questions") == [{"a": 1}]

    def test_passes_through_non_strings(self):
        assert load_json_field([1], field="questions") == [1]

    def test_invalid_json(self):
        with pytest.raises(ValidationError):
            load_json_field("[oops", field="questions")


class TestIndexedEntries:
    def test_bracket_keys(self):
        data = QueryDict(mutable=True)
        data["answers[0][question_id]"] = "3"
        data.setlist("answers[0][value][]", ["A", "B"])
        data["answers[1][question_id]"] = "4"
        data["answers[1][value]"] = "Blue"
        data["title"] = "ignored"

        assert indexed_entries(data, "answers") == [
            {"question_id": "3", "value": ["A", "B"]},
            {"question_id": "4", "value": "Blue"},
        ]

    def test_skip_keys(self):
        data = {"answers[0][question_id]": "3", "answers[0][value]": object()}
        entries = indexed_entries(data, "answers", skip_keys={"answers[0][value]"})
        assert entries == [{"question_id": "3"}]

    def test_gap_is_rejected(self):
        data = {"answers[0][question_id]": "3", "answers[2][question_id]": "4"}
        with pytest.raises(ValidationError):
            indexed_entries(data, "answers")

    def test_nested_keys_are_rejected(self):
        data = QueryDict(mutable=True)
        data["questions[0][type]"] = "radio-button"
        data["questions[0][options][0][text]"] = "Paris"
        data["questions[0][options][0][is_correct]"] = "1"
        data["questions[0][options][1][text]"] = "London"

        with pytest.raises(ValidationError) as exc:
            indexed_entries(data, "questions")
        assert "questions" in exc.value.detail

    def test_nested_file_keys_are_skipped(self):
        data = {"answers[0][question_id]": "3", "answers[0][value][0][name]": object()}
        entries = indexed_entries(data, "answers", skip_keys={"answers[0][value][0][name]"})
        assert entries == [{"question_id": "3"}]


class TestIndexedFiles:
    def test_groups_by_index(self):
        files = {"questions[1][attachments]": "f1", "answers[0][value]": "f2"}
        assert indexed_files(files, "questions", "attachments") == {1: ["f1"]}
        assert indexed_files(files, "answers", "value") == {0: ["f2"]}

    def test_empty(self):
        assert indexed_files(None, "answers", "value") == {}
