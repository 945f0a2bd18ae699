from apps.domains.results.services.answer_normalizer import (
    accepted_text_answers,
    normalize_answer,
    normalize_selection,
    normalize_text,
    parse_scale,
)


class TestNormalizeText:
    def test_strip_and_lower(self):
        assert normalize_text("  PaRiS ") == "paris"

    def test_empty_is_no_answer(self):
        assert normalize_text("") is None
        assert normalize_text("   ") is None
        assert normalize_text(None) is None

    def test_list_is_not_a_text_answer(self):
        assert normalize_text(["paris"]) is None

    def test_numbers_are_stringified(self):
        assert normalize_text(42) == "42"


class TestAcceptedTextAnswers:
    def test_json_array(self):
        assert accepted_text_answers('["Tokyo", " TOKIO "]') == {"tokyo", "tokio"}

    def test_plain_string(self):
        assert accepted_text_answers("Paris") == {"paris"}

    def test_json_scalar_falls_back_to_raw(self):
        assert accepted_text_answers("42") == {"42"}

    def test_invalid_json_falls_back_to_raw(self):
        assert accepted_text_answers("[not json") == {"[not json"}

    def test_none_accepts_nothing(self):
        assert accepted_text_answers(None) == frozenset()

    def test_blank_entries_are_dropped(self):
        assert accepted_text_answers('["", "a"]') == {"a"}


class TestNormalizeSelection:
    def test_list(self):
        assert normalize_selection(["A", "B"]) == {"A", "B"}

    def test_json_array_string(self):
        assert normalize_selection('["A","B"]') == {"A", "B"}

    def test_single_string(self):
        assert normalize_selection("Paris") == {"Paris"}

    def test_exact_text_is_kept(self):
        assert normalize_selection(" paris ") == {" paris "}

    def test_none_and_empty(self):
        assert normalize_selection(None) == frozenset()
        assert normalize_selection("") == frozenset()
        assert normalize_selection([]) == frozenset()


class TestParseScale:
    def test_integer_strings(self):
        assert parse_scale("7") == 7
        assert parse_scale(" -3 ") == -3
        assert parse_scale("+2") == 2

    def test_ints(self):
        assert parse_scale(7) == 7

    def test_rejects_non_integers(self):
        assert parse_scale("7.0") is None
        assert parse_scale("seven") is None
        assert parse_scale(7.0) is None
        assert parse_scale(True) is None
        assert parse_scale(None) is None
        assert parse_scale("") is None


class TestNormalizeAnswer:
    def test_dispatch_by_type(self):
        assert normalize_answer("date", " 2024-01-01 ") == "2024-01-01"
        assert normalize_answer("checkbox", '["A"]') == {"A"}
        assert normalize_answer("scale", "5") == 5

    def test_unknown_type(self):
        assert normalize_answer("file", "http://x") is None
