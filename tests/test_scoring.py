from types import SimpleNamespace

from apps.domains.results.dto.grading import OptionSpec, QuestionSpec
from apps.domains.results.services.scoring import (
    max_score_of,
    percentage_of,
    score_submission,
)

QUIZ = SimpleNamespace(type="quiz")
SURVEY = SimpleNamespace(type="survey")

QUESTIONS = [
    QuestionSpec(
        id=1,
        type="radio-button",
        total_score=10,
        options=(OptionSpec("Paris", True, 10), OptionSpec("London")),
    ),
    QuestionSpec(id=2, type="text-input", total_score=5, answer='["Tokyo"]'),
    QuestionSpec(id=3, type="scale", total_score=5, answer="7"),
]


def resp(rid, qid, text):
    return SimpleNamespace(id=rid, question_id=qid, answer_text=text)


class TestScoreSubmission:
    def test_survey_is_not_scored(self):
        assert score_submission(SURVEY, QUESTIONS, [resp(1, 1, "Paris")]) is None

    def test_max_score_without_responses(self):
        result = score_submission(QUIZ, QUESTIONS, [])
        assert result.max_score == 20
        assert result.score == 0
        assert result.percentage == 0
        assert result.correct_count == 0
        assert result.incorrect_count == 0
        assert result.is_perfect is False

    def test_mixed_answers(self):
        result = score_submission(QUIZ, QUESTIONS, [
            resp(11, 1, "Paris"),
            resp(12, 2, " tokyo "),
            resp(13, 3, "7.0"),
        ])
        assert result.score == 15
        assert result.max_score == 20
        assert result.percentage == 75
        assert result.correct_count == 2
        assert result.incorrect_count == 1

        rows = result.by_response_id()
        assert rows[11].is_correct is True
        assert rows[13].points == 0
        assert rows[13].max_points == 5

    def test_perfect(self):
        result = score_submission(QUIZ, QUESTIONS, [
            resp(1, 1, "Paris"),
            resp(2, 2, "Tokyo"),
            resp(3, 3, "7"),
        ])
        assert result.is_perfect is True
        assert result.percentage == 100

    def test_responses_of_deleted_questions_are_skipped(self):
        result = score_submission(QUIZ, QUESTIONS, [
            resp(1, None, "Paris"),
            resp(2, 99, "Tokyo"),
            resp(3, 1, "Paris"),
        ])
        assert result.score == 10
        assert len(result.responses) == 1
        assert result.correct_count + result.incorrect_count == 1

    def test_partial_lenient_answer_counts_as_correct(self):
        q = QuestionSpec(
            id=1,
            type="checkbox",
            required=False,
            options=(OptionSpec("A", True, 1), OptionSpec("B", True, 1)),
        )
        result = score_submission(QUIZ, [q], [resp(1, 1, '["A"]')])
        assert result.score == 1
        assert result.correct_count == 1
        assert result.is_perfect is False


class TestPercentage:
    def test_rounds_half_up(self):
        assert percentage_of(1, 8) == 13
        assert percentage_of(5, 200) == 3

    def test_zero_max(self):
        assert percentage_of(0, 0) == 0

    def test_max_score_of(self):
        assert max_score_of(QUESTIONS) == 20
