# PATH: apps/domains/results/services/grader.py
from __future__ import annotations

from typing import Any

from apps.domains.forms import question_types
from apps.domains.results.dto.grading import GradeResult, QuestionSpec
from apps.domains.results.services.answer_normalizer import (
    accepted_text_answers,
    normalize_answer,
    parse_scale,
)

# ============================================================
# 문항 채점 정책 (Results 도메인 책임)
# ============================================================
# NOTE: 선택형은 option id 가 아니라 option text 로 매칭한다.
#       보기 문구를 바꾸면 과거 제출의 채점 결과도 바뀐다.


def _score(v) -> float:
    return float(v) if v else 0.0


def max_points(question: QuestionSpec) -> float:
    if question.type in question_types.CHOICE_TYPES:
        total = sum(_score(o.score) for o in question.options if o.is_correct)
        return total if total > 0 else _score(question.total_score)

    if question.type in question_types.TEXT_TYPES or question.type == question_types.SCALE:
        return _score(question.total_score)

    return 0.0


def _grade_text(question: QuestionSpec, answer) -> float:
    if answer is None:
        return 0.0
    if answer in accepted_text_answers(question.answer):
        return _score(question.total_score)
    return 0.0


def _grade_choice(question: QuestionSpec, selected) -> float:
    correct = frozenset(o.text for o in question.options if o.is_correct)
    if not correct:
        return 0.0

    if question.required:
        # strict: 정답 집합과 완전히 일치하면 정답 보기 점수 합, 그 외 0점
        # (total_score fallback 은 max 에만 쓰인다)
        if selected != correct:
            return 0.0
        return sum(_score(o.score) for o in question.options if o.is_correct)

    # lenient: 고른 정답 보기 점수 합 (오답 감점 없음)
    return sum(
        _score(o.score)
        for o in question.options
        if o.is_correct and o.text in selected
    )


def _grade_scale(question: QuestionSpec, answer) -> float:
    if answer is None:
        return 0.0
    expected = parse_scale(question.answer)
    if expected is not None and answer == expected:
        return _score(question.total_score)
    return 0.0


def grade(question: QuestionSpec, normalized: Any) -> GradeResult:
    """
    (points, max_points) 반환. 잘못된 응답은 예외 없이 0점.
    normalized 는 answer_normalizer.normalize_answer 결과.
    """
    full = max_points(question)

    if question.type in question_types.TEXT_TYPES:
        points = _grade_text(question, normalized)
    elif question.type in question_types.CHOICE_TYPES:
        points = _grade_choice(question, normalized or frozenset())
    elif question.type == question_types.SCALE:
        points = _grade_scale(question, normalized)
    else:
        return GradeResult(points=0.0, max_points=0.0)

    return GradeResult(points=points, max_points=full)


def grade_raw(question: QuestionSpec, raw_answer: Any) -> GradeResult:
    return grade(question, normalize_answer(question.type, raw_answer))
