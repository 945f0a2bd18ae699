# PATH: apps/domains/results/services/scoring.py
"""
제출 단위 점수 집계 (단일 진실)

제출 직후 응답 / 결과 목록 / 내 응답 이력 / 최근 활동 이 모두 이 함수만 쓴다.
DB 접근 없음: form / questions / responses 는 호출 측에서 prefetch 해서 넘긴다.
"""
from __future__ import annotations

import math
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, Iterable, List, Optional, Sequence

from apps.domains.results.dto.grading import (
    QuestionSpec,
    ResponseScore,
    SubmissionScore,
)
from apps.domains.results.services.grader import grade_raw, max_points

QUIZ = "quiz"


def _as_specs(questions: Iterable[Any]) -> List[QuestionSpec]:
    return [
        q if isinstance(q, QuestionSpec) else QuestionSpec.from_model(q)
        for q in questions
    ]


def max_score_of(questions: Iterable[Any]) -> float:
    return float(sum(max_points(q) for q in _as_specs(questions)))


def percentage_of(score: float, max_score: float) -> int:
    """round(score / max * 100), half-up 정수. max 가 0 이면 0."""
    if max_score <= 0:
        return 0
    ratio = Decimal(str(score)) / Decimal(str(max_score)) * 100
    return int(ratio.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def score_submission(
    form: Any,
    questions: Iterable[Any],
    responses: Iterable[Any],
) -> Optional[SubmissionScore]:
    """
    설문(form.type != quiz)은 None.

    - max_score: 폼의 모든 문항 max 합 (응답 여부 무관)
    - score: 현재 문항에 매칭되는 응답만 합산 (삭제된 문항 응답은 건너뜀)
    - is_correct: points > 0 (부분 점수도 정답 처리)
    """
    if getattr(form, "type", None) != QUIZ:
        return None

    specs = _as_specs(questions)
    by_id: Dict[Optional[int], QuestionSpec] = {q.id: q for q in specs}

    max_score = float(sum(max_points(q) for q in specs))

    rows: List[ResponseScore] = []
    for r in responses:
        qid = getattr(r, "question_id", None)
        spec = by_id.get(qid) if qid is not None else None
        if spec is None:
            continue

        g = grade_raw(spec, getattr(r, "answer_text", None))
        rows.append(
            ResponseScore(
                response_id=getattr(r, "id", None),
                question_id=qid,
                points=g.points,
                max_points=g.max_points,
                is_correct=g.points > 0,
            )
        )

    score = float(sum(r.points for r in rows))
    correct = sum(1 for r in rows if r.is_correct)

    return SubmissionScore(
        score=score,
        max_score=max_score,
        percentage=percentage_of(score, max_score),
        correct_count=correct,
        incorrect_count=len(rows) - correct,
        is_perfect=max_score > 0 and math.isclose(score, max_score),
        responses=tuple(rows),
    )


def score_submissions(
    form: Any,
    questions: Sequence[Any],
    submissions: Iterable[Any],
) -> Dict[int, Optional[SubmissionScore]]:
    """
    동일 폼의 여러 제출을 한 번에 집계 (문항 변환은 1회)
    submission.responses 는 prefetch 되어 있어야 한다.
    """
    specs = _as_specs(questions)
    return {
        s.id: score_submission(form, specs, s.responses.all())
        for s in submissions
    }
