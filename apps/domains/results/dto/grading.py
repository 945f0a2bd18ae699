# apps/domains/results/dto/grading.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class OptionSpec:
    text: str
    is_correct: bool = False
    score: Optional[float] = None


@dataclass(frozen=True)
class QuestionSpec:
    """
    채점 입력 (ORM 비의존)
    - 채점 루프 안에서 DB 접근이 일어나지 않도록 prefetch 된 Question 에서 만든다
    """
    id: Optional[int]
    type: str
    required: bool = True
    total_score: Optional[float] = None
    answer: Optional[str] = None
    options: Tuple[OptionSpec, ...] = ()

    @classmethod
    def from_model(cls, question: Any) -> "QuestionSpec":
        return cls(
            id=question.id,
            type=question.type,
            required=bool(question.required),
            total_score=question.total_score,
            answer=question.answer,
            options=tuple(
                OptionSpec(text=o.text, is_correct=bool(o.is_correct), score=o.score)
                for o in question.options.all()
            ),
        )


@dataclass(frozen=True)
class GradeResult:
    points: float
    max_points: float


@dataclass(frozen=True)
class ResponseScore:
    response_id: Optional[int]
    question_id: Optional[int]
    points: float
    max_points: float
    is_correct: bool


@dataclass(frozen=True)
class SubmissionScore:
    score: float
    max_score: float
    percentage: int
    correct_count: int
    incorrect_count: int
    is_perfect: bool
    responses: Tuple[ResponseScore, ...] = field(default_factory=tuple)

    def by_response_id(self) -> Dict[Optional[int], ResponseScore]:
        return {r.response_id: r for r in self.responses}

    def as_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "max_score": self.max_score,
            "percentage": self.percentage,
            "correct_answers": self.correct_count,
            "incorrect_answers": self.incorrect_count,
            "is_perfect": self.is_perfect,
        }
