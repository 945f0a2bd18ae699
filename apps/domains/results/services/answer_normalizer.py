# PATH: apps/domains/results/services/answer_normalizer.py
"""
응답 정규화 (채점 전처리)

- 순수 함수만 둔다. 어떤 입력이 와도 예외를 던지지 않는다.
- 정규화 결과가 None / 빈 집합이면 "미응답" 으로 취급한다 (절대 정답 아님).
"""
from __future__ import annotations

import json
import re
from typing import Any, FrozenSet, Iterable, Optional

from apps.domains.forms import question_types

_INT_PATTERN = re.compile(r"^[+-]?\d+$")


def _try_json(value: str) -> Any:
    try:
        return json.loads(value)
    except (TypeError, ValueError):
        return None


# ---------------------------------------------------------------------
# text-input / date
# ---------------------------------------------------------------------

def normalize_text(value: Any) -> Optional[str]:
    """strip + lower. 빈 문자열 / None / 리스트는 미응답."""
    if value is None or isinstance(value, (list, tuple, dict)):
        return None
    s = str(value).strip().lower()
    return s or None


def accepted_text_answers(stored: Any) -> FrozenSet[str]:
    """
    Question.answer → 허용 답안 집합
    - JSON 배열이면 각 원소
    - 그 외(디코드 실패 / 배열 아님)는 저장값 자체가 단일 정답
    """
    if stored is None:
        return frozenset()

    if isinstance(stored, (list, tuple)):
        candidates: Iterable[Any] = stored
    else:
        decoded = _try_json(stored) if isinstance(stored, str) else None
        candidates = decoded if isinstance(decoded, list) else [stored]

    out = set()
    for c in candidates:
        n = normalize_text(c)
        if n is not None:
            out.add(n)
    return frozenset(out)


# ---------------------------------------------------------------------
# choice
# ---------------------------------------------------------------------

def normalize_selection(value: Any) -> FrozenSet[str]:
    """
    선택형 응답 → 선택된 option text 집합 (대소문자/공백 그대로, exact match)
    - list: 다중 선택
    - str: JSON 배열(체크박스 저장 형식)이면 배열, 아니면 단일 선택
    """
    if value is None:
        return frozenset()

    if isinstance(value, str):
        decoded = _try_json(value)
        if isinstance(decoded, list):
            value = decoded
        elif value == "":
            return frozenset()
        else:
            return frozenset({value})

    if isinstance(value, (list, tuple, set, frozenset)):
        return frozenset(str(v) for v in value if v is not None and v != "")

    return frozenset({str(value)})


# ---------------------------------------------------------------------
# scale
# ---------------------------------------------------------------------

def parse_scale(value: Any) -> Optional[int]:
    """정수만 허용. "7.0" / "seven" / float / bool 은 None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        s = value.strip()
        if _INT_PATTERN.match(s):
            return int(s)
    return None


def normalize_answer(question_type: str, value: Any) -> Any:
    if question_type in question_types.TEXT_TYPES:
        return normalize_text(value)
    if question_type in question_types.CHOICE_TYPES:
        return normalize_selection(value)
    if question_type == question_types.SCALE:
        return parse_scale(value)
    return None
