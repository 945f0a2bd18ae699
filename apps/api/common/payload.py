# PATH: apps/api/common/payload.py
"""
multipart / JSON 요청 본문 정규화 헬퍼

프론트는 같은 payload를 두 가지 방식으로 보낸다.
- application/json: {"questions": [...]} / {"answers": [...]}
- multipart/form-data: 파일이 섞이는 경우
    * questions / answers 를 JSON 문자열 필드로 보내거나
    * answers[0][question_id], answers[0][value] 처럼 bracket 키로 보낸다
    * 파일은 questions[<i>][attachments], answers[<i>][value] 키로 온다
"""
from __future__ import annotations

import json
import re
from typing import Any, Dict, List

from rest_framework.exceptions import ValidationError

_INDEXED_KEY = re.compile(r"^(?P<root>[A-Za-z_]+)\[(?P<idx>\d+)\]\[(?P<field>[A-Za-z_]+)\](?P<rest>.*)$")


def _getlist(data, key) -> List[Any]:
    if hasattr(data, "getlist"):
        return data.getlist(key)
    value = data.get(key)
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def load_json_field(value: Any, *, field: str) -> Any:
    """문자열이면 JSON으로 디코드, 아니면 그대로 반환"""
    if not isinstance(value, str):
        return value
    try:
        return json.loads(value)
    except (TypeError, ValueError):
        raise ValidationError({field: "Invalid JSON."})


def indexed_entries(data, root: str, *, skip_keys=()) -> List[Dict[str, Any]]:
    """
    answers[0][question_id]=3, answers[0][value][]=A, answers[0][value][]=B
    → [{"question_id": "3", "value": ["A", "B"]}]

    인덱스는 0부터 연속이어야 한다 (파일 키 인덱스와 맞추기 위함).
    목록은 [] 접미사만 허용, 그보다 깊은 구조(options 등)는 JSON 문자열로 보낸다.
    skip_keys: 파일 필드 키 (request.data 에 섞여 들어온다)
    """
    buckets: Dict[int, Dict[str, Any]] = {}

    for key in list(data.keys()):
        m = _INDEXED_KEY.match(key)
        if key in skip_keys or not m or m.group("root") != root:
            continue

        idx = int(m.group("idx"))
        field = m.group("field")
        entry = buckets.setdefault(idx, {})

        values = _getlist(data, key)
        rest = m.group("rest")
        if rest == "[]":
            entry.setdefault(field, [])
            entry[field].extend(values)
        elif rest:
            # questions[0][options][0][text] 같은 중첩 키는 지원하지 않음
            raise ValidationError({root: "Nested fields must be sent as JSON."})
        else:
            entry[field] = values[-1] if values else None

    if sorted(buckets) != list(range(len(buckets))):
        raise ValidationError({root: "Indexes must be contiguous starting at 0."})
    return [buckets[i] for i in sorted(buckets)]


def indexed_files(files, root: str, field: str) -> Dict[int, List[Any]]:
    """questions[<i>][attachments] / answers[<i>][value] 파일 → {i: [file, ...]}"""
    out: Dict[int, List[Any]] = {}
    if not files:
        return out

    for key in list(files.keys()):
        m = _INDEXED_KEY.match(key)
        if not m or m.group("root") != root or m.group("field") != field:
            continue
        out.setdefault(int(m.group("idx")), []).extend(_getlist(files, key))

    return out


def list_field(request, root: str) -> List[Dict[str, Any]]:
    """
    request.data 에서 root 리스트를 꺼낸다.
    JSON 배열 / JSON 문자열 / bracket 키 순서로 시도.
    """
    data = request.data
    raw = data.get(root) if hasattr(data, "get") else None

    if raw is not None and raw != "":
        value = load_json_field(raw, field=root)
        if not isinstance(value, list):
            raise ValidationError({root: "Expected a list."})
        return value

    if hasattr(data, "keys"):
        files = getattr(request, "FILES", None) or {}
        return indexed_entries(data, root, skip_keys=set(files.keys()))
    return []
