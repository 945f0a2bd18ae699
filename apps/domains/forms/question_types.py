# PATH: apps/domains/forms/question_types.py
# 질문 유형 문자열 상수. 채점 엔진(results)도 이 값만 참조한다 (Django 의존 없음).

TEXT_INPUT = "text-input"
DATE = "date"
MULTIPLE_CHOICE = "multiple-choice"
CHECKBOX = "checkbox"
RADIO_BUTTON = "radio-button"
DROPDOWN = "dropdown"
SCALE = "scale"
FILE = "file"

CHOICE_TYPES = frozenset({MULTIPLE_CHOICE, CHECKBOX, RADIO_BUTTON, DROPDOWN})
TEXT_TYPES = frozenset({TEXT_INPUT, DATE})

ALL_TYPES = (
    TEXT_INPUT,
    DATE,
    MULTIPLE_CHOICE,
    CHECKBOX,
    RADIO_BUTTON,
    DROPDOWN,
    SCALE,
    FILE,
)


def is_choice(question_type: str) -> bool:
    return question_type in CHOICE_TYPES
