# PATH: apps/domains/forms/form_code.py
import secrets
import string

from django.conf import settings

CODE_ALPHABET = string.ascii_uppercase + string.digits


def generate_code(length=None):
    length = length or settings.FORMS_CODE_LENGTH
    return "".join(secrets.choice(CODE_ALPHABET) for _ in range(length))


def generate_unique_form_code():
    """
    [A-Z0-9] 8자리 공개 코드를 중복 없이 부여.
    unique 제약이 최종 방어선이고 여기서는 선조회로 충돌만 피한다.
    """
    from apps.domains.forms.models import Form

    for _ in range(200):
        candidate = generate_code()
        if not Form.objects.filter(code=candidate).exists():
            return candidate
    raise ValueError("Could not allocate a unique form code. Please retry.")
