# PATH: apps/api/common/exceptions.py
# API 공통 예외 + DRF EXCEPTION_HANDLER.
# 미처리 예외는 500 JSON으로 변환하고 error_id만 노출한다 (stack trace 비노출).
from __future__ import annotations

import logging
import uuid

from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class AlreadyAnswered(APIException):
    """동일 사용자의 중복 제출 (퀴즈 / 1회 제한 설문)"""

    status_code = status.HTTP_409_CONFLICT
    default_detail = "You have already answered this form."
    default_code = "already_answered"


class UploadFailed(APIException):
    """오브젝트 스토리지 업로드 실패. 재시도 없이 트랜잭션 전체를 중단한다."""

    status_code = status.HTTP_502_BAD_GATEWAY
    default_detail = "File upload failed."
    default_code = "upload_failed"


def api_exception_handler(exc, context):
    response = exception_handler(exc, context)

    if response is not None:
        # 프론트는 code 키로 분기한다 (409 / 502)
        code = getattr(exc, "default_code", None)
        if isinstance(exc, (AlreadyAnswered, UploadFailed)) and isinstance(response.data, dict):
            response.data.setdefault("code", code)
        return response

    error_id = uuid.uuid4().hex
    view = context.get("view")
    logger.exception(
        "Unhandled exception in %s (error_id=%s)",
        view.__class__.__name__ if view else "unknown",
        error_id,
        exc_info=exc,
    )
    return Response(
        {
            "detail": "Internal server error",
            "code": "internal_error",
            "error_id": error_id,
        },
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
