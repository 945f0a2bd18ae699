# ==============================================================================
# PATH: apps/infrastructure/storage/object_storage.py
#
# PURPOSE:
# - API 서버 전용 오브젝트 스토리지(S3 호환) 접근 레이어
# - Supabase Storage / Cloudflare R2 / AWS S3 모두 endpoint 만 바꿔서 사용
# - 문항 첨부(attachments) / 파일형 응답(responses) 업로드
# ==============================================================================

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from typing import List, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from django.conf import settings
from django.core.exceptions import SuspiciousFileOperation
from django.utils.text import get_valid_filename

from apps.api.common.exceptions import UploadFailed

logger = logging.getLogger(__name__)


def _get_s3_client():
    return boto3.client(
        "s3",
        endpoint_url=settings.STORAGE_ENDPOINT,
        aws_access_key_id=settings.STORAGE_ACCESS_KEY,
        aws_secret_access_key=settings.STORAGE_SECRET_KEY,
        region_name=settings.STORAGE_REGION,
    )


def build_key(folder: str, filename: Optional[str]) -> str:
    """<folder>/<uuid>_<filename>"""
    try:
        name = get_valid_filename(filename or "")
    except SuspiciousFileOperation:
        name = "file"
    return f"{folder.strip('/')}/{uuid.uuid4().hex}_{name}"


def public_url(key: str) -> str:
    base = (settings.STORAGE_PUBLIC_BASE_URL or "").rstrip("/")
    return f"{base}/{key}"


@dataclass(frozen=True)
class StoredObject:
    key: str
    url: str
    content_type: str


# ---------------------------------------------------------------------
# Upload / Delete
# ---------------------------------------------------------------------

def upload_fileobj(
    *,
    fileobj,
    folder: str,
    content_type: str | None = None,
) -> StoredObject:
    """
    Django UploadedFile -> 스토리지 업로드
    실패 시 UploadFailed (재시도 없음, 호출 측 트랜잭션 중단)
    """
    key = build_key(folder, getattr(fileobj, "name", None))
    ctype = content_type or getattr(fileobj, "content_type", None) or "application/octet-stream"

    try:
        s3 = _get_s3_client()
        s3.upload_fileobj(
            Fileobj=fileobj,
            Bucket=settings.STORAGE_BUCKET,
            Key=key,
            ExtraArgs={"ContentType": ctype},
        )
    except (BotoCoreError, ClientError) as e:
        logger.exception("storage upload failed: key=%s", key)
        raise UploadFailed() from e

    return StoredObject(key=key, url=public_url(key), content_type=ctype)


def delete_object(*, key: str) -> None:
    s3 = _get_s3_client()
    s3.delete_object(Bucket=settings.STORAGE_BUCKET, Key=key)


# ---------------------------------------------------------------------
# UploadBatch: 트랜잭션 단위 업로드 묶음
# ---------------------------------------------------------------------

class UploadBatch:
    """
    with UploadBatch() as uploads, transaction.atomic():
        url = uploads.upload(f, folder="attachments").url

    블록이 예외로 끝나면 이번 작업에서 올린 객체를 삭제한다 (best-effort).
    예외 자체는 그대로 전파된다.
    """

    def __init__(self):
        self.objects: List[StoredObject] = []

    def __enter__(self) -> "UploadBatch":
        return self

    def upload(self, fileobj, *, folder: str) -> StoredObject:
        obj = upload_fileobj(fileobj=fileobj, folder=folder)
        self.objects.append(obj)
        return obj

    def __exit__(self, exc_type, exc, tb) -> bool:
        if exc_type is None:
            return False

        for obj in self.objects:
            try:
                delete_object(key=obj.key)
            except (BotoCoreError, ClientError):
                logger.warning("orphan object cleanup failed: key=%s", obj.key)

        self.objects.clear()
        return False
