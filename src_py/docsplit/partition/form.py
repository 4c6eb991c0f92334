"""
목적:
- 파티셔닝 요청의 multipart 필드 구성을 담당한다.

설명:
- `strategy`는 항상 전송하고, OCR 언어는 언어 코드마다 필드를 반복한다.
- 나머지 옵션은 값이 참일 때만 전송하며 불리언은 문자열 `"true"`로 보낸다.

디자인 패턴:
- 빌더(Builder).

참조:
- src_py/docsplit/config/models.py
- src_py/docsplit/partition/client.py
"""

from __future__ import annotations

from docsplit.config.models import PartitionConfig

API_KEY_HEADER = "UNSTRUCTURED-API-KEY"
FILE_FIELD = "files"
FILE_CONTENT_TYPE = "application/octet-stream"


def upload_name(file_name: str) -> str:
    """경로 형태의 파일명에서 마지막 세그먼트만 반환한다."""
    return file_name.split("/")[-1]


def build_form_data(config: PartitionConfig) -> dict[str, str | list[str]]:
    """파일 필드를 제외한 multipart 데이터 필드를 생성한다."""
    data: dict[str, str | list[str]] = {"strategy": config.strategy}
    if config.ocr_languages:
        data["ocr_languages"] = list(config.ocr_languages)
    if config.encoding:
        data["encoding"] = config.encoding
    if config.coordinates:
        data["coordinates"] = "true"
    if config.pdf_infer_table_structure:
        data["pdf_infer_table_structure"] = "true"
    if config.xml_keep_tags:
        data["xml_keep_tags"] = "true"
    return data


def build_files(data: bytes, file_name: str) -> list[tuple[str, tuple[str, bytes, str]]]:
    """바이너리 본문 필드를 생성한다."""
    return [(FILE_FIELD, (upload_name(file_name), data, FILE_CONTENT_TYPE))]


def build_headers(config: PartitionConfig) -> dict[str, str]:
    """인증 헤더를 생성한다. 키가 없으면 빈 문자열을 보낸다."""
    return {API_KEY_HEADER: config.api_key or ""}
