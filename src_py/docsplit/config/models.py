"""
목적:
- Docsplit 라이브러리의 설정 인터페이스를 정의한다.

설명:
- 파티셔닝 요청 옵션과 객체 저장소 연결 값을 각각 단일 모델로 관리한다.
- 미설정 옵션은 요청에서 생략되며, `strategy`만 항상 유효값(`hi_res`)을 가진다.

디자인 패턴:
- 값 객체(Value Object).

참조:
- src_py/docsplit/partition/form.py
- src_py/docsplit/storage/s3.py
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

DEFAULT_PARTITION_API_URL = "https://api.unstructured.io/general/v0/general"


class PartitionStrategy(str, Enum):
    """파티셔닝 서비스가 알려진 전략 값.

    설정 필드는 일반 문자열을 받으므로 서비스 측에 새 전략이 추가되어도
    그대로 전달할 수 있다.
    """

    HI_RES = "hi_res"
    FAST = "fast"
    OCR_ONLY = "ocr_only"
    AUTO = "auto"


class PartitionConfig(BaseModel):
    """파티셔닝 요청 옵션 모델."""

    model_config = ConfigDict(frozen=True)

    api_url: str = Field(default=DEFAULT_PARTITION_API_URL, min_length=1)
    api_key: str | None = Field(default=None)
    strategy: str = Field(default=PartitionStrategy.HI_RES.value, min_length=1)
    encoding: str | None = Field(default=None)
    ocr_languages: list[str] = Field(default_factory=list)
    coordinates: bool = Field(default=False)
    pdf_infer_table_structure: bool = Field(default=False)
    xml_keep_tags: bool = Field(default=False)
    timeout_ms: int | None = Field(default=None, ge=1)

    @field_validator("strategy", mode="before")
    @classmethod
    def normalize_strategy(cls, value: object) -> object:
        if isinstance(value, PartitionStrategy):
            return value.value
        return value

    def timeout_seconds(self) -> float | None:
        """httpx 전달용 타임아웃(초)을 반환한다."""
        if self.timeout_ms is None:
            return None
        return self.timeout_ms / 1000.0


class ObjectStoreConfig(BaseModel):
    """S3 호환 객체 저장소 연결 설정 모델."""

    model_config = ConfigDict(frozen=True)

    region_name: str | None = Field(default=None)
    endpoint_url: str | None = Field(default=None)
    access_key_id: str | None = Field(default=None)
    secret_access_key: str | None = Field(default=None)
    session_token: str | None = Field(default=None)
    profile_name: str | None = Field(default=None)

    @model_validator(mode="after")
    def validate_key_pair(self) -> "ObjectStoreConfig":
        if bool(self.access_key_id) != bool(self.secret_access_key):
            raise ValueError("access_key_id와 secret_access_key는 함께 지정해야 합니다")
        if self.session_token and not self.access_key_id:
            raise ValueError("session_token은 access_key_id와 함께 지정해야 합니다")
        return self

    def to_client_kwargs(self) -> dict[str, str]:
        """boto3 `client("s3", ...)` 호출 인자를 생성한다."""
        kwargs: dict[str, str] = {}
        if self.region_name:
            kwargs["region_name"] = self.region_name
        if self.endpoint_url:
            kwargs["endpoint_url"] = self.endpoint_url
        if self.access_key_id:
            kwargs["aws_access_key_id"] = self.access_key_id
            kwargs["aws_secret_access_key"] = self.secret_access_key or ""
        if self.session_token:
            kwargs["aws_session_token"] = self.session_token
        return kwargs
