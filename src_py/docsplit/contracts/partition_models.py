"""
목적:
- 파티셔닝 응답 요소와 정규화 결과 레코드 모델을 정의한다.

설명:
- 서비스 응답 배열에서 `text`가 문자열인 항목만 요소로 채택한다.
- 레코드 속성은 요소 `metadata`를 그대로 복사한 뒤 `category`를 덮어쓴다.

디자인 패턴:
- DTO(Data Transfer Object).

참조:
- src_py/docsplit/partition/client.py
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class PartitionElement(BaseModel):
    """파티셔닝 서비스가 반환한 단일 요소 모델."""

    model_config = ConfigDict(frozen=True)

    type: Any = Field(default=None)
    text: str
    metadata: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_raw(cls, raw: object) -> "PartitionElement | None":
        """응답 항목을 요소로 변환한다. 텍스트가 없는 항목은 None을 반환한다."""
        if not isinstance(raw, dict):
            return None
        text = raw.get("text")
        if not isinstance(text, str):
            return None
        metadata = raw.get("metadata")
        return cls(
            type=raw.get("type"),
            text=text,
            metadata=metadata if isinstance(metadata, dict) else {},
        )

    def to_record(self) -> "PartitionRecord":
        """요소를 정규화 레코드로 변환한다."""
        return PartitionRecord(
            content=self.text,
            attributes={**self.metadata, "category": self.type},
        )


class PartitionRecord(BaseModel):
    """다운스트림 색인용 정규화 레코드 모델."""

    model_config = ConfigDict(frozen=True)

    content: str
    attributes: dict[str, Any] = Field(default_factory=dict)
