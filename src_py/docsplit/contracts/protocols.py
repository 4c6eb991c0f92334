"""
목적:
- 오케스트레이션 계층이 의존하는 협력자 인터페이스를 정의한다.

설명:
- 파티셔너와 객체 조회기를 구조적 타입으로 선언해
  테스트에서 네트워크 없이 대체 구현을 주입할 수 있게 한다.

디자인 패턴:
- 포트(Port).

참조:
- src_py/docsplit/loading/loader.py
- src_py/docsplit/partition/client.py
- src_py/docsplit/storage/s3.py
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from docsplit.config.models import PartitionConfig
from docsplit.contracts.partition_models import PartitionRecord


@runtime_checkable
class DocumentPartitioner(Protocol):
    """바이트 본문을 정규화 레코드 목록으로 분할하는 인터페이스."""

    def partition(
        self,
        data: bytes,
        file_name: str,
        config: PartitionConfig | None = None,
    ) -> list[PartitionRecord]: ...


@runtime_checkable
class ObjectReader(Protocol):
    """(bucket, key)로 객체 전체 바이트를 읽어오는 인터페이스."""

    def read_object(self, bucket: str, key: str) -> bytes: ...
