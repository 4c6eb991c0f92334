"""
목적:
- 객체 저장소 파일을 파티셔닝 레코드로 적재하는 공개 클래스 `ObjectPartitionLoader`를 제공한다.

설명:
- 1단계에서 (bucket, key) 객체를 전부 읽고, 2단계에서 파티셔너에 위임한다.
- 두 단계의 실패는 `RetrievalError`/`PartitioningStageError`로 구분되며
  원인 예외는 `__cause__`로 보존한다.
- 부분 결과는 반환하지 않는다.

디자인 패턴:
- 서비스 레이어(Service Layer).

참조:
- src_py/docsplit/contracts/protocols.py
- src_py/docsplit/partition/client.py
- src_py/docsplit/storage/s3.py
"""

from __future__ import annotations

import logging

from docsplit.config.models import ObjectStoreConfig, PartitionConfig
from docsplit.contracts.partition_models import PartitionRecord
from docsplit.contracts.protocols import DocumentPartitioner, ObjectReader
from docsplit.exceptions import ConfigurationError, PartitioningStageError, RetrievalError
from docsplit.partition.client import PartitionClient
from docsplit.storage.s3 import S3ObjectReader

logger = logging.getLogger(__name__)


class ObjectPartitionLoader:
    """객체 조회와 파티셔닝을 묶는 적재 클래스."""

    def __init__(
        self,
        bucket: str | None = None,
        key: str | None = None,
        partition_config: PartitionConfig | None = None,
        store_config: ObjectStoreConfig | None = None,
        object_reader: ObjectReader | None = None,
        partitioner: DocumentPartitioner | None = None,
    ) -> None:
        self._bucket = bucket
        self._key = key
        self._partition_config = partition_config or PartitionConfig()
        self._object_reader = object_reader or S3ObjectReader(store_config)
        self._owns_partitioner = partitioner is None
        self._partitioner = partitioner or PartitionClient(self._partition_config)

    def __enter__(self) -> "ObjectPartitionLoader":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """직접 생성한 파티셔닝 클라이언트를 닫는다."""
        if self._owns_partitioner:
            self._partitioner.close()

    def load(
        self,
        bucket: str | None = None,
        key: str | None = None,
        config: PartitionConfig | None = None,
    ) -> list[PartitionRecord]:
        """객체를 조회해 파티셔닝 레코드 목록을 반환한다.

        Args:
            bucket: 저장소 식별자. 생략하면 생성 시 값을 사용한다.
            key: 객체 키. 파티셔닝 요청의 논리 파일명으로도 쓰인다.
            config: 파티셔닝 옵션. 생략하면 생성 시 설정을 사용한다.

        Raises:
            RetrievalError: 객체 조회 단계에서 실패한 경우.
            PartitioningStageError: 파티셔닝 단계에서 실패한 경우.
            ConfigurationError: bucket 또는 key가 지정되지 않은 경우.
        """
        bucket = bucket or self._bucket
        key = key or self._key
        if not bucket or not key:
            raise ConfigurationError("bucket과 key는 필수입니다")

        data = self._retrieve(bucket, key)
        records = self._partition(data, key, config or self._partition_config)
        logger.info("Loaded %d records from %s/%s", len(records), bucket, key)
        return records

    def _retrieve(self, bucket: str, key: str) -> bytes:
        try:
            return self._object_reader.read_object(bucket, key)
        except Exception as exc:  # noqa: BLE001
            logger.warning("Retrieval of %s from %s failed: %s", key, bucket, exc)
            raise RetrievalError(bucket, key, str(exc)) from exc

    def _partition(self, data: bytes, file_name: str, config: PartitionConfig) -> list[PartitionRecord]:
        try:
            return self._partitioner.partition(data, file_name, config)
        except Exception as exc:  # noqa: BLE001
            logger.warning("Partitioning of %s failed: %s", file_name, exc)
            raise PartitioningStageError(file_name, stage="partition") from exc
