"""
목적:
- S3 호환 객체 저장소에서 객체 전체 바이트를 읽어오는 조회기를 제공한다.

설명:
- 단일 `get_object` 호출 후 본문 스트림을 끝까지 읽어 메모리에 적재한다.
- 인증/재시도/전송은 boto3 클라이언트에 위임하며, 발생한 예외는 그대로 전파한다.

디자인 패턴:
- 어댑터(Adapter).

참조:
- src_py/docsplit/config/models.py
- src_py/docsplit/loading/loader.py
"""

from __future__ import annotations

import logging

from docsplit.config.models import ObjectStoreConfig
from docsplit.exceptions import DependencyUnavailableError

logger = logging.getLogger(__name__)


class S3ObjectReader:
    """boto3 기반 객체 조회기."""

    def __init__(self, config: ObjectStoreConfig | None = None, client=None) -> None:
        self._config = config or ObjectStoreConfig()
        self._client = client

    @property
    def client(self):
        if self._client is None:
            self._client = self._create_client(self._config)
        return self._client

    @staticmethod
    def _create_client(config: ObjectStoreConfig):
        try:
            import boto3
        except Exception as exc:  # noqa: BLE001
            raise DependencyUnavailableError(f"boto3 패키지를 불러오지 못했습니다: {exc}") from exc

        session = boto3.Session(profile_name=config.profile_name)
        return session.client("s3", **config.to_client_kwargs())

    def read_object(self, bucket: str, key: str) -> bytes:
        """객체 본문 전체를 바이트로 반환한다."""
        response = self.client.get_object(Bucket=bucket, Key=key)
        body = response["Body"]
        try:
            data = body.read()
        finally:
            body.close()
        logger.debug("Fetched s3://%s/%s (%d bytes)", bucket, key, len(data))
        return data
