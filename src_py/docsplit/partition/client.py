"""
목적:
- 문서 파티셔닝 서비스용 HTTP 클라이언트를 제공한다.

설명:
- 바이트 본문을 multipart로 업로드해 1회 POST 요청을 수행한다.
- 응답이 JSON 배열인지 검증한 뒤 텍스트 요소만 정규화 레코드로 변환한다.
- 재시도/페이지네이션은 수행하지 않으며, 전송 계층 예외는 그대로 전파한다.

디자인 패턴:
- 어댑터(Adapter).

참조:
- src_py/docsplit/partition/form.py
- src_py/docsplit/contracts/partition_models.py
- src_py/docsplit/exceptions.py
"""

from __future__ import annotations

import logging

import httpx

from docsplit.config.models import PartitionConfig
from docsplit.contracts.partition_models import PartitionElement, PartitionRecord
from docsplit.exceptions import PartitionRequestError, PartitionResponseShapeError
from docsplit.partition.form import build_files, build_form_data, build_headers

logger = logging.getLogger(__name__)


class PartitionClient:
    """파티셔닝 HTTP 클라이언트."""

    def __init__(
        self,
        config: PartitionConfig | None = None,
        http_client: httpx.Client | None = None,
    ) -> None:
        self._config = config or PartitionConfig()
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(
            timeout=self._config.timeout_seconds(),
            follow_redirects=True,
        )

    def __enter__(self) -> "PartitionClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """직접 생성한 httpx 클라이언트를 닫는다."""
        if self._owns_client:
            self._client.close()

    def partition(
        self,
        data: bytes,
        file_name: str,
        config: PartitionConfig | None = None,
    ) -> list[PartitionRecord]:
        """바이트 본문을 파티셔닝해 정규화 레코드 목록을 반환한다.

        Args:
            data: 원본 문서 바이트.
            file_name: 표시용 파일명. 경로면 마지막 세그먼트만 업로드 파일명으로 쓴다.
            config: 요청 옵션. 생략하면 생성 시 주입한 설정을 사용한다.

        Returns:
            응답 순서를 유지한 `PartitionRecord` 목록.

        Raises:
            PartitionRequestError: 2xx 이외의 상태 코드를 받은 경우.
            PartitionResponseShapeError: 응답 본문이 JSON 배열이 아닌 경우.
        """
        elements = self.partition_elements(data, file_name, config)
        return to_records(elements)

    def partition_elements(
        self,
        data: bytes,
        file_name: str,
        config: PartitionConfig | None = None,
    ) -> list[PartitionElement]:
        """파티셔닝 요청을 수행하고 텍스트 요소만 반환한다."""
        effective = config or self._config
        logger.debug(
            "Partitioning %s (%d bytes) via %s with strategy=%s",
            file_name,
            len(data),
            effective.api_url,
            effective.strategy,
        )

        response = self._client.post(
            effective.api_url,
            data=build_form_data(effective),
            files=build_files(data, file_name),
            headers=build_headers(effective),
            timeout=effective.timeout_seconds(),
            follow_redirects=True,
        )
        if not response.is_success:
            raise PartitionRequestError(file_name, response.status_code, response.text)

        try:
            payload = response.json()
        except ValueError as exc:
            raise PartitionResponseShapeError(file_name, response.text) from exc

        if not isinstance(payload, list):
            raise PartitionResponseShapeError(file_name, payload)

        elements = [
            element
            for element in (PartitionElement.from_raw(raw) for raw in payload)
            if element is not None
        ]
        dropped = len(payload) - len(elements)
        if dropped:
            logger.debug("Dropped %d non-text elements from %s", dropped, file_name)
        return elements


def to_records(elements: list[PartitionElement]) -> list[PartitionRecord]:
    """요소 목록을 순서대로 정규화 레코드로 변환한다."""
    return [element.to_record() for element in elements]
