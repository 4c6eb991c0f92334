"""
목적:
- Docsplit Python 계층의 예외 타입을 표준화한다.

설명:
- 파티셔닝 요청 실패, 응답 형식 위반, 객체 조회 실패를 명시적으로 구분해
  라이브러리 소비자가 처리 전략을 선택할 수 있게 한다.
- 오케스트레이션 경계에서는 "조회 단계 vs 파티셔닝 단계"만 구분하고,
  세부 원인은 `__cause__` 체인으로 보존한다.

디자인 패턴:
- 계층형 예외(Hierarchical Exception).

참조:
- src_py/docsplit/partition/client.py
- src_py/docsplit/loading/loader.py
"""

from __future__ import annotations


class DocsplitError(Exception):
    """Docsplit 공통 베이스 예외."""


class ConfigurationError(DocsplitError):
    """설정값이 유효하지 않거나 누락되었을 때 발생한다."""


class DependencyUnavailableError(DocsplitError):
    """boto3 등 필수 의존성을 사용할 수 없을 때 발생한다."""


class PartitionError(DocsplitError):
    """파티셔닝 클라이언트 오류의 베이스 예외."""


class PartitionRequestError(PartitionError):
    """파티셔닝 서비스가 2xx 이외의 상태 코드를 반환했을 때 발생한다."""

    def __init__(self, file_name: str, status_code: int, body: str) -> None:
        self.file_name = file_name
        self.status_code = status_code
        self.body = body
        super().__init__(
            f"Failed to partition file {file_name} with error {status_code} and message {body}"
        )


class PartitionResponseShapeError(PartitionError):
    """파티셔닝 응답 본문이 JSON 배열이 아닐 때 발생한다."""

    def __init__(self, file_name: str, received: object) -> None:
        self.file_name = file_name
        self.received = received
        super().__init__(
            f"Expected partitioning request for {file_name} to return an array, but got {received!r}"
        )


class LoaderStageError(DocsplitError):
    """오케스트레이션 단계 오류의 베이스 예외."""


class RetrievalError(LoaderStageError):
    """객체 저장소에서 파일을 가져오는 중 오류가 발생할 때 사용한다."""

    def __init__(self, bucket: str, key: str, cause_message: str) -> None:
        self.bucket = bucket
        self.key = key
        self.cause_message = cause_message
        super().__init__(f"Failed to download file {key} from bucket {bucket}: {cause_message}")


class PartitioningStageError(LoaderStageError):
    """조회한 파일을 파티셔닝하는 단계에서 오류가 발생할 때 사용한다."""

    def __init__(self, file_name: str, stage: str = "partition") -> None:
        self.file_name = file_name
        self.stage = stage
        super().__init__(f"Failed to load file {file_name} at stage '{stage}'")
