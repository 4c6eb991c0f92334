"""
목적:
- Docsplit Python 패키지의 공개 진입점을 제공한다.

설명:
- 라이브러리 핵심 클래스는 `PartitionClient`, `ObjectPartitionLoader` 두 가지다.
- 설정/계약/예외를 함께 노출한다.

디자인 패턴:
- 퍼사드(Facade).

참조:
- src_py/docsplit/partition/client.py
- src_py/docsplit/loading/loader.py
"""

from .config.models import (
    DEFAULT_PARTITION_API_URL,
    ObjectStoreConfig,
    PartitionConfig,
    PartitionStrategy,
)
from .contracts.partition_models import PartitionElement, PartitionRecord
from .contracts.protocols import DocumentPartitioner, ObjectReader
from .exceptions import (
    ConfigurationError,
    DependencyUnavailableError,
    DocsplitError,
    LoaderStageError,
    PartitionError,
    PartitioningStageError,
    PartitionRequestError,
    PartitionResponseShapeError,
    RetrievalError,
)
from .loading.loader import ObjectPartitionLoader
from .partition.client import PartitionClient, to_records
from .storage.s3 import S3ObjectReader
from .version import __version__

__all__ = [
    "__version__",
    "PartitionClient",
    "ObjectPartitionLoader",
    "S3ObjectReader",
    "to_records",
    "DEFAULT_PARTITION_API_URL",
    "PartitionStrategy",
    "PartitionConfig",
    "ObjectStoreConfig",
    "PartitionElement",
    "PartitionRecord",
    "DocumentPartitioner",
    "ObjectReader",
    "DocsplitError",
    "ConfigurationError",
    "DependencyUnavailableError",
    "PartitionError",
    "PartitionRequestError",
    "PartitionResponseShapeError",
    "LoaderStageError",
    "RetrievalError",
    "PartitioningStageError",
]
