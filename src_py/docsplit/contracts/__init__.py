"""
목적:
- Python 계약 모델 계층의 공개 심볼을 제공한다.

설명:
- 파티셔닝 요소/레코드 모델과 협력자 인터페이스를 하나의 네임스페이스에서 재노출한다.

디자인 패턴:
- 모듈 퍼사드(Module Facade).

참조:
- src_py/docsplit/contracts/partition_models.py
- src_py/docsplit/contracts/protocols.py
"""

from .partition_models import PartitionElement, PartitionRecord
from .protocols import DocumentPartitioner, ObjectReader

__all__ = [
    "PartitionElement",
    "PartitionRecord",
    "DocumentPartitioner",
    "ObjectReader",
]
