"""
목적:
- 적재 계층의 공개 심볼을 정의한다.

설명:
- 외부에는 `ObjectPartitionLoader`를 기본 진입점으로 제공한다.

디자인 패턴:
- 모듈 퍼사드(Module Facade).

참조:
- src_py/docsplit/loading/loader.py
"""

from docsplit.loading.loader import ObjectPartitionLoader

__all__ = ["ObjectPartitionLoader"]
