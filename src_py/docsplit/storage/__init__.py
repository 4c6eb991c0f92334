"""
목적:
- 객체 저장소 계층의 공개 심볼을 정의한다.

설명:
- 외부에는 `S3ObjectReader`를 기본 조회기로 제공한다.

디자인 패턴:
- 모듈 퍼사드(Module Facade).

참조:
- src_py/docsplit/storage/s3.py
"""

from docsplit.storage.s3 import S3ObjectReader

__all__ = ["S3ObjectReader"]
