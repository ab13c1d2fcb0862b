"""
데이터 모델 패키지

bashx의 핵심 데이터 모델들을 정의합니다.
"""

from .entries import ProcessResult, ScriptEntry
from .enums import RunStatus

__all__ = [
    "ProcessResult",
    "RunStatus",
    "ScriptEntry",
]
