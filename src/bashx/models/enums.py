"""
열거형 정의 모듈

bashx에서 사용되는 상수 값들을 열거형으로 정의합니다.
"""

from enum import Enum


class RunStatus(Enum):
    """스크립트 실행 결과 열거형 (오류가 아닌 결과만 포함)"""
    COMPLETED = "completed"
    CANCELLED = "cancelled"
