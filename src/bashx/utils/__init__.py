"""
유틸리티 패키지

공통으로 사용되는 로깅 함수들을 포함합니다.
"""

from .logging import get_logger, setup_logging

__all__ = [
    "get_logger",
    "setup_logging",
]
