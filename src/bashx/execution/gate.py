"""
실행 확인 모듈

신뢰할 수 없는 스크립트를 실행하기 전에 사용자의 명시적인 동의를 받습니다.
"""

from typing import Callable

import typer

from ..models.entries import ScriptEntry
from ..utils.logging import get_logger

logger = get_logger(__name__)

SAFETY_WARNING = (
    "실행하려는 파일에 악성 코드가 포함되어 있을 수 있습니다. "
    "실행하기 전에 스크립트 내용을 검토하세요."
)
CONFIRM_PROMPT = "이 스크립트를 실행하시겠습니까?"


class ExecutionGate:
    """스크립트 실행 확인 게이트"""

    def __init__(
        self,
        confirm: Callable[..., bool] = typer.confirm,
        echo: Callable[[str], None] = typer.echo
    ):
        """
        확인 게이트 초기화

        Args:
            confirm: 예/아니오 질의 함수 (prompt, default=...)
            echo: 경고 메시지 출력 함수
        """
        self._confirm = confirm
        self._echo = echo
        self.logger = logger

    def confirm(self, entry: ScriptEntry) -> bool:
        """
        실행 동의 확인

        기본 응답은 "아니오"이며, 응답을 받을 수 없거나
        명시적인 동의가 아니면 거부로 처리합니다.

        Args:
            entry: 실행할 스크립트 항목

        Returns:
            bool: 실행 동의 여부
        """
        self._echo(f"스크립트: {entry.path}")
        self._echo(SAFETY_WARNING)

        try:
            answer = self._confirm(CONFIRM_PROMPT, default=False)
        except (typer.Abort, EOFError, OSError) as e:
            self.logger.info(f"실행 확인 응답 없음, 거부로 처리: {e!r}")
            return False

        consent = answer is True
        self.logger.info(f"실행 확인 결과: {entry.name} -> {'동의' if consent else '거부'}")
        return consent
