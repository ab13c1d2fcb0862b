"""
스크립트 실행 오케스트레이션 모듈

이름 해석, 실행 확인, 실행을 순서대로 연결합니다.
"""

import asyncio

from ..models.enums import RunStatus
from ..scripts.resolver import ScriptResolver
from ..utils.logging import get_logger
from .gate import ExecutionGate
from .runner import ScriptRunner

logger = get_logger(__name__)


class ScriptExecutor:
    """스크립트 실행 오케스트레이터"""

    def __init__(self, resolver: ScriptResolver, gate: ExecutionGate, runner: ScriptRunner):
        """
        실행 오케스트레이터 초기화

        Args:
            resolver: 스크립트 이름 해석기
            gate: 실행 확인 게이트
            runner: 스크립트 실행기
        """
        self.resolver = resolver
        self.gate = gate
        self.runner = runner
        self.logger = logger

    def run_script(self, name: str) -> RunStatus:
        """
        이름으로 스크립트 실행

        스크립트를 찾지 못하면 확인 질의 없이 예외가 발생하고,
        사용자가 거부하면 권한 설정과 실행 모두 건너뜁니다.
        확인 질의는 이벤트 루프 밖에서 동기적으로 수행하고,
        실행 단계만 asyncio.run으로 구동합니다.

        Args:
            name: 스크립트 이름

        Returns:
            RunStatus: COMPLETED 또는 CANCELLED

        Raises:
            ScriptNotFoundException: 스크립트를 찾을 수 없을 때
            PermissionSetException: 권한 설정 실패 시
            ProcessExecutionException: 인터프리터를 시작할 수 없을 때
            ScriptExecutionException: 스크립트가 실패했을 때
        """
        entry = self.resolver.require(name)

        if not self.gate.confirm(entry):
            self.logger.info(f"스크립트 실행 취소: {entry.path}")
            return RunStatus.CANCELLED

        asyncio.run(self.runner.run(entry))
        return RunStatus.COMPLETED
