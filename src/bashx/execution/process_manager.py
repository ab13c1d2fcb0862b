"""
프로세스 관리 모듈

외부 프로세스 실행을 하나의 좁은 인터페이스로 감쌉니다.
"""

import asyncio
from pathlib import Path
from typing import Optional, Sequence

from ..exceptions import ProcessExecutionException
from ..models.entries import ProcessResult
from ..utils.logging import get_logger

logger = get_logger(__name__)


class ProcessManager:
    """차일드 프로세스 실행기"""

    def __init__(self, capture_output: bool = False):
        """
        프로세스 매니저 초기화

        Args:
            capture_output: True면 표준 출력/에러를 수집, False면 터미널을 그대로 상속
        """
        self.capture_output = capture_output
        self.logger = logger

    async def run(
        self,
        command: str,
        args: Sequence[str] = (),
        working_dir: Optional[Path] = None
    ) -> ProcessResult:
        """
        프로세스를 실행하고 종료를 기다림

        타임아웃은 적용하지 않습니다.

        Args:
            command: 실행할 프로그램
            args: 프로그램 인자
            working_dir: 작업 디렉토리 (None이면 현재 디렉토리)

        Returns:
            ProcessResult: (종료 코드, 표준 출력, 표준 에러). 시그널로 종료되면 종료 코드는 음수

        Raises:
            ProcessExecutionException: 프로세스를 시작할 수 없을 때
        """
        cmd = [command, *args]
        pipe = asyncio.subprocess.PIPE if self.capture_output else None

        try:
            process = await asyncio.create_subprocess_exec(
                *cmd,
                cwd=str(working_dir) if working_dir is not None else None,
                stdout=pipe,
                stderr=pipe
            )
        except OSError as e:
            self.logger.error(f"프로세스 생성 오류: {e}")
            raise ProcessExecutionException(f"프로세스 생성 오류: {command} - {e}", command) from e

        self.logger.info(f"프로세스 시작: {' '.join(cmd)} (PID: {process.pid}, cwd: {working_dir})")

        stdout, stderr = await process.communicate()
        return_code = process.returncode

        stdout_text = stdout.decode('utf-8', errors='replace') if stdout else ""
        stderr_text = stderr.decode('utf-8', errors='replace') if stderr else ""

        self.logger.info(f"프로세스 종료: {command} (종료코드: {return_code})")
        return ProcessResult(return_code, stdout_text, stderr_text)
