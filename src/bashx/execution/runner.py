"""
스크립트 실행기 모듈

해석된 스크립트에 실행 권한을 부여하고 인터프리터로 실행합니다.
"""

import shlex
import stat

from ..exceptions import PermissionSetException, ScriptExecutionException
from ..models.entries import ScriptEntry
from ..utils.logging import get_logger
from .process_manager import ProcessManager

logger = get_logger(__name__)

EXECUTE_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


class ScriptRunner:
    """스크립트 실행기"""

    def __init__(self, process_manager: ProcessManager, interpreter: str = "bash"):
        """
        스크립트 실행기 초기화

        Args:
            process_manager: 프로세스 매니저
            interpreter: 인터프리터 명령 (인자 포함 가능, 예: "bash -e")
        """
        self.process_manager = process_manager
        self.interpreter = shlex.split(interpreter)
        self.logger = logger

    def make_executable(self, entry: ScriptEntry) -> None:
        """
        스크립트 파일에 실행 권한 부여

        Args:
            entry: 스크립트 항목

        Raises:
            PermissionSetException: 권한 설정 실패 시
        """
        try:
            mode = entry.path.stat().st_mode
            entry.path.chmod(stat.S_IMODE(mode) | EXECUTE_BITS)
        except OSError as e:
            self.logger.error(f"실행 권한 설정 실패: {entry.path} - {e}")
            raise PermissionSetException(str(entry.path), str(e)) from e

        self.logger.info(f"실행 권한 설정 완료: {entry.path}")

    async def run(self, entry: ScriptEntry) -> int:
        """
        스크립트 실행

        실행 권한 설정에 실패하면 인터프리터는 시작하지 않습니다.
        작업 디렉토리는 스크립트가 있는 디렉토리입니다.

        Args:
            entry: 스크립트 항목

        Returns:
            int: 종료 코드 (항상 0)

        Raises:
            PermissionSetException: 권한 설정 실패 시
            ProcessExecutionException: 인터프리터를 시작할 수 없을 때
            ScriptExecutionException: 스크립트가 0이 아닌 코드로 종료했을 때
        """
        self.make_executable(entry)

        command, *interpreter_args = self.interpreter
        result = await self.process_manager.run(
            command,
            [*interpreter_args, str(entry.path)],
            working_dir=entry.directory
        )

        if not result.succeeded:
            self.logger.error(f"스크립트 실행 실패: {entry.path} (종료코드: {result.return_code})")
            raise ScriptExecutionException(str(entry.path), result.return_code)

        self.logger.info(f"스크립트 실행 완료: {entry.path}")
        return result.return_code
