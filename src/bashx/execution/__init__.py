"""
스크립트 실행 패키지

실행 확인, 권한 설정, 인터프리터 실행을 담당합니다.
"""

from .executor import ScriptExecutor
from .gate import ExecutionGate
from .process_manager import ProcessManager
from .runner import ScriptRunner

__all__ = [
    "ExecutionGate",
    "ProcessManager",
    "ScriptExecutor",
    "ScriptRunner",
]
