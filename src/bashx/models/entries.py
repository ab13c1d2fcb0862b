"""
스크립트 항목 모델 모듈

캐시 디렉토리에서 발견된 스크립트 파일과 프로세스 실행 결과를 표현합니다.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import NamedTuple


@dataclass(frozen=True)
class ScriptEntry:
    """캐시에서 발견된 스크립트 파일"""

    path: Path
    name: str
    directory: Path

    @classmethod
    def from_path(cls, path: Path) -> "ScriptEntry":
        """
        파일 경로로부터 스크립트 항목 생성

        Args:
            path: 스크립트 파일 경로

        Returns:
            ScriptEntry: 확장자를 제거한 이름과 상위 디렉토리를 가진 항목
        """
        path = path.absolute()
        return cls(path=path, name=path.stem, directory=path.parent)


class ProcessResult(NamedTuple):
    """외부 프로세스 실행 결과"""

    return_code: int
    stdout: str
    stderr: str

    @property
    def succeeded(self) -> bool:
        return self.return_code == 0
