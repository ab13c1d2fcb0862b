"""
스크립트 인덱서 모듈

캐시 루트를 재귀적으로 탐색하여 스크립트 파일 목록을 생성합니다.
인덱스는 저장하지 않으며 호출할 때마다 파일시스템을 새로 탐색합니다.
"""

import os
import stat
from pathlib import Path
from typing import Iterator

from ..models.entries import ScriptEntry
from ..utils.logging import get_logger

logger = get_logger(__name__)


def _is_readable_script(path: Path, suffix: str) -> bool:
    """
    최선 노력(best-effort) 탐색 필터

    확장자가 정확히 일치하고 실제로 읽을 수 있는 일반 파일만 통과시킵니다.
    깨진 심볼릭 링크나 권한 오류가 있는 항목은 오류 없이 제외됩니다.

    Args:
        path: 검사할 파일 경로
        suffix: 스크립트 확장자 (대소문자 구분)

    Returns:
        bool: 스크립트로 인덱싱할지 여부
    """
    if path.suffix != suffix:
        return False

    try:
        mode = path.stat().st_mode
    except OSError as e:
        logger.debug(f"읽을 수 없는 항목 제외: {path} ({e})")
        return False

    return stat.S_ISREG(mode) and os.access(path, os.R_OK)


class ScriptIndexer:
    """캐시 디렉토리 스크립트 인덱서"""

    def __init__(self, cache_root: Path, suffix: str = ".sh"):
        """
        인덱서 초기화

        Args:
            cache_root: 캐시 루트 디렉토리
            suffix: 스크립트로 인식할 확장자
        """
        self.cache_root = Path(cache_root)
        self.suffix = suffix
        self.logger = logger

    def __iter__(self) -> Iterator[ScriptEntry]:
        return self.iter_scripts()

    def iter_scripts(self) -> Iterator[ScriptEntry]:
        """
        스크립트 항목을 지연 생성

        같은 디렉토리 트리에 대해 항상 같은 순서를 보장하도록
        각 단계의 디렉토리와 파일 이름을 정렬합니다.
        캐시 루트가 없으면 아무것도 생성하지 않습니다.

        Yields:
            ScriptEntry: 발견된 스크립트 항목
        """
        if not self.cache_root.is_dir():
            self.logger.debug(f"캐시 디렉토리 없음: {self.cache_root}")
            return

        for dirpath, dirnames, filenames in os.walk(self.cache_root, onerror=self._on_walk_error):
            # os.walk가 정렬된 순서로 하위 디렉토리를 방문하도록 제자리 정렬
            dirnames.sort()

            for filename in sorted(filenames):
                path = Path(dirpath) / filename
                if _is_readable_script(path, self.suffix):
                    yield ScriptEntry.from_path(path)

    def list_scripts(self) -> list[ScriptEntry]:
        """
        전체 스크립트 목록 조회

        Returns:
            스크립트 항목 목록 (탐색 순서 유지)
        """
        scripts = list(self.iter_scripts())
        self.logger.debug(f"스크립트 {len(scripts)}개 발견: {self.cache_root}")
        return scripts

    def _on_walk_error(self, error: OSError) -> None:
        """탐색 불가 디렉토리는 로그만 남기고 건너뜀"""
        self.logger.debug(f"디렉토리 탐색 건너뜀: {error.filename} ({error.strerror})")
