"""
스크립트 이름 해석 모듈

사용자가 지정한 이름을 캐시 안의 스크립트 파일 하나로 해석합니다.
"""

from typing import Optional

from ..exceptions import ScriptNotFoundException
from ..models.entries import ScriptEntry
from ..utils.logging import get_logger
from .indexer import ScriptIndexer

logger = get_logger(__name__)


class ScriptResolver:
    """스크립트 이름 해석기"""

    def __init__(self, indexer: ScriptIndexer):
        """
        해석기 초기화

        Args:
            indexer: 스크립트 인덱서
        """
        self.indexer = indexer
        self.logger = logger

    def resolve(self, name: str) -> Optional[ScriptEntry]:
        """
        이름으로 스크립트 찾기

        탐색 순서상 이름(확장자 제외)이 정확히 일치하는 첫 번째 항목을 반환하며,
        일치하는 항목을 찾으면 나머지 트리는 탐색하지 않습니다.
        같은 이름의 스크립트가 여러 디렉토리에 있어도 하나만 반환합니다.

        Args:
            name: 스크립트 이름 (확장자 없음, 대소문자 구분)

        Returns:
            일치하는 스크립트 항목 (없으면 None)
        """
        for entry in self.indexer.iter_scripts():
            if entry.name == name:
                self.logger.info(f"스크립트 해석 완료: {name} -> {entry.path}")
                return entry

        self.logger.info(f"스크립트를 찾지 못함: {name}")
        return None

    def require(self, name: str) -> ScriptEntry:
        """
        이름으로 스크립트 찾기 (없으면 예외)

        Args:
            name: 스크립트 이름

        Returns:
            ScriptEntry: 일치하는 스크립트 항목

        Raises:
            ScriptNotFoundException: 일치하는 스크립트가 없을 때
        """
        entry = self.resolve(name)
        if entry is None:
            raise ScriptNotFoundException(name)
        return entry
