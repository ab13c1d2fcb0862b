"""
스크립트 캐시 관리 모듈

캐시 루트 디렉토리의 존재 확인, 복제 위치 계산, 전체 삭제를 담당합니다.
캐시 디렉토리 생성은 저장소 복제의 부수 효과로만 일어납니다.
"""

import shutil
from pathlib import Path
from urllib.parse import urlparse

from ..exceptions import CacheCleanException
from ..utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_REPOSITORY_NAME = "repo"


class CacheManager:
    """스크립트 캐시 관리자"""

    def __init__(self, cache_root: Path):
        """
        캐시 매니저 초기화

        Args:
            cache_root: 캐시 루트 디렉토리
        """
        self.cache_dir = Path(cache_root)
        self.logger = logger

    def exists(self) -> bool:
        """캐시 디렉토리 존재 여부"""
        return self.cache_dir.is_dir()

    def destination_for(self, repository_url: str) -> Path:
        """
        저장소 복제 위치 계산

        URL 경로의 마지막 부분에서 ".git"을 제거한 이름을 사용합니다.

        Args:
            repository_url: 저장소 URL

        Returns:
            Path: 캐시 루트 아래 복제 대상 경로
        """
        parsed = urlparse(repository_url)
        # scp 형식(git@host:owner/repo.git)은 스킴이 없으므로 원문 사용
        path = parsed.path if parsed.scheme else repository_url
        segment = path.rstrip("/").replace(":", "/").rsplit("/", 1)[-1]

        if segment.endswith(".git"):
            segment = segment[:-len(".git")]

        if segment in ("", ".", ".."):
            segment = DEFAULT_REPOSITORY_NAME

        return self.cache_dir / segment

    def clean(self) -> bool:
        """
        캐시 디렉토리 전체 삭제

        캐시가 없으면 아무것도 하지 않고 성공으로 처리합니다.
        캐시 루트가 심볼릭 링크이면 링크만 제거하고 대상 디렉토리는 그대로 둡니다.

        Returns:
            bool: 실제로 삭제했으면 True, 이미 없었으면 False

        Raises:
            CacheCleanException: 삭제 중 파일시스템 오류 발생 시
        """
        if not self.cache_dir.exists() and not self.cache_dir.is_symlink():
            self.logger.info(f"정리할 캐시 디렉토리 없음: {self.cache_dir}")
            return False

        try:
            if self.cache_dir.is_symlink():
                self.cache_dir.unlink()
            else:
                shutil.rmtree(self.cache_dir)
        except OSError as e:
            self.logger.error(f"캐시 정리 오류: {e}")
            raise CacheCleanException(str(self.cache_dir), str(e)) from e

        self.logger.info(f"캐시 디렉토리 삭제 완료: {self.cache_dir}")
        return True
