"""
스크립트 저장소 통합 모듈

Git 저장소를 캐시 디렉토리로 복제하는 기능을 제공합니다.
"""

import asyncio
from pathlib import Path
from typing import Optional

import git

from ..exceptions import InvalidInputException, ScriptRepositoryException
from ..utils.logging import get_logger

logger = get_logger(__name__)


class GitRepository:
    """Git 저장소 복제기"""

    def __init__(self, depth: Optional[int] = None):
        """
        Git 저장소 초기화

        Args:
            depth: 얕은 복제 깊이 (None이면 전체 이력 복제)
        """
        self.depth = depth
        self.logger = logger

    async def clone(self, repository_url: str, destination: Path) -> Path:
        """
        저장소 복제

        실패한 복제가 남긴 디렉토리는 정리하지 않습니다.

        Args:
            repository_url: Git 저장소 URL
            destination: 복제 대상 경로

        Returns:
            Path: 복제된 저장소 경로

        Raises:
            InvalidInputException: URL이 비어 있을 때
            ScriptRepositoryException: git 실행 실패 또는 복제 실패 시
        """
        if not repository_url or not repository_url.strip():
            raise InvalidInputException("url", "URL은 비어 있을 수 없습니다")

        destination = Path(destination)

        options = {}
        if self.depth:
            options["depth"] = self.depth

        self.logger.info(f"저장소 복제 시작: {repository_url} -> {destination}")

        try:
            destination.parent.mkdir(parents=True, exist_ok=True)
            await asyncio.to_thread(
                git.Repo.clone_from,
                repository_url,
                str(destination),
                **options
            )
        except git.exc.CommandError as e:
            # GitCommandError(0이 아닌 종료)와 GitCommandNotFound(실행 불가) 모두 포함
            detail = (e.stderr or str(e)).strip()
            self.logger.error(f"저장소 복제 실패: {detail}")
            raise ScriptRepositoryException(repository_url, detail) from e
        except OSError as e:
            self.logger.error(f"저장소 복제 실패: {e}")
            raise ScriptRepositoryException(repository_url, str(e)) from e

        self.logger.info(f"저장소 복제 완료: {repository_url}")
        return destination
