"""
스크립트 관리 모듈

외부 저장소를 캐시로 복제하고 캐시 안의 스크립트를 찾는 기능을 제공합니다.
"""

from .cache_manager import CacheManager
from .indexer import ScriptIndexer
from .repository import GitRepository
from .resolver import ScriptResolver

__all__ = [
    "CacheManager",
    "GitRepository",
    "ScriptIndexer",
    "ScriptResolver",
]
