"""
설정 관리 패키지

bashx 전체의 설정과 캐시 루트 경로를 관리합니다.
"""

from .settings import Settings, get_settings, resolve_cache_root

__all__ = ["Settings", "get_settings", "resolve_cache_root"]
