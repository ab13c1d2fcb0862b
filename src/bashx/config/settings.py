"""
설정 관리 모듈

환경 변수(BASHX_ 접두사)를 통한 bashx 설정과 캐시 루트 경로 계산을 담당합니다.
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..exceptions import ConfigurationException


class Settings(BaseSettings):
    """bashx 설정 관리 클래스"""

    model_config = SettingsConfigDict(
        env_prefix="BASHX_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # 캐시 설정
    cache_dir: Optional[str] = Field(
        default=None,
        description="캐시 루트 디렉토리 (지정하지 않으면 홈 디렉토리 기준)"
    )
    cache_subpath: str = Field(
        default=".bashx/cache",
        description="홈 디렉토리 아래 캐시 경로"
    )

    # 스크립트 설정
    script_suffix: str = Field(
        default=".sh",
        description="스크립트로 인식할 파일 확장자 (대소문자 구분)"
    )
    interpreter: str = Field(
        default="bash",
        description="스크립트 실행 인터프리터"
    )

    # Git 설정
    clone_depth: Optional[int] = Field(
        default=None,
        description="얕은 복제 깊이 (None이면 전체 복제)"
    )

    # 로깅 설정
    log_level: str = Field(
        default="WARNING",
        description="로그 레벨"
    )
    log_format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="로그 포맷"
    )
    log_file: Optional[str] = Field(
        default=None,
        description="로그 파일 경로"
    )

    def validate_configuration(self) -> None:
        """설정 유효성 검증"""
        # 단일 확장자만 허용 (예: ".sh")
        suffix = self.script_suffix
        if not suffix.startswith(".") or suffix.count(".") != 1 or len(suffix) < 2 or "/" in suffix:
            raise ConfigurationException(
                "BASHX_SCRIPT_SUFFIX", f"'.'으로 시작하는 단일 확장자여야 합니다: {suffix!r}"
            )

        if not self.interpreter.strip():
            raise ConfigurationException("BASHX_INTERPRETER", "인터프리터가 비어 있습니다")

        if self.clone_depth is not None and self.clone_depth < 1:
            raise ConfigurationException(
                "BASHX_CLONE_DEPTH", f"1 이상이어야 합니다: {self.clone_depth}"
            )


def resolve_cache_root(settings: Settings) -> Path:
    """
    캐시 루트 경로 계산

    홈 디렉토리를 알 수 없으면 빈 기준 경로를 사용하므로
    상대 경로가 반환될 수 있습니다.

    Args:
        settings: 시스템 설정

    Returns:
        Path: 캐시 루트 경로
    """
    if settings.cache_dir:
        return Path(settings.cache_dir).expanduser()

    try:
        home = Path.home()
    except (RuntimeError, KeyError):
        home = Path()

    return home / settings.cache_subpath


@lru_cache()
def get_settings() -> Settings:
    """
    설정 인스턴스를 반환합니다 (싱글톤 패턴)

    Returns:
        Settings: 설정 인스턴스

    Raises:
        ConfigurationException: 환경 변수 값 형식이 잘못되었거나 검증에 실패했을 때
    """
    try:
        settings = Settings()
    except ValidationError as e:
        error = e.errors()[0]
        loc = error.get("loc") or ("settings",)
        raise ConfigurationException(
            f"BASHX_{str(loc[0]).upper()}", error.get("msg", str(e))
        ) from e

    settings.validate_configuration()
    return settings
