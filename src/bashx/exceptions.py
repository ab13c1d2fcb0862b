"""
예외 클래스 정의 모듈

bashx 스크립트 캐시 관리자에서 사용되는 커스텀 예외들을 정의합니다.
"""

from typing import Optional


class BashxException(Exception):
    """bashx 기본 예외 클래스"""

    def __init__(self, message: str, error_code: Optional[str] = None):
        """
        예외 초기화

        Args:
            message: 오류 메시지
            error_code: 오류 코드 (선택사항)
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code


class InvalidInputException(BashxException):
    """사용자 입력이 잘못되었을 때 발생하는 예외"""

    def __init__(self, field_name: str, error_detail: str):
        """
        입력 검증 예외 초기화

        Args:
            field_name: 입력 항목 이름
            error_detail: 오류 상세 정보
        """
        message = f"잘못된 입력: {field_name} - {error_detail}"
        super().__init__(message, "INVALID_INPUT")
        self.field_name = field_name
        self.error_detail = error_detail


class ScriptNotFoundException(BashxException):
    """캐시에서 스크립트를 찾을 수 없을 때 발생하는 예외"""

    def __init__(self, script_name: str):
        """
        스크립트 찾기 실패 예외 초기화

        Args:
            script_name: 스크립트 이름
        """
        message = f"캐시에서 스크립트를 찾을 수 없습니다: '{script_name}'"
        super().__init__(message, "SCRIPT_NOT_FOUND")
        self.script_name = script_name


class ScriptRepositoryException(BashxException):
    """스크립트 저장소 복제 관련 예외"""

    def __init__(self, repository_url: str, error_detail: str):
        """
        스크립트 저장소 예외 초기화

        Args:
            repository_url: 저장소 URL
            error_detail: 오류 상세 정보 (git 출력 포함)
        """
        message = f"저장소 복제 오류 ({repository_url}): {error_detail}"
        super().__init__(message, "SCRIPT_REPOSITORY_ERROR")
        self.repository_url = repository_url
        self.error_detail = error_detail


class PermissionSetException(BashxException):
    """스크립트 실행 권한 설정 실패 시 발생하는 예외"""

    def __init__(self, script_path: str, error_detail: str):
        """
        권한 설정 예외 초기화

        Args:
            script_path: 스크립트 경로
            error_detail: 오류 상세 정보
        """
        message = f"실행 권한 설정 실패: {script_path} - {error_detail}"
        super().__init__(message, "PERMISSION_ERROR")
        self.script_path = script_path
        self.error_detail = error_detail


class ProcessExecutionException(BashxException):
    """외부 프로세스를 시작할 수 없을 때 발생하는 예외"""

    def __init__(self, message: str, command: Optional[str] = None):
        """
        프로세스 실행 예외 초기화

        Args:
            message: 오류 메시지
            command: 실행하려던 명령
        """
        super().__init__(message, "PROCESS_EXECUTION_ERROR")
        self.command = command


class ScriptExecutionException(BashxException):
    """스크립트가 0이 아닌 종료 코드로 끝났을 때 발생하는 예외"""

    def __init__(self, script_path: str, return_code: Optional[int]):
        """
        스크립트 실행 예외 초기화

        Args:
            script_path: 스크립트 경로
            return_code: 프로세스 종료 코드 (알 수 없으면 None)
        """
        message = f"스크립트 실행 실패: {script_path} (종료코드: {return_code})"
        super().__init__(message, "SCRIPT_EXECUTION_ERROR")
        self.script_path = script_path
        self.return_code = return_code


class CacheCleanException(BashxException):
    """캐시 디렉토리 삭제 실패 시 발생하는 예외"""

    def __init__(self, cache_dir: str, error_detail: str):
        """
        캐시 정리 예외 초기화

        Args:
            cache_dir: 캐시 디렉토리 경로
            error_detail: 운영체제 오류 메시지
        """
        message = f"캐시 정리 실패: {cache_dir} - {error_detail}"
        super().__init__(message, "CACHE_CLEAN_ERROR")
        self.cache_dir = cache_dir
        self.error_detail = error_detail


class ConfigurationException(BashxException):
    """설정 오류 시 발생하는 예외"""

    def __init__(self, config_key: str, error_detail: str):
        """
        설정 예외 초기화

        Args:
            config_key: 설정 키
            error_detail: 오류 상세 정보
        """
        message = f"설정 오류: {config_key} - {error_detail}"
        super().__init__(message, "CONFIGURATION_ERROR")
        self.config_key = config_key
        self.error_detail = error_detail
