"""
bashx - 원격 저장소의 bash 스크립트 캐시 관리자

저장소를 로컬 캐시로 복제하고, 캐시 안의 스크립트를 찾아
사용자 확인 후 실행합니다.
"""

__version__ = "0.1.0"
