"""
Filesystem 협력자: 존재 확인, 바이트 읽기, mtime, 정규화.

리졸버는 파일시스템을 직접 건드리지 않고 이 인터페이스만 호출함.
→ 테스트에서 접근 횟수 측정 / 가짜 파일시스템 주입 가능
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path

logger = logging.getLogger(__name__)


class Filesystem(ABC):
    """리졸버/로더가 사용하는 파일시스템 인터페이스."""

    @abstractmethod
    def is_file(self, path: str) -> bool:
        """일반 파일 존재 여부."""

    @abstractmethod
    def is_dir(self, path: str) -> bool:
        """디렉터리 존재 여부."""

    @abstractmethod
    def realpath(self, path: str) -> str | None:
        """
        정규화된 절대 경로.

        Returns:
            정규화 경로, 실패 시 None
        """

    @abstractmethod
    def read_bytes(self, path: str) -> bytes:
        """파일 내용."""

    @abstractmethod
    def last_modified(self, path: str) -> float:
        """수정 시각 (epoch seconds, 소수점 이하 유지)."""


class LocalFilesystem(Filesystem):
    """로컬 디스크 구현 (pathlib)."""

    def is_file(self, path: str) -> bool:
        return Path(path).is_file()

    def is_dir(self, path: str) -> bool:
        return Path(path).is_dir()

    def realpath(self, path: str) -> str | None:
        try:
            return str(Path(path).resolve(strict=True))
        except (OSError, RuntimeError) as e:
            logger.debug(f"realpath failed for {path}: {e}")
            return None

    def read_bytes(self, path: str) -> bytes:
        return Path(path).read_bytes()

    def last_modified(self, path: str) -> float:
        return Path(path).stat().st_mtime
