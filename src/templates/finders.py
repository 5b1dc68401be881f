"""
Fallback view finder: 네임스페이스가 등록되지 않았을 때만 호출됨.

리졸버는 find(stem) 계약만 알고, 검색 규칙은 구현체 몫.
"""

import logging
import posixpath
from abc import ABC, abstractmethod
from collections.abc import Iterable
from pathlib import Path

from src.core.filesystem import Filesystem, LocalFilesystem
from src.domain.constants import DEFAULT_EXTENSION

logger = logging.getLogger(__name__)


class ViewFinder(ABC):
    """Fallback 검색 인터페이스."""

    @abstractmethod
    def find(self, stem: str) -> str | None:
        """
        stem에 해당하는 뷰 파일 경로.

        Args:
            stem: 확장자를 뗀 템플릿 이름 (예: "widgets/card")

        Returns:
            파일 경로, 없으면 None
        """


class NullViewFinder(ViewFinder):
    """항상 못 찾음 (fallback 미사용)."""

    def find(self, stem: str) -> str | None:
        return None


class DirectoryViewFinder(ViewFinder):
    """
    뷰 디렉터리 목록에서 "<dir>/<stem>.<ext>"를 순서대로 찾음.

    "/" 없는 stem의 "."은 경로 구분자로 취급 ("emails.welcome" → "emails/welcome").
    """

    def __init__(
        self,
        directories: Iterable[str | Path],
        extensions: Iterable[str] = (DEFAULT_EXTENSION,),
        filesystem: Filesystem | None = None,
    ):
        self.directories = [str(d).rstrip("/\\") for d in directories]
        self.extensions = [ext.lstrip(".") for ext in extensions]
        self.filesystem = filesystem or LocalFilesystem()

    def find(self, stem: str) -> str | None:
        relative = self.relative_path(stem)
        if relative == ".." or relative.startswith("../"):
            logger.warning(f"View '{stem}' escapes the view directories")
            return None
        for directory in self.directories:
            for ext in self.extensions:
                candidate = f"{directory}/{relative}.{ext}"
                if self.filesystem.is_file(candidate):
                    logger.debug(f"View '{stem}' found at {candidate}")
                    return candidate
        return None

    @staticmethod
    def relative_path(stem: str) -> str:
        """
        stem → 뷰 디렉터리 기준 상대 경로.

        "/"가 없을 때만 점 표기로 취급. 경로 형태면 "."/".." 세그먼트만 정리.

        Examples:
            "emails.welcome" → "emails/welcome"
            "a/../b"         → "b"
            "mail.v2/x"      → "mail.v2/x"
        """
        if "/" not in stem:
            return stem.rstrip(".").replace(".", "/")
        return posixpath.normpath(stem)
