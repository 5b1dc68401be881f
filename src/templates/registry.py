"""
네임스페이스별 템플릿 디렉터리 레지스트리.

규칙:
- 등록 순서 = 검색 우선순위 (먼저 찾은 것이 이김)
- 등록 시점에 디렉터리가 존재해야 함 (없으면 DIRECTORY_NOT_FOUND)
- 변경 전에 on_change 콜백 호출 (리졸버 캐시 무효화)
- 실패한 변경은 기존 목록을 건드리지 않음
"""

import logging
import os
import re
from collections.abc import Callable, Iterable
from urllib.parse import urlparse

from src.core.filesystem import Filesystem, LocalFilesystem
from src.domain.constants import MAIN_NAMESPACE
from src.domain.errors import ErrorCodes, LoaderError

logger = logging.getLogger(__name__)

_DRIVE_LETTER = re.compile(r"^[A-Za-z]:[/\\]")


def is_absolute_path(path: str) -> bool:
    """
    절대 경로 판정.

    - "/" 또는 "\\"로 시작
    - 드라이브 문자 ("C:/", "C:\\")
    - 스킴이 있는 URI ("file://...", "vfs://...")
    """
    if path[:1] in ("/", "\\"):
        return True
    if len(path) > 3 and _DRIVE_LETTER.match(path):
        return True
    return bool(urlparse(path).scheme)


def resolve_root_path(root_path: str | None, filesystem: Filesystem) -> str:
    """
    RootPath 결정: 명시값 또는 cwd, 가능하면 정규화. 항상 구분자로 끝남.
    """
    base = os.getcwd() if root_path is None else root_path
    real = filesystem.realpath(base)
    if real is not None:
        base = real
    return base.rstrip("/\\") + os.sep


class PathRegistry:
    """
    네임스페이스 → 디렉터리 목록.

    스레드 안전하지 않음: 리졸버의 락 안에서만 변경할 것.
    """

    def __init__(
        self,
        root_path: str | None = None,
        filesystem: Filesystem | None = None,
        on_change: Callable[[], None] | None = None,
    ):
        """
        Args:
            root_path: 상대 경로 기준 디렉터리 (None이면 cwd)
            filesystem: 디렉터리 존재 확인용
            on_change: 변경 직전 호출 (캐시 무효화)
        """
        self.filesystem = filesystem or LocalFilesystem()
        self.root_path = resolve_root_path(root_path, self.filesystem)
        self._on_change = on_change
        self._paths: dict[str, list[str]] = {}

    # =========================================================================
    # Read
    # =========================================================================

    def __contains__(self, namespace: str) -> bool:
        return namespace in self._paths

    def get_paths(self, namespace: str = MAIN_NAMESPACE) -> list[str]:
        """등록된 디렉터리 목록 (복사본)."""
        return list(self._paths.get(namespace, []))

    def get_namespaces(self) -> list[str]:
        """등록된 네임스페이스 목록."""
        return list(self._paths)

    def absolute(self, path: str) -> str:
        """등록 경로를 절대 경로로."""
        return path if is_absolute_path(path) else self.root_path + path

    # =========================================================================
    # Mutate
    # =========================================================================

    def set_paths(
        self,
        paths: str | Iterable[str],
        namespace: str = MAIN_NAMESPACE,
    ) -> None:
        """
        네임스페이스의 디렉터리 목록 전체 교체.

        Raises:
            LoaderError: DIRECTORY_NOT_FOUND (기존 목록 유지)
        """
        if isinstance(paths, str):
            paths = [paths]

        self._notify_change()
        checked = [self._check_directory(path) for path in paths]
        self._paths[namespace] = checked
        logger.info(f"Template paths set for namespace '{namespace}': {checked}")

    def add_path(self, path: str, namespace: str = MAIN_NAMESPACE) -> None:
        """
        디렉터리를 목록 끝에 추가 (가장 낮은 우선순위).

        Raises:
            LoaderError: DIRECTORY_NOT_FOUND
        """
        self._notify_change()
        checked = self._check_directory(path)
        self._paths.setdefault(namespace, []).append(checked)
        logger.info(f"Template path added to namespace '{namespace}': {checked}")

    def prepend_path(self, path: str, namespace: str = MAIN_NAMESPACE) -> None:
        """
        디렉터리를 목록 앞에 추가 (가장 높은 우선순위).

        Raises:
            LoaderError: DIRECTORY_NOT_FOUND
        """
        self._notify_change()
        checked = self._check_directory(path)
        self._paths.setdefault(namespace, []).insert(0, checked)
        logger.info(f"Template path prepended to namespace '{namespace}': {checked}")

    # =========================================================================
    # Internal Helpers
    # =========================================================================

    def _notify_change(self) -> None:
        if self._on_change is not None:
            self._on_change()

    def _check_directory(self, path: str) -> str:
        """존재 확인 후 끝 구분자를 제거한 경로 반환."""
        check_path = self.absolute(path)
        if not self.filesystem.is_dir(check_path):
            raise LoaderError(
                ErrorCodes.DIRECTORY_NOT_FOUND,
                f'The "{path}" directory does not exist ("{check_path}").',
                path=path,
                checked=check_path,
            )
        return path.rstrip("/\\")
