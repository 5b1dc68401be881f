"""
템플릿 이름 → 검증된 파일 경로 해석기.

해석 순서:
1. 캐시 (positive → 경로, negative → 캐시된 에러)
2. 이름 검증 (NUL, ../ 탈출)
3. 네임스페이스 파싱
4. 미등록 네임스페이스 → 이름 자체가 파일인지 확인 → fallback finder
5. 등록된 네임스페이스 → 디렉터리 순서대로 검색, 첫 매치 반환

규칙:
- 모든 실패는 negative 캐시에 기록 (검증/파싱 실패 포함)
- strict(resolve) / lenient(find)는 lookup() 하나를 감싼 어댑터일 뿐
- 레지스트리 변경 시 캐시 전체 무효화 (변경보다 먼저)
- 조회/변경 모두 하나의 RLock으로 직렬화
"""

import logging
import threading
from collections.abc import Iterable

from src.core.filesystem import Filesystem, LocalFilesystem
from src.domain.constants import DEFAULT_EXTENSION, MAIN_NAMESPACE, NAMESPACE_PREFIX
from src.domain.errors import ErrorCodes, LoaderError
from src.domain.schemas import Resolution
from src.templates.cache import ResolutionCache
from src.templates.finders import NullViewFinder, ViewFinder
from src.templates.names import normalize_name, parse_name, validate_name
from src.templates.registry import PathRegistry

logger = logging.getLogger(__name__)


class TemplateResolver:
    """
    네임스페이스 기반 템플릿 경로 해석기.

    Usage:
        resolver = TemplateResolver(root_path="/srv/app")
        resolver.add_path("templates/admin", namespace="admin")
        resolver.resolve("@admin/form.htm")  # → "/srv/app/templates/admin/form.htm"
        resolver.find("@admin/missing.htm")  # → None
    """

    def __init__(
        self,
        paths: str | Iterable[str] | None = None,
        root_path: str | None = None,
        extension: str = DEFAULT_EXTENSION,
        finder: ViewFinder | None = None,
        filesystem: Filesystem | None = None,
    ):
        """
        Args:
            paths: 기본 네임스페이스에 등록할 디렉터리 (하나 또는 목록)
            root_path: 상대 경로 기준 (None이면 cwd)
            extension: fallback 검색 시 떼어낼 확장자
            finder: 미등록 네임스페이스용 fallback
            filesystem: 파일 존재 확인/정규화
        """
        self.extension = extension
        self.finder = finder or NullViewFinder()
        self.filesystem = filesystem or LocalFilesystem()
        self.cache = ResolutionCache()
        self.registry = PathRegistry(
            root_path=root_path,
            filesystem=self.filesystem,
            on_change=self.cache.invalidate_all,
        )
        self._lock = threading.RLock()

        if paths:
            self.set_paths(paths)

    @property
    def root_path(self) -> str:
        return self.registry.root_path

    # =========================================================================
    # Registry
    # =========================================================================

    def set_paths(
        self,
        paths: str | Iterable[str],
        namespace: str = MAIN_NAMESPACE,
    ) -> None:
        """네임스페이스 디렉터리 목록 교체 (캐시 무효화)."""
        with self._lock:
            self.registry.set_paths(paths, namespace)

    def add_path(self, path: str, namespace: str = MAIN_NAMESPACE) -> None:
        """디렉터리 추가 (캐시 무효화)."""
        with self._lock:
            self.registry.add_path(path, namespace)

    def prepend_path(self, path: str, namespace: str = MAIN_NAMESPACE) -> None:
        """최우선 디렉터리 추가 (캐시 무효화)."""
        with self._lock:
            self.registry.prepend_path(path, namespace)

    def get_paths(self, namespace: str = MAIN_NAMESPACE) -> list[str]:
        with self._lock:
            return self.registry.get_paths(namespace)

    def get_namespaces(self) -> list[str]:
        with self._lock:
            return self.registry.get_namespaces()

    # =========================================================================
    # Resolve
    # =========================================================================

    def resolve(self, name: str) -> str:
        """
        strict 모드: 경로 반환, 실패 시 raise.

        Raises:
            LoaderError: NUL_BYTE, PATH_ESCAPE, MALFORMED_NAMESPACE,
                NAMESPACE_UNREGISTERED, TEMPLATE_NOT_FOUND
        """
        return self.lookup(name).unwrap()

    def find(self, name: str) -> str | None:
        """lenient 모드: 경로 또는 None."""
        return self.lookup(name).path

    def exists(self, name: str) -> bool:
        return self.lookup(name).found

    def lookup(self, name: str) -> Resolution:
        """
        이름 해석 (결과 타입 반환, raise 안 함).

        Args:
            name: 호출자가 넘긴 원본 이름 (캐시 키)

        Returns:
            Resolution
        """
        with self._lock:
            path = self.cache.get_positive(name)
            if path is not None:
                logger.debug(f"Resolution cache hit: {name} -> {path}")
                return Resolution(name=name, path=path, cached=True)

            error = self.cache.get_negative(name)
            if error is not None:
                logger.debug(f"Resolution error cache hit: {name}")
                return Resolution(
                    name=name,
                    error=LoaderError(error.code, error.message, **error.context),
                    cached=True,
                )

            try:
                path = self._search(name)
            except LoaderError as e:
                self.cache.put_negative(name, e)
                return Resolution(name=name, error=e)

            self.cache.put_positive(name, path)
            return Resolution(name=name, path=path)

    # =========================================================================
    # Internal Helpers
    # =========================================================================

    def _search(self, raw_name: str) -> str:
        """캐시를 거치지 않는 전체 검색. 실패는 LoaderError."""
        name = normalize_name(raw_name)
        validate_name(name)
        parsed = parse_name(name)

        if parsed.namespace not in self.registry:
            return self._fallback(name, parsed.namespace)

        directories = self.registry.get_paths(parsed.namespace)
        for directory in directories:
            candidate = f"{self.registry.absolute(directory)}/{parsed.shortname}"
            if self.filesystem.is_file(candidate):
                real = self.filesystem.realpath(candidate)
                if real is None:
                    logger.warning(f"Could not canonicalize {candidate}, using as-is")
                    return candidate
                return real

        raise LoaderError(
            ErrorCodes.TEMPLATE_NOT_FOUND,
            f'Unable to find template "{name}" '
            f"(looked into: {', '.join(directories)}).",
            name=name,
            namespace=parsed.namespace,
        )

    def _fallback(self, name: str, namespace: str) -> str:
        """미등록 네임스페이스: 이름 자체가 파일이면 그대로, 아니면 finder."""
        if self.filesystem.is_file(name):
            return name

        stem = self.view_stem(name)
        path = self.finder.find(stem)
        if path:
            logger.debug(f"Fallback finder resolved {name} -> {path}")
            return path

        logger.warning(f"No registered paths for namespace '{namespace}' ({name})")
        raise LoaderError(
            ErrorCodes.NAMESPACE_UNREGISTERED,
            f'There are no registered paths for namespace "{namespace}".',
            name=name,
            namespace=namespace,
        )

    def view_stem(self, name: str) -> str:
        """
        fallback finder에 넘길 stem.

        Examples:
            "@widgets/card"     → "widgets/card"
            "emails/welcome.htm" → "emails/welcome"
        """
        stem = name[1:] if name.startswith(NAMESPACE_PREFIX) else name
        suffix = f".{self.extension}"
        if self.extension and stem.endswith(suffix):
            stem = stem[: -len(suffix)]
        return stem
