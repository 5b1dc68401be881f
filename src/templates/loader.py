"""
템플릿 엔진용 로더 파사드.

역할:
- 이름 해석은 TemplateResolver에 위임
- 원문 읽기 / mtime 비교는 Filesystem 협력자에 위임
- 템플릿 내용은 해석하지 않음 (컴파일/렌더 X)
"""

import logging
from collections.abc import Iterable

from src.core.filesystem import Filesystem, LocalFilesystem
from src.domain.constants import DEFAULT_EXTENSION, DEFAULT_SOURCE_ENCODING, MAIN_NAMESPACE
from src.domain.errors import ErrorCodes, LoaderError
from src.domain.schemas import TemplateSource
from src.templates.finders import ViewFinder
from src.templates.resolver import TemplateResolver

logger = logging.getLogger(__name__)


class TemplateLoader:
    """
    파일시스템 템플릿 로더.

    Usage:
        loader = TemplateLoader(["templates"], root_path="/srv/app")
        loader.add_path("templates/admin", namespace="admin")
        source = loader.get_source_context("@admin/form.htm")
        if not loader.is_fresh("@admin/form.htm", compiled_at):
            ...
    """

    def __init__(
        self,
        paths: str | Iterable[str] | None = None,
        root_path: str | None = None,
        extension: str = DEFAULT_EXTENSION,
        finder: ViewFinder | None = None,
        filesystem: Filesystem | None = None,
        encoding: str = DEFAULT_SOURCE_ENCODING,
    ):
        self.filesystem = filesystem or LocalFilesystem()
        self.encoding = encoding
        self.resolver = TemplateResolver(
            paths=paths,
            root_path=root_path,
            extension=extension,
            finder=finder,
            filesystem=self.filesystem,
        )

    # =========================================================================
    # Registry passthrough
    # =========================================================================

    def set_paths(
        self,
        paths: str | Iterable[str],
        namespace: str = MAIN_NAMESPACE,
    ) -> None:
        self.resolver.set_paths(paths, namespace)

    def add_path(self, path: str, namespace: str = MAIN_NAMESPACE) -> None:
        self.resolver.add_path(path, namespace)

    def prepend_path(self, path: str, namespace: str = MAIN_NAMESPACE) -> None:
        self.resolver.prepend_path(path, namespace)

    def get_paths(self, namespace: str = MAIN_NAMESPACE) -> list[str]:
        return self.resolver.get_paths(namespace)

    def get_namespaces(self) -> list[str]:
        return self.resolver.get_namespaces()

    # =========================================================================
    # Engine API
    # =========================================================================

    def get_source_context(self, name: str) -> TemplateSource:
        """
        템플릿 원문 + 출처.

        Raises:
            LoaderError: 해석 실패, SOURCE_DECODE_FAILED
        """
        path = self.resolver.resolve(name)
        try:
            code = self.filesystem.read_bytes(path).decode(self.encoding)
        except UnicodeDecodeError as e:
            raise LoaderError(
                ErrorCodes.SOURCE_DECODE_FAILED,
                f'Template "{name}" is not valid {self.encoding} ({path}): {e.reason}.',
                name=name,
                path=path,
                encoding=self.encoding,
            ) from e
        return TemplateSource(code=code, name=name, path=path)

    def get_cache_key(self, name: str) -> str:
        """컴파일 캐시 키 = 해석된 경로."""
        return self.resolver.resolve(name)

    def get_filename(self, name: str) -> str:
        return self.resolver.resolve(name)

    def is_fresh(self, name: str, time: int | float) -> bool:
        """
        time 이후로 템플릿이 수정되지 않았는지.

        Args:
            name: 템플릿 이름
            time: 비교 기준 시각 (epoch seconds)

        Returns:
            mtime <= time 이면 True
        """
        path = self.resolver.resolve(name)
        return self.filesystem.last_modified(path) <= time

    def exists(self, name: str) -> bool:
        """strict resolve가 성공할 때만 True."""
        return self.resolver.exists(name)
