"""
설정 로드: default.yaml → TemplateLoader.

default.yaml 예:
    loader:
      root_path: null        # null → cwd
      extension: htm
      paths:
        __main__: [templates]
        admin: [templates/admin]
      views: [views]         # DirectoryViewFinder (선택)
"""

import logging
from pathlib import Path
from typing import Any

import yaml

from src.domain.constants import (
    CONFIG_LOADER_SECTION,
    DEFAULT_CONFIG_FILENAME,
    DEFAULT_EXTENSION,
)
from src.domain.errors import ErrorCodes, LoaderError
from src.templates.finders import DirectoryViewFinder, ViewFinder
from src.templates.loader import TemplateLoader

logger = logging.getLogger(__name__)


def load_config(config_path: Path | None = None) -> dict:
    """설정 파일 로드. 파일이 없으면 빈 dict."""
    if config_path is None:
        # 프로젝트 루트의 default.yaml
        config_path = Path(__file__).parent.parent.parent / DEFAULT_CONFIG_FILENAME

    if not config_path.exists():
        return {}

    with open(config_path, encoding="utf-8") as f:
        data: dict[Any, Any] | None = yaml.safe_load(f)
        return data or {}


def create_loader(
    config: dict[str, Any],
    finder: ViewFinder | None = None,
) -> TemplateLoader:
    """
    설정으로 TemplateLoader 생성.

    Args:
        config: load_config() 결과
        finder: fallback finder (없으면 loader.views 설정 사용)

    Returns:
        경로 등록이 끝난 TemplateLoader

    Raises:
        LoaderError: CONFIG_INVALID, DIRECTORY_NOT_FOUND
    """
    section = config.get(CONFIG_LOADER_SECTION) or {}
    if not isinstance(section, dict):
        raise LoaderError(
            ErrorCodes.CONFIG_INVALID,
            f"'{CONFIG_LOADER_SECTION}' section must be a mapping",
            section=CONFIG_LOADER_SECTION,
        )

    root_path = section.get("root_path")
    extension = section.get("extension", DEFAULT_EXTENSION)
    paths = section.get("paths") or {}
    views = section.get("views") or []

    if not isinstance(paths, dict):
        raise LoaderError(
            ErrorCodes.CONFIG_INVALID,
            "'paths' must map namespace to a directory list",
            section="paths",
        )

    loader = TemplateLoader(root_path=root_path, extension=extension, finder=finder)
    if finder is None and views:
        # 상대 경로 views는 정규화된 RootPath 기준
        base = Path(loader.resolver.root_path)
        loader.resolver.finder = DirectoryViewFinder(
            [str(base / v) for v in views],
            extensions=(extension,),
        )

    for namespace, directories in paths.items():
        if isinstance(directories, str):
            directories = [directories]
        if not isinstance(directories, list):
            raise LoaderError(
                ErrorCodes.CONFIG_INVALID,
                f"paths for namespace '{namespace}' must be a list",
                namespace=namespace,
            )
        loader.set_paths(directories, namespace=str(namespace))

    logger.info(f"Template loader configured with namespaces: {loader.get_namespaces()}")
    return loader
