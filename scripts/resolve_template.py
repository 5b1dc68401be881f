#!/usr/bin/env python3
"""
resolve_template.py - 템플릿 이름 해석 진단 스크립트

default.yaml의 loader 설정(또는 --path 옵션)으로 TemplateLoader를 만들고
주어진 이름들을 해석해 결과를 출력한다.

사용법:
    # default.yaml 기준
    uv run python scripts/resolve_template.py layouts/base.htm @admin/form.htm

    # 설정 없이 직접 등록
    uv run python scripts/resolve_template.py --root /srv/app \\
        --path templates --path admin=templates/admin @admin/form.htm

종료 코드: 모두 해석되면 0, 하나라도 실패하면 1
"""

import argparse
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from src.core.config import create_loader, load_config  # noqa: E402
from src.domain.constants import CONFIG_LOADER_SECTION, MAIN_NAMESPACE  # noqa: E402
from src.domain.errors import LoaderError  # noqa: E402
from src.templates.loader import TemplateLoader  # noqa: E402

# 로깅 설정
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)


def parse_path_option(value: str) -> tuple[str, str]:
    """
    "--path" 값 파싱.

    "admin=templates/admin" → ("admin", "templates/admin")
    "templates"             → ("__main__", "templates")
    """
    namespace, sep, directory = value.partition("=")
    if not sep:
        return MAIN_NAMESPACE, value
    return namespace, directory


def build_config(
    config_path: Path | None,
    root: str | None,
    path_options: list[str],
) -> dict:
    """설정 파일 + 명령행 옵션 병합 (명령행 우선)."""
    config = load_config(config_path)
    section = dict(config.get(CONFIG_LOADER_SECTION) or {})

    if root is not None:
        section["root_path"] = root

    if path_options:
        paths: dict[str, list[str]] = {}
        for value in path_options:
            namespace, directory = parse_path_option(value)
            paths.setdefault(namespace, []).append(directory)
        section["paths"] = paths

    return {**config, CONFIG_LOADER_SECTION: section}


def resolve_names(loader: TemplateLoader, names: list[str]) -> dict[str, str | None]:
    """이름별 해석 결과 (실패는 None, 사유는 로그)."""
    results: dict[str, str | None] = {}
    for name in names:
        try:
            results[name] = loader.get_filename(name)
        except LoaderError as e:
            logger.error(f"{name}: [{e.code}] {e.message}")
            results[name] = None
    return results


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="템플릿 이름 해석 진단 스크립트",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "names",
        nargs="+",
        help="해석할 템플릿 이름 (예: @admin/form.htm)",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="설정 파일 경로 (기본: 프로젝트 루트 default.yaml)",
    )
    parser.add_argument(
        "--root",
        type=str,
        default=None,
        help="상대 경로 기준 디렉터리 (기본: 설정값 또는 cwd)",
    )
    parser.add_argument(
        "--path",
        action="append",
        default=[],
        metavar="[NAMESPACE=]DIR",
        help="템플릿 디렉터리 등록 (반복 가능, 지정 시 설정의 paths 대체)",
    )

    args = parser.parse_args(argv)

    config_path = Path(args.config) if args.config else None
    if config_path is not None and not config_path.exists():
        logger.error(f"설정 파일 없음: {config_path}")
        return 1

    try:
        loader = create_loader(build_config(config_path, args.root, args.path))
    except LoaderError as e:
        logger.error(f"로더 설정 실패: [{e.code}] {e.message}")
        return 1

    results = resolve_names(loader, args.names)
    for name, path in results.items():
        if path is not None:
            print(f"{name} -> {path}")

    failed = [name for name, path in results.items() if path is None]
    if failed:
        logger.warning(f"해석 실패: {len(failed)}/{len(results)}개")
        return 1
    return 0


if __name__ == "__main__":
    exit(main())
