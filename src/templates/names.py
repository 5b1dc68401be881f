"""
템플릿 이름 처리: 정규화, 검증, 파싱.

규칙:
- 정규화: 역슬래시 → 슬래시, 연속 슬래시 → 하나
- NUL 바이트 금지
- 루트 위로 벗어나는 경로(../) 금지
- "@namespace/shortname" 형식, 아니면 기본 네임스페이스
"""

import re

from src.domain.constants import MAIN_NAMESPACE, NAMESPACE_PREFIX
from src.domain.errors import ErrorCodes, LoaderError
from src.domain.schemas import ParsedName

_REPEATED_SLASHES = re.compile(r"/{2,}")


def normalize_name(name: str) -> str:
    """
    템플릿 이름 정규화.

    Examples:
        >>> normalize_name("admin\\\\form.htm")
        'admin/form.htm'
        >>> normalize_name("layouts//base.htm")
        'layouts/base.htm'
    """
    return _REPEATED_SLASHES.sub("/", name.replace("\\", "/"))


def validate_name(name: str) -> None:
    """
    정규화된 이름의 안전성 검증.

    세그먼트를 왼쪽부터 훑으며 깊이를 센다:
    ".." → -1, "." → 그대로, 그 외 → +1. 한 번이라도 음수가 되면 거부.

    Args:
        name: 정규화된 템플릿 이름

    Raises:
        LoaderError: NUL_BYTE, PATH_ESCAPE
    """
    if "\0" in name:
        raise LoaderError(
            ErrorCodes.NUL_BYTE,
            "A template name cannot contain NUL bytes.",
        )

    stripped = name.lstrip("/")
    level = 0
    for part in stripped.split("/"):
        if part == "..":
            level -= 1
        elif part != ".":
            level += 1

        if level < 0:
            raise LoaderError(
                ErrorCodes.PATH_ESCAPE,
                "Looks like you try to load a template outside configured "
                f"directories ({stripped}).",
                name=name,
            )


def parse_name(name: str, default: str = MAIN_NAMESPACE) -> ParsedName:
    """
    이름을 (namespace, shortname)으로 분리.

    Args:
        name: 정규화된 템플릿 이름
        default: "@"로 시작하지 않을 때의 네임스페이스

    Returns:
        ParsedName

    Raises:
        LoaderError: MALFORMED_NAMESPACE
    """
    if name.startswith(NAMESPACE_PREFIX):
        pos = name.find("/")
        if pos == -1:
            raise LoaderError(
                ErrorCodes.MALFORMED_NAMESPACE,
                f'Malformed namespaced template name "{name}" '
                '(expecting "@namespace/template_name").',
                name=name,
            )
        return ParsedName(namespace=name[1:pos], shortname=name[pos + 1:])

    return ParsedName(namespace=default, shortname=name)
