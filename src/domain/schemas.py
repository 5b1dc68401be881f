"""
Data schemas for the template loader.

규칙:
- "찾지 못함"은 예외가 아니라 Resolution 값으로 표현
- strict/lenient 모드는 Resolution을 어떻게 신호하는지만 다름
"""

from dataclasses import dataclass
from typing import Any

from src.domain.errors import ErrorCodes, LoaderError

# =============================================================================
# Name
# =============================================================================

@dataclass(frozen=True)
class ParsedName:
    """(namespace, shortname) 쌍."""
    namespace: str
    shortname: str


# =============================================================================
# Resolution Result
# =============================================================================

@dataclass(frozen=True)
class Resolution:
    """
    이름 해석 결과.

    path가 있으면 성공, 없으면 error에 실패 사유.
    """
    name: str
    path: str | None = None
    error: LoaderError | None = None
    cached: bool = False

    @property
    def found(self) -> bool:
        return self.path is not None

    def unwrap(self) -> str:
        """strict 모드: 성공이면 경로, 실패면 캐시된 에러를 raise (에러 없으면 TEMPLATE_NOT_FOUND)."""
        if self.path is None:
            if self.error is None:
                raise LoaderError(
                    ErrorCodes.TEMPLATE_NOT_FOUND,
                    f'Unable to find template "{self.name}".',
                    name=self.name,
                )
            raise self.error
        return self.path

    def to_dict(self) -> dict[str, Any]:
        """JSON 직렬화용."""
        return {
            "name": self.name,
            "path": self.path,
            "error": self.error.to_dict() if self.error else None,
            "cached": self.cached,
        }


# =============================================================================
# Template Source
# =============================================================================

@dataclass(frozen=True)
class TemplateSource:
    """템플릿 원문 + 출처 정보 (엔진 전달용)."""
    code: str
    name: str
    path: str
