"""
Templates layer: 템플릿 이름 → 파일 경로 해석.

역할:
- 이름 정규화/검증/파싱 (names.py)
- 네임스페이스별 디렉터리 등록 (registry.py)
- 해석 결과 캐시 (cache.py)
- 해석 알고리즘 (resolver.py)
- 엔진용 파사드 (loader.py)
- 미등록 네임스페이스 fallback (finders.py)

주의: 템플릿 내용은 해석하지 않음 (컴파일/렌더 범위 밖)
"""

from .cache import ResolutionCache
from .finders import DirectoryViewFinder, NullViewFinder, ViewFinder
from .loader import TemplateLoader
from .names import normalize_name, parse_name, validate_name
from .registry import PathRegistry, is_absolute_path
from .resolver import TemplateResolver

__all__ = [
    # names
    "normalize_name",
    "validate_name",
    "parse_name",
    # registry
    "PathRegistry",
    "is_absolute_path",
    # cache
    "ResolutionCache",
    # resolver
    "TemplateResolver",
    # loader
    "TemplateLoader",
    # finders
    "ViewFinder",
    "NullViewFinder",
    "DirectoryViewFinder",
]
