"""
Domain Constants: 템플릿 로더 전역 상수.

네임스페이스, 확장자, 설정 파일명 등 시스템 전반에서 사용되는 값들.
"""

# =============================================================================
# Namespaces
# =============================================================================
# "@admin/form" → namespace "admin", shortname "form"
# "layouts/base.htm" → namespace MAIN_NAMESPACE

MAIN_NAMESPACE = "__main__"
NAMESPACE_PREFIX = "@"

# =============================================================================
# Template Files
# =============================================================================

DEFAULT_EXTENSION = "htm"
DEFAULT_SOURCE_ENCODING = "utf-8"

# =============================================================================
# Config
# =============================================================================
# default.yaml 참조:
# loader:
#   root_path: null
#   extension: htm
#   paths: {namespace: [dir, ...]}
#   views: [dir, ...]

DEFAULT_CONFIG_FILENAME = "default.yaml"
CONFIG_LOADER_SECTION = "loader"
