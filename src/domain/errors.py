"""
Error definitions for the template loader.

규칙:
- 조용한 실패 금지 → LoaderError로 명시적 실패
- 실패 메시지는 그대로 캐시됨 (재조회 시 동일 메시지)
- lenient 모드(find/exists)만 실패를 값으로 바꿈
"""

from typing import Any


class LoaderError(Exception):
    """
    템플릿 이름 해석/경로 등록 실패 시 발생하는 에러.

    Usage:
        raise LoaderError(ErrorCodes.PATH_ESCAPE, "...", name=name)
    """

    def __init__(self, code: str, message: str, **context: Any) -> None:
        self.code = code
        self.message = message
        self.context = context
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """로그/JSON 직렬화용."""
        return {
            "code": self.code,
            "message": self.message,
            **self.context,
        }


# =============================================================================
# Error Codes
# =============================================================================

class ErrorCodes:
    """에러 코드 상수."""

    # === Name Validation ===
    NUL_BYTE = "NUL_BYTE"
    PATH_ESCAPE = "PATH_ESCAPE"
    MALFORMED_NAMESPACE = "MALFORMED_NAMESPACE"

    # === Registry ===
    DIRECTORY_NOT_FOUND = "DIRECTORY_NOT_FOUND"

    # === Resolution ===
    NAMESPACE_UNREGISTERED = "NAMESPACE_UNREGISTERED"
    TEMPLATE_NOT_FOUND = "TEMPLATE_NOT_FOUND"

    # === Source ===
    SOURCE_DECODE_FAILED = "SOURCE_DECODE_FAILED"

    # === Config ===
    CONFIG_INVALID = "CONFIG_INVALID"
