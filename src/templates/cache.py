"""
이름 → 경로 해석 결과 캐시.

- 키: 호출자가 넘긴 원본 이름 (정규화 전)
- positive: 해석된 경로 / negative: 실패 에러 (메시지 그대로)
- 무효화는 전체 단위만 (레지스트리 변경 시)
"""

import logging

from src.domain.errors import LoaderError

logger = logging.getLogger(__name__)


class ResolutionCache:
    """리졸버 인스턴스마다 하나. 전역 상태 없음."""

    def __init__(self) -> None:
        self._positive: dict[str, str] = {}
        self._negative: dict[str, LoaderError] = {}

    def __len__(self) -> int:
        return len(self._positive) + len(self._negative)

    def __contains__(self, key: str) -> bool:
        return key in self._positive or key in self._negative

    def get_positive(self, key: str) -> str | None:
        return self._positive.get(key)

    def get_negative(self, key: str) -> LoaderError | None:
        return self._negative.get(key)

    def put_positive(self, key: str, path: str) -> str:
        self._positive[key] = path
        return path

    def put_negative(self, key: str, error: LoaderError) -> LoaderError:
        self._negative[key] = error
        return error

    def invalidate_all(self) -> None:
        """positive/negative 모두 비움."""
        if self._positive or self._negative:
            logger.debug(
                f"Invalidating resolution cache "
                f"({len(self._positive)} positive, {len(self._negative)} negative)"
            )
        self._positive, self._negative = {}, {}
