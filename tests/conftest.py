"""
Pytest fixtures for the template loader tests.

구성:
- 템플릿 디렉터리 트리 (tmp_path 기반)
- 호출 횟수를 기록하는 Filesystem (캐시 검증용)
"""

from collections import Counter
from pathlib import Path

import pytest

from src.core.filesystem import LocalFilesystem

# =============================================================================
# Filesystem Fixtures
# =============================================================================


class RecordingFilesystem(LocalFilesystem):
    """LocalFilesystem + 메서드별 호출 횟수 기록."""

    def __init__(self) -> None:
        self.calls: Counter[str] = Counter()

    def is_file(self, path: str) -> bool:
        self.calls["is_file"] += 1
        return super().is_file(path)

    def is_dir(self, path: str) -> bool:
        self.calls["is_dir"] += 1
        return super().is_dir(path)

    def realpath(self, path: str) -> str | None:
        self.calls["realpath"] += 1
        return super().realpath(path)

    def read_bytes(self, path: str) -> bytes:
        self.calls["read_bytes"] += 1
        return super().read_bytes(path)

    def last_modified(self, path: str) -> float:
        self.calls["last_modified"] += 1
        return super().last_modified(path)

    @property
    def total(self) -> int:
        return sum(self.calls.values())


@pytest.fixture
def recording_fs() -> RecordingFilesystem:
    """호출 횟수 기록 파일시스템."""
    return RecordingFilesystem()


# =============================================================================
# Template Tree Fixtures
# =============================================================================


def write_template(path: Path, content: str = "") -> Path:
    """템플릿 파일 생성 (상위 디렉터리 포함)."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def template_root(tmp_path: Path) -> Path:
    """
    테스트용 템플릿 루트.

    구조:
    root/
    ├── templates/
    │   ├── layouts/base.htm
    │   └── pages/home.htm
    ├── admin/
    │   └── form.htm
    ├── docs_a/x.htm
    ├── docs_b/
    │   ├── x.htm
    │   └── only_b.htm
    └── empty/
    """
    root = tmp_path / "root"
    write_template(root / "templates" / "layouts" / "base.htm", "<html>{{ body }}</html>")
    write_template(root / "templates" / "pages" / "home.htm", "home")
    write_template(root / "admin" / "form.htm", "admin form")
    write_template(root / "docs_a" / "x.htm", "from a")
    write_template(root / "docs_b" / "x.htm", "from b")
    write_template(root / "docs_b" / "only_b.htm", "only b")
    (root / "empty").mkdir()
    return root
