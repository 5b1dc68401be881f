"""
test_loader.py - 템플릿 엔진용 로더 파사드 테스트

검증:
- 원문 + 출처 반환
- is_fresh: mtime <= time
- exists는 strict resolve 성공 여부와 일치
- 레지스트리 변경이 로더를 통해서도 캐시를 무효화
"""

import os
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from src.domain.errors import ErrorCodes, LoaderError
from src.domain.schemas import TemplateSource
from src.templates.finders import ViewFinder
from src.templates.loader import TemplateLoader


@pytest.fixture
def loader(template_root: Path, recording_fs) -> TemplateLoader:
    loader = TemplateLoader(
        ["templates"],
        root_path=str(template_root),
        filesystem=recording_fs,
    )
    loader.add_path("admin", namespace="admin")
    return loader


def real(path: Path) -> str:
    return str(path.resolve())


class TestSourceContext:
    """원문 읽기 테스트."""

    def test_returns_code_name_and_path(self, loader: TemplateLoader, template_root: Path):
        source = loader.get_source_context("layouts/base.htm")

        assert source == TemplateSource(
            code="<html>{{ body }}</html>",
            name="layouts/base.htm",
            path=real(template_root / "templates" / "layouts" / "base.htm"),
        )

    def test_name_kept_as_given(self, loader: TemplateLoader):
        """출처 이름은 정규화 전 원본."""
        source = loader.get_source_context("@admin//form.htm")

        assert source.name == "@admin//form.htm"
        assert source.code == "admin form"

    def test_reads_every_call(self, loader: TemplateLoader, recording_fs):
        """원문은 캐시하지 않음 (경로만 캐시)."""
        loader.get_source_context("pages/home.htm")
        loader.get_source_context("pages/home.htm")

        assert recording_fs.calls["read_bytes"] == 2

    def test_missing_template_raises(self, loader: TemplateLoader, recording_fs):
        with pytest.raises(LoaderError) as exc_info:
            loader.get_source_context("missing.htm")

        assert exc_info.value.code == ErrorCodes.TEMPLATE_NOT_FOUND
        assert recording_fs.calls["read_bytes"] == 0

    def test_custom_encoding(self, template_root: Path):
        (template_root / "templates" / "latin.htm").write_bytes("café".encode("latin-1"))
        loader = TemplateLoader("templates", root_path=str(template_root), encoding="latin-1")

        assert loader.get_source_context("latin.htm").code == "café"

    def test_undecodable_bytes_raise_loader_error(self, loader: TemplateLoader, template_root: Path):
        """인코딩 불일치는 UnicodeDecodeError가 아니라 코드 있는 LoaderError."""
        target = template_root / "templates" / "latin.htm"
        target.write_bytes(b"caf\xe9")

        with pytest.raises(LoaderError) as exc_info:
            loader.get_source_context("latin.htm")

        error = exc_info.value
        assert error.code == ErrorCodes.SOURCE_DECODE_FAILED
        assert error.context["name"] == "latin.htm"
        assert error.context["path"] == real(target)
        assert error.context["encoding"] == "utf-8"
        assert isinstance(error.__cause__, UnicodeDecodeError)


class TestCacheKeyAndFilename:
    def test_cache_key_is_resolved_path(self, loader: TemplateLoader, template_root: Path):
        expected = real(template_root / "admin" / "form.htm")

        assert loader.get_cache_key("@admin/form.htm") == expected
        assert loader.get_filename("@admin/form.htm") == expected

    def test_cache_key_missing_raises(self, loader: TemplateLoader):
        with pytest.raises(LoaderError):
            loader.get_cache_key("@admin/missing.htm")


class TestIsFresh:
    """mtime 비교 테스트."""

    def test_fresh_boundary(self, loader: TemplateLoader, template_root: Path):
        target = template_root / "templates" / "pages" / "home.htm"
        mtime = 1_700_000_000
        os.utime(target, (mtime, mtime))

        assert loader.is_fresh("pages/home.htm", mtime)
        assert loader.is_fresh("pages/home.htm", mtime + 1)
        assert not loader.is_fresh("pages/home.htm", mtime - 1)

    def test_sub_second_mtime(self, loader: TemplateLoader, template_root: Path):
        """같은 초 안의 수정도 stale로 판단."""
        target = template_root / "templates" / "pages" / "home.htm"
        os.utime(target, (1_700_000_000.9, 1_700_000_000.9))
        mtime = target.stat().st_mtime

        assert not loader.is_fresh("pages/home.htm", 1_700_000_000.5)
        assert not loader.is_fresh("pages/home.htm", 1_700_000_000)
        assert loader.is_fresh("pages/home.htm", mtime)
        assert loader.is_fresh("pages/home.htm", 1_700_000_001)

    def test_missing_template_raises(self, loader: TemplateLoader):
        with pytest.raises(LoaderError):
            loader.is_fresh("missing.htm", 0)


class TestExists:
    """exists == strict resolve 성공 여부."""

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("layouts/base.htm", True),
            ("@admin/form.htm", True),
            ("missing.htm", False),
            ("@nofnoslash", False),
            ("../../etc/passwd", False),
            ("nul\0.htm", False),
            ("@ghost/card.htm", False),
        ],
    )
    def test_exists(self, loader: TemplateLoader, name: str, expected: bool):
        assert loader.exists(name) is expected

        if expected:
            loader.get_filename(name)
        else:
            with pytest.raises(LoaderError):
                loader.get_filename(name)


class TestRegistryPassthrough:
    def test_paths_and_namespaces(self, loader: TemplateLoader):
        loader.prepend_path("docs_b", namespace="docs")
        loader.add_path("docs_a", namespace="docs")

        assert loader.get_paths() == ["templates"]
        assert loader.get_paths("docs") == ["docs_b", "docs_a"]
        assert loader.get_namespaces() == ["__main__", "admin", "docs"]

    def test_set_paths_invalidates(self, loader: TemplateLoader, template_root: Path):
        assert not loader.exists("x.htm")

        loader.set_paths(["docs_b"])

        assert loader.get_filename("x.htm") == real(template_root / "docs_b" / "x.htm")

    def test_finder_passed_to_resolver(self, template_root: Path):
        finder = MagicMock(spec=ViewFinder)
        finder.find.return_value = "/views/widgets/card.htm"
        loader = TemplateLoader(root_path=str(template_root), finder=finder)

        assert loader.get_filename("@widgets/card") == "/views/widgets/card.htm"
