"""
test_finders.py - fallback view finder 테스트
"""

from pathlib import Path

import pytest

from src.templates.finders import DirectoryViewFinder, NullViewFinder


@pytest.fixture
def views_dirs(tmp_path: Path) -> tuple[Path, Path]:
    """
    views_main/
    ├── widgets/card.htm
    └── emails/welcome.htm
    views_theme/
    └── widgets/card.htm
    """
    main = tmp_path / "views_main"
    theme = tmp_path / "views_theme"
    for path in (
        main / "widgets" / "card.htm",
        main / "emails" / "welcome.htm",
        theme / "widgets" / "card.htm",
    ):
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("view", encoding="utf-8")
    return main, theme


class TestNullViewFinder:
    def test_never_finds(self):
        assert NullViewFinder().find("widgets/card") is None


class TestDirectoryViewFinder:
    """디렉터리 기반 finder 테스트."""

    def test_finds_stem_with_extension(self, views_dirs):
        main, _ = views_dirs
        finder = DirectoryViewFinder([main])

        assert finder.find("widgets/card") == f"{main}/widgets/card.htm"

    def test_directory_order(self, views_dirs):
        main, theme = views_dirs
        finder = DirectoryViewFinder([theme, main])

        assert finder.find("widgets/card") == f"{theme}/widgets/card.htm"
        assert finder.find("emails/welcome") == f"{main}/emails/welcome.htm"

    def test_dot_notation(self, views_dirs):
        main, _ = views_dirs
        finder = DirectoryViewFinder([main])

        assert finder.find("emails.welcome") == f"{main}/emails/welcome.htm"

    def test_extension_candidates(self, views_dirs):
        main, _ = views_dirs
        (main / "plain.txt").write_text("txt", encoding="utf-8")
        finder = DirectoryViewFinder([main], extensions=(".htm", "txt"))

        assert finder.find("plain") == f"{main}/plain.txt"

    def test_missing(self, views_dirs):
        finder = DirectoryViewFinder(list(views_dirs))

        assert finder.find("widgets/missing") is None

    def test_parent_segment_normalized(self, views_dirs):
        """경로 형태 stem의 ".."은 세그먼트 단위로 정리."""
        main, _ = views_dirs
        (main / "b.htm").write_text("b", encoding="utf-8")
        finder = DirectoryViewFinder([main])

        assert finder.find("a/../b") == f"{main}/b.htm"
        assert finder.find("widgets/./card") == f"{main}/widgets/card.htm"

    def test_dotted_directory_kept(self, views_dirs):
        """"/"가 있으면 디렉터리 이름의 "."은 그대로."""
        main, _ = views_dirs
        target = main / "mail.v2" / "x.htm"
        target.parent.mkdir()
        target.write_text("x", encoding="utf-8")
        finder = DirectoryViewFinder([main])

        assert finder.find("mail.v2/x") == f"{main}/mail.v2/x.htm"

    def test_escaping_stem_not_searched(self, views_dirs, tmp_path: Path):
        main, _ = views_dirs
        (tmp_path / "secret.htm").write_text("secret", encoding="utf-8")
        finder = DirectoryViewFinder([main])

        assert finder.find("a/../../secret") is None

    @pytest.mark.parametrize(
        "stem, expected",
        [
            ("emails.welcome", "emails/welcome"),
            ("card", "card"),
            ("card.", "card"),
            ("a/../b", "b"),
            ("./a//b", "a/b"),
            ("mail.v2/x", "mail.v2/x"),
            ("a/../../b", "../b"),
        ],
    )
    def test_relative_path(self, stem: str, expected: str):
        assert DirectoryViewFinder.relative_path(stem) == expected
