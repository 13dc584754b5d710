# topmark:header:start
#
#   project      : Folio
#   file         : test_routing.py
#   file_relpath : tests/watcher/test_routing.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Change routing: extension rules first, then asset and data locations."""

from __future__ import annotations

from pathlib import Path

from folio.filetypes import TaskKind
from folio.watcher import route
from tests.conftest import make_config, parametrize


@parametrize(
    ("rel", "expected"),
    [
        ("src/index.html", TaskKind.MARKUP),
        ("src/pages/about.html", TaskKind.MARKUP),
        ("src/styles/main.scss", TaskKind.STYLESHEET),
        ("src/theme.css", TaskKind.STYLESHEET),
        ("src/app.ts", TaskKind.SCRIPT),
        ("src/vendor/lib.js", TaskKind.SCRIPT),
        ("assets/images/logo.png", TaskKind.ASSET),
        ("assets/app.js", TaskKind.SCRIPT),
        ("data/profile.json", TaskKind.DATA),
        ("data/nested/projects.json", TaskKind.DATA),
        ("static-assets/fonts/inter.woff2", TaskKind.ASSET),
        ("src/assets-v2/hero.jpg", TaskKind.ASSET),
        ("content/metadata/site.yml", TaskKind.DATA),
        ("src/assets/data/export.csv", TaskKind.ASSET),
        ("README.md", None),
        ("src/notes.txt", None),
    ],
)
def test_route_by_convention(rel: str, expected: TaskKind | None) -> None:
    assert route(Path("/site") / rel) == expected


def test_route_uses_configured_roots(tmp_path: Path) -> None:
    config = make_config(tmp_path, assets_root=Path("media"), data_root=Path("content"))

    assert route(tmp_path / "media" / "photo.jpg", config) is TaskKind.ASSET
    assert route(tmp_path / "content" / "cv.yaml", config) is TaskKind.DATA
    assert route(tmp_path / "elsewhere" / "photo.jpg", config) is None


def test_extension_case_is_significant() -> None:
    assert route(Path("/site/src/INDEX.HTML")) is None
