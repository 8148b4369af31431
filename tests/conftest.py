"""Shared test fixtures for pomforge."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from pomforge.config import ForgeConfig
from pomforge.core.registry import TaskRegistry
from pomforge.core.tasks import build_registry

INDEX_TEMPLATE = """<!DOCTYPE html>
<html>
\t<head>
\t\t<title>Index of ${document.path}</title>
\t</head>
\t<body>
\t\t<h1>${document.path}</h1>
\t\t<div class="entries">
\t\t\t\t${body.entries}
\t\t</div>
\t</body>
</html>
"""


@pytest.fixture
def repo_root(tmp_path: Path) -> Path:
    """A repository checkout with every layout marker and an index template."""
    root = tmp_path / "maven-site"
    docs = root / "docs"
    docs.mkdir(parents=True)
    (docs / "CNAME").write_text("maven.example.org", encoding="utf-8")
    (docs / "index-template.html").write_text(INDEX_TEMPLATE, encoding="utf-8")
    (root / ".gitattributes").write_text("* text=auto\n", encoding="utf-8")
    (root / ".gitignore").write_text("", encoding="utf-8")
    (root / "README.md").write_text("# maven-site\n", encoding="utf-8")
    return root


@pytest.fixture
def content_root(repo_root: Path) -> Path:
    return (repo_root / "docs").resolve()


@pytest.fixture
def config(repo_root: Path) -> ForgeConfig:
    return ForgeConfig(repo_root=repo_root)


@pytest.fixture
def registry() -> TaskRegistry:
    return build_registry()


@pytest.fixture
def make_artifact(content_root: Path) -> Callable[..., Path]:
    """Factory fixture: drop a jar into ``docs/<segments...>/``."""

    def _factory(
        *segments: str,
        jar_name: str | None = None,
        data: bytes = b"PK\x03\x04 fake jar bytes",
    ) -> Path:
        directory = content_root.joinpath(*segments)
        directory.mkdir(parents=True, exist_ok=True)
        name = jar_name or f"{segments[-2]}-{segments[-1]}.jar"
        jar = directory / name
        jar.write_bytes(data)
        return jar

    return _factory


@pytest.fixture
def snapshot_tree() -> Callable[[Path], dict[Path, tuple[int, bytes]]]:
    """Map every file below a root to its (mtime_ns, content)."""

    def _snapshot(root: Path) -> dict[Path, tuple[int, bytes]]:
        return {
            path: (path.stat().st_mtime_ns, path.read_bytes())
            for path in sorted(root.rglob("*"))
            if path.is_file()
        }

    return _snapshot
