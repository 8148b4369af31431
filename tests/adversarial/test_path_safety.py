"""Adversarial tests — coordinate resolution must not escape the content root."""

from __future__ import annotations

from pathlib import Path

import pytest

from pomforge.core.coordinates import CoordinateError, CoordinateResolver


class TestRootContainment:
    def test_sibling_with_shared_prefix_rejected(self, tmp_path: Path):
        root = tmp_path / "docs"
        sibling = tmp_path / "docs2" / "com" / "example" / "1.0"
        root.mkdir()
        sibling.mkdir(parents=True)
        (sibling / "example-1.0.jar").write_bytes(b"x")

        with pytest.raises(CoordinateError, match="not within"):
            CoordinateResolver(root).resolve(sibling)

    def test_dot_dot_traversal_rejected(self, tmp_path: Path):
        root = tmp_path / "docs"
        outside = tmp_path / "outside" / "g" / "a" / "1"
        root.mkdir()
        outside.mkdir(parents=True)
        (outside / "a-1.jar").write_bytes(b"x")

        with pytest.raises(CoordinateError, match="not within"):
            CoordinateResolver(root).resolve(root / ".." / "outside" / "g" / "a" / "1")

    def test_root_itself_is_too_shallow(self, tmp_path: Path):
        (tmp_path / "top.jar").write_bytes(b"x")
        with pytest.raises(CoordinateError, match="groupId/artifactId/version"):
            CoordinateResolver(tmp_path).resolve(tmp_path)

    def test_markup_in_names_propagates_verbatim(self, tmp_path: Path):
        directory = tmp_path / "g<x>" / "a&b" / "1"
        directory.mkdir(parents=True)
        (directory / "a-1.jar").write_bytes(b"x")
        coord = CoordinateResolver(tmp_path).resolve(directory)
        assert coord.group_id == "g<x>"
        assert coord.artifact_id == "a&b"
