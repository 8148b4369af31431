"""Artifact-directory discovery and coordinate derivation.

An artifact-version directory is any directory that directly contains a
package archive. Its coordinate comes from its position below the content
root: ``<group...>/<artifact>/<version>``.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pomforge.models.coordinates import ArtifactCoordinate

logger = logging.getLogger(__name__)


class CoordinateError(ValueError):
    """Raised when a directory cannot be mapped to an artifact coordinate."""


class CoordinateResolver:
    """Finds artifact-version directories and derives their coordinates.

    Parameters
    ----------
    root:
        The content root of the repository (the published tree).
    package_extension:
        Suffix identifying package archives. Matched case-sensitively.
    """

    def __init__(self, root: Path, package_extension: str = ".jar") -> None:
        self.root = Path(root).resolve()
        self.package_extension = package_extension

    def _is_package(self, path: Path) -> bool:
        return path.is_file() and path.name.endswith(self.package_extension)

    def find_artifact_directories(self) -> set[Path]:
        """Return the distinct directories directly containing a package file."""
        return {
            path.parent.resolve()
            for path in self.root.rglob(f"*{self.package_extension}")
            if self._is_package(path)
        }

    def resolve(self, directory: Path) -> ArtifactCoordinate:
        """Derive the coordinate of an artifact-version directory.

        Raises
        ------
        CoordinateError
            If the directory lies outside the root, holds no package file,
            or sits fewer than three levels below the root.
        """
        directory = Path(directory).resolve()

        if not directory.is_relative_to(self.root):
            raise CoordinateError(
                f"{directory} is not within the repository root {self.root}."
            )

        if not directory.is_dir():
            raise CoordinateError(f"{directory} is not a directory.")

        if not any(self._is_package(child) for child in directory.iterdir()):
            raise CoordinateError(
                f"No {self.package_extension} files found in {directory}."
            )

        segments = directory.relative_to(self.root).parts
        try:
            return ArtifactCoordinate.from_segments(segments)
        except ValueError as exc:
            raise CoordinateError(
                f"Invalid Maven directory structure at {directory}: "
                "expected groupId/artifactId/version."
            ) from exc
