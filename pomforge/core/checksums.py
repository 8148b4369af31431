"""Checksum sidecar generation.

Sidecars are append-only: once ``<file>.<algorithm>`` exists it is never
recomputed, even if the source file has since changed. A stale sidecar has
to be removed (``clean-checksums``) before it is regenerated.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pomforge.core.hasher import SUPPORTED_ALGORITHMS, file_digest, sidecar_path
from pomforge.models.reports import TaskReport

logger = logging.getLogger(__name__)


class ChecksumGenerator:
    """Creates missing checksum sidecars for tracked files under a root.

    Parameters
    ----------
    root:
        The content root to scan recursively.
    extensions:
        File suffixes that receive sidecars. Compared case-insensitively.
    algorithms:
        Digest algorithms, one sidecar per algorithm.
    """

    def __init__(
        self,
        root: Path,
        *,
        extensions: tuple[str, ...] = (".jar", ".pom", ".xml"),
        algorithms: tuple[str, ...] = SUPPORTED_ALGORITHMS,
        log: logging.Logger | logging.LoggerAdapter | None = None,
    ) -> None:
        self.root = Path(root).resolve()
        self.extensions = tuple(ext.lower() for ext in extensions)
        self.algorithms = algorithms
        self.log = log or logger

    def tracked_files(self) -> list[Path]:
        """All files below the root whose suffix is tracked, sorted."""
        return sorted(
            path
            for path in self.root.rglob("*")
            if path.is_file() and path.suffix.lower() in self.extensions
        )

    def hash_file(self, path: Path, algorithm: str) -> Path | None:
        """Write the sidecar for one (file, algorithm) pair.

        Returns the sidecar path, or ``None`` if it already existed.
        """
        dest = sidecar_path(path, algorithm)
        if dest.exists():
            return None

        self.log.debug("Building hash %s", dest.name)
        dest.write_text(file_digest(path.read_bytes(), algorithm), encoding="ascii")
        return dest

    def generate(self, task: str = "build-checksums") -> TaskReport:
        written: list[Path] = []
        skipped = 0

        # Snapshot first so freshly written sidecars are not walked.
        for path in self.tracked_files():
            for algorithm in self.algorithms:
                dest = self.hash_file(path, algorithm)
                if dest is None:
                    skipped += 1
                else:
                    written.append(dest)

        return TaskReport(task=task, written=written, skipped=skipped)
