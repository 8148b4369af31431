"""Inverse operations: remove generated checksums and indices.

POM descriptors are never removed; see ``clean_descriptors``.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pomforge.core.hasher import SUPPORTED_ALGORITHMS
from pomforge.models.reports import TaskReport

logger = logging.getLogger(__name__)

_Log = logging.Logger | logging.LoggerAdapter


def _files_under(root: Path) -> list[Path]:
    return sorted(path for path in Path(root).rglob("*") if path.is_file())


def clean_checksums(
    root: Path,
    *,
    algorithms: tuple[str, ...] = SUPPORTED_ALGORITHMS,
    log: _Log | None = None,
    task: str = "clean-checksums",
) -> TaskReport:
    """Delete every checksum sidecar below ``root``. No confirmation."""
    log = log or logger
    suffixes = {f".{algorithm.lower()}" for algorithm in algorithms}

    deleted: list[Path] = []
    for path in _files_under(root):
        if path.suffix.lower() not in suffixes:
            continue
        log.debug("Cleaning hash %s", path.name)
        path.unlink()
        deleted.append(path)

    return TaskReport(task=task, deleted=deleted)


def clean_indices(
    root: Path,
    *,
    index_name: str = "index.html",
    log: _Log | None = None,
    task: str = "clean-indices",
) -> TaskReport:
    """Delete every file named ``index_name`` (case-insensitive) below ``root``."""
    log = log or logger
    target = index_name.lower()

    deleted: list[Path] = []
    for path in _files_under(root):
        if path.name.lower() != target:
            continue
        log.debug("Cleaning %s/%s", path.parent.name, path.name)
        path.unlink()
        deleted.append(path)

    return TaskReport(task=task, deleted=deleted)


def clean_descriptors(log: _Log | None = None, task: str = "clean-poms") -> TaskReport:
    """Refuse to remove POM files. Touches nothing on disk."""
    log = log or logger
    log.warning("Cleaning POM files would result in data-loss, equivalent to cleaning JAR files.")
    log.warning("Therefore, this task was intentionally not implemented.")
    return TaskReport(task=task)
