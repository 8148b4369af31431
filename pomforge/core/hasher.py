"""Digest helpers for checksum sidecars.

Maven clients verify downloads against ``<file>.<algorithm>`` sidecars that
hold nothing but the lowercase hex digest of the file bytes.
"""

from __future__ import annotations

import hashlib
from pathlib import Path

SUPPORTED_ALGORITHMS: tuple[str, ...] = ("md5", "sha1", "sha256", "sha512")


def file_digest(data: bytes, algorithm: str) -> str:
    """Return the lowercase hex digest of raw bytes.

    Pure function of ``data``: the same bytes always produce the same
    string, regardless of where they were read from.
    """
    if algorithm not in SUPPORTED_ALGORITHMS:
        raise ValueError(
            f"Unsupported checksum algorithm '{algorithm}'. "
            f"Expected one of: {', '.join(SUPPORTED_ALGORITHMS)}."
        )
    return hashlib.new(algorithm, data).hexdigest()


def sidecar_path(path: Path, algorithm: str) -> Path:
    """Path of the checksum sidecar for ``path``, e.g. ``a.jar.sha1``."""
    return path.with_name(f"{path.name}.{algorithm}")
