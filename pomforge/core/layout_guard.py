"""Repository layout guard — refuses to run outside a repository checkout.

The guard runs once before any task. Every task walks and mutates the
content root recursively, so running from the wrong directory could
scatter sidecars and indices over an unrelated tree.
"""

from __future__ import annotations

import logging

from pomforge.config import ForgeConfig

logger = logging.getLogger(__name__)


class RepositoryLayoutError(RuntimeError):
    """Raised when the expected repository marker paths are missing.

    The run must stop: no task may execute against an unverified root.
    """


def missing_layout_markers(config: ForgeConfig) -> list[str]:
    """Return the configured marker paths that do not exist below repo_root."""
    root = config.repo_root
    return [marker for marker in config.layout_markers if not (root / marker).exists()]


def enforce_repository_layout(config: ForgeConfig) -> None:
    """Validate that ``config.repo_root`` looks like the repository checkout.

    Raises
    ------
    RepositoryLayoutError
        Listing every missing marker at once.
    """
    missing = missing_layout_markers(config)
    if missing:
        msg = (
            f"Failed to execute. {config.repo_root.resolve()} does not look like "
            "the repository root; missing:\n"
            + "\n".join(f"  - {marker}" for marker in missing)
        )
        logger.critical(msg)
        raise RepositoryLayoutError(msg)

    logger.debug("Repository layout guard passed for %s.", config.repo_root.resolve())
