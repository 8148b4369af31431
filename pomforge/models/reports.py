"""Task outcome reports."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class TaskReport(BaseModel):
    """What a single generation or cleanup task did to the file tree.

    ``written`` and ``deleted`` hold the affected paths; ``skipped`` counts
    items left alone because they were already up to date, and ``failed``
    lists directories that were isolated after an error.
    """

    model_config = ConfigDict(frozen=True)

    task: str
    written: list[Path] = Field(default_factory=list)
    deleted: list[Path] = Field(default_factory=list)
    skipped: int = 0
    failed: list[Path] = Field(default_factory=list)

    @property
    def changed(self) -> bool:
        """Whether the task mutated the tree at all."""
        return bool(self.written or self.deleted)
