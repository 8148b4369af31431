"""pomforge data models — Pydantic v2, frozen (immutable)."""

from pomforge.models.coordinates import ArtifactCoordinate
from pomforge.models.reports import TaskReport

__all__ = [
    "ArtifactCoordinate",
    "TaskReport",
]
