"""Maven artifact coordinate model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ArtifactCoordinate(BaseModel):
    """The (group, artifact, version) triple identifying a package.

    Derived from the position of an artifact-version directory in the
    repository tree. Values are kept verbatim, with no normalization.
    """

    model_config = ConfigDict(frozen=True)

    group_id: str
    artifact_id: str
    version: str

    @classmethod
    def from_segments(cls, segments: list[str] | tuple[str, ...]) -> ArtifactCoordinate:
        """Build a coordinate from ``group/.../artifact/version`` segments.

        Raises ``ValueError`` when fewer than three segments are given.
        """
        if len(segments) < 3:
            raise ValueError(
                "Expected at least groupId/artifactId/version path segments, "
                f"got {len(segments)}."
            )
        *group, artifact_id, version = segments
        return cls(group_id=".".join(group), artifact_id=artifact_id, version=version)

    def descriptor_name(self, extension: str = ".pom") -> str:
        """File name of this artifact's descriptor, e.g. ``widgets-2.0.pom``."""
        return f"{self.artifact_id}-{self.version}{extension}"
