"""Synthesis of missing Project Object Model (POM) descriptors.

Every artifact-version directory gets a minimal POM named
``<artifact>-<version>.pom`` if it does not have one already. Existing
descriptors are never regenerated.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pomforge.core.coordinates import CoordinateError, CoordinateResolver
from pomforge.models.coordinates import ArtifactCoordinate
from pomforge.models.reports import TaskReport

logger = logging.getLogger(__name__)

POM_TEMPLATE = """<project xmlns="http://maven.apache.org/POM/4.0.0"
\txmlns:xsi="http://www.w3.org/2001/XMLSchema-instance"
\txsi:schemaLocation="http://maven.apache.org/POM/4.0.0 http://maven.apache.org/xsd/maven-4.0.0.xsd">
\t<modelVersion>4.0.0</modelVersion>
\t<groupId>${pom.group_id}</groupId>
\t<artifactId>${pom.artifact_id}</artifactId>
\t<version>${pom.version}</version>
</project>"""


def render_pom(coordinate: ArtifactCoordinate, template: str = POM_TEMPLATE) -> str:
    """Substitute a coordinate into the POM template, verbatim (no escaping)."""
    return (
        template.replace("${pom.group_id}", coordinate.group_id)
        .replace("${pom.artifact_id}", coordinate.artifact_id)
        .replace("${pom.version}", coordinate.version)
    )


class DescriptorSynthesizer:
    """Writes a POM for each artifact-version directory that lacks one.

    A directory whose coordinate cannot be resolved is logged and skipped;
    it never aborts the rest of the run. Filesystem errors propagate.

    Parameters
    ----------
    resolver:
        Resolver bound to the content root.
    extension:
        Descriptor file suffix.
    log:
        Logger (or task-bound adapter) for progress messages.
    """

    def __init__(
        self,
        resolver: CoordinateResolver,
        *,
        extension: str = ".pom",
        template: str = POM_TEMPLATE,
        log: logging.Logger | logging.LoggerAdapter | None = None,
    ) -> None:
        self.resolver = resolver
        self.extension = extension
        self.template = template
        self.log = log or logger

    def synthesize(self, task: str = "build-poms") -> TaskReport:
        written: list[Path] = []
        failed: list[Path] = []
        skipped = 0

        for directory in sorted(self.resolver.find_artifact_directories()):
            try:
                coordinate = self.resolver.resolve(directory)
            except CoordinateError as exc:
                self.log.error("Failed to generate POM for directory: %s (%s)", directory, exc)
                failed.append(directory)
                continue

            pom_path = directory / coordinate.descriptor_name(self.extension)
            if pom_path.exists():
                skipped += 1
                continue

            self.log.debug("Building %s", pom_path.name)
            pom_path.write_text(render_pom(coordinate, self.template), encoding="utf-8")
            written.append(pom_path)

        return TaskReport(task=task, written=written, skipped=skipped, failed=failed)
