"""Built-in repository maintenance tasks.

``build`` and ``clean`` are aggregates that run their sub-tasks in a fixed
order. ``clean`` never removes POMs; ``clean-poms`` exists only to explain
why.
"""

from __future__ import annotations

from pomforge.core.checksums import ChecksumGenerator
from pomforge.core.cleanup import clean_checksums, clean_descriptors, clean_indices
from pomforge.core.coordinates import CoordinateResolver
from pomforge.core.descriptors import DescriptorSynthesizer
from pomforge.core.indices import IndexRenderer
from pomforge.core.registry import TaskContext, TaskRegistry
from pomforge.models.reports import TaskReport

BUILD_SEQUENCE: tuple[str, ...] = ("build-poms", "build-checksums", "build-indices")
CLEAN_SEQUENCE: tuple[str, ...] = ("clean-checksums", "clean-indices")


def help_task(ctx: TaskContext) -> None:
    log = ctx.log
    log.info("This tool is used for automating tasks related to a static maven repository.")
    log.info("")
    log.info("Syntax:")
    log.info("    pomforge [task_name, task_name, task_name, ...]")
    log.info("")
    log.info("Where:")
    log.info("    [task_name] - The name of a task to execute.")
    log.info("")
    log.info("Example:")
    log.info("    pomforge build")
    log.info("")
    log.info("List of available tasks:")
    log.info("    %s", ", ".join(ctx.registry.names()))
    log.info("")
    for entry in ctx.registry.entries():
        if entry.description:
            log.info("    %-16s %s", entry.name, entry.description)


def build_task(ctx: TaskContext) -> None:
    for name in BUILD_SEQUENCE:
        ctx.invoke(name)


def build_poms_task(ctx: TaskContext) -> TaskReport:
    ctx.log.info("Building POMs...")
    config = ctx.config
    resolver = CoordinateResolver(config.content_root, config.package_extension)
    synthesizer = DescriptorSynthesizer(
        resolver, extension=config.descriptor_extension, log=ctx.log
    )
    return synthesizer.synthesize(task=ctx.name)


def build_checksums_task(ctx: TaskContext) -> TaskReport:
    ctx.log.info("Building checksums...")
    config = ctx.config
    generator = ChecksumGenerator(
        config.content_root,
        extensions=config.tracked_extensions,
        algorithms=config.checksum_algorithms,
        log=ctx.log,
    )
    return generator.generate(task=ctx.name)


def build_indices_task(ctx: TaskContext) -> TaskReport:
    ctx.log.info("Building indices...")
    config = ctx.config
    renderer = IndexRenderer(
        config.content_root,
        template_name=config.index_template_name,
        index_name=config.index_name,
        reserved_names=config.index_reserved_names,
        log=ctx.log,
    )
    return renderer.render_all(task=ctx.name)


def clean_task(ctx: TaskContext) -> None:
    for name in CLEAN_SEQUENCE:
        ctx.invoke(name)


def clean_poms_task(ctx: TaskContext) -> TaskReport:
    return clean_descriptors(log=ctx.log, task=ctx.name)


def clean_checksums_task(ctx: TaskContext) -> TaskReport:
    ctx.log.info("Cleaning checksums...")
    return clean_checksums(
        ctx.config.content_root,
        algorithms=ctx.config.checksum_algorithms,
        log=ctx.log,
        task=ctx.name,
    )


def clean_indices_task(ctx: TaskContext) -> TaskReport:
    ctx.log.info("Cleaning indices...")
    return clean_indices(
        ctx.config.content_root,
        index_name=ctx.config.index_name,
        log=ctx.log,
        task=ctx.name,
    )


def build_registry() -> TaskRegistry:
    """Create a registry holding every built-in task."""
    registry = TaskRegistry()
    registry.register("help", help_task, "Show usage and the list of tasks.")
    registry.register("build", build_task, "Run build-poms, build-checksums and build-indices.")
    registry.register("build-poms", build_poms_task, "Create missing POM files.")
    registry.register("build-checksums", build_checksums_task, "Create missing checksum files.")
    registry.register("build-indices", build_indices_task, "Rebuild changed index.html files.")
    registry.register("clean", clean_task, "Run clean-checksums and clean-indices.")
    registry.register("clean-poms", clean_poms_task, "Not implemented on purpose (data loss).")
    registry.register("clean-checksums", clean_checksums_task, "Delete all checksum files.")
    registry.register("clean-indices", clean_indices_task, "Delete all index.html files.")
    return registry
