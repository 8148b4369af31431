"""Tests for TaskRegistry — normalization, lookup, ordered execution."""

from __future__ import annotations

import logging

import pytest

from pomforge.config import ForgeConfig
from pomforge.core.registry import (
    TaskContext,
    TaskNotFoundError,
    TaskRegistry,
    normalize_task_name,
)
from pomforge.models.reports import TaskReport


class TestRegistration:
    def test_name_is_trimmed_and_lowercased(self):
        registry = TaskRegistry()
        registry.register("  Build-Poms ", lambda ctx: None)
        assert registry.names() == ["build-poms"]
        assert registry.resolve("BUILD-POMS").name == "build-poms"
        assert "build-poms" in registry

    def test_last_registration_wins(self):
        registry = TaskRegistry()
        first = lambda ctx: "first"  # noqa: E731
        second = lambda ctx: "second"  # noqa: E731
        registry.register("task", first)
        registry.register("TASK", second)
        assert registry.names() == ["task"]
        assert registry.resolve("task").operation is second

    def test_non_string_name(self):
        with pytest.raises(TypeError, match="Expected 'str'"):
            TaskRegistry().register(42, lambda ctx: None)  # type: ignore[arg-type]

    def test_non_callable_operation(self):
        with pytest.raises(TypeError, match="callable"):
            TaskRegistry().register("task", "not callable")  # type: ignore[arg-type]

    def test_description_kept(self):
        registry = TaskRegistry()
        registry.register("task", lambda ctx: None, "Does a thing.")
        assert registry.resolve("task").description == "Does a thing."

    def test_normalize(self):
        assert normalize_task_name(" HeLp\n") == "help"


class TestResolve:
    def test_unknown_name(self):
        with pytest.raises(TaskNotFoundError, match="Could not find a task with the name 'nope'"):
            TaskRegistry().resolve("NOPE")

    def test_not_found_is_lookup_error(self):
        assert issubclass(TaskNotFoundError, LookupError)


class TestRun:
    def test_runs_in_request_order(self, config: ForgeConfig):
        calls: list[str] = []
        registry = TaskRegistry()
        registry.register("a", lambda ctx: calls.append("a"))
        registry.register("b", lambda ctx: calls.append("b"))

        registry.run(["b", "a", "b"], config)
        assert calls == ["b", "a", "b"]

    def test_unknown_name_aborts_before_anything_runs(self, config: ForgeConfig):
        calls: list[str] = []
        registry = TaskRegistry()
        registry.register("a", lambda ctx: calls.append("a"))

        with pytest.raises(TaskNotFoundError):
            registry.run(["a", "missing"], config)
        assert calls == []

    def test_awaitable_result_completes_before_next_task(self, config: ForgeConfig):
        calls: list[str] = []

        async def slow(ctx: TaskContext) -> TaskReport:
            calls.append("slow-start")
            calls.append("slow-end")
            return TaskReport(task=ctx.name, skipped=1)

        registry = TaskRegistry()
        registry.register("slow", slow)
        registry.register("fast", lambda ctx: calls.append("fast"))

        reports = registry.run(["slow", "fast"], config)
        assert calls == ["slow-start", "slow-end", "fast"]
        assert reports == [TaskReport(task="slow", skipped=1)]

    def test_context_carries_name_and_config(self, config: ForgeConfig):
        seen: dict[str, object] = {}

        def capture(ctx: TaskContext) -> None:
            seen["name"] = ctx.name
            seen["config"] = ctx.config
            seen["registry"] = ctx.registry

        registry = TaskRegistry()
        registry.register("Capture", capture)
        registry.run(["capture"], config)
        assert seen == {"name": "capture", "config": config, "registry": registry}

    def test_logger_bound_to_task_name(self, config: ForgeConfig, caplog):
        registry = TaskRegistry()
        registry.register("speak", lambda ctx: ctx.log.info("hello"))

        with caplog.at_level(logging.INFO):
            registry.run(["speak"], config)
        assert "<speak> hello" in caplog.messages

    def test_sub_task_reports_collected(self, config: ForgeConfig):
        registry = TaskRegistry()
        registry.register("leaf", lambda ctx: TaskReport(task=ctx.name))
        registry.register("aggregate", lambda ctx: [ctx.invoke("leaf"), ctx.invoke("leaf")])

        reports = registry.run(["aggregate"], config)
        assert [r.task for r in reports] == ["leaf", "leaf"]

    def test_errors_propagate(self, config: ForgeConfig):
        def broken(ctx: TaskContext) -> None:
            raise OSError("disk full")

        calls: list[str] = []
        registry = TaskRegistry()
        registry.register("broken", broken)
        registry.register("after", lambda ctx: calls.append("after"))

        with pytest.raises(OSError, match="disk full"):
            registry.run(["broken", "after"], config)
        assert calls == []
