"""Task registry and in-order task runner.

Tasks are plain callables taking a ``TaskContext``. The registry is an
explicit object built once at startup and handed to the runner and to
every task through its context; there is no process-wide registry.

Names are trimmed and lower-cased. Registering a name twice replaces the
earlier operation (last registration wins).
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Awaitable, Callable
from typing import Any

from pydantic import BaseModel, ConfigDict

from pomforge.config import ForgeConfig
from pomforge.models.reports import TaskReport

logger = logging.getLogger(__name__)

TaskOperation = Callable[["TaskContext"], Any]

BANNER = "=" * 50


class TaskNotFoundError(LookupError):
    """Raised when a requested task name is not registered."""


class TaskEntry(BaseModel):
    """A registered task: its normalized name, operation and help text."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str
    operation: Callable[..., Any]
    description: str = ""


class TaskLogAdapter(logging.LoggerAdapter):
    """Prefixes every record with the name of the task that emitted it."""

    def process(self, msg: Any, kwargs: Any) -> tuple[Any, Any]:
        return f"<{self.extra['task']}> {msg}", kwargs


def normalize_task_name(name: str) -> str:
    if not isinstance(name, str):
        raise TypeError(
            f"Illegal task name type. Expected 'str', but got '{type(name).__name__}' instead."
        )
    return name.strip().lower()


def complete(result: Any) -> Any:
    """Block until ``result`` is resolved if it is awaitable."""
    if inspect.isawaitable(result):
        return asyncio.run(_await(result))
    return result


async def _await(awaitable: Awaitable[Any]) -> Any:
    return await awaitable


class TaskContext:
    """Execution context passed to a task operation.

    Attributes
    ----------
    name:
        The normalized name the task was invoked under.
    config:
        Active repository configuration.
    registry:
        The registry the task was resolved from.
    log:
        Logger bound to ``name``.
    reports:
        Reports collected over the whole run, shared with sub-tasks.
    """

    def __init__(
        self,
        name: str,
        config: ForgeConfig,
        registry: TaskRegistry,
        reports: list[TaskReport],
    ) -> None:
        self.name = name
        self.config = config
        self.registry = registry
        self.reports = reports
        self.log = TaskLogAdapter(logging.getLogger("pomforge.tasks"), {"task": name})

    def invoke(self, name: str) -> Any:
        """Run another registered task, e.g. from an aggregate task."""
        return self.registry.invoke(name, self.config, self.reports)


class TaskRegistry:
    """Maps task names to operations and runs them in request order.

    Examples
    --------
    >>> registry = TaskRegistry()
    >>> registry.register(" Hello ", lambda ctx: ctx.log.info("hi"))
    >>> registry.resolve("HELLO").name
    'hello'
    """

    def __init__(self) -> None:
        self._tasks: dict[str, TaskEntry] = {}

    def register(self, name: str, operation: TaskOperation, description: str = "") -> None:
        """Register ``operation`` under ``name``, replacing any earlier one."""
        key = normalize_task_name(name)
        if not callable(operation):
            raise TypeError(
                "Illegal task operation type. Expected a callable, "
                f"but got '{type(operation).__name__}' instead."
            )
        if key in self._tasks:
            logger.debug("Task '%s' re-registered; replacing previous operation.", key)
        self._tasks[key] = TaskEntry(name=key, operation=operation, description=description)

    def resolve(self, name: str) -> TaskEntry:
        """Look up a task by name.

        Raises
        ------
        TaskNotFoundError
            If no task is registered under the normalized name.
        """
        key = normalize_task_name(name)
        entry = self._tasks.get(key)
        if entry is None:
            raise TaskNotFoundError(f"Could not find a task with the name '{key}'.")
        return entry

    def names(self) -> list[str]:
        """Registered task names, in registration order."""
        return list(self._tasks)

    def entries(self) -> list[TaskEntry]:
        return list(self._tasks.values())

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and normalize_task_name(name) in self._tasks

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------

    def invoke(
        self,
        name: str,
        config: ForgeConfig,
        reports: list[TaskReport] | None = None,
    ) -> Any:
        """Run a single task to completion and collect its report."""
        entry = self.resolve(name)
        context = TaskContext(
            entry.name, config, self, reports if reports is not None else []
        )
        result = complete(entry.operation(context))
        if isinstance(result, TaskReport):
            context.reports.append(result)
        return result

    def run(self, names: list[str], config: ForgeConfig) -> list[TaskReport]:
        """Run the requested tasks strictly one after another.

        Every name is resolved before the first task starts, so an unknown
        name aborts the run without touching the file tree.
        """
        entries = [self.resolve(name) for name in names]
        reports: list[TaskReport] = []

        for entry in entries:
            logger.info(BANNER)
            logger.info("Executing task: %s", entry.name)
            logger.info(BANNER)
            self.invoke(entry.name, config, reports)
            logger.info("")
        logger.info(BANNER)

        return reports
