"""A task scheduler that runs calls in dependency order."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Generic, TypeVar

from depsched.sometype import SomeType

T = TypeVar("T")


@dataclass
class _Task:
    func: Callable[..., Any]
    args: tuple[Any, ...]
    result: SomeType = field(default_factory=SomeType)
    executed: bool = False

    def run(self) -> None:
        resolved = tuple(
            arg.resolve() if isinstance(arg, FutureResult) else arg for arg in self.args
        )
        self.result = SomeType(self.func(*resolved))
        self.executed = True


class FutureResult(Generic[T]):
    """A placeholder for the result of another task, usable as a task argument."""

    __slots__ = ("_task", "_kind")

    def __init__(self, task: _Task, kind: type[T]) -> None:
        self._task = task
        self._kind = kind

    def resolve(self) -> T:
        """Return the referenced task's result as the requested type."""
        return self._task.result.cast(self._kind)


class TaskScheduler:
    """Collects tasks and runs them so that every task follows those it depends on.

    A future obtained with :meth:`get_future_result` is taken to be an argument
    of the next task that is added.
    """

    def __init__(self) -> None:
        self._tasks: list[_Task] = []
        self._graph: list[list[int]] = []
        self._order: list[int] = []
        self._sorted = False

    def _task(self, task_id: int) -> _Task:
        if not 0 <= task_id < len(self._tasks):
            raise IndexError(f"no task with id {task_id}")
        return self._tasks[task_id]

    def add(self, func: Callable[..., Any], *args: Any) -> int:
        """Register ``func(*args)`` as a task and return its id."""
        task_id = len(self._tasks)
        self._tasks.append(_Task(func, args))
        self._graph.append([])
        self._order.append(task_id)
        return task_id

    def get_future_result(self, task_id: int, kind: type[T]) -> FutureResult[T]:
        """Return a future for a task's result, recording that the next task depends on it."""
        task = self._task(task_id)
        self._graph[task_id].append(len(self._tasks))
        self._sorted = False
        return FutureResult(task, kind)

    def get_result(self, task_id: int, kind: type[T]) -> T:
        """Return a task's result as ``kind``, running pending tasks first if needed."""
        task = self._task(task_id)
        if not task.executed:
            self.execute_all()
        return task.result.cast(kind)

    def execute_all(self) -> None:
        """Run every task that has not run yet, in dependency order."""
        if not self._sorted:
            self._sort()
        for task_id in reversed(self._order):
            task = self._tasks[task_id]
            if not task.executed:
                task.run()

    def _sort(self) -> None:
        count = len(self._tasks)
        visited = [False] * count
        order: list[int] = []
        for start in range(count):
            if visited[start]:
                continue
            visited[start] = True
            stack = [(start, iter(self._graph[start]))]
            while stack:
                vertex, successors = stack[-1]
                for nxt in successors:
                    if nxt < count and not visited[nxt]:
                        visited[nxt] = True
                        stack.append((nxt, iter(self._graph[nxt])))
                        break
                else:
                    stack.pop()
                    order.append(vertex)
        self._order = order
        self._sorted = True