"""Per-level scheduling strategies: round robin, SJF and STCF.

Tasks are referred to by their index into the shared task list; ``None``
stands for "no task".
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque

from .models import LevelConfiguration, SchedulingMode, Task


class SchedulingStrategy(ABC):
    """Ready-queue discipline for a single level of the feedback queue."""

    def __init__(self, tasks: list[Task]) -> None:
        self.tasks = tasks

    @abstractmethod
    def add_to_queue(self, task_id: int) -> None:
        """Make a task ready at this level."""

    @abstractmethod
    def has_waiting_tasks(self) -> bool:
        """Return whether any task is waiting at this level."""

    @abstractmethod
    def select_next_task(self, current_task_id: int | None) -> int | None:
        """Choose the task to run, possibly keeping the current one."""

    @abstractmethod
    def process_time_unit(self, task_id: int | None) -> None:
        """Account for one time unit of execution of a task."""

    @abstractmethod
    def handle_task_exit(self, task_id: int | None) -> None:
        """React to a task finishing or being preempted."""

    @abstractmethod
    def purge_task(self, task_id: int) -> None:
        """Drop every trace of a task from this level."""

    @abstractmethod
    def update_waiting_times(self, running_task_id: int | None) -> None:
        """Add one unit of waiting time to every queued task but the running one."""

    def _sort_key(self, task_id: int) -> tuple[int, int, str]:
        task = self.tasks[task_id]
        return (task.time_left, task.arrival_moment, task.identifier)

    def _age(self, waiting: "deque[int] | list[int]", running_task_id: int | None) -> None:
        for task_id in waiting:
            if task_id != running_task_id:
                self.tasks[task_id].delay_accumulated += 1


class RoundRobinStrategy(SchedulingStrategy):
    """Round robin with a fixed time slice; an expired slice demotes the task."""

    def __init__(self, tasks: list[Task], time_slice: int) -> None:
        super().__init__(tasks)
        self.time_slice = time_slice
        self._ready: deque[int] = deque()
        self._quota: dict[int, int] = {}
        self._must_yield: int | None = None

    def add_to_queue(self, task_id: int) -> None:
        self._ready.append(task_id)
        self._quota.setdefault(task_id, self.time_slice)

    def has_waiting_tasks(self) -> bool:
        return bool(self._ready)

    def _pop_ready(self) -> int | None:
        return self._ready.popleft() if self._ready else None

    def select_next_task(self, current_task_id: int | None) -> int | None:
        if current_task_id is None:
            return self._pop_ready()
        if self._must_yield == current_task_id:
            self._must_yield = None
            return self._pop_ready()
        return current_task_id

    def process_time_unit(self, task_id: int | None) -> None:
        if task_id is None:
            return
        remaining = self._quota.get(task_id, 0) - 1
        self._quota[task_id] = remaining
        task = self.tasks[task_id]
        if remaining == 0 and task.time_left > 0:
            self._quota[task_id] = self.time_slice
            task.tier = min(4, task.tier + 1)
            self._must_yield = task_id

    def handle_task_exit(self, task_id: int | None) -> None:
        if task_id is None:
            return
        self._quota[task_id] = self.time_slice

    def purge_task(self, task_id: int) -> None:
        self._ready = deque(t for t in self._ready if t != task_id)
        self._quota.pop(task_id, None)

    def update_waiting_times(self, running_task_id: int | None) -> None:
        self._age(self._ready, running_task_id)


class ShortestJobStrategy(SchedulingStrategy):
    """Non-preemptive shortest job first."""

    def __init__(self, tasks: list[Task]) -> None:
        super().__init__(tasks)
        self._waiting: list[int] = []

    def add_to_queue(self, task_id: int) -> None:
        self._waiting.append(task_id)

    def has_waiting_tasks(self) -> bool:
        return bool(self._waiting)

    def select_next_task(self, current_task_id: int | None) -> int | None:
        if current_task_id is not None:
            return current_task_id
        if not self._waiting:
            return None
        chosen = min(self._waiting, key=self._sort_key)
        self._waiting.remove(chosen)
        return chosen

    def process_time_unit(self, task_id: int | None) -> None:
        pass

    def handle_task_exit(self, task_id: int | None) -> None:
        pass

    def purge_task(self, task_id: int) -> None:
        if task_id in self._waiting:
            self._waiting.remove(task_id)

    def update_waiting_times(self, running_task_id: int | None) -> None:
        self._age(self._waiting, running_task_id)


class PreemptiveShortestStrategy(SchedulingStrategy):
    """Preemptive shortest time to completion first."""

    def __init__(self, tasks: list[Task]) -> None:
        super().__init__(tasks)
        self._candidates: list[int] = []

    def add_to_queue(self, task_id: int) -> None:
        self._candidates.append(task_id)

    def has_waiting_tasks(self) -> bool:
        return bool(self._candidates)

    def select_next_task(self, current_task_id: int | None) -> int | None:
        if not self._candidates and current_task_id is None:
            return None
        options = self._candidates if current_task_id is None else [current_task_id, *self._candidates]
        best = min(options, key=self._sort_key)
        if best == current_task_id:
            return current_task_id
        if current_task_id is not None:
            self._candidates.append(current_task_id)
        self._candidates.remove(best)
        return best

    def process_time_unit(self, task_id: int | None) -> None:
        pass

    def handle_task_exit(self, task_id: int | None) -> None:
        pass

    def purge_task(self, task_id: int) -> None:
        if task_id in self._candidates:
            self._candidates.remove(task_id)

    def update_waiting_times(self, running_task_id: int | None) -> None:
        self._age(self._candidates, running_task_id)


def create_strategy(config: LevelConfiguration, tasks: list[Task]) -> SchedulingStrategy:
    """Build the strategy described by a level configuration."""
    if config.strategy is SchedulingMode.ROUND_ROBIN:
        return RoundRobinStrategy(tasks, config.time_slice)
    if config.strategy is SchedulingMode.SHORTEST_FIRST:
        return ShortestJobStrategy(tasks)
    if config.strategy is SchedulingMode.SHORTEST_REMAINING:
        return PreemptiveShortestStrategy(tasks)
    raise ValueError(f"unknown scheduling mode: {config.strategy!r}")