"""Multi-level feedback queue simulation over four strategy levels."""

from __future__ import annotations

from collections import deque
from dataclasses import replace

from .models import LevelConfiguration, SchedulingMode, Task
from .strategies import SchedulingStrategy, create_strategy

_RR = SchedulingMode.ROUND_ROBIN

_SCHEMES: dict[str, tuple[LevelConfiguration, ...]] = {
    "A": (
        LevelConfiguration(_RR, 1),
        LevelConfiguration(_RR, 3),
        LevelConfiguration(_RR, 4),
        LevelConfiguration(SchedulingMode.SHORTEST_FIRST, 0),
    ),
    "B": (
        LevelConfiguration(_RR, 2),
        LevelConfiguration(_RR, 3),
        LevelConfiguration(_RR, 4),
        LevelConfiguration(SchedulingMode.SHORTEST_REMAINING, 0),
    ),
    "C": (
        LevelConfiguration(_RR, 3),
        LevelConfiguration(_RR, 5),
        LevelConfiguration(_RR, 6),
        LevelConfiguration(_RR, 20),
    ),
}

LEVEL_COUNT = 4


def algorithm_scheme(algorithm: str) -> tuple[LevelConfiguration, ...]:
    """Return the four level configurations of scheme A, B or C (case-insensitive)."""
    try:
        return _SCHEMES[algorithm.upper()]
    except KeyError:
        raise ValueError("Unknown algorithm scheme (A/B/C).") from None


def _first_busy_level(levels: list[SchedulingStrategy]) -> int | None:
    return next((i for i, level in enumerate(levels) if level.has_waiting_tasks()), None)


def execute_mlfq(tasks: list[Task], algorithm: str) -> list[Task]:
    """Simulate the feedback queue and return copies of the tasks with their metrics.

    The input tasks are left untouched; the result keeps the input order.
    """
    task_list = [replace(task) for task in tasks]
    for task in task_list:
        if task.arrival_moment < 0:
            raise ValueError(f"task {task.identifier!r} has a negative arrival time")
        if task.service_duration <= 0:
            raise ValueError(f"task {task.identifier!r} needs a positive service duration")
        task.reset()

    levels = [create_strategy(config, task_list) for config in algorithm_scheme(algorithm)]

    arrivals = deque(
        sorted(
            range(len(task_list)),
            key=lambda i: (task_list[i].arrival_moment, task_list[i].identifier),
        )
    )

    def assign_to_level(task_id: int) -> None:
        level_index = max(1, min(LEVEL_COUNT, task_list[task_id].tier)) - 1
        levels[level_index].add_to_queue(task_id)

    def update_waiting(running: int | None) -> None:
        for level in levels:
            level.update_waiting_times(running)

    current_time = 0
    completed = 0
    active: int | None = None
    active_level: int | None = None

    while completed < len(task_list):
        while arrivals and task_list[arrivals[0]].arrival_moment == current_time:
            assign_to_level(arrivals.popleft())

        top = _first_busy_level(levels)
        if top is None and active is not None:
            top = active_level

        if top is None:
            update_waiting(None)
            current_time += 1
            continue

        if active is not None and active_level is not None and top < active_level:
            if task_list[active].time_left > 0:
                levels[active_level].add_to_queue(active)
            active = None
            active_level = None
        if active is None:
            active_level = top

        level = levels[active_level]
        selected = level.select_next_task(active)
        if selected != active:
            active = selected
            if active is not None and task_list[active].start_moment < 0:
                task_list[active].start_moment = current_time

        if active is None:
            update_waiting(None)
            current_time += 1
            continue

        task = task_list[active]
        task.time_left -= 1
        update_waiting(active)

        if task.time_left == 0:
            task.finish_moment = current_time + 1
            level.handle_task_exit(active)
            level.purge_task(active)
            active = None
            active_level = None
            completed += 1
        else:
            level.process_time_unit(active)
            next_selected = level.select_next_task(active)
            if next_selected != active:
                level.handle_task_exit(active)
                level.purge_task(active)
                assign_to_level(active)
                active = next_selected
                if active is not None and task_list[active].start_moment < 0:
                    task_list[active].start_moment = current_time + 1

        current_time += 1

    return task_list