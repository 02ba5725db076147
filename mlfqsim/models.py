"""Task records and per-level scheduling configuration."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass
class Task:
    """A schedulable job with its input parameters and execution metrics."""

    identifier: str = ""
    service_duration: int = 0
    arrival_moment: int = 0
    tier: int = 1
    priority: int = 1
    time_left: int = 0
    start_moment: int = -1
    finish_moment: int = -1
    delay_accumulated: int = 0

    def reset(self) -> None:
        """Restore the execution state for a fresh run, starting at the top level."""
        self.time_left = self.service_duration
        self.start_moment = -1
        self.finish_moment = -1
        self.delay_accumulated = 0
        self.tier = 1


class SchedulingMode(Enum):
    """Scheduling discipline used inside one queue level."""

    ROUND_ROBIN = "RR"
    SHORTEST_FIRST = "SJF"
    SHORTEST_REMAINING = "STCF"


@dataclass(frozen=True)
class LevelConfiguration:
    """Strategy and time slice for one queue level."""

    strategy: SchedulingMode = SchedulingMode.ROUND_ROBIN
    time_slice: int = 1