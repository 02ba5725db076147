"""Task file parsing and text report generation."""

from __future__ import annotations

import math
import re
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from .models import Task

_TRIM = " \t\r\n"
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

_DESCRIPTIONS = {
    "A": "A → RR(1), RR(3), RR(4), SJF",
    "B": "B → RR(2), RR(3), RR(4), STCF",
    "C": "C → RR(3), RR(5), RR(6), RR(20)",
}


@dataclass(frozen=True)
class PerformanceMetrics:
    """Average waiting, completion, response and turnaround times."""

    wt: float = 0.0
    ct: float = 0.0
    rt: float = 0.0
    tat: float = 0.0


def _to_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"invalid integer: {text!r}")
    return int(match.group(1))


def _split_fields(line: str) -> list[str]:
    fields = [field.strip(_TRIM) for field in line.split(";")]
    if line.endswith(";"):
        fields.pop()
    return fields


def parse_input_stream(stream: Iterable[str]) -> list[Task]:
    """Read tasks from lines of ``name;burst;arrival;queue;priority``.

    Blank lines, lines starting with ``#`` and lines with fewer than five
    fields are skipped.
    """
    tasks = []
    for raw in stream:
        line = raw.strip(_TRIM)
        if not line or line.startswith("#"):
            continue
        fields = _split_fields(line)
        if len(fields) < 5:
            continue
        duration = _to_int(fields[1])
        tasks.append(
            Task(
                identifier=fields[0],
                service_duration=duration,
                arrival_moment=_to_int(fields[2]),
                tier=_to_int(fields[3]),
                priority=_to_int(fields[4]),
                time_left=duration,
            )
        )
    return tasks


def parse_input_file(path: str | Path) -> list[Task]:
    """Read tasks from a file; raises ``OSError`` if it cannot be opened."""
    with open(path, encoding="utf-8") as stream:
        return parse_input_stream(stream)


def _mean(total: int, count: int) -> float:
    return total / count if count else math.nan


def generate_report(stream: TextIO, tasks: list[Task]) -> None:
    """Write one line per task followed by a line of averages."""
    total_wt = total_ct = total_rt = total_tat = 0
    for task in tasks:
        response = max(task.start_moment, 0)
        turnaround = task.finish_moment - task.arrival_moment if task.finish_moment >= 0 else 0
        total_wt += task.delay_accumulated
        total_ct += task.finish_moment
        total_rt += response
        total_tat += turnaround
        stream.write(
            f"{task.identifier};{task.service_duration};{task.arrival_moment};"
            f"{task.tier};{task.priority}; {task.delay_accumulated}; "
            f"{task.finish_moment}; {response}; {turnaround}\n"
        )
    count = len(tasks)
    stream.write(
        f"WT={_mean(total_wt, count):.1f}; CT={_mean(total_ct, count):.1f}; "
        f"RT={_mean(total_rt, count):.1f}; TAT={_mean(total_tat, count):.1f};\n"
    )


def calculate_metrics(tasks: list[Task]) -> PerformanceMetrics:
    """Average the metrics of a run; all zero for an empty run."""
    if not tasks:
        return PerformanceMetrics()
    total_wt = total_ct = total_rt = total_tat = 0
    for task in tasks:
        total_wt += task.delay_accumulated
        total_ct += task.finish_moment
        if task.start_moment >= 0:
            total_rt += task.start_moment - task.arrival_moment
        if task.finish_moment >= 0:
            total_tat += task.finish_moment - task.arrival_moment
    count = len(tasks)
    return PerformanceMetrics(
        wt=total_wt / count,
        ct=total_ct / count,
        rt=total_rt / count,
        tat=total_tat / count,
    )


def algorithm_description(algorithm: str) -> str:
    """Describe the levels of a scheme; a single space for unknown schemes."""
    return _DESCRIPTIONS.get(algorithm.upper(), " ")


def write_consolidated_report(
    stream: TextIO, results: Iterable[tuple[str, list[Task]]]
) -> None:
    """Write a section per algorithm run and a closing comparison table."""
    results = list(results)
    for algorithm, tasks in results:
        stream.write(f"📈 Algorithm {algorithm_description(algorithm)}\n")
        stream.write("identifier; BT; AT; Q; Pr; WT; CT; RT; TAT\n")
        generate_report(stream, tasks)
        stream.write("\n")

    stream.write("🏆 Algorithm Comparison\n")
    stream.write("algorithm; WT; CT; RT; TAT\n")
    for algorithm, tasks in results:
        m = calculate_metrics(tasks)
        stream.write(f"{algorithm}; {m.wt:.1f}; {m.ct:.1f}; {m.rt:.1f}; {m.tat:.1f}\n")