# mlfqsim

A simulator for a four-level multi-level feedback queue (MLFQ) CPU scheduler.
It reads a list of tasks, runs three scheduling schemes over them and writes a
report with the per-task metrics and a comparison of the schemes.

Each scheme has four levels. Every task starts at level 1. When a task uses up
its round-robin time slice it drops one level, to level 4 at most. Tasks in a
higher level preempt a task running at a lower one.

| Scheme | Level 1 | Level 2 | Level 3 | Level 4 |
|--------|---------|---------|---------|---------|
| A      | RR(1)   | RR(3)   | RR(4)   | SJF     |
| B      | RR(2)   | RR(3)   | RR(4)   | STCF    |
| C      | RR(3)   | RR(5)   | RR(6)   | RR(20)  |

SJF is non-preemptive shortest job first and STCF is preemptive shortest time
to completion first. Both break ties by arrival time and then by name.

## Installation

```
pip install .
```

## Input format

One task per line, fields separated by `;`:

```
# name; burst time; arrival time; queue; priority
A; 6; 0; 1; 3
B; 4; 2; 1; 1
C; 2; 3; 1; 5
```

Blank lines and lines starting with `#` are skipped, and so are lines with
fewer than five fields. The queue and priority fields are read and echoed in
the report; every run starts all tasks at level 1 regardless of the queue
field. A burst time must be positive and an arrival time must not be negative.

## Running

```
mlfqsim --in=tasks.txt --out=report.txt
```

The same runs with `python -m mlfqsim.cli --in=tasks.txt --out=report.txt`.

Both options are required. The exit status is:

- 0 on success,
- 1 when `--in=` or `--out=` is missing,
- 2 when the output file cannot be opened,
- 3 when the input cannot be read or parsed, or a task is invalid.

The report holds one section per scheme, with the columns
`identifier; BT; AT; Q; Pr; WT; CT; RT; TAT` and a line of averages. In these
tables `Q` is the level the task ended on, and `RT` is the time the task first
ran. A closing comparison table lists, per scheme, the average waiting,
completion, response (first run minus arrival) and turnaround times.

## Library use

```python
from mlfqsim.report import parse_input_file, calculate_metrics
from mlfqsim.scheduler import execute_mlfq

tasks = parse_input_file("tasks.txt")
finished = execute_mlfq(tasks, "B")
metrics = calculate_metrics(finished)
print(metrics.wt, metrics.tat)
```

- `mlfqsim.models`: `Task`, `SchedulingMode` and `LevelConfiguration`.
- `mlfqsim.strategies`: the per-level strategies `RoundRobinStrategy`,
  `ShortestJobStrategy` and `PreemptiveShortestStrategy`, their base class
  `SchedulingStrategy`, and `create_strategy`, which builds one from a
  `LevelConfiguration`.
- `mlfqsim.scheduler`: `algorithm_scheme` returns the level configurations of
  scheme `A`, `B` or `C` (case-insensitive; `ValueError` otherwise), and
  `execute_mlfq` runs a simulation on copies of the tasks, leaving the input
  untouched.
- `mlfqsim.report`: `parse_input_file`, `parse_input_stream`,
  `generate_report`, `calculate_metrics`, `algorithm_description` and
  `write_consolidated_report`.
- `mlfqsim.cli`: `main`, the command above.