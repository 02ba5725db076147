"""Command line entry point: run schemes A, B and C and write a report."""

from __future__ import annotations

import sys

from .report import parse_input_file, write_consolidated_report
from .scheduler import execute_mlfq

EXIT_USAGE = 1
EXIT_OUTPUT = 2
EXIT_FAILURE = 3


def _paths(argv: list[str]) -> tuple[str, str]:
    input_path = output_path = ""
    for argument in argv:
        if argument.startswith("--in="):
            input_path = argument[len("--in="):]
        elif argument.startswith("--out="):
            output_path = argument[len("--out="):]
    return input_path, output_path


def main(argv: list[str] | None = None) -> int:
    """Run the simulation for ``--in=FILE`` and write the report to ``--out=FILE``."""
    args = sys.argv[1:] if argv is None else list(argv)
    input_path, output_path = _paths(args)
    if not input_path or not output_path:
        return EXIT_USAGE

    try:
        tasks = parse_input_file(input_path)
        results = [(algorithm, execute_mlfq(tasks, algorithm)) for algorithm in "ABC"]
        try:
            stream = open(output_path, "w", encoding="utf-8", newline="")
        except OSError:
            return EXIT_OUTPUT
        with stream:
            write_consolidated_report(stream, results)
    except Exception:
        return EXIT_FAILURE
    return 0


if __name__ == "__main__":
    raise SystemExit(main())