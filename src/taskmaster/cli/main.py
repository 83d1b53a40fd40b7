# src/taskmaster/cli/main.py

"""
CLI entrypoint.

Loads .env, runs the startup pipeline, prints the task list, then shuts down.
The interactive UI lives elsewhere; this is enough to exercise a data
directory from a terminal.
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path

from .. import VERSION_LABEL
from ..config import load_environment
from ..model.store import ReadOnlyView
from .bootstrap import bootstrap, shutdown

logger = logging.getLogger(__name__)


def parse_config_path(argv: Sequence[str] | None = None) -> Path | None:
    parser = argparse.ArgumentParser(
        prog="taskmaster",
        description="TaskMasterPro: track tasks and who they are assigned to.",
    )
    parser.add_argument("--config", default=None, help="Path to the JSON config file")
    parser.add_argument("--version", action="version", version=f"TaskMasterPro {VERSION_LABEL}")
    args = parser.parse_args(argv)

    if args.config is None:
        return None
    if not args.config.strip():
        logger.warning("Invalid config path %r. It will be ignored.", args.config)
        return None
    return Path(args.config)


def format_view(view: ReadOnlyView) -> str:
    names = {e.id: e.name for e in view.employees}
    lines = [f"Tasks ({len(view.tasks)}):"]
    for task in view.tasks:
        assignees = ", ".join(names.get(i, f"#{i}") for i in sorted(task.assigned_employees)) or "-"
        lines.append(f"  [{task.id}] {task.name} ({task.status.label}) -> {assignees}")
    lines.append(f"Employees ({len(view.employees)}):")
    for employee in view.employees:
        lines.append(f"  [{employee.id}] {employee.name}")
    return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> None:
    load_environment()
    config_path = parse_config_path(argv)

    result = bootstrap(config_path)
    logger.info("Starting TaskMasterPro %s", VERSION_LABEL)
    try:
        if result.is_sample_data:
            print("No saved data found; showing sample data.")
        print(format_view(result.store.snapshot()))
    finally:
        shutdown(result)


if __name__ == "__main__":
    main()
