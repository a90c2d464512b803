"""Command line entry point: read configuration and events, write log and results."""

from __future__ import annotations

import argparse
import sys
from datetime import datetime
from typing import Optional, Sequence

from skirace.config import read_config
from skirace.events import read_events
from skirace.race import process_events
from skirace.report import write_results


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the race processor; return 0 on success and 1 on failure."""
    parser = argparse.ArgumentParser(description="Process biathlon race events.")
    for name, default, what in (
        ("config", "config.json", "config file"),
        ("events", "events", "events file"),
        ("log", "output.log", "log file"),
        ("output", "results.txt", "output file"),
    ):
        parser.add_argument(f"-{name}", f"--{name}", dest=name, default=default,
                            help=f"path to {what}")
    args = parser.parse_args(argv)

    try:
        log_handle = open(args.log, "a", encoding="utf-8")
    except OSError as exc:
        print(f"Failed to open log file: {exc}", file=sys.stderr)
        return 1
    with log_handle:
        try:
            config = read_config(args.config)
            events = read_events(args.events)
            states = process_events(config, args.log, events)
            write_results(config, args.output, states)
        except (OSError, ValueError) as exc:
            stamp = datetime.now().strftime("%Y/%m/%d %H:%M:%S")
            log_handle.write(f"{stamp} {exc}\n")
            return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())