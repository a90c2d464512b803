"""Reading the incoming race event log."""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import timedelta
from typing import Optional, Union

from skirace.config import parse_clock

PathType = Union[str, "os.PathLike[str]"]


class EventReadError(OSError):
    """Raised when the event file cannot be opened or read."""


@dataclass(frozen=True)
class Event:
    """One timestamped event of one competitor."""

    time: timedelta
    event_id: int
    competitor_id: int
    comment: str = ""


def _uint32(text: str) -> Optional[int]:
    if not (text.isascii() and text.isdigit()):
        return None
    value = int(text)
    return value if value < 2**32 else None


def parse_event_line(line: str) -> Optional[Event]:
    """Parse ``[HH:MM:SS.mmm] eventID competitorID [comment]``; None if malformed."""
    line = line.strip()
    head, sep, rest = line.partition("]")
    fields = rest.split()
    if not line.startswith("[") or not sep or len(fields) < 2:
        return None
    try:
        when = parse_clock(head[1:])
    except ValueError:
        return None
    event_id, competitor_id = _uint32(fields[0]), _uint32(fields[1])
    if event_id is None or competitor_id is None:
        return None
    return Event(when, event_id, competitor_id, " ".join(fields[2:]))


def read_events(path: PathType) -> list[Event]:
    """Read all well-formed events from a file, skipping malformed lines."""
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            parsed = (parse_event_line(line) for line in handle)
            return [event for event in parsed if event is not None]
    except OSError as exc:
        raise EventReadError(f"cannot read events file: {exc}") from exc