"""Replaying race events into per-competitor state and an event log."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Optional, Union

from skirace.config import Config, parse_clock
from skirace.events import Event

PathType = Union[str, "os.PathLike[str]"]

SHOTS_PER_STAGE = 5


@dataclass
class ShootingStage:
    """One visit to a firing range."""

    hits: int = 0
    total_shots: int = SHOTS_PER_STAGE


@dataclass
class PenaltySession:
    """One stay on the penalty loop; ``end_time`` is None while unfinished."""

    start_time: timedelta
    end_time: Optional[timedelta] = None


@dataclass
class CompetitorState:
    """Everything known about one competitor after replaying events."""

    scheduled_start_time: Optional[timedelta] = None
    actual_start_time: Optional[timedelta] = None
    finish_time: Optional[timedelta] = None
    lap_end_times: list[timedelta] = field(default_factory=list)
    shooting_stages: list[ShootingStage] = field(default_factory=list)
    penalty_sessions: list[PenaltySession] = field(default_factory=list)
    disqualified: bool = False
    comment: str = ""


def _format_clock(moment: timedelta) -> str:
    millis = moment // timedelta(milliseconds=1)
    hours, millis = divmod(millis, 3_600_000)
    minutes, millis = divmod(millis, 60_000)
    seconds, millis = divmod(millis, 1000)
    return f"{hours % 24:02d}:{minutes:02d}:{seconds:02d}.{millis:03d}"


_MESSAGES = {
    1: "The competitor({cid}) registered",
    2: "The start time for the competitor({cid}) was set by a draw to {comment}",
    3: "The competitor({cid}) is on the start line",
    4: "The competitor({cid}) has started",
    5: "The competitor({cid}) is on the firing range({comment})",
    6: "The target({comment}) has been hit by competitor({cid})",
    7: "The competitor({cid}) left the firing range",
    8: "The competitor({cid}) entered the penalty laps",
    9: "The competitor({cid}) left the penalty laps",
    10: "The competitor({cid}) ended the main lap",
    11: "The competitor({cid}) can't continue: {comment}",
}


def describe_event(event: Event) -> Optional[str]:
    """Return the log line for an event, or None for an unknown event id."""
    template = _MESSAGES.get(event.event_id)
    if template is None:
        return None
    message = template.format(cid=event.competitor_id, comment=event.comment)
    return f"[{_format_clock(event.time)}] {message}"


def apply_event(state: CompetitorState, event: Event, config: Config) -> None:
    """Update a competitor's state with one event."""
    kind = event.event_id
    if kind == 2:
        try:
            state.scheduled_start_time = parse_clock(event.comment)
        except ValueError:
            pass
    elif kind == 4:
        state.actual_start_time = event.time
    elif kind == 5:
        state.shooting_stages.append(ShootingStage())
    elif kind == 6:
        if state.shooting_stages:
            state.shooting_stages[-1].hits += 1
    elif kind == 8:
        state.penalty_sessions.append(PenaltySession(start_time=event.time))
    elif kind == 9:
        if state.penalty_sessions:
            state.penalty_sessions[-1].end_time = event.time
    elif kind == 10:
        state.lap_end_times.append(event.time)
        if len(state.lap_end_times) == config.laps:
            state.finish_time = event.time
    elif kind == 11:
        state.disqualified = True
        state.comment = event.comment


def process_events(
    config: Config, path: PathType, events: list[Event]
) -> dict[int, CompetitorState]:
    """Replay events, writing a readable log to ``path``, and return the states."""
    competitors: dict[int, CompetitorState] = {}
    with open(path, "w", encoding="utf-8") as log:
        for event in events:
            state = competitors.setdefault(event.competitor_id, CompetitorState())
            apply_event(state, event, config)
            line = describe_event(event)
            if line is not None:
                log.write(line + "\n")
    return competitors