"""Final results: lap times, penalty loop statistics and shooting totals."""

from __future__ import annotations

import math
import os
from datetime import timedelta
from typing import Mapping, Optional, Union

from skirace.config import Config
from skirace.race import CompetitorState

PathType = Union[str, "os.PathLike[str]"]

# An unset moment sits this far after midnight of the clock timeline.
_UNSET_MOMENT = timedelta(days=366)

_US_PER_HOUR = 3_600_000_000
_US_PER_MINUTE = 60_000_000
_US_PER_SECOND = 1_000_000
_US_PER_MILLI = 1_000


def _trunc_divmod(value: int, divisor: int) -> tuple[int, int]:
    quotient = abs(value) // divisor
    if value < 0:
        quotient = -quotient
    return quotient, value - quotient * divisor


def _moment(value: Optional[timedelta]) -> timedelta:
    return _UNSET_MOMENT if value is None else value


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    return f"{value:.3f}"


def _speed(distance: float, elapsed: timedelta) -> float:
    seconds = elapsed.total_seconds()
    if seconds == 0:
        return math.copysign(math.inf, distance) if distance else math.nan
    return distance / seconds


def format_duration(delta: timedelta) -> str:
    """Format a duration as ``HH:MM:SS.mmm``, truncating toward zero."""
    total = (delta.days * 86400 + delta.seconds) * _US_PER_SECOND + delta.microseconds
    hours, rest = _trunc_divmod(total, _US_PER_HOUR)
    minutes, rest = _trunc_divmod(rest, _US_PER_MINUTE)
    seconds, rest = _trunc_divmod(rest, _US_PER_SECOND)
    millis, _ = _trunc_divmod(rest, _US_PER_MILLI)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}.{millis:03d}"


def lap_part(state: CompetitorState, config: Config) -> str:
    """Time and speed of every planned lap; ``{,}`` where unknown."""
    parts = []
    for index in range(config.laps):
        if index >= len(state.lap_end_times):
            parts.append("{,}")
            continue
        start = state.actual_start_time if index == 0 else state.lap_end_times[index - 1]
        if start is None:
            parts.append("{,}")
            continue
        lap_time = state.lap_end_times[index] - start
        speed = _speed(float(config.lap_len), lap_time)
        parts.append(f"{{{format_duration(lap_time)}, {_format_float(speed)}}}")
    return ", ".join(parts)


def shooting_summary(state: CompetitorState) -> tuple[int, int]:
    """Total hits and total shots over all shooting stages."""
    hits = sum(stage.hits for stage in state.shooting_stages)
    shots = sum(stage.total_shots for stage in state.shooting_stages)
    return hits, shots


def penalty_part(state: CompetitorState, config: Config, total_misses: int) -> str:
    """Time spent on penalty loops and the average speed there."""
    distance = float(total_misses) * float(config.penalty_len)
    elapsed = sum(
        (
            session.end_time - session.start_time
            for session in state.penalty_sessions
            if session.end_time is not None
        ),
        timedelta(0),
    )
    if elapsed > timedelta(0):
        speed = _speed(distance, elapsed)
        return f"{{{format_duration(elapsed)}, {_format_float(speed)}}}"
    return "{00:00:00.000, 0.000}"


def result_line(competitor_id: int, state: CompetitorState, config: Config) -> str:
    """One line of the final report, without a trailing newline."""
    if len(state.lap_end_times) == config.laps:
        total = _moment(state.finish_time) - _moment(state.actual_start_time)
        first = format_duration(total)
    elif state.disqualified:
        first = "NotFinished"
    elif state.actual_start_time is None:
        first = "NotStarted"
    else:
        first = "NotFinished"

    hits, shots = shooting_summary(state)
    penalty = penalty_part(state, config, shots - hits)
    return f"[{first}] {competitor_id} [{lap_part(state, config)}] {penalty} {hits}/{shots}"


def write_results(
    config: Config, path: PathType, competitors: Mapping[int, CompetitorState]
) -> None:
    """Write the final report, one line per competitor."""
    with open(path, "w", encoding="utf-8") as out:
        for competitor_id, state in competitors.items():
            out.write(result_line(competitor_id, state, config) + "\n")