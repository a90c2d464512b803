"""Race configuration: lap counts, distances and the start schedule."""

from __future__ import annotations

import json
import os
import re
from dataclasses import dataclass
from datetime import timedelta
from typing import Union

PathType = Union[str, "os.PathLike[str]"]

_CLOCK_RE = re.compile(r"(\d{1,2}):(\d{2}):(\d{2})\.(\d{3})")
_DELTA_RE = re.compile(r"(\d{1,2}):(\d{1,2}):(\d{1,2})")


class ConfigError(ValueError):
    """Raised when a configuration document cannot be understood."""


@dataclass(frozen=True)
class Config:
    """Settings of one race."""

    laps: int = 0
    lap_len: int = 0
    penalty_len: int = 0
    firing_lines: int = 0
    start: timedelta = timedelta(0)
    start_delta: timedelta = timedelta(0)


def parse_clock(text: str) -> timedelta:
    """Parse an ``HH:MM:SS.mmm`` clock reading into the time since midnight."""
    match = _CLOCK_RE.fullmatch(text)
    if match is None:
        raise ValueError(f"cannot parse {text!r} as HH:MM:SS.mmm")
    hours, minutes, seconds, millis = map(int, match.groups())
    if hours > 23 or minutes > 59 or seconds > 59:
        raise ValueError(f"clock reading out of range: {text!r}")
    return timedelta(hours=hours, minutes=minutes, seconds=seconds, milliseconds=millis)


def parse_start_delta(text: str) -> timedelta:
    """Parse the ``HH:MM:SS`` interval between scheduled starts."""
    match = _DELTA_RE.match(text)
    if match is None:
        raise ConfigError(f"parse error startDelta: {text!r}")
    hours, minutes, seconds = map(int, match.groups())
    return timedelta(hours=hours, minutes=minutes, seconds=seconds)


def _field(document: dict, key: str, kind: type, default):
    value = document.get(key)
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, kind):
        raise ConfigError(f"field {key!r} has the wrong type: {value!r}")
    return value


def read_config(path: PathType) -> Config:
    """Load a race configuration from a JSON file."""
    with open(path, encoding="utf-8") as handle:
        try:
            document = json.load(handle)
        except json.JSONDecodeError as exc:
            raise ConfigError(f"invalid configuration JSON: {exc}") from exc
    if not isinstance(document, dict):
        raise ConfigError("configuration must be a JSON object")

    try:
        start = parse_clock(_field(document, "start", str, ""))
    except ConfigError:
        raise
    except ValueError as exc:
        raise ConfigError(f"invalid start: {exc}") from exc

    return Config(
        laps=_field(document, "laps", int, 0),
        lap_len=_field(document, "lapLen", int, 0),
        penalty_len=_field(document, "penaltyLen", int, 0),
        firing_lines=_field(document, "firingLines", int, 0),
        start=start,
        start_delta=parse_start_delta(_field(document, "startDelta", str, "")),
    )