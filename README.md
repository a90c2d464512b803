# skirace

Turn a raw biathlon event stream into a human-readable event log and a
results table with lap times, penalty laps and shooting totals.

## Installation

```
pip install .
```

## Usage

```
skirace --config config.json --events events --log output.log --output results.txt
```

Every option has a default, shown above, so `skirace` on its own reads
`config.json` and `events` from the current directory. Each option can
also be written with a single dash (`-config`, `-events`, `-log`,
`-output`).

- `--config` – race configuration in JSON.
- `--events` – incoming events, one per line.
- `--log` – where the readable event log is written (the file is
  overwritten with the log of the current run).
- `--output` – where the per-competitor results are written.

The command exits with status 0 on success. If the configuration or the
events cannot be read, or an output file cannot be written, a timestamped
error message is appended to the log file and the exit status is 1.

### Configuration

```json
{
  "laps": 2,
  "lapLen": 3651,
  "penaltyLen": 50,
  "firingLines": 1,
  "start": "09:30:00.000",
  "startDelta": "00:00:30"
}
```

`start` (`HH:MM:SS.mmm`) and `startDelta` (`HH:MM:SS`) are required;
invalid JSON, a missing or malformed `start` or `startDelta`, or a
wrongly typed field raises `skirace.config.ConfigError`. Missing numeric
fields default to 0.

### Events

Each line holds a time, an event id, a competitor id and an optional
comment:

```
[09:05:59.867] 1 1
[09:15:00.841] 2 1 09:30:00.000
[09:29:45.734] 3 1
[09:30:01.005] 4 1
[09:49:31.659] 5 1 1
[09:49:33.123] 6 1 1
[09:49:38.339] 7 1
[09:49:55.915] 8 1
[09:51:48.391] 9 1
[09:59:03.872] 10 1
[09:59:03.872] 11 1 Lost in the forest
```

Event ids: 1 registered, 2 start time drawn, 3 on the start line,
4 started, 5 on the firing range, 6 target hit, 7 left the firing range,
8 entered penalty laps, 9 left penalty laps, 10 ended a main lap,
11 cannot continue. Lines that do not match this shape are skipped.
Events with other ids are kept but neither change any state nor appear
in the event log. Every firing range visit counts as five shots.

### Results

One line per competitor, in order of first appearance in the events:

```
[<total or status>] <id> [{<lap time>, <lap speed>}, ...] {<penalty time>, <penalty speed>} <hits>/<shots>
```

The first field is the total time for competitors who completed every
lap, otherwise `NotStarted` or `NotFinished`. Then come the competitor
id, the time and speed (metres per second, three decimals) of each main
lap, with `{,}` for laps not run, the total time and mean speed on
penalty laps (`{00:00:00.000, 0.000}` when none were completed), and
hits out of shots. Durations are written as `HH:MM:SS.mmm`.

## Library use

```python
from skirace.config import read_config
from skirace.events import read_events
from skirace.race import process_events
from skirace.report import write_results

config = read_config("config.json")
events = read_events("events")
competitors = process_events(config, "output.log", events)
write_results(config, "results.txt", competitors)
```

Smaller pieces are available too: `skirace.events.parse_event_line`,
`skirace.race.describe_event` and `skirace.race.apply_event` work on a
single event, and `skirace.report.result_line`, `lap_part`,
`penalty_part`, `shooting_summary` and `format_duration` build the parts
of one results line.

## What it does not do

The scheduled start time and the `startDelta` and `firingLines` settings
are read and stored but not checked: a late start or a missed start is
not detected or reported, and the number of firing range visits is not
compared with the configuration.

## Tests

```
pip install ".[test]"
pytest
```