import json

from skirace.cli import main
from skirace.config import parse_clock
from skirace.events import read_events
from skirace.race import describe_event
from skirace.report import format_duration

CONFIG = {
    "laps": 2,
    "lapLen": 3651,
    "penaltyLen": 50,
    "firingLines": 1,
    "start": "09:30:00.000",
    "startDelta": "00:00:30",
}

EVENTS = [
    "[09:05:59.867] 1 1",
    "[09:15:00.841] 2 1 09:30:00.000",
    "[09:29:45.734] 3 1",
    "[09:30:01.005] 4 1",
    "[09:49:31.659] 5 1 1",
    "[09:49:33.123] 6 1 1",
    "[09:49:38.339] 7 1",
    "[09:49:55.915] 8 1",
    "[09:51:48.391] 9 1",
    "[09:59:03.872] 10 1",
    "[10:15:00.000] 10 1",
    "[09:06:00.000] 1 2",
]


def _setup(tmp_path, config=CONFIG):
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps(config))
    events_path = tmp_path / "events"
    events_path.write_text("\n".join(EVENTS) + "\n")
    log_path = tmp_path / "output.log"
    output_path = tmp_path / "results.txt"
    argv = [
        "-config", str(config_path),
        "-events", str(events_path),
        "-log", str(log_path),
        "-output", str(output_path),
    ]
    return argv, events_path, log_path, output_path


def test_main_writes_results(tmp_path):
    argv, _, _, output_path = _setup(tmp_path)
    assert main(argv) == 0
    lines = output_path.read_text().splitlines()
    assert len(lines) == 2
    total = parse_clock("10:15:00.000") - parse_clock("09:30:01.005")
    assert lines[0].startswith(f"[{format_duration(total)}] 1 [")
    assert lines[0].endswith(" 1/5")
    assert lines[1].startswith("[NotStarted] 2 ")


def test_main_writes_event_log(tmp_path):
    argv, events_path, log_path, _ = _setup(tmp_path)
    assert main(argv) == 0
    expected = [describe_event(e) for e in read_events(events_path)]
    assert log_path.read_text().splitlines() == expected


def test_main_accepts_double_dash_options(tmp_path):
    argv, _, _, output_path = _setup(tmp_path)
    argv = ["-" + item if item.startswith("-") else item for item in argv]
    assert main(argv) == 0
    assert len(output_path.read_text().splitlines()) == 2


def test_main_missing_config_fails(tmp_path):
    argv, _, log_path, output_path = _setup(tmp_path)
    (tmp_path / "config.json").unlink()
    assert main(argv) == 1
    assert not output_path.exists()
    assert log_path.read_text().strip()


def test_main_invalid_config_logs_error(tmp_path):
    argv, _, log_path, output_path = _setup(tmp_path)
    (tmp_path / "config.json").write_text('{"laps": 2')
    assert main(argv) == 1
    assert "invalid configuration JSON" in log_path.read_text()
    assert not output_path.exists()


def test_main_unopenable_log_fails(tmp_path):
    argv, _, _, output_path = _setup(tmp_path)
    log_index = argv.index("-log") + 1
    argv[log_index] = str(tmp_path / "missing" / "output.log")
    assert main(argv) == 1
    assert not output_path.exists()