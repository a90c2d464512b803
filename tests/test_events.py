import pytest

from skirace.config import parse_clock
from skirace.events import Event, EventReadError, parse_event_line, read_events


def test_parse_line_without_comment():
    event = parse_event_line("[09:05:59.867] 1 1")
    assert event == Event(time=parse_clock("09:05:59.867"), event_id=1, competitor_id=1, comment="")


def test_parse_line_with_comment():
    event = parse_event_line("[09:15:00.841] 2 1 09:30:00.000")
    assert event.event_id == 2
    assert event.competitor_id == 1
    assert event.comment == "09:30:00.000"
    assert event.time == parse_clock("09:15:00.841")


def test_parse_line_collapses_comment_whitespace():
    event = parse_event_line("  [09:59:05.321] 11 1   Lost   in the forest  ")
    assert event.comment == "Lost in the forest"


@pytest.mark.parametrize(
    "line",
    [
        "",
        "   ",
        "09:05:59.867 1 1",
        "[09:05:59.867 1 1",
        "[09:05:59.867] 1",
        "[bad] 1 1",
        "[25:00:00.000] 1 1",
        "[09:05:59.867] x 1",
        "[09:05:59.867] 1 y",
        "[09:05:59.867] -1 1",
        "[09:05:59.867] 1 4294967296",
    ],
)
def test_parse_line_rejects_malformed(line):
    assert parse_event_line(line) is None


def test_parse_line_accepts_largest_uint32():
    event = parse_event_line("[09:05:59.867] 1 4294967295")
    assert event.competitor_id == 4294967295


def test_read_events_keeps_order_and_skips_garbage(tmp_path):
    lines = [
        "[09:05:59.867] 1 1",
        "",
        "garbage line",
        "[09:15:00.841] 2 1 09:30:00.000",
        "[oops] 3 1",
        "[09:29:45.734] 3 1\r",
    ]
    path = tmp_path / "events"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")

    events = read_events(path)

    expected = [parse_event_line(line) for line in (lines[0], lines[3], lines[5])]
    assert events == expected
    assert [e.event_id for e in events] == [1, 2, 3]


def test_read_events_empty_file(tmp_path):
    path = tmp_path / "events"
    path.write_text("", encoding="utf-8")
    assert read_events(path) == []


def test_read_events_missing_file(tmp_path):
    with pytest.raises(EventReadError):
        read_events(tmp_path / "missing")