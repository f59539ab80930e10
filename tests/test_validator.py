import json

import pytest

from dayplanner.errors import ErrorKind, InvalidFormatError, NoResponseError, ParseError
from dayplanner.llm.schemas import ScheduledTask, to_12_hour
from dayplanner.llm.validator import clean_markdown_json, parse_schedule_response

from .conftest import schedule_json


@pytest.mark.unit
class TestParseScheduleResponse:
    """Parsing, validation and ordering of model replies."""

    def test_single_entry(self):
        raw = '{"schedule":[{"task":"A","time":"09:00","reason":"r"}]}'

        result = parse_schedule_response(raw)

        assert result == [ScheduledTask(task="A", time="9:00 AM", reason="r")]
        assert result[0].model_dump() == {"task": "A", "time": "9:00 AM", "reason": "r"}

    def test_sorted_chronologically(self, valid_response):
        result = parse_schedule_response(valid_response)

        assert [item.time for item in result] == ["6:00 AM", "9:15 AM", "2:30 PM"]
        assert [item.task for item in result] == ["Morning run", "Email triage", "Write report"]

    def test_ties_keep_original_order(self):
        raw = schedule_json(("B", "10:00", "r"), ("A", "08:00", "r"), ("C", "10:00", "r"))

        result = parse_schedule_response(raw)

        assert [item.task for item in result] == ["A", "B", "C"]

    def test_sorts_by_clock_time_not_text(self):
        raw = schedule_json(("late", "10:00", "r"), ("early", "9:30", "r"))

        result = parse_schedule_response(raw)

        assert [item.task for item in result] == ["early", "late"]

    def test_strips_markdown_fences(self):
        raw = '```json\n{"schedule":[{"task":"A","time":"13:05","reason":"r"}]}\n```'

        result = parse_schedule_response(raw)

        assert result[0].time == "1:05 PM"

    @pytest.mark.parametrize("raw", ["", None])
    def test_empty_response(self, raw):
        with pytest.raises(NoResponseError) as exc:
            parse_schedule_response(raw)
        assert exc.value.code is ErrorKind.NO_RESPONSE
        assert exc.value.is_retryable

    def test_not_json(self):
        with pytest.raises(ParseError) as exc:
            parse_schedule_response("Sure! Here is your schedule: 9am run")
        assert exc.value.code is ErrorKind.PARSE_ERROR
        assert exc.value.is_retryable

    @pytest.mark.parametrize(
        "raw",
        [
            "{}",
            '{"schedule": "09:00 run"}',
            '[{"task": "A", "time": "09:00", "reason": "r"}]',
        ],
    )
    def test_missing_schedule_array(self, raw):
        with pytest.raises(InvalidFormatError) as exc:
            parse_schedule_response(raw)
        assert "schedule" in exc.value.message
        assert exc.value.is_retryable

    @pytest.mark.parametrize("bad_time", ["25:00", "24:15", "12:60", "noon", "9.00"])
    def test_invalid_time_rejects_whole_response(self, bad_time):
        raw = schedule_json(("A", "08:00", "r"), ("B", bad_time, "r"))

        with pytest.raises(InvalidFormatError) as exc:
            parse_schedule_response(raw)

        assert exc.value.value == bad_time
        assert bad_time in str(exc.value)

    def test_single_digit_hour_accepted(self):
        result = parse_schedule_response(schedule_json(("A", "9:00", "r")))

        assert result[0].time == "9:00 AM"

    @pytest.mark.parametrize("field", ["task", "time", "reason"])
    def test_missing_field(self, field):
        item = {"task": "A", "time": "09:00", "reason": "r"}
        del item[field]

        with pytest.raises(InvalidFormatError) as exc:
            parse_schedule_response(json.dumps({"schedule": [item]}))

        assert field in exc.value.message

    def test_empty_field(self):
        with pytest.raises(InvalidFormatError):
            parse_schedule_response(schedule_json(("A", "09:00", "")))

    def test_non_object_entry(self):
        with pytest.raises(InvalidFormatError):
            parse_schedule_response('{"schedule": ["09:00 run"]}')

    def test_empty_schedule_is_valid(self):
        assert parse_schedule_response('{"schedule": []}') == []


@pytest.mark.unit
class TestTimeConversion:
    @pytest.mark.parametrize(
        "time24,expected",
        [
            ("00:00", "12:00 AM"),
            ("00:05", "12:05 AM"),
            ("11:59", "11:59 AM"),
            ("12:00", "12:00 PM"),
            ("13:07", "1:07 PM"),
            ("23:59", "11:59 PM"),
            ("6:00", "6:00 AM"),
        ],
    )
    def test_to_12_hour(self, time24, expected):
        assert to_12_hour(time24) == expected


def test_clean_markdown_json():
    assert clean_markdown_json("```json\n{}\n```  ") == "{}"
    assert clean_markdown_json("```\n{}\n```") == "{}"
    assert clean_markdown_json('  {"a": 1}  ') == '{"a": 1}'
