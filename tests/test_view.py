import json

from curl_parser import parse
from curl_parser.view import (
    JsonField,
    Part,
    build_json_value,
    error_payload,
    format_json,
    part_lines,
    summary_lines,
)

COMMAND = "curl 'https://example.com' -H 'A:1' --data name=value --insecure"


def test_build_json_value_with_keys() -> None:
    value = build_json_value(parse(COMMAND), keys=[JsonField.URL, JsonField.HEADERS])
    assert set(value) == {"url", "headers"}
    assert value["headers"] == [["A", "1"]]


def test_build_json_value_part_overrides_keys() -> None:
    value = build_json_value(parse(COMMAND), Part.DATA, [JsonField.URL])
    assert value == [{"kind": "plain", "value": "name=value"}]


def test_build_json_value_defaults_to_everything() -> None:
    value = build_json_value(parse(COMMAND))
    assert list(value) == ["url", "method", "headers", "data", "flags", "tokens"]
    assert len(value["tokens"]) == 4


def test_format_json() -> None:
    value = {"a": [1, 2]}
    assert format_json(value) == '{"a": [1, 2]}'
    assert "\n" in format_json(value, pretty=True)
    assert json.loads(format_json(value, pretty=True)) == value


def test_error_payload() -> None:
    assert error_payload("missing_url", "missing target URL") == {
        "code": "missing_url",
        "error": "missing target URL",
    }


def test_part_lines() -> None:
    parsed = parse("curl https://example.com")
    assert part_lines(parsed, Part.METHOD) == ["(method not specified)"]
    assert part_lines(parsed, Part.HEADER) == ["(no headers)"]
    assert part_lines(parsed, Part.DATA) == ["(no data payload)"]
    assert part_lines(parsed, Part.FLAG) == ["(no flags)"]
    assert part_lines(parsed, Part.URL) == ["https://example.com"]
    assert part_lines(parse(COMMAND), Part.HEADER) == ["A: 1"]


def test_summary_lines() -> None:
    lines = summary_lines(parse("curl https://example.com --bogus"))
    assert lines == [
        "URL: https://example.com",
        "Method: (not specified)",
        "Headers: (none)",
        "Data: (none)",
        "Flags: (none)",
        "Unrecognized:",
        "  - --bogus",
    ]
