"""Field selection and formatting of parse results for the front ends."""

from __future__ import annotations

import json
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional

from .request import ParsedRequest


class Part(str, Enum):
    METHOD = "method"
    HEADER = "header"
    DATA = "data"
    FLAG = "flag"
    URL = "url"


class JsonField(str, Enum):
    URL = "url"
    METHOD = "method"
    HEADERS = "headers"
    DATA = "data"
    FLAGS = "flags"
    TOKENS = "tokens"


_PART_FIELDS = {
    Part.METHOD: JsonField.METHOD,
    Part.HEADER: JsonField.HEADERS,
    Part.DATA: JsonField.DATA,
    Part.FLAG: JsonField.FLAGS,
    Part.URL: JsonField.URL,
}


def build_json_value(
    parsed: ParsedRequest, part: Optional[Part] = None, keys: Iterable[JsonField] = ()
) -> Any:
    """JSON-ready value for ``parsed``.

    A ``part`` selects one field and wins over ``keys``; ``keys`` restrict the
    object to the named fields; with neither the whole result is returned.
    """
    full = parsed.to_dict()
    if part is not None:
        return full[_PART_FIELDS[Part(part)].value]

    keys = [JsonField(key) for key in keys]
    if keys:
        return {key.value: full[key.value] for key in keys}

    return full


def format_json(value: Any, pretty: bool = False) -> str:
    if pretty:
        return json.dumps(value, indent=2, ensure_ascii=False)
    return json.dumps(value, ensure_ascii=False)


def error_payload(code: str, message: str) -> Dict[str, str]:
    return {"code": code, "error": message}


def _listing(values: Iterable[str], empty: str) -> List[str]:
    values = list(values)
    return values if values else [empty]


def part_lines(parsed: ParsedRequest, part: Part) -> List[str]:
    part = Part(part)
    if part is Part.METHOD:
        return [parsed.method or "(method not specified)"]
    if part is Part.HEADER:
        return _listing([f"{name}: {value}" for name, value in parsed.headers], "(no headers)")
    if part is Part.DATA:
        return _listing([value for _, value in parsed.data], "(no data payload)")
    if part is Part.FLAG:
        return _listing(parsed.flags, "(no flags)")
    return [str(parsed.url)]


def summary_lines(parsed: ParsedRequest) -> List[str]:
    lines = [f"URL: {parsed.url}", f"Method: {parsed.method or '(not specified)'}"]
    sections = (
        ("Headers", [f"{name}: {value}" for name, value in parsed.headers]),
        ("Data", [f"{value} ({kind.value})" for kind, value in parsed.data]),
        ("Flags", parsed.flags),
        ("Unrecognized", [anomaly.fragment for anomaly in parsed.anomalies]),
    )
    for title, values in sections:
        if not values:
            if title != "Unrecognized":
                lines.append(f"{title}: (none)")
            continue
        lines.append(f"{title}:")
        lines.extend(f"  - {value}" for value in values)
    return lines
