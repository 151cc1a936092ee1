"""Command-line inspector: ``curl-parser parse "curl ..."``."""

from __future__ import annotations

from typing import List, Optional

import typer

from .config import get_settings
from .errors import ParseError
from .logging_utils import configure_logging
from .request import parse as parse_command
from .view import JsonField, Part, build_json_value, error_payload, format_json, part_lines, summary_lines

app = typer.Typer(name="curl-parser", help="Parse and inspect curl commands", add_completion=False)


@app.callback()
def main() -> None:
    """Parse and inspect curl commands without running them."""


@app.command("parse")
def parse(
    command: str = typer.Argument(..., help="The input curl command string"),
    part: Optional[Part] = typer.Option(None, "--part", "-p", help="Only show one part of the command"),
    as_json: bool = typer.Option(False, "--json", help="Output the parsed result as JSON"),
    json_keys: Optional[List[JsonField]] = typer.Option(
        None, "--json-key", help="Limit JSON output to these fields (repeatable, requires --json)"
    ),
    pretty: bool = typer.Option(False, "--pretty", help="Pretty-print JSON output (requires --json)"),
) -> None:
    """Parse a curl command and print its parts."""
    settings = get_settings()
    configure_logging(settings.log_level)

    if not as_json and (json_keys or pretty):
        raise typer.BadParameter("--json-key and --pretty require --json")
    pretty = pretty or settings.pretty_json

    try:
        parsed = parse_command(command)
    except ParseError as exc:
        if as_json:
            typer.echo(format_json(error_payload(exc.code, str(exc)), pretty))
        else:
            typer.echo(f"Error parsing curl command: {exc}", err=True)
        raise typer.Exit(code=1)

    if as_json:
        typer.echo(format_json(build_json_value(parsed, part, json_keys or ()), pretty))
        return

    lines = part_lines(parsed, part) if part is not None else summary_lines(parsed)
    for line in lines:
        typer.echo(line)


if __name__ == "__main__":
    app()
