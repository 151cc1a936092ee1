"""Exception types raised while parsing curl commands."""

from __future__ import annotations


class ParseError(ValueError):
    """Base exception for curl command parsing."""

    code = "parse_error"


class CurlSyntaxError(ParseError):
    """Raised when the command cannot be split into words past ``offset``."""

    code = "syntax_error"

    def __init__(self, message: str, offset: int, fragment: str) -> None:
        super().__init__(f"{message} at offset {offset}: {fragment!r}")
        self.offset = offset
        self.fragment = fragment


class MalformedUrl(ParseError):
    """Raised when a URL-shaped word cannot be decomposed."""

    code = "malformed_url"

    def __init__(self, message: str, fragment: str) -> None:
        super().__init__(f"{message}: {fragment!r}")
        self.fragment = fragment


class InvalidPort(MalformedUrl):
    """Raised when a URL port is not an integer in 1-65535."""

    code = "invalid_port"

    def __init__(self, value: str) -> None:
        super().__init__("invalid port", value)
        self.value = value


class MissingUrl(ParseError):
    """Raised when the command contains no URL."""

    code = "missing_url"

    def __init__(self) -> None:
        super().__init__("missing target URL")


class UnsupportedPayload(ParseError):
    """Raised when a payload cannot be exported without reading a file."""

    code = "unsupported_payload"


class InvalidOptionValue(ParseError):
    """Raised when an option's value cannot be converted for export."""

    code = "invalid_option_value"

    def __init__(self, option: str, value: str) -> None:
        super().__init__(f"invalid value for {option}: {value!r}")
        self.option = option
        self.value = value
