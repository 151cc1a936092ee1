"""Aggregation of a token sequence into a :class:`ParsedRequest`."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .errors import MalformedUrl, MissingUrl
from .grammar import tokenize
from .tokens import HeaderField, PayloadEntry, Token, TokenKind, Unrecognized
from .url import StructuredUrl

_GET_FLAG = "--get"
_HEAD_FLAG = "--head"


@dataclass(frozen=True)
class ParsedRequest:
    """Structured view of one curl command.

    Every field except ``url`` is derived from ``tokens``: filtering the
    tokens by kind gives back ``headers``, ``data``, ``flags`` and
    ``method``. ``method`` is ``None`` when curl would send its default GET;
    ``method_inferred`` tells an explicit ``-X`` apart from a method implied
    by payloads or ``--head``.
    """

    url: StructuredUrl
    method: Optional[str] = None
    headers: Tuple[HeaderField, ...] = ()
    data: Tuple[PayloadEntry, ...] = ()
    flags: Tuple[str, ...] = ()
    tokens: Tuple[Token, ...] = ()
    anomalies: Tuple[Unrecognized, ...] = ()
    method_inferred: bool = False

    def flag_value(self, name: str) -> Optional[str]:
        """Value of the last valued option called ``name`` (canonical or as typed)."""
        found = None
        for token in self.tokens:
            if token.kind is TokenKind.FLAG_WITH_VALUE and name in (token.name, token.spelling):
                found = token.value
        return found

    def has_flag(self, name: str) -> bool:
        return any(
            token.kind in (TokenKind.FLAG, TokenKind.FLAG_WITH_VALUE) and name in (token.name, token.spelling)
            for token in self.tokens
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "url": self.url.to_dict(),
            "method": self.method,
            "headers": [[name, value] for name, value in self.headers],
            "data": [{"kind": kind.value, "value": value} for kind, value in self.data],
            "flags": list(self.flags),
            "tokens": [token.to_dict() for token in self.tokens],
        }


def build_request(tokens: Sequence[Token]) -> ParsedRequest:
    """Fold ``tokens`` left to right into a :class:`ParsedRequest`.

    The first URL literal wins; any later one is reported in ``anomalies``.
    Raises :class:`MissingUrl` when no URL literal is present, or the URL
    error behind a rejected URL-shaped word if there was one.
    """
    url = None
    method = None
    headers: List[HeaderField] = []
    data: List[PayloadEntry] = []
    flags: List[str] = []
    anomalies: List[Unrecognized] = []
    names = set()

    for token in tokens:
        kind = token.kind
        if kind is TokenKind.URL:
            if url is None:
                url = token.url
            else:
                anomalies.append(Unrecognized(token.url.raw, reason="URL already given"))
        elif kind is TokenKind.METHOD:
            method = token.value
        elif kind is TokenKind.HEADER:
            headers.append(token.field)
        elif kind is TokenKind.DATA:
            data.append(token.entry)
        elif kind in (TokenKind.FLAG, TokenKind.FLAG_WITH_VALUE):
            flags.append(token.spelling)
            names.add(token.name)
        elif kind is TokenKind.UNRECOGNIZED:
            anomalies.append(token)
        else:
            raise TypeError(f"unknown token kind: {kind!r}")

    if url is None:
        for anomaly in anomalies:
            if isinstance(anomaly.error, MalformedUrl):
                raise anomaly.error
        raise MissingUrl()

    inferred = False
    if method is None:
        if data and _GET_FLAG not in names:
            method, inferred = "POST", True
        elif not data and _HEAD_FLAG in names:
            method, inferred = "HEAD", True

    return ParsedRequest(
        url=url,
        method=method,
        headers=tuple(headers),
        data=tuple(data),
        flags=tuple(flags),
        tokens=tuple(tokens),
        anomalies=tuple(anomalies),
        method_inferred=inferred,
    )


def parse(raw_command: str) -> ParsedRequest:
    """Parse a ``curl ...`` command line into a :class:`ParsedRequest`."""
    _, tokens = tokenize(raw_command)
    return build_request(tokens)
