"""Decomposition of URL literals found in curl commands.

Only the structure is recovered: nothing is percent-decoded, resolved or
normalised, and the query string is kept as one raw string.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from .errors import InvalidPort, MalformedUrl

_SCHEME_NAME = re.compile(r"[A-Za-z][A-Za-z0-9+.-]*")
_PORT = re.compile(r"[0-9]+")


class Scheme(str, Enum):
    HTTP = "http"
    HTTPS = "https"
    OTHER = "other"

    @classmethod
    def from_name(cls, name: str) -> "Scheme":
        lowered = name.lower()
        if lowered == "http":
            return cls.HTTP
        if lowered == "https":
            return cls.HTTPS
        return cls.OTHER


@dataclass(frozen=True)
class UserInfo:
    username: str
    password: Optional[str] = None


@dataclass(frozen=True)
class StructuredUrl:
    """A URL split into its components.

    ``scheme`` is ``None`` when the literal had no ``scheme://`` prefix;
    ``scheme_name`` keeps the prefix exactly as written so unusual protocols
    survive. ``raw`` is the literal itself and is what ``str()`` returns.
    """

    raw: str
    host: str
    scheme: Optional[Scheme] = None
    scheme_name: Optional[str] = None
    userinfo: Optional[UserInfo] = None
    port: Optional[int] = None
    path: str = "/"
    query: Optional[str] = None

    def __str__(self) -> str:
        return self.raw

    def to_dict(self) -> Dict[str, Any]:
        userinfo = None
        if self.userinfo is not None:
            userinfo = {"username": self.userinfo.username, "password": self.userinfo.password}
        return {
            "raw": self.raw,
            "scheme": self.scheme_name,
            "userinfo": userinfo,
            "host": self.host,
            "port": self.port,
            "path": self.path,
            "query": self.query,
        }


def _split_scheme(text: str):
    sep = text.find("://")
    if sep == -1:
        return None, text
    head = text[:sep]
    # "://" inside a path or query of a scheme-less URL
    if any(c in head for c in "/?"):
        return None, text
    if not _SCHEME_NAME.fullmatch(head):
        raise MalformedUrl("invalid scheme", head or text)
    return head, text[sep + 3:]


def _split_host_port(hostport: str, text: str):
    if hostport.startswith("["):
        close = hostport.find("]")
        if close == -1:
            raise MalformedUrl("unterminated IPv6 literal", hostport)
        host, after = hostport[:close + 1], hostport[close + 1:]
        if after and not after.startswith(":"):
            raise MalformedUrl("unexpected text after IPv6 literal", hostport)
        port_text = after[1:] if after else None
    else:
        host, colon, port_text = hostport.partition(":")
        if not colon:
            port_text = None

    if not host:
        raise MalformedUrl("missing host", text)

    port = None
    if port_text:
        if not _PORT.fullmatch(port_text):
            raise InvalidPort(port_text)
        port = int(port_text)
        if not 1 <= port <= 65535:
            raise InvalidPort(port_text)
    return host, port


def parse_url(text: str) -> StructuredUrl:
    """Split ``text`` into scheme, user info, host, port, path and query.

    Raises :class:`MalformedUrl` when no host can be found or the scheme is
    not a valid scheme name, and :class:`InvalidPort` when a port is present
    but is not an integer in 1-65535. An empty port (``host:/``) counts as
    no port.
    """
    literal = text.strip()
    if not literal:
        raise MalformedUrl("empty URL", text)
    if any(c.isspace() for c in literal):
        raise MalformedUrl("whitespace in URL", literal)

    scheme_name, rest = _split_scheme(literal)

    end = len(rest)
    for sep in "/?":
        index = rest.find(sep)
        if index != -1 and index < end:
            end = index
    authority, tail = rest[:end], rest[end:]

    userinfo = None
    if "@" in authority:
        info, _, authority = authority.rpartition("@")
        username, colon, password = info.partition(":")
        userinfo = UserInfo(username, password if colon else None)

    host, port = _split_host_port(authority, literal)

    path, question, query = tail.partition("?")

    return StructuredUrl(
        raw=literal,
        host=host,
        scheme=Scheme.from_name(scheme_name) if scheme_name is not None else None,
        scheme_name=scheme_name,
        userinfo=userinfo,
        port=port,
        path=path or "/",
        query=query if question else None,
    )
