"""Tokens produced by the curl command grammar.

Each token class is an immutable variant tagged with a ``kind`` class
attribute. Consumers dispatch on ``token.kind`` rather than on the class.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Dict, NamedTuple, Optional, Union

from .url import StructuredUrl


class TokenKind(str, Enum):
    URL = "url"
    HEADER = "header"
    METHOD = "method"
    DATA = "data"
    FLAG = "flag"
    FLAG_WITH_VALUE = "flag_with_value"
    UNRECOGNIZED = "unrecognized"


class PayloadKind(str, Enum):
    PLAIN = "plain"
    BINARY = "binary"
    URLENCODED = "urlencoded"
    FILE = "binary-file"
    FORM = "form"
    FORM_STRING = "form-string"
    JSON = "json"


class HeaderField(NamedTuple):
    name: str
    value: str


class PayloadEntry(NamedTuple):
    kind: PayloadKind
    value: str


@dataclass(frozen=True)
class UrlLiteral:
    kind: ClassVar[TokenKind] = TokenKind.URL

    url: StructuredUrl
    spelling: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind.value, "url": self.url.to_dict()}


@dataclass(frozen=True)
class Header:
    kind: ClassVar[TokenKind] = TokenKind.HEADER

    name: str
    value: str
    spelling: str = "--header"

    @property
    def field(self) -> HeaderField:
        return HeaderField(self.name, self.value)

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind.value, "name": self.name, "value": self.value}


@dataclass(frozen=True)
class Method:
    kind: ClassVar[TokenKind] = TokenKind.METHOD

    value: str
    spelling: str = "--request"

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind.value, "value": self.value}


@dataclass(frozen=True)
class DataPayload:
    kind: ClassVar[TokenKind] = TokenKind.DATA

    payload: PayloadKind
    value: str
    spelling: str = "--data"

    @property
    def entry(self) -> PayloadEntry:
        return PayloadEntry(self.payload, self.value)

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind.value, "payload": self.payload.value, "value": self.value}


@dataclass(frozen=True)
class Flag:
    kind: ClassVar[TokenKind] = TokenKind.FLAG

    name: str
    spelling: str

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind.value, "name": self.name, "spelling": self.spelling}


@dataclass(frozen=True)
class FlagWithValue:
    kind: ClassVar[TokenKind] = TokenKind.FLAG_WITH_VALUE

    name: str
    value: str
    spelling: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "name": self.name,
            "spelling": self.spelling,
            "value": self.value,
        }


@dataclass(frozen=True)
class Unrecognized:
    """Text the grammar tolerated but could not classify."""

    kind: ClassVar[TokenKind] = TokenKind.UNRECOGNIZED

    fragment: str
    offset: int = -1
    reason: str = ""
    error: Optional[Exception] = field(default=None, compare=False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "fragment": self.fragment,
            "offset": self.offset,
            "reason": self.reason,
        }


Token = Union[UrlLiteral, Header, Method, DataPayload, Flag, FlagWithValue, Unrecognized]
