"""Parse ``curl`` command lines into structured requests without running them."""

from loguru import logger

from .errors import (
    CurlSyntaxError,
    InvalidOptionValue,
    InvalidPort,
    MalformedUrl,
    MissingUrl,
    ParseError,
    UnsupportedPayload,
)
from .export import parse_curl, prepare_request, request_kwargs
from .grammar import tokenize
from .request import ParsedRequest, build_request, parse
from .tokens import (
    DataPayload,
    Flag,
    FlagWithValue,
    Header,
    HeaderField,
    Method,
    PayloadEntry,
    PayloadKind,
    Token,
    TokenKind,
    Unrecognized,
    UrlLiteral,
)
from .url import Scheme, StructuredUrl, UserInfo, parse_url

logger.disable("curl_parser")

__all__ = [
    "CurlSyntaxError",
    "DataPayload",
    "Flag",
    "FlagWithValue",
    "Header",
    "HeaderField",
    "InvalidOptionValue",
    "InvalidPort",
    "MalformedUrl",
    "Method",
    "MissingUrl",
    "ParseError",
    "ParsedRequest",
    "PayloadEntry",
    "PayloadKind",
    "Scheme",
    "StructuredUrl",
    "Token",
    "TokenKind",
    "Unrecognized",
    "UnsupportedPayload",
    "UrlLiteral",
    "UserInfo",
    "build_request",
    "parse",
    "parse_curl",
    "parse_url",
    "prepare_request",
    "request_kwargs",
    "tokenize",
]
