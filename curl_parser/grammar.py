"""Tokenizer for ``curl ...`` command lines.

Words are split with :mod:`shlex` in POSIX mode (quotes removed, escapes
applied, no shell expansion) and then classified against the option table.
Positional words are taken as the URL only when they look like one.
A clause that cannot be classified becomes an :class:`Unrecognized` token so
the rest of a long command is still read; only input that cannot be split
into words at all raises :class:`CurlSyntaxError`.
"""

from __future__ import annotations

import io
import re
import shlex
from typing import List, NamedTuple, Optional, Tuple

from loguru import logger

from .errors import CurlSyntaxError, MalformedUrl
from .options import FILE_REFERENCE_OPTIONS, OptionRole, OptionSpec, lookup_long, lookup_short
from .tokens import (
    DataPayload,
    Flag,
    FlagWithValue,
    Header,
    Method,
    PayloadKind,
    Token,
    Unrecognized,
    UrlLiteral,
)
from .url import parse_url

CURL_CMD = "curl"

# backslash-newline continuation, as pasted from a terminal
_CONTINUATION = re.compile(r"\\[ \t]*\r?\n")

_PORT_SUFFIX = re.compile(r":[0-9]*$")

_SHELL_OPERATORS = frozenset({"|", "||", "&", "&&", ";", "<", ">", ">>", "2>", "2>&1", "&>"})


class Word(NamedTuple):
    value: str
    offset: int
    raw: str

    @property
    def quoted(self) -> bool:
        return self.raw != self.value

    @property
    def end(self) -> int:
        return self.offset + len(self.raw)


class WordStream:
    """Shell words of ``text`` with their offsets, one word of lookahead."""

    def __init__(self, text: str) -> None:
        self.text = text
        self._stream = io.StringIO(text)
        self._lexer = shlex.shlex(self._stream, posix=True)
        self._lexer.whitespace_split = True
        self._lexer.commenters = ""
        # \' and \\ are escapes inside single quotes as well as double quotes
        self._lexer.escapedquotes = "\"'"
        self._pending: Optional[Word] = None

    def peek(self) -> Optional[Word]:
        if self._pending is None:
            self._pending = self._read()
        return self._pending

    def next(self) -> Optional[Word]:
        word = self.peek()
        self._pending = None
        return word

    def _read(self) -> Optional[Word]:
        start = self._stream.tell()
        while start < len(self.text) and self.text[start] in self._lexer.whitespace:
            start += 1
        try:
            value = self._lexer.get_token()
        except ValueError as exc:
            raise CurlSyntaxError(str(exc), start, self.text[start:]) from exc
        if value is None:
            return None
        end = self._stream.tell()
        if end < len(self.text):
            # the whitespace that ended the word was consumed with it
            end -= 1
        return Word(value, start, self.text[start:end])


def _blank(match: "re.Match[str]") -> str:
    return " " * len(match.group(0))


def _is_operator(word: Word) -> bool:
    return not word.quoted and word.value in _SHELL_OPERATORS


def looks_like_url(value: str) -> bool:
    """Whether a positional word is shaped like a URL.

    True for anything with ``://``, a bracketed IPv6 host, or an authority
    that has a dot, a ``:port`` or is ``localhost``. Other positional words
    (values of options missing from the table, stray arguments) are not
    claimed as the URL.
    """
    if "://" in value or value.startswith("["):
        return True
    authority = re.split(r"[/?]", value, maxsplit=1)[0]
    host = authority.rpartition("@")[2]
    if "." in host or _PORT_SUFFIX.search(host):
        return True
    return host.partition(":")[0].lower() == "localhost"


def _first_unescaped(value: str, char: str) -> int:
    index = value.find(char)
    while index > 0 and value[index - 1] == "\\":
        index = value.find(char, index + 1)
    return index


def split_header(value: str) -> Optional[Tuple[str, str]]:
    """Split ``Name: value`` on the first unescaped colon.

    One space after the colon is dropped. ``Name:`` and curl's ``Name;``
    give an empty value. Returns ``None`` when there is no name.
    """
    index = _first_unescaped(value, ":")
    if index == -1:
        if value.endswith(";") and value[:-1].strip():
            return value[:-1].strip(), ""
        return None
    name = value[:index].strip()
    if not name:
        return None
    rest = value[index + 1:]
    if rest.startswith(" "):
        rest = rest[1:]
    return name, rest


class Grammar:
    """Classifies the words of one command into tokens."""

    def __init__(self, words: WordStream) -> None:
        self.words = words
        self.tokens: List[Token] = []
        self.url_claimed = False

    def run(self) -> Tuple[str, List[Token]]:
        while True:
            word = self.words.next()
            if word is None:
                return "", self.tokens
            if _is_operator(word):
                return self.words.text[word.offset:], self.tokens
            self.tokens.extend(self._classify(word))

    def _classify(self, word: Word) -> List[Token]:
        value = word.value
        if value.startswith("--") and len(value) > 2:
            spec = lookup_long(value)
            if spec is None:
                return [self._unrecognized(word.raw, word.offset, f"unknown option {value}")]
            return [self._apply(spec, value, word, None)]
        if value.startswith("-") and len(value) > 1:
            return self._short_cluster(word)
        if not looks_like_url(value):
            return [self._unrecognized(word.raw, word.offset, "unexpected argument")]
        return [self._claim_url(value, word.offset, word.raw)]

    def _short_cluster(self, word: Word) -> List[Token]:
        letters = word.value[1:]
        tokens: List[Token] = []
        for index, letter in enumerate(letters):
            spec = lookup_short(letter)
            if spec is None:
                return [self._unrecognized(word.raw, word.offset, f"unknown option -{letter}")]
            spelling = "-" + letter
            if not spec.takes_value:
                tokens.append(Flag(spec.name, spelling))
                continue
            tokens.append(self._apply(spec, spelling, word, letters[index + 1:] or None))
            break
        return tokens

    def _take_argument(self, spec: OptionSpec) -> Optional[Word]:
        following = self.words.peek()
        if following is None or _is_operator(following):
            return None
        if (
            spec.role is OptionRole.VALUE
            and not following.quoted
            and following.value.startswith("-")
            and len(following.value) > 1
        ):
            return None
        return self.words.next()

    def _apply(self, spec: OptionSpec, spelling: str, word: Word, attached: Optional[str]) -> Token:
        if spec.role is OptionRole.SWITCH:
            return Flag(spec.name, spelling)

        if attached is not None:
            value, offset, fragment = attached, word.offset, word.raw
        else:
            argument = self._take_argument(spec)
            if argument is None:
                return self._unrecognized(word.raw, word.offset, f"{spelling} requires a value")
            value, offset = argument.value, word.offset
            fragment = self.words.text[word.offset:argument.end]

        if spec.role is OptionRole.METHOD:
            method = value.strip()
            if not method:
                return self._unrecognized(fragment, offset, "empty request method")
            return Method(method, spelling)

        if spec.role is OptionRole.HEADER:
            header = split_header(value)
            if header is None:
                return self._unrecognized(fragment, offset, "header has no name: value separator")
            return Header(header[0], header[1], spelling)

        if spec.role is OptionRole.PAYLOAD:
            kind = spec.payload
            if spec.name in FILE_REFERENCE_OPTIONS and value.startswith("@"):
                kind = PayloadKind.FILE
            return DataPayload(kind, value, spelling)

        if spec.role is OptionRole.URL:
            return self._claim_url(value, offset, fragment, spelling)

        return FlagWithValue(spec.name, value, spelling)

    def _claim_url(self, value: str, offset: int, fragment: str, spelling: Optional[str] = None) -> Token:
        if self.url_claimed:
            return self._unrecognized(fragment, offset, "URL already given")
        try:
            url = parse_url(value)
        except MalformedUrl as exc:
            return self._unrecognized(fragment, offset, str(exc), exc)
        self.url_claimed = True
        return UrlLiteral(url, spelling)

    def _unrecognized(
        self, fragment: str, offset: int, reason: str, error: Optional[Exception] = None
    ) -> Unrecognized:
        logger.debug("curl.unrecognized offset={} fragment={!r} reason={}", offset, fragment, reason)
        return Unrecognized(fragment, offset, reason, error)


def tokenize(raw_command: str) -> Tuple[str, List[Token]]:
    """Split a curl command into tokens.

    Returns ``(remaining, tokens)``. ``remaining`` is the text from the first
    unquoted shell operator (``|``, ``;``, ``>`` ...) onward, which is not
    part of the curl invocation, or ``""``.
    """
    if not raw_command or not raw_command.strip():
        raise CurlSyntaxError("empty command", 0, raw_command or "")

    text = _CONTINUATION.sub(_blank, raw_command).rstrip()
    words = WordStream(text)

    first = words.peek()
    if first is not None and first.value.lower() == CURL_CMD:
        words.next()

    return Grammar(words).run()
