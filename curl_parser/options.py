"""Curl option metadata consulted by the grammar.

Supporting a new option or alias is a change to the tables below only.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, NamedTuple, Optional

from .tokens import PayloadKind


class OptionRole(str, Enum):
    SWITCH = "switch"
    VALUE = "value"
    METHOD = "method"
    HEADER = "header"
    PAYLOAD = "payload"
    URL = "url"


class OptionSpec(NamedTuple):
    name: str
    role: OptionRole
    payload: Optional[PayloadKind] = None

    @property
    def takes_value(self) -> bool:
        return self.role is not OptionRole.SWITCH


def _payload(name: str, kind: PayloadKind) -> OptionSpec:
    return OptionSpec(name, OptionRole.PAYLOAD, kind)


_SWITCHES = [
    "--anyauth", "--append", "--basic", "--compressed", "--create-dirs", "--crlf",
    "--digest", "--disable", "--fail", "--fail-early", "--fail-with-body",
    "--ftp-pasv", "--get", "--globoff", "--head", "--help", "--http0.9",
    "--http1.0", "--http1.1", "--http2", "--http2-prior-knowledge", "--http3",
    "--ignore-content-length", "--include", "--insecure", "--ipv4", "--ipv6",
    "--junk-session-cookies", "--list-only", "--location", "--location-trusted",
    "--manual", "--negotiate", "--netrc", "--netrc-optional", "--no-alpn",
    "--no-buffer", "--no-keepalive", "--no-progress-meter", "--no-sessionid",
    "--ntlm", "--path-as-is", "--post301", "--post302", "--post303",
    "--progress-bar", "--proxy-insecure", "--raw", "--remote-header-name",
    "--remote-name", "--remote-name-all", "--retry-all-errors",
    "--retry-connrefused", "--show-error", "--silent", "--ssl", "--ssl-reqd",
    "--styled-output", "--suppress-connect-headers", "--tcp-nodelay",
    "--tlsv1", "--tlsv1.0", "--tlsv1.1", "--tlsv1.2", "--tlsv1.3",
    "--tr-encoding", "--use-ascii", "--verbose", "--version", "--xattr",
]

_VALUED = [
    "--aws-sigv4", "--cacert", "--capath", "--cert", "--cert-type", "--ciphers",
    "--config", "--connect-timeout", "--connect-to", "--continue-at", "--cookie",
    "--cookie-jar", "--doh-url", "--dump-header", "--interface", "--key",
    "--key-type", "--limit-rate", "--local-port", "--max-filesize",
    "--max-redirs", "--max-time", "--netrc-file", "--oauth2-bearer", "--output",
    "--preproxy", "--proto", "--proto-redir", "--proxy", "--proxy-user",
    "--range", "--referer", "--request-target", "--resolve", "--retry",
    "--retry-delay", "--retry-max-time", "--socks5", "--socks5-hostname",
    "--speed-limit", "--speed-time", "--time-cond", "--tls-max", "--trace",
    "--trace-ascii", "--unix-socket", "--upload-file", "--user",
    "--user-agent", "--write-out",
]

LONG_OPTIONS: Dict[str, OptionSpec] = {name: OptionSpec(name, OptionRole.SWITCH) for name in _SWITCHES}
LONG_OPTIONS.update({name: OptionSpec(name, OptionRole.VALUE) for name in _VALUED})
LONG_OPTIONS.update({
    "--request": OptionSpec("--request", OptionRole.METHOD),
    "--header": OptionSpec("--header", OptionRole.HEADER),
    "--url": OptionSpec("--url", OptionRole.URL),
    "--data": _payload("--data", PayloadKind.PLAIN),
    "--data-ascii": _payload("--data-ascii", PayloadKind.PLAIN),
    "--data-raw": _payload("--data-raw", PayloadKind.PLAIN),
    "--data-binary": _payload("--data-binary", PayloadKind.BINARY),
    "--data-urlencode": _payload("--data-urlencode", PayloadKind.URLENCODED),
    "--form": _payload("--form", PayloadKind.FORM),
    "--form-string": _payload("--form-string", PayloadKind.FORM_STRING),
    "--json": _payload("--json", PayloadKind.JSON),
})

SHORT_OPTIONS: Dict[str, str] = {
    "0": "--http1.0",
    "4": "--ipv4",
    "6": "--ipv6",
    "#": "--progress-bar",
    "a": "--append",
    "A": "--user-agent",
    "b": "--cookie",
    "B": "--use-ascii",
    "c": "--cookie-jar",
    "C": "--continue-at",
    "d": "--data",
    "D": "--dump-header",
    "e": "--referer",
    "E": "--cert",
    "f": "--fail",
    "F": "--form",
    "g": "--globoff",
    "G": "--get",
    "h": "--help",
    "H": "--header",
    "i": "--include",
    "I": "--head",
    "j": "--junk-session-cookies",
    "J": "--remote-header-name",
    "k": "--insecure",
    "K": "--config",
    "l": "--list-only",
    "L": "--location",
    "m": "--max-time",
    "M": "--manual",
    "n": "--netrc",
    "N": "--no-buffer",
    "o": "--output",
    "O": "--remote-name",
    "q": "--disable",
    "r": "--range",
    "s": "--silent",
    "S": "--show-error",
    "T": "--upload-file",
    "u": "--user",
    "U": "--proxy-user",
    "v": "--verbose",
    "V": "--version",
    "w": "--write-out",
    "x": "--proxy",
    "X": "--request",
    "Y": "--speed-limit",
    "y": "--speed-time",
    "z": "--time-cond",
}

# payload options whose "@name" values reference a file instead of literal data
FILE_REFERENCE_OPTIONS = frozenset({"--data", "--data-ascii", "--data-binary"})


def lookup_long(spelling: str) -> Optional[OptionSpec]:
    return LONG_OPTIONS.get(spelling)


def lookup_short(letter: str) -> Optional[OptionSpec]:
    name = SHORT_OPTIONS.get(letter)
    if name is None:
        return None
    return LONG_OPTIONS[name]
