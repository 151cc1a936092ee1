"""Conversion of parsed curl commands into ``requests`` arguments.

Nothing here sends a request or reads a file: ``@file`` payloads are refused
with :class:`UnsupportedPayload` instead.
"""

from __future__ import annotations

import json
from http.cookies import SimpleCookie
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import requests
from loguru import logger

from .errors import InvalidOptionValue, UnsupportedPayload
from .request import ParsedRequest, parse
from .tokens import PayloadKind

DEFAULT_TIMEOUT = 30.0

# requests computes these itself
_MANAGED_HEADERS = ("host", "content-length", "transfer-encoding")


def _urlencode(value: str) -> str:
    name, eq, content = value.partition("=")
    if eq:
        encoded = quote(content, safe="")
        return f"{name}={encoded}" if name else encoded
    if "@" in value:
        raise UnsupportedPayload(f"file uploads are not supported: {value}")
    return quote(value, safe="")


def _cookies(raw: Optional[str]) -> Dict[str, str]:
    if not raw:
        return {}
    if "=" not in raw:
        # "-b file" names a cookie file
        logger.debug("curl.export cookie file ignored name={}", raw)
        return {}
    return {name: morsel.value for name, morsel in SimpleCookie(raw).items()}


def _full_url(parsed: ParsedRequest) -> str:
    url = parsed.url.raw
    if parsed.url.scheme is None:
        url = "http://" + url
    return url


def request_kwargs(parsed: ParsedRequest) -> Dict[str, Any]:
    """Keyword arguments for :func:`requests.request` equivalent to ``parsed``.

    Supported:
      -X / --request METHOD (upper-cased, GET when absent)
      -H / --header (Host, Content-Length, Transfer-Encoding dropped)
      -d / --data / --data-raw / --data-binary / --data-urlencode, joined with "&"
      --json '{...}'
      -F / --form name=value, sent form-encoded (no file uploads)
      -G / --get, payloads moved into the query string
      -u / --user user:pass (Basic)
      -k / --insecure (verify=False)
      -L / --location (allow_redirects)
      -b / --cookie "a=1; b=2"
      -x / --proxy URL
      -A / --user-agent, -e / --referer
      -m / --max-time SEC (timeout)
    """
    headers: Dict[str, str] = {}
    for name, value in parsed.headers:
        if name.lower() in _MANAGED_HEADERS:
            continue
        headers[name] = value

    data_parts: List[str] = []
    json_parts: List[str] = []
    for kind, value in parsed.data:
        if kind is PayloadKind.FILE:
            raise UnsupportedPayload(f"file payloads are not read: {value}")
        if kind is PayloadKind.JSON:
            if value.startswith("@"):
                raise UnsupportedPayload(f"file payloads are not read: {value}")
            json_parts.append(value)
        elif kind is PayloadKind.URLENCODED:
            data_parts.append(_urlencode(value))
        elif kind in (PayloadKind.FORM, PayloadKind.FORM_STRING):
            if kind is PayloadKind.FORM and ("=@" in value or "=<" in value):
                raise UnsupportedPayload(f"file uploads are not supported: {value}")
            data_parts.append(value)
            headers.setdefault("Content-Type", "application/x-www-form-urlencoded")
        else:
            data_parts.append(value)

    json_payload = None
    if json_parts:
        try:
            json_payload = json.loads("".join(json_parts))
        except ValueError as exc:
            raise UnsupportedPayload(f"invalid JSON payload: {exc}") from exc
        headers.setdefault("Content-Type", "application/json")
        headers.setdefault("Accept", "application/json")

    user_agent = parsed.flag_value("--user-agent")
    if user_agent is not None:
        headers.setdefault("User-Agent", user_agent)
    referer = parsed.flag_value("--referer")
    if referer is not None:
        headers.setdefault("Referer", referer)

    url = _full_url(parsed)
    data = "&".join(data_parts) if data_parts else None
    if data is not None and parsed.has_flag("--get"):
        url = url + ("&" if parsed.url.query is not None else "?") + data
        data = None

    auth = None
    user = parsed.flag_value("--user")
    if user is not None:
        name, _, password = user.partition(":")
        auth = (name, password)

    proxies = None
    proxy = parsed.flag_value("--proxy")
    if proxy is not None:
        proxies = {"http": proxy, "https": proxy}

    max_time = parsed.flag_value("--max-time")
    timeout = DEFAULT_TIMEOUT
    if max_time is not None:
        try:
            timeout = float(max_time)
        except ValueError as exc:
            raise InvalidOptionValue("--max-time", max_time) from exc

    return {
        "method": (parsed.method or "GET").upper(),
        "url": url,
        "headers": headers,
        "data": data,
        "json": json_payload,
        "auth": auth,
        "verify": not parsed.has_flag("--insecure"),
        "timeout": timeout,
        "allow_redirects": parsed.has_flag("--location") or parsed.has_flag("--location-trusted"),
        "proxies": proxies,
        "cookies": _cookies(parsed.flag_value("--cookie")),
    }


def prepare_request(parsed: ParsedRequest) -> requests.PreparedRequest:
    """Build, but do not send, the request ``parsed`` describes."""
    kwargs = request_kwargs(parsed)
    request = requests.Request(
        method=kwargs["method"],
        url=kwargs["url"],
        headers=kwargs["headers"],
        data=kwargs["data"],
        json=kwargs["json"],
        auth=kwargs["auth"],
        cookies=kwargs["cookies"],
    )
    return request.prepare()


def parse_curl(curl_cmd: str) -> Dict[str, Any]:
    """Parse a curl command straight into :func:`requests.request` arguments."""
    return request_kwargs(parse(curl_cmd))
