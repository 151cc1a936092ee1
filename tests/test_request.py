import pytest

from curl_parser import (
    CurlSyntaxError,
    InvalidPort,
    MalformedUrl,
    MissingUrl,
    PayloadKind,
    TokenKind,
    Unrecognized,
    UrlLiteral,
    build_request,
    parse,
    parse_url,
)

TEST_CURL_CMD_FULL = r"""
        curl 'http://query.sse.com.cn/commonQuery.do?jsonCallBack=jsonpCallback89469743&sqlId=COMMON_SSE_SJ_GPSJ_CJGK_MRGK_C&PRODUCT_CODE=01%2C02%2C03%2C11%2C17&type=inParams&SEARCH_DATE=2024-03-18&_=1710914422498'  \
        -H 'Accept: */*' -X 'TEST' \
        -H 'Accept-Language: en-US,en;q=0.9,zh-CN;q=0.8,zh;q=0.7' --b \
        -H 'Cache-Control: no-cache' \
        -H 'Connection: keep-alive' \
        -d 'data1:90' \
        --data 'data2:90/i9fi0sdfsdfk\\jfhaoe' \
        -H 'Cookie: gdp_user_id=gioenc-c2b256a9%2C5442%2C561b%2C9c02%2C71199e7e89g9; VISITED_MENU=%5B%228312%22%5D' \
        -H 'Pragma: no-cache' \
        -H 'Referer: http://www.sse.com.cn/'  \
        -H 'User-Agent: Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/122.0.0.0 Safari/537.36' \
        --insecure
    """


def test_full_browser_command() -> None:
    parsed = parse(TEST_CURL_CMD_FULL)
    assert parsed.url.host == "query.sse.com.cn"
    assert parsed.url.path == "/commonQuery.do"
    assert parsed.method == "TEST"
    assert not parsed.method_inferred
    assert [name for name, _ in parsed.headers] == [
        "Accept",
        "Accept-Language",
        "Cache-Control",
        "Connection",
        "Cookie",
        "Pragma",
        "Referer",
        "User-Agent",
    ]
    assert parsed.headers[6] == ("Referer", "http://www.sse.com.cn/")
    assert parsed.data == (
        (PayloadKind.PLAIN, "data1:90"),
        (PayloadKind.PLAIN, r"data2:90/i9fi0sdfsdfk\jfhaoe"),
    )
    assert parsed.flags == ("--insecure",)
    assert [anomaly.fragment for anomaly in parsed.anomalies] == ["--b"]


def test_url_matches_hand_decomposition() -> None:
    parsed = parse("curl 'https://api.example.com:8443/v1/items?page=2' --compressed")
    assert parsed.url.scheme_name == "https"
    assert parsed.url.host == "api.example.com"
    assert parsed.url.port == 8443
    assert parsed.url.path == "/v1/items"
    assert parsed.url.query == "page=2"


def test_method_inference() -> None:
    assert parse("curl https://x -d 'a=1'").method == "POST"
    assert parse("curl https://x -d 'a=1'").method_inferred
    assert parse("curl https://x").method is None
    assert parse("curl https://x -X PUT -d 'a=1'").method == "PUT"


def test_get_flag_keeps_default_method() -> None:
    assert parse("curl -G https://x -d q=1").method is None


def test_head_flag_infers_head() -> None:
    parsed = parse("curl -I https://x")
    assert parsed.method == "HEAD"
    assert parsed.method_inferred


def test_header_quoting_styles_agree() -> None:
    single = parse("curl https://x -H 'A: 1'")
    double = parse('curl https://x -H "A: 1"')
    assert single.headers == double.headers == (("A", "1"),)
    assert parse("curl https://x -H 'A:1'").headers == (("A", "1"),)


def test_headers_match_header_tokens() -> None:
    parsed = parse("curl https://x -H 'A: 1' -k -H 'A: 2' -H 'B:' --header 'C: 3'")
    assert parsed.headers == (("A", "1"), ("A", "2"), ("B", ""), ("C", "3"))
    assert tuple(token.field for token in parsed.tokens if token.kind is TokenKind.HEADER) == parsed.headers


def test_parsed_request_cannot_be_mutated() -> None:
    parsed = parse("curl https://x -H 'A: 1' -d a=1 -k")
    with pytest.raises(AttributeError):
        parsed.headers.append(("B", "2"))
    with pytest.raises(AttributeError):
        parsed.flags.append("--compressed")
    with pytest.raises(AttributeError):
        parsed.headers = ()
    assert tuple(token.field for token in parsed.tokens if token.kind is TokenKind.HEADER) == parsed.headers


def test_unknown_valued_option_does_not_take_the_url() -> None:
    parsed = parse("curl --keepalive-time 60 https://api.example.com/v1")
    assert parsed.url.host == "api.example.com"
    assert [anomaly.fragment for anomaly in parsed.anomalies] == ["--keepalive-time", "60"]


def test_flags_and_values() -> None:
    parsed = parse("curl https://x --insecure --retry 3")
    assert parsed.flags == ("--insecure", "--retry")
    retry = [token for token in parsed.tokens if token.kind is TokenKind.FLAG_WITH_VALUE]
    assert [(token.name, token.value) for token in retry] == [("--retry", "3")]
    assert parsed.flag_value("--retry") == "3"
    assert parsed.has_flag("--insecure")
    assert not parsed.has_flag("--location")


def test_flags_keep_spelling() -> None:
    parsed = parse("curl -k -L https://x -m 10")
    assert parsed.flags == ("-k", "-L", "-m")
    assert parsed.has_flag("--insecure")
    assert parsed.flag_value("--max-time") == "10"
    assert parsed.flag_value("-m") == "10"


def test_payload_variants() -> None:
    assert parse("curl https://x --data-binary @file.json").data == (("binary-file", "@file.json"),)
    assert parse("curl https://x --form name=value").data == ((PayloadKind.FORM, "name=value"),)


def test_missing_url() -> None:
    with pytest.raises(MissingUrl):
        parse("curl")
    with pytest.raises(MissingUrl):
        parse("curl -k -H 'A: 1'")


def test_unterminated_quote() -> None:
    with pytest.raises(CurlSyntaxError):
        parse("curl https://x -H 'A:1")


def test_url_errors_surface_when_no_url() -> None:
    with pytest.raises(InvalidPort):
        parse("curl http://example.com:99999")
    with pytest.raises(MalformedUrl):
        parse("curl 'http://'")


def test_second_url_is_an_anomaly() -> None:
    parsed = parse("curl https://first.example https://second.example")
    assert parsed.url.host == "first.example"
    assert [anomaly.fragment for anomaly in parsed.anomalies] == ["https://second.example"]


def test_build_request_keeps_first_url() -> None:
    first = UrlLiteral(parse_url("https://one.example"))
    second = UrlLiteral(parse_url("https://two.example"))
    parsed = build_request([first, second])
    assert parsed.url.host == "one.example"
    assert parsed.tokens == (first, second)
    assert parsed.anomalies == (Unrecognized("https://two.example", reason="URL already given"),)


def test_build_request_without_tokens() -> None:
    with pytest.raises(MissingUrl):
        build_request([])


def test_parses_are_independent() -> None:
    first = parse("curl https://a -H 'A: 1'")
    second = parse("curl https://b")
    assert first.headers == (("A", "1"),)
    assert second.headers == ()


def test_to_dict() -> None:
    value = parse("curl https://x -H 'A: 1' -d a=1 -k").to_dict()
    assert value["url"]["host"] == "x"
    assert value["method"] == "POST"
    assert value["headers"] == [["A", "1"]]
    assert value["data"] == [{"kind": "plain", "value": "a=1"}]
    assert value["flags"] == ["-k"]
    assert [token["kind"] for token in value["tokens"]] == ["url", "header", "data", "flag"]
