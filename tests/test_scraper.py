from urllib.parse import parse_qs

import httpx
import pytest
import respx

from busscraper.scraper import USER_AGENT, BusScraper, parse_routes, parse_stations
from busscraper.types import HttpError, InvalidResponseError, ParseError, Route, Station

BASE = "https://example.com"


def _form(request: httpx.Request) -> dict[str, list[str]]:
    return parse_qs(request.content.decode())


# === parse_routes ===


def test_parse_routes_valid_xml():
    xml = """<?xml version="1.0" encoding="UTF-8"?>
<routes>
    <id>110</id>
    <name>新宿～富士五湖線</name>
    <switchChangeableFlg>1</switchChangeableFlg>
    <id>155</id>
    <name>新宿～上高地線</name>
    <switchChangeableFlg>0</switchChangeableFlg>
</routes>"""
    routes = parse_routes(xml)
    assert routes == [
        Route("110", "新宿～富士五湖線", "1"),
        Route("155", "新宿～上高地線", "0"),
    ]


def test_parse_routes_without_flag():
    xml = """<?xml version="1.0" encoding="UTF-8"?>
<routes>
    <id>200</id>
    <name>名古屋～福岡線</name>
</routes>"""
    routes = parse_routes(xml)
    assert len(routes) == 1
    assert routes[0].id == "200"
    assert routes[0].name == "名古屋～福岡線"
    assert routes[0].switch_changeable_flg is None


def test_parse_routes_empty_xml():
    xml = '<?xml version="1.0" encoding="UTF-8"?><routes></routes>'
    assert parse_routes(xml) == []


def test_parse_routes_single_route():
    routes = parse_routes("<id>123</id><name>Test Route</name>")
    assert len(routes) == 1
    assert routes[0].id == "123"
    assert routes[0].name == "Test Route"


def test_parse_routes_with_unicode():
    routes = parse_routes("<id>123</id><name>日本語ルート名 テスト</name>")
    assert len(routes) == 1
    assert routes[0].name == "日本語ルート名 テスト"


def test_parse_routes_malformed_raises_parse_error():
    with pytest.raises(ParseError):
        parse_routes("<id>1</name>")


# === parse_stations ===


def test_parse_stations_valid_xml():
    xml = """<?xml version="1.0" encoding="UTF-8"?>
<stations>
    <id>001</id>
    <name>バスタ新宿（南口）</name>
    <id>064</id>
    <name>河口湖駅</name>
    <id>498</id>
    <name>上高地バスターミナル</name>
</stations>"""
    stations = parse_stations(xml)
    assert stations == [
        Station("001", "バスタ新宿（南口）"),
        Station("064", "河口湖駅"),
        Station("498", "上高地バスターミナル"),
    ]


def test_parse_stations_empty_xml():
    xml = '<?xml version="1.0" encoding="UTF-8"?><stations></stations>'
    assert parse_stations(xml) == []


def test_parse_stations_single_station():
    stations = parse_stations("<id>001</id><name>Test Station</name>")
    assert stations == [Station("001", "Test Station")]


def test_parse_stations_with_unicode():
    stations = parse_stations("<id>001</id><name>東京駅 八重洲口</name>")
    assert len(stations) == 1
    assert stations[0].name == "東京駅 八重洲口"


# === element text handling ===


def test_text_with_special_chars_is_unescaped():
    stations = parse_stations(
        "<id>1</id><name>Test &amp; Special &lt;chars&gt;</name>"
    )
    assert stations[0].name == "Test & Special <chars>"


def test_text_is_trimmed():
    stations = parse_stations("<id>  7 </id><name>\n  Hello World  \n</name>")
    assert stations == [Station("7", "Hello World")]


def test_empty_element_gives_empty_text():
    stations = parse_stations("<id>1</id><name></name>")
    assert stations == [Station("1", "")]


def test_stations_without_name_are_dropped():
    stations = parse_stations("<id>1</id><id>2</id><name>Two</name>")
    assert stations == [Station("2", "Two")]


# === BusScraper ===


@pytest.mark.asyncio
async def test_bus_scraper_stores_base_url():
    async with BusScraper("https://test.example.com") as scraper:
        assert scraper.base_url == "https://test.example.com"


@pytest.mark.asyncio
async def test_fetch_routes_posts_form_and_parses():
    xml = (
        '<?xml version="1.0" encoding="UTF-8"?>'
        "<id>155</id><name>新宿～上高地線</name>"
        "<switchChangeableFlg>0</switchChangeableFlg>"
        "<id>160</id><name>東京～大阪線</name>"
    )
    with respx.mock(base_url=BASE) as mock:
        route = mock.post("/ajaxPulldown").mock(
            return_value=httpx.Response(200, text=xml)
        )
        async with BusScraper(BASE) as scraper:
            routes = await scraper.fetch_routes(1)

    assert routes == [
        Route("155", "新宿～上高地線", "0"),
        Route("160", "東京～大阪線", None),
    ]
    request = route.calls.last.request
    assert _form(request) == {"mode": ["line:full"], "id": ["1"], "lang": ["EN"]}
    assert request.headers["Referer"] == f"{BASE}/index"
    assert request.headers["User-Agent"] == USER_AGENT


@pytest.mark.asyncio
async def test_fetch_departure_stations():
    xml = "<id>001</id><name>バスタ新宿（南口）</name><id>002</id><name>渋谷</name>"
    with respx.mock(base_url=BASE) as mock:
        route = mock.post("/ajaxPulldown").mock(
            return_value=httpx.Response(200, text=xml)
        )
        async with BusScraper(BASE) as scraper:
            stations = await scraper.fetch_departure_stations("155")

    assert stations == [Station("001", "バスタ新宿（南口）"), Station("002", "渋谷")]
    assert _form(route.calls.last.request) == {
        "mode": ["station_geton"],
        "id": ["155"],
        "lang": ["EN"],
    }


@pytest.mark.asyncio
async def test_fetch_arrival_stations():
    xml = "<id>498</id><name>上高地バスターミナル</name>"
    with respx.mock(base_url=BASE) as mock:
        route = mock.post("/ajaxPulldown").mock(
            return_value=httpx.Response(200, text=xml)
        )
        async with BusScraper(BASE) as scraper:
            stations = await scraper.fetch_arrival_stations("155", "001")

    assert stations == [Station("498", "上高地バスターミナル")]
    assert _form(route.calls.last.request) == {
        "mode": ["station_getoff"],
        "id": ["155"],
        "stationcd": ["001"],
        "lang": ["EN"],
    }


@pytest.mark.asyncio
async def test_fetch_empty_response():
    xml = '<?xml version="1.0" encoding="UTF-8"?><stations></stations>'
    with respx.mock(base_url=BASE) as mock:
        mock.post("/ajaxPulldown").mock(return_value=httpx.Response(200, text=xml))
        async with BusScraper(BASE) as scraper:
            stations = await scraper.fetch_departure_stations("999")
    assert stations == []


@pytest.mark.asyncio
@pytest.mark.parametrize("status", [404, 500, 503])
async def test_fetch_error_status_raises_invalid_response(status):
    with respx.mock(base_url=BASE) as mock:
        route = mock.post("/ajaxPulldown").mock(return_value=httpx.Response(status))
        async with BusScraper(BASE) as scraper:
            with pytest.raises(InvalidResponseError, match=f"HTTP {status}"):
                await scraper.fetch_routes(1)
    assert route.call_count == 1


@pytest.mark.asyncio
async def test_fetch_connection_error_raises_http_error():
    with respx.mock(base_url=BASE) as mock:
        mock.post("/ajaxPulldown").mock(side_effect=httpx.ConnectError("refused"))
        async with BusScraper(BASE) as scraper:
            with pytest.raises(HttpError):
                await scraper.fetch_routes(1)


@pytest.mark.asyncio
async def test_fetch_malformed_body_raises_parse_error():
    with respx.mock(base_url=BASE) as mock:
        mock.post("/ajaxPulldown").mock(
            return_value=httpx.Response(200, text="<id>1</name>")
        )
        async with BusScraper(BASE) as scraper:
            with pytest.raises(ParseError):
                await scraper.fetch_routes(1)