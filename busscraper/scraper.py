"""HTTP client for the bus reservation site and parsers for its XML replies."""

from __future__ import annotations

import asyncio
import logging
import re
import xml.etree.ElementTree as ET
from collections.abc import Iterator, Mapping
from typing import Optional

import httpx

from busscraper.types import (
    HttpError,
    InvalidResponseError,
    ParseError,
    Route,
    ServiceUnavailableError,
    Station,
)

logger = logging.getLogger(__name__)

MAX_RETRIES = 3
RETRY_DELAY_SECONDS = 1.0
REQUEST_TIMEOUT_SECONDS = 30.0
USER_AGENT = "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36"

_XML_DECLARATION = re.compile(r"^\s*<\?xml[^>]*\?>")


class BusScraper:
    """Asynchronous client for the pull-down lookup endpoints of the site."""

    def __init__(self, base_url: str) -> None:
        self._base_url = base_url
        self._client = httpx.AsyncClient(
            timeout=REQUEST_TIMEOUT_SECONDS,
            follow_redirects=True,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    async def fetch_routes(self, area_id: int) -> list[Route]:
        """Routes offered in the given area."""
        xml = await self._fetch_with_retry(
            self._pulldown_url(),
            {"mode": "line:full", "id": str(area_id), "lang": "EN"},
        )
        return parse_routes(xml)

    async def fetch_departure_stations(self, route_id: str) -> list[Station]:
        """Stations where passengers may board the given route."""
        xml = await self._fetch_with_retry(
            self._pulldown_url(),
            {"mode": "station_geton", "id": route_id, "lang": "EN"},
        )
        return parse_stations(xml)

    async def fetch_arrival_stations(
        self, route_id: str, departure_station: str
    ) -> list[Station]:
        """Stations reachable on the route from the given departure station."""
        xml = await self._fetch_with_retry(
            self._pulldown_url(),
            {
                "mode": "station_getoff",
                "id": route_id,
                "stationcd": departure_station,
                "lang": "EN",
            },
        )
        return parse_stations(xml)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "BusScraper":
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.aclose()

    def _pulldown_url(self) -> str:
        return f"{self._base_url}/ajaxPulldown"

    async def _fetch_with_retry(self, url: str, params: Mapping[str, str]) -> str:
        attempts = 0
        while True:
            attempts += 1
            try:
                return await self._fetch_data(url, params)
            except ServiceUnavailableError:
                if attempts >= MAX_RETRIES:
                    raise
                delay = RETRY_DELAY_SECONDS * attempts
                logger.warning(
                    "Service unavailable (attempt %d/%d), retrying in %dms",
                    attempts,
                    MAX_RETRIES,
                    int(delay * 1000),
                )
                await asyncio.sleep(delay)

    async def _fetch_data(self, url: str, params: Mapping[str, str]) -> str:
        try:
            response = await self._client.post(
                url,
                headers={
                    "User-Agent": USER_AGENT,
                    "Referer": f"{self._base_url}/index",
                },
                data=dict(params),
            )
        except httpx.HTTPError as exc:
            raise HttpError(str(exc)) from exc

        if not response.is_success:
            raise InvalidResponseError(
                f"HTTP {response.status_code} {response.reason_phrase} for url={url}"
            )

        body = response.text
        logger.debug("Response body: %s", body)
        return body


def _element_texts(xml: str) -> Iterator[tuple[str, str]]:
    """Yield (tag, leading text) for every element, in document order.

    The replies are fragments that may lack a single root element, so the
    body is wrapped in one before parsing.
    """
    body = _XML_DECLARATION.sub("", xml, count=1)
    try:
        root = ET.fromstring(f"<document>{body}</document>")
    except ET.ParseError as exc:
        raise ParseError(f"XML error: {exc}") from exc
    for element in root.iter():
        if element is root:
            continue
        yield element.tag, (element.text or "").strip()


def parse_routes(xml: str) -> list[Route]:
    """Parse a sequence of id/name/switchChangeableFlg elements into routes."""
    routes: list[Route] = []
    current_id: Optional[str] = None
    current_name: Optional[str] = None
    current_flag: Optional[str] = None

    for tag, text in _element_texts(xml):
        if tag == "id":
            route_id, name = current_id, current_name
            current_id = current_name = None
            if route_id is not None and name is not None:
                routes.append(Route(route_id, name, current_flag))
                current_flag = None
            current_id = text
        elif tag == "name":
            current_name = text
        elif tag == "switchChangeableFlg":
            current_flag = text

    if current_id is not None and current_name is not None:
        routes.append(Route(current_id, current_name, current_flag))
    return routes


def parse_stations(xml: str) -> list[Station]:
    """Parse a sequence of id/name elements into stations."""
    stations: list[Station] = []
    current_id: Optional[str] = None
    current_name: Optional[str] = None

    for tag, text in _element_texts(xml):
        if tag == "id":
            station_id, name = current_id, current_name
            current_id = current_name = None
            if station_id is not None and name is not None:
                stations.append(Station(station_id, name))
            current_id = text
        elif tag == "name":
            current_name = text

    if current_id is not None and current_name is not None:
        stations.append(Station(current_id, current_name))
    return stations