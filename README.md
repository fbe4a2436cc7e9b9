# busscraper

An asyncio client for a highway bus reservation site. It looks up the
routes of an area, the departure stations of a route and the arrival
stations reachable from a departure station. It also provides data types for
bus search requests and schedules, and it translates Japanese route and
station names into English.

## Installation

```
pip install busscraper
```

With the test dependencies:

```
pip install "busscraper[test]"
```

## Looking up routes and stations

`busscraper.scraper.BusScraper` wraps an `httpx.AsyncClient` (30 second
timeout, cookies kept for the life of the client). Use it as an async
context manager, or call `aclose()` when done.

```python
import asyncio
from busscraper.scraper import BusScraper

async def main():
    async with BusScraper("https://bus.example.com") as scraper:
        routes = await scraper.fetch_routes(1)
        for route in routes:
            print(route.id, route.name, route.switch_changeable_flg)

        departures = await scraper.fetch_departure_stations("155")
        arrivals = await scraper.fetch_arrival_stations("155", departures[0].id)
        print([station.name for station in arrivals])

asyncio.run(main())
```

Each lookup is a form POST to `<base_url>/ajaxPulldown`. A reply with a
non-success HTTP status raises `InvalidResponseError`; a failed request
raises `HttpError`; a body that is not well-formed XML raises `ParseError`.

The XML parsers can be used on their own:

```python
from busscraper.scraper import parse_routes, parse_stations

parse_stations("<id>001</id><name>Test Station</name>")
# [Station(id='001', name='Test Station')]

parse_routes("<id>123</id><name>Test Route</name>")
# [Route(id='123', name='Test Route', switch_changeable_flg=None)]
```

## Requests, dates and filters

`busscraper.types` holds the data types:

```python
from busscraper.types import DateRange, PassengerCount, TimeFilter

DateRange("2025-10-29", "20251102").dates()
# ['20251029', '20251030', '20251031', '20251101', '20251102']

passengers = PassengerCount(adult_men=2, child_women=1)
passengers.validate()          # raises ConfigError unless the total is 1 to 12
passengers.total()             # 3
passengers.total_male()        # 2

TimeFilter(departure_min="08:00", departure_max="10:00").matches("09:30")  # True
```

Dates are accepted as `YYYY-MM-DD` or `YYYYMMDD`; an unparsable date or a
start after the end raises `ConfigError`.

`ScrapeRequest` bundles area, route, stations, a `DateRange`, a
`PassengerCount` and an optional `TimeFilter`. `BusSchedule`, `PricingPlan`
and `SeatAvailability` describe search results, and each has a `to_dict()`
for JSON output. `Route` and `Station` are the lookup results.

Every error is a subclass of `ScraperError`: `ConfigError`, `ParseError`,
`InvalidResponseError`, `ServiceUnavailableError` and `HttpError`.

## Translating names

```python
from busscraper.translations import ROUTE_NAMES, translate_route_name
from busscraper.station_names import STATION_NAMES, translate_station_name

translate_route_name("新宿～富士五湖線")   # 'Shinjuku - Fuji Five Lakes'
translate_station_name("河口湖駅")         # 'Kawaguchiko Station'
translate_station_name("未知の駅")         # unknown names come back unchanged
```

`ROUTE_NAMES` and `STATION_NAMES` are read-only mappings.

## What this package does not do

It does not search for or fetch bus schedules; the schedule types are
provided, but there is no client call that fills them. It has no storage of
users or tracked routes, no periodic tracking or notifications, no web
interface and no command-line tool.