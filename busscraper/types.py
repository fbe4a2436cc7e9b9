"""Request, schedule and error types shared by the scraper."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from datetime import date, datetime, timedelta
from typing import Any, Optional

MAX_PASSENGERS = 12

_DATE_FORMATS = ("%Y-%m-%d", "%Y%m%d")
_OUTPUT_DATE_FORMAT = "%Y%m%d"


class ScraperError(Exception):
    """Base class for every error raised by the scraper."""


class ConfigError(ScraperError):
    """Invalid configuration or request parameters."""


class ParseError(ScraperError):
    """A response body could not be parsed."""


class InvalidResponseError(ScraperError):
    """The remote service answered with an unexpected response."""


class ServiceUnavailableError(ScraperError):
    """The remote service is temporarily unavailable."""


class HttpError(ScraperError):
    """The HTTP request itself failed."""


@dataclass
class PassengerCount:
    """Number of travellers in each fare category."""

    adult_men: int = 1
    adult_women: int = 0
    child_men: int = 0
    child_women: int = 0
    handicap_adult_men: int = 0
    handicap_adult_women: int = 0
    handicap_child_men: int = 0
    handicap_child_women: int = 0

    def total_male(self) -> int:
        return (
            self.adult_men
            + self.child_men
            + self.handicap_adult_men
            + self.handicap_child_men
        )

    def total_female(self) -> int:
        return (
            self.adult_women
            + self.child_women
            + self.handicap_adult_women
            + self.handicap_child_women
        )

    def total(self) -> int:
        return self.total_male() + self.total_female()

    def validate(self) -> None:
        """Raise ConfigError unless between 1 and 12 passengers are booked."""
        total = self.total()
        if total == 0:
            raise ConfigError("At least 1 passenger required")
        if total > MAX_PASSENGERS:
            raise ConfigError("Maximum 12 passengers allowed")

    def to_dict(self) -> dict[str, int]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


def _parse_date(text: str) -> date:
    last_error: Optional[ValueError] = None
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError as exc:
            last_error = exc
    raise ConfigError(
        f"Invalid date '{text}' (expected YYYY-MM-DD or YYYYMMDD): {last_error}"
    )


@dataclass
class DateRange:
    """An inclusive range of travel dates, each as YYYY-MM-DD or YYYYMMDD."""

    start: str
    end: str

    def dates(self) -> list[str]:
        """Every date in the range, formatted as YYYYMMDD."""
        start = _parse_date(self.start)
        end = _parse_date(self.end)
        if start > end:
            raise ConfigError("Start date must be before end date")

        result = []
        current = start
        while current <= end:
            result.append(current.strftime(_OUTPUT_DATE_FORMAT))
            if current == end:
                break
            try:
                current += timedelta(days=1)
            except OverflowError as exc:
                raise ConfigError("Date overflow") from exc
        return result


@dataclass
class TimeFilter:
    """Inclusive bounds on departure time, compared as HH:MM strings."""

    departure_min: Optional[str] = None
    departure_max: Optional[str] = None

    def matches(self, time: str) -> bool:
        if self.departure_min is not None and time < self.departure_min:
            return False
        if self.departure_max is not None and time > self.departure_max:
            return False
        return True


@dataclass
class ScrapeRequest:
    """Everything needed to search for buses on one route."""

    area_id: int
    route_id: int
    departure_station: str
    arrival_station: str
    date_range: DateRange
    passengers: PassengerCount = field(default_factory=PassengerCount)
    time_filter: Optional[TimeFilter] = None


@dataclass(frozen=True)
class Route:
    id: str
    name: str
    switch_changeable_flg: Optional[str] = None


@dataclass(frozen=True)
class Station:
    id: str
    name: str


@dataclass(frozen=True)
class SeatAvailability:
    """Seats are available; the remaining count is known only sometimes."""

    remaining_seats: Optional[int] = None

    def to_dict(self) -> dict[str, Any]:
        return {"status": "available", "remaining_seats": self.remaining_seats}


@dataclass
class PricingPlan:
    plan_id: int
    plan_index: int
    plan_name: str
    price: int
    display_price: str
    availability: SeatAvailability

    def to_dict(self) -> dict[str, Any]:
        return {
            "plan_id": self.plan_id,
            "plan_index": self.plan_index,
            "plan_name": self.plan_name,
            "price": self.price,
            "display_price": self.display_price,
            "availability": self.availability.to_dict(),
        }


@dataclass
class BusSchedule:
    bus_number: str
    route_name: str
    departure_station: str
    departure_date: str
    departure_time: str
    arrival_station: str
    arrival_date: str
    arrival_time: str
    way_no: int
    available_plans: list[PricingPlan] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "bus_number": self.bus_number,
            "route_name": self.route_name,
            "departure_station": self.departure_station,
            "departure_date": self.departure_date,
            "departure_time": self.departure_time,
            "arrival_station": self.arrival_station,
            "arrival_date": self.arrival_date,
            "arrival_time": self.arrival_time,
            "way_no": self.way_no,
            "available_plans": [plan.to_dict() for plan in self.available_plans],
        }