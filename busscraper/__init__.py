"""Async client for a highway bus reservation site, with request and schedule types and English name translations."""

__version__ = "0.1.0"
__all__ = ["scraper", "station_names", "translations", "types"]