#!/usr/bin/env python3
# ip_globe/locate.py
"""
IP geolocation client.

One GET per call against an ip-api style endpoint, bounded by a timeout.
No retries, no state between calls beyond the pooled HTTP session.
Failures are classified as network, parse, or provider errors so the
session can report them without crashing.
"""

from __future__ import annotations

import asyncio
import logging
import math
import threading
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ip_globe.geo import Coordinate

log = logging.getLogger(__name__)

DEFAULT_ENDPOINT = "http://ip-api.com/json/"
DEFAULT_TIMEOUT_S = 5.0
UNKNOWN = "Unknown"

__all__ = [
    "LocationClient",
    "LocationRecord",
    "LocationError",
    "NetworkError",
    "ParseError",
    "ProviderError",
    "DEFAULT_ENDPOINT",
]


# -------------------------
# Errors
# -------------------------

class LocationError(Exception):
    """Base for every fetch failure. Never fatal to the session."""
    kind = "location"


class NetworkError(LocationError):
    """Connection, DNS or timeout failure."""
    kind = "network"


class ParseError(LocationError):
    """Response arrived but required fields are missing or malformed."""
    kind = "parse"


class ProviderError(LocationError):
    """Provider rejected or rate-limited the request."""
    kind = "provider"


# -------------------------
# Record
# -------------------------

@dataclass(frozen=True)
class LocationRecord:
    coordinate: Coordinate
    city: str
    country: str
    fetched_at: datetime

    @property
    def lat(self) -> float:
        return self.coordinate.lat

    @property
    def lon(self) -> float:
        return self.coordinate.lon


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _number(body: Dict[str, Any], key: str) -> float:
    if key not in body or body[key] is None:
        raise ParseError(f"missing field {key!r}")
    v = body[key]
    # bool is an int subclass; "lat": true is not a latitude
    if isinstance(v, bool) or not isinstance(v, (int, float)):
        raise ParseError(f"field {key!r} is not a number: {v!r}")
    v = float(v)
    if not math.isfinite(v):
        raise ParseError(f"field {key!r} is not finite")
    return v


def _text(body: Dict[str, Any], key: str) -> str:
    v = body.get(key)
    if v is None:
        return UNKNOWN
    if not isinstance(v, str):
        raise ParseError(f"field {key!r} is not text: {v!r}")
    v = v.strip()
    return v or UNKNOWN


def parse_location(body: Any, fetched_at: datetime) -> LocationRecord:
    """Turn a decoded JSON body into a LocationRecord or raise."""
    if not isinstance(body, dict):
        raise ParseError(f"expected a JSON object, got {type(body).__name__}")

    status = body.get("status")
    if status is not None and status != "success":
        msg = body.get("message") or "request rejected"
        raise ProviderError(f"provider returned {status}: {msg}")

    lat = _number(body, "lat")
    lon = _number(body, "lon")
    coord = Coordinate(lat, lon)
    if not coord.in_range():
        raise ParseError(f"coordinate out of range: ({lat}, {lon})")

    return LocationRecord(
        coordinate=coord,
        city=_text(body, "city"),
        country=_text(body, "country"),
        fetched_at=fetched_at,
    )


# -------------------------
# Client
# -------------------------

class LocationClient:
    """
    Geolocation lookup for the current public IP.

    fetch() blocks for at most `timeout` seconds per phase (connect, read).
    fetch_async() runs the same call on the loop's executor.
    """

    def __init__(
        self,
        endpoint: str = DEFAULT_ENDPOINT,
        timeout: float = DEFAULT_TIMEOUT_S,
        user_agent: str = "ip-globe/1.0",
        session: Optional[requests.Session] = None,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self.endpoint = endpoint
        self.timeout = float(timeout)
        self.clock = clock

        if session is None:
            session = requests.Session()
            session.headers["User-Agent"] = user_agent
            # Retries are the caller's call, never ours.
            adapter = HTTPAdapter(max_retries=Retry(total=0, raise_on_status=False))
            session.mount("http://", adapter)
            session.mount("https://", adapter)
        self.session = session

    def fetch(self) -> LocationRecord:
        log.debug("GET %s", self.endpoint)
        try:
            r = self.session.get(self.endpoint, timeout=(self.timeout, self.timeout))
        except requests.Timeout as e:
            raise NetworkError(f"timed out after {self.timeout:g}s") from e
        except requests.ConnectionError as e:
            raise NetworkError(f"connection failed: {e}") from e
        except requests.RequestException as e:
            raise NetworkError(f"request failed: {e}") from e

        if r.status_code == 429:
            raise ProviderError("rate limited by provider (HTTP 429)")
        if not 200 <= r.status_code < 300:
            raise ProviderError(f"provider returned HTTP {r.status_code}")

        try:
            body = r.json()
        except ValueError as e:
            raise ParseError("response is not valid JSON") from e

        record = parse_location(body, self.clock())
        log.info(
            "Located %s, %s at %.4f,%.4f",
            record.city, record.country, record.lat, record.lon,
        )
        return record

    async def fetch_async(self) -> LocationRecord:
        """
        Run fetch() on a daemon thread and await its outcome.

        Cancelling the awaiting task abandons the request: the thread runs to
        its own timeout and the result is dropped. Nothing joins the thread,
        so quitting never waits on the network.
        """
        loop = asyncio.get_running_loop()
        fut: asyncio.Future = loop.create_future()

        def _settle(result: Any, exc: Optional[BaseException]) -> None:
            if fut.done():
                return
            if exc is not None:
                fut.set_exception(exc)
            else:
                fut.set_result(result)

        def _work() -> None:
            result, exc = None, None
            try:
                result = self.fetch()
            except Exception as e:
                exc = e
            try:
                loop.call_soon_threadsafe(_settle, result, exc)
            except RuntimeError:
                log.debug("Event loop closed before fetch finished; result dropped")

        threading.Thread(target=_work, name="ip-globe-fetch", daemon=True).start()
        return await fut

    def close(self) -> None:
        self.session.close()
