"""Pytest fixtures for the IP globe tests."""

import asyncio
import logging
from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest
import requests

from ip_globe.geo import Coordinate, GeoProjector
from ip_globe.locate import LocationClient, LocationRecord

FIXED_NOW = datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc)

NEW_YORK_BODY = {
    "status": "success",
    "lat": 40.7128,
    "lon": -74.0060,
    "city": "New York",
    "country": "US",
}


def make_response(body=None, status_code=200, json_error=False):
    """Fake requests.Response with a JSON body."""
    resp = MagicMock(spec=requests.Response)
    resp.status_code = status_code
    if json_error:
        resp.json.side_effect = ValueError("Expecting value")
    else:
        resp.json.return_value = body
    return resp


def make_client(response=None, error=None, timeout=5.0):
    """LocationClient over a mocked session returning `response` or raising `error`."""
    session = MagicMock(spec=requests.Session)
    if error is not None:
        session.get.side_effect = error
    else:
        session.get.return_value = response
    return LocationClient(
        endpoint="http://geo.test/json/",
        timeout=timeout,
        session=session,
        clock=lambda: FIXED_NOW,
    )


def make_record(lat=40.7128, lon=-74.0060, city="New York", country="US"):
    return LocationRecord(Coordinate(lat, lon), city, country, FIXED_NOW)


async def settle(rounds=20):
    """Let queued callbacks and tasks run."""
    for _ in range(rounds):
        await asyncio.sleep(0)


async def wait_for(predicate, timeout=2.0):
    """Poll until predicate() is true; used where a worker thread is involved."""
    loop = asyncio.get_running_loop()
    deadline = loop.time() + timeout
    while not predicate():
        if loop.time() > deadline:
            raise AssertionError("condition not reached in time")
        await asyncio.sleep(0.01)


class FakeFetcher:
    """Async fetcher whose calls stay pending until the test resolves them."""

    def __init__(self):
        self.calls = 0
        self.pending = []

    async def __call__(self):
        self.calls += 1
        fut = asyncio.get_running_loop().create_future()
        self.pending.append(fut)
        return await fut


@pytest.fixture
def projector():
    return GeoProjector(rows=30, cols=120)


@pytest.fixture
def record():
    return make_record()


@pytest.fixture
def fake_fetcher():
    return FakeFetcher()


@pytest.fixture
def root_logger(monkeypatch):
    """Root logger whose handlers and level are restored after the test."""
    root = logging.getLogger()
    level = root.level
    monkeypatch.setattr(root, "handlers", list(root.handlers))
    yield root
    root.setLevel(level)
