"""Tests for the IP geolocation client."""

import asyncio

import pytest
import requests

from conftest import FIXED_NOW, NEW_YORK_BODY, make_client, make_response
from ip_globe.geo import Coordinate
from ip_globe.locate import (
    LocationClient,
    LocationError,
    NetworkError,
    ParseError,
    ProviderError,
    parse_location,
)


class TestFetchSuccess:
    """Tests for well-formed responses."""

    def test_returns_record(self):
        """A complete body becomes a LocationRecord with the fetch time."""
        client = make_client(make_response(NEW_YORK_BODY))
        rec = client.fetch()
        assert rec.coordinate == Coordinate(40.7128, -74.0060)
        assert rec.city == "New York"
        assert rec.country == "US"
        assert rec.fetched_at == FIXED_NOW

    def test_single_get_with_timeout(self):
        """One GET to the endpoint, bounded by the configured timeout."""
        client = make_client(make_response(NEW_YORK_BODY), timeout=2.5)
        client.fetch()
        client.session.get.assert_called_once_with("http://geo.test/json/", timeout=(2.5, 2.5))

    def test_body_without_status_field(self):
        """Providers that omit `status` are accepted."""
        body = {k: v for k, v in NEW_YORK_BODY.items() if k != "status"}
        rec = make_client(make_response(body)).fetch()
        assert rec.city == "New York"

    def test_missing_city_and_country_default_to_unknown(self):
        body = {"status": "success", "lat": 1.0, "lon": 2.0}
        rec = make_client(make_response(body)).fetch()
        assert rec.city == "Unknown"
        assert rec.country == "Unknown"

    def test_null_city(self):
        body = dict(NEW_YORK_BODY, city=None)
        assert make_client(make_response(body)).fetch().city == "Unknown"

    def test_integer_coordinates(self):
        body = dict(NEW_YORK_BODY, lat=10, lon=-20)
        rec = make_client(make_response(body)).fetch()
        assert rec.coordinate == Coordinate(10.0, -20.0)

    def test_boundary_coordinates_accepted(self):
        body = dict(NEW_YORK_BODY, lat=-90.0, lon=180.0)
        rec = make_client(make_response(body)).fetch()
        assert rec.coordinate == Coordinate(-90.0, 180.0)

    def test_repeated_calls_are_independent(self):
        """Each call issues its own request and returns a fresh record."""
        client = make_client(make_response(NEW_YORK_BODY))
        a = client.fetch()
        b = client.fetch()
        assert a == b
        assert client.session.get.call_count == 2

    def test_record_is_immutable(self):
        rec = make_client(make_response(NEW_YORK_BODY)).fetch()
        with pytest.raises(AttributeError):
            rec.city = "Boston"


class TestNetworkErrors:
    """Transport failures become NetworkError."""

    def test_timeout(self):
        client = make_client(error=requests.Timeout("read timed out"))
        with pytest.raises(NetworkError, match="timed out"):
            client.fetch()

    def test_connection_error(self):
        client = make_client(error=requests.ConnectionError("Name or service not known"))
        with pytest.raises(NetworkError, match="connection failed"):
            client.fetch()

    def test_other_request_exception(self):
        client = make_client(error=requests.TooManyRedirects("loop"))
        with pytest.raises(NetworkError):
            client.fetch()

    def test_no_automatic_retry(self):
        """A failure is reported after exactly one attempt."""
        client = make_client(error=requests.ConnectionError("refused"))
        with pytest.raises(NetworkError):
            client.fetch()
        assert client.session.get.call_count == 1

    def test_default_session_disables_retries(self):
        """The pooled session is mounted with retries switched off."""
        client = LocationClient()
        try:
            adapter = client.session.get_adapter("http://ip-api.com/json/")
            assert adapter.max_retries.total == 0
            assert client.session.headers["User-Agent"] == "ip-globe/1.0"
        finally:
            client.close()


class TestProviderErrors:
    """Provider rejections become ProviderError."""

    def test_rate_limited(self):
        client = make_client(make_response({}, status_code=429))
        with pytest.raises(ProviderError, match="429"):
            client.fetch()

    def test_server_error(self):
        client = make_client(make_response({}, status_code=503))
        with pytest.raises(ProviderError, match="503"):
            client.fetch()

    def test_status_fail(self):
        """ip-api signals rejection with status=fail and a message."""
        body = {"status": "fail", "message": "reserved range", "query": "10.0.0.1"}
        client = make_client(make_response(body))
        with pytest.raises(ProviderError, match="reserved range"):
            client.fetch()


class TestParseErrors:
    """Malformed bodies become ParseError."""

    def test_not_json(self):
        client = make_client(make_response(json_error=True))
        with pytest.raises(ParseError):
            client.fetch()

    def test_not_an_object(self):
        client = make_client(make_response([1, 2, 3]))
        with pytest.raises(ParseError, match="JSON object"):
            client.fetch()

    @pytest.mark.parametrize("field", ["lat", "lon"])
    def test_missing_coordinate(self, field):
        body = {k: v for k, v in NEW_YORK_BODY.items() if k != field}
        with pytest.raises(ParseError, match=field):
            make_client(make_response(body)).fetch()

    @pytest.mark.parametrize("value", ["40.7", True, None, [40.7]])
    def test_non_numeric_latitude(self, value):
        body = dict(NEW_YORK_BODY, lat=value)
        with pytest.raises(ParseError):
            make_client(make_response(body)).fetch()

    @pytest.mark.parametrize("lat,lon", [(90.5, 0.0), (-91.0, 0.0), (0.0, 180.01), (0.0, -200.0)])
    def test_out_of_range_rejected(self, lat, lon):
        body = dict(NEW_YORK_BODY, lat=lat, lon=lon)
        with pytest.raises(ParseError, match="out of range"):
            make_client(make_response(body)).fetch()

    def test_non_text_city(self):
        body = dict(NEW_YORK_BODY, city=42)
        with pytest.raises(ParseError, match="city"):
            make_client(make_response(body)).fetch()

    def test_parse_location_direct(self):
        rec = parse_location(NEW_YORK_BODY, FIXED_NOW)
        assert rec.lat == 40.7128
        assert rec.lon == -74.0060


class TestErrorTaxonomy:
    """All failures share a base class and carry a short kind label."""

    def test_subclasses(self):
        for cls in (NetworkError, ParseError, ProviderError):
            assert issubclass(cls, LocationError)

    def test_kinds(self):
        assert NetworkError().kind == "network"
        assert ParseError().kind == "parse"
        assert ProviderError().kind == "provider"


class TestFetchAsync:
    """fetch_async() runs the blocking call off the event loop."""

    def test_returns_record(self):
        client = make_client(make_response(NEW_YORK_BODY))
        rec = asyncio.run(client.fetch_async())
        assert rec.city == "New York"

    def test_propagates_errors(self):
        client = make_client(error=requests.Timeout("slow"))
        with pytest.raises(NetworkError):
            asyncio.run(client.fetch_async())

    def test_cancel_abandons_request(self):
        """Cancelling the awaiting task returns immediately."""
        import threading

        gate = threading.Event()

        def slow_get(*args, **kwargs):
            gate.wait(2.0)
            return make_response(NEW_YORK_BODY)

        client = make_client(make_response(NEW_YORK_BODY))
        client.session.get.side_effect = slow_get

        async def scenario():
            task = asyncio.ensure_future(client.fetch_async())
            await asyncio.sleep(0.01)
            task.cancel()
            with pytest.raises(asyncio.CancelledError):
                await task

        try:
            asyncio.run(scenario())
        finally:
            gate.set()
