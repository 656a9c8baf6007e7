import asyncio

import pytest
import requests

from rainman.client import WeatherClient
from rainman.services.http_transport import RequestsTransport


class FakeSession:
    def __init__(self, response=None, error=None):
        self.calls = []
        self.closed = False
        self._response = response
        self._error = error

    def get(self, url, timeout=None):
        self.calls.append((url, timeout))
        if self._error is not None:
            raise self._error
        return self._response

    def close(self):
        self.closed = True


def _response(status_code, body):
    response = requests.Response()
    response.status_code = status_code
    response._content = body
    return response


def test_get_uses_session_with_timeout():
    session = FakeSession(_response(200, b'{"main": {"temp": 3}}'))
    transport = RequestsTransport(session=session, timeout_seconds=4)

    response = asyncio.run(transport.get("http://example.test/weather"))

    assert session.calls == [("http://example.test/weather", 4.0)]
    assert response.json() == {"main": {"temp": 3}}


def test_get_propagates_request_exceptions():
    transport = RequestsTransport(session=FakeSession(error=requests.Timeout("read timed out")))
    with pytest.raises(requests.Timeout):
        asyncio.run(transport.get("http://example.test/weather"))


def test_close_closes_session():
    session = FakeSession()
    RequestsTransport(session=session).close()
    assert session.closed is True


def test_client_defaults_to_requests_transport_with_configured_timeout():
    client = WeatherClient(api_key="1234567890", provider="openweathermap", request_timeout_seconds=3)
    assert isinstance(client.transport, RequestsTransport)
    assert client.transport.timeout_seconds == 3.0
    assert isinstance(client.transport.session, requests.Session)


def test_client_end_to_end_over_requests_transport():
    session = FakeSession(_response(200, b'{"currently": {"windBearing": 90}}'))
    client = WeatherClient(
        api_key="abc",
        provider="darksky",
        transport=RequestsTransport(session=session),
    )

    payload = asyncio.run(client.get((51.5074, -0.1278)))

    assert client.convert_wind_degrees_to_direction(payload["currently"]["windBearing"]) == "E"
    url, timeout = session.calls[0]
    assert url.startswith("https://api.darksky.net/forecast/abc/51.51,-0.13?")
    assert timeout == 10.0


def test_client_close_closes_session_it_created():
    client = WeatherClient(api_key="1234567890", provider="openweathermap")
    session = FakeSession()
    client.transport.session = session

    client.close()

    assert session.closed is True


def test_client_close_leaves_injected_transport_open():
    session = FakeSession()
    client = WeatherClient(
        api_key="1234567890",
        provider="openweathermap",
        transport=RequestsTransport(session=session),
    )

    client.close()

    assert session.closed is False
