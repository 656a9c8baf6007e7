"""Current-weather client with an optional per-instance TTL cache."""

import logging
from dataclasses import asdict
from time import time

from rainman.cache import WeatherCache
from rainman.errors import ProviderError
from rainman.models import CacheKey, Units
from rainman.providers import build_provider_query
from rainman.settings import (
    DEFAULT_ACCURACY,
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
    DEFAULT_TTL_SECONDS,
    ClientSettings,
    validate_settings,
)
from rainman.wind import convert_wind_degrees_to_direction

LOGGER = logging.getLogger("rainman")


class WeatherClient:
    """Fetch current weather for a coordinate pair from OpenWeatherMap or DarkSky.

    Usage:
        client = WeatherClient(api_key="...", provider="openweathermap")
        payload = await client.get((52.52, 13.405))

    Coordinates are rounded to `accuracy` decimal places before they are used
    for the cache key and the provider query, so nearby points share a cache
    entry. Successful payloads are cached for `ttl_seconds` when
    `cache_enabled` is set.
    """

    def __init__(
        self,
        api_key: str | None = None,
        provider: str | None = None,
        cache_enabled: bool = True,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        accuracy: int = DEFAULT_ACCURACY,
        units: str = Units.METRIC.value,
        request_timeout_seconds: float = DEFAULT_REQUEST_TIMEOUT_SECONDS,
        transport=None,
        clock_fn=None,
    ):
        self.settings = validate_settings(
            ClientSettings(
                api_key=api_key,
                provider=provider,
                cache_enabled=cache_enabled,
                ttl_seconds=ttl_seconds,
                accuracy=accuracy,
                units=units,
                request_timeout_seconds=request_timeout_seconds,
            )
        )
        self._owns_transport = transport is None
        if transport is None:
            from rainman.services.http_transport import RequestsTransport
            transport = RequestsTransport(timeout_seconds=request_timeout_seconds)
        self.transport = transport
        self.clock_fn = clock_fn or time
        self.cache = WeatherCache(ttl_seconds=ttl_seconds, clock_fn=self.clock_fn)

    @classmethod
    def from_settings(cls, settings: ClientSettings, transport=None, clock_fn=None):
        return cls(**asdict(settings), transport=transport, clock_fn=clock_fn)

    def cache_key(self, coordinates) -> CacheKey:
        latitude, longitude = coordinates
        return CacheKey.from_coordinates(latitude, longitude, self.settings.accuracy)

    async def get(self, coordinates):
        """Return the current weather payload for (latitude, longitude)."""
        key = self.cache_key(coordinates)

        cached = self.cache.lookup(key)
        if cached is not None:
            LOGGER.debug("Weather cache hit for %s.", key)
            return cached.data

        provider = self.settings.provider
        url = build_provider_query(key, self.settings)
        LOGGER.info("Fetching current weather from %s for %s,%s.", provider, key.latitude_text, key.longitude_text)
        response = await self.transport.get(url)

        status = response.status_code
        if not 200 <= status < 300:
            LOGGER.warning("Weather provider %s returned HTTP %s.", provider, status)
            raise ProviderError(status, provider)

        payload = response.json()
        if self.settings.cache_enabled:
            self.cache.put(key, payload)
        return payload

    def close(self) -> None:
        """Close the HTTP session if this client created its own transport."""
        if self._owns_transport:
            self.transport.close()

    @staticmethod
    def convert_wind_degrees_to_direction(degrees: float) -> str:
        return convert_wind_degrees_to_direction(degrees)
