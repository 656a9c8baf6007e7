"""Request URL construction for the supported weather providers."""

from rainman.errors import ConfigurationError
from rainman.models import CacheKey, Provider

OPEN_WEATHER_MAP_URL = "http://api.openweathermap.org/data/2.5/weather"
DARK_SKY_URL = "https://api.darksky.net/forecast"
DARK_SKY_EXCLUDE = "[minutely,hourly,daily,alerts,flags]"


def build_provider_query(key: CacheKey, settings) -> str:
    """Return the current-weather URL for the rounded coordinates in `key`."""
    lat = key.latitude_text
    lon = key.longitude_text

    if settings.provider == Provider.OPEN_WEATHER_MAP:
        query = f"lat={lat}&lon={lon}&appid={settings.api_key}&units={settings.units}"
        return f"{OPEN_WEATHER_MAP_URL}?{query}"
    if settings.provider == Provider.DARK_SKY:
        query = f"exclude={DARK_SKY_EXCLUDE}&units={settings.units}"
        return f"{DARK_SKY_URL}/{settings.api_key}/{lat},{lon}?{query}"

    raise ConfigurationError(f"No query configuration for provider: {settings.provider!r}")
