import re
from dataclasses import dataclass, replace
from math import isfinite

from rainman.errors import ConfigurationError
from rainman.models import Provider, Units

DEFAULT_TTL_SECONDS = 60 ** 3
DEFAULT_ACCURACY = 2
DEFAULT_REQUEST_TIMEOUT_SECONDS = 10.0


@dataclass(frozen=True)
class ClientSettings:
    api_key: str | None
    provider: str | None
    cache_enabled: bool = True
    ttl_seconds: float = DEFAULT_TTL_SECONDS
    accuracy: int = DEFAULT_ACCURACY
    units: str = Units.METRIC.value
    request_timeout_seconds: float = DEFAULT_REQUEST_TIMEOUT_SECONDS


def _positive_finite(value) -> bool:
    if isinstance(value, bool) or not isinstance(value, int | float):
        return False
    return isfinite(float(value)) and float(value) > 0


def validate_settings(settings: ClientSettings) -> ClientSettings:
    """Validate client configuration and raise a clear error on invalid values."""
    errors = []

    if not isinstance(settings.api_key, str) or not settings.api_key.strip():
        errors.append("API_KEY must be a non-empty string.")

    providers = {provider.value for provider in Provider}
    if not settings.provider:
        errors.append("PROVIDER is required (one of: darksky, openweathermap).")
    elif settings.provider not in providers:
        errors.append(f"PROVIDER must be 'darksky' or 'openweathermap', got {settings.provider!r}.")

    if not _positive_finite(settings.ttl_seconds):
        errors.append("TTL_SECONDS must be a finite value > 0.")
    if isinstance(settings.accuracy, bool) or not isinstance(settings.accuracy, int) or settings.accuracy < 0:
        errors.append("ACCURACY must be an integer >= 0.")
    if settings.units not in {units.value for units in Units}:
        errors.append("UNITS must be 'metric' or 'imperial'.")
    if not _positive_finite(settings.request_timeout_seconds):
        errors.append("REQUEST_TIMEOUT_SECONDS must be a finite value > 0.")

    if errors:
        raise ConfigurationError("Invalid configuration:\n- " + "\n- ".join(errors))
    # Plain strings, so enum members passed in format as their values.
    return replace(settings, provider=Provider(settings.provider).value, units=Units(settings.units).value)


def load_settings(app_config=None) -> ClientSettings:
    """Build validated settings from a `config` module (see config.example.py)."""
    if app_config is None:
        import config as app_config

    try:
        settings = ClientSettings(
            api_key=app_config.API_KEY,
            provider=app_config.PROVIDER,
            cache_enabled=bool(getattr(app_config, "CACHE_ENABLED", True)),
            ttl_seconds=getattr(app_config, "TTL_SECONDS", DEFAULT_TTL_SECONDS),
            accuracy=getattr(app_config, "ACCURACY", DEFAULT_ACCURACY),
            units=getattr(app_config, "UNITS", Units.METRIC.value),
            request_timeout_seconds=getattr(app_config, "REQUEST_TIMEOUT_SECONDS", DEFAULT_REQUEST_TIMEOUT_SECONDS),
        )
    except AttributeError as exc:
        attr_match = re.search(r"has no attribute '([^']+)'", str(exc))
        missing_attr = attr_match.group(1) if attr_match else str(exc)
        raise ConfigurationError(f"Invalid configuration:\n- Missing required config setting: {missing_attr}") from exc
    return validate_settings(settings)
