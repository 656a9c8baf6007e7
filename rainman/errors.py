"""Error types raised by the weather client."""


class RainmanError(Exception):
    """Base class for errors raised by rainman."""


class ConfigurationError(RainmanError, ValueError):
    """Raised when client configuration is missing or invalid."""


class ProviderError(RainmanError, RuntimeError):
    """Raised when the weather provider answers with a non-success HTTP status."""

    def __init__(self, status_code: int, provider: str | None = None):
        self.status_code = status_code
        self.provider = provider
        super().__init__(f"Weather provider {provider or 'unknown'} returned HTTP {status_code}")
