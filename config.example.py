"""
Configuration settings for the rainman weather client.

Copy this file to config.py and modify these values for your setup.
Load them with rainman.settings.load_settings().
"""

# =============================================================================
# Provider
# =============================================================================
API_KEY = "your-api-key"   # Replace with your provider API key
# Weather provider: "openweathermap" or "darksky"
PROVIDER = "openweathermap"

# Unit system requested from the provider: "metric" or "imperial"
UNITS = "metric"

# =============================================================================
# Caching
# =============================================================================
# Keep successful responses in memory and reuse them for nearby coordinates.
CACHE_ENABLED = True

# How long a cached response stays valid (seconds).
# 216000s = 60 hours.
TTL_SECONDS = 60 ** 3

# Decimal places coordinates are rounded to before lookup and query.
# 2 places is roughly 1 km; lower values share cache entries over larger areas.
ACCURACY = 2

# =============================================================================
# Network
# =============================================================================
# Timeout for each provider HTTP request (seconds).
REQUEST_TIMEOUT_SECONDS = 10
