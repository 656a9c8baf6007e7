import sys
import types


if "config" not in sys.modules:
    config = types.ModuleType("config")
    config.API_KEY = "1234567890"
    config.PROVIDER = "openweathermap"
    config.CACHE_ENABLED = True
    config.TTL_SECONDS = 216000
    config.ACCURACY = 2
    config.UNITS = "metric"
    config.REQUEST_TIMEOUT_SECONDS = 10
    sys.modules["config"] = config
