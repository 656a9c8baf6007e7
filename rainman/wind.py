from math import isfinite

# 0 and 360 degrees are both north, hence the trailing "N".
WIND_DIRECTION_LABELS = (
    "N", "NNE", "NE", "ENE",
    "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW",
    "W", "WNW", "NW", "NNW",
    "N",
)


def convert_wind_degrees_to_direction(degrees: float) -> str:
    """Convert a meteorological wind angle to a 16-point compass label."""
    value = float(degrees)
    if not isfinite(value) or not (0.0 <= value <= 360.0):
        raise ValueError(f"Wind direction must be a finite value in range [0, 360], got {degrees!r}.")
    return WIND_DIRECTION_LABELS[int((value + 11.25) / 22.5)]
