from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, localcontext
from enum import Enum
from math import isfinite
from typing import Any


class Provider(str, Enum):
    OPEN_WEATHER_MAP = "openweathermap"
    DARK_SKY = "darksky"


class Units(str, Enum):
    METRIC = "metric"
    IMPERIAL = "imperial"


def round_coordinate(value: float, accuracy: int) -> Decimal:
    """Round a coordinate to `accuracy` places, ties away from zero."""
    number = float(value)
    if not isfinite(number):
        raise ValueError(f"Coordinates must be finite numbers, got {value!r}.")
    # repr() gives the shortest decimal that round-trips, so 0.005 rounds as written.
    exact = Decimal(repr(number))
    with localcontext() as context:
        # Enough precision for every integer digit plus `accuracy` places.
        context.prec = max(context.prec, exact.adjusted() + int(accuracy) + 2)
        rounded = exact.quantize(Decimal(1).scaleb(-int(accuracy)), rounding=ROUND_HALF_UP)
    if rounded.is_zero():
        return Decimal(0)
    return rounded


def format_coordinate(value: Decimal) -> str:
    """Plain decimal text without trailing zeros: 1.50 -> '1.5', 2.00 -> '2', -0 -> '0'."""
    if value.is_zero():
        return "0"
    text = format(value, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


@dataclass(frozen=True)
class CacheKey:
    latitude: Decimal
    longitude: Decimal

    @classmethod
    def from_coordinates(cls, latitude: float, longitude: float, accuracy: int):
        return cls(
            latitude=round_coordinate(latitude, accuracy),
            longitude=round_coordinate(longitude, accuracy),
        )

    @property
    def latitude_text(self) -> str:
        return format_coordinate(self.latitude)

    @property
    def longitude_text(self) -> str:
        return format_coordinate(self.longitude)

    def __str__(self) -> str:
        return f"{self.latitude_text}{self.longitude_text}"


@dataclass(frozen=True)
class CacheEntry:
    data: Any
    expires_at: float  # epoch milliseconds

    def is_live(self, now_ms: float) -> bool:
        return self.expires_at > now_ms
