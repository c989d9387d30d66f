"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Self

MAX_CAPACITY = 1000
MAX_ID = 2**63 - 1  # BigAutoField upper bound


def _is_digits(value: str) -> bool:
    return value.isascii() and value.isdecimal()


@dataclass(frozen=True)
class EventId:
    """Unique identifier for an Event."""

    value: int

    def __post_init__(self) -> None:
        if not 0 < self.value <= MAX_ID:
            raise ValueError("EventId out of range")

    @classmethod
    def from_string(cls, value: str) -> Self:
        if not _is_digits(value):
            raise ValueError(f"Invalid event id: {value!r}")
        return cls(value=int(value))


@dataclass(frozen=True)
class UserId:
    """Unique identifier for a User."""

    value: int

    def __post_init__(self) -> None:
        if not 0 < self.value <= MAX_ID:
            raise ValueError("UserId out of range")

    @classmethod
    def from_value(cls, value: object) -> Self:
        """Accept an integer or a string of digits, as sent in JSON bodies."""
        if isinstance(value, bool):
            raise ValueError("UserId must be an integer")
        if isinstance(value, int):
            return cls(value=value)
        if isinstance(value, str) and _is_digits(value):
            return cls(value=int(value))
        raise ValueError("UserId must be an integer")


@dataclass(frozen=True)
class Capacity:
    """Non-negative integer representing capacity."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("Capacity cannot be negative")


@dataclass(frozen=True)
class Percentage:
    """Share of a whole, rounded half-up to two decimal places."""

    value: Decimal

    @classmethod
    def of(cls, part: int, whole: int) -> Self:
        if whole == 0:
            return cls(value=Decimal("0"))
        ratio = Decimal(part * 100) / Decimal(whole)
        return cls(value=ratio.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))

    def __float__(self) -> float:
        return float(self.value)

    def __str__(self) -> str:
        return f"{self.value:.2f}"
