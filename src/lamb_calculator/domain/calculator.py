"""Lamb calculator domain values."""

from dataclasses import dataclass
from enum import StrEnum


class HungerLevel(StrEnum):
    """How much each guest is expected to eat."""

    SNACKY = "snacky"
    HUNGRY = "hungry"
    STARVING = "starving"


@dataclass(frozen=True)
class LambCut:
    """A recommended cut with a human-readable quantity."""

    name: str
    amount: str
    icon: str


@dataclass(frozen=True)
class CalculationResult:
    """Suggested lamb quantity for a party."""

    total_weight: str
    total_description: str
    cuts: tuple[LambCut, ...]
    serving_tips: tuple[str, ...]
