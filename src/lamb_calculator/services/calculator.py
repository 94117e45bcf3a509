"""Lamb quantity calculation and the service that records it."""

import json
import logging
import math
from collections import Counter
from dataclasses import asdict, dataclass
from decimal import Decimal
from typing import Protocol
from uuid import UUID

from lamb_calculator.domain.calculator import CalculationResult, HungerLevel, LambCut
from lamb_calculator.domain.models import LambCalculation, NewLambCalculation

_logger = logging.getLogger(__name__)

# Ounces of lamb per guest.
SERVING_SIZES_OZ: dict[HungerLevel, int] = {
    HungerLevel.SNACKY: 5,
    HungerLevel.HUNGRY: 7,
    HungerLevel.STARVING: 9,
}

SERVING_TIPS: tuple[str, ...] = (
    "Allow 30 minutes resting time before serving",
    "Consider sides: roasted vegetables, potatoes",
    "Order 10% extra for leftovers",
    "Use a meat thermometer for perfect doneness",
)

SMALL_PARTY_MAX = 2
MEDIUM_PARTY_MAX = 6


class LambCalculationRepository(Protocol):
    """Persistence interface for calculation summaries."""

    async def save_lamb_calculation(
        self, calculation: NewLambCalculation
    ) -> LambCalculation:
        """Store a calculation summary under a fresh id and return it."""

    async def get_lamb_calculation(
        self, calculation_id: UUID
    ) -> LambCalculation | None:
        """Return the stored calculation, if present."""

    async def list_lamb_calculations(self) -> list[LambCalculation]:
        """Return all stored calculations in insertion order."""


def calculate_lamb_requirements(
    people: int, hunger_level: HungerLevel
) -> CalculationResult:
    """Return the suggested lamb weight, cuts and tips for a party.

    Inputs are expected to be validated already: ``people`` is at least 1.
    """
    total_ounces = people * SERVING_SIZES_OZ[hunger_level]
    # Round up to the nearest tenth of a pound.
    total_pounds = math.ceil(total_ounces / 16 * 10) / 10

    min_weight = max(1, math.floor(total_pounds - 0.5))
    max_weight = math.ceil(total_pounds + 0.5)

    people_text = "person" if people == 1 else "people"
    return CalculationResult(
        total_weight=f"{min_weight}-{max_weight} lbs",
        total_description=(
            f"For {people} {hunger_level.value.lower()} {people_text}"
        ),
        cuts=generate_cut_recommendations(people),
        serving_tips=SERVING_TIPS,
    )


def generate_cut_recommendations(people: int) -> tuple[LambCut, ...]:
    """Return cut recommendations tiered by party size."""
    if people <= SMALL_PARTY_MAX:
        return (
            LambCut("Lamb Chops", f"{people * 2}-{people * 3} pieces", "utensils"),
            LambCut("Rack of Lamb", "1 rack (8 ribs)", "drumstick-bite"),
        )
    if people <= MEDIUM_PARTY_MAX:
        return (
            LambCut("Leg of Lamb", "1 whole leg (5-7 lbs)", "drumstick-bite"),
            LambCut("Lamb Shoulder", "1 shoulder roast (3-4 lbs)", "beef"),
            LambCut("Lamb Chops", f"{people * 2} pieces", "utensils"),
        )
    return (
        LambCut("Whole Lamb Leg", "1-2 legs (10-14 lbs total)", "drumstick-bite"),
        LambCut("Lamb Shoulder Roast", "2 roasts (6-8 lbs total)", "beef"),
        LambCut("Lamb Shanks", f"{people} pieces", "utensils"),
    )


def summarize_calculation(
    people: int, hunger_level: HungerLevel, result: CalculationResult
) -> NewLambCalculation:
    """Build the stored summary: lower weight bound and serialized cuts."""
    lower_bound = result.total_weight.split("-", maxsplit=1)[0]
    return NewLambCalculation(
        people=people,
        hunger_level=hunger_level,
        total_weight=Decimal(lower_bound),
        recommendations=json.dumps(
            [asdict(cut) for cut in result.cuts], separators=(",", ":")
        ),
    )


@dataclass
class LambCalculatorService:
    """Application service that computes and records lamb calculations."""

    repository: LambCalculationRepository

    async def calculate(
        self, people: int, hunger_level: HungerLevel
    ) -> CalculationResult:
        """Compute a result and store its summary.

        A storage failure is logged and never hides the computed result.
        """
        result = calculate_lamb_requirements(people, hunger_level)
        _logger.info(
            "Lamb calculation: people=%s hunger_level=%s total_weight=%s",
            people,
            hunger_level.value,
            result.total_weight,
        )
        try:
            await self.repository.save_lamb_calculation(
                summarize_calculation(people, hunger_level, result)
            )
        except Exception:
            _logger.exception(
                "Failed to store lamb calculation",
                extra={"people": people, "hunger_level": hunger_level.value},
            )
        return result

    async def get_calculation(self, calculation_id: UUID) -> LambCalculation | None:
        """Return a stored calculation summary."""
        return await self.repository.get_lamb_calculation(calculation_id)

    async def summarize_usage(self) -> dict[str, object]:
        """Return the number of stored calculations, overall and per hunger level."""
        calculations = await self.repository.list_lamb_calculations()
        counts = Counter(calculation.hunger_level for calculation in calculations)
        return {
            "total": len(calculations),
            "by_hunger_level": {level.value: counts[level] for level in HungerLevel},
        }
