"""Stored records for the lamb calculator."""

from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID

from lamb_calculator.domain.calculator import HungerLevel


@dataclass(frozen=True)
class NewLambCalculation:
    """Summary of a calculation, before it is stored."""

    people: int
    hunger_level: HungerLevel
    total_weight: Decimal
    recommendations: str


@dataclass(frozen=True)
class LambCalculation:
    """Represents a calculation summary held in storage."""

    id: UUID
    people: int
    hunger_level: HungerLevel
    total_weight: Decimal
    recommendations: str


@dataclass(frozen=True)
class NewUser:
    username: str
    password: str


@dataclass(frozen=True)
class UserRecord:
    """Represents a user held in storage."""

    id: UUID
    username: str
    password: str
