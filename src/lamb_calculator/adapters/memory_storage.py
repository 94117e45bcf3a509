"""In-memory storage for calculations and users."""

from dataclasses import dataclass
from uuid import UUID, uuid4

from lamb_calculator.domain.models import (
    LambCalculation,
    NewLambCalculation,
    NewUser,
    UserRecord,
)
from lamb_calculator.services.calculator import LambCalculationRepository
from lamb_calculator.services.users import UserRepository


@dataclass
class InMemoryStorage(LambCalculationRepository, UserRepository):
    """Process-local storage; contents are lost on restart."""

    _calculations: dict[UUID, LambCalculation]
    _users: dict[UUID, UserRecord]

    def __init__(self) -> None:
        self._calculations = {}
        self._users = {}

    async def save_lamb_calculation(
        self, calculation: NewLambCalculation
    ) -> LambCalculation:
        """Store a calculation under a new id and return the record."""
        record = LambCalculation(
            id=uuid4(),
            people=calculation.people,
            hunger_level=calculation.hunger_level,
            total_weight=calculation.total_weight,
            recommendations=calculation.recommendations,
        )
        self._calculations[record.id] = record
        return record

    async def get_lamb_calculation(
        self, calculation_id: UUID
    ) -> LambCalculation | None:
        """Return the calculation for an id, if present."""
        return self._calculations.get(calculation_id)

    async def list_lamb_calculations(self) -> list[LambCalculation]:
        """Return all calculations in insertion order."""
        return list(self._calculations.values())

    async def get_user(self, user_id: UUID) -> UserRecord | None:
        """Return the user for an id, if present."""
        return self._users.get(user_id)

    async def get_user_by_username(self, username: str) -> UserRecord | None:
        """Return the first user with exactly this username."""
        return next(
            (user for user in self._users.values() if user.username == username),
            None,
        )

    async def create_user(self, user: NewUser) -> UserRecord:
        """Store a user under a new id and return the record."""
        record = UserRecord(id=uuid4(), username=user.username, password=user.password)
        self._users[record.id] = record
        return record
