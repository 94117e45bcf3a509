"""Shared test fixtures."""

from dataclasses import dataclass, field
from uuid import UUID

import pytest

from lamb_calculator.adapters.memory_storage import InMemoryStorage
from lamb_calculator.config import Settings
from lamb_calculator.containers import AppContainer
from lamb_calculator.domain.models import LambCalculation, NewLambCalculation
from lamb_calculator.services.calculator import (
    LambCalculationRepository,
    LambCalculatorService,
)


@dataclass
class FailingCalculationRepository(LambCalculationRepository):
    """Repository whose writes always fail."""

    attempts: list[NewLambCalculation] = field(default_factory=list)

    async def save_lamb_calculation(
        self, calculation: NewLambCalculation
    ) -> LambCalculation:
        self.attempts.append(calculation)
        raise RuntimeError("storage unavailable")

    async def get_lamb_calculation(
        self, calculation_id: UUID
    ) -> LambCalculation | None:
        return None

    async def list_lamb_calculations(self) -> list[LambCalculation]:
        return []


@pytest.fixture
def settings() -> Settings:
    return Settings(environment="test", admin_token="admin-token")


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def container(settings: Settings, storage: InMemoryStorage) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        calculator_service=LambCalculatorService(storage),
        user_repository=storage,
        close_resources=close_resources,
    )
