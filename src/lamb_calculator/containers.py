"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from lamb_calculator.adapters.memory_storage import InMemoryStorage
from lamb_calculator.config import Settings
from lamb_calculator.services.calculator import LambCalculatorService
from lamb_calculator.services.users import UserRepository


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    calculator_service: LambCalculatorService
    user_repository: UserRepository
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    storage = InMemoryStorage()

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=resolved_settings,
        calculator_service=LambCalculatorService(storage),
        user_repository=storage,
        close_resources=close_resources,
    )
