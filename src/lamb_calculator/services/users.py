"""User persistence interface."""

from typing import Protocol
from uuid import UUID

from lamb_calculator.domain.models import NewUser, UserRecord


class UserRepository(Protocol):
    """Persistence interface for user data."""

    async def get_user(self, user_id: UUID) -> UserRecord | None:
        """Return the user with the given id, if present."""

    async def get_user_by_username(self, username: str) -> UserRecord | None:
        """Return the first user whose username matches exactly."""

    async def create_user(self, user: NewUser) -> UserRecord:
        """Create and return a new user record."""
