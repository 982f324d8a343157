"""Interface for authentication."""

from abc import ABC, abstractmethod


class IAuthRepository(ABC):
    """Contract for collaborator login."""

    @abstractmethod
    async def login(self, username: str, password: str) -> None:
        """Checks collaborator credentials. Raises ApiError when rejected."""
        pass
