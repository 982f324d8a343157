"""HTTP implementation of AuthRepository."""

from ..interfaces.auth_repository import IAuthRepository
from ...config import logger as log
from .connection import HTTPConnection


class HTTPAuthRepository(IAuthRepository):
    """Collaborator login against /auth/login."""

    def __init__(self, connection: HTTPConnection):
        self._conn = connection

    async def login(self, username: str, password: str) -> None:
        log.debug("repo.auth", "login", username=username)
        await self._conn.post("auth/login", {"username": username, "password": password})
