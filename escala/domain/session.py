"""Session entity - who is using the system and with which role."""

from dataclasses import dataclass
from datetime import datetime
from typing import Literal, Optional

Role = Literal["admin", "colab"]


@dataclass
class Session:
    """A logged-in user. ``role`` is None once the session is invalidated."""

    role: Optional[Role] = None
    username: Optional[str] = None
    logged_in_at: Optional[datetime] = None

    @property
    def is_authenticated(self) -> bool:
        return self.role is not None

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"

    @property
    def is_collaborator(self) -> bool:
        return self.role == "colab"

