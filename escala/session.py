"""Login and logout transitions for the explicit Session object.

Views that need a role receive the session as an argument; nothing reads
ambient state.
"""

import hmac
from datetime import datetime
from typing import Optional

from .config import logger as log
from .config.env import get_admin_credentials
from .container import Container, get_container
from .domain.session import Session
from .errors import ApiError, SessionError


def login_admin(email: str, password: str) -> Session:
    """Opens an admin session if the credentials match the configured pair.

    Raises:
        SessionError: If admin login is not configured or credentials differ.
    """
    expected_email, expected_password = get_admin_credentials()
    if not expected_email or not expected_password:
        raise SessionError("Login de administrador não configurado")
    if not (
        hmac.compare_digest(email.encode(), expected_email.encode())
        and hmac.compare_digest(password.encode(), expected_password.encode())
    ):
        log.warn("session", "Admin login rejected", email=email)
        raise SessionError("Credenciais inválidas! Verifique os dados e tente novamente")
    log.info("session", "Admin logged in", email=email)
    return Session(role="admin", username=email, logged_in_at=datetime.now())


async def login_collaborator(
    username: str, password: str, container: Optional[Container] = None
) -> Session:
    """Opens a collaborator session after the API accepts the credentials.

    Raises:
        SessionError: If the API rejects the login or cannot be reached.
    """
    container = container or get_container()
    try:
        await container.auth.login(username, password)
    except ApiError as e:
        log.warn("session", "Collaborator login rejected", username=username, error=str(e))
        raise SessionError("Credenciais inválidas ou erro de conexão") from e
    log.info("session", "Collaborator logged in", username=username)
    return Session(role="colab", username=username, logged_in_at=datetime.now())


def logout(session: Session) -> Session:
    """Invalidates a session. The returned session has no role."""
    log.info("session", "Logged out", username=session.username, role=session.role)
    return Session()


def require_admin(session: Session) -> None:
    if not session.is_admin:
        raise SessionError("Acesso restrito ao administrador")


def require_collaborator(session: Session) -> str:
    """Returns the collaborator's username."""
    if not session.is_collaborator or not session.username:
        raise SessionError("Faça login como colaborador")
    return session.username
