"""Tests for login/logout transitions."""

import asyncio

import pytest

from escala.errors import SessionError
from escala.session import (
    login_admin,
    login_collaborator,
    logout,
    require_admin,
    require_collaborator,
)


@pytest.fixture
def admin_env(monkeypatch):
    monkeypatch.setenv("ESCALA_ADMIN_EMAIL", "admin@empresa")
    monkeypatch.setenv("ESCALA_ADMIN_PASSWORD", "senha-forte")


def test_admin_login(admin_env):
    session = login_admin("admin@empresa", "senha-forte")
    assert session.is_admin
    assert session.is_authenticated
    require_admin(session)


def test_admin_login_rejects_wrong_password(admin_env):
    with pytest.raises(SessionError, match="Credenciais inválidas"):
        login_admin("admin@empresa", "outra")


def test_admin_login_disabled_without_configuration(monkeypatch):
    monkeypatch.delenv("ESCALA_ADMIN_EMAIL", raising=False)
    monkeypatch.delenv("ESCALA_ADMIN_PASSWORD", raising=False)
    with pytest.raises(SessionError, match="não configurado"):
        login_admin("", "")


def test_logout_invalidates(admin_env):
    session = logout(login_admin("admin@empresa", "senha-forte"))
    assert not session.is_authenticated
    with pytest.raises(SessionError):
        require_admin(session)


def test_collaborator_login(container):
    session = asyncio.run(login_collaborator("ana", "segredo", container))
    assert session.is_collaborator
    assert not session.is_admin
    assert require_collaborator(session) == "ana"


def test_collaborator_login_rejected(container):
    with pytest.raises(SessionError, match="Credenciais inválidas ou erro de conexão"):
        asyncio.run(login_collaborator("ana", "errada", container))


def test_collaborator_session_cannot_use_admin_views(container):
    session = asyncio.run(login_collaborator("ana", "segredo", container))
    with pytest.raises(SessionError):
        require_admin(session)
