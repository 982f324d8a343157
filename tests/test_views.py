"""Tests for the presentation views."""

import asyncio
from datetime import date

import pytest

from escala.domain.service_order import OrderDepartment, ServiceOrder
from escala.domain.session import Session
from escala.errors import SessionError
from escala.store import Snapshot
from escala.views import (
    collaborator_dashboard,
    employee_roster,
    load_collaborator_dashboard,
    order_details,
    order_list,
    week_board,
)
from escala.views.week import week_start


def test_week_start_is_sunday():
    # 2025-03-05 is a Wednesday.
    assert week_start(date(2025, 3, 5)) == date(2025, 3, 2)
    assert week_start(date(2025, 3, 2)) == date(2025, 3, 2)
    assert week_start(date(2025, 3, 8)) == date(2025, 3, 2)


def test_week_board(snapshot):
    board = week_board(snapshot, reference=date(2025, 3, 5))
    assert [column["key"] for column in board] == ["dom", "seg", "ter", "qua", "qui", "sex", "sab"]
    assert board[0]["date"] == "02/03"
    assert board[6]["date"] == "08/03"

    monday = board[1]
    assert monday["label"] == "Segunda-feira"
    assert [o["os_number"] for o in monday["orders"]] == ["OS-001", "OS-002"]
    dept = monday["orders"][0]["departments"][0]
    assert dept["name"] == "Vendas"
    assert dept["window"] == "08:00 - 12:00"
    assert [c["name"] for c in dept["collaborators"]] == ["Ana Souza", "Bruno Lima"]


def test_week_board_filtered(snapshot):
    board = week_board(snapshot, department_filter=20, reference=date(2025, 3, 5))
    assert [o["os_number"] for o in board[1]["orders"]] == ["OS-002"]
    assert board[3]["orders"] == []


def test_week_board_on_empty_snapshot():
    board = week_board(Snapshot.empty(), reference=date(2025, 3, 5))
    assert len(board) == 7
    assert all(column["orders"] == [] for column in board)


def test_order_details_resolves_unknown_references(snapshot, order_a):
    order_a.departments[0].department_id = 99
    order_a.departments[0].collaborators = [7, 42]
    details = order_details(snapshot, order_a)
    assert details["days"] == ["Segunda-feira", "Quarta-feira"]
    assert details["departments"][0]["name"] == "Departamento Desconhecido"
    assert details["departments"][0]["color"] == "#cccccc"
    assert [c["name"] for c in details["departments"][0]["collaborators"]] == [
        "Ana Souza",
        "Desconhecido",
    ]


def test_order_list_uses_id_fallback(snapshot):
    trimmed = Snapshot(departments=snapshot.departments, orders=snapshot.orders)
    orders = order_list(trimmed)
    assert [c["name"] for c in orders[0]["departments"][0]["collaborators"]] == ["ID 7", "ID 8"]


def test_employee_roster(snapshot):
    rows = {row["id"]: row for row in employee_roster(snapshot)}

    assert rows[7]["status"] == "unavailable"
    assert rows[7]["status_label"] == "Indisponível"
    assert rows[7]["working_departments"] == ["Vendas"]
    assert rows[7]["schedule"] == [("Segunda", ["08:00-12:00"]), ("Quarta", ["08:00-12:00"])]

    assert rows[8]["working_departments"] == ["Vendas", "TI"]
    assert rows[8]["schedule_valid"] is False
    assert rows[8]["schedule"] == "Formato inválido"

    assert rows[9]["status"] == "available"
    assert rows[9]["working_departments"] == []
    assert rows[9]["schedule"] == [("Sexta", [])]


def test_roster_ignores_nominal_departments(snapshot):
    # Bruno nominally belongs to Vendas and TI; without orders he is available.
    rows = {row["id"]: row for row in employee_roster(Snapshot(employees=snapshot.employees))}
    assert rows[8]["departments"] == ["Vendas", "TI"]
    assert rows[8]["status"] == "available"


def test_employee_roster_empty():
    assert employee_roster(Snapshot.empty()) == []


def test_collaborator_dashboard(snapshot):
    session = Session(role="colab", username="ana")
    data = collaborator_dashboard(snapshot, session)
    assert data["employee"]["name"] == "Ana Souza"
    assert [o["os_number"] for o in data["orders"]] == ["OS-001"]


def test_collaborator_dashboard_requires_collaborator_session(snapshot):
    with pytest.raises(SessionError):
        collaborator_dashboard(snapshot, Session(role="admin", username="admin"))
    with pytest.raises(SessionError, match="Colaborador não encontrado"):
        collaborator_dashboard(snapshot, Session(role="colab", username="ninguem"))


def test_load_collaborator_dashboard(container):
    data = asyncio.run(load_collaborator_dashboard(Session(role="colab", username="bruno"), container))
    assert [o["os_number"] for o in data["orders"]] == ["OS-001", "OS-002"]
    first = data["orders"][0]["departments"][0]
    assert first["name"] == "Vendas"
    assert "collaborators" not in first


def test_collaborator_dashboard_keeps_only_own_assignments(snapshot):
    shared = ServiceOrder(
        id=5,
        os_number="OS-005",
        service_days=[2],
        departments=[
            OrderDepartment(department_id=10, collaborators=[7]),
            OrderDepartment(department_id=20, collaborators=[8, 9]),
        ],
    )
    snapshot = snapshot.with_order(shared)

    data = collaborator_dashboard(snapshot, Session(role="colab", username="carla"))

    assert [o["os_number"] for o in data["orders"]] == ["OS-005"]
    assert [d["name"] for d in data["orders"][0]["departments"]] == ["TI"]
