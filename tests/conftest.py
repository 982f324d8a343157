"""Pytest configuration and shared fixtures."""

import json

import httpx
import pytest

from escala.container import reset_container
from escala.domain.department import Department
from escala.domain.employee import Employee
from escala.domain.service_order import ServiceOrder
from escala.repositories.http.factory import create_http_container
from escala.store import Snapshot

API_URL = "http://api.test/api"

DEPARTMENTS = [
    {"id": 10, "name": "Vendas"},
    {"id": 20, "name": "TI"},
]

EMPLOYEES = [
    {
        "id": 7,
        "name": "Ana Souza",
        "username": "ana",
        "departments": ["Vendas"],
        "work_schedule": json.dumps({"seg": ["08:00-12:00"], "qua": ["08:00-12:00"]}),
    },
    {
        "id": 8,
        "name": "Bruno Lima",
        "username": "bruno",
        "departments": "Vendas,TI",
        "work_schedule": "{broken",
    },
    {
        "id": 9,
        "name": "Carla Dias",
        "username": "carla",
        "departments": [],
        "work_schedule": {"sex": []},
    },
]

# Order A runs Monday and Wednesday in Vendas; order B runs Monday in TI.
ORDERS = [
    {
        "id": 1,
        "os_number": "OS-001",
        "created_at": "2025-03-01T10:00:00Z",
        "service_days": [1, 3],
        "departments": [
            {
                "id": 100,
                "department_id": 10,
                "execution_start": "08:00:00",
                "execution_end": "12:00:00",
                "collaborators": [7, 8],
            }
        ],
    },
    {
        "id": 2,
        "os_number": "OS-002",
        "created_at": "2025-03-02T10:00:00Z",
        "service_days": [1],
        "departments": [
            {
                "id": 101,
                "department_id": 20,
                "execution_start": "13:00:00",
                "execution_end": "17:00:00",
                "collaborators": [8],
            }
        ],
    },
]


def pytest_configure(config):
    """Configure pytest."""
    config.addinivalue_line(
        "markers", "http: tests that go through the httpx mock transport"
    )


@pytest.fixture(autouse=True)
def _reset_container():
    yield
    reset_container()


@pytest.fixture
def departments():
    return [Department.from_dict(item) for item in DEPARTMENTS]


@pytest.fixture
def employees():
    return [Employee.from_dict(item) for item in EMPLOYEES]


@pytest.fixture
def orders():
    return [ServiceOrder.from_dict(item) for item in ORDERS]


@pytest.fixture
def order_a(orders):
    return orders[0]


@pytest.fixture
def order_b(orders):
    return orders[1]


@pytest.fixture
def snapshot(employees, departments, orders):
    return Snapshot(
        employees=tuple(employees),
        departments=tuple(departments),
        orders=tuple(orders),
    )


class FakeAPI:
    """In-memory backend behind an httpx.MockTransport.

    Records every request; ``fail`` maps "METHOD /path" to a status code to
    answer with instead, and writes listed in ``bodyless`` succeed with an
    empty body.
    """

    def __init__(self):
        self.employees = [dict(item) for item in EMPLOYEES]
        self.departments = [dict(item) for item in DEPARTMENTS]
        self.orders = [json.loads(json.dumps(item)) for item in ORDERS]
        self.requests: list[httpx.Request] = []
        self.fail: dict[str, int] = {}
        self.paginated = False
        self.bodyless: set[str] = set()

    def _collection(self, items):
        if self.paginated:
            return {"data": items, "total": len(items)}
        return items

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.removeprefix("/api")
        key = f"{request.method} {path}"
        if key in self.fail:
            return httpx.Response(self.fail[key], json={"message": "Falha simulada"})
        response = self._respond(request, path, key)
        if key in self.bodyless and response.is_success:
            return httpx.Response(response.status_code)
        return response

    def _respond(self, request: httpx.Request, path: str, key: str) -> httpx.Response:
        body = json.loads(request.content) if request.content else None

        if key == "GET /employee/all":
            return httpx.Response(200, json=self._collection(self.employees))
        if key == "GET /departments":
            return httpx.Response(200, json=self._collection(self.departments))
        if key == "GET /service-orders/":
            return httpx.Response(200, json=self._collection(self.orders))
        if request.method == "GET" and path.startswith("/employees/"):
            username = path.rsplit("/", 1)[-1]
            match = next((e for e in self.employees if e["username"] == username), None)
            if match is None:
                return httpx.Response(404, json={"message": "Colaborador não encontrado"})
            return httpx.Response(200, json=match)
        if key == "POST /auth/login":
            if body == {"username": "ana", "password": "segredo"}:
                return httpx.Response(200, json={"ok": True})
            return httpx.Response(401, json={"message": "Credenciais inválidas"})
        if key == "POST /service-orders/":
            created = {
                "id": 3,
                "os_number": body["os_number"],
                "service_days": body["service_days"],
                "created_at": None,
                "departments": [
                    {**dept, "collaborators": dept["collaborator_ids"]}
                    for dept in body["departments"]
                ],
            }
            self.orders.append(created)
            return httpx.Response(201, json=created)
        if request.method == "PUT" and path.startswith("/service-orders/"):
            return httpx.Response(204)
        if request.method == "DELETE":
            return httpx.Response(204)
        if key == "POST /departments":
            created = {"id": 30, "name": body["name"]}
            self.departments.append(created)
            return httpx.Response(201, json=created)
        if request.method == "PUT" and path.startswith("/departments/"):
            return httpx.Response(200, json={"id": body["id"], "name": body["name"]})
        if key == "POST /employee":
            created = {**body, "id": 11, "work_schedule": json.dumps(body["work_schedule"])}
            self.employees.append(created)
            return httpx.Response(201, json=created)
        if request.method == "PUT" and path.startswith("/employee/"):
            return httpx.Response(200, json={"id": int(path.rsplit("/", 1)[-1]), **body})
        return httpx.Response(404, text="not found")


@pytest.fixture
def fake_api():
    return FakeAPI()


@pytest.fixture
def container(fake_api):
    return create_http_container(API_URL, transport=httpx.MockTransport(fake_api.handler))
