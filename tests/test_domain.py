"""Tests for entity parsing from API records."""

from escala.domain.department import Department
from escala.domain.employee import Employee
from escala.domain.service_order import OrderDepartment, ServiceOrder


def test_employee_decodes_schedule(employees):
    ana = employees[0]
    assert ana.work_schedule == {"seg": ["08:00-12:00"], "qua": ["08:00-12:00"]}
    assert ana.schedule_valid is True
    assert ana.departments == ["Vendas"]


def test_employee_with_broken_schedule_degrades_to_empty(employees):
    bruno = employees[1]
    assert bruno.work_schedule == {}
    assert bruno.schedule_valid is False


def test_employee_departments_from_comma_string(employees):
    assert employees[1].departments == ["Vendas", "TI"]


def test_employee_departments_from_objects():
    employee = Employee.from_dict(
        {"id": 1, "name": "X", "departments": [{"id": 3, "name": "RH"}, {"id": 4}]}
    )
    assert employee.departments == ["RH", 4]


def test_employee_schedule_mapping_with_empty_day(employees):
    assert employees[2].work_schedule == {"sex": []}


def test_employee_to_dict_encodes_schedule(employees):
    data = employees[0].to_dict()
    assert data["work_schedule"] == '{"seg":["08:00-12:00"],"qua":["08:00-12:00"]}'
    assert Employee.from_dict(data).work_schedule == employees[0].work_schedule


def test_employee_missing_optional_fields():
    employee = Employee.from_dict({"id": "5", "name": "Eva"})
    assert employee.id == 5
    assert employee.username == ""
    assert employee.departments == []
    assert employee.work_schedule == {}
    assert employee.schedule_valid is True


def test_department_from_dict():
    assert Department.from_dict({"id": "3", "name": "RH"}) == Department(3, "RH")


def test_service_order_from_dict(order_a):
    assert order_a.id == 1
    assert order_a.service_days == [1, 3]
    assert order_a.departments[0].department_id == 10
    assert order_a.departments[0].collaborators == [7, 8]
    assert order_a.departments[0].execution_start == "08:00:00"


def test_order_department_accepts_collaborator_ids():
    dept = OrderDepartment.from_dict({"department_id": 2, "collaborator_ids": ["4", 5]})
    assert dept.collaborators == [4, 5]


def test_service_order_without_departments():
    order = ServiceOrder.from_dict({"id": 9, "os_number": 123, "service_days": None})
    assert order.os_number == "123"
    assert order.service_days == []
    assert order.departments == []


def test_service_order_round_trip(order_a):
    assert ServiceOrder.from_dict(order_a.to_dict()) == order_a


def test_collaborator_ids_deduplicated():
    order = ServiceOrder(
        id=1,
        os_number="A",
        departments=[
            OrderDepartment(department_id=1, collaborators=[3, 4]),
            OrderDepartment(department_id=2, collaborators=[4, 5]),
        ],
    )
    assert order.collaborator_ids() == [3, 4, 5]
