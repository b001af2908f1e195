from __future__ import annotations

import pytest

from vacation_tracker.core.exceptions import NotFoundError, ValidationError
from vacation_tracker.employees.memory_employee_repository import InMemoryEmployeeRepository
from vacation_tracker.employees.model import Employee
from vacation_tracker.employees.service import EmployeeService


def _service(*employees: Employee) -> tuple[EmployeeService, InMemoryEmployeeRepository]:
    repo = InMemoryEmployeeRepository(employees)
    ids = iter(f"emp_{i}" for i in range(1, 100))
    return EmployeeService(repo, id_factory=lambda: next(ids)), repo


def test_add_employee_starts_with_full_balance():
    svc, repo = _service()

    e = svc.add_employee(name="  Anna  ", allowance=30)

    assert e.id == "emp_1"
    assert e.name == "Anna"
    assert e.used == 0
    assert e.remaining == e.allowance == 30
    assert e.color == "#1c5975"
    assert repo.list_all() == [e]


@pytest.mark.parametrize("allowance", [1, 50])
def test_allowance_bounds_are_inclusive(allowance):
    svc, _ = _service()
    assert svc.add_employee(name="Bob", allowance=allowance).remaining == allowance


@pytest.mark.parametrize("allowance", [0, 51, -3, 30.5, "30", True, None])
def test_invalid_allowance_is_rejected(allowance):
    svc, repo = _service()

    with pytest.raises(ValidationError):
        svc.add_employee(name="Bob", allowance=allowance)
    assert repo.list_all() == []


@pytest.mark.parametrize("name", ["", "   ", None, 42])
def test_blank_name_is_rejected(name):
    svc, repo = _service()

    with pytest.raises(ValidationError):
        svc.add_employee(name=name, allowance=20)
    assert repo.list_all() == []


def test_ids_are_unique():
    svc = EmployeeService(InMemoryEmployeeRepository())
    ids = {svc.add_employee(name=f"E{i}", allowance=10).id for i in range(20)}
    assert len(ids) == 20
    assert all(i.startswith("emp_") for i in ids)


def test_replace_all_overwrites_collection_as_sent():
    svc, repo = _service(Employee(id="old", name="Old", allowance=10, remaining=10))

    count = svc.replace_all(
        [
            {"id": "a", "name": "A", "allowance": 30, "used": 5, "remaining": 25},
            # out of range and inconsistent values are kept
            {"id": "b", "name": "B", "allowance": 70, "used": 0, "remaining": 3},
            {"id": "c", "name": "C", "allowance": 20.0},
        ]
    )

    assert count == 3
    stored = repo.list_all()
    assert [e.id for e in stored] == ["a", "b", "c"]
    assert stored[1].allowance == 70
    assert stored[1].remaining == 3
    assert stored[2].allowance == 20
    assert stored[2].remaining == 20


@pytest.mark.parametrize(
    "body",
    [
        {"id": "a"},
        "nope",
        [{"name": "no id", "allowance": 10}],
        [{"id": "a", "allowance": 10}],
        [{"id": "a", "name": "A"}],
        [{"id": "a", "name": "A", "allowance": "ten"}],
        [{"id": "a", "name": "A", "allowance": 1}, {"id": "a", "name": "B", "allowance": 2}],
    ],
)
def test_replace_all_rejects_malformed_body_and_keeps_store(body):
    original = Employee(id="keep", name="Keep", allowance=10, remaining=10)
    svc, repo = _service(original)

    with pytest.raises(ValidationError):
        svc.replace_all(body)
    assert repo.list_all() == [original]


def test_update_recomputes_remaining_from_used():
    svc, repo = _service(Employee(id="e1", name="Anna", allowance=30, used=5, remaining=25))

    updated = svc.update_employee("e1", {"allowance": 40, "name": "Anna K."})

    assert updated.remaining == 35
    assert updated.used == 5
    assert repo.get_by_id("e1").name == "Anna K."


def test_update_validates_like_add():
    svc, _ = _service(Employee(id="e1", name="Anna", allowance=30, remaining=30))

    with pytest.raises(ValidationError):
        svc.update_employee("e1", {"allowance": 51})
    with pytest.raises(ValidationError):
        svc.update_employee("e1", {"name": " "})
    with pytest.raises(ValidationError):
        svc.update_employee("e1", {"used": 3})


def test_unknown_employee_raises_not_found():
    svc, _ = _service()

    with pytest.raises(NotFoundError):
        svc.get_employee("missing")
    with pytest.raises(NotFoundError):
        svc.update_employee("missing", {"name": "X"})


@pytest.mark.parametrize("name", ["Anna\x01", "A" * 201])
def test_name_with_control_characters_or_too_long_is_rejected(name):
    svc, repo = _service()

    with pytest.raises(ValidationError):
        svc.add_employee(name=name, allowance=20)
    assert repo.list_all() == []


def test_name_at_column_size_is_accepted():
    svc, _ = _service()
    assert len(svc.add_employee(name="A" * 200, allowance=20).name) == 200


@pytest.mark.parametrize("color", [["#fff"], {"hex": "#fff"}, 123, "#" + "f" * 16])
def test_invalid_color_is_rejected(color):
    svc, repo = _service()

    with pytest.raises(ValidationError):
        svc.add_employee(name="Anna", allowance=20, color=color)
    assert repo.list_all() == []


def test_color_is_trimmed_and_defaults_when_empty():
    svc, _ = _service()

    assert svc.add_employee(name="Anna", allowance=20, color=" #ff0000 ").color == "#ff0000"
    assert svc.add_employee(name="Bob", allowance=20, color="").color == "#1c5975"


def test_update_checks_color_and_name_length():
    svc, repo = _service(Employee(id="e1", name="Anna", allowance=30, remaining=30))

    with pytest.raises(ValidationError):
        svc.update_employee("e1", {"color": {"hex": "#fff"}})
    with pytest.raises(ValidationError):
        svc.update_employee("e1", {"name": "A" * 201})
    assert repo.get_by_id("e1").color == "#1c5975"


@pytest.mark.parametrize(
    "record",
    [
        {"id": "x" * 65, "name": "A", "allowance": 10},
        {"id": "a", "name": "A" * 201, "allowance": 10},
        {"id": "a", "name": "A", "allowance": 10, "color": ["red"]},
        {"id": "a", "name": "A", "allowance": 10, "color": "#" + "0" * 16},
    ],
)
def test_replace_all_rejects_values_that_do_not_fit_the_columns(record):
    original = Employee(id="keep", name="Keep", allowance=10, remaining=10)
    svc, repo = _service(original)

    with pytest.raises(ValidationError):
        svc.replace_all([record])
    assert repo.list_all() == [original]
