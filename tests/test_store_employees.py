from concurrent.futures import ThreadPoolExecutor
from datetime import date

import pytest
from sqlalchemy import text

from repositories.exceptions import InvalidStoredValueError, MissingFieldError, StoreError
from schemas.employee import EmployeeSchema
from tests.conftest import make_employee


def test_inventory_scenario(store):
    assert store.employees.create(EmployeeSchema(name="Jana", position="Cashier")) == 1
    assert store.employees.create(EmployeeSchema(name="Jan", position="Manager")) == 2

    assert [e.id for e in store.employees.query(EmployeeSchema(name="Jan"))] == [1, 2]
    assert [e.id for e in store.employees.query(EmployeeSchema(name="Jana"))] == [1]

    assert store.employees.update(EmployeeSchema(id=2, department="Ops")) is True
    (jan,) = store.employees.query(EmployeeSchema(id=2))
    assert jan.department == "Ops"
    assert jan.position == "Manager"

    assert store.employees.delete(1) is True
    assert [e.id for e in store.employees.query(EmployeeSchema())] == [2]


def test_create_ignores_supplied_id(store):
    new_id = store.employees.create(make_employee(id=500))

    assert new_id == 1
    assert store.employees.query(EmployeeSchema(id=500)) == []


def test_create_requires_position(store):
    with pytest.raises(MissingFieldError) as exc_info:
        store.employees.create(EmployeeSchema(name="Nobody"))

    assert exc_info.value.fields == ["position"]
    assert store.employees.query() == []


def test_all_fields_round_trip(store):
    employee = EmployeeSchema(
        name="Peter",
        surname="Kovac",
        position="Storekeeper",
        department="Warehouse",
        shift="night",
        salary=1320.5,
        phone_number="+421905111222",
        email="peter@example.com",
        status=True,
        note="Forklift licence",
        hire_date=date(2021, 9, 1),
    )
    new_id = store.employees.create(employee)

    (stored,) = store.employees.query()
    assert stored == employee.model_copy(update={"id": new_id})


def test_exact_field_filter_returns_only_equal_rows(store):
    store.employees.create(make_employee(shift="morning"))
    store.employees.create(make_employee(shift="night"))
    store.employees.create(make_employee(shift="morning"))

    assert [e.id for e in store.employees.query(EmployeeSchema(shift="morning"))] == [1, 3]
    assert store.employees.query(EmployeeSchema(shift="morn")) == []


def test_empty_substring_does_not_narrow(store):
    store.employees.create(make_employee(note="keys"))
    store.employees.create(make_employee(note=None))

    assert len(store.employees.query(EmployeeSchema(note=""))) == 2
    assert len(store.employees.query(EmployeeSchema(surname=""))) == 2


def test_substring_search_is_literal_and_ascii_case_insensitive(store):
    store.employees.create(make_employee(note="50% discount card"))
    store.employees.create(make_employee(note="500 discount points"))

    assert [e.id for e in store.employees.query(EmployeeSchema(note="50%"))] == [1]
    assert [e.id for e in store.employees.query(EmployeeSchema(note="DISCOUNT"))] == [1, 2]


def test_status_filter_keeps_unset_apart_from_false(store):
    store.employees.create(make_employee(status=True))
    store.employees.create(make_employee(status=False))
    store.employees.create(make_employee(status=None))

    assert [e.id for e in store.employees.query(EmployeeSchema(status=False))] == [2]
    assert [e.id for e in store.employees.query(EmployeeSchema(status=True))] == [1]
    assert [e.status for e in store.employees.query()] == [True, False, None]


def test_partial_update_preserves_other_fields(store):
    original = make_employee(department="Sales", salary=1000.0, hire_date=date(2020, 1, 1))
    new_id = store.employees.create(original)

    assert store.employees.update(EmployeeSchema(id=new_id, salary=1100.0, status=False))

    (stored,) = store.employees.query(EmployeeSchema(id=new_id))
    assert stored.salary == 1100.0
    assert stored.status is False
    assert stored.model_dump(exclude={"id", "salary", "status"}) == original.model_dump(
        exclude={"id", "salary", "status"}
    )


def test_update_without_id_changes_nothing(store):
    store.employees.create(make_employee(department="Sales"))

    assert store.employees.update(EmployeeSchema(department="Ops")) is False
    assert store.employees.query()[0].department == "Sales"


def test_update_with_nothing_to_change_or_unknown_id(store):
    new_id = store.employees.create(make_employee())

    assert store.employees.update(EmployeeSchema(id=new_id)) is False
    assert store.employees.update(EmployeeSchema(id=999, department="Ops")) is False


def test_delete_missing_id_returns_false(store):
    new_id = store.employees.create(make_employee())

    assert store.employees.delete(new_id + 1) is False
    assert store.employees.delete(new_id) is True
    assert store.employees.query(EmployeeSchema(id=new_id)) == []
    assert store.employees.delete(new_id) is False


def test_ids_are_not_reused_after_delete(store):
    first = store.employees.create(make_employee())
    store.employees.delete(first)

    assert store.employees.create(make_employee()) == first + 1


def test_store_failure_is_raised_as_store_error(store):
    with store.engine.begin() as connection:
        connection.execute(text("DROP TABLE employees"))

    with pytest.raises(StoreError) as exc_info:
        store.employees.query()

    assert exc_info.value.__cause__ is not None
    with pytest.raises(StoreError):
        store.employees.create(make_employee())


def test_init_schema_is_idempotent(store):
    store.employees.create(make_employee())

    store.init_schema()

    assert len(store.employees.query()) == 1


def test_pool_is_bounded_and_waits_instead_of_failing(store):
    assert store.engine.pool.size() == 5
    assert store.engine.pool.timeout() is None

    with ThreadPoolExecutor(max_workers=12) as executor:
        ids = list(executor.map(lambda i: store.employees.create(make_employee(note=f"n{i}")), range(30)))

    assert sorted(ids) == list(range(1, 31))
    assert len(store.employees.query()) == 30


def test_corrupted_stored_date_is_raised_as_store_error(store):
    store.employees.create(make_employee(hire_date=date(2022, 5, 2)))
    with store.engine.begin() as connection:
        connection.execute(text("UPDATE employees SET hire_date = 'garbage'"))

    with pytest.raises(InvalidStoredValueError) as exc_info:
        store.employees.query()

    assert isinstance(exc_info.value, StoreError)
    assert exc_info.value.column == "hire_date"
