"""
Tests for the employee repository functions.
"""

import pytest
from sqlalchemy.exc import MultipleResultsFound

from app.crud import employee as employee_crud
from app.models.employee import Employee


def make_employee(first_name="Matthias", last_name="Holcombe", email="test@email.com"):
    return Employee(first_name=first_name, last_name=last_name, email=email)


class TestSaveAndLoad:

    def test_save_assigns_id(self, db_session):
        saved = employee_crud.save(db_session, make_employee())

        assert saved is not None
        assert saved.id > 0

    def test_get_all(self, db_session):
        employee_crud.save(db_session, make_employee())
        employee_crud.save(db_session, make_employee("test", "test", "test2@email.com"))

        employees = employee_crud.get_all(db_session)

        assert len(employees) == 2
        assert [e.email for e in employees] == ["test@email.com", "test2@email.com"]

    def test_get_by_id(self, db_session):
        saved = employee_crud.save(db_session, make_employee())

        assert employee_crud.get_by_id(db_session, saved.id) is saved
        assert employee_crud.get_by_id(db_session, saved.id + 1) is None

    def test_get_by_email(self, db_session):
        employee_crud.save(db_session, make_employee())

        found = employee_crud.get_by_email(db_session, "test@email.com")

        assert found is not None
        assert found.first_name == "Matthias"
        assert employee_crud.get_by_email(db_session, "nobody@email.com") is None

    def test_save_existing_updates_in_place(self, db_session):
        saved = employee_crud.save(db_session, make_employee())
        original_id = saved.id

        saved.email = "newEmail@email.com"
        updated = employee_crud.save(db_session, saved)

        assert updated.id == original_id
        assert updated.email == "newEmail@email.com"
        assert db_session.query(Employee).count() == 1


class TestDelete:

    def test_delete_by_id(self, db_session):
        saved = employee_crud.save(db_session, make_employee())

        employee_crud.delete_by_id(db_session, saved.id)

        assert employee_crud.get_all(db_session) == []

    def test_delete_unknown_id_is_noop(self, db_session):
        employee_crud.save(db_session, make_employee())

        employee_crud.delete_by_id(db_session, 12345)

        assert len(employee_crud.get_all(db_session)) == 1


NAME_LOOKUPS = [
    employee_crud.find_by_name,
    employee_crud.find_by_name_named_params,
    employee_crud.find_by_name_native_sql,
]


@pytest.mark.parametrize("lookup", NAME_LOOKUPS, ids=lambda f: f.__name__)
class TestFindByName:
    """All three query styles behave the same"""

    def test_finds_matching_employee(self, db_session, lookup):
        saved = employee_crud.save(db_session, make_employee())
        employee_crud.save(db_session, make_employee("Matthias", "Other", "other@email.com"))

        found = lookup(db_session, "Matthias", "Holcombe")

        assert found is not None
        assert found.id == saved.id
        assert found.email == "test@email.com"

    def test_returns_none_when_no_match(self, db_session, lookup):
        employee_crud.save(db_session, make_employee())

        assert lookup(db_session, "Matthias", "Nobody") is None

    def test_multiple_matches_raise(self, db_session, lookup):
        employee_crud.save(db_session, make_employee())
        employee_crud.save(db_session, make_employee(email="twin@email.com"))

        with pytest.raises(MultipleResultsFound):
            lookup(db_session, "Matthias", "Holcombe")
