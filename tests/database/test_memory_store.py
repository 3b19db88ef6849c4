from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from src.frontdesk.frontdesk.core.enums import EmployeeAction, EntityKind, VolunteerAction
from src.frontdesk.frontdesk.database.memory_store import MemoryStore


def _volunteer(store: MemoryStore, name: str = "Sarah", **kwargs):
    return store.create(EntityKind.VOLUNTEER, {"name": name, "role": "Regular Volunteer"}, **kwargs)


def test_ids_are_unique_and_increase_across_deletions(store):
    first = _volunteer(store, "A")
    second = _volunteer(store, "B")
    assert store.delete(EntityKind.VOLUNTEER, second.id)

    third = _volunteer(store, "C")

    assert (first.id, second.id, third.id) == (1, 2, 3)


def test_each_kind_has_its_own_counter(store):
    volunteer = _volunteer(store)
    employee = store.create(EntityKind.EMPLOYEE, {"name": "John", "role": "Manager"})
    guest = store.create(EntityKind.GUEST, {"first_name": "Ada", "last_name": "Lovelace"})

    assert volunteer.id == employee.id == guest.id == 1


def test_create_fills_defaults(store, fixed_now):
    volunteer = _volunteer(store, now=fixed_now)
    guest = store.create(EntityKind.GUEST, {"first_name": "Ada", "last_name": "Lovelace"}, now=fixed_now)
    employee = store.create(EntityKind.EMPLOYEE, {"name": "John", "role": "Manager"}, now=fixed_now)

    assert volunteer.is_checked_in is False
    assert volunteer.last_check_in is None and volunteer.photo_url is None
    assert volunteer.created_at == fixed_now
    assert guest.wants_newsletter is False
    assert guest.email is None and guest.visited_at == fixed_now
    assert employee.is_active is True


def test_get_all_keeps_creation_order(store):
    for name in ["Zoe", "Adam", "Mia"]:
        _volunteer(store, name)

    assert [v.name for v in store.get_all(EntityKind.VOLUNTEER)] == ["Zoe", "Adam", "Mia"]


def test_get_missing_returns_none(store):
    assert store.get(EntityKind.VOLUNTEER, 42) is None


def test_update_merges_only_supplied_keys(store):
    volunteer = _volunteer(store)

    updated = store.update(EntityKind.VOLUNTEER, volunteer.id, {"role": "Team Leader"})

    assert updated.role == "Team Leader"
    assert updated.name == volunteer.name
    assert store.get(EntityKind.VOLUNTEER, volunteer.id) == updated


def test_update_never_overwrites_id_or_created_at(store, fixed_now):
    volunteer = _volunteer(store, now=fixed_now)

    updated = store.update(
        EntityKind.VOLUNTEER,
        volunteer.id,
        {"id": 99, "created_at": fixed_now + timedelta(days=1), "name": "Renamed"},
    )

    assert updated.id == volunteer.id
    assert updated.created_at == fixed_now
    assert updated.name == "Renamed"
    assert store.get(EntityKind.VOLUNTEER, 99) is None


def test_update_missing_returns_none(store):
    assert store.update(EntityKind.VOLUNTEER, 7, {"name": "X"}) is None


def test_guests_cannot_be_updated(store):
    guest = store.create(EntityKind.GUEST, {"first_name": "Ada", "last_name": "Lovelace"})

    with pytest.raises(ValueError):
        store.update(EntityKind.GUEST, guest.id, {"first_name": "Grace"})


def test_delete_volunteer_cascades_only_its_logs(store):
    keep = _volunteer(store, "Keep")
    drop = _volunteer(store, "Drop")
    for volunteer_id in (keep.id, drop.id, keep.id, drop.id):
        store.create(EntityKind.VOLUNTEER_LOG, {"volunteer_id": volunteer_id, "action": VolunteerAction.CHECK_IN})

    assert store.delete(EntityKind.VOLUNTEER, drop.id) is True

    assert [v.id for v in store.get_all(EntityKind.VOLUNTEER)] == [keep.id]
    remaining = store.get_all(EntityKind.VOLUNTEER_LOG)
    assert len(remaining) == 2
    assert all(log.volunteer_id == keep.id for log in remaining)


def test_delete_employee_cascades_its_logs(store):
    employee = store.create(EntityKind.EMPLOYEE, {"name": "John", "role": "Manager"})
    other = store.create(EntityKind.EMPLOYEE, {"name": "Jane", "role": "Coordinator"})
    store.create(EntityKind.EMPLOYEE_LOG, {"employee_id": employee.id, "action": EmployeeAction.CLOCK_IN})
    store.create(EntityKind.EMPLOYEE_LOG, {"employee_id": other.id, "action": EmployeeAction.CLOCK_IN})

    store.delete(EntityKind.EMPLOYEE, employee.id)

    assert [log.employee_id for log in store.get_all(EntityKind.EMPLOYEE_LOG)] == [other.id]


def test_delete_missing_returns_false(store):
    assert store.delete(EntityKind.EMPLOYEE, 5) is False


def test_get_logs_filters_by_parent(store):
    a = _volunteer(store, "A")
    b = _volunteer(store, "B")
    store.create(EntityKind.VOLUNTEER_LOG, {"volunteer_id": a.id, "action": VolunteerAction.CHECK_IN})
    store.create(EntityKind.VOLUNTEER_LOG, {"volunteer_id": b.id, "action": VolunteerAction.CHECK_IN})

    assert [log.volunteer_id for log in store.get_logs(EntityKind.VOLUNTEER_LOG, b.id)] == [b.id]
    assert len(store.get_logs(EntityKind.VOLUNTEER_LOG)) == 2


def test_todays_guests_day_boundary(store):
    now = datetime(2026, 2, 2, 15, 30)
    midnight = datetime(2026, 2, 2, 0, 0)
    guest = {"first_name": "Ada", "last_name": "Lovelace"}

    store.create(EntityKind.GUEST, guest, now=midnight - timedelta(milliseconds=1))
    at_midnight = store.create(EntityKind.GUEST, guest, now=midnight)
    store.create(EntityKind.GUEST, guest, now=midnight + timedelta(days=1))

    assert [g.id for g in store.get_todays_guests(now=now)] == [at_midnight.id]


def test_todays_employee_logs_use_same_boundary(store):
    now = datetime(2026, 2, 2, 15, 30)
    midnight = datetime(2026, 2, 2, 0, 0)
    payload = {"employee_id": 1, "action": EmployeeAction.CLOCK_IN}

    store.create(EntityKind.EMPLOYEE_LOG, payload, now=midnight - timedelta(milliseconds=1))
    included = store.create(EntityKind.EMPLOYEE_LOG, payload, now=midnight)

    assert [log.id for log in store.get_todays_employee_logs(now=now)] == [included.id]
