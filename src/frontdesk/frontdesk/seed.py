"""Sample roster loaded at startup when ``SEED_SAMPLE_DATA`` is on."""
from __future__ import annotations

from .core.enums import EntityKind
from .database.memory_store import MemoryStore

SAMPLE_VOLUNTEERS = [
    ("Sarah Johnson", "Regular Volunteer"),
    ("Mike Chen", "Team Leader"),
    ("Anna Lopez", "New Volunteer"),
    ("David Kim", "Regular Volunteer"),
    ("Lisa Wong", "Coordinator"),
]

SAMPLE_EMPLOYEES = [
    ("John Doe", "Manager"),
    ("Jane Smith", "Coordinator"),
    ("David Brown", "Assistant"),
]


def seed_sample_data(store: MemoryStore) -> None:
    for name, role in SAMPLE_VOLUNTEERS:
        store.create(EntityKind.VOLUNTEER, {"name": name, "role": role})
    for name, role in SAMPLE_EMPLOYEES:
        store.create(EntityKind.EMPLOYEE, {"name": name, "role": role, "is_active": True})
