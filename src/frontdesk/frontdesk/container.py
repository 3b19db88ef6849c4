from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Optional

from .core.constants import DEFAULT_SYNC_TIMEOUT_SECONDS
from .database.memory_store import MemoryStore
from .employees.memory_employee_repository import MemoryEmployeeRepository
from .employees.service import EmployeeService
from .guests.memory_guest_repository import MemoryGuestRepository
from .guests.service import GuestService
from .reports.service import ReportService
from .seed import seed_sample_data
from .sync.notifier import SyncNotifier, WebhookSyncNotifier
from .volunteers.memory_volunteer_repository import MemoryVolunteerRepository
from .volunteers.service import VolunteerService


@dataclass(frozen=True)
class Container:
    store: MemoryStore
    notifier: SyncNotifier

    volunteers_repo: MemoryVolunteerRepository
    guests_repo: MemoryGuestRepository
    employees_repo: MemoryEmployeeRepository

    volunteer_service: VolunteerService
    guest_service: GuestService
    employee_service: EmployeeService
    report_service: ReportService


def build_container(
    *,
    webhook_url: Optional[str] = None,
    sync_timeout: float = DEFAULT_SYNC_TIMEOUT_SECONDS,
    seed: bool = False,
    notifier: Optional[SyncNotifier] = None,
    store: Optional[MemoryStore] = None,
) -> Container:
    """Wire one store, one notifier and the services around them.

    Built once at process start; the store lives as long as the process.
    """
    store = store or MemoryStore()
    if seed:
        seed_sample_data(store)

    if notifier is None:
        executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="sheets-sync") if webhook_url else None
        notifier = WebhookSyncNotifier(webhook_url, timeout=sync_timeout, executor=executor)

    volunteers_repo = MemoryVolunteerRepository(store)
    guests_repo = MemoryGuestRepository(store)
    employees_repo = MemoryEmployeeRepository(store)

    return Container(
        store=store,
        notifier=notifier,
        volunteers_repo=volunteers_repo,
        guests_repo=guests_repo,
        employees_repo=employees_repo,
        volunteer_service=VolunteerService(volunteers_repo, notifier),
        guest_service=GuestService(guests_repo, notifier),
        employee_service=EmployeeService(employees_repo, notifier),
        report_service=ReportService(volunteers_repo, guests_repo, employees_repo),
    )
