"""One-way push of store snapshots to an external spreadsheet webhook.

Best effort and at most once: no retry, no queue. ``notify`` never raises. By
the time it is called the triggering mutation is already in the store, and a
failed push must not undo it or turn the response into an error.
"""
from __future__ import annotations

import logging
from concurrent.futures import Executor
from typing import Callable, Optional, Protocol

import httpx

from ..core.constants import DEFAULT_SYNC_TIMEOUT_SECONDS
from ..core.enums import DatasetKind
from ..core.exceptions import SyncError
from .payloads import build_payload

logger = logging.getLogger(__name__)


class SyncNotifier(Protocol):
    def notify(self, kind: DatasetKind, *snapshots) -> None:
        raise NotImplementedError


class WebhookSyncNotifier(SyncNotifier):
    """POST a JSON snapshot to ``url``; without a URL every call is a no-op.

    With an ``executor`` the HTTP call runs in the background and ``notify``
    returns as soon as the payload is built. Without one it runs inline.
    """

    def __init__(
        self,
        url: Optional[str],
        *,
        timeout: float = DEFAULT_SYNC_TIMEOUT_SECONDS,
        executor: Optional[Executor] = None,
        client_factory: Optional[Callable[[], httpx.Client]] = None,
    ):
        self._url = (url or "").strip() or None
        self._timeout = float(timeout)
        self._executor = executor
        self._client_factory = client_factory or (lambda: httpx.Client(timeout=self._timeout))

    @property
    def enabled(self) -> bool:
        return self._url is not None

    def notify(self, kind: DatasetKind, *snapshots) -> None:
        if not self.enabled:
            return

        try:
            # Built now so the push reflects the store as of this call.
            payload = build_payload(kind, *snapshots)
            if self._executor is not None:
                self._executor.submit(self._send, kind, payload)
            else:
                self._send(kind, payload)
        except Exception:
            logger.exception("Error syncing %s data", kind.value)

    def _send(self, kind: DatasetKind, payload: dict) -> None:
        try:
            with self._client_factory() as client:
                response = client.post(self._url, json=payload)
            if not 200 <= response.status_code < 400:
                raise SyncError(f"webhook answered {response.status_code}")
            logger.info("%s data synced to spreadsheet", kind.value.capitalize())
        except Exception:
            logger.exception("Error syncing %s data", kind.value)
