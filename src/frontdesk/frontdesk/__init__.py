"""Front desk check-in tracker.

This package is organized by feature modules (volunteers, guests, employees,
reports, ...) with a thin Flask controller layer over service and repository
layers that share one in-memory store.
"""
from __future__ import annotations

from .main import create_app

__all__ = ["create_app"]
