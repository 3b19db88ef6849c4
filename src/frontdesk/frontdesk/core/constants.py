"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

API_PREFIX = "/api"

DEFAULT_SYNC_TIMEOUT_SECONDS = 10.0

VOLUNTEER_STATUS_LABELS = {True: "Checked In", False: "Available"}
EMPLOYEE_STATUS_LABELS = {True: "Active", False: "Inactive"}
NEWSLETTER_LABELS = {True: "Yes", False: "No"}
