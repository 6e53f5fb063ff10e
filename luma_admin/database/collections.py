"""Firestore collection names and document paths.

Firestore has no DDL. These constants and helpers are the single source of
truth for where each entity lives.
"""

COLLECTION_SYSTEM_SETTINGS = "systemSettings"
COLLECTION_ADMINS = "lumaAdmins"
COLLECTION_EVENTS = "events"
COLLECTION_BRANDS = "brands"
COLLECTION_AUDIT_LOGS = "auditLogs"

# Nested under events/{eventId}; queried across events as collection groups
SUBCOLLECTION_VENDORS = "vendors"
SUBCOLLECTION_ORDERS = "orders"


def settings_path(document_id: str) -> str:
    return f"{COLLECTION_SYSTEM_SETTINGS}/{document_id}"


def admin_path(user_id: str) -> str:
    return f"{COLLECTION_ADMINS}/{user_id}"


def event_path(event_id: str) -> str:
    return f"{COLLECTION_EVENTS}/{event_id}"


def vendor_path(event_id: str, vendor_id: str) -> str:
    return f"{event_path(event_id)}/{SUBCOLLECTION_VENDORS}/{vendor_id}"


def brand_path(brand_id: str) -> str:
    return f"{COLLECTION_BRANDS}/{brand_id}"
