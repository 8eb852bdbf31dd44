"""Schema-versioned load routine for the JSON document.

Each migration is additive and idempotent; `apply_migrations` runs those newer than
the document's `schemaVersion` in order and bumps the version.
"""

from __future__ import annotations

import copy
import logging
import uuid
from typing import Any, Callable, Dict, List, Tuple

from werkzeug.security import generate_password_hash

from ..core.constants import (
    DEFAULT_ADMIN_AVATAR,
    DEFAULT_ADMIN_NAME,
    DEFAULT_ADMIN_PASSWORD,
    DEFAULT_ADMIN_USERNAME,
    DEFAULT_CLOCK_IN_RADIUS,
    DEFAULT_OFFICE_LATITUDE,
    DEFAULT_OFFICE_LONGITUDE,
)

logger = logging.getLogger(__name__)

SCHEMA_VERSION_KEY = "schemaVersion"

COLLECTIONS = (
    "employees",
    "attendance",
    "leaveRequests",
    "dayDiary",
    "projects",
    "chatGroups",
    "chatMessages",
    "adminProfiles",
    "userChatStatus",
)

DEFAULT_SETTINGS: Dict[str, Any] = {
    "officeLocation": {
        "latitude": DEFAULT_OFFICE_LATITUDE,
        "longitude": DEFAULT_OFFICE_LONGITUDE,
    },
    "clockInRadius": DEFAULT_CLOCK_IN_RADIUS,
}


def _ensure_collections(doc: dict) -> None:
    for key in COLLECTIONS:
        if not isinstance(doc.get(key), list):
            doc[key] = []
    if not isinstance(doc.get("settings"), dict):
        doc["settings"] = copy.deepcopy(DEFAULT_SETTINGS)


def _migrate_admin_profiles(doc: dict) -> None:
    if doc.get("adminProfiles"):
        doc.pop("adminProfile", None)
        return

    legacy = doc.pop("adminProfile", None)
    if not isinstance(legacy, dict):
        legacy = {}
    doc["adminProfiles"] = [
        {
            "id": str(uuid.uuid4()),
            "name": legacy.get("name") or DEFAULT_ADMIN_NAME,
            "avatar": legacy.get("avatar") or DEFAULT_ADMIN_AVATAR,
            "username": legacy.get("username") or DEFAULT_ADMIN_USERNAME,
            "password": legacy.get("password") or DEFAULT_ADMIN_PASSWORD,
        }
    ]
    logger.info("Seeded admin profile %r", doc["adminProfiles"][0]["username"])


def _hash_plaintext_passwords(doc: dict) -> None:
    for key in ("employees", "adminProfiles"):
        for row in doc.get(key, []):
            if "password" not in row:
                continue
            plaintext = row.pop("password")
            if plaintext and not row.get("passwordHash"):
                row["passwordHash"] = generate_password_hash(plaintext)


MIGRATIONS: List[Tuple[int, Callable[[dict], None]]] = [
    (1, _ensure_collections),
    (2, _migrate_admin_profiles),
    (3, _hash_plaintext_passwords),
]

LATEST_VERSION = MIGRATIONS[-1][0]


def apply_migrations(doc: dict) -> bool:
    """Bring `doc` up to LATEST_VERSION in place. Returns True if anything ran."""
    current = int(doc.get(SCHEMA_VERSION_KEY) or 0)
    changed = False

    for version, migrate in MIGRATIONS:
        if version <= current:
            continue
        migrate(doc)
        doc[SCHEMA_VERSION_KEY] = version
        changed = True
        logger.info("Applied document migration v%d (%s)", version, migrate.__name__)

    # Collections can also go missing from hand-edited files.
    missing = any(not isinstance(doc.get(k), list) for k in COLLECTIONS) or not isinstance(doc.get("settings"), dict)
    if current >= 1 and missing:
        _ensure_collections(doc)
        changed = True

    return changed
