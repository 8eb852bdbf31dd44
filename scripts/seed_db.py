from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT / "src") not in sys.path:
    sys.path.insert(0, str(REPO_ROOT / "src"))

from hr_portal.config import get_settings_module
from hr_portal.container import build_container

DEMO_EMPLOYEES = [
    {"name": "Alice Johnson", "username": "alice", "position": "Software Engineer", "salary": 60000},
    {"name": "Bob Smith", "username": "bob", "position": "Product Manager", "salary": 75000},
    {"name": "Charlie Brown", "username": "charlie", "position": "UI/UX Designer", "salary": 55000},
]
DEMO_PASSWORD = "password123"


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    container = build_container(data_file=settings.DATA_FILE)

    existing = {e.username for e in container.employee_service.list_employees()}
    added = 0
    for data in DEMO_EMPLOYEES:
        if data["username"] in existing:
            continue
        container.employee_service.add_employee(password=DEMO_PASSWORD, **data)
        added += 1

    print(f"OK: Seeded {added} demo employee(s) into {container.store.path or '<memory>'}")


if __name__ == "__main__":
    main()
