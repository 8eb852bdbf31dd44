from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT / "src") not in sys.path:
    sys.path.insert(0, str(REPO_ROOT / "src"))

from hr_portal.config import get_settings_module
from hr_portal.database.connection import JsonDocumentStore
from hr_portal.database.migrations import COLLECTIONS, SCHEMA_VERSION_KEY


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    if not settings.DATA_FILE:
        raise SystemExit("DATA_FILE is not set; nothing to initialise.")

    store = JsonDocumentStore(settings.DATA_FILE)
    # Opening a transaction creates the file and runs pending migrations.
    with store.transaction() as doc:
        version = doc.get(SCHEMA_VERSION_KEY)
        counts = {name: len(doc.get(name, [])) for name in COLLECTIONS}

    print(f"OK: {store.path} at schema version {version}")
    for name, count in counts.items():
        print(f"  {name}: {count}")


if __name__ == "__main__":
    main()
