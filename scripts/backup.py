"""Backup the JSON data file.

Note: copies the whole document under `backups/` with a timestamp suffix.
Run it while the app is idle; writes are atomic but not coordinated with this script.
"""

from __future__ import annotations

import importlib
import shutil
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT / "src") not in sys.path:
    sys.path.insert(0, str(REPO_ROOT / "src"))

from hr_portal.config import get_settings_module


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    if not settings.DATA_FILE:
        raise SystemExit("DATA_FILE is not set; an in-memory store has nothing to back up.")

    source = Path(settings.DATA_FILE)
    if not source.exists():
        raise SystemExit(f"Data file not found: {source}")

    out_dir = REPO_ROOT / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"{source.stem}_{ts}{source.suffix}"
    shutil.copy2(source, out_file)
    print(f"OK: Backup created: {out_file}")


if __name__ == "__main__":
    main()
