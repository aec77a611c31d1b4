#!/usr/bin/env python3
"""Quick connectivity check: runs one query through the configured sql handle.

Usage:
  python -m scripts.check_connection     # uses .env / environment (DATABASE_URL, APP_ENV)
"""

from __future__ import annotations

import sys
from pathlib import Path

_project_root = Path(__file__).resolve().parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from neondb.db import NeonDbError, NeonHttpClient, init_database, load_settings  # noqa: E402
from neondb.db.proxy import mask_password  # noqa: E402


def check(sql: NeonHttpClient) -> bool:
    try:
        rows = sql("SELECT version() AS version, current_database() AS database")
    except NeonDbError as exc:
        print(f"Connection failed: {exc}")
        return False
    row = rows[0] if rows else {}
    print("Endpoint:", mask_password(sql.endpoint))
    print("Database:", row.get("database"))
    print("Server:  ", row.get("version"))
    return True


def main() -> int:
    handles = init_database(load_settings())
    return 0 if check(handles.sql) else 1


if __name__ == "__main__":
    sys.exit(main())
