"""
Rewrite the JSON database in normalized form.

Group labels, statuses and missing fields are repaired the same way the API
repairs them on every read, and the result is saved back to disk.

Usage: python scripts/fix_db.py [path/to/database.json]
"""

from __future__ import annotations

import json
import os
import sys
from typing import Any

from barnehage.core.constants import COLLECTIONS
from barnehage.store import JsonStore, normalize_database


def count_changes(
    raw: dict[str, Any], normalized: dict[str, list[Any]]
) -> dict[str, int]:
    """Count the records per collection that normalization changed."""
    changes = {}
    for name in COLLECTIONS:
        before = raw.get(name) if isinstance(raw.get(name), list) else []
        after = normalized[name]
        changed = sum(1 for old, new in zip(before, after) if old != new)
        changes[name] = changed + abs(len(before) - len(after))
    return changes


def main() -> None:
    """Main entry point for the fix script."""
    path = sys.argv[1] if len(sys.argv) > 1 else os.environ.get("DATABASE_PATH")
    if not path:
        print("Error: pass the database path or set DATABASE_PATH.")
        sys.exit(1)
    if not os.path.exists(path):
        print(f"Error: {path} does not exist.")
        sys.exit(1)

    try:
        with open(path, encoding="utf-8") as f:
            raw = json.load(f)
        if not isinstance(raw, dict):
            raw = {}

        normalized = normalize_database(raw)
        for name, changed in count_changes(raw, normalized).items():
            print(f"  {name}: {changed} record(s) repaired")

        JsonStore(path).write(normalized)
        print(f"\n{path} normalized and saved.")
    except Exception as e:
        print(f"\nFailed to fix database: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
