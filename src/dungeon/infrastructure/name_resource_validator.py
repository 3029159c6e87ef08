"""Validate name table JSON resources.

Usage examples:
    python -m dungeon.infrastructure.name_resource_validator data/creatures/names.json
    python -m dungeon.infrastructure.name_resource_validator data/items/names.json --strict
"""

from __future__ import annotations

import argparse
import json
import logging
import os
from pathlib import Path
from typing import Sequence

from dungeon.infrastructure.name_resources import NameAudit, audit_name_table

_logger = logging.getLogger(__name__)


def _strict_from_env() -> bool:
    return os.getenv("DUNGEON_NAMES_STRICT", "0").strip().lower() in {"1", "true", "yes"}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Validate name table JSON resources")
    parser.add_argument("paths", nargs="+", help="Name table JSON files to check")
    parser.add_argument(
        "--strict",
        action="store_true",
        default=_strict_from_env(),
        help="Fail on unnecessary plural properties as well as on errors",
    )
    return parser


def validate_name_file(path: str | Path) -> NameAudit:
    source = Path(path)
    if not source.exists():
        return NameAudit(errors=(f"File not found: {source}",))

    try:
        text = source.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        return NameAudit(errors=(f"Unreadable file: {exc}",))

    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        return NameAudit(errors=(f"Invalid JSON: {exc}",))

    return audit_name_table(payload)


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    failed = False
    for path in args.paths:
        audit = validate_name_file(path)
        _logger.debug("Audited %s: %d errors, %d warnings", path, len(audit.errors), len(audit.warnings))
        if audit.is_clean:
            print(f"{path}: names valid.")
            continue

        if audit.errors:
            failed = True
            print(f"{path}: invalid ({len(audit.errors)} errors):")
            for message in audit.errors:
                print(f"- {message}")
        if audit.warnings:
            failed = failed or args.strict
            print(f"{path}: {len(audit.warnings)} warnings:")
            for message in audit.warnings:
                print(f"- {message}")

    return 1 if failed else 0


if __name__ == "__main__":
    raise SystemExit(main())
