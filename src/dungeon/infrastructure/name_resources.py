from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

from dungeon.application.services.name_factory import WarningSink, name_from_config
from dungeon.domain.errors import InvalidFieldError, NameConfigError
from dungeon.domain.models.name import Name


@dataclass(frozen=True)
class NameAudit:
    errors: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()

    @property
    def is_clean(self) -> bool:
        return not self.errors and not self.warnings


def _require_table(payload: Any) -> Mapping[str, Any]:
    if not isinstance(payload, Mapping):
        raise InvalidFieldError("document", payload, expected="an object of name records")
    return payload


def load_name_table(payload: Any, *, warn: WarningSink | None = None) -> dict[str, Name]:
    """Build a Name for every ``entry_id -> record`` pair of a parsed name table.

    Configuration errors are re-raised with ``entry_id`` set to the failing key.
    """

    names: dict[str, Name] = {}
    for entry_id, record in _require_table(payload).items():
        try:
            names[str(entry_id)] = name_from_config(record, warn=warn)
        except NameConfigError as exc:
            exc.entry_id = str(entry_id)
            raise
    return names


def load_name_file(path: str | Path, *, warn: WarningSink | None = None) -> dict[str, Name]:
    source = Path(path)
    payload = json.loads(source.read_text(encoding="utf-8"))
    return load_name_table(payload, warn=warn)


def audit_name_table(payload: Any) -> NameAudit:
    if not isinstance(payload, Mapping):
        return NameAudit(errors=(f"Expected an object of name records, got {type(payload).__name__}",))

    errors: list[str] = []
    warnings: list[str] = []
    for entry_id, record in payload.items():
        entry_warnings: list[str] = []
        try:
            name_from_config(record, warn=entry_warnings.append)
        except NameConfigError as exc:
            errors.append(f"{entry_id}: {exc}")
            continue
        warnings.extend(f"{entry_id}: {message}" for message in entry_warnings)
    return NameAudit(errors=tuple(errors), warnings=tuple(warnings))
