"""Construction of Name values.

All names used by game content go through this module so that the default
pluralization rule is applied consistently. Name tables may spell out a plural
form explicitly; when it equals the default the property is reported as
unnecessary so resource files stay minimal.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping

from dungeon.application.services.pluralization import default_plural, is_redundant
from dungeon.domain.errors import InvalidFieldError, MissingFieldError
from dungeon.domain.models.name import Name

WarningSink = Callable[[str], None]

CORPSE_SUFFIX = "Corpse"

_logger = logging.getLogger(__name__)


def name_from_singular(singular: str) -> Name:
    return Name(singular=singular, plural=default_plural(singular))


def name_from_forms(singular: str, plural: str) -> Name:
    return Name(singular=singular, plural=plural)


def _read_string(record: Mapping[str, Any], field: str) -> str | None:
    value = record.get(field)
    if value is None:
        return None
    if not isinstance(value, str):
        raise InvalidFieldError(field, value)
    return value


def unnecessary_plural_message(singular: str, plural: str) -> str:
    return f"Unnecessary JSON property: {plural} can be rendered from {singular}."


def name_from_config(record: Mapping[str, Any], *, warn: WarningSink | None = None) -> Name:
    """Build a Name from a ``{"singular": ..., "plural": ...}`` record.

    ``plural`` is optional. A plural equal to the default one is still
    honoured, but one warning is sent to ``warn`` (or to this module's logger
    when no sink is given).
    """

    if not isinstance(record, Mapping):
        raise InvalidFieldError("record", record, expected="an object")

    singular = _read_string(record, "singular")
    if singular is None:
        raise MissingFieldError("singular")

    plural = _read_string(record, "plural")
    if plural is None:
        return name_from_singular(singular)

    if is_redundant(singular, plural):
        message = unnecessary_plural_message(singular, plural)
        if warn is None:
            _logger.warning(message)
        else:
            warn(message)
    return name_from_forms(singular, plural)


def derive_with_suffix(base: Name, suffix: str) -> Name:
    # The base plural is not carried over; irregular plurals fall back to the default rule.
    return name_from_singular(f"{base.singular} {suffix}")


def corpse_name(creature_name: Name) -> Name:
    return derive_with_suffix(creature_name, CORPSE_SUFFIX)
