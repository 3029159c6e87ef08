from __future__ import annotations

PLURAL_SUFFIX = "s"


def default_plural(singular: str) -> str:
    return singular + PLURAL_SUFFIX


def is_redundant(singular: str, plural: str) -> bool:
    """Return True when ``plural`` adds nothing over the default rule."""

    return plural == default_plural(singular)
