"""Name value objects and name table tooling for Dungeon game content."""

from .application.services.name_factory import (
    corpse_name,
    derive_with_suffix,
    name_from_config,
    name_from_forms,
    name_from_singular,
)
from .domain.errors import InvalidFieldError, MissingFieldError, NameConfigError
from .domain.models.name import Name

__all__ = [
    "InvalidFieldError",
    "MissingFieldError",
    "Name",
    "NameConfigError",
    "corpse_name",
    "derive_with_suffix",
    "name_from_config",
    "name_from_forms",
    "name_from_singular",
]
