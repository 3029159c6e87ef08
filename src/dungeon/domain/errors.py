from __future__ import annotations


class NameConfigError(ValueError):
    """A name configuration record cannot be turned into a Name."""

    entry_id: str | None = None

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field


class MissingFieldError(NameConfigError):
    def __init__(self, field: str) -> None:
        super().__init__(field, f"Missing required field '{field}'")


class InvalidFieldError(NameConfigError):
    def __init__(self, field: str, value: object, *, expected: str = "a string") -> None:
        super().__init__(field, f"Field '{field}' must be {expected}, got {type(value).__name__}")
        self.value = value
