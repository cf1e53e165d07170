"""Untyped wire values as produced by a JSON parser."""

from typing import Any, Final, final

type WireValue = None | bool | int | float | str | list[Any] | dict[str, Any] | Absent


@final
class Absent:
    """Marker for a key that is missing from its parent object.

    ``ABSENT`` is distinct from ``None``: ``None`` is an explicit JSON null.
    """

    _instance: "Absent | None" = None

    def __new__(cls) -> "Absent":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> "Absent":
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> "Absent":
        return self

    def __reduce__(self) -> str:
        return "ABSENT"


ABSENT: Final = Absent()


def wire_kind(value: object) -> str:
    """Return the JSON kind name of a wire value, used in error reports."""
    if value is ABSENT:
        return "absent"
    if value is None:
        return "null"
    # bool is checked before int: bool is an int subclass
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int | float):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list | tuple):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def is_number(value: object) -> bool:
    """Return True for JSON numbers (``bool`` excluded)."""
    return isinstance(value, int | float) and not isinstance(value, bool)
