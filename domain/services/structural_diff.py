"""Structural comparison of wire documents for the round-trip harness."""

from typing import Any

from pydantic import BaseModel, ConfigDict

from domain.value_objects.codec_errors import PathSegment, render_path
from domain.value_objects.wire import WireValue, is_number, wire_kind


class Difference(BaseModel):
    """One place where two wire documents disagree."""

    model_config = ConfigDict(frozen=True)

    path: tuple[PathSegment, ...]
    expected: Any
    actual: Any

    def __str__(self) -> str:
        return f"{render_path(self.path)}: expected {self.expected!r}, got {self.actual!r}"


_MISSING = "<missing>"


def structural_diff(
    expected: WireValue,
    actual: WireValue,
    path: tuple[PathSegment, ...] = (),
) -> list[Difference]:
    """List every difference between two wire documents.

    Object key order is ignored. Numbers compare by value (``5 == 5.0``),
    but booleans never equal numbers.
    """
    if isinstance(expected, dict) and isinstance(actual, dict):
        differences: list[Difference] = []
        for key, value in expected.items():
            if key not in actual:
                differences.append(Difference(path=(*path, key), expected=value, actual=_MISSING))
            else:
                differences.extend(structural_diff(value, actual[key], (*path, key)))
        differences.extend(
            Difference(path=(*path, key), expected=_MISSING, actual=value)
            for key, value in actual.items()
            if key not in expected
        )
        return differences
    if isinstance(expected, list) and isinstance(actual, list):
        if len(expected) != len(actual):
            return [Difference(path=path, expected=f"{len(expected)} items", actual=f"{len(actual)} items")]
        differences = []
        for index, (left, right) in enumerate(zip(expected, actual, strict=True)):
            differences.extend(structural_diff(left, right, (*path, index)))
        return differences
    if is_number(expected) and is_number(actual):
        return [] if expected == actual else [Difference(path=path, expected=expected, actual=actual)]
    if wire_kind(expected) != wire_kind(actual) or expected != actual:
        return [Difference(path=path, expected=expected, actual=actual)]
    return []
