from collections.abc import Iterable, Iterator, Mapping, Sequence
from typing import Any, NamedTuple

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema


class HeaderEntry(NamedTuple):
    """One wire entry of a multi-valued map.

    ``is_sequence`` records whether the producer sent an array or a bare
    string, so encoding reproduces the original shape.
    """

    name: str
    values: tuple[str, ...]
    is_sequence: bool


class HeaderMap(Mapping[str, tuple[str, ...]]):
    """Ordered, immutable multi-map with optional case-insensitive lookup.

    Entries keep their first-seen casing and original order. Lookup goes
    through a normalized key, so ``headers["X-ID"]`` finds an entry sent as
    ``x-id``. Two wire keys that only differ by case stay separate entries;
    lookup returns their values concatenated in wire order.
    """

    __slots__ = ("_case_insensitive", "_entries", "_index")

    def __init__(
        self,
        data: Mapping[str, str | Sequence[str]] | Iterable[HeaderEntry] | None = None,
        *,
        case_insensitive: bool = True,
    ) -> None:
        self._case_insensitive = case_insensitive
        if data is None:
            entries: tuple[HeaderEntry, ...] = ()
        elif isinstance(data, Mapping):
            entries = tuple(_entry_from_value(name, value) for name, value in data.items())
        else:
            entries = tuple(HeaderEntry(*entry) for entry in data)
        self._entries = entries
        index: dict[str, list[int]] = {}
        for position, entry in enumerate(entries):
            index.setdefault(self._normalize(entry.name), []).append(position)
        self._index = index

    @property
    def case_insensitive(self) -> bool:
        return self._case_insensitive

    @property
    def entries(self) -> tuple[HeaderEntry, ...]:
        return self._entries

    def _normalize(self, name: str) -> str:
        return name.lower() if self._case_insensitive else name

    def __getitem__(self, name: str) -> tuple[str, ...]:
        positions = self._index.get(self._normalize(name))
        if positions is None:
            raise KeyError(name)
        return tuple(value for p in positions for value in self._entries[p].values)

    def __iter__(self) -> Iterator[str]:
        # first-seen casing of each distinct key
        for positions in self._index.values():
            yield self._entries[positions[0]].name

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self._normalize(name) in self._index

    def get_first(self, name: str, default: str | None = None) -> str | None:
        """Return the first value for ``name``, or ``default``."""
        values = self.get(name)
        if not values:
            return default
        return values[0]

    def is_sequence(self, name: str) -> bool:
        """Return the recorded wire shape of the first entry for ``name``."""
        positions = self._index.get(self._normalize(name))
        if positions is None:
            raise KeyError(name)
        return self._entries[positions[0]].is_sequence

    def with_header(self, name: str, value: str | Sequence[str]) -> "HeaderMap":
        """Return a copy where ``name`` is replaced (or appended) by ``value``."""
        replacement = _entry_from_value(name, value)
        target = self._normalize(name)
        entries: list[HeaderEntry] = []
        replaced = False
        for entry in self._entries:
            if self._normalize(entry.name) != target:
                entries.append(entry)
            elif not replaced:
                entries.append(replacement)
                replaced = True
        if not replaced:
            entries.append(replacement)
        return HeaderMap(entries, case_insensitive=self._case_insensitive)

    def to_wire(self) -> dict[str, str | list[str]]:
        wire: dict[str, str | list[str]] = {}
        for entry in self._entries:
            if entry.is_sequence or len(entry.values) != 1:
                wire[entry.name] = list(entry.values)
            else:
                wire[entry.name] = entry.values[0]
        return wire

    def __eq__(self, other: object) -> bool:
        if isinstance(other, HeaderMap):
            return (
                self._entries == other._entries
                and self._case_insensitive == other._case_insensitive
            )
        if isinstance(other, Mapping):
            return dict(self.items()) == dict(other.items())
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self._entries, self._case_insensitive))

    def __repr__(self) -> str:
        return f"HeaderMap({self.to_wire()!r}, case_insensitive={self._case_insensitive})"

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        source_type: Any,  # noqa: ANN401
        handler: GetCoreSchemaHandler,
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(cls._coerce)

    @classmethod
    def _coerce(cls, value: object) -> "HeaderMap":
        if isinstance(value, HeaderMap):
            return value
        if isinstance(value, Mapping):
            return cls(value)
        msg = f"Expected a HeaderMap or a mapping, got {type(value).__name__}"
        raise ValueError(msg)


def _entry_from_value(name: str, value: str | Sequence[str]) -> HeaderEntry:
    if isinstance(value, str):
        return HeaderEntry(name, (value,), is_sequence=False)
    return HeaderEntry(name, tuple(value), is_sequence=True)
