from typing import TYPE_CHECKING, Any

from returns.result import Failure, Result, Success

from domain.codecs.base import Codec
from domain.value_objects.codec_errors import CodecError
from domain.value_objects.wire import ABSENT, Absent, WireValue

if TYPE_CHECKING:
    from domain.records.record import Record


class OptionalCodec[T](Codec[T | None | Absent]):
    """Wraps a codec with the absent / null / present trichotomy.

    - absent: yields ``default`` (``ABSENT`` unless declared) without calling
      the inner codec
    - null: yields ``None``, or ``default`` when ``null_as_default`` is set
    - present: delegates to the inner codec; its failure is the result

    Encoding ``ABSENT`` yields ``ABSENT`` (the key is omitted) and ``None``
    yields an explicit null.
    """

    __slots__ = ("_inner", "_default", "_null_as_default")

    def __init__(
        self,
        inner: Codec[T],
        default: Any = ABSENT,  # noqa: ANN401
        *,
        null_as_default: bool = False,
    ) -> None:
        self._inner = inner
        self._default = default
        self._null_as_default = null_as_default

    @property
    def inner(self) -> Codec[T]:
        return self._inner

    @property
    def default(self) -> Any:  # noqa: ANN401
        return self._default

    @property
    def null_as_default(self) -> bool:
        return self._null_as_default

    def describe(self) -> str:
        return f"optional {self._inner.describe()}"

    def decode(self, wire: WireValue) -> Result[T | None | Absent, CodecError]:
        if wire is ABSENT:
            return Success(self._default)
        if wire is None:
            return Success(self._default if self._null_as_default else None)
        return self._inner.decode(wire)

    def encode(self, value: T | None | Absent) -> WireValue:
        if value is ABSENT:
            return ABSENT
        if value is None:
            return None
        return self._inner.encode(value)

    def project(self, wire: WireValue) -> WireValue:
        # defaults materialize on encode; declared as a lossy transform
        if wire is ABSENT:
            return self.encode(self._default)
        if wire is None:
            return self.encode(self._default) if self._null_as_default else None
        return self._inner.project(wire)

    def __repr__(self) -> str:
        return f"OptionalCodec({self._inner!r}, default={self._default!r})"


class SequenceCodec[T](Codec[tuple[T, ...]]):
    """JSON array decoded into a tuple; failures carry the item index."""

    __slots__ = ("_item",)

    def __init__(self, item: Codec[T]) -> None:
        self._item = item

    @property
    def item(self) -> Codec[T]:
        return self._item

    def describe(self) -> str:
        return f"array of {self._item.describe()}"

    def decode(self, wire: WireValue) -> Result[tuple[T, ...], CodecError]:
        if not isinstance(wire, list):
            return self.mismatch(wire)
        items: list[T] = []
        for index, element in enumerate(wire):
            result = self._item.decode(element)
            if isinstance(result, Failure):
                return Failure(result.failure().at(index))
            items.append(result.unwrap())
        return Success(tuple(items))

    def encode(self, value: tuple[T, ...]) -> WireValue:
        return [self._item.encode(item) for item in value]

    def project(self, wire: WireValue) -> WireValue:
        if not isinstance(wire, list):
            return wire
        return [self._item.project(element) for element in wire]

    def __repr__(self) -> str:
        return f"SequenceCodec({self._item!r})"


class MapCodec[T](Codec[dict[str, T]]):
    """JSON object with homogeneous values; failures carry the key."""

    __slots__ = ("_value",)

    def __init__(self, value: Codec[T]) -> None:
        self._value = value

    @property
    def value(self) -> Codec[T]:
        return self._value

    def describe(self) -> str:
        return f"object of {self._value.describe()}"

    def decode(self, wire: WireValue) -> Result[dict[str, T], CodecError]:
        if not isinstance(wire, dict):
            return self.mismatch(wire)
        values: dict[str, T] = {}
        for key, element in wire.items():
            result = self._value.decode(element)
            if isinstance(result, Failure):
                return Failure(result.failure().at(key))
            values[key] = result.unwrap()
        return Success(values)

    def encode(self, value: dict[str, T]) -> WireValue:
        return {key: self._value.encode(item) for key, item in value.items()}

    def project(self, wire: WireValue) -> WireValue:
        if not isinstance(wire, dict):
            return wire
        return {key: self._value.project(element) for key, element in wire.items()}

    def __repr__(self) -> str:
        return f"MapCodec({self._value!r})"


class RecordCodec[R: "Record"](Codec[R]):
    """Nests a record definition as the value of a field."""

    __slots__ = ("_record_type",)

    def __init__(self, record_type: type[R]) -> None:
        self._record_type = record_type

    @property
    def record_type(self) -> type[R]:
        return self._record_type

    def describe(self) -> str:
        return f"{self._record_type.__name__} object"

    def decode(self, wire: WireValue) -> Result[R, CodecError]:
        return self._record_type.decode(wire).alt(lambda error: error.cause)

    def encode(self, value: R) -> WireValue:
        return value.encode()

    def project(self, wire: WireValue) -> WireValue:
        return self._record_type.project(wire)

    def __repr__(self) -> str:
        return f"RecordCodec({self._record_type.__name__})"
