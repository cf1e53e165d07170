from typing import Any, ClassVar, Self

from pydantic import BaseModel, ConfigDict
from returns.result import Failure, Result, Success

from domain.codecs.containers import OptionalCodec
from domain.exceptions import RecordDefinitionError
from domain.records import field_adapter
from domain.records.field_spec import FieldSpec, WireField
from domain.value_objects.codec_errors import RecordError, TypeMismatch
from domain.value_objects.wire import WireValue, wire_kind


class Record(BaseModel):
    """Base class for typed event records.

    Subclasses declare their fields in wire contract order, each carrying a
    ``WireField`` in its ``Annotated`` metadata. The FieldSpec table is built
    once when the class is created and is available through
    ``field_specs()``; fields with a default are optional.

    Records are frozen. ``decode`` builds a new record or returns a
    ``RecordError``; it never yields a partially populated record.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    __field_specs__: ClassVar[tuple[FieldSpec, ...]] = ()

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:  # noqa: ANN401
        super().__pydantic_init_subclass__(**kwargs)
        specs: list[FieldSpec] = []
        for name, info in cls.model_fields.items():
            wire = next((item for item in info.metadata if isinstance(item, WireField)), None)
            if wire is None:
                msg = f"{cls.__name__}.{name} has no WireField metadata"
                raise RecordDefinitionError(msg)
            if info.is_required():
                specs.append(FieldSpec(name=name, wire_key=wire.wire_key, required=True, codec=wire.codec))
                continue
            default = info.get_default(call_default_factory=True)
            codec = OptionalCodec(wire.codec, default, null_as_default=wire.null_as_default)
            specs.append(
                FieldSpec(name=name, wire_key=wire.wire_key, required=False, codec=codec, default=default),
            )
        cls.__field_specs__ = tuple(specs)

    @classmethod
    def field_specs(cls) -> tuple[FieldSpec, ...]:
        return cls.__field_specs__

    @classmethod
    def decode(cls, wire: WireValue) -> Result[Self, RecordError]:
        """Decode a wire document, failing on the first unreadable field.

        Keys that no field declares are ignored.
        """
        if not isinstance(wire, dict):
            error = TypeMismatch(expected=f"{cls.__name__} object", actual_kind=wire_kind(wire))
            return Failure(RecordError(record_type=cls.__name__, cause=error))
        values: dict[str, Any] = {}
        for spec in cls.__field_specs__:
            result = field_adapter.apply(wire, spec, cls.__name__)
            if isinstance(result, Failure):
                return result
            values[spec.name] = result.unwrap()
        return Success(cls.model_construct(**values))

    def encode(self) -> dict[str, WireValue]:
        """Encode into a wire document in contract order; absent fields are omitted."""
        document: dict[str, WireValue] = {}
        for spec in self.__field_specs__:
            field_adapter.emit(getattr(self, spec.name), spec, document)
        return document

    @classmethod
    def project(cls, wire: WireValue) -> WireValue:
        """Return the document a faithful round-trip of ``wire`` should produce.

        Unknown keys are dropped, declared defaults are materialized and lossy
        codecs re-render their values.
        """
        if not isinstance(wire, dict):
            return wire
        document: dict[str, WireValue] = {}
        for spec in cls.__field_specs__:
            field_adapter.project(wire, spec, document)
        return document
