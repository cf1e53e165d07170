"""Domain layer exports."""

from domain.codecs import Codec
from domain.events import EVENT_FAMILIES
from domain.exceptions import (
    DomainError,
    InfrastructureError,
    RecordDefinitionError,
    SampleNotFoundError,
)
from domain.records import FieldSpec, Record, WireField
from domain.value_objects import (
    ABSENT,
    CodecError,
    HeaderMap,
    InvalidEncoding,
    OutOfRange,
    RecordError,
    TypeMismatch,
)

__all__ = [
    "ABSENT",
    "EVENT_FAMILIES",
    "Codec",
    "CodecError",
    "DomainError",
    "FieldSpec",
    "HeaderMap",
    "InfrastructureError",
    "InvalidEncoding",
    "OutOfRange",
    "Record",
    "RecordDefinitionError",
    "RecordError",
    "SampleNotFoundError",
    "TypeMismatch",
    "WireField",
]
