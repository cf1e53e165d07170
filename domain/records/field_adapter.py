"""Glue between a record's FieldSpec table and the document being decoded.

The absent / null / present distinction is enforced here once for every
field, so individual codecs never look up keys or handle missing values.
"""

from collections.abc import Mapping
from typing import Any

from returns.result import Failure, Result

from domain.records.field_spec import FieldSpec
from domain.value_objects.codec_errors import RecordError, TypeMismatch
from domain.value_objects.wire import ABSENT, WireValue


def apply(
    document: Mapping[str, WireValue],
    spec: FieldSpec,
    record_type: str,
) -> Result[Any, RecordError]:
    """Decode one field of ``document`` according to ``spec``.

    A required field that is missing fails with ``TypeMismatch`` whose
    actual kind is ``absent``. Codec failures are annotated with the record
    type, the wire key and the path.
    """
    wire = document.get(spec.wire_key, ABSENT)
    if wire is ABSENT and spec.required:
        error = TypeMismatch(expected=spec.codec.describe(), actual_kind="absent")
        return Failure(_annotate(error, spec, record_type))
    return spec.codec.decode(wire).alt(lambda error: _annotate(error, spec, record_type))


def emit(value: Any, spec: FieldSpec, document: dict[str, WireValue]) -> None:  # noqa: ANN401
    """Write the encoded value under its wire key, unless it is absent."""
    wire = spec.codec.encode(value)
    if wire is not ABSENT:
        document[spec.wire_key] = wire


def project(
    source: Mapping[str, WireValue],
    spec: FieldSpec,
    document: dict[str, WireValue],
) -> None:
    """Write the value a round-trip is expected to produce for this field."""
    wire = spec.codec.project(source.get(spec.wire_key, ABSENT))
    if wire is not ABSENT:
        document[spec.wire_key] = wire


def _annotate(error: Any, spec: FieldSpec, record_type: str) -> RecordError:  # noqa: ANN401
    return RecordError.from_codec_error(error.within(record_type, spec.wire_key), record_type)
