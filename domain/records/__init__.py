from domain.records.field_spec import FieldSpec, WireField
from domain.records.record import Record

__all__ = ["FieldSpec", "Record", "WireField"]
