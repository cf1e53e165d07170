from .attribute_value import AttributeType, AttributeValue
from .codec_errors import CodecError, InvalidEncoding, OutOfRange, RecordError, TypeMismatch
from .header_map import HeaderEntry, HeaderMap
from .timestamp_format import TimestampFormat
from .wire import ABSENT, Absent, WireValue, wire_kind

__all__ = [
    "ABSENT",
    "Absent",
    "AttributeType",
    "AttributeValue",
    "CodecError",
    "HeaderEntry",
    "HeaderMap",
    "InvalidEncoding",
    "OutOfRange",
    "RecordError",
    "TimestampFormat",
    "TypeMismatch",
    "WireValue",
    "wire_kind",
]
