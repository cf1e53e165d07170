"""Primitive codecs and the shared instances record definitions use.

Codecs are immutable; the module-level instances are shared by every field
that declares them.
"""

from domain.codecs.attribute_value import AttributeValueCodec
from domain.codecs.base import Codec
from domain.codecs.binary import Base64Codec
from domain.codecs.containers import MapCodec, OptionalCodec, RecordCodec, SequenceCodec
from domain.codecs.delimited import DelimitedListCodec
from domain.codecs.header_map import HeaderMapCodec
from domain.codecs.numeric import NumericKind, StringNumericCodec
from domain.codecs.scalars import (
    BooleanCodec,
    EnumCodec,
    FloatCodec,
    IntegerCodec,
    RawJsonCodec,
    StringCodec,
)
from domain.codecs.timestamp import TimestampCodec

STRING = StringCodec()
BOOLEAN = BooleanCodec()
INT32 = IntegerCodec(32)
INT64 = IntegerCodec(64)
FLOAT64 = FloatCodec()
BASE64 = Base64Codec()
RAW_JSON = RawJsonCodec()
HEADERS = HeaderMapCodec(case_insensitive=True)
QUERY_PARAMETERS = HeaderMapCodec(case_insensitive=False)
STRING_MAP = MapCodec(STRING)
STRING_LIST = SequenceCodec(STRING)
ATTRIBUTE_MAP = MapCodec(AttributeValueCodec())

__all__ = [
    "ATTRIBUTE_MAP",
    "BASE64",
    "BOOLEAN",
    "FLOAT64",
    "HEADERS",
    "INT32",
    "INT64",
    "QUERY_PARAMETERS",
    "RAW_JSON",
    "STRING",
    "STRING_LIST",
    "STRING_MAP",
    "AttributeValueCodec",
    "Base64Codec",
    "BooleanCodec",
    "Codec",
    "DelimitedListCodec",
    "EnumCodec",
    "FloatCodec",
    "HeaderMapCodec",
    "IntegerCodec",
    "MapCodec",
    "NumericKind",
    "OptionalCodec",
    "RawJsonCodec",
    "RecordCodec",
    "SequenceCodec",
    "StringCodec",
    "StringNumericCodec",
    "TimestampCodec",
]
