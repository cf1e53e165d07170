"""Tests for primitive codecs."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone
from decimal import Decimal
from enum import Enum

import pytest
from returns.result import Failure, Success

from domain.codecs import (
    BASE64,
    BOOLEAN,
    FLOAT64,
    INT32,
    INT64,
    RAW_JSON,
    STRING,
    STRING_LIST,
    STRING_MAP,
    AttributeValueCodec,
    DelimitedListCodec,
    EnumCodec,
    IntegerCodec,
    MapCodec,
    NumericKind,
    OptionalCodec,
    SequenceCodec,
    StringNumericCodec,
    TimestampCodec,
)
from domain.value_objects.attribute_value import AttributeType, AttributeValue
from domain.value_objects.codec_errors import InvalidEncoding, OutOfRange, TypeMismatch
from domain.value_objects.timestamp_format import TimestampFormat
from domain.value_objects.wire import ABSENT


class Color(str, Enum):
    RED = "red"
    GREEN = "green"


class TestScalarCodecs:
    """Test string, boolean, integer and float codecs."""

    def test_string_accepts_string(self) -> None:
        """Test that a string decodes to itself."""
        assert STRING.decode("hello") == Success("hello")
        assert STRING.encode("hello") == "hello"

    def test_string_rejects_number(self) -> None:
        """Test that a number where a string is required is a type mismatch."""
        result = STRING.decode(42)
        assert isinstance(result, Failure)
        error = result.failure()
        assert isinstance(error, TypeMismatch)
        assert error.expected == "string"
        assert error.actual_kind == "number"

    def test_boolean_rejects_string_true(self) -> None:
        """Test that the string "true" is not a boolean."""
        result = BOOLEAN.decode("true")
        assert isinstance(result, Failure)
        assert result.failure().actual_kind == "string"

    def test_integer_rejects_boolean(self) -> None:
        """Test that booleans are not numbers even though bool subclasses int."""
        result = INT64.decode(True)
        assert isinstance(result, Failure)
        assert isinstance(result.failure(), TypeMismatch)
        assert result.failure().actual_kind == "boolean"

    def test_integer_accepts_integral_float(self) -> None:
        """Test that 5.0 decodes to the integer 5."""
        result = INT64.decode(5.0)
        assert result == Success(5)
        assert isinstance(result.unwrap(), int)

    def test_integer_rejects_fraction(self) -> None:
        """Test that a fractional number is an invalid encoding for an integer."""
        result = INT64.decode(5.5)
        assert isinstance(result, Failure)
        assert isinstance(result.failure(), InvalidEncoding)

    def test_int32_overflow_is_out_of_range(self) -> None:
        """Test that overflow is reported rather than truncated."""
        result = INT32.decode(2**31)
        assert isinstance(result, Failure)
        error = result.failure()
        assert isinstance(error, OutOfRange)
        assert error.target == "int32"
        assert INT32.decode(2**31 - 1) == Success(2**31 - 1)
        assert INT32.decode(-(2**31)) == Success(-(2**31))

    def test_unsigned_integer_rejects_negative(self) -> None:
        """Test the unsigned range of an integer codec."""
        codec = IntegerCodec(16, signed=False)
        assert codec.decode(65535) == Success(65535)
        result = codec.decode(-1)
        assert isinstance(result, Failure)
        assert result.failure().target == "uint16"

    def test_float_accepts_integers(self) -> None:
        """Test that integer wire values decode to floats."""
        result = FLOAT64.decode(3)
        assert result == Success(3.0)
        assert isinstance(result.unwrap(), float)

    def test_float_overflow_is_out_of_range(self) -> None:
        """Test that an integer too large for a double is out of range."""
        result = FLOAT64.decode(10**400)
        assert isinstance(result, Failure)
        assert isinstance(result.failure(), OutOfRange)

    def test_enum_round_trip(self) -> None:
        """Test that enum values decode to members and encode back."""
        codec = EnumCodec(Color)
        assert codec.decode("red") == Success(Color.RED)
        assert codec.encode(Color.GREEN) == "green"

    def test_enum_unknown_value(self) -> None:
        """Test that an unknown enum value is an invalid encoding."""
        result = EnumCodec(Color).decode("blue")
        assert isinstance(result, Failure)
        assert isinstance(result.failure(), InvalidEncoding)
        assert "blue" in result.failure().detail

    def test_raw_json_copies_value(self) -> None:
        """Test that raw JSON is passed through without aliasing the input."""
        wire = {"a": [1, 2], "b": None}
        decoded = RAW_JSON.decode(wire).unwrap()
        assert decoded == wire
        assert decoded is not wire
        wire["a"].append(3)
        assert decoded["a"] == [1, 2]

    def test_raw_json_accepts_null(self) -> None:
        """Test that raw JSON treats null as a value."""
        assert RAW_JSON.decode(None) == Success(None)


class TestTimestampCodec:
    """Test the tolerant timestamp codec."""

    def test_decodes_iso_millis_with_z(self) -> None:
        """Test decoding an ISO-8601 timestamp with a Z suffix."""
        codec = TimestampCodec(TimestampFormat.ISO8601_MILLIS)
        result = codec.decode("2019-01-02T12:45:07.000Z")
        assert result == Success(datetime(2019, 1, 2, 12, 45, 7, tzinfo=UTC))

    def test_normalizes_offset_to_utc(self) -> None:
        """Test that an explicit offset is normalized to UTC."""
        codec = TimestampCodec(TimestampFormat.ISO8601_SECONDS)
        value = codec.decode("2021-06-01T12:00:00+02:00").unwrap()
        assert value == datetime(2021, 6, 1, 10, 0, 0, tzinfo=UTC)
        assert value.utcoffset() == timedelta(0)
        assert codec.encode(value) == "2021-06-01T10:00:00Z"

    def test_missing_offset_is_invalid(self) -> None:
        """Test that a naive timestamp is rejected with a clear reason."""
        result = TimestampCodec().decode("2021-06-01T12:00:00.000")
        assert isinstance(result, Failure)
        error = result.failure()
        assert isinstance(error, InvalidEncoding)
        assert "no UTC offset" in error.detail

    def test_garbage_is_invalid(self) -> None:
        """Test that non-timestamp text is an invalid encoding."""
        result = TimestampCodec().decode("yesterday")
        assert isinstance(result, Failure)
        assert isinstance(result.failure(), InvalidEncoding)

    def test_trailing_newline_is_invalid(self) -> None:
        """Test that the whole string must be a timestamp."""
        result = TimestampCodec().decode("2021-06-01T12:00:00Z\n")
        assert isinstance(result, Failure)

    def test_impossible_date_is_invalid(self) -> None:
        """Test that a well-formed but impossible date is rejected."""
        result = TimestampCodec().decode("2021-02-30T00:00:00Z")
        assert isinstance(result, Failure)
        assert isinstance(result.failure(), InvalidEncoding)

    def test_epoch_seconds(self) -> None:
        """Test epoch seconds decode and encode as an integer."""
        codec = TimestampCodec(TimestampFormat.EPOCH_SECONDS)
        value = codec.decode(1428537600).unwrap()
        assert value == datetime(2015, 4, 9, 0, 0, tzinfo=UTC)
        encoded = codec.encode(value)
        assert encoded == 1428537600
        assert isinstance(encoded, int)

    def test_epoch_seconds_with_fraction(self) -> None:
        """Test that fractional epoch seconds keep their fraction."""
        codec = TimestampCodec(TimestampFormat.EPOCH_SECONDS)
        value = codec.decode(1545084650.987).unwrap()
        assert value.microsecond == 987000
        assert codec.encode(value) == 1545084650.987

    def test_epoch_millis(self) -> None:
        """Test epoch milliseconds."""
        codec = TimestampCodec(TimestampFormat.EPOCH_MILLIS)
        value = codec.decode(1428582896000).unwrap()
        assert value == datetime(2015, 4, 9, 12, 34, 56, tzinfo=UTC)
        assert codec.encode(value) == 1428582896000

    def test_epoch_format_accepts_iso_string(self) -> None:
        """Test that epoch fields also accept ISO-8601 text."""
        codec = TimestampCodec(TimestampFormat.EPOCH_SECONDS)
        value = codec.decode("2015-04-09T00:00:00Z").unwrap()
        assert codec.encode(value) == 1428537600

    def test_iso_format_rejects_number(self) -> None:
        """Test that an ISO field does not accept a bare number."""
        result = TimestampCodec(TimestampFormat.ISO8601_MILLIS).decode(1428537600)
        assert isinstance(result, Failure)
        assert isinstance(result.failure(), TypeMismatch)

    def test_epoch_overflow_is_out_of_range(self) -> None:
        """Test that an epoch beyond the representable range is out of range."""
        result = TimestampCodec(TimestampFormat.EPOCH_MILLIS).decode(10**20)
        assert isinstance(result, Failure)
        assert isinstance(result.failure(), OutOfRange)

    def test_common_log_format(self) -> None:
        """Test the request-time format used by the gateway."""
        codec = TimestampCodec(TimestampFormat.COMMON_LOG)
        value = codec.decode("09/Apr/2015:12:34:56 +0000").unwrap()
        assert value == datetime(2015, 4, 9, 12, 34, 56, tzinfo=UTC)
        assert codec.encode(value) == "09/Apr/2015:12:34:56 +0000"

    def test_common_log_offset_is_normalized(self) -> None:
        """Test that a non-UTC common-log offset re-encodes as +0000."""
        codec = TimestampCodec(TimestampFormat.COMMON_LOG)
        value = codec.decode("09/Apr/2015:14:34:56 +0200").unwrap()
        assert codec.encode(value) == "09/Apr/2015:12:34:56 +0000"

    def test_encode_truncates_to_declared_precision(self) -> None:
        """Test that millisecond fields drop sub-millisecond digits."""
        codec = TimestampCodec(TimestampFormat.ISO8601_MILLIS)
        value = datetime(2020, 1, 1, 0, 0, 0, 123456, tzinfo=timezone(timedelta(hours=1)))
        assert codec.encode(value) == "2019-12-31T23:00:00.123Z"

    @pytest.mark.parametrize(
        ("wire_format", "wire"),
        [
            (TimestampFormat.ISO8601_SECONDS, "0001-01-01T00:00:00Z"),
            (TimestampFormat.ISO8601_MILLIS, "0001-01-01T00:00:00.000Z"),
            (TimestampFormat.ISO8601_MICROS, "0999-12-31T23:59:59.000001Z"),
            (TimestampFormat.COMMON_LOG, "01/Jan/0001:00:00:00 +0000"),
        ],
    )
    def test_early_years_are_zero_padded(self, wire_format: TimestampFormat, wire: str) -> None:
        """Test that years below 1000 re-encode with four digits and decode again."""
        codec = TimestampCodec(wire_format)
        value = codec.decode(wire).unwrap()
        assert codec.encode(value) == wire
        assert codec.decode(codec.encode(value)) == Success(value)

    def test_project_rerenders_lossy_value(self) -> None:
        """Test that the projection of an offset timestamp is its UTC rendering."""
        codec = TimestampCodec(TimestampFormat.ISO8601_SECONDS)
        assert codec.project("2021-06-01T12:00:00+02:00") == "2021-06-01T10:00:00Z"


class TestStringNumericCodec:
    """Test numbers carried as strings."""

    def test_int64_from_string(self) -> None:
        """Test decoding a string-encoded 64-bit integer."""
        codec = StringNumericCodec(NumericKind.INT64)
        assert codec.decode("9223372036854775807") == Success(2**63 - 1)
        assert codec.encode(42) == "42"

    def test_bare_number_is_type_mismatch(self) -> None:
        """Test that a bare JSON number is rejected for a string-wrapped field."""
        result = StringNumericCodec(NumericKind.INT64).decode(42)
        assert isinstance(result, Failure)
        assert isinstance(result.failure(), TypeMismatch)

    def test_int32_overflow(self) -> None:
        """Test that a string numeral beyond int32 is out of range."""
        result = StringNumericCodec(NumericKind.INT32).decode("2147483648")
        assert isinstance(result, Failure)
        assert isinstance(result.failure(), OutOfRange)

    def test_non_numeral_is_invalid(self) -> None:
        """Test that non-numeric text is an invalid encoding."""
        for text in ("12a", "", " 12", "1.5", "٣"):
            result = StringNumericCodec(NumericKind.INT64).decode(text)
            assert isinstance(result, Failure), text
            assert isinstance(result.failure(), InvalidEncoding), text

    def test_decimal_keeps_digits(self) -> None:
        """Test that decimals keep their exact textual precision."""
        codec = StringNumericCodec(NumericKind.DECIMAL)
        value = codec.decode("12.50").unwrap()
        assert value == Decimal("12.50")
        assert codec.encode(value) == "12.50"

    def test_decimal_projection_is_canonical(self) -> None:
        """Test that decimal signs, leading zeros and exponents re-render canonically."""
        codec = StringNumericCodec(NumericKind.DECIMAL)
        assert codec.lossless is False
        assert codec.project("+007") == "7"
        assert codec.project("1e5") == "1E+5"
        assert codec.project("12.50") == "12.50"
        assert codec.decode(codec.project("1e5")) == codec.decode("1e5")

    @pytest.mark.parametrize("kind", [NumericKind.INT32, NumericKind.INT64])
    def test_very_long_numeral_is_out_of_range(self, kind: NumericKind) -> None:
        """Test that a numeral longer than int() accepts is out of range, not an exception."""
        result = StringNumericCodec(kind).decode("1" * 5000)
        assert isinstance(result, Failure)
        assert isinstance(result.failure(), OutOfRange)

    def test_leading_zeros_do_not_count_as_digits(self) -> None:
        """Test that zero padding does not push a small numeral out of range."""
        assert StringNumericCodec(NumericKind.INT64).decode("-" + "0" * 40 + "42") == Success(-42)

    def test_float64(self) -> None:
        """Test string-encoded doubles."""
        codec = StringNumericCodec(NumericKind.FLOAT64)
        assert codec.decode("1.5e3") == Success(1500.0)
        assert codec.encode(0.1) == "0.1"
        assert codec.lossless is False

    def test_integer_kind_projection_is_canonical(self) -> None:
        """Test that leading zeros and signs re-render canonically."""
        assert StringNumericCodec(NumericKind.INT64).project("+007") == "7"


class TestBase64Codec:
    """Test the binary blob codec."""

    def test_decode_hello(self) -> None:
        """Test decoding standard padded base64."""
        assert BASE64.decode("SGVsbG8=") == Success(b"Hello")

    def test_encode_hello(self) -> None:
        """Test encoding writes canonical padding."""
        assert BASE64.encode(b"Hello") == "SGVsbG8="

    def test_missing_padding_is_accepted(self) -> None:
        """Test that unpadded base64 decodes and projects to padded form."""
        assert BASE64.decode("SGVsbG8") == Success(b"Hello")
        assert BASE64.project("SGVsbG8") == "SGVsbG8="

    def test_empty_string(self) -> None:
        """Test that the empty string is the empty blob."""
        assert BASE64.decode("") == Success(b"")
        assert BASE64.encode(b"") == ""

    def test_non_base64_is_invalid(self) -> None:
        """Test that text outside the alphabet is an invalid encoding."""
        result = BASE64.decode("not base64!")
        assert isinstance(result, Failure)
        assert isinstance(result.failure(), InvalidEncoding)

    def test_impossible_length_is_invalid(self) -> None:
        """Test that a length that no byte sequence produces is rejected."""
        result = BASE64.decode("SGVsb")
        assert isinstance(result, Failure)
        assert isinstance(result.failure(), InvalidEncoding)

    def test_number_is_type_mismatch(self) -> None:
        """Test that a number is not base64 text."""
        result = BASE64.decode(12)
        assert isinstance(result, Failure)
        assert isinstance(result.failure(), TypeMismatch)


class TestDelimitedListCodec:
    """Test the delimited list codec."""

    def test_empty_string_is_empty_sequence(self) -> None:
        """Test that "" decodes to an empty tuple, not ("",)."""
        assert DelimitedListCodec().decode("") == Success(())

    def test_empty_items_are_kept(self) -> None:
        """Test that empty items between delimiters are preserved by default."""
        assert DelimitedListCodec().decode("a,b,,c") == Success(("a", "b", "", "c"))

    def test_drop_empty(self) -> None:
        """Test fields that declare dropping empty items."""
        codec = DelimitedListCodec(",", drop_empty=True)
        assert codec.decode("a,b,,c") == Success(("a", "b", "c"))

    def test_items_are_trimmed(self) -> None:
        """Test that whitespace around items is trimmed and projected away."""
        codec = DelimitedListCodec()
        assert codec.decode(" a , b ") == Success(("a", "b"))
        assert codec.project(" a , b ") == "a,b"

    def test_no_trim(self) -> None:
        """Test a codec that keeps surrounding whitespace."""
        assert DelimitedListCodec(";", trim=False).decode(" a; b") == Success((" a", " b"))

    def test_encode_joins(self) -> None:
        """Test that encoding joins with the delimiter."""
        assert DelimitedListCodec().encode(("a", "b", "", "c")) == "a,b,,c"
        assert DelimitedListCodec().encode(()) == ""


class TestOptionalCodec:
    """Test the absent / null / present trichotomy."""

    def test_absent_yields_default(self) -> None:
        """Test that a missing value yields the declared default."""
        codec = OptionalCodec(BOOLEAN, False)
        assert codec.decode(ABSENT) == Success(False)

    def test_null_is_distinct_from_default(self) -> None:
        """Test that explicit null is None even when a default is declared."""
        codec = OptionalCodec(BOOLEAN, False)
        assert codec.decode(None) == Success(None)

    def test_null_as_default(self) -> None:
        """Test fields whose contract maps null onto the default."""
        codec = OptionalCodec(BOOLEAN, False, null_as_default=True)
        assert codec.decode(None) == Success(False)

    def test_absent_without_default_stays_absent(self) -> None:
        """Test that a field with no default decodes missing to ABSENT."""
        codec = OptionalCodec(STRING)
        assert codec.decode(ABSENT).unwrap() is ABSENT
        assert codec.encode(ABSENT) is ABSENT
        assert codec.encode(None) is None

    def test_present_value_delegates(self) -> None:
        """Test that a present value is decoded by the inner codec."""
        codec = OptionalCodec(INT64, 0)
        assert codec.decode(7) == Success(7)
        result = codec.decode("7")
        assert isinstance(result, Failure)
        assert isinstance(result.failure(), TypeMismatch)

    def test_projection_materializes_default(self) -> None:
        """Test that the projection of a missing field is its encoded default."""
        assert OptionalCodec(BOOLEAN, False).project(ABSENT) is False
        assert OptionalCodec(STRING).project(ABSENT) is ABSENT
        assert OptionalCodec(BOOLEAN, False).project(None) is None
        assert OptionalCodec(BOOLEAN, False, null_as_default=True).project(None) is False


class TestContainerCodecs:
    """Test sequence and map codecs."""

    def test_sequence_decodes_to_tuple(self) -> None:
        """Test that arrays decode to tuples and encode to lists."""
        assert STRING_LIST.decode(["a", "b"]) == Success(("a", "b"))
        assert STRING_LIST.encode(("a", "b")) == ["a", "b"]

    def test_sequence_error_carries_index(self) -> None:
        """Test that an item failure is prefixed with its index."""
        result = SequenceCodec(INT64).decode([1, 2, "three"])
        assert isinstance(result, Failure)
        assert result.failure().path == (2,)

    def test_map_error_carries_key(self) -> None:
        """Test that a value failure is prefixed with its key."""
        result = STRING_MAP.decode({"ok": "yes", "bad": 1})
        assert isinstance(result, Failure)
        assert result.failure().path == ("bad",)

    def test_map_projection_recurses(self) -> None:
        """Test that map projection re-renders lossy values."""
        codec = MapCodec(BASE64)
        assert codec.project({"k": "SGVsbG8"}) == {"k": "SGVsbG8="}


class TestAttributeValueCodec:
    """Test change-stream attribute values."""

    codec = AttributeValueCodec()

    def test_number_is_decimal(self) -> None:
        """Test that N attributes decode to Decimal."""
        value = self.codec.decode({"N": "101"}).unwrap()
        assert value == AttributeValue.number("101")
        assert self.codec.encode(value) == {"N": "101"}

    def test_nested_list_and_map(self) -> None:
        """Test recursive L and M attributes."""
        wire = {"M": {"scores": {"L": [{"N": "1.5"}, {"NULL": True}]}, "name": {"S": "Jane"}}}
        value = self.codec.decode(wire).unwrap()
        assert value.type is AttributeType.MAP
        assert value.to_python() == {"scores": [Decimal("1.5"), None], "name": "Jane"}
        assert self.codec.encode(value) == wire

    def test_binary_and_sets(self) -> None:
        """Test B, SS, NS and BS attributes."""
        assert self.codec.decode({"B": "AAEC"}).unwrap().value == b"\x00\x01\x02"
        assert self.codec.decode({"SS": ["a", "b"]}).unwrap().to_python() == frozenset({"a", "b"})
        assert self.codec.decode({"NS": ["1", "2"]}).unwrap().value == (Decimal(1), Decimal(2))
        assert self.codec.encode(self.codec.decode({"BS": ["AAEC"]}).unwrap()) == {"BS": ["AAEC"]}

    def test_two_descriptors_is_invalid(self) -> None:
        """Test that an attribute with two type descriptors is rejected."""
        result = self.codec.decode({"S": "a", "N": "1"})
        assert isinstance(result, Failure)
        assert isinstance(result.failure(), InvalidEncoding)

    def test_unknown_descriptor_is_invalid(self) -> None:
        """Test that an unknown type descriptor is rejected."""
        result = self.codec.decode({"X": "a"})
        assert isinstance(result, Failure)
        assert isinstance(result.failure(), InvalidEncoding)

    def test_null_must_be_true(self) -> None:
        """Test that NULL attributes carry true."""
        result = self.codec.decode({"NULL": False})
        assert isinstance(result, Failure)

    def test_nested_error_path(self) -> None:
        """Test that a failure deep inside an attribute reports its path."""
        result = self.codec.decode({"L": [{"S": "ok"}, {"N": "abc"}]})
        assert isinstance(result, Failure)
        assert result.failure().path == ("L", 1, "N")

    @pytest.mark.parametrize("wire", [{"N": 1}, {"S": 1}, {"BOOL": "true"}])
    def test_wrong_payload_kind(self, wire: dict) -> None:
        """Test that payloads of the wrong JSON kind are type mismatches."""
        result = self.codec.decode(wire)
        assert isinstance(result, Failure)
        assert isinstance(result.failure(), TypeMismatch)
