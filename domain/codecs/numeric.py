import math
import re
from decimal import Decimal, InvalidOperation
from enum import Enum

from returns.result import Failure, Result, Success

from domain.codecs.base import Codec
from domain.value_objects.codec_errors import CodecError, InvalidEncoding, OutOfRange
from domain.value_objects.wire import WireValue

_INTEGER = re.compile(r"^[+-]?\d+$", re.ASCII)
_DECIMAL = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?$", re.ASCII)
_MAX_INTEGER_DIGITS = 20


class NumericKind(str, Enum):
    """Target width of a string-encoded number."""

    INT32 = "int32"
    INT64 = "int64"
    FLOAT64 = "float64"
    DECIMAL = "decimal"

    @property
    def bounds(self) -> tuple[int, int] | None:
        match self:
            case NumericKind.INT32:
                return -(2**31), 2**31 - 1
            case NumericKind.INT64:
                return -(2**63), 2**63 - 1
            case _:
                return None


class StringNumericCodec(Codec[int | float | Decimal]):
    """Number carried as a JSON string to avoid precision loss in transit.

    Only strings are accepted: a bare JSON number is a ``TypeMismatch``.
    Encoding always writes a string. Integer kinds reject overflow with
    ``OutOfRange``; ``DECIMAL`` keeps the significant digits of the wire
    text. Every kind re-renders signs, leading zeros and exponents
    canonically (``"+007"`` -> ``"7"``, ``"1e5"`` -> ``"1E+5"``).
    """

    __slots__ = ("_kind",)

    lossless = False

    def __init__(self, kind: NumericKind = NumericKind.INT64) -> None:
        self._kind = kind

    @property
    def kind(self) -> NumericKind:
        return self._kind

    def describe(self) -> str:
        return f"string-encoded {self._kind.value}"

    def decode(self, wire: WireValue) -> Result[int | float | Decimal, CodecError]:
        if not isinstance(wire, str):
            return self.mismatch(wire)
        text = wire
        bounds = self._kind.bounds
        if bounds is not None:
            if not _INTEGER.fullmatch(text):
                return Failure(InvalidEncoding(detail=f"{wire!r} is not an integer numeral"))
            # int() raises past sys.int_max_str_digits
            if len(text.lstrip("+-").lstrip("0")) > _MAX_INTEGER_DIGITS:
                return Failure(OutOfRange(target=self._kind.value, value=wire))
            value = int(text)
            low, high = bounds
            if not low <= value <= high:
                return Failure(OutOfRange(target=self._kind.value, value=wire))
            return Success(value)
        if not _DECIMAL.fullmatch(text):
            return Failure(InvalidEncoding(detail=f"{wire!r} is not a decimal numeral"))
        if self._kind is NumericKind.DECIMAL:
            try:
                return Success(Decimal(text))
            except InvalidOperation:
                return Failure(InvalidEncoding(detail=f"{wire!r} is not a decimal numeral"))
        number = float(text)
        if not math.isfinite(number):
            return Failure(OutOfRange(target=self._kind.value, value=wire))
        return Success(number)

    def encode(self, value: int | float | Decimal) -> WireValue:
        if isinstance(value, float):
            return repr(value)
        return str(value)

    def __repr__(self) -> str:
        return f"StringNumericCodec({self._kind.name})"
