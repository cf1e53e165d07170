import copy
import math
from enum import Enum
from typing import Any

from returns.result import Failure, Result, Success

from domain.codecs.base import Codec
from domain.value_objects.codec_errors import CodecError, InvalidEncoding, OutOfRange
from domain.value_objects.wire import ABSENT, WireValue, is_number


class StringCodec(Codec[str]):
    __slots__ = ()

    expected = "string"

    def decode(self, wire: WireValue) -> Result[str, CodecError]:
        if not isinstance(wire, str):
            return self.mismatch(wire)
        return Success(wire)

    def encode(self, value: str) -> WireValue:
        return value


class BooleanCodec(Codec[bool]):
    __slots__ = ()

    expected = "boolean"

    def decode(self, wire: WireValue) -> Result[bool, CodecError]:
        if not isinstance(wire, bool):
            return self.mismatch(wire)
        return Success(wire)

    def encode(self, value: bool) -> WireValue:  # noqa: FBT001
        return value


class IntegerCodec(Codec[int]):
    """Bare JSON number with a declared width.

    Integral floats (``5.0``) are accepted; fractional values are rejected.
    Overflow is reported as ``OutOfRange``, never truncated.
    """

    __slots__ = ("_bits", "_signed", "_minimum", "_maximum")

    def __init__(self, bits: int = 64, *, signed: bool = True) -> None:
        self._bits = bits
        self._signed = signed
        if signed:
            self._minimum = -(2 ** (bits - 1))
            self._maximum = 2 ** (bits - 1) - 1
        else:
            self._minimum = 0
            self._maximum = 2**bits - 1

    @property
    def target(self) -> str:
        return f"{'int' if self._signed else 'uint'}{self._bits}"

    def describe(self) -> str:
        return f"{self.target} number"

    def decode(self, wire: WireValue) -> Result[int, CodecError]:
        if not is_number(wire):
            return self.mismatch(wire)
        if isinstance(wire, float):
            if not wire.is_integer():
                return Failure(InvalidEncoding(detail=f"{wire!r} is not an integral number"))
            wire = int(wire)
        if not self._minimum <= wire <= self._maximum:
            return Failure(OutOfRange(target=self.target, value=wire))
        return Success(wire)

    def encode(self, value: int) -> WireValue:
        return value

    def __repr__(self) -> str:
        return f"IntegerCodec({self.target})"


class FloatCodec(Codec[float]):
    __slots__ = ()

    expected = "number"

    def decode(self, wire: WireValue) -> Result[float, CodecError]:
        if not is_number(wire):
            return self.mismatch(wire)
        try:
            value = float(wire)
        except OverflowError:
            return Failure(OutOfRange(target="float64", value=wire))
        if not math.isfinite(value):
            return Failure(OutOfRange(target="float64", value=wire))
        return Success(value)

    def encode(self, value: float) -> WireValue:
        return value


class EnumCodec[E: Enum](Codec[E]):
    """Closed string vocabulary mapped onto an ``Enum``."""

    __slots__ = ("_enum_type",)

    def __init__(self, enum_type: type[E]) -> None:
        self._enum_type = enum_type

    def describe(self) -> str:
        return f"{self._enum_type.__name__} string"

    def decode(self, wire: WireValue) -> Result[E, CodecError]:
        if not isinstance(wire, str):
            return self.mismatch(wire)
        try:
            return Success(self._enum_type(wire))
        except ValueError:
            return Failure(
                InvalidEncoding(detail=f"unknown {self._enum_type.__name__} value {wire!r}"),
            )

    def encode(self, value: E) -> WireValue:
        return value.value

    def __repr__(self) -> str:
        return f"EnumCodec({self._enum_type.__name__})"


class RawJsonCodec(Codec[Any]):
    """Opaque pass-through for free-form payloads (event detail, authorizer context)."""

    __slots__ = ()

    expected = "JSON value"

    def decode(self, wire: WireValue) -> Result[Any, CodecError]:
        if wire is ABSENT:
            return self.mismatch(wire)
        return Success(copy.deepcopy(wire))

    def encode(self, value: Any) -> WireValue:  # noqa: ANN401
        return copy.deepcopy(value)
