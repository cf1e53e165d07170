from returns.result import Failure, Result, Success

from domain.codecs.base import Codec
from domain.value_objects.codec_errors import CodecError, TypeMismatch
from domain.value_objects.header_map import HeaderEntry, HeaderMap
from domain.value_objects.wire import WireValue, wire_kind


class HeaderMapCodec(Codec[HeaderMap]):
    """Object whose values are a string or an array of strings.

    Each entry remembers whether it arrived as a scalar or as an array, and
    encoding reproduces that shape. ``case_insensitive`` only affects lookup
    on the decoded ``HeaderMap``; wire keys keep their casing.
    """

    __slots__ = ("_case_insensitive",)

    expected = "object of strings or string arrays"

    def __init__(self, *, case_insensitive: bool = True) -> None:
        self._case_insensitive = case_insensitive

    def decode(self, wire: WireValue) -> Result[HeaderMap, CodecError]:
        if not isinstance(wire, dict):
            return self.mismatch(wire)
        entries: list[HeaderEntry] = []
        for name, value in wire.items():
            if isinstance(value, str):
                entries.append(HeaderEntry(name, (value,), is_sequence=False))
                continue
            if not isinstance(value, list):
                return Failure(
                    TypeMismatch(expected="string or string array", actual_kind=wire_kind(value)).at(name),
                )
            for index, item in enumerate(value):
                if not isinstance(item, str):
                    return Failure(
                        TypeMismatch(expected="string", actual_kind=wire_kind(item)).at(name, index),
                    )
            entries.append(HeaderEntry(name, tuple(value), is_sequence=True))
        return Success(HeaderMap(entries, case_insensitive=self._case_insensitive))

    def encode(self, value: HeaderMap) -> WireValue:
        return value.to_wire()

    def __repr__(self) -> str:
        return f"HeaderMapCodec(case_insensitive={self._case_insensitive})"
