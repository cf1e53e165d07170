from returns.result import Result, Success

from domain.codecs.base import Codec
from domain.value_objects.codec_errors import CodecError
from domain.value_objects.wire import WireValue


class DelimitedListCodec(Codec[tuple[str, ...]]):
    """A single string holding delimiter-separated items.

    The empty string decodes to an empty tuple. Empty items between two
    delimiters are kept (``"a,b,,c"`` -> ``("a", "b", "", "c")``) unless the
    field declares ``drop_empty``.
    """

    __slots__ = ("_delimiter", "_trim", "_drop_empty")

    expected = "delimited string"
    lossless = False

    def __init__(self, delimiter: str = ",", *, trim: bool = True, drop_empty: bool = False) -> None:
        self._delimiter = delimiter
        self._trim = trim
        self._drop_empty = drop_empty

    def decode(self, wire: WireValue) -> Result[tuple[str, ...], CodecError]:
        if not isinstance(wire, str):
            return self.mismatch(wire)
        if not wire:
            return Success(())
        items = wire.split(self._delimiter)
        if self._trim:
            items = [item.strip() for item in items]
        if self._drop_empty:
            items = [item for item in items if item]
        return Success(tuple(items))

    def encode(self, value: tuple[str, ...]) -> WireValue:
        return self._delimiter.join(value)

    def __repr__(self) -> str:
        return f"DelimitedListCodec({self._delimiter!r}, drop_empty={self._drop_empty})"
