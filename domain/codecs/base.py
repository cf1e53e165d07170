from abc import ABC, abstractmethod
from typing import Any, ClassVar

from returns.result import Failure, Result, Success

from domain.value_objects.codec_errors import CodecError, TypeMismatch
from domain.value_objects.wire import WireValue, wire_kind


class Codec[T](ABC):
    """A stateless decode/encode pair for one semantic kind.

    ``decode`` never raises on malformed input: it returns ``Failure`` with a
    ``CodecError``. ``encode`` is total over valid canonical values.

    ``project`` returns the wire value a faithful round-trip is expected to
    produce. Lossless codecs return the input untouched; codecs that declare
    a lossy transform (offset normalization, trimming, canonical padding)
    re-render it.
    """

    __slots__ = ()

    expected: ClassVar[str] = "value"
    lossless: ClassVar[bool] = True

    @abstractmethod
    def decode(self, wire: WireValue) -> Result[T, CodecError]:
        """Decode a wire value into its canonical form."""

    @abstractmethod
    def encode(self, value: T) -> WireValue:
        """Encode a canonical value into its declared wire form."""

    def project(self, wire: WireValue) -> WireValue:
        if self.lossless:
            return wire
        result = self.decode(wire)
        if isinstance(result, Success):
            return self.encode(result.unwrap())
        return wire

    def describe(self) -> str:
        """Human-readable description used in type mismatch reports."""
        return self.expected

    def mismatch(self, wire: Any) -> Failure[TypeMismatch]:  # noqa: ANN401
        return Failure(TypeMismatch(expected=self.describe(), actual_kind=wire_kind(wire)))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
