import base64
import binascii
import re

from returns.result import Failure, Result, Success

from domain.codecs.base import Codec
from domain.value_objects.codec_errors import CodecError, InvalidEncoding
from domain.value_objects.wire import WireValue

_ALPHABET = re.compile(r"^[A-Za-z0-9+/]*$")


class Base64Codec(Codec[bytes]):
    """Binary blob carried as standard base64 text.

    Producers are not uniform about padding, so missing or surplus ``=`` is
    accepted. Encoding always writes canonical padded base64.
    """

    __slots__ = ()

    expected = "base64 string"
    lossless = False

    def decode(self, wire: WireValue) -> Result[bytes, CodecError]:
        if not isinstance(wire, str):
            return self.mismatch(wire)
        body = wire.rstrip("=")
        if not _ALPHABET.fullmatch(body):
            return Failure(InvalidEncoding(detail="base64 text contains characters outside the alphabet"))
        if len(body) % 4 == 1:
            return Failure(InvalidEncoding(detail=f"base64 text has an impossible length {len(body)}"))
        padded = body + "=" * (-len(body) % 4)
        try:
            return Success(base64.b64decode(padded, validate=True))
        except binascii.Error as exc:
            return Failure(InvalidEncoding(detail=f"malformed base64: {exc}"))

    def encode(self, value: bytes) -> WireValue:
        return base64.b64encode(value).decode("ascii")
