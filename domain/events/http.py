"""Shared helpers for HTTP-shaped events (gateway and load balancer)."""

from returns.result import Result, Success

from domain.codecs import BASE64
from domain.value_objects.codec_errors import CodecError
from domain.value_objects.wire import Absent


def decode_body(body: str | None | Absent, *, is_base64_encoded: bool) -> Result[bytes, CodecError]:
    """Return the raw body bytes, decoding base64 when the event says so.

    A missing or null body reads as empty.
    """
    if not isinstance(body, str):
        return Success(b"")
    if is_base64_encoded:
        return BASE64.decode(body)
    return Success(body.encode("utf-8"))
