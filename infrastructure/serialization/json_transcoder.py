import json

from returns.result import Failure, Result

from domain.records import Record
from domain.value_objects.codec_errors import InvalidEncoding, RecordError


def _reject_constant(name: str) -> None:
    msg = f"{name} is not valid JSON"
    raise ValueError(msg)


class JsonTranscoding[R: Record]:
    """Adapter between UTF-8 JSON text and a typed record.

    This lives in Infrastructure because it's a serialization concern; the
    records themselves only know about decoded JSON values.
    """

    def __init__(self, type: type[R]) -> None:  # noqa: A002
        self.type = type
        self.name = type.__name__

    def encode(self, obj: R) -> bytes:
        # Key order and casing follow the record's wire contract
        return json.dumps(obj.encode(), ensure_ascii=False, allow_nan=False).encode("utf-8")

    def decode(self, data: bytes | str) -> Result[R, RecordError]:
        try:
            document = json.loads(data, parse_constant=_reject_constant)
        except (UnicodeDecodeError, ValueError) as e:
            error = InvalidEncoding(detail=f"malformed JSON: {e}")
            return Failure(RecordError(record_type=self.name, cause=error))
        return self.type.decode(document)
