import re
from datetime import UTC, datetime, timedelta, timezone

from returns.result import Failure, Result, Success

from domain.codecs.base import Codec
from domain.value_objects.codec_errors import CodecError, InvalidEncoding, OutOfRange
from domain.value_objects.timestamp_format import TimestampFormat
from domain.value_objects.wire import WireValue, is_number

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)

_ISO8601 = re.compile(
    r"^(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})"
    r"[Tt ](?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2})"
    r"(?:\.(?P<fraction>\d+))?"
    r"(?P<offset>[Zz]|[+-]\d{2}(?::?\d{2})?)$",
    re.ASCII,
)

_COMMON_LOG = re.compile(
    r"^(?P<day>\d{2})/(?P<month>[A-Za-z]{3})/(?P<year>\d{4})"
    r":(?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2})"
    r" (?P<offset>[+-]\d{4})$",
    re.ASCII,
)

_MONTHS = {
    name: number
    for number, name in enumerate(
        ("jan", "feb", "mar", "apr", "may", "jun", "jul", "aug", "sep", "oct", "nov", "dec"),
        start=1,
    )
}
_MONTH_NAMES = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


class TimestampCodec(Codec[datetime]):
    """Tolerant timestamp codec.

    Decoding accepts ISO-8601 strings with ``Z`` or an explicit offset for
    every declared form, epoch numbers for the epoch forms (in the declared
    unit) and common-log strings for ``COMMON_LOG``. The canonical value is
    an aware ``datetime`` in UTC.

    Encoding writes the declared wire form, whatever form was decoded.
    """

    __slots__ = ("_wire_format",)

    lossless = False

    def __init__(self, wire_format: TimestampFormat = TimestampFormat.ISO8601_MILLIS) -> None:
        self._wire_format = wire_format

    @property
    def wire_format(self) -> TimestampFormat:
        return self._wire_format

    def describe(self) -> str:
        if self._wire_format.is_epoch:
            return "timestamp number or ISO-8601 string"
        return "timestamp string"

    def decode(self, wire: WireValue) -> Result[datetime, CodecError]:
        if is_number(wire) and self._wire_format.is_epoch:
            return self._decode_epoch(wire)
        if not isinstance(wire, str):
            return self.mismatch(wire)
        if self._wire_format is TimestampFormat.COMMON_LOG:
            match = _COMMON_LOG.fullmatch(wire)
            if match is not None:
                return _build_common_log(match)
        match = _ISO8601.fullmatch(wire)
        if match is None:
            if _ISO8601.fullmatch(wire + "Z") is not None:
                return Failure(InvalidEncoding(detail=f"timestamp {wire!r} has no UTC offset"))
            return Failure(InvalidEncoding(detail=f"{wire!r} is not an ISO-8601 timestamp"))
        return _build_iso8601(match)

    def _decode_epoch(self, wire: int | float) -> Result[datetime, CodecError]:
        try:
            if self._wire_format is TimestampFormat.EPOCH_MILLIS:
                delta = timedelta(milliseconds=wire)
            else:
                delta = timedelta(seconds=wire)
            return Success(_EPOCH + delta)
        except (OverflowError, ValueError):
            return Failure(OutOfRange(target=self._wire_format.value, value=wire))

    def encode(self, value: datetime) -> WireValue:
        value = value.astimezone(UTC)
        match self._wire_format:
            case TimestampFormat.ISO8601_SECONDS:
                return value.replace(tzinfo=None).isoformat(timespec="seconds") + "Z"
            case TimestampFormat.ISO8601_MILLIS:
                return value.replace(tzinfo=None).isoformat(timespec="milliseconds") + "Z"
            case TimestampFormat.ISO8601_MICROS:
                return value.replace(tzinfo=None).isoformat(timespec="microseconds") + "Z"
            case TimestampFormat.EPOCH_SECONDS:
                delta = value - _EPOCH
                if delta.microseconds:
                    return delta.total_seconds()
                return delta // timedelta(seconds=1)
            case TimestampFormat.EPOCH_MILLIS:
                return (value - _EPOCH) // timedelta(milliseconds=1)
            case TimestampFormat.COMMON_LOG:
                # %Y is not zero-padded below year 1000 on every platform
                month = _MONTH_NAMES[value.month - 1]
                return (
                    f"{value.day:02d}/{month}/{value.year:04d}"
                    f":{value.hour:02d}:{value.minute:02d}:{value.second:02d} +0000"
                )

    def __repr__(self) -> str:
        return f"TimestampCodec({self._wire_format.name})"


def _parse_offset(text: str) -> timezone:
    if text in ("Z", "z"):
        return UTC
    sign = -1 if text[0] == "-" else 1
    digits = text[1:].replace(":", "")
    hours = int(digits[:2])
    minutes = int(digits[2:4] or "0")
    return timezone(sign * timedelta(hours=hours, minutes=minutes))


def _build_iso8601(match: re.Match[str]) -> Result[datetime, CodecError]:
    fraction = (match["fraction"] or "")[:6].ljust(6, "0")
    try:
        value = datetime(
            int(match["year"]),
            int(match["month"]),
            int(match["day"]),
            int(match["hour"]),
            int(match["minute"]),
            int(match["second"]),
            int(fraction),
            tzinfo=_parse_offset(match["offset"]),
        )
        return Success(value.astimezone(UTC))
    except (OverflowError, ValueError) as exc:
        return Failure(InvalidEncoding(detail=f"invalid timestamp {match.string!r}: {exc}"))


def _build_common_log(match: re.Match[str]) -> Result[datetime, CodecError]:
    month = _MONTHS.get(match["month"].lower())
    if month is None:
        return Failure(InvalidEncoding(detail=f"unknown month in {match.string!r}"))
    try:
        value = datetime(
            int(match["year"]),
            month,
            int(match["day"]),
            int(match["hour"]),
            int(match["minute"]),
            int(match["second"]),
            tzinfo=_parse_offset(match["offset"]),
        )
        return Success(value.astimezone(UTC))
    except (OverflowError, ValueError) as exc:
        return Failure(InvalidEncoding(detail=f"invalid timestamp {match.string!r}: {exc}"))
