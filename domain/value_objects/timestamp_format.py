from enum import Enum


class TimestampFormat(str, Enum):
    """Wire forms a timestamp field can be declared with.

    The form only governs encoding; decoding accepts any ISO-8601 string with
    an offset, and numbers when the declared form is an epoch form.
    """

    ISO8601_SECONDS = "iso8601_seconds"  # 2017-12-22T18:43:48Z
    ISO8601_MILLIS = "iso8601_millis"  # 1970-01-01T00:00:00.000Z
    ISO8601_MICROS = "iso8601_micros"  # 2019-04-01T10:00:00.123456Z
    EPOCH_SECONDS = "epoch_seconds"  # 1479499740
    EPOCH_MILLIS = "epoch_millis"  # 1428582896000
    COMMON_LOG = "common_log"  # 09/Apr/2015:12:34:56 +0000

    @property
    def is_epoch(self) -> bool:
        return self in (TimestampFormat.EPOCH_SECONDS, TimestampFormat.EPOCH_MILLIS)
