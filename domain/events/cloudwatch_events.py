"""Scheduled and event-bus events (CloudWatch Events / EventBridge envelope)."""

from datetime import datetime
from typing import Annotated, Any

from domain.codecs import RAW_JSON, STRING, STRING_LIST, TimestampCodec
from domain.records import Record, WireField
from domain.value_objects.timestamp_format import TimestampFormat
from domain.value_objects.wire import ABSENT, Absent


class CloudWatchEvent(Record):
    """Event-bus envelope.

    ``detail`` is whatever the source put there and is passed through as
    plain JSON. ``replay-name`` is only sent when the event comes from an
    archive replay.
    """

    version: Annotated[str, WireField("version", STRING)]
    id: Annotated[str, WireField("id", STRING)]
    detail_type: Annotated[str, WireField("detail-type", STRING)]
    source: Annotated[str, WireField("source", STRING)]
    account_id: Annotated[str, WireField("account", STRING)]
    time: Annotated[datetime, WireField("time", TimestampCodec(TimestampFormat.ISO8601_SECONDS))]
    region: Annotated[str, WireField("region", STRING)]
    resources: Annotated[tuple[str, ...], WireField("resources", STRING_LIST)]
    replay_name: Annotated[str | None | Absent, WireField("replay-name", STRING)] = ABSENT
    detail: Annotated[Any, WireField("detail", RAW_JSON)] = ABSENT
