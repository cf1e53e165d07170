"""Key-value table change-stream records."""

from datetime import datetime
from enum import Enum
from typing import Annotated

from domain.codecs import (
    ATTRIBUTE_MAP,
    INT64,
    STRING,
    EnumCodec,
    RecordCodec,
    SequenceCodec,
    TimestampCodec,
)
from domain.records import Record, WireField
from domain.value_objects.attribute_value import AttributeValue
from domain.value_objects.timestamp_format import TimestampFormat
from domain.value_objects.wire import ABSENT, Absent


class StreamViewType(str, Enum):
    """Which item images the stream writes for each modification."""

    NEW_IMAGE = "NEW_IMAGE"
    OLD_IMAGE = "OLD_IMAGE"
    NEW_AND_OLD_IMAGES = "NEW_AND_OLD_IMAGES"
    KEYS_ONLY = "KEYS_ONLY"


class StreamRecord(Record):
    """The modification itself.

    ``SequenceNumber`` is kept as an opaque string; ordering is the
    consumer's concern.
    """

    approximate_creation_date_time: Annotated[
        datetime | None | Absent,
        WireField("ApproximateCreationDateTime", TimestampCodec(TimestampFormat.EPOCH_SECONDS)),
    ] = ABSENT
    keys: Annotated[dict[str, AttributeValue], WireField("Keys", ATTRIBUTE_MAP)]
    new_image: Annotated[dict[str, AttributeValue] | None | Absent, WireField("NewImage", ATTRIBUTE_MAP)] = ABSENT
    old_image: Annotated[dict[str, AttributeValue] | None | Absent, WireField("OldImage", ATTRIBUTE_MAP)] = ABSENT
    sequence_number: Annotated[str, WireField("SequenceNumber", STRING)]
    size_bytes: Annotated[int, WireField("SizeBytes", INT64)]
    stream_view_type: Annotated[
        StreamViewType | None | Absent,
        WireField("StreamViewType", EnumCodec(StreamViewType)),
    ] = ABSENT


class DynamoDbUserIdentity(Record):
    """Present when the service itself removed the item (time-to-live expiry)."""

    type: Annotated[str, WireField("type", STRING)]
    principal_id: Annotated[str, WireField("principalId", STRING)]


class DynamoDbEventRecord(Record):
    event_id: Annotated[str, WireField("eventID", STRING)]
    # INSERT, MODIFY or REMOVE
    event_name: Annotated[str, WireField("eventName", STRING)]
    event_version: Annotated[str | None | Absent, WireField("eventVersion", STRING)] = ABSENT
    event_source: Annotated[str, WireField("eventSource", STRING)]
    aws_region: Annotated[str, WireField("awsRegion", STRING)]
    dynamodb: Annotated[StreamRecord, WireField("dynamodb", RecordCodec(StreamRecord))]
    event_source_arn: Annotated[str | None | Absent, WireField("eventSourceARN", STRING)] = ABSENT
    user_identity: Annotated[
        DynamoDbUserIdentity | None | Absent,
        WireField("userIdentity", RecordCodec(DynamoDbUserIdentity)),
    ] = ABSENT


class DynamoDbEvent(Record):
    records: Annotated[
        tuple[DynamoDbEventRecord, ...],
        WireField("Records", SequenceCodec(RecordCodec(DynamoDbEventRecord))),
    ]
