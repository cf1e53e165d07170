"""Data-stream records delivered in batches."""

from datetime import datetime
from typing import Annotated

from domain.codecs import BASE64, STRING, RecordCodec, SequenceCodec, TimestampCodec
from domain.records import Record, WireField
from domain.value_objects.timestamp_format import TimestampFormat
from domain.value_objects.wire import ABSENT, Absent


class KinesisRecord(Record):
    """The stream payload.

    ``data`` arrives as base64 text and is exposed as raw bytes. The arrival
    timestamp is epoch seconds with a fractional part.
    """

    kinesis_schema_version: Annotated[str, WireField("kinesisSchemaVersion", STRING)]
    partition_key: Annotated[str, WireField("partitionKey", STRING)]
    sequence_number: Annotated[str, WireField("sequenceNumber", STRING)]
    data: Annotated[bytes, WireField("data", BASE64)]
    approximate_arrival_timestamp: Annotated[
        datetime,
        WireField("approximateArrivalTimestamp", TimestampCodec(TimestampFormat.EPOCH_SECONDS)),
    ]
    encryption_type: Annotated[str | None | Absent, WireField("encryptionType", STRING)] = ABSENT


class KinesisEventRecord(Record):
    kinesis: Annotated[KinesisRecord, WireField("kinesis", RecordCodec(KinesisRecord))]
    event_source: Annotated[str, WireField("eventSource", STRING)]
    event_version: Annotated[str, WireField("eventVersion", STRING)]
    event_id: Annotated[str, WireField("eventID", STRING)]
    event_name: Annotated[str, WireField("eventName", STRING)]
    invoke_identity_arn: Annotated[str | None | Absent, WireField("invokeIdentityArn", STRING)] = ABSENT
    aws_region: Annotated[str, WireField("awsRegion", STRING)]
    event_source_arn: Annotated[str, WireField("eventSourceARN", STRING)]


class KinesisEvent(Record):
    records: Annotated[
        tuple[KinesisEventRecord, ...],
        WireField("Records", SequenceCodec(RecordCodec(KinesisEventRecord))),
    ]
