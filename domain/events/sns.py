"""Notification-topic message envelopes delivered to subscribers."""

from datetime import datetime
from typing import Annotated

from returns.result import Result

from domain.codecs import BASE64, STRING, MapCodec, RecordCodec, SequenceCodec, TimestampCodec
from domain.records import Record, WireField
from domain.value_objects.codec_errors import CodecError
from domain.value_objects.timestamp_format import TimestampFormat
from domain.value_objects.wire import ABSENT, Absent


class SnsMessageAttribute(Record):
    # String, String.Array, Number or Binary
    data_type: Annotated[str, WireField("Type", STRING)]
    value: Annotated[str, WireField("Value", STRING)]

    def binary_value(self) -> Result[bytes, CodecError]:
        """Decode a ``Binary`` attribute; the wire value is base64 text."""
        return BASE64.decode(self.value)


class SnsMessage(Record):
    """The message as published to the topic, plus delivery metadata.

    The wire keys are upper camel case, which this family shares with no
    other event source.
    """

    signature_version: Annotated[str, WireField("SignatureVersion", STRING)]
    timestamp: Annotated[
        datetime,
        WireField("Timestamp", TimestampCodec(TimestampFormat.ISO8601_MILLIS)),
    ]
    signature: Annotated[str, WireField("Signature", STRING)]
    signing_cert_url: Annotated[str, WireField("SigningCertUrl", STRING)]
    message_id: Annotated[str, WireField("MessageId", STRING)]
    message: Annotated[str, WireField("Message", STRING)]
    message_attributes: Annotated[
        dict[str, SnsMessageAttribute] | None | Absent,
        WireField("MessageAttributes", MapCodec(RecordCodec(SnsMessageAttribute))),
    ] = ABSENT
    message_type: Annotated[str, WireField("Type", STRING)]
    unsubscribe_url: Annotated[str, WireField("UnsubscribeUrl", STRING)]
    topic_arn: Annotated[str, WireField("TopicArn", STRING)]
    subject: Annotated[str | None | Absent, WireField("Subject", STRING)] = ABSENT


class SnsRecord(Record):
    event_version: Annotated[str, WireField("EventVersion", STRING)]
    event_subscription_arn: Annotated[str, WireField("EventSubscriptionArn", STRING)]
    event_source: Annotated[str, WireField("EventSource", STRING)]
    sns: Annotated[SnsMessage, WireField("Sns", RecordCodec(SnsMessage))]


class SnsEvent(Record):
    records: Annotated[tuple[SnsRecord, ...], WireField("Records", SequenceCodec(RecordCodec(SnsRecord)))]
