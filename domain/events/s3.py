"""Object-storage event notifications.

Producers emit event structure versions 2.1, 2.2 and 2.3:

- 2.1: all events not covered by 2.2 and 2.3
- 2.2: cross-Region replication event notifications
- 2.3: lifecycle, intelligent-tiering, object ACL, object tagging and
  restoration delete events

2.2 and 2.3 only add blocks, so one superset definition decodes all three
versions with the version-specific blocks optional.
"""

from datetime import datetime
from typing import Annotated
from urllib.parse import unquote_plus

from domain.codecs import INT64, STRING, RecordCodec, SequenceCodec, TimestampCodec
from domain.records import Record, WireField
from domain.value_objects.timestamp_format import TimestampFormat
from domain.value_objects.wire import ABSENT, Absent

_EVENT_TIME = TimestampCodec(TimestampFormat.ISO8601_MILLIS)


class S3UserIdentity(Record):
    # Amazon customer ID of the user who caused the event
    principal_id: Annotated[str, WireField("principalId", STRING)]


class S3RequestParameters(Record):
    source_ip_address: Annotated[str, WireField("sourceIPAddress", STRING)]


class S3ResponseElements(Record):
    """Request identifiers useful when tracing a request with support.

    They match the values the storage service returned to the request that
    initiated the event.
    """

    amazon_request_id: Annotated[str, WireField("x-amz-request-id", STRING)]
    amazon_host_id: Annotated[str, WireField("x-amz-id-2", STRING)]


class S3Bucket(Record):
    name: Annotated[str, WireField("name", STRING)]
    owner_identity: Annotated[S3UserIdentity, WireField("ownerIdentity", RecordCodec(S3UserIdentity))]
    arn: Annotated[str, WireField("arn", STRING)]


class S3Object(Record):
    """The object an event refers to.

    ``size`` is missing from delete events and ``versionId`` is only sent for
    versioning-enabled buckets. ``sequencer`` orders events for one key; it is
    passed through as an opaque string.
    """

    key: Annotated[str, WireField("key", STRING)]
    size: Annotated[int | None | Absent, WireField("size", INT64)] = ABSENT
    version_id: Annotated[str | None | Absent, WireField("versionId", STRING)] = ABSENT
    e_tag: Annotated[str | None | Absent, WireField("eTag", STRING)] = ABSENT
    sequencer: Annotated[str | None | Absent, WireField("sequencer", STRING)] = ABSENT

    @property
    def url_decoded_key(self) -> str:
        """The object key with URL encoding removed (not part of the wire message)."""
        return unquote_plus(self.key)


class S3Entity(Record):
    schema_version: Annotated[str, WireField("s3SchemaVersion", STRING)]
    # ID found in the bucket notification configuration
    configuration_id: Annotated[str, WireField("configurationId", STRING)]
    bucket: Annotated[S3Bucket, WireField("bucket", RecordCodec(S3Bucket))]
    object: Annotated[S3Object, WireField("object", RecordCodec(S3Object))]


class S3RestoreEventData(Record):
    lifecycle_restoration_expiry_time: Annotated[
        datetime,
        WireField("lifecycleRestorationExpiryTime", _EVENT_TIME),
    ]
    lifecycle_restore_storage_class: Annotated[str, WireField("lifecycleRestoreStorageClass", STRING)]


class S3GlacierEventData(Record):
    """Only sent for ObjectRestore:Completed events."""

    restore_event_data: Annotated[
        S3RestoreEventData,
        WireField("restoreEventData", RecordCodec(S3RestoreEventData)),
    ]


class S3ReplicationEventData(Record):
    """Only sent for replication events (event version 2.2)."""

    replication_rule_id: Annotated[str | None | Absent, WireField("replicationRuleId", STRING)] = ABSENT
    destination_bucket: Annotated[str | None | Absent, WireField("destinationBucket", STRING)] = ABSENT
    s3_operation: Annotated[str | None | Absent, WireField("s3Operation", STRING)] = ABSENT
    request_time: Annotated[datetime | None | Absent, WireField("requestTime", _EVENT_TIME)] = ABSENT
    failure_reason: Annotated[str | None | Absent, WireField("failureReason", STRING)] = ABSENT
    threshold: Annotated[str | None | Absent, WireField("threshold", STRING)] = ABSENT
    replication_time: Annotated[str | None | Absent, WireField("replicationTime", STRING)] = ABSENT


class S3IntelligentTieringEventData(Record):
    destination_access_tier: Annotated[str, WireField("destinationAccessTier", STRING)]


class S3TransitionEventData(Record):
    destination_storage_class: Annotated[str, WireField("destinationStorageClass", STRING)]


class S3LifecycleEventData(Record):
    transition_event_data: Annotated[
        S3TransitionEventData,
        WireField("transitionEventData", RecordCodec(S3TransitionEventData)),
    ]


class S3EventRecord(Record):
    """One notification record.

    ``event_name`` is the notification type without the ``s3:`` prefix, for
    example ``ObjectCreated:Put``.
    """

    event_version: Annotated[str, WireField("eventVersion", STRING)]
    event_source: Annotated[str, WireField("eventSource", STRING)]
    aws_region: Annotated[str, WireField("awsRegion", STRING)]
    event_time: Annotated[datetime, WireField("eventTime", _EVENT_TIME)]
    event_name: Annotated[str, WireField("eventName", STRING)]
    user_identity: Annotated[S3UserIdentity, WireField("userIdentity", RecordCodec(S3UserIdentity))]
    request_parameters: Annotated[
        S3RequestParameters,
        WireField("requestParameters", RecordCodec(S3RequestParameters)),
    ]
    response_elements: Annotated[
        S3ResponseElements,
        WireField("responseElements", RecordCodec(S3ResponseElements)),
    ]
    s3: Annotated[S3Entity, WireField("s3", RecordCodec(S3Entity))]
    glacier_event_data: Annotated[
        S3GlacierEventData | None | Absent,
        WireField("glacierEventData", RecordCodec(S3GlacierEventData)),
    ] = ABSENT
    replication_event_data: Annotated[
        S3ReplicationEventData | None | Absent,
        WireField("replicationEventData", RecordCodec(S3ReplicationEventData)),
    ] = ABSENT
    intelligent_tiering_event_data: Annotated[
        S3IntelligentTieringEventData | None | Absent,
        WireField("intelligentTieringEventData", RecordCodec(S3IntelligentTieringEventData)),
    ] = ABSENT
    lifecycle_event_data: Annotated[
        S3LifecycleEventData | None | Absent,
        WireField("lifecycleEventData", RecordCodec(S3LifecycleEventData)),
    ] = ABSENT


class S3Event(Record):
    records: Annotated[
        tuple[S3EventRecord, ...],
        WireField("Records", SequenceCodec(RecordCodec(S3EventRecord))),
    ]
