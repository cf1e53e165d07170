"""Load balancer target group request and response envelopes.

Depending on the target group setting, the balancer sends either
``headers`` / ``queryStringParameters`` or their multi-value variants,
never both.
"""

from typing import Annotated

from returns.result import Result

from domain.codecs import BOOLEAN, HEADERS, INT32, QUERY_PARAMETERS, STRING, RecordCodec
from domain.events.http import decode_body
from domain.records import Record, WireField
from domain.value_objects.codec_errors import CodecError
from domain.value_objects.header_map import HeaderMap
from domain.value_objects.wire import ABSENT, Absent


class ElbContext(Record):
    target_group_arn: Annotated[str, WireField("targetGroupArn", STRING)]


class AlbTargetGroupRequestContext(Record):
    elb: Annotated[ElbContext, WireField("elb", RecordCodec(ElbContext))]


class AlbTargetGroupRequest(Record):
    request_context: Annotated[
        AlbTargetGroupRequestContext,
        WireField("requestContext", RecordCodec(AlbTargetGroupRequestContext)),
    ]
    http_method: Annotated[str, WireField("httpMethod", STRING)]
    path: Annotated[str, WireField("path", STRING)]
    query_string_parameters: Annotated[
        HeaderMap | None | Absent,
        WireField("queryStringParameters", QUERY_PARAMETERS),
    ] = ABSENT
    multi_value_query_string_parameters: Annotated[
        HeaderMap | None | Absent,
        WireField("multiValueQueryStringParameters", QUERY_PARAMETERS),
    ] = ABSENT
    headers: Annotated[HeaderMap | None | Absent, WireField("headers", HEADERS)] = ABSENT
    multi_value_headers: Annotated[
        HeaderMap | None | Absent,
        WireField("multiValueHeaders", HEADERS),
    ] = ABSENT
    body: Annotated[str | None | Absent, WireField("body", STRING)] = ABSENT
    is_base64_encoded: Annotated[bool, WireField("isBase64Encoded", BOOLEAN, null_as_default=True)] = False

    def body_bytes(self) -> Result[bytes, CodecError]:
        return decode_body(self.body, is_base64_encoded=self.is_base64_encoded)


class AlbTargetGroupResponse(Record):
    status_code: Annotated[int, WireField("statusCode", INT32)]
    status_description: Annotated[str | None | Absent, WireField("statusDescription", STRING)] = ABSENT
    headers: Annotated[HeaderMap | None | Absent, WireField("headers", HEADERS)] = ABSENT
    multi_value_headers: Annotated[
        HeaderMap | None | Absent,
        WireField("multiValueHeaders", HEADERS),
    ] = ABSENT
    body: Annotated[str | None | Absent, WireField("body", STRING)] = ABSENT
    is_base64_encoded: Annotated[bool, WireField("isBase64Encoded", BOOLEAN, null_as_default=True)] = False
