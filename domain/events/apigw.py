"""Gateway proxy integration request and response envelopes."""

from datetime import datetime
from typing import Annotated, Any

from returns.result import Result

from domain.codecs import (
    BOOLEAN,
    HEADERS,
    INT32,
    QUERY_PARAMETERS,
    RAW_JSON,
    STRING,
    STRING_MAP,
    DelimitedListCodec,
    RecordCodec,
    TimestampCodec,
)
from domain.events.http import decode_body
from domain.records import Record, WireField
from domain.value_objects.codec_errors import CodecError
from domain.value_objects.header_map import HeaderMap
from domain.value_objects.timestamp_format import TimestampFormat
from domain.value_objects.wire import ABSENT, Absent

# "cognito-idp.<region>.amazonaws.com/<pool>,cognito-idp...:CognitoSignIn:<sub>"
_AUTHENTICATION_PROVIDERS = DelimitedListCodec(",", drop_empty=True)

OptionalString = str | None | Absent


class ApiGatewayRequestIdentity(Record):
    cognito_identity_pool_id: Annotated[OptionalString, WireField("cognitoIdentityPoolId", STRING)] = ABSENT
    account_id: Annotated[OptionalString, WireField("accountId", STRING)] = ABSENT
    cognito_identity_id: Annotated[OptionalString, WireField("cognitoIdentityId", STRING)] = ABSENT
    caller: Annotated[OptionalString, WireField("caller", STRING)] = ABSENT
    api_key: Annotated[OptionalString, WireField("apiKey", STRING)] = ABSENT
    api_key_id: Annotated[OptionalString, WireField("apiKeyId", STRING)] = ABSENT
    access_key: Annotated[OptionalString, WireField("accessKey", STRING)] = ABSENT
    source_ip: Annotated[OptionalString, WireField("sourceIp", STRING)] = ABSENT
    cognito_authentication_type: Annotated[
        OptionalString,
        WireField("cognitoAuthenticationType", STRING),
    ] = ABSENT
    cognito_authentication_provider: Annotated[
        tuple[str, ...] | None | Absent,
        WireField("cognitoAuthenticationProvider", _AUTHENTICATION_PROVIDERS),
    ] = ABSENT
    user_arn: Annotated[OptionalString, WireField("userArn", STRING)] = ABSENT
    user_agent: Annotated[OptionalString, WireField("userAgent", STRING)] = ABSENT
    user: Annotated[OptionalString, WireField("user", STRING)] = ABSENT


class ApiGatewayRequestContext(Record):
    account_id: Annotated[OptionalString, WireField("accountId", STRING)] = ABSENT
    resource_id: Annotated[OptionalString, WireField("resourceId", STRING)] = ABSENT
    operation_name: Annotated[OptionalString, WireField("operationName", STRING)] = ABSENT
    stage: Annotated[OptionalString, WireField("stage", STRING)] = ABSENT
    domain_name: Annotated[OptionalString, WireField("domainName", STRING)] = ABSENT
    domain_prefix: Annotated[OptionalString, WireField("domainPrefix", STRING)] = ABSENT
    request_id: Annotated[OptionalString, WireField("requestId", STRING)] = ABSENT
    protocol: Annotated[OptionalString, WireField("protocol", STRING)] = ABSENT
    identity: Annotated[
        ApiGatewayRequestIdentity | None | Absent,
        WireField("identity", RecordCodec(ApiGatewayRequestIdentity)),
    ] = ABSENT
    resource_path: Annotated[OptionalString, WireField("resourcePath", STRING)] = ABSENT
    path: Annotated[OptionalString, WireField("path", STRING)] = ABSENT
    # free-form: claims, context and principal id set by the authorizer
    authorizer: Annotated[Any, WireField("authorizer", RAW_JSON)] = ABSENT
    http_method: Annotated[OptionalString, WireField("httpMethod", STRING)] = ABSENT
    request_time: Annotated[
        datetime | None | Absent,
        WireField("requestTime", TimestampCodec(TimestampFormat.COMMON_LOG)),
    ] = ABSENT
    request_time_epoch: Annotated[
        datetime | None | Absent,
        WireField("requestTimeEpoch", TimestampCodec(TimestampFormat.EPOCH_MILLIS)),
    ] = ABSENT
    api_id: Annotated[OptionalString, WireField("apiId", STRING)] = ABSENT


class ApiGatewayProxyRequest(Record):
    """Proxy integration request (payload format 1.0).

    ``headers`` and ``multiValueHeaders`` are case-insensitive for lookup;
    query-string maps are not. Console test events send null for every map,
    which stays null on re-encode.
    """

    resource: Annotated[OptionalString, WireField("resource", STRING)] = ABSENT
    path: Annotated[str, WireField("path", STRING)]
    http_method: Annotated[str, WireField("httpMethod", STRING)]
    headers: Annotated[HeaderMap | None | Absent, WireField("headers", HEADERS)] = ABSENT
    multi_value_headers: Annotated[
        HeaderMap | None | Absent,
        WireField("multiValueHeaders", HEADERS),
    ] = ABSENT
    query_string_parameters: Annotated[
        HeaderMap | None | Absent,
        WireField("queryStringParameters", QUERY_PARAMETERS),
    ] = ABSENT
    multi_value_query_string_parameters: Annotated[
        HeaderMap | None | Absent,
        WireField("multiValueQueryStringParameters", QUERY_PARAMETERS),
    ] = ABSENT
    path_parameters: Annotated[
        dict[str, str] | None | Absent,
        WireField("pathParameters", STRING_MAP),
    ] = ABSENT
    stage_variables: Annotated[
        dict[str, str] | None | Absent,
        WireField("stageVariables", STRING_MAP),
    ] = ABSENT
    request_context: Annotated[
        ApiGatewayRequestContext | None | Absent,
        WireField("requestContext", RecordCodec(ApiGatewayRequestContext)),
    ] = ABSENT
    body: Annotated[OptionalString, WireField("body", STRING)] = ABSENT
    is_base64_encoded: Annotated[
        bool,
        WireField("isBase64Encoded", BOOLEAN, null_as_default=True),
    ] = False

    def body_bytes(self) -> Result[bytes, CodecError]:
        return decode_body(self.body, is_base64_encoded=self.is_base64_encoded)


class ApiGatewayProxyResponse(Record):
    """Proxy integration response returned by a handler.

    Build one directly, e.g. ``ApiGatewayProxyResponse(status_code=200,
    body="ok")``; unset optional fields are left out of the encoded document.
    """

    status_code: Annotated[int, WireField("statusCode", INT32)]
    headers: Annotated[HeaderMap | None | Absent, WireField("headers", HEADERS)] = ABSENT
    multi_value_headers: Annotated[
        HeaderMap | None | Absent,
        WireField("multiValueHeaders", HEADERS),
    ] = ABSENT
    body: Annotated[OptionalString, WireField("body", STRING)] = ABSENT
    is_base64_encoded: Annotated[
        bool,
        WireField("isBase64Encoded", BOOLEAN, null_as_default=True),
    ] = False

    def body_bytes(self) -> Result[bytes, CodecError]:
        return decode_body(self.body, is_base64_encoded=self.is_base64_encoded)
