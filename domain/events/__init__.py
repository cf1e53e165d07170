"""Event family definitions and the read-only family registry."""

from types import MappingProxyType

from domain.events.alb import AlbTargetGroupRequest, AlbTargetGroupResponse
from domain.events.apigw import ApiGatewayProxyRequest, ApiGatewayProxyResponse
from domain.events.cloudwatch_events import CloudWatchEvent
from domain.events.dynamodb import DynamoDbEvent
from domain.events.kinesis import KinesisEvent
from domain.events.s3 import S3Event
from domain.events.sns import SnsEvent
from domain.records import Record

EVENT_FAMILIES: MappingProxyType[str, type[Record]] = MappingProxyType(
    {
        "alb_request": AlbTargetGroupRequest,
        "alb_response": AlbTargetGroupResponse,
        "apigw_request": ApiGatewayProxyRequest,
        "apigw_response": ApiGatewayProxyResponse,
        "cloudwatch_events": CloudWatchEvent,
        "dynamodb": DynamoDbEvent,
        "kinesis": KinesisEvent,
        "s3": S3Event,
        "sns": SnsEvent,
    },
)

__all__ = [
    "EVENT_FAMILIES",
    "AlbTargetGroupRequest",
    "AlbTargetGroupResponse",
    "ApiGatewayProxyRequest",
    "ApiGatewayProxyResponse",
    "CloudWatchEvent",
    "DynamoDbEvent",
    "KinesisEvent",
    "S3Event",
    "SnsEvent",
]
