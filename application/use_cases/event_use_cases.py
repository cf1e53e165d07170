from typing import Any

import structlog
from returns.result import Failure, Result, Success

from application.dtos.errors import AppError
from application.dtos.event_dtos import DecodeEventRequest, NormalizedEventResponse
from domain.events import EVENT_FAMILIES
from domain.records import Record

logger = structlog.get_logger()


def _resolve_family(family: str) -> Result[type[Record], AppError]:
    record_type = EVENT_FAMILIES.get(family)
    if record_type is None:
        logger.warning("unsupported_event_family", family=family)
        return Failure(AppError("unsupported", f"Unsupported event family: {family}"))
    return Success(record_type)


class DecodeEventUseCase:
    """Decode a wire document of a registered event family into its typed record."""

    def execute(self, request: DecodeEventRequest) -> Result[Record, AppError]:
        logger.info("decode_event_start", family=request.family)
        resolved = _resolve_family(request.family)
        if isinstance(resolved, Failure):
            return resolved
        record_type = resolved.unwrap()

        result = record_type.decode(request.document)
        if isinstance(result, Failure):
            error = result.failure()
            logger.warning(
                "decode_event_failed",
                family=request.family,
                record_type=error.record_type,
                wire_key=error.wire_key,
                path=error.rendered_path,
                kind=error.kind,
                error=str(error),
            )
            return Failure(AppError("validation", f"Validation error: {error}"))

        logger.info("decode_event_success", family=request.family, record_type=record_type.__name__)
        return Success(result.unwrap())


class NormalizeEventUseCase:
    """Decode a wire document and re-encode it in canonical wire form.

    Unknown keys are dropped, declared defaults are written out and lossy
    fields (timestamps, padding, header casing) come back in their declared
    form.
    """

    def __init__(self, decode_event: DecodeEventUseCase | None = None) -> None:
        self.decode_event = decode_event or DecodeEventUseCase()

    def execute(self, request: DecodeEventRequest) -> Result[NormalizedEventResponse, AppError]:
        decoded = self.decode_event.execute(request)
        if isinstance(decoded, Failure):
            return decoded
        record = decoded.unwrap()
        document: dict[str, Any] = record.encode()
        logger.info("normalize_event_success", family=request.family, keys=len(document))
        return Success(
            NormalizedEventResponse(
                family=request.family,
                record_type=type(record).__name__,
                document=document,
            ),
        )
