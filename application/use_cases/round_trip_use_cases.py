import structlog
from returns.result import Failure, Result, Success

from application.dtos.errors import AppError
from application.dtos.round_trip_dtos import CorpusReport, RoundTripReport, RoundTripSample
from application.ports.sample_repository import SampleRepository
from domain.events import EVENT_FAMILIES
from domain.exceptions import SampleNotFoundError
from domain.records import Record
from domain.services.structural_diff import structural_diff

logger = structlog.get_logger()


def check_round_trip(sample: RoundTripSample, record_type: type[Record] | None = None) -> RoundTripReport:
    """Decode, re-encode and re-decode one sample.

    The re-encoded document must structurally equal the projection of the
    original (unknown keys dropped, defaults materialized, lossy fields
    re-rendered) and decoding it again must give back an equal record.

    ``record_type`` defaults to the registered root type of the sample's
    family; an unregistered family raises ``KeyError``.
    """
    record_type = record_type or EVENT_FAMILIES[sample.family]
    report = RoundTripReport(sample=sample.name, family=sample.family, record_type=record_type.__name__)

    decoded = record_type.decode(sample.document)
    if isinstance(decoded, Failure):
        return report.model_copy(update={"decode_error": decoded.failure()})
    record = decoded.unwrap()

    encoded = record.encode()
    differences = structural_diff(record_type.project(sample.document), encoded)
    redecoded = record_type.decode(encoded)
    fixed_point = isinstance(redecoded, Success) and redecoded.unwrap() == record
    return report.model_copy(update={"differences": differences, "fixed_point": fixed_point})


class VerifyRoundTripUseCase:
    """Run the round-trip check over a sample corpus."""

    def __init__(self, sample_repository: SampleRepository) -> None:
        self.sample_repository = sample_repository

    def execute(self, family: str | None = None) -> Result[CorpusReport, AppError]:
        logger.info("verify_round_trip_start", family=family)
        if family is not None and family not in EVENT_FAMILIES:
            logger.warning("unsupported_event_family", family=family)
            return Failure(AppError("unsupported", f"Unsupported event family: {family}"))

        samples = self.sample_repository.list_samples(family)
        if not samples:
            logger.warning("round_trip_corpus_empty", family=family)
            return Failure(AppError("not_found", f"No samples found for family: {family or 'any'}"))

        reports: list[RoundTripReport] = []
        for sample in samples:
            if sample.family not in EVENT_FAMILIES:
                logger.warning("round_trip_sample_skipped", sample=sample.name, family=sample.family)
                continue
            report = check_round_trip(sample)
            if report.decode_error is not None:
                logger.warning(
                    "round_trip_decode_failed",
                    sample=sample.name,
                    path=report.decode_error.rendered_path,
                    error=str(report.decode_error),
                )
            elif not report.ok:
                logger.warning(
                    "round_trip_mismatch",
                    sample=sample.name,
                    differences=[str(difference) for difference in report.differences],
                    fixed_point=report.fixed_point,
                )
            reports.append(report)

        corpus = CorpusReport(reports=reports)
        logger.info(
            "verify_round_trip_complete",
            family=family,
            samples=len(reports),
            failures=len(corpus.failures),
        )
        return Success(corpus)

    def verify_sample(self, family: str, name: str) -> Result[RoundTripReport, AppError]:
        if family not in EVENT_FAMILIES:
            logger.warning("unsupported_event_family", family=family)
            return Failure(AppError("unsupported", f"Unsupported event family: {family}"))
        try:
            sample = self.sample_repository.get(family, name)
        except SampleNotFoundError as e:
            logger.warning("sample_not_found", family=family, sample=name, error=str(e))
            return Failure(AppError("not_found", f"Sample not found: {e!s}"))
        return Success(check_round_trip(sample))
