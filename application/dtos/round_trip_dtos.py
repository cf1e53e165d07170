from typing import Any

from pydantic import BaseModel, Field

from domain.services.structural_diff import Difference
from domain.value_objects.codec_errors import RecordError


class RoundTripSample(BaseModel):
    """One wire document from the sample corpus, tagged with its event family."""

    name: str
    family: str
    document: Any


class RoundTripReport(BaseModel):
    sample: str
    family: str
    record_type: str
    decode_error: RecordError | None = None
    differences: list[Difference] = Field(default_factory=list)
    # decode(encode(decode(wire))) == decode(wire)
    fixed_point: bool = False

    @property
    def ok(self) -> bool:
        return self.decode_error is None and not self.differences and self.fixed_point


class CorpusReport(BaseModel):
    reports: list[RoundTripReport] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return all(report.ok for report in self.reports)

    @property
    def failures(self) -> list[RoundTripReport]:
        return [report for report in self.reports if not report.ok]
