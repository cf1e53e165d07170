from typing import Any, ClassVar, Self

from pydantic import BaseModel, ConfigDict, Field

PathSegment = str | int


def render_path(path: tuple[PathSegment, ...]) -> str:
    """Render a field path as ``Records[0].s3.object.size``."""
    rendered = ""
    for segment in path:
        if isinstance(segment, int):
            rendered += f"[{segment}]"
        elif rendered:
            rendered += f".{segment}"
        else:
            rendered = segment
    return rendered or "<root>"


class CodecError(BaseModel):
    """Base value object for a field that could not be decoded.

    Codec failures travel inside ``returns.result.Failure``. While they
    propagate upward they only accumulate context: the path from the
    document root and the innermost record type and wire key that owned
    the failing value.
    """

    model_config = ConfigDict(frozen=True)

    kind: ClassVar[str] = "CodecError"

    path: tuple[PathSegment, ...] = Field(
        default=(),
        description="Location of the failing value relative to the decoded document",
    )
    record_type: str | None = Field(
        None,
        description="Innermost record type whose field failed",
    )
    wire_key: str | None = Field(None, description="Wire key of the innermost failing field")

    @property
    def reason(self) -> str:
        return self.kind

    def at(self, *segments: PathSegment) -> Self:
        """Prefix the error path with container segments (index or key)."""
        return self.model_copy(update={"path": (*segments, *self.path)})

    def within(self, record_type: str, wire_key: str) -> Self:
        """Attach record context; the innermost record and key are kept."""
        return self.model_copy(
            update={
                "path": (wire_key, *self.path),
                "record_type": self.record_type or record_type,
                "wire_key": self.wire_key or wire_key,
            },
        )

    def __str__(self) -> str:
        return f"{render_path(self.path)}: {self.reason}"


class TypeMismatch(CodecError):
    """The wire value has the wrong JSON kind for the field."""

    kind: ClassVar[str] = "TypeMismatch"

    expected: str
    actual_kind: str

    @property
    def reason(self) -> str:
        return f"expected {self.expected}, got {self.actual_kind}"


class InvalidEncoding(CodecError):
    """The wire value has the right kind but its text cannot be parsed."""

    kind: ClassVar[str] = "InvalidEncoding"

    detail: str

    @property
    def reason(self) -> str:
        return self.detail


class OutOfRange(CodecError):
    """The value parsed but does not fit the declared target."""

    kind: ClassVar[str] = "OutOfRange"

    target: str
    value: Any

    @property
    def reason(self) -> str:
        return f"{self.value!r} is out of range for {self.target}"


class RecordError(BaseModel):
    """A record could not be decoded.

    Wraps the leaf ``CodecError`` together with the record type and wire key
    of the field that failed and the full path from the decoded document.
    """

    model_config = ConfigDict(frozen=True)

    record_type: str
    wire_key: str | None = None
    path: tuple[PathSegment, ...] = ()
    cause: CodecError

    @classmethod
    def from_codec_error(cls, error: CodecError, record_type: str) -> "RecordError":
        return cls(
            record_type=error.record_type or record_type,
            wire_key=error.wire_key,
            path=error.path,
            cause=error,
        )

    @property
    def kind(self) -> str:
        return self.cause.kind

    @property
    def rendered_path(self) -> str:
        return render_path(self.path)

    def __str__(self) -> str:
        return f"{self.record_type}: {self.cause}"
