"""Domain exceptions for programming and infrastructure faults.

Malformed payloads are never raised: codecs report them as ``CodecError``
values inside a ``Failure``. These exceptions cover the cases that are not
an expected property of the input.
"""


class DomainError(Exception):
    """Base exception for domain layer."""


class RecordDefinitionError(DomainError):
    """Raised when a record class declares a field without wire metadata."""


class SampleNotFoundError(DomainError):
    """Raised when a round-trip sample is not found in the repository."""


class InfrastructureError(DomainError):
    """Raised when infrastructure operations fail (file system, parsing setup, etc.)."""
