"""Sample corpus interface (port) for the application layer."""

from abc import ABC, abstractmethod

from application.dtos.round_trip_dtos import RoundTripSample


class SampleRepository(ABC):
    """Interface for a corpus of recorded wire documents.

    Samples are grouped by event family. Implementations raise domain
    exceptions:
    - SampleNotFoundError: When a named sample does not exist
    - InfrastructureError: When the corpus cannot be read or parsed
    """

    @abstractmethod
    def list_samples(self, family: str | None = None) -> list[RoundTripSample]:
        """Return every sample, optionally restricted to one family.

        Raises:
            InfrastructureError: If the corpus cannot be read.

        """

    @abstractmethod
    def get(self, family: str, name: str) -> RoundTripSample:
        """Retrieve one sample by family and name.

        Raises:
            SampleNotFoundError: If the sample does not exist.
            InfrastructureError: If the sample cannot be read.

        """
