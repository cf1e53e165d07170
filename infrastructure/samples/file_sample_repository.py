import json
from pathlib import Path

import structlog

from application.dtos.round_trip_dtos import RoundTripSample
from application.ports.sample_repository import SampleRepository
from domain.exceptions import InfrastructureError, SampleNotFoundError

logger = structlog.get_logger()


class FileSampleRepository(SampleRepository):
    """Reads a sample corpus laid out as ``<root>/<family>/<name>.json``."""

    def __init__(self, root: Path) -> None:
        self.root = Path(root)

    def list_samples(self, family: str | None = None) -> list[RoundTripSample]:
        if not self.root.is_dir():
            msg = f"Sample directory does not exist: {self.root}"
            raise InfrastructureError(msg)
        if family is not None:
            directories = [self.root / family] if (self.root / family).is_dir() else []
        else:
            directories = sorted(path for path in self.root.iterdir() if path.is_dir())

        samples = [self._load(path) for directory in directories for path in sorted(directory.glob("*.json"))]
        logger.debug("samples_listed", root=str(self.root), family=family, count=len(samples))
        return samples

    def get(self, family: str, name: str) -> RoundTripSample:
        path = self.root / family / f"{name}.json"
        if not path.is_file():
            msg = f"{family}/{name}"
            raise SampleNotFoundError(msg)
        return self._load(path)

    def _load(self, path: Path) -> RoundTripSample:
        try:
            document = json.loads(path.read_bytes())
        except (OSError, ValueError) as e:
            logger.error("sample_load_failed", path=str(path), error=str(e))
            msg = f"Failed to read sample {path}: {e}"
            raise InfrastructureError(msg) from e
        return RoundTripSample(name=path.stem, family=path.parent.name, document=document)
