"""Shared test fixtures and configuration."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from infrastructure.samples.file_sample_repository import FileSampleRepository

SAMPLES_DIR = Path(__file__).parent / "fixtures" / "samples"


def load_sample(family: str, name: str) -> Any:  # noqa: ANN401
    """Load a sample wire document from the fixture corpus."""
    return json.loads((SAMPLES_DIR / family / f"{name}.json").read_text(encoding="utf-8"))


@pytest.fixture
def samples_dir() -> Path:
    """Return the root of the fixture sample corpus."""
    return SAMPLES_DIR


@pytest.fixture
def sample_repository() -> FileSampleRepository:
    """Create a file sample repository over the fixture corpus."""
    return FileSampleRepository(SAMPLES_DIR)


@pytest.fixture
def s3_put_document() -> dict[str, Any]:
    """Return an object-created notification without a version id."""
    return load_sample("s3", "objectcreated-put")


@pytest.fixture
def s3_delete_document() -> dict[str, Any]:
    """Return an object-removed notification (no size, no eTag)."""
    return load_sample("s3", "objectremoved-delete")


@pytest.fixture
def sns_document() -> dict[str, Any]:
    """Return a topic notification with message attributes."""
    return load_sample("sns", "notification")


@pytest.fixture
def apigw_request_document() -> dict[str, Any]:
    """Return a gateway proxy request with a base64 body."""
    return load_sample("apigw_request", "proxy-get")


@pytest.fixture
def apigw_console_document() -> dict[str, Any]:
    """Return a gateway console test request (null maps)."""
    return load_sample("apigw_request", "console-test")


@pytest.fixture
def alb_request_document() -> dict[str, Any]:
    """Return a load balancer request with single-value headers."""
    return load_sample("alb_request", "lambda-target")


@pytest.fixture
def dynamodb_document() -> dict[str, Any]:
    """Return an INSERT / MODIFY / REMOVE change-stream batch."""
    return load_sample("dynamodb", "stream-batch")


@pytest.fixture
def kinesis_document() -> dict[str, Any]:
    """Return a data-stream batch of two records."""
    return load_sample("kinesis", "stream-batch")


@pytest.fixture
def cloudwatch_document() -> dict[str, Any]:
    """Return a scheduled event-bus event."""
    return load_sample("cloudwatch_events", "scheduled")


@pytest.fixture
def sample_loader() -> Callable[[str, str], Any]:
    """Return a loader for any sample in the fixture corpus."""
    return load_sample
