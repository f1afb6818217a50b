"""
Suite metrics, written to Timestream when ENABLE_METRICS is set.

Callers never check whether metrics are on: both writers expose the same
write_records call, and the disabled one silently accepts everything.
"""

from __future__ import annotations

import time
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any, Protocol

from .clients import get_timestream_write_client
from .config import load_config
from .errors import ConfigError
from .logger import logger
from .settings import EnvironmentSettings

DATABASE_NAME = "karpenterTesting"
TABLE_NAME = "scaleTestDurations"

PROVISIONING_EVENT = "provisioningDuration"
DEPROVISIONING_EVENT = "deprovisioningDuration"


class TimestreamWriteAPI(Protocol):
    enabled: bool

    def write_records(self, **kwargs: Any) -> dict[str, Any]: ...


class NoOpTimestreamWriter:
    """Stands in for Timestream when metrics are disabled. Records nothing."""

    enabled = False

    def write_records(self, **kwargs: Any) -> dict[str, Any]:
        return {}


class TimestreamWriter:
    enabled = True

    def __init__(self, client: Any, region: str):
        self.client = client
        self.region = region

    def write_records(self, **kwargs: Any) -> dict[str, Any]:
        return self.client.write_records(**kwargs)  # type: ignore[no-any-return]


def get_timestream_api(settings: EnvironmentSettings) -> TimestreamWriteAPI:
    """
    Selects the metrics writer once, at environment construction.

    Metrics are best-effort: if the metrics-region config cannot be loaded
    the run continues with the no-op writer.
    """
    if not settings.enable_metrics:
        logger.debug("Metrics disabled (ENABLE_METRICS is false)")
        return NoOpTimestreamWriter()

    logger.info(f"Enabling metrics firing for this suite ({settings.metrics_region})")
    try:
        cfg = load_config(settings.metrics_region)
    except ConfigError as e:
        logger.warning(
            f"Metrics enabled but config for {settings.metrics_region} failed, "
            f"falling back to no-op writer: {e}"
        )
        return NoOpTimestreamWriter()
    return TimestreamWriter(get_timestream_write_client(cfg), cfg.region)


class MetricsReporter:
    """Builds Timestream records for a suite and hands them to the writer."""

    def __init__(
        self,
        writer: TimestreamWriteAPI,
        cluster_name: str,
        git_ref: str = "n/a",
    ):
        self.writer = writer
        self.cluster_name = cluster_name
        self.git_ref = git_ref

    def _dimensions(self, labels: dict[str, str]) -> list[dict[str, str]]:
        base = {"clusterName": self.cluster_name, "gitRef": self.git_ref}
        base.update(labels)
        return [{"Name": k, "Value": v} for k, v in base.items()]

    def expect_metric(
        self, name: str, value: float, labels: dict[str, str] | None = None
    ) -> dict[str, Any]:
        record = {
            "Dimensions": self._dimensions(labels or {}),
            "MeasureName": name,
            "MeasureValue": repr(float(value)),
            "MeasureValueType": "DOUBLE",
            "Time": str(int(time.time() * 1000)),
            "TimeUnit": "MILLISECONDS",
        }
        return self.writer.write_records(
            DatabaseName=DATABASE_NAME,
            TableName=TABLE_NAME,
            Records=[record],
        )

    @contextmanager
    def measure_duration(
        self,
        event: str,
        group: str,
        name: str,
        labels: dict[str, str] | None = None,
    ) -> Iterator[None]:
        """Times the block and records its duration in seconds."""
        start = time.monotonic()
        yield
        elapsed = time.monotonic() - start
        self.expect_metric(event, elapsed, {"group": group, "name": name, **(labels or {})})
