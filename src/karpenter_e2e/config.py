from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any

import boto3
import botocore.session
from botocore.config import Config
from botocore.exceptions import BotoCoreError

from .core import RETRY_CONFIG
from .errors import ConfigError
from .logger import logger
from .settings import default_region

# Same shape botocore accepts for region names (a single hostname label)
REGION_PATTERN = re.compile(r"^[a-z0-9](?:[a-z0-9-]{0,61}[a-z0-9])?$")


@dataclass(frozen=True)
class AWSConfig:
    """
    Resolved AWS configuration shared read-only by every client built from it.
    """

    region: str
    session: boto3.Session = field(repr=False, compare=False)
    max_attempts: int = RETRY_CONFIG["max_attempts"]  # type: ignore[assignment]
    retry_mode: str = RETRY_CONFIG["mode"]  # type: ignore[assignment]
    credential_source: str = ""

    @property
    def botocore_config(self) -> Config:
        # Built per client: botocore rewrites the retries dict it is handed
        return Config(retries={"max_attempts": self.max_attempts, "mode": self.retry_mode})

    def client(self, service_name: str) -> Any:
        """Builds a boto3 client bound to this config. Makes no network calls."""
        return self.session.client(
            service_name,
            region_name=self.region,
            config=self.botocore_config,
        )


def _new_session(region: str | None) -> boto3.Session:
    core = botocore.session.Session()
    # STS resolves to sts.<region>.<partition suffix> rather than the global endpoint
    core.set_config_variable("sts_regional_endpoints", "regional")
    return boto3.Session(botocore_session=core, region_name=region)


def load_config(region: str | None = None) -> AWSConfig:
    """
    Resolves credentials, region and retry policy once.

    When region is None it falls back to AWS_REGION, then AWS_DEFAULT_REGION,
    then the active profile's region. Any failure raises ConfigError; callers
    treat it as fatal.
    """
    try:
        session = _new_session(region or default_region())
        credentials = session.get_credentials()
    except BotoCoreError as e:
        raise ConfigError(f"failed to load AWS config, {e}") from e

    if credentials is None:
        raise ConfigError(
            "failed to load AWS config, no credentials found in the provider chain"
        )

    resolved_region = session.region_name
    if not resolved_region:
        raise ConfigError(
            "failed to load AWS config, no region set (AWS_REGION or AWS_DEFAULT_REGION)"
        )
    if not REGION_PATTERN.match(resolved_region):
        raise ConfigError(f"failed to load AWS config, malformed region {resolved_region!r}")

    cfg = AWSConfig(
        region=resolved_region,
        session=session,
        credential_source=getattr(credentials, "method", "") or "",
    )
    logger.debug(
        f"Loaded AWS config for {cfg.region} "
        f"(credentials: {cfg.credential_source or 'unknown'}, "
        f"retries: {cfg.retry_mode}/{cfg.max_attempts})"
    )
    return cfg
