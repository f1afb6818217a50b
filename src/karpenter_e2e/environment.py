"""
The AWS environment e2e suites run against.

One Environment is built per test run, before any test executes. After that
it is shared by reference and never mutated; adding post-construction
mutation would require a reader-writer lock or swapping in a fresh
immutable snapshot.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any

from .clients import build_clients
from .config import load_config
from .fixtures import ImageDefaults, default_ec2_node_class, image_defaults_for
from .interruption import SQSProvider, get_interruption_queue
from .logger import logger, setup_logger
from .metrics import MetricsReporter, TimestreamWriteAPI, get_timestream_api
from .schemas.nodeclass import EC2NodeClass
from .settings import EnvironmentSettings, get_settings, load_settings
from .topology import ZoneInfo, discover_zones


@dataclass(frozen=True)
class Environment:
    region: str

    sts_api: Any = field(repr=False)
    ec2_api: Any = field(repr=False)
    ssm_api: Any = field(repr=False)
    iam_api: Any = field(repr=False)
    fis_api: Any = field(repr=False)
    eks_api: Any = field(repr=False)
    timestream_api: TimestreamWriteAPI = field(repr=False)

    cluster_name: str
    cluster_endpoint: str
    sqs_provider: SQSProvider | None = None
    private_cluster: bool = False
    zone_info: tuple[ZoneInfo, ...] = ()
    image_defaults: ImageDefaults = field(default_factory=ImageDefaults)
    git_ref: str = "n/a"

    @property
    def interruption_queue(self) -> str:
        return self.sqs_provider.name if self.sqs_provider else ""

    @property
    def metrics_enabled(self) -> bool:
        return self.timestream_api.enabled

    @property
    def metrics(self) -> MetricsReporter:
        return MetricsReporter(self.timestream_api, self.cluster_name, self.git_ref)

    def default_ec2_node_class(self) -> EC2NodeClass:
        return default_ec2_node_class(self)


def new_environment(settings: EnvironmentSettings | None = None) -> Environment:
    """
    Builds the environment: config, clients, optional capabilities, zones.

    Raises a HarnessError subclass on any fatal misconfiguration; nothing
    here is retried.
    """
    settings = settings or load_settings()
    setup_logger(level=settings.log_level)

    cfg = load_config(settings.aws_region)
    clients = build_clients(cfg)
    timestream_api = get_timestream_api(settings)
    sqs_provider = get_interruption_queue(settings, cfg)
    zones = discover_zones(clients.ec2)
    images = image_defaults_for(cfg.region, settings.private_cluster)

    env = Environment(
        region=cfg.region,
        sts_api=clients.sts,
        ec2_api=clients.ec2,
        ssm_api=clients.ssm,
        iam_api=clients.iam,
        fis_api=clients.fis,
        eks_api=clients.eks,
        timestream_api=timestream_api,
        cluster_name=settings.cluster_name,
        cluster_endpoint=settings.cluster_endpoint,
        sqs_provider=sqs_provider,
        private_cluster=settings.private_cluster,
        zone_info=tuple(zones),
        image_defaults=images,
        git_ref=settings.git_ref,
    )
    logger.info(
        f"Environment ready: cluster [bold]{env.cluster_name}[/bold] in {env.region} "
        f"({'private' if env.private_cluster else 'public'}, "
        f"metrics {'on' if env.metrics_enabled else 'off'}, "
        f"interruption queue {env.interruption_queue or 'none'}, "
        f"{len(env.zone_info)} zones)"
    )
    return env


@lru_cache(maxsize=1)
def get_environment() -> Environment:
    """The single environment shared by every test in this process."""

    return new_environment(get_settings())
