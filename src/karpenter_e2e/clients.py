from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .config import AWSConfig

# Shared Client Registry (one client per service, all bound to one AWSConfig)


@dataclass(frozen=True)
class ServiceClients:
    ec2: Any
    iam: Any
    fis: Any
    eks: Any
    ssm: Any
    sts: Any


def get_ec2_client(cfg: AWSConfig) -> Any:
    return cfg.client("ec2")


def get_iam_client(cfg: AWSConfig) -> Any:
    return cfg.client("iam")


def get_fis_client(cfg: AWSConfig) -> Any:
    return cfg.client("fis")


def get_eks_client(cfg: AWSConfig) -> Any:
    return cfg.client("eks")


def get_ssm_client(cfg: AWSConfig) -> Any:
    return cfg.client("ssm")


def get_sts_client(cfg: AWSConfig) -> Any:
    return cfg.client("sts")


def get_sqs_client(cfg: AWSConfig) -> Any:
    return cfg.client("sqs")


def get_timestream_write_client(cfg: AWSConfig) -> Any:
    return cfg.client("timestream-write")


def build_clients(cfg: AWSConfig) -> ServiceClients:
    """
    Builds the core service clients from a single config.

    Client construction is local; failures surface on first call.
    """
    return ServiceClients(
        ec2=get_ec2_client(cfg),
        iam=get_iam_client(cfg),
        fis=get_fis_client(cfg),
        eks=get_eks_client(cfg),
        ssm=get_ssm_client(cfg),
        sts=get_sts_client(cfg),
    )
