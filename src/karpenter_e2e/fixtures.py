from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

from .core import (
    AMI_ALIAS,
    CLUSTER_TAG,
    DISCOVERY_TAG,
    NODE_INSTANCE_PROFILE_TEMPLATE,
    NODE_ROLE_TEMPLATE,
    PRIVATE_ECR_ACCOUNT,
)
from .schemas.nodeclass import AMISelectorTerm, EC2NodeClass, SelectorTerm

if TYPE_CHECKING:
    from .environment import Environment


class ImageDefaults(BaseModel):
    """Container images test workloads use, selected once per deployment mode."""

    model_config = ConfigDict(frozen=True)

    windows_default_image: str = "mcr.microsoft.com/oss/kubernetes/pause:3.9"
    ephemeral_init_container_image: str = "alpine"
    default_image: str = "public.ecr.aws/eks-distro/kubernetes/pause:3.2"


def image_defaults_for(region: str, private_cluster: bool) -> ImageDefaults:
    """
    Private clusters have no route to public registries and pull through the
    regional ECR mirror instead.
    """
    if not private_cluster:
        return ImageDefaults()
    registry = f"{PRIVATE_ECR_ACCOUNT}.dkr.ecr.{region}.amazonaws.com"
    return ImageDefaults(
        windows_default_image=f"{registry}/k8s/pause:3.6",
        ephemeral_init_container_image=f"{registry}/ecr-public/docker/library/alpine:latest",
        default_image=f"{registry}/ecr-public/eks-distro/kubernetes/pause:3.2",
    )


def default_ec2_node_class(env: Environment) -> EC2NodeClass:
    """
    Returns a fresh EC2NodeClass wired to the test cluster. Callers own the
    result and may mutate it.
    """
    node_class = EC2NodeClass()
    node_class.spec.ami_selector_terms = [AMISelectorTerm(alias=AMI_ALIAS)]
    node_class.spec.tags = {CLUSTER_TAG: env.cluster_name}
    node_class.spec.security_group_selector_terms = [
        SelectorTerm(tags={DISCOVERY_TAG: env.cluster_name})
    ]
    node_class.spec.subnet_selector_terms = [
        SelectorTerm(tags={DISCOVERY_TAG: env.cluster_name})
    ]
    if env.private_cluster:
        node_class.spec.role = ""
        node_class.spec.instance_profile = NODE_INSTANCE_PROFILE_TEMPLATE.format(
            cluster_name=env.cluster_name
        )
        return node_class
    node_class.spec.role = NODE_ROLE_TEMPLATE.format(cluster_name=env.cluster_name)
    return node_class
