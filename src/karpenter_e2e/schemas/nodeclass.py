import secrets
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

API_VERSION = "karpenter.k8s.aws/v1"


def random_name() -> str:
    return f"nodeclass-{secrets.token_hex(4)}"


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AMISelectorTerm(_CamelModel):
    alias: str | None = None
    id: str | None = None
    name: str | None = None
    tags: dict[str, str] = Field(default_factory=dict)


class SelectorTerm(_CamelModel):
    id: str | None = None
    tags: dict[str, str] = Field(default_factory=dict)


class EC2NodeClassSpec(_CamelModel):
    ami_selector_terms: list[AMISelectorTerm] = Field(default_factory=list)
    security_group_selector_terms: list[SelectorTerm] = Field(default_factory=list)
    subnet_selector_terms: list[SelectorTerm] = Field(default_factory=list)
    role: str = Field(default="", description="Mutually exclusive with instance_profile")
    instance_profile: str | None = None
    tags: dict[str, str] = Field(default_factory=dict)


class EC2NodeClass(_CamelModel):
    name: str = Field(default_factory=random_name)
    spec: EC2NodeClassSpec = Field(default_factory=EC2NodeClassSpec)

    def to_manifest(self) -> dict[str, Any]:
        """Renders the object as a Kubernetes manifest dict."""
        return {
            "apiVersion": API_VERSION,
            "kind": "EC2NodeClass",
            "metadata": {"name": self.name},
            "spec": self.spec.model_dump(by_alias=True, exclude_defaults=True),
        }
