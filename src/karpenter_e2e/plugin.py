"""
pytest fixtures for suites running against the e2e environment.

Enable with ``pytest_plugins = ["karpenter_e2e.plugin"]`` in a conftest.
"""

import pytest

from .environment import Environment, get_environment
from .schemas.nodeclass import EC2NodeClass


@pytest.fixture(scope="session")
def aws_env() -> Environment:
    return get_environment()


@pytest.fixture
def node_class(aws_env: Environment) -> EC2NodeClass:
    return aws_env.default_ec2_node_class()
