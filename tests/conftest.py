import pytest

from karpenter_e2e.environment import get_environment
from karpenter_e2e.settings import get_settings

ENV_VARS = [
    "AWS_REGION",
    "AWS_DEFAULT_REGION",
    "AWS_PROFILE",
    "AWS_USE_FIPS_ENDPOINT",
    "AWS_ENDPOINT_URL",
    "AWS_ENDPOINT_URL_STS",
    "AWS_STS_REGIONAL_ENDPOINTS",
    "CLUSTER_NAME",
    "CLUSTER_ENDPOINT",
    "PRIVATE_CLUSTER",
    "ENABLE_METRICS",
    "METRICS_REGION",
    "INTERRUPTION_QUEUE",
    "GIT_REF",
    "E2E_LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate every test from the developer's shell and ~/.aws."""
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("AWS_CONFIG_FILE", str(tmp_path / "config"))
    monkeypatch.setenv("AWS_SHARED_CREDENTIALS_FILE", str(tmp_path / "credentials"))
    monkeypatch.setenv("AWS_EC2_METADATA_DISABLED", "true")
    get_settings.cache_clear()
    get_environment.cache_clear()
    yield
    get_settings.cache_clear()
    get_environment.cache_clear()


@pytest.fixture
def aws_credentials(monkeypatch):
    """Fake credentials so boto3 resolves a config without touching AWS."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_REGION", "us-west-2")


@pytest.fixture
def cluster_env(monkeypatch, aws_credentials):
    monkeypatch.setenv("CLUSTER_NAME", "test-cluster")
    monkeypatch.setenv("CLUSTER_ENDPOINT", "https://test-cluster.eks.amazonaws.com")
