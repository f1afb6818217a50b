import pytest
from botocore.exceptions import ProfileNotFound

from karpenter_e2e.config import load_config
from karpenter_e2e.errors import ConfigError


def test_load_config_from_environment(aws_credentials):
    cfg = load_config()

    assert cfg.region == "us-west-2"
    assert cfg.max_attempts == 10
    assert cfg.retry_mode == "standard"
    assert cfg.credential_source == "env"


def test_region_override_wins(aws_credentials):
    cfg = load_config("eu-central-1")

    assert cfg.region == "eu-central-1"
    assert cfg.client("sts").meta.endpoint_url == "https://sts.eu-central-1.amazonaws.com"


def test_region_falls_back_to_default_region(aws_credentials, monkeypatch):
    monkeypatch.delenv("AWS_REGION")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "eu-west-1")

    assert load_config().region == "eu-west-1"


def test_aws_region_wins_over_default_region(aws_credentials, monkeypatch):
    monkeypatch.setenv("AWS_DEFAULT_REGION", "eu-west-1")

    assert load_config().region == "us-west-2"


def test_sts_regional_endpoint_in_us_east_1(aws_credentials):
    sts = load_config("us-east-1").client("sts")

    assert sts.meta.endpoint_url == "https://sts.us-east-1.amazonaws.com"


def test_sts_follows_fips_setting_like_other_clients(aws_credentials, monkeypatch):
    monkeypatch.setenv("AWS_USE_FIPS_ENDPOINT", "true")
    cfg = load_config()

    assert cfg.client("ec2").meta.endpoint_url == "https://ec2-fips.us-west-2.amazonaws.com"
    assert cfg.client("sts").meta.endpoint_url == "https://sts-fips.us-west-2.amazonaws.com"


def test_region_outside_two_letter_prefix_accepted(aws_credentials):
    assert load_config("eusc-de-east-1").region == "eusc-de-east-1"


def test_botocore_config_carries_retry_policy(aws_credentials):
    cfg = load_config()

    assert cfg.botocore_config.retries == {"max_attempts": 10, "mode": "standard"}
    # Fresh object per call so no client can alter another's policy
    assert cfg.botocore_config is not cfg.botocore_config


def test_missing_region_is_fatal(aws_credentials, monkeypatch):
    monkeypatch.delenv("AWS_REGION")

    with pytest.raises(ConfigError, match="no region"):
        load_config()


def test_malformed_region_is_fatal(aws_credentials):
    with pytest.raises(ConfigError, match="malformed region"):
        load_config("not a region")


def test_missing_credentials_is_fatal(mocker):
    mock_session = mocker.patch("karpenter_e2e.config.boto3.Session")
    mock_session.return_value.get_credentials.return_value = None
    mock_session.return_value.region_name = "us-west-2"

    with pytest.raises(ConfigError, match="no credentials"):
        load_config()


def test_session_errors_are_wrapped(mocker):
    mocker.patch(
        "karpenter_e2e.config.boto3.Session",
        side_effect=ProfileNotFound(profile="missing"),
    )

    with pytest.raises(ConfigError, match="missing"):
        load_config()


def test_china_partition_sts_endpoint(aws_credentials):
    cfg = load_config("cn-north-1")

    assert cfg.client("sts").meta.endpoint_url == "https://sts.cn-north-1.amazonaws.com.cn"
