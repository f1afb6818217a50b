import boto3
import pytest
from botocore.exceptions import ClientError, EndpointConnectionError
from moto import mock_aws
from pydantic import ValidationError

from karpenter_e2e.errors import DiscoveryError
from karpenter_e2e.topology import ZoneInfo, discover_zones


def test_discover_zones_maps_fields(mocker):
    ec2 = mocker.Mock()
    ec2.describe_availability_zones.return_value = {
        "AvailabilityZones": [
            {"ZoneName": "us-west-2a", "ZoneId": "usw2-az1", "ZoneType": "availability-zone"},
            {"ZoneName": "us-west-2b", "ZoneId": "usw2-az2", "ZoneType": "availability-zone"},
            {
                "ZoneName": "us-west-2-lax-1a",
                "ZoneId": "usw2-lax1-az1",
                "ZoneType": "local-zone",
            },
        ]
    }

    zones = discover_zones(ec2)

    assert zones == [
        ZoneInfo(zone="us-west-2a", zone_id="usw2-az1", zone_type="availability-zone"),
        ZoneInfo(zone="us-west-2b", zone_id="usw2-az2", zone_type="availability-zone"),
        ZoneInfo(zone="us-west-2-lax-1a", zone_id="usw2-lax1-az1", zone_type="local-zone"),
    ]
    ec2.describe_availability_zones.assert_called_once_with()


def test_missing_fields_default_to_empty(mocker):
    ec2 = mocker.Mock()
    ec2.describe_availability_zones.return_value = {
        "AvailabilityZones": [{"ZoneName": "us-west-2a"}, {}]
    }

    zones = discover_zones(ec2)

    assert len(zones) == 2
    assert zones[0] == ZoneInfo(zone="us-west-2a", zone_id="", zone_type="")
    assert zones[1] == ZoneInfo()


def test_empty_response(mocker):
    ec2 = mocker.Mock()
    ec2.describe_availability_zones.return_value = {}

    assert discover_zones(ec2) == []


@pytest.mark.parametrize(
    "error",
    [
        ClientError(
            {"Error": {"Code": "UnauthorizedOperation", "Message": "denied"}},
            "DescribeAvailabilityZones",
        ),
        EndpointConnectionError(endpoint_url="https://ec2.us-west-2.amazonaws.com"),
    ],
)
def test_listing_failure_is_fatal(mocker, error):
    ec2 = mocker.Mock()
    ec2.describe_availability_zones.side_effect = error

    with pytest.raises(DiscoveryError, match="describe availability zones"):
        discover_zones(ec2)


def test_zone_info_is_immutable():
    zone = ZoneInfo(zone="us-west-2a", zone_id="usw2-az1", zone_type="availability-zone")

    with pytest.raises(ValidationError):
        zone.zone = "us-west-2b"


@mock_aws
def test_discover_zones_matches_region(aws_credentials):
    ec2 = boto3.client("ec2", region_name="us-west-2")
    expected = ec2.describe_availability_zones()["AvailabilityZones"]

    zones = discover_zones(ec2)

    assert len(zones) == len(expected)
    assert [z.zone for z in zones] == [az["ZoneName"] for az in expected]
    assert all(z.zone.startswith("us-west-2") for z in zones)
