from __future__ import annotations

from typing import Any

from botocore.exceptions import BotoCoreError, ClientError
from pydantic import BaseModel, ConfigDict, Field

from .errors import DiscoveryError
from .logger import logger


class ZoneInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    zone: str = ""
    zone_id: str = ""
    zone_type: str = Field(default="", description="e.g., availability-zone, local-zone")


def discover_zones(ec2: Any) -> list[ZoneInfo]:
    """
    Lists the region's availability zones with a single DescribeAvailabilityZones call.
    Missing fields become empty strings; a failed call raises DiscoveryError.
    """
    try:
        out = ec2.describe_availability_zones()
    except (ClientError, BotoCoreError) as e:
        raise DiscoveryError(f"failed to describe availability zones, {e}") from e

    zones = [
        ZoneInfo(
            zone=az.get("ZoneName") or "",
            zone_id=az.get("ZoneId") or "",
            zone_type=az.get("ZoneType") or "",
        )
        for az in out.get("AvailabilityZones", [])
    ]
    logger.debug(f"Discovered {len(zones)} zones: {', '.join(z.zone for z in zones)}")
    return zones
