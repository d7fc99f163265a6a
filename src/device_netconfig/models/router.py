"""Router-side network configuration model."""

from ipaddress import IPv4Address
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from device_netconfig.models.ipv4 import (
    DEFAULT_DNS,
    DEFAULT_GATEWAY,
    DEFAULT_MASK,
    DEFAULT_SECONDARY_DNS,
)
from device_netconfig.models.mask import Mask
from device_netconfig.models.subnet import Subnet


class RouterConfiguration(BaseModel):
    """Router's own subnet and DHCP server settings.

    When dhcp_enabled is set the router serves DHCP on its subnet, handing out
    the configured DNS servers.
    """

    model_config = ConfigDict(validate_assignment=True)

    subnet: Annotated[Subnet, Field(description="Router address and mask")]
    dhcp_enabled: Annotated[bool, Field(description="Serve DHCP on the subnet")]
    dns: Annotated[IPv4Address | None, Field(None, description="Primary DNS server")]
    secondary_dns: Annotated[IPv4Address | None, Field(None, description="Secondary DNS server")]

    @classmethod
    def default(cls) -> "RouterConfiguration":
        """Return the factory default router configuration."""
        return cls(
            subnet=Subnet(gateway=DEFAULT_GATEWAY, mask=Mask(DEFAULT_MASK)),
            dhcp_enabled=True,
            dns=DEFAULT_DNS,
            secondary_dns=DEFAULT_SECONDARY_DNS,
        )
