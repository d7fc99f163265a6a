"""Client-side network configuration models."""

from ipaddress import IPv4Address
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, RootModel

from device_netconfig.models.ipv4 import (
    DEFAULT_CLIENT_IP,
    DEFAULT_DNS,
    DEFAULT_GATEWAY,
    DEFAULT_MASK,
    DEFAULT_SECONDARY_DNS,
)
from device_netconfig.models.mask import Mask
from device_netconfig.models.subnet import Subnet


class ClientSettings(BaseModel):
    """Fixed network identity for a client device.

    Assignments are validated, so settings edited in place stay consistent.
    """

    model_config = ConfigDict(validate_assignment=True)

    ip: Annotated[IPv4Address, Field(description="Client IPv4 address")]
    subnet: Annotated[Subnet, Field(description="Gateway and mask of the client network")]
    dns: Annotated[IPv4Address | None, Field(None, description="Primary DNS server")]
    secondary_dns: Annotated[IPv4Address | None, Field(None, description="Secondary DNS server")]

    @classmethod
    def default(cls) -> "ClientSettings":
        """Return the factory default fixed settings."""
        return cls(
            ip=DEFAULT_CLIENT_IP,
            subnet=Subnet(gateway=DEFAULT_GATEWAY, mask=Mask(DEFAULT_MASK)),
            dns=DEFAULT_DNS,
            secondary_dns=DEFAULT_SECONDARY_DNS,
        )


class DhcpClient(BaseModel):
    """Client obtains its address from a DHCP server."""

    mode: Literal["dhcp"] = "dhcp"


class FixedClient(BaseModel):
    """Client uses explicitly assigned settings."""

    model_config = ConfigDict(validate_assignment=True)

    mode: Literal["fixed"] = "fixed"
    settings: ClientSettings


ClientMode = Annotated[DhcpClient | FixedClient, Field(discriminator="mode")]


class ClientConfiguration(RootModel[ClientMode]):
    """Client configuration: either DHCP or fixed settings.

    Structured form is ``{"mode": "dhcp"}`` or
    ``{"mode": "fixed", "settings": {...}}``. Defaults to DHCP.
    """

    root: ClientMode = Field(default_factory=DhcpClient)

    @classmethod
    def default(cls) -> "ClientConfiguration":
        """Return the default configuration (DHCP)."""
        return cls.dhcp()

    @classmethod
    def dhcp(cls) -> "ClientConfiguration":
        """Return a DHCP configuration."""
        return cls(DhcpClient())

    @classmethod
    def fixed(cls, settings: ClientSettings) -> "ClientConfiguration":
        """Return a fixed configuration using the given settings."""
        return cls(FixedClient(settings=settings))

    @property
    def is_dhcp(self) -> bool:
        """Return True if the client uses DHCP."""
        return isinstance(self.root, DhcpClient)

    @property
    def is_fixed(self) -> bool:
        """Return True if the client uses fixed settings."""
        return isinstance(self.root, FixedClient)

    def as_fixed_settings(self) -> ClientSettings | None:
        """Return the fixed settings, or None when using DHCP."""
        if isinstance(self.root, FixedClient):
            return self.root.settings
        return None

    def ensure_fixed_settings(self) -> ClientSettings:
        """Return the fixed settings for in-place editing.

        A DHCP configuration is first switched to fixed mode with
        ``ClientSettings.default()``. The returned object is the one held by
        this configuration, so changes to it are visible here.
        """
        if not isinstance(self.root, FixedClient):
            self.root = FixedClient(settings=ClientSettings.default())
        return self.root.settings

    def __str__(self) -> str:
        if isinstance(self.root, FixedClient):
            settings = self.root.settings
            return f"fixed {settings.ip} via {settings.subnet}"
        return "dhcp"
