"""Network configuration value types for DHCP client and router devices."""

from ipaddress import IPv4Address

from device_netconfig.errors import (
    InvalidAddressFormatError,
    InvalidFormatError,
    InvalidSubnetFormatError,
    NetworkConfigError,
    NotAValidMaskError,
    OutOfRangeError,
)
from device_netconfig.models import (
    ClientConfiguration,
    ClientSettings,
    Mask,
    RouterConfiguration,
    Subnet,
)
from device_netconfig.parser import NetworkSettings, SettingsParser, parse_settings

__version__ = "0.1.0"

__all__ = [
    "ClientConfiguration",
    "ClientSettings",
    "IPv4Address",
    "InvalidAddressFormatError",
    "InvalidFormatError",
    "InvalidSubnetFormatError",
    "Mask",
    "NetworkConfigError",
    "NetworkSettings",
    "NotAValidMaskError",
    "OutOfRangeError",
    "RouterConfiguration",
    "SettingsParser",
    "Subnet",
    "parse_settings",
    "__version__",
]
