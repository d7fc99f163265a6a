"""Pydantic models for device network configuration.

This module provides the value types for a device acting either as a DHCP
client or as a router: masks, subnets, and the client and router records.
"""

from device_netconfig.models.client import (
    ClientConfiguration,
    ClientSettings,
    DhcpClient,
    FixedClient,
)
from device_netconfig.models.ipv4 import parse_ipv4
from device_netconfig.models.mask import Mask
from device_netconfig.models.router import RouterConfiguration
from device_netconfig.models.subnet import Subnet

__all__ = [
    # client
    "ClientConfiguration",
    "ClientSettings",
    "DhcpClient",
    "FixedClient",
    # ipv4
    "parse_ipv4",
    # mask
    "Mask",
    # router
    "RouterConfiguration",
    # subnet
    "Subnet",
]
