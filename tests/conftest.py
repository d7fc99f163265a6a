"""Pytest configuration and fixtures for device-netconfig tests."""

from typing import Any

import pytest


@pytest.fixture
def fixed_client_section() -> dict[str, Any]:
    """Structured form of a fixed client configuration.

    Returns:
        Dictionary suitable for ClientConfiguration.model_validate
    """
    return {
        "mode": "fixed",
        "settings": {
            "ip": "10.0.1.20",
            "subnet": {"gateway": "10.0.1.1", "mask": 24},
            "dns": "1.1.1.1",
            "secondary_dns": None,
        },
    }


@pytest.fixture
def router_section() -> dict[str, Any]:
    """Structured form of a router configuration.

    Returns:
        Dictionary suitable for RouterConfiguration.model_validate
    """
    return {
        "subnet": {"gateway": "172.16.0.1", "mask": 16},
        "dhcp_enabled": False,
        "dns": "9.9.9.9",
        "secondary_dns": None,
    }


@pytest.fixture
def settings_document(
    fixed_client_section: dict[str, Any], router_section: dict[str, Any]
) -> dict[str, Any]:
    """Full settings document with both sections.

    Args:
        fixed_client_section: Client section fixture
        router_section: Router section fixture

    Returns:
        Dictionary with client and router sections
    """
    return {"client": fixed_client_section, "router": router_section}
