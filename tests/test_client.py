"""Tests for client configuration models."""

from ipaddress import IPv4Address
from typing import Any

import pytest
from pydantic import ValidationError

from device_netconfig.models import (
    ClientConfiguration,
    ClientSettings,
    DhcpClient,
    FixedClient,
    Mask,
    Subnet,
)


class TestClientSettings:
    """Tests for ClientSettings model."""

    def test_default(self) -> None:
        """Test the factory default settings."""
        settings = ClientSettings.default()
        assert settings.ip == IPv4Address("192.168.71.200")
        assert settings.subnet == Subnet(gateway=IPv4Address("192.168.71.1"), mask=Mask(24))
        assert settings.dns == IPv4Address("8.8.8.8")
        assert settings.secondary_dns == IPv4Address("8.8.4.4")

    def test_dns_optional(self) -> None:
        """Test that DNS servers may be absent."""
        settings = ClientSettings.model_validate(
            {"ip": "10.0.0.5", "subnet": {"gateway": "10.0.0.1", "mask": 24}}
        )
        assert settings.dns is None
        assert settings.secondary_dns is None

    def test_required_fields(self) -> None:
        """Test that ip and subnet are required."""
        with pytest.raises(ValidationError):
            ClientSettings.model_validate({"subnet": "10.0.0.1/24"})
        with pytest.raises(ValidationError):
            ClientSettings.model_validate({"ip": "10.0.0.5"})

    def test_invalid_ip(self) -> None:
        """Test that an invalid address is rejected."""
        with pytest.raises(ValidationError):
            ClientSettings.model_validate({"ip": "10.0.0.500", "subnet": "10.0.0.1/24"})

    def test_assignment_is_validated(self) -> None:
        """Test that edited fields are converted and checked."""
        settings = ClientSettings.default()
        settings.ip = "10.0.0.9"  # type: ignore[assignment]
        assert settings.ip == IPv4Address("10.0.0.9")

        with pytest.raises(ValidationError):
            settings.dns = "not-an-ip"  # type: ignore[assignment]

    def test_copy_is_independent(self) -> None:
        """Test that a copy does not share state with the original."""
        settings = ClientSettings.default()
        copied = settings.model_copy(deep=True)
        copied.dns = None
        assert settings.dns == IPv4Address("8.8.8.8")

    def test_model_dump(self) -> None:
        """Test the JSON-compatible form of the defaults."""
        assert ClientSettings.default().model_dump(mode="json") == {
            "ip": "192.168.71.200",
            "subnet": {"gateway": "192.168.71.1", "mask": 24},
            "dns": "8.8.8.8",
            "secondary_dns": "8.8.4.4",
        }


class TestClientConfiguration:
    """Tests for ClientConfiguration model."""

    def test_default_is_dhcp(self) -> None:
        """Test that the default configuration is DHCP."""
        config = ClientConfiguration.default()
        assert config.is_dhcp
        assert not config.is_fixed
        assert config == ClientConfiguration.dhcp()
        assert ClientConfiguration() == config
        assert isinstance(config.root, DhcpClient)

    def test_fixed(self) -> None:
        """Test building a fixed configuration."""
        settings = ClientSettings.default()
        config = ClientConfiguration.fixed(settings)
        assert config.is_fixed
        assert isinstance(config.root, FixedClient)
        assert config.as_fixed_settings() == settings

    def test_as_fixed_settings_dhcp(self) -> None:
        """Test that DHCP has no fixed settings and is left unchanged."""
        config = ClientConfiguration.dhcp()
        assert config.as_fixed_settings() is None
        assert config.is_dhcp

    def test_ensure_fixed_settings_from_dhcp(self) -> None:
        """Test that DHCP switches to fixed default settings."""
        config = ClientConfiguration.dhcp()
        settings = config.ensure_fixed_settings()
        assert settings == ClientSettings.default()
        assert config.is_fixed
        assert config.as_fixed_settings() is settings

    def test_ensure_fixed_settings_keeps_existing(self) -> None:
        """Test that existing fixed settings are returned untouched."""
        settings = ClientSettings.default()
        settings.ip = IPv4Address("192.168.71.50")
        config = ClientConfiguration.fixed(settings)

        returned = config.ensure_fixed_settings()
        assert returned.ip == IPv4Address("192.168.71.50")
        assert config.ensure_fixed_settings() is returned

    def test_edits_through_accessor_are_visible(self) -> None:
        """Test that edits to the returned settings change the configuration."""
        config = ClientConfiguration.dhcp()
        config.ensure_fixed_settings().dns = None
        config.ensure_fixed_settings().subnet = Subnet.parse("10.0.0.1/16")

        settings = config.as_fixed_settings()
        assert settings is not None
        assert settings.dns is None
        assert str(settings.subnet) == "10.0.0.1/16"

    def test_str(self) -> None:
        """Test the human-readable summary."""
        assert str(ClientConfiguration.dhcp()) == "dhcp"
        fixed = ClientConfiguration.fixed(ClientSettings.default())
        assert str(fixed) == "fixed 192.168.71.200 via 192.168.71.1/24"


class TestClientConfigurationStructured:
    """Tests for structured validation of ClientConfiguration."""

    def test_dhcp_round_trip(self) -> None:
        """Test the DHCP structured form."""
        config = ClientConfiguration.dhcp()
        assert config.model_dump(mode="json") == {"mode": "dhcp"}
        assert ClientConfiguration.model_validate({"mode": "dhcp"}) == config

    def test_fixed_from_dict(self, fixed_client_section: dict[str, Any]) -> None:
        """Test validating a fixed configuration."""
        config = ClientConfiguration.model_validate(fixed_client_section)
        settings = config.as_fixed_settings()
        assert settings is not None
        assert settings.ip == IPv4Address("10.0.1.20")
        assert settings.subnet.mask == Mask(24)
        assert settings.dns == IPv4Address("1.1.1.1")
        assert settings.secondary_dns is None
        assert config.model_dump(mode="json") == fixed_client_section

    def test_json_round_trip(self) -> None:
        """Test JSON text serialization."""
        config = ClientConfiguration.fixed(ClientSettings.default())
        assert ClientConfiguration.model_validate_json(config.model_dump_json()) == config

    def test_unknown_mode_rejected(self) -> None:
        """Test that an unknown mode fails validation."""
        with pytest.raises(ValidationError):
            ClientConfiguration.model_validate({"mode": "static"})

    def test_fixed_requires_settings(self) -> None:
        """Test that fixed mode requires settings."""
        with pytest.raises(ValidationError):
            ClientConfiguration.model_validate({"mode": "fixed"})
