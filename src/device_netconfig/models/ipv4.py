"""IPv4 address parsing shared by the network models."""

from ipaddress import AddressValueError, IPv4Address

from device_netconfig.errors import InvalidAddressFormatError

DEFAULT_GATEWAY = IPv4Address("192.168.71.1")
DEFAULT_CLIENT_IP = IPv4Address("192.168.71.200")
DEFAULT_MASK = 24
DEFAULT_DNS = IPv4Address("8.8.8.8")
DEFAULT_SECONDARY_DNS = IPv4Address("8.8.4.4")


def parse_ipv4(text: str) -> IPv4Address:
    """Parse a dotted-quad IPv4 address.

    Args:
        text: Address text (e.g., "192.168.1.1")

    Returns:
        The parsed address

    Raises:
        InvalidAddressFormatError: If text is not a dotted-quad IPv4 address
    """
    if not isinstance(text, str):
        raise InvalidAddressFormatError(text)
    try:
        return IPv4Address(text)
    except AddressValueError as e:
        raise InvalidAddressFormatError(text) from e
