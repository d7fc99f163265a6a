"""Subnet mask model."""

import re
from ipaddress import IPv4Address

from pydantic import ConfigDict, RootModel, StrictInt, field_validator

from device_netconfig.errors import (
    InvalidFormatError,
    NotAValidMaskError,
    OutOfRangeError,
)
from device_netconfig.models.ipv4 import parse_ipv4

MIN_PREFIX_LENGTH = 1
MAX_PREFIX_LENGTH = 32

_ALL_ONES = 0xFFFFFFFF
_DIGITS = re.compile(r"[0-9]+")


class Mask(RootModel[StrictInt]):
    """Subnet prefix length between 1 and 32.

    Serializes as a bare integer and is built only from integers (not bools
    or numeric text). Masks are immutable and compare by value.
    """

    model_config = ConfigDict(frozen=True)

    root: StrictInt

    @field_validator("root")
    @classmethod
    def validate_range(cls, v: int) -> int:
        """Validate that the prefix length is within [1, 32]."""
        if not MIN_PREFIX_LENGTH <= v <= MAX_PREFIX_LENGTH:
            raise OutOfRangeError(v)
        return v

    @classmethod
    def parse(cls, text: str) -> "Mask":
        """Parse a mask from its decimal text form (e.g., "24").

        Only ASCII digits are accepted: no sign and no surrounding whitespace.

        Args:
            text: Decimal prefix length

        Returns:
            The parsed mask

        Raises:
            InvalidFormatError: If text is not an unsigned integer
            OutOfRangeError: If the integer is outside [1, 32]
        """
        if not isinstance(text, str) or not _DIGITS.fullmatch(text):
            raise InvalidFormatError(text)

        digits = text.lstrip("0") or "0"
        if len(digits) > 2:
            raise OutOfRangeError(text)

        value = int(digits)
        if not MIN_PREFIX_LENGTH <= value <= MAX_PREFIX_LENGTH:
            raise OutOfRangeError(value)
        return cls(value)

    @classmethod
    def from_dotted_quad(cls, address: IPv4Address | str) -> "Mask":
        """Convert a dotted-quad netmask (e.g., 255.255.255.0) to a mask.

        The address must be contiguous one bits from the top followed only by
        zero bits.

        Args:
            address: Netmask as an address or its dotted-quad text

        Returns:
            Mask whose value is the number of leading one bits

        Raises:
            InvalidAddressFormatError: If text is not an IPv4 address
            NotAValidMaskError: If the bits are not a contiguous prefix
        """
        if not isinstance(address, IPv4Address):
            address = parse_ipv4(address)

        bits = int(address)
        leading_ones = MAX_PREFIX_LENGTH - (~bits & _ALL_ONES).bit_length()
        trailing_zeros = (bits & -bits).bit_length() - 1 if bits else MAX_PREFIX_LENGTH

        # 0.0.0.0 passes the bit test but has no valid prefix length
        if leading_ones + trailing_zeros != MAX_PREFIX_LENGTH or leading_ones < MIN_PREFIX_LENGTH:
            raise NotAValidMaskError(str(address))
        return cls(leading_ones)

    def to_dotted_quad(self) -> IPv4Address:
        """Render the mask as a four-octet address.

        The address is the 32-bit value ``1 << prefix_length`` read big-endian,
        so a /24 gives 1.0.0.0. For a /32 the result is truncated to 32 bits and
        gives 0.0.0.0; the shift count is not wrapped (that would give 0.0.0.1)
        and no error is raised. This is not the conventional netmask; use
        ``from_dotted_quad`` for netmask input.
        """
        return IPv4Address((1 << self.root) & _ALL_ONES)

    @property
    def prefix_length(self) -> int:
        """Return the prefix length."""
        return self.root

    def __int__(self) -> int:
        return self.root

    def __str__(self) -> str:
        return str(self.root)
