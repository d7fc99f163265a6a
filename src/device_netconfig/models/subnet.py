"""Gateway/mask subnet model."""

from ipaddress import IPv4Address
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from device_netconfig.errors import InvalidSubnetFormatError
from device_netconfig.models.ipv4 import parse_ipv4
from device_netconfig.models.mask import Mask


def split_subnet(text: str) -> tuple[IPv4Address, Mask]:
    """Split ``"<gateway>/<mask>"`` text into its address and mask.

    Args:
        text: Subnet text (e.g., "192.168.1.1/24")

    Returns:
        Tuple of gateway address and mask

    Raises:
        InvalidSubnetFormatError: If text does not contain exactly one "/"
        InvalidAddressFormatError: If the gateway is not an IPv4 address
        InvalidFormatError: If the mask is not an unsigned integer
        OutOfRangeError: If the mask is outside [1, 32]
    """
    if not isinstance(text, str):
        raise InvalidSubnetFormatError(text)

    parts = text.split("/")
    if len(parts) != 2:
        raise InvalidSubnetFormatError(text)

    gateway_text, mask_text = parts
    return parse_ipv4(gateway_text), Mask.parse(mask_text)


class Subnet(BaseModel):
    """A gateway address paired with its mask.

    The gateway is not required to be the first address of the network.
    Renders and parses as "A.B.C.D/N".
    """

    model_config = ConfigDict(frozen=True)

    gateway: Annotated[IPv4Address, Field(description="Gateway address")]
    mask: Annotated[Mask, Field(description="Subnet prefix length")]

    @model_validator(mode="before")
    @classmethod
    def accept_text_form(cls, data: Any) -> Any:
        """Allow a subnet to be given as "A.B.C.D/N" text in structured input."""
        if isinstance(data, str):
            gateway, mask = split_subnet(data)
            return {"gateway": gateway, "mask": mask}
        return data

    @classmethod
    def parse(cls, text: str) -> "Subnet":
        """Parse a subnet from "A.B.C.D/N" text.

        Raises:
            InvalidSubnetFormatError: If text is not "<address>/<mask>"
            InvalidAddressFormatError: If the gateway is not an IPv4 address
            InvalidFormatError: If the mask is not an unsigned integer
            OutOfRangeError: If the mask is outside [1, 32]
        """
        gateway, mask = split_subnet(text)
        return cls(gateway=gateway, mask=mask)

    def __str__(self) -> str:
        return f"{self.gateway}/{self.mask}"
