from enum import Enum

from pydantic import computed_field, field_serializer

from ..core.mac import split_octets
from ..core.model import DisplayModel
from .common import Nic, Oui, OuiSource


class AddressFormat(Enum):
    """Output templates, each rendering the six generated octets."""

    STANDARD_LOWER = "{0:02x}:{1:02x}:{2:02x}:{3:02x}:{4:02x}:{5:02x}"
    STANDARD_UPPER = "{0:02X}:{1:02X}:{2:02X}:{3:02X}:{4:02X}:{5:02X}"
    EUI64_LOWER = "{0:02x}:{1:02x}:{2:02x}:ff:fe:{3:02x}:{4:02x}:{5:02x}"
    EUI64_UPPER = "{0:02X}:{1:02X}:{2:02X}:FF:FE:{3:02X}:{4:02X}:{5:02X}"

    @classmethod
    def select(cls, eui64: bool, uppercase: bool) -> "AddressFormat":
        return _FORMATS[(eui64, uppercase)]

    @property
    def eui64(self) -> bool:
        return self in (AddressFormat.EUI64_LOWER, AddressFormat.EUI64_UPPER)

    def render(self, octets: tuple[int, ...]) -> str:
        return self.value.format(*octets)


_FORMATS: dict[tuple[bool, bool], AddressFormat] = {
    (False, False): AddressFormat.STANDARD_LOWER,
    (False, True): AddressFormat.STANDARD_UPPER,
    (True, False): AddressFormat.EUI64_LOWER,
    (True, True): AddressFormat.EUI64_UPPER,
}


class GeneratedAddress(DisplayModel):
    """A finished address: flag-adjusted OUI, NIC and the chosen format."""

    model_config = {"frozen": True}

    source: OuiSource
    oui: Oui
    nic: Nic
    format: AddressFormat

    @field_serializer("oui", "nic")
    def _hex24(self, value: int) -> str:
        return f"{value:06x}"

    @field_serializer("format")
    def _format_name(self, value: AddressFormat) -> str:
        return value.name.lower()

    @property
    def octets(self) -> tuple[int, ...]:
        """Address octets; EUI-64 addresses carry ff:fe in the middle."""

        return split_octets(self.oui, self.nic, eui64=self.format.eui64)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def text(self) -> str:
        return self.format.render(split_octets(self.oui, self.nic))
