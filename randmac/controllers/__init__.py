"""randmac controllers."""

from .address import AddressController
from .prefix import PrefixController
from .registry import RegistryController


__all__ = [
    "AddressController",
    "PrefixController",
    "RegistryController",
]
