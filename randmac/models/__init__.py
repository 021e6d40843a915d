"""Data models for randmac."""

from .address import AddressFormat, GeneratedAddress
from .common import DEFAULT_RANDOM_DEVICE, DEFAULT_REGISTRY, OuiSource
from .options import GeneratorOptions


__all__ = [
    "DEFAULT_RANDOM_DEVICE",
    "DEFAULT_REGISTRY",
    "AddressFormat",
    "GeneratedAddress",
    "GeneratorOptions",
    "OuiSource",
]
