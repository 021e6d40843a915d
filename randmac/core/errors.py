"""Errors raised while generating an address."""

from pathlib import Path

import click


EXIT_USAGE = 1
EXIT_FAILURE = 2


class RandmacError(click.ClickException):
    """Base class for fatal generation errors."""

    exit_code = EXIT_FAILURE


class OuiFormatError(RandmacError):
    """The explicit OUI string could not be parsed."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"Invalid OUI specification ({detail})")


class RegistryUnavailableError(RandmacError):
    def __init__(self, path: Path) -> None:
        super().__init__(f"Failed to open {path}. File possibly missing, try installing the ieee-data package.")
        self.path = path


class VendorNotFoundError(RandmacError):
    def __init__(self, vendor: str) -> None:
        super().__init__(f"Invalid vendor OUI: no registry entry starts with {vendor!r}")
        self.vendor = vendor


class EntropyUnavailableError(RandmacError):
    def __init__(self, device: Path, reason: str) -> None:
        super().__init__(f"Failed to {reason} {device}")
        self.device = device
