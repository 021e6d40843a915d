"""Prefix controller resolving the organizational half of an address."""

import random
import string
from typing import TYPE_CHECKING

from ..core.controller import BaseController
from ..core.errors import OuiFormatError
from ..core.mac import random_oui


if TYPE_CHECKING:
    from ..core.application import Application
    from ..models.options import GeneratorOptions


PRESETS: dict[str, int] = {
    "qemu": 0x525400,
    "xen": 0x00163E,
}

MAX_OUI_DIGITS = 6


def parse_oui(value: str) -> int:
    """Parse an explicit OUI.

    Accepts ``xx:xx:xx``, a preset name from :data:`PRESETS` (any case) or
    one to six hex digits.
    """

    if ":" in value:
        parts = value.split(":")
        if len(parts) != 3 or not all(_is_hex(p) and len(p) <= 2 for p in parts):
            raise OuiFormatError("expected OUI in the form xx:xx:xx")
        return (int(parts[0], 16) << 16) | (int(parts[1], 16) << 8) | int(parts[2], 16)

    preset = PRESETS.get(value.lower())
    if preset is not None:
        return preset

    if not 1 <= len(value) <= MAX_OUI_DIGITS:
        raise OuiFormatError(f"expected between 1 and {MAX_OUI_DIGITS} hex digits, got {len(value)}")
    for char in value:
        if char not in string.hexdigits:
            raise OuiFormatError(f"aborted at {char!r} due to invalid character")
    return int(value, 16)


def _is_hex(s: str) -> bool:
    return bool(s) and all(c in string.hexdigits for c in s)


class PrefixController(BaseController["Application"]):
    """Controller choosing the OUI for a run.

    A vendor name takes priority over an explicit OUI; with neither, a random
    locally administered unicast OUI is drawn.
    """

    def resolve(self, options: "GeneratorOptions", rng: random.Random) -> int:
        """Return the 24-bit OUI before any flag overrides."""

        self.note(f"OUI source: {options.source}")
        match options.source:
            case "vendor":
                return self.app.registry.lookup(options.vendor, rng)
            case "explicit":
                return parse_oui(options.oui)
            case _:
                return random_oui(rng)
