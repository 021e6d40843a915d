"""MAC address bit manipulation utilities."""

import random


OUI_MASK = 0xFFFFFF

LOCAL_BIT = 0x020000  # locally administered, bit 1 of the first octet
MULTICAST_BIT = 0x010000  # group address, bit 0 of the first octet

EUI64_FILLER = (0xFF, 0xFE)


def random_oui(rng: random.Random) -> int:
    """Draw a locally administered unicast OUI."""

    return (rng.getrandbits(24) & 0xFCFFFF) | LOCAL_BIT


def random_nic(rng: random.Random) -> int:
    """Draw the device-specific half of the address."""

    return rng.getrandbits(24)


def apply_flags(
    oui: int,
    *,
    local: bool = False,
    global_: bool = False,
    unicast: bool = False,
    multicast: bool = False,
    eui64: bool = False,
) -> int:
    """Override the administration and group bits of an OUI.

    Overrides are applied in a fixed order, so ``local`` beats ``global_`` and
    ``multicast`` beats ``unicast`` when both are requested. ``eui64`` flips
    the universal/local bit as the modified EUI-64 encoding requires.
    """

    oui &= OUI_MASK
    if global_:
        oui &= ~LOCAL_BIT
    if local:
        oui |= LOCAL_BIT
    if unicast:
        oui &= ~MULTICAST_BIT
    if multicast:
        oui |= MULTICAST_BIT
    if eui64:
        oui ^= LOCAL_BIT
    return oui & OUI_MASK


def split_octets(oui: int, nic: int, eui64: bool = False) -> tuple[int, ...]:
    """Lay out OUI and NIC as address octets, 6 or 8 of them."""

    head = ((oui >> 16) & 0xFF, (oui >> 8) & 0xFF, oui & 0xFF)
    tail = ((nic >> 16) & 0xFF, (nic >> 8) & 0xFF, nic & 0xFF)
    if eui64:
        return head + EUI64_FILLER + tail
    return head + tail
