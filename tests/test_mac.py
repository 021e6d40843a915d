import random

import pytest

from randmac.core.mac import LOCAL_BIT, MULTICAST_BIT, apply_flags, random_nic, random_oui, split_octets


def test_random_oui_is_local_unicast():
    rng = random.Random(1234)
    for _ in range(500):
        oui = random_oui(rng)
        assert 0 <= oui <= 0xFFFFFF
        assert oui & LOCAL_BIT
        assert not oui & MULTICAST_BIT


def test_random_nic_is_24_bits():
    rng = random.Random(99)
    assert all(0 <= random_nic(rng) <= 0xFFFFFF for _ in range(100))


@pytest.mark.parametrize(
    ("flags", "expected"),
    [
        ({}, 0x525400),
        ({"local": True}, 0x525400),
        ({"global_": True}, 0x505400),
        ({"multicast": True}, 0x535400),
        ({"unicast": True}, 0x525400),
        ({"eui64": True}, 0x505400),
        ({"global_": True, "eui64": True}, 0x525400),
        ({"local": True, "global_": True}, 0x525400),
        ({"unicast": True, "multicast": True}, 0x535400),
    ],
)
def test_apply_flags_qemu(flags, expected):
    assert apply_flags(0x525400, **flags) == expected


def test_apply_flags_on_universal_oui():
    assert apply_flags(0x00163E, local=True) == 0x02163E
    assert apply_flags(0x00163E, multicast=True) == 0x01163E
    assert apply_flags(0x03163E, global_=True, unicast=True) == 0x00163E
    assert apply_flags(0x00163E, eui64=True) == 0x02163E


def test_split_octets():
    assert split_octets(0x525400, 0x123456) == (0x52, 0x54, 0x00, 0x12, 0x34, 0x56)
    assert split_octets(0x525400, 0x123456, eui64=True) == (0x52, 0x54, 0x00, 0xFF, 0xFE, 0x12, 0x34, 0x56)
