import random

import pytest

from randmac.controllers.prefix import PRESETS, parse_oui
from randmac.core.errors import OuiFormatError, VendorNotFoundError
from randmac.core.mac import LOCAL_BIT, MULTICAST_BIT
from randmac.models import GeneratorOptions


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("52:54:00", 0x525400),
        ("0:16:3e", 0x00163E),
        ("AC:DE:48", 0xACDE48),
        ("aa", 0x0000AA),
        ("1", 0x000001),
        ("ACDE48", 0xACDE48),
        ("qemu", 0x525400),
        ("QEMU", 0x525400),
        ("Xen", 0x00163E),
    ],
)
def test_parse_oui(value, expected):
    assert parse_oui(value) == expected


def test_qemu_preset_matches_colon_form():
    assert parse_oui("qemu") == parse_oui("52:54:00") == PRESETS["qemu"]


@pytest.mark.parametrize(
    ("value", "message"),
    [
        ("1234567", "got 7"),
        ("", "got 0"),
        ("12g4", "'g'"),
        ("0x12", "'x'"),
        ("52:54", "xx:xx:xx"),
        ("52:54:00:01", "xx:xx:xx"),
        ("525:4:00", "xx:xx:xx"),
        ("52::00", "xx:xx:xx"),
        ("zz:54:00", "xx:xx:xx"),
    ],
)
def test_parse_oui_rejects(value, message):
    with pytest.raises(OuiFormatError, match=message):
        parse_oui(value)


def test_resolve_random(app):
    rng = random.Random(7)
    oui = app.prefix.resolve(GeneratorOptions(), rng)
    assert oui & LOCAL_BIT
    assert not oui & MULTICAST_BIT


def test_resolve_explicit(app):
    assert app.prefix.resolve(GeneratorOptions(oui="aa"), random.Random(0)) == 0x0000AA


def test_vendor_overrides_explicit_oui(app):
    options = GeneratorOptions(oui="52:54:00", vendor="Acme")
    assert options.source == "vendor"
    assert app.prefix.resolve(options, random.Random(0)) == 0xACDE48


def test_resolve_unknown_vendor(app):
    with pytest.raises(VendorNotFoundError):
        app.prefix.resolve(GeneratorOptions(vendor="Nobody"), random.Random(0))
