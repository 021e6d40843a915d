"""Address controller assembling complete addresses."""

import random
from typing import TYPE_CHECKING

from ..core.controller import BaseController
from ..core.entropy import make_rng
from ..core.mac import apply_flags, random_nic
from ..models.address import AddressFormat, GeneratedAddress


if TYPE_CHECKING:
    from ..core.application import Application
    from ..models.options import GeneratorOptions


class AddressController(BaseController["Application"]):
    """Controller for the generation pipeline: seed, prefix, NIC, flags, format."""

    def generate(self, options: "GeneratorOptions", rng: random.Random | None = None) -> GeneratedAddress:
        """Generate one address.

        Without an explicit ``rng`` a fresh generator is seeded from the
        application's random device.
        """

        if rng is None:
            rng = make_rng(self.app.random_device)

        oui = self.app.prefix.resolve(options, rng)
        nic = random_nic(rng)

        return self.assemble(options, oui, nic)

    def assemble(self, options: "GeneratorOptions", oui: int, nic: int) -> GeneratedAddress:
        """Apply the flag overrides and pick the output format."""

        return GeneratedAddress(
            source=options.source,
            oui=apply_flags(
                oui,
                local=options.local,
                global_=options.global_,
                unicast=options.unicast,
                multicast=options.multicast,
                eui64=options.eui64,
            ),
            nic=nic,
            format=AddressFormat.select(options.eui64, options.uppercase),
        )
