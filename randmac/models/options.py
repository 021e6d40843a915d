from pathlib import Path

from pydantic import BaseModel, Field

from .common import DEFAULT_RANDOM_DEVICE, DEFAULT_REGISTRY, OuiSource


class GeneratorOptions(BaseModel):
    """Everything the command line can ask of a single run."""

    model_config = {"populate_by_name": True, "frozen": True}

    local: bool = False
    global_: bool = Field(default=False, alias="global")
    unicast: bool = False
    multicast: bool = False
    uppercase: bool = False
    eui64: bool = False

    oui: str | None = None
    # an empty vendor matches every registry row
    vendor: str | None = None

    registry: Path = DEFAULT_REGISTRY
    random_device: Path = DEFAULT_RANDOM_DEVICE

    @property
    def source(self) -> OuiSource:
        """Which resolution path applies; a vendor overrides an explicit OUI."""

        if self.vendor is not None:
            return "vendor"
        if self.oui is not None:
            return "explicit"
        return "random"
