from pathlib import Path
from typing import Annotated, Literal

from pydantic import Field


DEFAULT_REGISTRY = Path("/var/lib/ieee-data/oui.csv")
DEFAULT_RANDOM_DEVICE = Path("/dev/urandom")

OuiSource = Literal["random", "explicit", "vendor"]

Oui = Annotated[int, Field(ge=0, le=0xFFFFFF)]
Nic = Annotated[int, Field(ge=0, le=0xFFFFFF)]
