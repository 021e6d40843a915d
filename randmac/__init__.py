"""randmac - random MAC and EUI-64 address generator."""

__version__ = "0.2.0"

from .core.application import Application
from .core.controller import BaseController
from .core.model import DisplayModel


__all__ = [
    "__version__",
    "Application",
    "BaseController",
    "DisplayModel",
]
