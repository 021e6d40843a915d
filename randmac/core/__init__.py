"""randmac core framework."""

from .application import Application
from .controller import BaseController
from .model import DisplayModel


__all__ = [
    "Application",
    "BaseController",
    "DisplayModel",
]
