"""Application singleton with dependency injection for controllers."""

from pathlib import Path
from typing import TYPE_CHECKING, Any, Self

from rich.console import Console

from ..controllers.address import AddressController
from ..controllers.prefix import PrefixController
from ..controllers.registry import RegistryController
from ..models.common import DEFAULT_RANDOM_DEVICE, DEFAULT_REGISTRY


if TYPE_CHECKING:
    from ..models.options import GeneratorOptions


class Application:
    """Main application."""

    _instance: Self | None = None

    def __init__(self) -> None:
        # stdout is reserved for the generated address
        self._console = Console(stderr=True, emoji=False)
        self._controllers: dict[str, Any] = {}

        self._registry_path: Path = DEFAULT_REGISTRY
        self._random_device: Path = DEFAULT_RANDOM_DEVICE
        self._verbose: bool = False

    @classmethod
    def current(cls) -> Self:
        """Get current application instance."""

        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset the singleton instance."""

        cls._instance = None

    @property
    def console(self) -> "Console":
        """Get rich console for diagnostics."""

        return self._console

    def configure(self, options: "GeneratorOptions") -> None:
        """Take file locations from the run options."""

        self.registry_path = options.registry
        self.random_device = options.random_device

    @property
    def registry_path(self) -> Path:
        return self._registry_path

    @registry_path.setter
    def registry_path(self, value: Path | str) -> None:
        self._registry_path = Path(value)

    @property
    def random_device(self) -> Path:
        return self._random_device

    @random_device.setter
    def random_device(self, value: Path | str) -> None:
        self._random_device = Path(value)

    @property
    def verbose(self) -> bool:
        """Get verbose mode flag."""

        return self._verbose

    @verbose.setter
    def verbose(self, value: bool) -> None:
        self._verbose = value

    @property
    def registry(self) -> RegistryController:
        """Get registry controller."""

        if "registry" not in self._controllers:
            self._controllers["registry"] = RegistryController(self)
        return self._controllers["registry"]

    @property
    def prefix(self) -> PrefixController:
        """Get prefix controller."""

        if "prefix" not in self._controllers:
            self._controllers["prefix"] = PrefixController(self)
        return self._controllers["prefix"]

    @property
    def address(self) -> AddressController:
        """Get address controller."""

        if "address" not in self._controllers:
            self._controllers["address"] = AddressController(self)
        return self._controllers["address"]
