"""Base controller class shared by the generation steps."""

from typing import TYPE_CHECKING, Generic, TypeVar

from rich.markup import escape


if TYPE_CHECKING:
    from rich.console import Console

    from .application import Application


AppT = TypeVar("AppT", bound="Application")


class BaseController(Generic[AppT]):  # noqa: UP046
    """Base class for controllers."""

    def __init__(self, app: AppT) -> None:
        self._app = app

    @property
    def app(self) -> AppT:
        return self._app

    @property
    def console(self) -> "Console":
        return self._app.console

    def note(self, message: str) -> None:
        """Print a diagnostic on stderr when running verbosely."""

        if self._app.verbose:
            self.console.print(f"[dim]{escape(message)}[/dim]", highlight=False)
