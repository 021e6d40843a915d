"""Custom Click paramtypes with shell completion support."""

from pathlib import Path

import click
from click.shell_completion import CompletionItem

from .errors import RandmacError


MAX_VENDOR_COMPLETIONS = 200


class RegistryFileType(click.ParamType):
    name = "registry_file"

    def shell_complete(self, ctx: click.Context, param: click.Parameter, incomplete: str) -> list[CompletionItem]:
        """Provide shell completion for registry CSV files."""

        path = Path(incomplete).expanduser() if incomplete else Path(".")
        parent = path.parent if path.name else path
        if not parent.exists():
            parent = Path(".")

        completions = []
        try:
            for item in parent.iterdir():
                if item.is_file() and item.suffix.lower() == ".csv":
                    name = item.name
                    if incomplete and not name.startswith(Path(incomplete).name):
                        continue
                    completions.append(CompletionItem(name))
                elif item.is_dir() and (not incomplete or item.name.startswith(Path(incomplete).name)):
                    completions.append(CompletionItem(f"{item.name}/"))
        except PermissionError:
            pass

        return completions

    def convert(self, value: str | Path, param: click.Parameter | None, ctx: click.Context | None) -> Path:
        """Expand the registry path; an unreadable file is reported when it is read."""

        return Path(value).expanduser()


class VendorNameType(click.ParamType):
    name = "vendor"

    def shell_complete(self, ctx: click.Context, param: click.Parameter, incomplete: str) -> list[CompletionItem]:
        """Complete organization names from the registry."""

        from .application import Application

        app = Application.current()
        registry = ctx.params.get("registry") if ctx else None
        if registry:
            app.registry_path = registry

        try:
            names = app.registry.vendors(incomplete)
        except RandmacError:
            return []

        return [CompletionItem(name) for name in names[:MAX_VENDOR_COMPLETIONS]]

    def convert(self, value: str, param: click.Parameter | None, ctx: click.Context | None) -> str:
        return value
