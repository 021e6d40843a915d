"""randmac CLI."""

from pathlib import Path

import click
import rich_click

from .core.application import Application
from .core.errors import EXIT_USAGE
from .core.paramtypes import RegistryFileType, VendorNameType
from .models import DEFAULT_REGISTRY, GeneratorOptions


# Configure rich-click
rich_click.rich_click.USE_RICH_MARKUP = True
rich_click.rich_click.SHOW_ARGUMENTS = True
rich_click.rich_click.GROUP_ARGUMENTS_OPTIONS = True
rich_click.rich_click.USE_MARKDOWN = False
rich_click.rich_click.STYLE_ERRORS_SUGGESTION = "dim italic"
rich_click.rich_click.MAX_WIDTH = 100

OUI_SOURCE_KEY = "randmac.oui"
OUI_SOURCES = ("oui", "qemu", "xen")


class RandmacCommand(rich_click.RichCommand):
    """Command whose usage errors print usage and exit with status 1.

    ``-o``, ``-q`` and ``-x`` all set the OUI; the last occurrence on the
    command line wins, even when an option is repeated.
    """

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        raw = list(args)
        try:
            rest = super().parse_args(ctx, args)
        except click.UsageError as e:
            self._echo_usage(ctx)
            e.exit_code = EXIT_USAGE
            # usage is already on stderr
            e.ctx = None
            raise

        if not ctx.resilient_parsing:
            self._pick_oui_source(ctx, raw)
        return rest

    def _pick_oui_source(self, ctx: click.Context, args: list[str]) -> None:
        opts, _, order = self.make_parser(ctx).parse_args(args=args)
        sources = [param.name for param in order if param.name in OUI_SOURCES]
        if not sources:
            return
        last = sources[-1]
        ctx.meta[OUI_SOURCE_KEY] = opts["oui"] if last == "oui" else last

    def _echo_usage(self, ctx: click.Context) -> None:
        formatter = click.HelpFormatter()
        click.Command.format_usage(self, ctx, formatter)
        click.echo(formatter.getvalue(), err=True, nl=False)
        click.echo(f"Try '{ctx.command_path} {ctx.help_option_names[0]}' for help.\n", err=True)


@click.command(cls=RandmacCommand, context_settings={"help_option_names": ["-h", "--help"]})
@click.option("-l", "--local", is_flag=True, help="Locally administered address.")
@click.option("-g", "--global", "global_", is_flag=True, help="Globally unique address.")
@click.option("-u", "--unicast", is_flag=True, help="Unicast address.")
@click.option("-m", "--multicast", is_flag=True, help="Multicast address.")
@click.option("-U", "--uppercase", is_flag=True, help="Print uppercase hex digits.")
@click.option("-e", "--eui64", is_flag=True, help="Generate a 64-bit EUI instead of a MAC address.")
@click.option(
    "-o",
    "--oui",
    metavar="OUI",
    expose_value=False,
    help="Set the OUI: xx:xx:xx, 1 to 6 hex digits, 'qemu' or 'xen'.",
)
@click.option(
    "-v",
    "--vendor",
    type=VendorNameType(),
    default=None,
    help="Set the OUI from a vendor name in the IEEE registry (case-sensitive prefix).",
)
@click.option(
    "-q",
    "--qemu",
    is_flag=True,
    expose_value=False,
    help="Use the QEMU OUI 52:54:00.",
)
@click.option(
    "-x",
    "--xen",
    is_flag=True,
    expose_value=False,
    help="Use the Xen OUI 00:16:3e.",
)
@click.option(
    "--registry",
    default=str(DEFAULT_REGISTRY),
    show_default=True,
    type=RegistryFileType(),
    help="IEEE OUI registry CSV used by --vendor.",
)
@click.option("--verbose", is_flag=True, help="Describe the generated address on stderr.")
@click.pass_context
def cli(
    ctx: click.Context,
    local: bool,
    global_: bool,
    unicast: bool,
    multicast: bool,
    uppercase: bool,
    eui64: bool,
    vendor: str | None,
    registry: Path,
    verbose: bool,
):
    """Generate a random MAC address.

    A vendor lookup takes priority over an explicit OUI. Without either, the
    OUI is random, locally administered and unicast.
    """

    options = GeneratorOptions(
        local=local,
        global_=global_,
        unicast=unicast,
        multicast=multicast,
        uppercase=uppercase,
        eui64=eui64,
        oui=ctx.meta.get(OUI_SOURCE_KEY),
        vendor=vendor,
        registry=registry,
    )

    app = Application.current()
    app.configure(options)
    app.verbose = verbose

    address = app.address.generate(options)
    click.echo(address.text)

    if app.verbose:
        address.display(app.console, title="randmac")


def main() -> None:
    cli(prog_name="randmac")
