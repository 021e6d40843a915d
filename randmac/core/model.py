"""BaseModel with rich table display."""

from typing import Any

from pydantic import BaseModel
from rich.console import Console
from rich.table import Table
from rich.text import Text


class DisplayModel(BaseModel):
    def display(self, console: Console | None = None, title: str | None = None) -> None:
        """Display the serialized model as a two-column table."""

        if console is None:
            console = Console(stderr=True, emoji=False)

        table = Table(title=title or self.__class__.__name__, show_header=True)
        table.add_column("Field", style="cyan")
        table.add_column("Value", style="green")

        for field_name, field_value in self.model_dump(mode="json").items():
            if field_value is not None:
                # Text cells skip markup and emoji codes such as ":ab:"
                table.add_row(field_name, Text(self._format_value(field_value)))

        console.print(table)

    def _format_value(self, value: Any) -> str:
        """Format a value for display."""

        if isinstance(value, bool):
            return "yes" if value else "no"
        if isinstance(value, list):
            return " ".join(str(v) for v in value)
        return str(value)
