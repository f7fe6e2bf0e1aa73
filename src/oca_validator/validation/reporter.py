"""
Console reporter for validation results.

Formats validation results using Rich for clear, colored output.
"""

from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from oca_validator.schemas.table import AttributeTable
from oca_validator.validation.classifier import ABSENT, render_value
from oca_validator.validation.core import ValidationStatus


class ConsoleReporter:
    """Formats and displays validation results to the console."""

    def __init__(self, console: Console) -> None:
        """
        Initialize console reporter.

        Args:
            console: Rich Console instance for output.
        """
        self.console = console

    def print_status(self, status: ValidationStatus, data_path: Path | None = None) -> None:
        """
        Print a validation outcome.

        Args:
            status: Result of validating one record.
            data_path: Source of the record, shown in the header.
        """
        source = f" ({data_path})" if data_path is not None else ""

        if status.is_valid:
            self.console.print(f"[green]Data is valid{escape(source)}[/green]")
            return

        table = Table(title=f"Validation Errors{escape(source)}", show_header=True)
        table.add_column("Attribute", style="cyan", no_wrap=True)
        table.add_column("Rule", style="blue")
        table.add_column("Value", justify="right")
        table.add_column("Message", style="dim")

        for error in status.errors:
            value = "-" if error.value is ABSENT else render_value(error.value)
            table.add_row(
                escape(error.attribute),
                error.kind.rule,
                escape(value),
                escape(error.message),
            )

        self.console.print(table)
        self._print_summary(status)

    def print_setup_error(self, error: Exception) -> None:
        """
        Print a failure that prevented validation.

        Args:
            error: The raised setup error.
        """
        self.console.print(f"[red]Validation could not run: {escape(str(error))}[/red]")

    def print_attributes(self, table: AttributeTable) -> None:
        """
        Print an attribute table.

        Args:
            table: Attribute table to display.
        """
        output = Table(title="Schema Attributes", show_header=True)
        output.add_column("Attribute", style="cyan", no_wrap=True)
        output.add_column("Type", style="blue")
        output.add_column("Conformance", justify="center")
        output.add_column("Entry codes", style="dim")

        for attribute in table.attributes():
            output.add_row(
                escape(attribute.name),
                escape(str(attribute.attribute_type or "-")),
                "[bold]M[/bold]" if attribute.is_mandatory else escape(attribute.conformance or "-"),
                escape(str(attribute.entry_codes or "-")),
            )

        self.console.print(output)
        self.console.print(f"  Total attributes: {len(table)}")

    def _print_summary(self, status: ValidationStatus) -> None:
        """
        Print summary statistics.

        Args:
            status: Invalid validation outcome.
        """
        attributes = {error.attribute for error in status.errors}

        self.console.print()
        self.console.print("[bold]Summary:[/bold]")
        self.console.print(f"  [red]Errors: {len(status.errors)}[/red]")
        self.console.print(f"  Attributes affected: {len(attributes)}")
