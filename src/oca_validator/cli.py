"""Command-line interface for the OCA data validator."""

import json
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape

app = typer.Typer(
    name="oca-validator",
    help="Validate JSON data records against OCA schema attribute tables.",
    no_args_is_help=True,
)

console = Console()

EXIT_INVALID = 1
EXIT_SETUP_ERROR = 2

SchemaOption = Annotated[
    Path,
    typer.Option(
        "--schema",
        "-s",
        help="Path to the resolved attribute table (JSON or YAML).",
        exists=True,
        dir_okay=False,
    ),
]


@app.command()
def validate(
    schema: SchemaOption,
    data: Annotated[
        Path,
        typer.Option(
            "--data",
            "-d",
            help="Path to the JSON data record.",
            exists=True,
            dir_okay=False,
        ),
    ],
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to configuration YAML file.",
            exists=True,
            dir_okay=False,
        ),
    ] = None,
    strict: Annotated[
        bool | None,
        typer.Option(
            "--strict/--no-strict",
            help="Validate array elements and nested objects. Overrides config.",
        ),
    ] = None,
    order: Annotated[
        str | None,
        typer.Option(
            "--order",
            help="Error order: 'declaration' or 'name'. Overrides config.",
        ),
    ] = None,
    json_output: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Print the result as JSON.",
        ),
    ] = False,
) -> None:
    """Validate a data record against a schema attribute table."""
    from oca_validator.config import ErrorOrder, load_settings
    from oca_validator.schemas import load_attribute_table
    from oca_validator.utils.logging import configure_logging, log_context
    from oca_validator.validation import ConsoleReporter, DataValidator

    reporter = ConsoleReporter(console)

    try:
        settings = load_settings(config)
    except ValueError as e:
        console.print(f"[red]Invalid configuration: {escape(str(e))}[/red]")
        raise typer.Exit(code=EXIT_SETUP_ERROR) from e

    configure_logging(settings.logging.level, settings.logging.json_output)

    overrides: dict[str, object] = {}
    if strict is not None:
        overrides["strict_nested"] = strict
    if order is not None:
        if order not in [o.value for o in ErrorOrder]:
            console.print(
                f"[red]Error: Invalid order '{escape(order)}'. Use 'declaration' or 'name'.[/red]"
            )
            raise typer.Exit(code=EXIT_SETUP_ERROR)
        overrides["error_order"] = ErrorOrder(order)
    validation_config = settings.validation.model_copy(update=overrides)

    with log_context(schema=str(schema), data=str(data)):
        try:
            table = load_attribute_table(schema)
            status = DataValidator(validation_config).validate_text(
                table, data.read_bytes()
            )
        except (FileNotFoundError, ValueError) as e:
            if json_output:
                typer.echo(json.dumps({"valid": False, "setup_error": str(e)}))
            else:
                reporter.print_setup_error(e)
            raise typer.Exit(code=EXIT_SETUP_ERROR) from e

    if json_output:
        typer.echo(json.dumps(status.to_dict(), ensure_ascii=False))
    else:
        reporter.print_status(status, data_path=data)

    if not status.is_valid:
        raise typer.Exit(code=EXIT_INVALID)


@app.command()
def inspect(schema: SchemaOption) -> None:
    """Show the attributes of a schema attribute table."""
    from oca_validator.schemas import load_attribute_table
    from oca_validator.validation import ConsoleReporter

    try:
        table = load_attribute_table(schema)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=EXIT_SETUP_ERROR) from e

    ConsoleReporter(console).print_attributes(table)


@app.command()
def version() -> None:
    """Show version information."""
    from oca_validator import __version__

    console.print(f"oca-validator version {__version__}")


if __name__ == "__main__":
    app()
