import json
from pathlib import Path
from typing import Annotated

import typer
import yaml
from pydantic import ValidationError
from rich.console import Console

from swaggerkit.config import SwaggerConfig, get_config
from swaggerkit.exceptions import OutputError, SchemaValidationError, SwaggerKitError
from swaggerkit.loader import DocumentLoader, load_api
from swaggerkit.transform.swagger2 import SchemaViolation, swagger_json, validate_document

console = Console()
app = typer.Typer(
    name='swaggerkit',
    help='Generate Swagger 2.0 documents from Python API descriptions',
    no_args_is_help=True,
)


def dump_document(document: dict, output_format: str) -> str:
    if output_format == 'yaml':
        return yaml.safe_dump(document, sort_keys=False, allow_unicode=True)
    return json.dumps(document, indent=2, ensure_ascii=False) + '\n'


def write_document(document: dict, output: str, output_format: str) -> None:
    try:
        Path(output).write_text(dump_document(document, output_format), encoding='utf-8')
    except OSError as e:
        raise OutputError(output, cause=e)


def print_violations(violations: list[SchemaViolation]) -> None:
    console.print(f'[red]Found {len(violations)} violation(s):[/red]')
    for violation in violations:
        console.print(f'  - {violation}')


@app.command()
def generate(
    target: Annotated[
        str, typer.Argument(help="API surface to document, as 'package.module:attribute'")
    ],
    output: Annotated[
        str | None,
        typer.Option('--output', '-o', help='File to write; prints to stdout if omitted'),
    ] = None,
    config: Annotated[
        str | None,
        typer.Option('--config', '-c', help='Path to configuration file (YAML)'),
    ] = None,
    output_format: Annotated[
        str | None,
        typer.Option('--format', '-f', help='Output format: json or yaml'),
    ] = None,
    check: Annotated[
        bool | None,
        typer.Option('--validate/--no-validate', help='Validate the generated document'),
    ] = None,
) -> None:
    """Generate a Swagger document from an API surface.

    Examples:
        swaggerkit generate myapp.api:routes -o swagger.json
        swaggerkit generate myapp.api:routes --format yaml --validate
    """
    try:
        settings: SwaggerConfig = get_config(config)
        output_format = output_format or settings.output_format
        if output_format not in ('json', 'yaml'):
            raise typer.BadParameter(f'unknown format {output_format!r}', param_hint='--format')

        document = swagger_json(load_api(target), settings)

        if settings.validate_output if check is None else check:
            violations = validate_document(document)
            if violations:
                raise SchemaValidationError(target, [str(v) for v in violations])

        if output:
            write_document(document, output, output_format)
            console.print(f'[green]Wrote {output}[/green]')
        else:
            typer.echo(dump_document(document, output_format), nl=False)

    except (SwaggerKitError, ValidationError) as e:
        console.print(f'[red]Error:[/red] {e}')
        raise typer.Exit(1)


@app.command()
def validate(
    source: Annotated[str, typer.Argument(help='Path or URL of a Swagger document')],
) -> None:
    """Validate a Swagger 2.0 document."""
    try:
        document = DocumentLoader().load(source)
    except SwaggerKitError as e:
        console.print(f'[red]Error:[/red] {e}')
        raise typer.Exit(1)

    violations = validate_document(document)
    if violations:
        print_violations(violations)
        raise typer.Exit(1)
    console.print(f'[green]{source} is a valid Swagger 2.0 document[/green]')


@app.command()
def version() -> None:
    """Show the version of swaggerkit."""
    from swaggerkit import __version__

    console.print(f'swaggerkit version: {__version__}')


if __name__ == '__main__':
    app()
