import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

from oas2raml.config import get_config
from oas2raml.conversion import Converter
from oas2raml.diagnostics import DiagnosticSink
from oas2raml.emitter import RamlEmitter
from oas2raml.exceptions import Oas2RamlError
from oas2raml.loader import DocumentLoader

console = Console(stderr=True)
app = typer.Typer(
    name='oas2raml',
    help='Convert OpenAPI 3.x documents to RAML 1.0',
    no_args_is_help=True,
)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(message)s',
        handlers=[RichHandler(console=console, show_path=False, show_time=False)],
        force=True,
    )


def _print_summary(diagnostics: DiagnosticSink) -> None:
    if not len(diagnostics):
        console.print('[green]Converted without diagnostics.[/green]')
        return
    console.print(
        f'[yellow]{len(diagnostics.warnings)} warning(s)[/yellow], '
        f'[red]{len(diagnostics.errors)} error(s)[/red]'
    )


@app.command()
def convert(
    source: Annotated[
        str, typer.Argument(help='Path or URL of the OpenAPI document (YAML or JSON)')
    ],
    output: Annotated[
        str | None,
        typer.Option('--output', '-o', help='Output file, otherwise use stdout'),
    ] = None,
    verbose: Annotated[
        bool, typer.Option('--verbose', '-v', help='Verbose mode')
    ] = False,
    config: Annotated[
        str | None,
        typer.Option(
            '--config', '-c', help='Path to configuration file (YAML or JSON)'
        ),
    ] = None,
    strict: Annotated[
        bool, typer.Option('--strict', help='Fail when error diagnostics occur')
    ] = False,
    fail_on_warnings: Annotated[
        bool,
        typer.Option('--fail-on-warnings', help='Fail when any diagnostic occurs'),
    ] = False,
) -> None:
    """Convert an OpenAPI document to RAML.

    Examples:
        oas2raml convert openapi.yaml
        oas2raml convert openapi.yaml -o api.raml
        oas2raml convert https://api.example.com/openapi.json --strict
    """
    try:
        settings = get_config(config)
        _configure_logging(verbose or settings.verbose)

        document = DocumentLoader().load(source)
        result = Converter().convert(document)

        target = output or settings.output
        if target:
            RamlEmitter().write(result.document, target)
            console.print(f'[green]RAML written to[/green] {target}')
        else:
            typer.echo(result.to_raml(), nl=False)

    except Oas2RamlError as e:
        console.print(f'[red]Error:[/red] {e}')
        raise typer.Exit(1)

    _print_summary(result.diagnostics)

    if (strict or settings.strict) and result.diagnostics.has_errors:
        raise typer.Exit(1)
    if (fail_on_warnings or settings.fail_on_warnings) and len(result.diagnostics):
        raise typer.Exit(1)


@app.command()
def version() -> None:
    """Show the version of oas2raml."""
    from oas2raml import __version__

    console.print(f'oas2raml version: {__version__}')


if __name__ == '__main__':
    app()
