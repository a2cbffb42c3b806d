import traceback
from typing import Annotated

import typer
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from elmapi.codegen.codegen import Codegen
from elmapi.config import create_default_config, get_config
from elmapi.exceptions import ElmAPIError
from elmapi.routes import RouteLoader

console = Console()
app = typer.Typer(
    name='elmapi',
    help='Generate Elm client code from endpoint declarations',
    no_args_is_help=True,
)


@app.command()
def generate(
    config: Annotated[
        str | None,
        typer.Option(
            '--config', '-c', help='Path to configuration file (YAML or JSON)'
        ),
    ] = None,
) -> None:
    """Generate Elm client code from configuration.

    If no config file is specified, will look for elmapi.yaml or a
    [tool.elmapi] table in pyproject.toml in the current directory.

    Examples:
        elmapi generate
        elmapi generate --config my-config.yaml
        elmapi generate -c config.json
    """
    try:
        codegen_config = get_config(config)

        for document_config in codegen_config.documents:
            with Progress(
                SpinnerColumn(),
                TextColumn('[progress.description]{task.description}'),
                console=console,
            ) as progress:
                task = progress.add_task(
                    f'Generating code for {document_config.source} in {document_config.output}...',
                    total=None,
                )

                codegen = Codegen(
                    document_config, options=codegen_config.to_options(document_config)
                )
                written = codegen.generate()

                progress.update(
                    task,
                    description=f'Code generation completed for {document_config.source}!',
                )
            console.print('[dim]Generated files:[/dim]')
            console.print(f'  - {written}')

        console.print('[green]Successfully generated code[/green]')

    except ElmAPIError as e:
        console.print(f'[red]Error:[/red] {e}')
        raise typer.Exit(1)
    except Exception as e:
        console.print(f'[red]Error:[/red] {str(e)}')
        traceback.print_exc()
        raise typer.Exit(1)


@app.command()
def init(
    path: Annotated[
        str, typer.Option('--path', '-p', help='Where to write the configuration file')
    ] = 'elmapi.yaml',
) -> None:
    """Create a starter configuration file."""
    try:
        written = create_default_config(path)
    except ElmAPIError as e:
        console.print(f'[red]Error:[/red] {e}')
        raise typer.Exit(1)

    console.print(f'[green]Created {written}[/green]')


@app.command()
def validate(
    source: Annotated[str, typer.Argument(help='Path or URL of a routes document')],
) -> None:
    """Validate a routes document and list its endpoints."""
    try:
        endpoints = RouteLoader().load_endpoints(source)
    except ElmAPIError as e:
        console.print(f'[red]Invalid:[/red] {e}')
        raise typer.Exit(1)

    table = Table(title=f'Endpoints in {source}')
    table.add_column('Function')
    table.add_column('Method')
    table.add_column('Path')
    for endpoint in endpoints:
        table.add_row(endpoint.function_name, endpoint.method, endpoint.path_template)

    console.print(table)
    console.print(f'[green]{len(endpoints)} endpoints are valid[/green]')


@app.command()
def version() -> None:
    """Show the version of elmapi."""
    from elmapi import __version__

    console.print(f'elmapi version: {__version__}')


if __name__ == '__main__':
    app()
