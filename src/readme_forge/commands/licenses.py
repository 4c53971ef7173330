import json as json_lib

from rich.console import Console
from rich.table import Table
import typer

from readme_forge.models import License

console = Console()


def licenses(json_output: bool = typer.Option(False, "--json", help="Output as JSON")):
    """List the licenses a README can be generated for."""
    values = [item.value for item in License]

    if json_output:
        typer.echo(json_lib.dumps(values, indent=2))
        return

    table = Table(title="Licenses")
    table.add_column("License", style="cyan")
    table.add_column("Default", style="green")
    for value in values:
        table.add_row(value, "✓" if value == License.MIT.value else "")

    console.print(table)
