import asyncio
from pathlib import Path

from rich.console import Console
from rich.markdown import Markdown
import typer

from readme_forge.client import get_controller
from readme_forge.controller import GenerationController
from readme_forge.errors import ReadmeForgeError
from readme_forge.models import GenerationResult, GenerationStatus, License

console = Console()
err_console = Console(stderr=True)


def print_error(error: ReadmeForgeError) -> None:
    err_console.print(f"[bold red]{error.title}:[/bold red] {error.message}")


def generate_with_spinner(controller: GenerationController) -> str:
    """Run one generation, showing a spinner while the request is in flight.

    Raises:
        ReadmeForgeError: Whatever the controller raised.
    """
    spinner = err_console.status("[bold]Generating README...[/bold]")

    def on_change(result: GenerationResult) -> None:
        if result.status is GenerationStatus.GENERATING:
            spinner.start()
        else:
            spinner.stop()

    unsubscribe = controller.subscribe(on_change)
    try:
        text = asyncio.run(controller.generate())
    finally:
        unsubscribe()
        spinner.stop()

    err_console.print("[bold green]✓ README Generated![/bold green]")
    return text


def deliver(
    controller: GenerationController,
    text: str,
    *,
    output: Path | None,
    copy: bool,
    raw: bool,
) -> None:
    """Save, copy and/or print the generated README."""
    if output is not None:
        document = controller.export_as_file()
        if document is not None:
            path = document.save(output)
            err_console.print(f"[bold green]✓ Downloaded![/bold green] Saved to [cyan]{path}[/cyan]")

    if copy:
        if controller.export_as_copy():
            err_console.print("[bold green]✓ Copied![/bold green] README content copied to clipboard")
        else:
            err_console.print("[yellow]Could not copy README to the clipboard[/yellow]")

    if raw:
        typer.echo(text)
    elif output is None:
        console.print(Markdown(text))


def generate(
    name: str | None = typer.Option(None, "--name", "-n", help="Project name"),
    description: str | None = typer.Option(
        None, "--description", "-d", help="What the project does"
    ),
    tech: list[str] | None = typer.Option(
        None, "--tech", "-t", help="Tech stack entry (repeatable)"
    ),
    feature: list[str] | None = typer.Option(
        None, "--feature", "-f", help="Key feature (repeatable)"
    ),
    installation: str | None = typer.Option(None, "--installation", help="Install steps"),
    usage: str | None = typer.Option(None, "--usage", help="How to use the project"),
    license: License = typer.Option(License.MIT, "--license", "-l", help="Project license"),
    author: str | None = typer.Option(None, "--author", "-a", help="Author name"),
    repository: str | None = typer.Option(None, "--repository", "-r", help="Repository URL"),
    live_demo: str | None = typer.Option(None, "--live-demo", help="Live demo URL"),
    api_key: str | None = typer.Option(
        None, "--api-key", "-k", help="Groq API key (saved for next time)"
    ),
    output: Path | None = typer.Option(
        None, "--output", "-o", help="Directory to save README.md into"
    ),
    copy: bool = typer.Option(False, "--copy", help="Copy the README to the clipboard"),
    raw: bool = typer.Option(False, "--raw", help="Print plain markdown instead of rendering it"),
):
    """Generate a README.md from command line options."""
    controller = get_controller()

    fields = {
        "name": name,
        "description": description,
        "installation": installation,
        "usage": usage,
        "license": license,
        "author": author,
        "repository": repository,
        "live_demo": live_demo,
        "api_key": api_key,
    }
    for field_name, value in fields.items():
        if value is not None:
            controller.update_field(field_name, value)
    for entry in tech or []:
        controller.add_tech_stack_entry(entry)
    for entry in feature or []:
        controller.add_feature_entry(entry)

    try:
        text = generate_with_spinner(controller)
    except ReadmeForgeError as e:
        print_error(e)
        raise typer.Exit(code=1) from None

    deliver(controller, text, output=output, copy=copy, raw=raw)
