from pathlib import Path

from rich.console import Console
from rich.prompt import Confirm, Prompt
import typer

from readme_forge.client import get_controller
from readme_forge.commands.generate import deliver, generate_with_spinner, print_error
from readme_forge.controller import GenerationController
from readme_forge.errors import (
    GenerationFailed,
    IncompleteProject,
    MissingCredential,
    ReadmeForgeError,
)
from readme_forge.models import License

console = Console()


def _ask(label: str, default: str = "") -> str:
    return Prompt.ask(label, default=default, show_default=bool(default))


def _ask_api_key(controller: GenerationController) -> None:
    if controller.project.api_key:
        hint = "Groq API key [dim](blank keeps the saved key)[/dim]"
    else:
        hint = "Groq API key"
    value = Prompt.ask(hint, password=True, default="", show_default=False)
    if value:
        controller.update_field("api_key", value)


def _ask_basics(controller: GenerationController) -> None:
    project = controller.project
    controller.update_field("name", _ask("Project name", project.name))
    controller.update_field("description", _ask("Description", project.description))


def _ask_entries(controller: GenerationController, label: str, *, tech: bool) -> None:
    console.print(f"[bold]{label}[/bold] [dim](one per line, blank line to finish)[/dim]")
    while True:
        entry = _ask(" +")
        if not entry.strip():
            return
        if tech:
            controller.pending_tech = entry
            added = controller.add_tech_stack_entry()
        else:
            controller.pending_feature = entry
            added = controller.add_feature_entry()
        if not added:
            console.print(f"[yellow]Skipped duplicate:[/yellow] {entry.strip()}")


def _fill_form(controller: GenerationController) -> None:
    console.rule("Basic Information")
    _ask_basics(controller)
    controller.update_field("author", _ask("Author"))
    license_value = Prompt.ask(
        "License",
        choices=[item.value for item in License],
        default=License.MIT.value,
    )
    controller.update_field("license", License(license_value))

    console.rule("Tech Stack & Features")
    _ask_entries(controller, "Tech stack", tech=True)
    _ask_entries(controller, "Features", tech=False)

    console.rule("Links")
    controller.update_field("repository", _ask("Repository URL"))
    controller.update_field("live_demo", _ask("Live demo URL"))

    console.rule("Instructions")
    controller.update_field("installation", _ask("Installation"))
    controller.update_field("usage", _ask("Usage"))


def form(
    api_key: str | None = typer.Option(
        None, "--api-key", "-k", help="Groq API key (skips the key prompt)"
    ),
    output: Path | None = typer.Option(
        None, "--output", "-o", help="Directory to save README.md into"
    ),
    copy: bool = typer.Option(False, "--copy", help="Copy the README to the clipboard"),
    raw: bool = typer.Option(False, "--raw", help="Print plain markdown instead of rendering it"),
):
    """Fill in the project details interactively and generate a README.md."""
    controller = get_controller()

    if api_key:
        controller.update_field("api_key", api_key)
    else:
        _ask_api_key(controller)
    _fill_form(controller)

    while True:
        try:
            text = generate_with_spinner(controller)
            break
        except MissingCredential as e:
            print_error(e)
            _ask_api_key(controller)
        except IncompleteProject as e:
            print_error(e)
            _ask_basics(controller)
        except GenerationFailed as e:
            print_error(e)
            if not Confirm.ask("Try again?", default=True):
                raise typer.Exit(code=1) from None
        except ReadmeForgeError as e:
            print_error(e)
            raise typer.Exit(code=1) from None

    deliver(controller, text, output=output, copy=copy, raw=raw)
