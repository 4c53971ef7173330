import typer

from readme_forge.commands import form, generate, licenses
from readme_forge.config import get_settings
from readme_forge.logging import setup_logging

app = typer.Typer(
    name="readme-forge",
    help="Generate professional README.md files with AI",
    add_completion=False,
)

app.command()(generate.generate)
app.command()(form.form)
app.command()(licenses.licenses)


@app.callback()
def callback():
    """
    readme-forge: fill in your project details and let AI write the README.
    """
    settings = get_settings()
    setup_logging(log_format=settings.log_format, log_level=settings.log_level)


if __name__ == "__main__":
    app()
