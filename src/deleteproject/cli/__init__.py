"""deleteproject CLI powered by Typer."""

import typer
import yaml
from pydantic import ValidationError

from deleteproject.cli import ui
from deleteproject.cli.config import config
from deleteproject.cli.delete import delete
from deleteproject.cli.list_projects import list_cmd

app = typer.Typer(
    name="deleteproject",
    help="Remove projects from a Visual Studio solution and delete them from disk.",
    add_completion=False,
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """Remove projects from a Visual Studio solution and delete them from disk."""
    from deleteproject.core.config import GlobalConfig

    level = "DEBUG"
    if not verbose:
        try:
            level = GlobalConfig.load().log_level
        except (ValidationError, yaml.YAMLError, OSError):
            level = "WARNING"
    ui.setup_logging(level)


app.command()(delete)
app.command("list")(list_cmd)
app.command()(config)
