"""deleteproject config — view and set global configuration."""

from __future__ import annotations

from typing import Optional

import typer
import yaml
from pydantic import ValidationError

from deleteproject.core.config import GlobalConfig


def config(
    key: Optional[str] = typer.Argument(None, help="Config key (e.g. backup)"),
    value: Optional[str] = typer.Argument(None, help="Value to set"),
) -> None:
    """View or set global deleteproject configuration.

    Examples:
      deleteproject config                   # show current config
      deleteproject config backup true       # set a value
      deleteproject config log_level INFO
    """
    try:
        cfg = GlobalConfig.load()
    except (ValidationError, yaml.YAMLError) as e:
        typer.echo(f"Invalid config: {e}", err=True)
        raise typer.Exit(1)

    # No arguments — print current config
    if key is None:
        data = cfg.model_dump()
        typer.echo(yaml.dump(data, default_flow_style=False, sort_keys=False).rstrip())
        return

    if key not in GlobalConfig.model_fields:
        typer.echo(f"Unknown key: {key}", err=True)
        raise typer.Exit(1)

    # Key without value — print that specific value
    if value is None:
        typer.echo(getattr(cfg, key))
        return

    try:
        setattr(cfg, key, value)
    except ValidationError as e:
        typer.echo(f"Invalid value for {key}: {e.errors()[0]['msg']}", err=True)
        raise typer.Exit(1)

    cfg.save()
    typer.echo(f"  {key} = {getattr(cfg, key)}")
