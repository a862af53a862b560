"""Global configuration parsed from ~/.deleteproject/config.yaml."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ConfigDict

from deleteproject.core.paths import get_home

CONFIG_FILE = "config.yaml"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class GlobalConfig(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    confirm: bool = True
    backup: bool = False
    log_level: LogLevel = "WARNING"

    @classmethod
    def load(cls, home: str | Path | None = None) -> GlobalConfig:
        path = Path(home or get_home()) / CONFIG_FILE
        if not path.exists():
            return cls()
        with open(path) as f:
            data = yaml.safe_load(f) or {}
        return cls.model_validate(data)

    def save(self, home: str | Path | None = None) -> Path:
        directory = Path(home or get_home())
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / CONFIG_FILE
        data = self.model_dump()
        with open(path, "w") as f:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False)
        return path
