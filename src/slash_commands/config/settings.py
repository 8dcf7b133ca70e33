"""Configuration settings."""
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("~/.slash-commands/config.yaml")

ENV_PROJECT = "SLASH_COMMANDS_PROJECT"
ENV_LOG_LEVEL = "SLASH_COMMANDS_LOG_LEVEL"


@dataclass
class OutputConfig:
    """CLI output settings."""

    json: bool = False


@dataclass
class Config:
    """Main configuration."""

    project_path: str | None = None
    log_level: str = "WARNING"
    output: OutputConfig = field(default_factory=OutputConfig)


def load_config(path: Path | str | None = None) -> Config:
    """Load configuration from YAML file, then apply environment overrides."""
    load_dotenv()

    if path is None:
        path = DEFAULT_CONFIG_PATH.expanduser()
    else:
        path = Path(path)

    data: dict[str, Any] = {}
    if path.exists():
        with open(path) as f:
            data = yaml.safe_load(f) or {}
        logger.debug(f"Loaded config from {path}")

    config = _parse_config(data)
    _apply_env(config)
    return config


def _parse_config(data: dict[str, Any]) -> Config:
    """Parse config dictionary into Config object."""
    config = Config(log_level=str(data.get("log_level", "WARNING")).upper())

    if data.get("project_path"):
        config.project_path = str(Path(data["project_path"]).expanduser())

    if "output" in data:
        config.output = OutputConfig(json=bool(data["output"].get("json", False)))

    return config


def _apply_env(config: Config) -> None:
    """Environment variables override values from the YAML file."""
    if project := os.getenv(ENV_PROJECT):
        config.project_path = str(Path(project).expanduser())
    if level := os.getenv(ENV_LOG_LEVEL):
        config.log_level = level.upper()
