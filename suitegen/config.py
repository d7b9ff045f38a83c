"""Settings loaded from YAML and the environment."""

import os
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .agent.client import DEFAULT_MAX_TOKENS, DEFAULT_MODEL
from .agent.prompts import MANAGER_AGENT_ID
from .orchestration.progress import DEFAULT_INTERVAL
from .orchestration.state import Framework

DEFAULT_CONFIG_FILE = "suitegen.yaml"

# Environment variable -> setting
ENV_VARS = {
    "ANTHROPIC_API_KEY": "api_key",
    "SUITEGEN_MODEL": "model",
    "SUITEGEN_AGENT_ID": "agent_id",
}


class ConfigLoadError(Exception):
    """Raised when a settings file cannot be loaded."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message)


class Settings(BaseModel):
    """Runtime settings."""

    model_config = ConfigDict(extra="forbid")

    api_key: str | None = None
    model: str = DEFAULT_MODEL
    agent_id: str = MANAGER_AGENT_ID
    max_tokens: int = Field(default=DEFAULT_MAX_TOKENS, gt=0)
    progress_interval: float = Field(default=DEFAULT_INTERVAL, gt=0)
    default_branch: str = "main"
    default_framework: Framework = "auto"


def load_yaml(path: str | Path) -> dict:
    """Load a YAML settings file.

    Raises:
        ConfigLoadError: If the file cannot be read or parsed.
    """
    path = Path(path)

    if not path.is_file():
        raise ConfigLoadError(f"Settings file not found: {path}", str(path))

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigLoadError(f"Invalid YAML: {e}", str(path)) from e
    except OSError as e:
        raise ConfigLoadError(f"Cannot read file: {e}", str(path)) from e

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise ConfigLoadError(
            f"Expected YAML mapping at root, got {type(data).__name__}", str(path)
        )

    return data


def load_settings(
    path: str | Path | None = None,
    environ: dict[str, str] | None = None,
    **overrides,
) -> Settings:
    """Build settings from defaults, a YAML file, the environment and overrides.

    Later sources win. When path is None, suitegen.yaml in the working
    directory is used if it exists.

    Raises:
        ConfigLoadError: If the file is unreadable or the values are invalid.
    """
    data: dict = {}
    if path is not None:
        data.update(load_yaml(path))
    elif Path(DEFAULT_CONFIG_FILE).is_file():
        data.update(load_yaml(DEFAULT_CONFIG_FILE))

    environ = os.environ if environ is None else environ
    for var, key in ENV_VARS.items():
        if environ.get(var):
            data[key] = environ[var]

    data.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return Settings.model_validate(data)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(x) for x in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise ConfigLoadError(f"Invalid settings: {problems}", str(path) if path else None) from e
