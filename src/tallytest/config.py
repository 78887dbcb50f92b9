from __future__ import annotations

from pathlib import Path

import yaml
from expandvars import expandvars
from pydantic import BaseModel, ConfigDict, field_validator

DEFAULT_MESSAGE = "Assertion failed."


class RunConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    logger_name: str = "tallytest"
    log_file: str | None = None
    verbose: bool = False
    default_message: str = DEFAULT_MESSAGE
    legacy_string_throws: bool = False

    @field_validator("log_file")
    @classmethod
    def expand_log_file(cls, v: str | None) -> str | None:
        """Expand ${VAR} references, failing on any unset variable without a default."""
        if v is None:
            return v
        try:
            return expandvars(v, nounset=True)
        except Exception as exc:
            raise ValueError(f"log_file '{v}' references an unset variable: {exc}")

    @field_validator("default_message")
    @classmethod
    def default_message_must_not_be_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("default_message must not be empty")
        return v


def load_config(path: Path) -> RunConfig:
    """Load and validate a run config from a YAML file."""
    config_dir = path.parent.resolve()

    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    config = RunConfig.model_validate(raw)

    # Resolve a relative log file against the config file location
    if config.log_file is not None:
        log_path = Path(config.log_file)
        if not log_path.is_absolute():
            config.log_file = str((config_dir / log_path).resolve())

    return config
