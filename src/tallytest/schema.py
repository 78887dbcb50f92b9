"""JSON Schema for the run config YAML file, for editor validation."""

from __future__ import annotations

import json
from pathlib import Path

from tallytest.config import RunConfig

JSON_SCHEMA_DIALECT = "https://json-schema.org/draft/2020-12/schema"


def generate_json_schema() -> dict:
    """Return the JSON Schema describing a ``RunConfig`` YAML document."""
    schema = {"$schema": JSON_SCHEMA_DIALECT}
    schema.update(RunConfig.model_json_schema())
    schema.setdefault("description", "tallytest run configuration")
    return schema


def write_json_schema(path: Path) -> Path:
    """Write the config schema to *path* as indented JSON and return the path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(generate_json_schema(), indent=2) + "\n")
    return path
