"""Normalizer configuration: a Pydantic model plus file loading.

A :class:`NormalizerConfig` bundles the settings that
:func:`~swagnorm.normalizer.transform.normalize_document` forwards to the
engine: how interfaces are named, which origin namespace qualifies
references, and the :class:`~swagnorm.normalizer.modules.TagPolicy` for the
document dialect. It can be built in code or read from a JSON/YAML file with
:func:`load_config`::

    # swagnorm.yaml
    using_operation_id: false
    origin_name: petstore
    tag_policy:
      swap_non_latin_names: false
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Union

import yaml
from pydantic import BaseModel, Field, ValidationError

from swagnorm.exceptions import ConfigError
from swagnorm.normalizer.modules import TagPolicy


class NormalizerConfig(BaseModel):
    """Settings for one normalizer run."""

    using_operation_id: bool = Field(
        default=True,
        description="Name interfaces after operationId instead of method + URL",
    )
    origin_name: str = Field(
        default="", description="Namespace label used to qualify references"
    )
    tag_policy: TagPolicy = Field(default_factory=TagPolicy)


def load_config(path: Union[str, Path]) -> NormalizerConfig:
    """Load and validate a :class:`NormalizerConfig` from a JSON or YAML file.

    Files ending in ``.json`` are read as JSON, anything else as YAML.

    Args:
        path: Path to the configuration file.

    Returns:
        The validated configuration.

    Raises:
        ConfigError: If the file does not exist, cannot be parsed, or fails
            Pydantic validation.
    """
    config_path = Path(path)
    if not config_path.is_file():
        raise ConfigError(f"Config file not found: {config_path}")

    try:
        text = config_path.read_text(encoding="utf-8")
        if config_path.suffix.lower() == ".json":
            data = json.loads(text)
        else:
            data = yaml.safe_load(text)
        return NormalizerConfig.model_validate(data or {})
    except (OSError, json.JSONDecodeError, yaml.YAMLError, ValidationError) as exc:
        raise ConfigError(f"Invalid config at {config_path}: {exc}") from exc


def save_config(config: NormalizerConfig, path: Union[str, Path]) -> None:
    """Write *config* to *path* as indented JSON."""
    data = config.model_dump(mode="json")
    Path(path).write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
