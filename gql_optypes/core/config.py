"""Synthesis configuration.

Keys may be given in snake_case or camelCase, so an existing codegen
``config:`` block can be reused as is:

    dialect: typescript
    addTypename: true
    typesPrefix: I
    scalars:
      Money: string
"""

import logging
from enum import Enum
from pathlib import Path
from typing import Any, cast

import yaml
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .naming import CaseFormat

log = logging.getLogger(__name__)


class Dialect(str, Enum):
    TYPESCRIPT = "typescript"
    FLOW = "flow"


class SynthesisConfig(BaseModel):
    """Options for one synthesis and printing run."""

    model_config = ConfigDict(
        extra="forbid",
        populate_by_name=True,
        alias_generator=to_camel,
        frozen=True,
    )

    dialect: Dialect = Dialect.TYPESCRIPT
    add_typename: bool = True
    types_prefix: str = ""
    fragment_suffix: str = "Fragment"
    naming_convention: CaseFormat = CaseFormat.PASCAL_CASE
    scalars: dict[str, str] = Field(default_factory=dict)
    emit_variables: bool = True
    # TypeScript
    avoid_optionals: bool = False
    immutable_types: bool = False
    # Flow
    use_flow_exact_objects: bool = False
    use_flow_read_only_types: bool = False


def load_config(config_path: Path | None) -> SynthesisConfig:
    """Load and validate a configuration from a YAML file.

    Args:
        config_path: Path to the YAML file, or None for defaults.

    Returns:
        A validated SynthesisConfig.

    Raises:
        OSError: If the file cannot be read.
        yaml.YAMLError: If the file is not valid YAML.
        TypeError: If the YAML root is not a mapping.
        ValidationError: If validation against SynthesisConfig fails.
    """
    if config_path is None:
        return SynthesisConfig()

    with Path(config_path).open("r", encoding="utf-8") as f:
        raw: Any = yaml.safe_load(f)

    log.debug("Loaded config from %s", config_path)

    # An empty file means defaults
    if raw is None or raw == {}:
        return SynthesisConfig()

    if not isinstance(raw, dict):
        raise TypeError(f"Config root must be a mapping (YAML object), got {type(raw).__name__}")

    return SynthesisConfig.model_validate(cast(dict[str, Any], raw))
