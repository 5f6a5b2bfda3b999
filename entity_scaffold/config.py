"""Entity scaffolding configuration.

Centralised, typed configuration for the generate-entity command.  All
settings use Pydantic v2 models so they can be validated at construction time
and serialised to/from JSON or environment variables without boiler-plate.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

from entity_scaffold.wizard.validators import MAPPING_FORMATS
from entity_scaffold.wizard.vocabulary import DEFAULT_STRING_LENGTH


class BundleConfig(BaseModel):
    """A bundle entities can be generated into."""

    name: str = Field(..., description="Bundle name used in shorthand, e.g. 'AcmeBlogBundle'")
    path: Path = Field(..., description="Bundle root directory")
    namespace: str = Field(..., description="PHP namespace, e.g. 'Acme\\BlogBundle'")

    @field_validator("namespace")
    @classmethod
    def _strip_separators(cls, value: str) -> str:
        return value.strip("\\")


class Config(BaseModel):
    """Global entity scaffolding configuration.

    Instances are typically created once by the CLI entry point and then
    passed to the command.
    """

    working_dir: Path = Field(default=Path("."))
    default_format: str = Field(default="annotation")
    default_string_length: int = Field(default=DEFAULT_STRING_LENGTH, ge=1)
    custom_types: list[str] = Field(
        default_factory=list, description="User-defined DBAL types accepted as field types"
    )
    reserved_words: list[str] = Field(
        default_factory=list, description="Extra words rejected as entity or field names"
    )
    known_entities: list[str] = Field(
        default_factory=list, description="Fully-qualified entity classes offered as targets"
    )
    bundles: list[BundleConfig] = Field(default_factory=list)

    @field_validator("default_format")
    @classmethod
    def _check_format(cls, value: str) -> str:
        value = value.lower()
        if value not in MAPPING_FORMATS:
            raise ValueError(f'Format "{value}" is not supported.')
        return value

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON.

        Relative bundle paths are resolved against the file's directory.
        """
        config_path = Path(path)
        raw = json.loads(config_path.read_text(encoding="utf-8"))
        config = cls.model_validate(raw)
        base = config_path.parent
        for bundle in config.bundles:
            if not bundle.path.is_absolute():
                bundle.path = base / bundle.path
        return config

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            ENTITY_SCAFFOLD_WORKING_DIR, ENTITY_SCAFFOLD_FORMAT,
            ENTITY_SCAFFOLD_STRING_LENGTH, ENTITY_SCAFFOLD_CUSTOM_TYPES,
            ENTITY_SCAFFOLD_RESERVED_WORDS (comma-separated lists).
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("ENTITY_SCAFFOLD_WORKING_DIR"):
            kwargs["working_dir"] = Path(os.environ["ENTITY_SCAFFOLD_WORKING_DIR"])
        if os.environ.get("ENTITY_SCAFFOLD_FORMAT"):
            kwargs["default_format"] = os.environ["ENTITY_SCAFFOLD_FORMAT"]
        if os.environ.get("ENTITY_SCAFFOLD_STRING_LENGTH"):
            kwargs["default_string_length"] = int(os.environ["ENTITY_SCAFFOLD_STRING_LENGTH"])

        kwargs["custom_types"] = _split_list(os.environ.get("ENTITY_SCAFFOLD_CUSTOM_TYPES", ""))
        kwargs["reserved_words"] = _split_list(
            os.environ.get("ENTITY_SCAFFOLD_RESERVED_WORDS", "")
        )
        return cls(**kwargs)


def _split_list(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]
