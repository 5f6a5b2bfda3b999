"""Entity generator contract and the built-in manifest generator.

The command hands the collected specification to an ``EntityGenerator``.
Rendering entity classes and mapping files belongs to the host framework; the
:class:`ManifestGenerator` shipped here records the specification as a JSON
manifest so the command can run end to end on its own.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional, Protocol

from pydantic import BaseModel, Field

from entity_scaffold.config import BundleConfig
from entity_scaffold.utils import save_json


class GenerationResult(BaseModel):
    """Paths of the artifacts written for one entity."""

    entity_path: Path = Field(..., description="Generated entity class (or manifest)")
    repository_path: Optional[Path] = Field(default=None, description="Repository class")
    mapping_path: Optional[Path] = Field(
        default=None, description="Mapping file; absent for the annotation format"
    )


class EntityGenerator(Protocol):
    """What the command needs from an entity generator."""

    def generate(
        self,
        bundle: BundleConfig,
        entity: str,
        fmt: str,
        fields: list[dict[str, Any]],
    ) -> GenerationResult:
        ...

    def is_reserved_keyword(self, name: str) -> bool:
        ...


# ---------------------------------------------------------------------------
# Reserved keywords
# ---------------------------------------------------------------------------

# Words reserved by SQL:2003 that commonly collide with column/table names.
SQL_RESERVED_KEYWORDS: frozenset[str] = frozenset({
    "add", "all", "alter", "and", "any", "as", "asc", "between", "by",
    "case", "check", "column", "constraint", "create", "cross", "current",
    "current_date", "current_time", "current_timestamp", "current_user",
    "default", "delete", "desc", "distinct", "drop", "else", "end", "escape",
    "except", "exists", "false", "fetch", "for", "foreign", "from", "full",
    "grant", "group", "having", "in", "index", "inner", "insert", "intersect",
    "into", "is", "join", "key", "left", "like", "limit", "natural", "not",
    "null", "of", "offset", "on", "or", "order", "outer", "primary",
    "references", "right", "select", "session_user", "set", "some", "table",
    "then", "to", "true", "union", "unique", "update", "user", "using",
    "values", "when", "where", "with",
})


class ReservedKeywords:
    """Case-insensitive reserved word list."""

    def __init__(self, extra: Iterable[str] = ()) -> None:
        self._words = SQL_RESERVED_KEYWORDS | {w.lower() for w in extra}

    def is_keyword(self, word: str) -> bool:
        return word.lower() in self._words


# ---------------------------------------------------------------------------
# Manifest generator
# ---------------------------------------------------------------------------


class ManifestGenerator:
    """Writes the entity specification to ``Resources/config/scaffold/``.

    The manifest lands at ``<bundle>/Resources/config/scaffold/<Path>.json``
    and carries the entity class, mapping format and field list.
    """

    def __init__(self, reserved: ReservedKeywords | None = None) -> None:
        self.reserved = reserved or ReservedKeywords()

    def is_reserved_keyword(self, name: str) -> bool:
        return self.reserved.is_keyword(name)

    def manifest_path(self, bundle: BundleConfig, entity: str) -> Path:
        relative = entity.replace("\\", "/") + ".json"
        return bundle.path / "Resources" / "config" / "scaffold" / relative

    def generate(
        self,
        bundle: BundleConfig,
        entity: str,
        fmt: str,
        fields: list[dict[str, Any]],
    ) -> GenerationResult:
        manifest = {
            "bundle": bundle.name,
            "entity_class": f"{bundle.namespace}\\Entity\\{entity}",
            "format": fmt,
            "fields": fields,
            "generated_at": datetime.now(timezone.utc).isoformat(),
        }
        path = save_json(manifest, self.manifest_path(bundle, entity))
        return GenerationResult(entity_path=path)
