"""Auto-completion suggestions for entity class names."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

APPLY_REPLACEMENTS = True
NO_REPLACEMENTS = False


class EntitiesAutoCompleter:
    """Lists known entity classes, optionally in ``Alias:Path`` shorthand.

    Args:
        class_names: Fully-qualified entity class names.
        entity_namespaces: ``{alias: namespace}`` pairs used for shorthand
            rewriting, e.g. ``{"AcmeBlogBundle": "Acme\\BlogBundle\\Entity"}``.
    """

    def __init__(
        self,
        class_names: Iterable[str],
        entity_namespaces: Mapping[str, str] | None = None,
    ) -> None:
        self.class_names = list(dict.fromkeys(class_names))
        self.entity_namespaces = dict(entity_namespaces or {})

    def get_suggestions(self, apply_namespace_replacements: bool = APPLY_REPLACEMENTS) -> list[str]:
        if not apply_namespace_replacements:
            return list(self.class_names)
        replacements = self._replacements()
        return [_replace_prefix(name, replacements) for name in self.class_names]

    def _replacements(self) -> list[tuple[str, str]]:
        """``(namespace + "\\", alias + ":")`` pairs, longest prefix first."""
        pairs = [
            (namespace.rstrip("\\") + "\\", f"{alias}:")
            for alias, namespace in self.entity_namespaces.items()
        ]
        return sorted(pairs, key=lambda pair: (-len(pair[0]), pair[0]))


def _replace_prefix(name: str, replacements: list[tuple[str, str]]) -> str:
    for prefix, alias in replacements:
        if name.startswith(prefix):
            return alias + name[len(prefix):]
    return name
