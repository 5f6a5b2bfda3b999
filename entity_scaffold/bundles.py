"""Bundle registry: resolves bundle names to locations and lists entities.

Bundles come from configuration rather than discovery.  Each bundle owns an
``Entity/`` directory whose ``*.php`` files map onto classes under
``<namespace>\\Entity``.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from entity_scaffold.config import BundleConfig


class ScaffoldError(Exception):
    """Base class for errors raised by the entity scaffolding command."""


class BundleNotFoundError(ScaffoldError):
    """Raised when a shorthand refers to an unknown bundle."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f'Bundle "{name}" does not exist.')


class BundleRegistry:
    """Looks up configured bundles by name."""

    def __init__(self, bundles: Iterable[BundleConfig] = ()) -> None:
        self._bundles: dict[str, BundleConfig] = {b.name: b for b in bundles}

    def bundle_names(self) -> list[str]:
        return list(self._bundles)

    def get_bundle(self, name: str) -> BundleConfig:
        """Return the bundle called *name*.

        Raises:
            BundleNotFoundError: If no such bundle is configured.
        """
        try:
            return self._bundles[name]
        except KeyError:
            raise BundleNotFoundError(name) from None

    def entity_path(self, bundle: BundleConfig, entity: str) -> Path:
        """Where the class file of *entity* (``Blog\\Post``) lives in *bundle*."""
        return bundle.path / "Entity" / (entity.replace("\\", "/") + ".php")

    def entity_exists(self, bundle_name: str, entity: str) -> bool:
        return self.entity_path(self.get_bundle(bundle_name), entity).is_file()

    def entity_namespaces(self) -> dict[str, str]:
        """Alias -> entity namespace, e.g. ``AcmeBlogBundle -> Acme\\BlogBundle\\Entity``."""
        return {name: f"{b.namespace}\\Entity" for name, b in self._bundles.items()}

    def all_entity_class_names(self) -> list[str]:
        """Fully-qualified classes found under every bundle's ``Entity/`` tree."""
        names: list[str] = []
        for bundle in self._bundles.values():
            entity_dir = bundle.path / "Entity"
            if not entity_dir.is_dir():
                continue
            for php_file in sorted(entity_dir.rglob("*.php")):
                relative = php_file.relative_to(entity_dir).with_suffix("")
                names.append("\\".join([bundle.namespace, "Entity", *relative.parts]))
        return names
