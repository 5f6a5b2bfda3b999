"""Generate a new Doctrine entity inside a bundle.

Drives the entity scaffolding flow: ask (or read) the entity shorthand, the
mapping format and the fields, then hand the specification to an entity
generator and report what was written.

Usage::

    python -m entity_scaffold.command --entity=AcmeBlogBundle:Blog/Post
    python -m entity_scaffold.command --entity=AcmeBlogBundle:Blog/Post \\
        --fields="title:string(255) body:text" --format=yml --no-interaction
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field

from entity_scaffold.autocomplete import NO_REPLACEMENTS, EntitiesAutoCompleter
from entity_scaffold.bundles import BundleNotFoundError, BundleRegistry, ScaffoldError
from entity_scaffold.config import Config
from entity_scaffold.generator import (
    EntityGenerator,
    GenerationResult,
    ManifestGenerator,
    ReservedKeywords,
)
from entity_scaffold.utils import (
    console,
    make_path_relative,
    print_error,
    print_summary_table,
    print_warning,
    write_generator_summary,
    write_section,
)
from entity_scaffold.wizard import (
    ConsoleSession,
    FieldWizard,
    InteractiveSession,
    InvalidInputError,
    Question,
    TypeRegistry,
    fields_to_payload,
    parse_fields,
)
from entity_scaffold.wizard.session import ask
from entity_scaffold.wizard.validators import (
    MAPPING_FORMATS,
    parse_shortcut_notation,
    validate_entity_name,
    validate_format,
)

# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class EntityExistsError(ScaffoldError):
    """Raised when the target entity class file is already present."""

    def __init__(self, bundle: str, entity: str) -> None:
        self.bundle = bundle
        self.entity = entity
        super().__init__(f'Entity "{bundle}:{entity}" already exists.')


# ---------------------------------------------------------------------------
# Options
# ---------------------------------------------------------------------------


class EntityOptions(BaseModel):
    """Command options, as given on the command line or filled in by interaction."""

    entity: Optional[str] = Field(default=None, description="Shorthand, e.g. 'AcmeBlogBundle:Post'")
    fields: Any = Field(default=None, description="Compact field list or collected mapping")
    format: str = Field(default="annotation", description="yml, xml, php or annotation")


# ---------------------------------------------------------------------------
# Command
# ---------------------------------------------------------------------------


class GenerateEntityCommand:
    """The ``generate:doctrine:entity`` command.

    Attributes:
        config: Scaffolding configuration.
        generator: Receives the final specification.
        bundles: Resolves bundle names from the shorthand.
        session: Answers questions during interaction.
        autocompleter: Suggests relation targets.
    """

    name = "doctrine:generate:entity"
    aliases = ("generate:doctrine:entity",)

    def __init__(
        self,
        config: Config,
        generator: EntityGenerator,
        bundles: BundleRegistry | None = None,
        session: InteractiveSession | None = None,
        autocompleter: EntitiesAutoCompleter | None = None,
    ) -> None:
        self.config = config
        self.generator = generator
        self.bundles = bundles or BundleRegistry(config.bundles)
        self.session = session or ConsoleSession()
        self.autocompleter = autocompleter or EntitiesAutoCompleter(
            [*self.bundles.all_entity_class_names(), *config.known_entities],
            self.bundles.entity_namespaces(),
        )

    # -- Public API --------------------------------------------------------

    def run(self, options: EntityOptions, interactive: bool = True) -> GenerationResult:
        """Optionally interact, then generate."""
        if interactive:
            options = self.interact(options)
        return self.execute(options)

    def execute(self, options: EntityOptions) -> GenerationResult:
        """Validate *options* and call the generator.

        Raises:
            InvalidInputError: Malformed entity shorthand, format or length.
            BundleNotFoundError: The shorthand names an unknown bundle.
        """
        shortcut = validate_entity_name(options.entity)
        bundle_name, entity = parse_shortcut_notation(shortcut)
        fmt = validate_format(options.format)
        fields = parse_fields(options.fields)

        write_section("Entity generation")

        bundle = self.bundles.get_bundle(bundle_name)
        result = self.generator.generate(bundle, entity, fmt, fields_to_payload(fields))

        self._report("entity class", result.entity_path)
        if result.repository_path:
            self._report("repository class", result.repository_path)
        if result.mapping_path:
            self._report("mapping file", result.mapping_path)

        print_summary_table(
            {
                "Entity": f"{bundle.namespace}\\Entity\\{entity}",
                "Format": fmt,
                "Fields": str(len(fields)),
            },
            title="Generated entity",
        )
        write_generator_summary([])
        return result

    def interact(self, options: EntityOptions) -> EntityOptions:
        """Fill in *options* by asking questions; returns a new options object."""
        write_section("Welcome to the Doctrine2 entity generator")
        for line in (
            "",
            "This command helps you generate Doctrine2 entities.",
            "",
            "First, you need to give the entity name you want to generate.",
            "You must use the shortcut notation like [yellow]AcmeBlogBundle:Post[/yellow].",
            "",
        ):
            self.session.write(line)

        bundle_name, entity = self._ask_entity(options.entity)

        for line in ("", "Determine the format to use for the mapping information.", ""):
            self.session.write(line)
        fmt = ask(
            self.session,
            Question(
                "Configuration format (yml, xml, php, or annotation)",
                default=options.format,
                validator=validate_format,
                autocomplete=MAPPING_FORMATS,
            ),
        )

        fields = self._field_wizard().run(parse_fields(options.fields))
        return EntityOptions(entity=f"{bundle_name}:{entity}", fields=fields, format=fmt)

    # -- Interaction helpers -----------------------------------------------

    def _ask_entity(self, default: str | None) -> tuple[str, str]:
        """Ask for a shorthand until it names a free entity in a known bundle."""
        bundle_names = self.bundles.bundle_names()
        while True:
            shortcut = ask(
                self.session,
                Question(
                    "The Entity shortcut name",
                    default=default,
                    validator=validate_entity_name,
                    autocomplete=bundle_names,
                ),
            )
            bundle_name, entity = parse_shortcut_notation(shortcut)

            if self.generator.is_reserved_keyword(entity):
                self.session.error(f'"{entity}" is a reserved word.')
                continue

            try:
                if self.bundles.entity_exists(bundle_name, entity):
                    raise EntityExistsError(bundle_name, entity)
            except (BundleNotFoundError, EntityExistsError) as exc:
                self.session.error(str(exc))
                continue
            return bundle_name, entity

    def _field_wizard(self) -> FieldWizard:
        return FieldWizard(
            self.session,
            TypeRegistry(self.config.custom_types),
            is_reserved=self.generator.is_reserved_keyword,
            target_entities=self.autocompleter.get_suggestions(NO_REPLACEMENTS),
            default_length=self.config.default_string_length,
        )

    def _report(self, label: str, path: Path) -> None:
        relative = make_path_relative(path, self.config.working_dir)
        console.print(f"> Generating {label} [green]{relative}[/green]: [yellow]OK![/yellow]")


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``entity-scaffold``."""
    import argparse

    parser = argparse.ArgumentParser(
        prog="entity-scaffold",
        description="Generates a new Doctrine entity inside a bundle",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  entity-scaffold --entity=AcmeBlogBundle:Blog/Post\n"
            '  entity-scaffold --entity=AcmeBlogBundle:Blog/Post --fields="title:string(255) body:text"\n'
            "  entity-scaffold --entity=AcmeBlogBundle:Blog/Post --format=yml --no-interaction\n"
        ),
    )
    parser.add_argument(
        "--entity",
        default=None,
        help="The entity class name to initialize (shortcut notation)",
    )
    parser.add_argument(
        "--fields",
        default=None,
        help="The fields to create with the new entity",
    )
    parser.add_argument(
        "--format",
        default=None,
        help="Use the format for configuration files (php, xml, yml, or annotation)",
    )
    parser.add_argument(
        "--no-interaction", "-n",
        action="store_true",
        help="Do not ask any interactive question",
    )
    parser.add_argument(
        "--config", "-c",
        default=None,
        help="JSON configuration file (default: read ENTITY_SCAFFOLD_* variables)",
    )

    args = parser.parse_args(argv)

    if args.config and not Path(args.config).is_file():
        print_error(f"Configuration file not found: {args.config}")
        sys.exit(1)

    try:
        config = Config.load(Path(args.config)) if args.config else Config.from_env()
    except (ValueError, OSError) as exc:
        print_error(f"Invalid configuration: {exc}")
        sys.exit(1)
    if not config.bundles:
        print_warning("No bundles configured; pass a JSON file with --config.")
    generator = ManifestGenerator(ReservedKeywords(config.reserved_words))
    command = GenerateEntityCommand(config, generator)
    options = EntityOptions(
        entity=args.entity,
        fields=args.fields,
        format=args.format or config.default_format,
    )

    try:
        command.run(options, interactive=not args.no_interaction)
    except (ScaffoldError, InvalidInputError) as exc:
        print_error(str(exc))
        sys.exit(1)
    except (EOFError, KeyboardInterrupt):
        console.print()
        print_error("Aborted.")
        sys.exit(1)


if __name__ == "__main__":
    main()
