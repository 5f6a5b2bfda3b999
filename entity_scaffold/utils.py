"""Shared utility functions for the entity scaffolding command.

Provides Rich-based console reporting (section headers, status messages, the
generator summary), naming helpers, path display helpers and JSON output.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.rule import Rule
from rich.table import Table

console = Console()

# ---------------------------------------------------------------------------
# String / name helpers
# ---------------------------------------------------------------------------


def camelize(name: str) -> str:
    """Convert an underscored id to UpperCamelCase.

    Dots become namespace separators, as in container service ids.

    Examples::

        camelize("created_by") -> "CreatedBy"
        camelize("foo.bar_baz") -> "Foo_BarBaz"
    """
    spaced = name.replace("_", " ").replace(".", "_ ").replace("\\", "_ ")
    return "".join(word[:1].upper() + word[1:] for word in spaced.split(" "))


def lower_camelize(name: str) -> str:
    """Convert ``created_by`` to ``createdBy``."""
    camel = camelize(name)
    return camel[:1].lower() + camel[1:]


# ---------------------------------------------------------------------------
# Path helpers
# ---------------------------------------------------------------------------


def make_path_relative(path: str | Path, base: str | Path | None = None) -> str:
    """Display *path* relative to *base* (default: the working directory).

    Paths outside *base* are returned unchanged.
    """
    target = Path(path)
    root = Path(base) if base is not None else Path.cwd()
    try:
        return str(target.resolve().relative_to(root.resolve()))
    except ValueError:
        return str(target)


# ---------------------------------------------------------------------------
# JSON I/O
# ---------------------------------------------------------------------------


def save_json(data: dict[str, Any] | list[Any], path: str | Path) -> Path:
    """Save data as pretty-printed JSON.

    Parent directories are created automatically.

    Returns:
        The path that was written.
    """
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    content = json.dumps(data, indent=2, ensure_ascii=False, default=str)
    file_path.write_text(content + os.linesep, encoding="utf-8")
    return file_path


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def write_section(text: str, style: str = "bold white on blue") -> None:
    """Print a prominent section header."""
    console.print()
    console.print(Rule(f"[{style}] {escape(text)} [/{style}]", style="blue"))
    console.print()


def write_generator_summary(errors: list[str]) -> None:
    """Print the closing summary of a generation run.

    An empty *errors* list prints the all-clear message; otherwise every
    error is listed under a warning banner.
    """
    console.print()
    if not errors:
        write_section("Everything is OK! Now get to work :).", style="bold white on green")
        return

    write_section(
        "The command was not able to configure everything automatically.",
        style="bold white on red",
    )
    console.print("You'll need to make the following changes manually.")
    console.print()
    for error in errors:
        console.print(f"- {escape(error)}")


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold white on red] {escape(message)} [/bold white on red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")
