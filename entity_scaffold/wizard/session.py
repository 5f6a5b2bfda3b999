"""Interactive question/answer plumbing.

A session only knows how to read one raw line and print text.  Defaults,
validation and the re-ask loop live in :func:`ask` and :func:`confirm` so any
session (a terminal, a scripted test double) gets identical behaviour.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator, Sequence
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Protocol

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt

from ..utils import console as default_console
from .validators import InvalidInputError

try:
    import readline
except ImportError:  # not available on Windows
    readline = None

_TRUE_ANSWER = re.compile(r"^y", re.IGNORECASE)


@dataclass
class Question:
    """A single prompt with an optional default, validator and completions."""

    label: str
    default: Any = None
    validator: Callable[[str], Any] | None = None
    autocomplete: Sequence[str] = field(default_factory=tuple)

    @property
    def prompt(self) -> str:
        """Rich markup rendered in front of the cursor."""
        text = f"[green]{escape(self.label)}[/green]"
        if self.default not in (None, ""):
            text += f" \\[[yellow]{escape(str(self.default))}[/yellow]]"
        return text + ": "


class InteractiveSession(Protocol):
    """Where answers come from and where messages go."""

    def read(self, prompt: str, completions: Sequence[str] = ()) -> str:
        """Return one raw answer line without its trailing newline."""
        ...

    def write(self, message: str = "") -> None:
        ...

    def error(self, message: str) -> None:
        ...


class ConsoleSession:
    """Terminal session backed by Rich prompts.

    Completion candidates are offered on <tab> through ``readline`` where the
    platform has it.  ``EOFError`` and ``KeyboardInterrupt`` propagate so the
    command can abort.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or default_console

    def read(self, prompt: str, completions: Sequence[str] = ()) -> str:
        with _tab_completion(completions):
            return Prompt.ask(prompt, console=self.console, default="", show_default=False)

    def write(self, message: str = "") -> None:
        self.console.print(message)

    def error(self, message: str) -> None:
        self.console.print(f"[bold white on red] {escape(message)} [/bold white on red]")


def ask(session: InteractiveSession, question: Question) -> Any:
    """Ask *question* until its validator accepts the answer.

    A blank answer takes the question's default.  Validation errors are
    reported through the session and the question is asked again.
    """
    while True:
        answer = session.read(question.prompt, question.autocomplete).strip()
        if answer == "" and question.default is not None:
            answer = str(question.default)
        if question.validator is None:
            return answer
        try:
            return question.validator(answer)
        except InvalidInputError as exc:
            session.error(str(exc))


def confirm(session: InteractiveSession, label: str, default: bool = True) -> bool:
    """Ask a yes/no question.

    Blank keeps *default*.  With a ``True`` default anything not starting
    with ``y`` means no; with a ``False`` default only ``y...`` means yes.
    """
    hint = "yes" if default else "no"
    prompt = Question(label, default=hint).prompt
    answer = session.read(prompt).strip()
    if not answer:
        return default
    return bool(_TRUE_ANSWER.match(answer))


def make_completer(candidates: Sequence[str]) -> Callable[[str, int], str | None]:
    """Build a ``readline`` completer returning the candidates prefixed by *text*."""
    options = list(candidates)

    def complete(text: str, state: int) -> str | None:
        matches = [option for option in options if option.startswith(text)]
        return matches[state] if state < len(matches) else None

    return complete


@contextmanager
def _tab_completion(candidates: Sequence[str]) -> Iterator[None]:
    """Install a completer for *candidates* while one line is read."""
    if readline is None or not candidates:
        yield
        return

    previous_completer = readline.get_completer()
    previous_delims = readline.get_completer_delims()
    # Candidates contain ":" and "\"; only whitespace separates words.
    readline.set_completer_delims(" \t\n")
    readline.set_completer(make_completer(candidates))
    if "libedit" in (readline.__doc__ or ""):
        readline.parse_and_bind("bind ^I rl_complete")
    else:
        readline.parse_and_bind("tab: complete")
    try:
        yield
    finally:
        readline.set_completer(previous_completer)
        readline.set_completer_delims(previous_delims)
