"""Shared pytest fixtures for the entity scaffolding test suite.

Provides reusable fixtures for:
- Scripted interactive sessions fed from a newline-separated answer string
- A recording fake entity generator
- A temporary bundle tree with one existing entity
- Ready-made configuration and bundle registry objects
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any

import pytest

from entity_scaffold.bundles import BundleRegistry
from entity_scaffold.config import BundleConfig, Config
from entity_scaffold.generator import GenerationResult


# ---------------------------------------------------------------------------
# Scripted session
# ---------------------------------------------------------------------------


class ScriptedSession:
    """Interactive session that replays canned answers.

    Once the script is exhausted further questions receive an empty answer,
    i.e. their default.  After ``max_blank_reads`` such answers the session
    raises ``EOFError``, as a terminal does at end of input.
    """

    def __init__(self, script: str | Sequence[str] = "", max_blank_reads: int = 10) -> None:
        if isinstance(script, str):
            lines = script.split("\n")
            if lines and lines[-1] == "":
                lines.pop()
        else:
            lines = list(script)
        self.answers = lines
        self.max_blank_reads = max_blank_reads
        self.blank_reads = 0
        self.prompts: list[str] = []
        self.completions: list[list[str]] = []
        self.messages: list[str] = []
        self.errors: list[str] = []

    def read(self, prompt: str, completions: Sequence[str] = ()) -> str:
        self.prompts.append(prompt)
        self.completions.append(list(completions))
        if self.answers:
            return self.answers.pop(0)
        if self.blank_reads >= self.max_blank_reads:
            raise EOFError("scripted input exhausted")
        self.blank_reads += 1
        return ""

    def write(self, message: str = "") -> None:
        self.messages.append(message)

    def error(self, message: str) -> None:
        self.errors.append(message)


@pytest.fixture
def make_session() -> Callable[..., ScriptedSession]:
    """Factory for scripted sessions: ``make_session("a\\nb\\n")``."""
    return ScriptedSession


# ---------------------------------------------------------------------------
# Fake generator
# ---------------------------------------------------------------------------


class FakeGenerator:
    """Records ``generate`` calls and answers reserved-word queries."""

    def __init__(self, reserved: Sequence[str] = ()) -> None:
        self.reserved = {w.lower() for w in reserved}
        self.calls: list[dict[str, Any]] = []

    def is_reserved_keyword(self, name: str) -> bool:
        return name.lower() in self.reserved

    def generate(
        self,
        bundle: BundleConfig,
        entity: str,
        fmt: str,
        fields: list[dict[str, Any]],
    ) -> GenerationResult:
        self.calls.append({"bundle": bundle, "entity": entity, "format": fmt, "fields": fields})
        return GenerationResult(
            entity_path=bundle.path / "Entity" / (entity.replace("\\", "/") + ".php"),
            repository_path=bundle.path / "Repository" / (entity.replace("\\", "/") + "Repository.php"),
        )


@pytest.fixture
def fake_generator() -> FakeGenerator:
    """A generator that only knows ``select`` and ``order`` as reserved."""
    return FakeGenerator(reserved=["select", "order"])


# ---------------------------------------------------------------------------
# Bundles & configuration
# ---------------------------------------------------------------------------


@pytest.fixture
def bundle_root(tmp_path: Path) -> Path:
    """``AcmeBlogBundle`` with an existing ``Entity/Post.php``."""
    root = tmp_path / "src" / "Acme" / "BlogBundle"
    (root / "Entity").mkdir(parents=True)
    (root / "Entity" / "Post.php").write_text("<?php\n", encoding="utf-8")
    return root


@pytest.fixture
def blog_bundle(bundle_root: Path) -> BundleConfig:
    return BundleConfig(name="AcmeBlogBundle", path=bundle_root, namespace="Acme\\BlogBundle")


@pytest.fixture
def registry(blog_bundle: BundleConfig) -> BundleRegistry:
    return BundleRegistry([blog_bundle])


@pytest.fixture
def config(tmp_path: Path, blog_bundle: BundleConfig) -> Config:
    return Config(working_dir=tmp_path, bundles=[blog_bundle])
