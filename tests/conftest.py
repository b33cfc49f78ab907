"""Shared test fixtures for folio tests."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from pathlib import Path

import pytest
from bs4 import BeautifulSoup
from rich.console import Console

from folio.cli import CLIContext


@dataclass(frozen=True, slots=True)
class FolioProject:
    """Paths for a folio-enabled test project."""

    root: Path
    config_file: Path
    static_dir: Path
    templates_dir: Path


PROJECTS_YAML = """\
projects:
  - title: Compiler Playground
    description: A tiny expression compiler with a step-by-step view.
    image_path: /projects/compiler.png
    alt_text: Compiler
    links:
      - label: Github
        url: https://github.com/example/compiler
        external: true
  - title: Notes
    image_path: /projects/notes.png
    links:
      - label: View Article
        url: ./notes
      - label: Live Demo
        url: https://notes.example.com/
        external: true
"""


@pytest.fixture(autouse=True)
def _isolate_environment(
    tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch
) -> Iterator[None]:
    """Keep tests away from the real user config, logs and FOLIO_* variables."""
    import os

    for key in list(os.environ):
        if key.startswith("FOLIO_"):
            monkeypatch.delenv(key)

    home = tmp_path_factory.mktemp("home")
    monkeypatch.setattr(
        "folio.config._discovery.get_user_config_path",
        lambda: home / "config" / "config.toml",
    )
    monkeypatch.setattr("folio.utils._logging.get_cli_log_file", lambda: home / "cli.log")
    monkeypatch.setattr(
        "folio.utils._logging.get_server_log_file", lambda: home / "server.log"
    )
    yield
    CLIContext.reset()


@pytest.fixture
def folio_project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> FolioProject:
    """Create a folio project with a config file and a projects data file.

    Structure:
        tmp_path/
            site/
                folio.toml
                projects.yaml
                static/projects/compiler.png
                templates/
    """
    root = tmp_path / "site"
    root.mkdir()

    (root / "projects.yaml").write_text(PROJECTS_YAML, encoding="utf-8")

    static_dir = root / "static"
    (static_dir / "projects").mkdir(parents=True)
    (static_dir / "projects" / "compiler.png").write_bytes(b"\x89PNG fake")

    templates_dir = root / "templates"
    templates_dir.mkdir()

    config_file = root / "folio.toml"
    config_file.write_text(
        """\
[site]
title = "Ada's Workshop"
description = "Things I have built"
url = "https://ada.example.com"
author = "Ada"
static_dir = "static"
template_dir = "templates"

[projects]
file = "projects.yaml"

[logging]
level = "debug"
""",
        encoding="utf-8",
    )

    monkeypatch.chdir(root)

    return FolioProject(
        root=root,
        config_file=config_file,
        static_dir=static_dir,
        templates_dir=templates_dir,
    )


HtmlParser = Callable[[str], BeautifulSoup]


@pytest.fixture
def html_soup() -> HtmlParser:
    """Return a function parsing rendered markup with BeautifulSoup."""

    def _parse(html: str) -> BeautifulSoup:
        return BeautifulSoup(html, "html.parser")

    return _parse


@pytest.fixture
def console() -> Console:
    return Console(
        width=100,
        force_terminal=True,
        highlight=False,
        color_system=None,
        legacy_windows=False,
    )
