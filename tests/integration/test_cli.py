"""Tests for the component-linker command line."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from component_linker.app_shell import cli

WORKSPACE = """
components:
  - id: utils/is-string
    root_dir: components/.dependencies/utils/is-string/v1
    placement: nested
  - id: utils/to-string
    root_dir: components/utils/to-string
    placement: imported
    main_file: to-string.js
    dependencies:
      - target: utils/is-string
        specifier: ./is-string
"""

RULES = "namespace:\n  package_scope: '@org'\n"


@pytest.fixture
def project(tmp_path: Path) -> Path:
    (tmp_path / "workspace.yaml").write_text(WORKSPACE)
    (tmp_path / "linker_rules.yaml").write_text(RULES)
    (tmp_path / "components/utils/to-string").mkdir(parents=True)
    (tmp_path / "components/.dependencies/utils/is-string/v1").mkdir(parents=True)
    return tmp_path


def run(monkeypatch: pytest.MonkeyPatch, project: Path, *args: str) -> None:
    monkeypatch.setattr(
        sys,
        "argv",
        [
            "component-linker",
            "--workspace",
            str(project / "workspace.yaml"),
            "--rules",
            str(project / "linker_rules.yaml"),
            "--project-root",
            str(project),
            *args,
        ],
    )
    cli.main()


class TestLinkCommand:
    """Tests for the link subcommand."""

    def test_dry_run_writes_nothing(
        self, monkeypatch: pytest.MonkeyPatch, project: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        run(monkeypatch, project, "link", "utils/to-string", "--dry-run")

        out = capsys.readouterr().out
        assert "file    components/utils/to-string/is-string.js" in out
        assert "symlink node_modules/@org/utils.to-string -> components/utils/to-string" in out
        assert not (project / "components/utils/to-string/is-string.js").exists()

    def test_link(
        self, monkeypatch: pytest.MonkeyPatch, project: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        run(monkeypatch, project, "link", "utils/to-string")

        assert "Linked 1 component(s)." in capsys.readouterr().out
        assert (project / "components/utils/to-string/index.js").read_text() == (
            "module.exports = require('./to-string');\n"
        )
        assert (project / "node_modules/@org/utils.to-string").is_symlink()

    def test_package_json_skips_entry_point(
        self, monkeypatch: pytest.MonkeyPatch, project: Path
    ) -> None:
        run(monkeypatch, project, "link", "utils/to-string", "--package-json")
        assert not (project / "components/utils/to-string/index.js").exists()

    def test_unknown_component(self, monkeypatch: pytest.MonkeyPatch, project: Path) -> None:
        with pytest.raises(SystemExit) as exc_info:
            run(monkeypatch, project, "link", "utils/missing")
        assert exc_info.value.code == 1


class TestLinkAllCommand:
    """Tests for the link-all subcommand."""

    def test_link_all(
        self, monkeypatch: pytest.MonkeyPatch, project: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        run(monkeypatch, project, "link-all")

        out = capsys.readouterr().out
        assert "Linked 2 component(s) to node_modules." in out
        assert (project / "node_modules/@org/utils.to-string").is_symlink()

    def test_empty_workspace_fails(self, monkeypatch: pytest.MonkeyPatch, project: Path) -> None:
        (project / "workspace.yaml").write_text("components: []\n")
        with pytest.raises(SystemExit) as exc_info:
            run(monkeypatch, project, "link-all")
        assert exc_info.value.code == 1
        assert not (project / "node_modules").exists()
