"""Tests for the template-a11y command."""

from __future__ import annotations

import json

from click.testing import CliRunner

from a11y_analyzer import __version__
from a11y_analyzer.cli import main

BROKEN_TREE = """\
path: src/App.jsx
children:
  - jsx: img
    span: {start: 0, end: 10, line: 4, column: 2}
  - jsx: button
    span: {start: 12, end: 30, line: 5, column: 2}
    attributes:
      - {name: role, value: button}
    children: [Save]
"""

CLEAN_TREE = """\
children:
  - jsx: img
    attributes:
      - {name: alt, value: ""}
"""


def write(tmp_path, name: str, content: str):
    path = tmp_path / name
    path.write_text(content)
    return path


class TestCli:
    def test_text_output_and_exit_code(self, tmp_path):
        path = write(tmp_path, "app.yaml", BROKEN_TREE)
        result = CliRunner().invoke(main, [str(path)])
        assert result.exit_code == 1
        assert "src/App.jsx:4:2" in result.output
        assert "[image-alt]" in result.output
        assert "[no-redundant-roles]" in result.output
        assert "1 error(s), 1 warning(s)" in result.output

    def test_clean_tree(self, tmp_path):
        path = write(tmp_path, "clean.yaml", CLEAN_TREE)
        result = CliRunner().invoke(main, [str(path)])
        assert result.exit_code == 0
        assert result.output == ""

    def test_warnings_only_exit_zero(self, tmp_path):
        path = write(tmp_path, "app.yaml", BROKEN_TREE)
        config = write(tmp_path, "a11y.yaml", "rules:\n  image-alt: off\n")
        result = CliRunner().invoke(main, [str(path), "--config", str(config)])
        assert result.exit_code == 0
        assert "[no-redundant-roles]" in result.output

    def test_json_output(self, tmp_path):
        path = write(tmp_path, "app.yaml", BROKEN_TREE)
        result = CliRunner().invoke(main, [str(path), "-f", "json"])
        assert result.exit_code == 1
        (report,) = json.loads(result.output)
        assert report["error_count"] == 1
        assert report["warning_count"] == 1
        assert [d["rule_id"] for d in report["diagnostics"]] == ["image-alt", "no-redundant-roles"]
        assert report["diagnostics"][1]["suggestions"][0]["edit"]["text"] == ""

    def test_directory_argument(self, tmp_path):
        write(tmp_path, "a.yaml", BROKEN_TREE)
        write(tmp_path, "b.json", json.dumps({"children": [{"jsx": "img"}]}))
        write(tmp_path, "notes.txt", "not a tree")
        result = CliRunner().invoke(main, [str(tmp_path), "-f", "json"])
        reports = json.loads(result.output)
        assert [r["error_count"] for r in reports] == [1, 1]

    def test_directory_skips_settings_files(self, tmp_path):
        write(tmp_path, "app.yaml", BROKEN_TREE)
        write(tmp_path, "a11y.yaml", "preset: strict\n")
        config = write(tmp_path, "lint-settings.yml", "rules:\n  image-alt: off\n")
        result = CliRunner().invoke(main, [str(tmp_path), "-c", str(config), "-f", "json"])
        assert result.exit_code == 0
        (report,) = json.loads(result.output)
        assert report["file"].endswith("app.yaml")

    def test_bad_config(self, tmp_path):
        path = write(tmp_path, "app.yaml", CLEAN_TREE)
        config = write(tmp_path, "a11y.yaml", "components:\n  Nav: navbar\n")
        result = CliRunner().invoke(main, [str(path), "--config", str(config)])
        assert result.exit_code == 1
        assert "navbar" in result.output

    def test_bad_tree(self, tmp_path):
        path = write(tmp_path, "app.yaml", "children:\n  - {name: div}\n")
        result = CliRunner().invoke(main, [str(path)])
        assert result.exit_code == 1
        assert "'jsx' or 'template'" in result.output

    def test_version(self):
        result = CliRunner().invoke(main, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output
