"""CLI entry point for template-a11y."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import click

from a11y_analyzer import __version__
from a11y_analyzer.config import load_settings
from a11y_analyzer.engine import Linter
from a11y_analyzer.errors import A11yError
from a11y_analyzer.models import LintReport
from a11y_analyzer.tree.loader import load_tree

TREE_SUFFIXES = (".json", ".yaml", ".yml")
# Settings files share the YAML suffix; directory scans leave them out.
SETTINGS_NAMES = ("a11y.yaml", "a11y.yml", ".a11y.yaml", ".a11y.yml")


@click.command()
@click.argument(
    "paths", nargs=-1, required=True,
    type=click.Path(exists=True, resolve_path=True, path_type=Path),
)
@click.option(
    "-c", "--config", "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="YAML settings file (preset, rules, components).",
)
@click.option(
    "-f", "--format", "fmt",
    type=click.Choice(["text", "json"], case_sensitive=False),
    default="text",
    help="Output format (default: text).",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Verbose logging.")
@click.version_option(version=__version__)
def main(paths: tuple[Path, ...], config_path: Path | None, fmt: str, verbose: bool) -> None:
    """Check serialized JSX and template trees for accessibility problems."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(name)s %(levelname)s: %(message)s",
    )

    try:
        settings, mapping = load_settings(config_path)
        linter = Linter(settings, mapping)
        reports = [
            LintReport(file=str(path), diagnostics=linter.lint(load_tree(path)))
            for path in _tree_files(paths, config_path)
        ]
    except A11yError as exc:
        raise click.ClickException(str(exc)) from exc

    if fmt == "json":
        _output_json(reports)
    else:
        _output_text(reports)

    if any(report.error_count for report in reports):
        sys.exit(1)


def _tree_files(paths: tuple[Path, ...], config_path: Path | None = None) -> list[Path]:
    skip = config_path.resolve() if config_path is not None else None
    files: list[Path] = []
    for path in paths:
        if path.is_dir():
            files.extend(
                p for p in sorted(path.rglob("*"))
                if p.is_file() and p.suffix in TREE_SUFFIXES
                and p.name not in SETTINGS_NAMES and p != skip
            )
        else:
            files.append(path)
    return files


def _output_text(reports: list[LintReport]) -> None:
    errors = warnings = 0
    for report in reports:
        for d in report.diagnostics:
            click.echo(f"{d.location}  {d.severity:<5}  {d.message}  [{d.rule_id}]")
        errors += report.error_count
        warnings += report.warning_count
    if errors or warnings:
        click.echo(f"\n{errors} error(s), {warnings} warning(s)")


def _output_json(reports: list[LintReport]) -> None:
    data = [report.model_dump() for report in reports]
    click.echo(json.dumps(data, indent=2))


if __name__ == "__main__":
    main()
