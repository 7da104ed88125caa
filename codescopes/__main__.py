import logging
from pathlib import Path
from typing import Any, Callable, Dict, Optional

import click
from rich.console import Console

from codescopes.errors import (
    CodescopesError,
    CodescopesFileError,
    MalformedRuleError,
    MissingCodescopesFileError,
)
from codescopes.git_service import GitService
from codescopes.log import setup_logging
from codescopes.models import OutputFormat, ScopeAssignment
from codescopes.resolver import ScopeResolver
from codescopes.rules.models import RuleSet
from codescopes.rules.repository import CodescopesRepository
from codescopes.settings import Settings, load_settings
from codescopes.tui import ScopesConsoleUI

logger = logging.getLogger(__name__)

FORMAT_VALUES = [item.value for item in OutputFormat]


def _format_option() -> Callable:
    return click.option(
        "--format",
        "output_format",
        type=click.Choice(FORMAT_VALUES, case_sensitive=False),
        default=OutputFormat.TABLE.value,
        show_default=True,
        help="Output format.",
    )


def _settings_from_obj(obj: Dict[str, Any]) -> Settings:
    try:
        return load_settings(obj.get("config"))
    except CodescopesError as exc:
        raise click.ClickException(str(exc))


def _repository_from_obj(obj: Dict[str, Any]) -> CodescopesRepository:
    return CodescopesRepository(obj["root"], settings=_settings_from_obj(obj))


def _load_rule_set(obj: Dict[str, Any]) -> RuleSet:
    try:
        return _repository_from_obj(obj).load()
    except CodescopesError as exc:
        raise click.ClickException(str(exc))


def _git_from_obj(obj: Dict[str, Any]) -> GitService:
    return GitService(obj["root"])


def _render_assignments(
    ui: ScopesConsoleUI, title: str, items: list[ScopeAssignment], output_format: str
) -> None:
    normalized = OutputFormat(output_format.lower())
    if normalized == OutputFormat.TABLE:
        ui.render_assignments(title, items)
        return
    ui.render_payload([item.as_dict() for item in items], normalized)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--root",
    type=click.Path(file_okay=False, path_type=Path),
    default=Path("."),
    show_default=True,
    help="Repository root containing the CODESCOPES file.",
)
@click.option(
    "--config",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Settings file (defaults to $XDG_CONFIG_HOME/codescopes/config.json).",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, root: Path, config: Optional[Path], verbose: bool) -> None:
    """Map files to scopes with a CODESCOPES file."""
    setup_logging(verbose)
    ctx.obj = {"root": root, "config": config}


@cli.command(help="Validate the CODESCOPES file.")
@click.pass_obj
def check(obj: Dict[str, Any]) -> None:
    ui = ScopesConsoleUI(Console())
    repository = _repository_from_obj(obj)

    try:
        rule_set = repository.load()
    except MissingCodescopesFileError as exc:
        searched = "\n".join([f"- {path}" for path in exc.searched])
        ui.render_error("missing", f"{exc}\nSearched:\n{searched}")
        raise click.exceptions.Exit(1)
    except MalformedRuleError as exc:
        ui.render_error("malformed", str(exc))
        raise click.exceptions.Exit(1)
    except CodescopesFileError as exc:
        ui.render_error("unreadable", str(exc))
        raise click.exceptions.Exit(1)

    ui.render_check(rule_set)


@cli.command(help="List rules in file order.")
@click.pass_obj
def rules(obj: Dict[str, Any]) -> None:
    ui = ScopesConsoleUI(Console())
    ui.render_rules(_load_rule_set(obj))


@cli.command(help="Resolve paths to their scope.")
@click.argument("paths", nargs=-1, required=True)
@click.option("--explain", is_flag=True, help="Show every rule that matches.")
@_format_option()
@click.pass_obj
def resolve(obj: Dict[str, Any], paths: tuple[str, ...], explain: bool, output_format: str) -> None:
    ui = ScopesConsoleUI(Console())
    resolver = ScopeResolver(_load_rule_set(obj))

    if explain:
        matches = [resolver.explain(path) for path in paths]
        normalized = OutputFormat(output_format.lower())
        if normalized == OutputFormat.TABLE:
            ui.render_explanations(matches)
        else:
            ui.render_payload([item.as_dict() for item in matches], normalized)
        return

    _render_assignments(ui, "scopes", resolver.resolve_many(paths), output_format)


@cli.command(help="Resolve scopes for changed files.")
@click.argument("ref", required=False)
@click.option("--staged", is_flag=True, help="Only consider staged changes.")
@click.option("--strict", is_flag=True, help="Fail when a changed file is unscoped.")
@_format_option()
@click.pass_obj
def changed(
    obj: Dict[str, Any],
    ref: Optional[str],
    staged: bool,
    strict: bool,
    output_format: str,
) -> None:
    ui = ScopesConsoleUI(Console())
    settings = _settings_from_obj(obj)
    resolver = ScopeResolver(_load_rule_set(obj))

    try:
        paths = _git_from_obj(obj).changed_files(
            ref=ref, staged=staged, relative_to=obj["root"]
        )
    except CodescopesError as exc:
        raise click.ClickException(str(exc))

    assignments = resolver.resolve_many(paths)
    _render_assignments(ui, "changed files", assignments, output_format)

    unscoped = [item.path for item in assignments if not item.is_scoped]
    if unscoped and (strict or settings.fail_on_unscoped):
        if OutputFormat(output_format.lower()) == OutputFormat.TABLE:
            ui.render_unscoped_failure(unscoped)
        raise click.exceptions.Exit(1)


@cli.command(help="Group every tracked file by scope.")
@_format_option()
@click.pass_obj
def summary(obj: Dict[str, Any], output_format: str) -> None:
    ui = ScopesConsoleUI(Console())
    resolver = ScopeResolver(_load_rule_set(obj))

    try:
        paths = _git_from_obj(obj).tracked_files(relative_to=obj["root"])
    except CodescopesError as exc:
        raise click.ClickException(str(exc))

    report = resolver.report(paths)
    logger.debug("Resolved %d tracked file(s)", report.total)

    normalized = OutputFormat(output_format.lower())
    if normalized == OutputFormat.TABLE:
        ui.render_report(report)
    else:
        ui.render_payload(report.as_dict(), normalized)


def main() -> int:
    try:
        result = cli(standalone_mode=False)
    except click.exceptions.Exit as exc:
        code = exc.exit_code
        return code if isinstance(code, int) else 1
    except click.ClickException as exc:
        exc.show()
        return 2
    # click returns the exit code instead of raising when not standalone
    return result if isinstance(result, int) else 0


if __name__ == "__main__":
    raise SystemExit(main())
