from typing import Any

from rich.console import Console
from rich.markup import escape

from codescopes.models import OutputFormat, ScopeAssignment, ScopeMatch, ScopeReport
from codescopes.rules.models import RuleSet
from codescopes.tui.enums import UIStyle
from codescopes.tui.sections import UISection
from codescopes.tui.tables import AssignmentTable, ReportTable, RulesTable
from codescopes.utils import compact_home_path, dump_json, dump_yaml


class ScopesConsoleUI:
    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def _source_label(self, rule_set: RuleSet) -> str:
        if rule_set.source_path is None:
            return "<memory>"
        return compact_home_path(rule_set.source_path)

    def render_payload(self, payload: Any, output_format: OutputFormat) -> None:
        if output_format == OutputFormat.YAML:
            text = dump_yaml(payload)
        else:
            text = dump_json(payload)
        self.console.out(text, highlight=False)

    def render_check(self, rule_set: RuleSet) -> None:
        self.console.print(
            UISection.wrap(
                "codescopes",
                RulesTable.summary_block(rule_set, self._source_label(rule_set)),
                style=UIStyle.GREEN.value,
            )
        )
        if not rule_set:
            self.console.print(
                UISection.note(
                    "rules",
                    "File has no rules. Every path resolves to unscoped.",
                    style=UIStyle.YELLOW.value,
                )
            )

    def render_error(self, title: str, message: str) -> None:
        self.console.print(UISection.note(title, escape(message), style=UIStyle.RED.value))

    def render_rules(self, rule_set: RuleSet) -> None:
        if not rule_set:
            self.console.print(
                UISection.note("rules", "No rules defined.", style=UIStyle.YELLOW.value)
            )
            return
        self.console.print(
            UISection.wrap(
                "rules",
                RulesTable.rules_table(list(rule_set)),
                style=UIStyle.CYAN.value,
                subtitle=escape(self._source_label(rule_set)),
            )
        )

    def render_assignments(self, title: str, items: list[ScopeAssignment]) -> None:
        if not items:
            self.console.print(
                UISection.note(title, "No files to resolve.", style=UIStyle.DIM.value)
            )
            return
        self.console.print(
            UISection.wrap(
                title,
                AssignmentTable.assignments_table(items),
                style=UIStyle.BLUE.value,
            )
        )

    def render_explanations(self, items: list[ScopeMatch]) -> None:
        for match in items:
            if not match.matches:
                self.console.print(
                    UISection.note(
                        escape(match.path),
                        "No rule matches. Resolves to unscoped.",
                        style=UIStyle.YELLOW.value,
                    )
                )
                continue
            self.console.print(
                UISection.wrap(
                    escape(match.path),
                    AssignmentTable.explain_table(match),
                    style=UIStyle.CYAN.value,
                    subtitle=f"scope: {escape(match.scope)}",
                )
            )

    def render_report(self, report: ScopeReport) -> None:
        self.console.print(
            UISection.wrap(
                "scope summary",
                ReportTable.counts_table(report),
                style=UIStyle.BLUE.value,
                subtitle=f"{report.total} files",
            )
        )
        if report.unscoped:
            text = "\n".join([f"- {escape(path)}" for path in report.unscoped])
            self.console.print(
                UISection.note("unscoped files", text, style=UIStyle.YELLOW.value)
            )
        if report.unused_rules:
            text = "\n".join(
                [
                    f"- line {rule.line_number}: {escape(rule.pattern)} -> {escape(rule.scope)}"
                    for rule in report.unused_rules
                ]
            )
            self.console.print(
                UISection.note("rules matching no files", text, style=UIStyle.MAGENTA.value)
            )

    def render_unscoped_failure(self, paths: list[str]) -> None:
        text = "\n".join([f"- {escape(path)}" for path in paths])
        self.console.print(
            UISection.note(
                "unscoped",
                f"{len(paths)} changed file(s) have no scope:\n{text}",
                style=UIStyle.RED.value,
            )
        )
