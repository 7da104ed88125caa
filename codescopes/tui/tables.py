from rich.markup import escape
from rich.table import Column, Table

from codescopes.constants import UNSCOPED
from codescopes.models import ScopeAssignment, ScopeMatch, ScopeReport
from codescopes.rules.models import Rule, RuleSet
from codescopes.tui.enums import UIStyle, scope_style


def _styled_scope(scope: str, is_scoped: bool) -> str:
    style = scope_style(is_scoped)
    return f"[{style}]{escape(scope)}[/{style}]"


class RulesTable:
    @staticmethod
    def summary_block(rule_set: RuleSet, source: str):
        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column()
        table.add_row("File", escape(source))
        table.add_row("Rules", str(len(rule_set)))
        table.add_row("Scopes", str(len(rule_set.scopes())))
        return table

    @staticmethod
    def rules_table(rules: list[Rule]) -> Table:
        table = Table(
            Column(header="Line", width=6, justify="right"),
            Column(header="Pattern", overflow="fold"),
            Column(header="Scope", width=24),
            expand=True,
            header_style="bold",
        )
        for rule in rules:
            table.add_row(
                str(rule.line_number),
                escape(rule.pattern),
                _styled_scope(rule.scope, rule.scope != UNSCOPED),
            )
        return table


class AssignmentTable:
    @staticmethod
    def assignments_table(items: list[ScopeAssignment]) -> Table:
        table = Table(
            Column(header="Path", overflow="fold"),
            Column(header="Scope", width=24),
            Column(header="Rule", overflow="ellipsis", max_width=40),
            expand=True,
            header_style="bold",
        )
        for item in items:
            rule = f"{item.rule.line_number}: {escape(item.rule.pattern)}" if item.rule else ""
            table.add_row(escape(item.path), _styled_scope(item.scope, item.is_scoped), rule)
        return table

    @staticmethod
    def explain_table(match: ScopeMatch) -> Table:
        table = Table(
            Column(header="Line", width=6, justify="right"),
            Column(header="Pattern", overflow="fold"),
            Column(header="Scope", width=24),
            Column(header="", width=8),
            expand=True,
            header_style="bold",
        )
        for rule in match.matches:
            chosen = rule is match.chosen
            marker = f"[{UIStyle.GREEN.value}]wins[/{UIStyle.GREEN.value}]" if chosen else ""
            table.add_row(
                str(rule.line_number),
                escape(rule.pattern),
                escape(rule.scope),
                marker,
            )
        return table


class ReportTable:
    @staticmethod
    def counts_table(report: ScopeReport) -> Table:
        table = Table(
            Column(header="Scope", width=24),
            Column(header="Files", width=8, justify="right"),
            expand=True,
            header_style="bold",
        )
        for scope, paths in report.scopes.items():
            table.add_row(_styled_scope(scope, True), str(len(paths)))
        if report.unscoped:
            table.add_row(_styled_scope(UNSCOPED, False), str(len(report.unscoped)))
        return table
