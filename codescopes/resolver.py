"""Resolve repository paths to scopes using last-match-wins precedence."""

from __future__ import annotations

from typing import Iterable

from codescopes.constants import UNSCOPED
from codescopes.matching.pattern import normalize_path, pattern_matches
from codescopes.models import ScopeAssignment, ScopeMatch, ScopeReport
from codescopes.rules.models import Rule, RuleSet


def resolve(rule_set: RuleSet, path: str) -> ScopeAssignment:
    chosen: Rule | None = None
    if normalize_path(path):
        for rule in rule_set:
            if pattern_matches(rule.pattern, path):
                chosen = rule

    if chosen is None:
        return ScopeAssignment(path=path, scope=UNSCOPED)
    return ScopeAssignment(path=path, scope=chosen.scope, rule=chosen)


class ScopeResolver:
    """Stateless resolver bound to a single rule set.

    The rule set is never mutated, so one resolver can be shared freely
    between threads.
    """

    def __init__(self, rule_set: RuleSet) -> None:
        self._rule_set = rule_set

    @property
    def rule_set(self) -> RuleSet:
        return self._rule_set

    def resolve(self, path: str) -> ScopeAssignment:
        return resolve(self._rule_set, path)

    def scope_of(self, path: str) -> str:
        return self.resolve(path).scope

    def explain(self, path: str) -> ScopeMatch:
        if not normalize_path(path):
            return ScopeMatch(path=path)
        matches = tuple(
            rule for rule in self._rule_set if pattern_matches(rule.pattern, path)
        )
        return ScopeMatch(path=path, matches=matches)

    def resolve_many(self, paths: Iterable[str]) -> list[ScopeAssignment]:
        return [self.resolve(path) for path in paths]

    def report(self, paths: Iterable[str]) -> ScopeReport:
        report = ScopeReport()
        unique_paths = sorted({path for path in paths if normalize_path(path)})

        for path in unique_paths:
            assignment = self.resolve(path)
            if not assignment.is_scoped:
                report.unscoped.append(path)
                continue
            report.scopes.setdefault(assignment.scope, []).append(path)

        report.scopes = dict(sorted(report.scopes.items()))
        report.unused_rules = [
            rule
            for rule in self._rule_set
            if not any(pattern_matches(rule.pattern, path) for path in unique_paths)
        ]
        return report
