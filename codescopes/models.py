from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from codescopes.constants import UNSCOPED
from codescopes.rules.models import Rule


class OutputFormat(str, Enum):
    TABLE = "table"
    JSON = "json"
    YAML = "yaml"


@dataclass(frozen=True)
class ScopeAssignment:
    path: str
    scope: str = UNSCOPED
    rule: Optional[Rule] = None

    @property
    def is_scoped(self) -> bool:
        return self.scope != UNSCOPED

    def as_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "scope": self.scope,
            "pattern": self.rule.pattern if self.rule else None,
            "line": self.rule.line_number if self.rule else None,
        }


@dataclass(frozen=True)
class ScopeMatch:
    path: str
    matches: tuple[Rule, ...] = ()

    @property
    def chosen(self) -> Optional[Rule]:
        return self.matches[-1] if self.matches else None

    @property
    def scope(self) -> str:
        return self.chosen.scope if self.chosen else UNSCOPED

    def as_assignment(self) -> ScopeAssignment:
        return ScopeAssignment(path=self.path, scope=self.scope, rule=self.chosen)

    def as_dict(self) -> dict[str, Any]:
        payload = self.as_assignment().as_dict()
        payload["matches"] = [
            {"pattern": rule.pattern, "scope": rule.scope, "line": rule.line_number}
            for rule in self.matches
        ]
        return payload


@dataclass
class ScopeReport:
    scopes: dict[str, list[str]] = field(default_factory=dict)
    unscoped: list[str] = field(default_factory=list)
    unused_rules: list[Rule] = field(default_factory=list)

    @property
    def total(self) -> int:
        return sum(len(paths) for paths in self.scopes.values()) + len(self.unscoped)

    def summary(self) -> dict[str, int]:
        counts = {scope: len(paths) for scope, paths in self.scopes.items()}
        counts[UNSCOPED] = len(self.unscoped)
        return counts

    def as_dict(self) -> dict[str, Any]:
        return {
            "scopes": {scope: list(paths) for scope, paths in self.scopes.items()},
            "unscoped": list(self.unscoped),
            "unused_rules": [
                {"pattern": rule.pattern, "scope": rule.scope, "line": rule.line_number}
                for rule in self.unused_rules
            ],
        }
