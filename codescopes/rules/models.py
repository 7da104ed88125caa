"""Rule data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, Optional


@dataclass(frozen=True)
class Rule:
    pattern: str
    scope: str
    line_number: int = field(default=0, compare=False)


@dataclass(frozen=True)
class RuleSet:
    """Ordered, immutable rules; later rules take precedence."""

    rules: tuple[Rule, ...] = ()
    source_path: Optional[Path] = field(default=None, compare=False)

    def __iter__(self) -> Iterator[Rule]:
        return iter(self.rules)

    def __len__(self) -> int:
        return len(self.rules)

    def __getitem__(self, index: int) -> Rule:
        return self.rules[index]

    def __bool__(self) -> bool:
        return bool(self.rules)

    def scopes(self) -> list[str]:
        seen: dict[str, None] = {}
        for rule in self.rules:
            seen.setdefault(rule.scope, None)
        return list(seen)
