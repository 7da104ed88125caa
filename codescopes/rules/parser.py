"""Parse CODESCOPES files into rule sets."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Union

from codescopes.constants import COMMENT_PREFIX
from codescopes.errors import MalformedRuleError, UnreadableCodescopesFileError
from codescopes.rules.models import Rule, RuleSet

logger = logging.getLogger(__name__)


def _is_ignorable(line: str) -> bool:
    stripped = line.strip()
    return not stripped or stripped.startswith(COMMENT_PREFIX)


def parse_rule_line(line: str, line_number: int) -> Rule:
    tokens = line.split()
    if len(tokens) != 2:
        raise MalformedRuleError(line_number, line.rstrip("\r\n"))
    pattern, scope = tokens
    return Rule(pattern=pattern, scope=scope, line_number=line_number)


def parse_rules(source: Union[str, Iterable[str]]) -> RuleSet:
    # Line numbers count "\n" only, unlike str.splitlines().
    lines = source.split("\n") if isinstance(source, str) else source

    rules: list[Rule] = []
    for line_number, line in enumerate(lines, start=1):
        if _is_ignorable(line):
            continue
        rules.append(parse_rule_line(line, line_number))

    logger.debug("Parsed %d rule(s)", len(rules))
    return RuleSet(rules=tuple(rules))


def read_rules_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as exc:
        raise UnreadableCodescopesFileError(path, f"not valid UTF-8: {exc.reason}") from exc
    except OSError as exc:
        raise UnreadableCodescopesFileError(path, exc.strerror or str(exc)) from exc


def parse_rules_file(path: Path) -> RuleSet:
    text = read_rules_text(path)
    try:
        parsed = parse_rules(text)
    except MalformedRuleError as exc:
        raise exc.with_path(path) from None
    return RuleSet(rules=parsed.rules, source_path=path)
