"""Resolve repository paths to scopes defined in a CODESCOPES file."""

from codescopes.constants import CODESCOPES_FILENAME, UNSCOPED
from codescopes.errors import (
    CodescopesError,
    CodescopesFileError,
    GitCommandError,
    InvalidSettingsError,
    MalformedRuleError,
    MissingCodescopesFileError,
    UnreadableCodescopesFileError,
)
from codescopes.matching import ScopePattern, compile_pattern, pattern_matches
from codescopes.models import ScopeAssignment, ScopeMatch, ScopeReport
from codescopes.resolver import ScopeResolver, resolve
from codescopes.rules import (
    CodescopesRepository,
    Rule,
    RuleSet,
    parse_rules,
    parse_rules_file,
)

__all__ = [
    "CODESCOPES_FILENAME",
    "UNSCOPED",
    "CodescopesError",
    "CodescopesFileError",
    "CodescopesRepository",
    "GitCommandError",
    "InvalidSettingsError",
    "MalformedRuleError",
    "MissingCodescopesFileError",
    "Rule",
    "RuleSet",
    "ScopeAssignment",
    "ScopeMatch",
    "ScopePattern",
    "ScopeReport",
    "ScopeResolver",
    "UnreadableCodescopesFileError",
    "compile_pattern",
    "parse_rules",
    "parse_rules_file",
    "pattern_matches",
    "resolve",
]
