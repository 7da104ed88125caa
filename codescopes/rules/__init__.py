from codescopes.rules.models import Rule, RuleSet
from codescopes.rules.parser import parse_rule_line, parse_rules, parse_rules_file
from codescopes.rules.repository import CodescopesRepository

__all__ = [
    "CodescopesRepository",
    "Rule",
    "RuleSet",
    "parse_rule_line",
    "parse_rules",
    "parse_rules_file",
]
