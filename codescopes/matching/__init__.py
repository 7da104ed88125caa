from codescopes.matching.pattern import (
    ScopePattern,
    compile_pattern,
    normalize_path,
    pattern_matches,
)

__all__ = [
    "ScopePattern",
    "compile_pattern",
    "normalize_path",
    "pattern_matches",
]
