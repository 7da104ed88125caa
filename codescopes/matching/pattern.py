"""Gitignore-style pattern matching for CODESCOPES rules.

Supported syntax is deliberately small:

- ``*`` matches any run of characters inside a single path segment.
- A leading ``/`` anchors the pattern to the repository root. Without it the
  pattern may match at any directory boundary.
- A trailing ``/`` restricts the pattern to a directory and everything below it.
- A pattern whose last segment contains no ``*`` also covers everything below a
  directory of that name.

Every other character is literal, so unsupported syntax such as ``!`` or
``[abc]`` simply never matches.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache

_WILDCARD = "*"
_SEGMENT_WILDCARD_RE = "[^/]*"
_DESCENDANTS_RE = "(?:/.*)?"
_ANY_PARENT_RE = "(?:.*/)?"


def normalize_path(path: str) -> str:
    normalized = path
    while normalized.startswith("./"):
        normalized = normalized[2:]
    return normalized.strip("/")


def _segment_regex(segment: str) -> str:
    return _SEGMENT_WILDCARD_RE.join(re.escape(part) for part in segment.split(_WILDCARD))


@dataclass(frozen=True)
class ScopePattern:
    raw: str
    anchored: bool
    directory_only: bool
    regex: re.Pattern[str]

    @classmethod
    def compile(cls, raw: str) -> "ScopePattern":
        anchored = raw.startswith("/")
        directory_only = raw.endswith("/")
        body = raw.strip("/")

        if not body:
            return cls(
                raw=raw,
                anchored=anchored,
                directory_only=directory_only,
                regex=re.compile(r".+"),
            )

        segments = body.split("/")
        prefix = "" if anchored else _ANY_PARENT_RE
        covers_descendants = directory_only or _WILDCARD not in segments[-1]
        suffix = _DESCENDANTS_RE if covers_descendants else ""
        expression = prefix + "/".join(_segment_regex(s) for s in segments) + suffix
        return cls(
            raw=raw,
            anchored=anchored,
            directory_only=directory_only,
            regex=re.compile(expression),
        )

    def matches(self, path: str) -> bool:
        normalized = normalize_path(path)
        if not normalized:
            return False
        return self.regex.fullmatch(normalized) is not None


@lru_cache(maxsize=1024)
def compile_pattern(raw: str) -> ScopePattern:
    return ScopePattern.compile(raw)


def pattern_matches(pattern: str, path: str) -> bool:
    return compile_pattern(pattern).matches(path)
