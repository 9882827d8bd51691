import re
from typing import Any, Dict, List, Optional, Protocol, Sequence


DEFAULT_MARKERS = ["error:"]


class LineMatcher(Protocol):
    """Protocol for single-line error predicates."""

    def matches(self, line: str) -> bool:
        ...


class SubstringMatcher:
    """Flags lines containing any of the given markers."""

    def __init__(self, markers: Optional[Sequence[str]] = None, case_sensitive: bool = False):
        markers = list(markers) if markers else list(DEFAULT_MARKERS)
        if any(not m for m in markers):
            raise ValueError("Substring markers must not be empty")
        self.case_sensitive = case_sensitive
        self.markers = markers if case_sensitive else [m.lower() for m in markers]

    def matches(self, line: str) -> bool:
        haystack = line if self.case_sensitive else line.lower()
        return any(marker in haystack for marker in self.markers)

    def __repr__(self) -> str:
        return f"SubstringMatcher(markers={self.markers!r}, case_sensitive={self.case_sensitive})"


class RegexMatcher:
    """Flags lines where any of the given regular expressions matches."""

    def __init__(self, patterns: Sequence[str], case_sensitive: bool = False):
        if not patterns:
            raise ValueError("RegexMatcher needs at least one pattern")

        flags = 0 if case_sensitive else re.IGNORECASE
        self.patterns: List[re.Pattern] = []
        for pattern in patterns:
            try:
                self.patterns.append(re.compile(pattern, flags))
            except re.error as e:
                raise ValueError(f"Invalid regex pattern {pattern!r}: {e}") from e
        self.case_sensitive = case_sensitive

    def matches(self, line: str) -> bool:
        return any(p.search(line) for p in self.patterns)

    def __repr__(self) -> str:
        return f"RegexMatcher(patterns={[p.pattern for p in self.patterns]!r})"


MATCHERS = {
    "substring": SubstringMatcher,
    "regex": RegexMatcher,
}


def build_matcher(match_config: Optional[Dict[str, Any]] = None) -> LineMatcher:
    """Build the matcher named by ``match_config['rule']``.

    Missing keys fall back to the default rule: a case-insensitive
    substring search for ``error:``.
    """
    match_config = match_config or {}
    rule = match_config.get("rule", "substring")

    if rule not in MATCHERS:
        raise ValueError(f"Unknown match rule: {rule} (expected one of {', '.join(MATCHERS)})")

    patterns = match_config.get("patterns") or DEFAULT_MARKERS
    case_sensitive = bool(match_config.get("case_sensitive", False))
    return MATCHERS[rule](patterns, case_sensitive=case_sensitive)
