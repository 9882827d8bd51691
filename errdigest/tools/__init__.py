from .matchers import LineMatcher, SubstringMatcher, RegexMatcher, build_matcher
from .search_errors import ErrorSearcher, search_errors
from .aggregate import assign_indices
from .render_report import render_report, escape_pipes, DEFAULT_TITLE

__all__ = [
    "LineMatcher", "SubstringMatcher", "RegexMatcher", "build_matcher",
    "ErrorSearcher", "search_errors", "assign_indices",
    "render_report", "escape_pipes", "DEFAULT_TITLE"
]
