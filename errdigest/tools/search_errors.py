from typing import List, Optional
from errdigest.models import MatchRecord
from errdigest.tools.matchers import LineMatcher, SubstringMatcher


class ErrorSearcher:
    """Finds error lines in one file's content."""

    def __init__(self, matcher: Optional[LineMatcher] = None):
        self.matcher = matcher or SubstringMatcher()

    def search(self, content: str, source_label: str) -> List[MatchRecord]:
        """Return one unindexed record per matching line, in line order."""
        matches = []

        for line_no, line in enumerate(content.split('\n'), 1):
            if self.matcher.matches(line):
                matches.append(MatchRecord(
                    message=line.strip(),
                    source_path=source_label,
                    line_number=line_no
                ))

        return matches


def search_errors(content: str, source_label: str, matcher: Optional[LineMatcher] = None) -> List[MatchRecord]:
    """Search ``content`` with ``matcher`` (default rule when omitted)."""
    return ErrorSearcher(matcher).search(content, source_label)
