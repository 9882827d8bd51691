from dataclasses import dataclass, field
from typing import Dict, List


@dataclass
class RunSummary:
    total_matches: int
    files_listed: int
    files_scanned: int
    output_path: str
    skipped_extension: List[str] = field(default_factory=list)
    missing: List[str] = field(default_factory=list)
    unreadable: List[str] = field(default_factory=list)
    timings: Dict[str, float] = field(default_factory=dict)

    @property
    def files_skipped(self) -> int:
        return len(self.skipped_extension) + len(self.missing) + len(self.unreadable)
