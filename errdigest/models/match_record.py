from dataclasses import dataclass


@dataclass(frozen=True)
class MatchRecord:
    message: str
    source_path: str
    line_number: int
    index: int = 0
