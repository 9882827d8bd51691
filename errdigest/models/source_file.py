from dataclasses import dataclass


@dataclass(frozen=True)
class SourceFile:
    relative_path: str
    raw_content: str
