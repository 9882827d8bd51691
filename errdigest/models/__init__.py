from .match_record import MatchRecord
from .source_file import SourceFile
from .run_summary import RunSummary

__all__ = ["MatchRecord", "SourceFile", "RunSummary"]
