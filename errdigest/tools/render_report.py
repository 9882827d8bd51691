from typing import Iterable
from errdigest.models import MatchRecord


DEFAULT_TITLE = "相关错误信息汇总"

# (报错日志 = error log, 文件路径 = file path, 行号 = line number)
TABLE_HEADER = "| 报错日志 | 文件路径 | 行号 |\n"
TABLE_SEPARATOR = "| -------- | -------- | ---- |\n"


def escape_pipes(text: str) -> str:
    """Escape pipes so a message cannot add table columns."""
    return text.replace("|", "\\|")


def render_row(record: MatchRecord) -> str:
    return f"| {escape_pipes(record.message)} | {record.source_path} | {record.line_number} |\n"


def render_report(records: Iterable[MatchRecord], title: str = DEFAULT_TITLE) -> str:
    """Render records as a Markdown document with a single table.

    An empty ``records`` still yields the title, header and separator rows.
    """
    parts = [f"# {title}\n\n", TABLE_HEADER, TABLE_SEPARATOR]
    parts.extend(render_row(record) for record in records)
    return "".join(parts)
