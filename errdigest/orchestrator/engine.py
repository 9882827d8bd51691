import logging
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, NamedTuple, Optional, Union
from errdigest.errors import FileListError, OutputWriteError
from errdigest.models import MatchRecord, RunSummary, SourceFile
from errdigest.tools import ErrorSearcher, LineMatcher, assign_indices, build_matcher, render_report
from errdigest.tools.render_report import DEFAULT_TITLE
from errdigest.utils import FileAccess, LocalFileAccess, Timer, load_config, normalize_extensions


logger = logging.getLogger(__name__)


class Event(NamedTuple):
    """Event emitted during pipeline execution."""
    kind: str
    payload: Dict[str, Any]


def strip_dot_slash(listed_path: str) -> str:
    """Drop a single leading ``./`` from a listed path."""
    return listed_path[2:] if listed_path.startswith("./") else listed_path


def has_source_extension(path: str, extensions: Iterable[str]) -> bool:
    lowered = path.lower()
    return any(lowered.endswith(ext) for ext in extensions)


def run_pipeline(
    file_list_path: Union[str, Path],
    output_path: Optional[Union[str, Path]] = None,
    base_dir: Optional[Union[str, Path]] = None,
    matcher: Optional[LineMatcher] = None,
    config: Optional[Dict[str, Any]] = None,
    file_access: Optional[FileAccess] = None,
    extensions: Optional[Iterable[str]] = None,
    on_event: Callable[[Event], None] = lambda e: None
) -> RunSummary:
    """Scan every listed source file and write the Markdown error report.

    Explicit arguments win over ``config``. Missing or unreadable source
    files are logged and skipped. Raises ``FileListError`` when the list
    cannot be read and ``OutputWriteError`` when the report cannot be
    written.
    """
    timer = Timer()
    config = config or load_config()
    files = file_access or LocalFileAccess()

    base_dir = base_dir if base_dir is not None else config['scan']['base_dir']
    output_path = output_path if output_path is not None else config['output']['path']
    extensions = normalize_extensions(extensions or config['scan']['extensions'])
    searcher = ErrorSearcher(matcher or build_matcher(config.get('match')))
    title = config.get('output', {}).get('title') or DEFAULT_TITLE

    # Step 1: Read the file list
    with timer.time("read_list"):
        try:
            listed_paths = files.read_file_list(file_list_path)
        except (OSError, ValueError) as e:
            raise FileListError(f"Failed to read file list {file_list_path}: {e}") from e
        logger.info(f"Read {len(listed_paths)} paths from {file_list_path}")
        on_event(Event("file_list_read", {"path": str(file_list_path), "count": len(listed_paths)}))

    summary = RunSummary(
        total_matches=0,
        files_listed=len(listed_paths),
        files_scanned=0,
        output_path=str(output_path)
    )
    batches: List[List[MatchRecord]] = []

    # Step 2: Search each file in list order
    with timer.time("scan_files"):
        for listed_path in listed_paths:
            relative_path = strip_dot_slash(listed_path)

            if not has_source_extension(relative_path, extensions):
                logger.debug(f"Skipping {relative_path}: not a source file")
                summary.skipped_extension.append(relative_path)
                on_event(Event("file_skipped", {"path": relative_path, "reason": "extension"}))
                continue

            full_path = files.resolve(base_dir, relative_path)
            if not files.exists(full_path):
                logger.warning(f"File not found: {full_path}")
                summary.missing.append(relative_path)
                on_event(Event("file_skipped", {"path": relative_path, "reason": "missing"}))
                continue

            try:
                source = SourceFile(relative_path=relative_path, raw_content=files.read_file(full_path))
            except (OSError, ValueError) as e:
                logger.warning(f"Failed to read {listed_path}: {e}")
                summary.unreadable.append(relative_path)
                on_event(Event("file_skipped", {
                    "path": relative_path,
                    "reason": "unreadable",
                    "error": str(e)
                }))
                continue

            matches = searcher.search(source.raw_content, source.relative_path)
            batches.append(matches)
            summary.files_scanned += 1
            logger.debug(f"{relative_path}: {len(matches)} matches")
            on_event(Event("file_scanned", {"path": relative_path, "matches": len(matches)}))

    # Step 3: Number the records and render the report
    with timer.time("render"):
        records = assign_indices(batches)
        report = render_report(records, title=title)
        summary.total_matches = records[-1].index if records else 0

    # Step 4: Write the report once
    with timer.time("write_output"):
        try:
            files.write_output(output_path, report)
        except OSError as e:
            raise OutputWriteError(f"Failed to write output file {output_path}: {e}") from e
        logger.info(f"Wrote {summary.total_matches} matches to {output_path}")
        on_event(Event("report_written", {
            "path": str(output_path),
            "total_matches": summary.total_matches
        }))

    summary.timings = timer.get_summary()
    return summary
