import logging
from pathlib import Path
from typing import Any, Dict, List, Optional
import typer
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.logging import RichHandler
from errdigest.errors import ConfigError, DigestError
from errdigest.models import RunSummary
from errdigest.orchestrator.engine import run_pipeline, Event
from errdigest.tools import build_matcher
from errdigest.utils import load_config, validate_config, write_text, ensure_dir


# Setup logging
logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
    handlers=[RichHandler(rich_tracebacks=True)]
)
logger = logging.getLogger(__name__)

# CLI setup
app = typer.Typer(help="Summarize error lines of listed source files as a Markdown table")
console = Console()


def _load_configuration(config_path: Optional[Path]) -> Dict[str, Any]:
    """Load configuration file and surface friendly errors."""
    try:
        return load_config(config_path)
    except ConfigError as exc:
        console.print(f"[red]Error loading config: {exc}[/red]")
        raise typer.Exit(1)


def setup_logging(verbose: bool = False, log_file: Optional[str] = None):
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.INFO
    root = logging.getLogger()
    root.setLevel(level)

    # Update console handler
    for handler in root.handlers:
        if isinstance(handler, RichHandler):
            handler.setLevel(level)

    if not log_file:
        return

    log_path = Path(log_file).resolve()
    for handler in root.handlers:
        if isinstance(handler, logging.FileHandler) and Path(handler.baseFilename) == log_path:
            return

    # Also log to file (always at INFO level)
    ensure_dir(log_path.parent)
    file_handler = logging.FileHandler(log_path, encoding="utf-8")
    file_handler.setFormatter(
        logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    )
    file_handler.setLevel(logging.INFO)
    root.addHandler(file_handler)


def _apply_overrides(
    cfg: Dict[str, Any],
    patterns: Optional[List[str]],
    regex: bool,
    case_sensitive: bool
) -> Dict[str, Any]:
    """Fold match-related command line options into the config."""
    match_cfg = dict(cfg.get("match", {}))
    if patterns:
        match_cfg["patterns"] = patterns
    if regex:
        match_cfg["rule"] = "regex"
    if case_sensitive:
        match_cfg["case_sensitive"] = True
    cfg["match"] = match_cfg
    return cfg


def _render_summary(summary: RunSummary) -> None:
    """Show what the run found and where the report went."""
    table = Table(title="Scan Results")
    table.add_column("Item", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Listed Files", str(summary.files_listed))
    table.add_row("Scanned Files", str(summary.files_scanned))
    table.add_row("Skipped Files", str(summary.files_skipped))
    table.add_row("├─ Extension", str(len(summary.skipped_extension)))
    table.add_row("├─ Missing", str(len(summary.missing)))
    table.add_row("└─ Unreadable", str(len(summary.unreadable)))
    table.add_row("Error Lines", str(summary.total_matches))

    for step, duration in summary.timings.items():
        table.add_row(f"Time: {step}", f"{duration:.3f}s")

    console.print(table)
    console.print(f"\n[bold]📁 Report saved to:[/bold] {summary.output_path}")


def _run_scan(
    file_list: Path,
    cfg: Dict[str, Any],
    output: Optional[Path] = None,
    base_dir: Optional[Path] = None,
    extensions: Optional[List[str]] = None
) -> RunSummary:
    """Run the pipeline and turn fatal failures into exit code 1."""
    try:
        matcher = build_matcher(cfg.get("match"))
    except ValueError as exc:
        console.print(f"[red]Invalid match rule: {exc}[/red]")
        raise typer.Exit(1)

    def handle_event(event: Event):
        if event.kind == "file_skipped" and event.payload["reason"] == "missing":
            console.print(f"[yellow]Skipped missing file: {event.payload['path']}[/yellow]")
        elif event.kind == "file_skipped" and event.payload["reason"] == "unreadable":
            console.print(f"[yellow]Skipped unreadable file: {event.payload['path']}[/yellow]")

    try:
        with console.status("[bold green]Scanning files..."):
            summary = run_pipeline(
                file_list,
                output_path=output,
                base_dir=base_dir,
                matcher=matcher,
                config=cfg,
                extensions=extensions,
                on_event=handle_event
            )
    except DigestError as exc:
        console.print(f"\n[red]Error: {exc}[/red]")
        logger.debug("Scan failed", exc_info=True)
        raise typer.Exit(1)

    _render_summary(summary)
    return summary


@app.command()
def scan(
    file_list: Path = typer.Argument(..., help="Text file listing one source path per line"),
    output: Optional[Path] = typer.Option(None, "-o", "--output", help="Markdown report path"),
    base_dir: Optional[Path] = typer.Option(None, "-b", "--base-dir", help="Directory listed paths are relative to"),
    extensions: Optional[List[str]] = typer.Option(None, "-e", "--ext", help="Source file extension (repeatable)"),
    patterns: Optional[List[str]] = typer.Option(None, "-p", "--pattern", help="Error marker or regex (repeatable)"),
    regex: bool = typer.Option(False, "--regex", help="Treat patterns as regular expressions"),
    case_sensitive: bool = typer.Option(False, "--case-sensitive", help="Match patterns case-sensitively"),
    config: Optional[Path] = typer.Option(None, "-c", "--config", help="Custom config file"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable verbose output")
):
    """Scan the listed files and write the Markdown error table."""
    cfg = _load_configuration(config)
    setup_logging(verbose, cfg.get("logging", {}).get("file"))
    cfg = _apply_overrides(cfg, patterns, regex, case_sensitive)
    problems = validate_config(cfg)
    if problems:
        console.print(f"[red]Invalid options: {'; '.join(problems)}[/red]")
        raise typer.Exit(1)

    console.print(Panel.fit(
        f"[bold blue]Scanning for error lines[/bold blue]\n"
        f"File list: {file_list}\n"
        f"Base dir: {base_dir or cfg['scan']['base_dir']}\n"
        f"Rule: {cfg['match']['rule']} {cfg['match']['patterns']}",
        title="🔍 Error Digest"
    ))

    _run_scan(file_list, cfg, output=output, base_dir=base_dir, extensions=extensions)


@app.command()
def demo(
    output: Optional[Path] = typer.Option(None, "-o", "--output", help="Markdown report path")
):
    """Run demo with sample data."""
    console.print("[bold]Running demo scan...[/bold]")

    # Use sample files
    sample_dir = Path("samples")
    file_list = sample_dir / "files.txt"

    # Check if samples exist
    if not file_list.exists():
        console.print("[yellow]Creating sample files...[/yellow]")
        create_sample_files(sample_dir)

    cfg = _load_configuration(None)
    setup_logging(False, cfg.get("logging", {}).get("file"))
    _run_scan(file_list, cfg, output=output, base_dir=sample_dir)


def create_sample_files(sample_dir: Path = Path("samples")):
    """Create sample Go sources and a file list for the demo."""
    samples_dir = ensure_dir(sample_dir)
    ensure_dir(samples_dir / "service")

    server_go = """package main

import (
	"fmt"
	"log"
	"net/http"
)

func main() {
	http.HandleFunc("/health", health)
	if err := http.ListenAndServe(":8080", nil); err != nil {
		log.Fatalf("error: server stopped: %v", err)
	}
}

func health(w http.ResponseWriter, r *http.Request) {
	fmt.Fprintln(w, "ok")
}
"""

    store_go = """package service

import "fmt"

type Store struct {
	items map[string]string
}

func (s *Store) Get(key string) (string, error) {
	v, ok := s.items[key]
	if !ok {
		return "", fmt.Errorf("Error: key %q not found | store=%p", key, s)
	}
	return v, nil
}

func (s *Store) Put(key, value string) error {
	if key == "" {
		return fmt.Errorf("ERROR: empty key")
	}
	s.items[key] = value
	return nil
}
"""

    file_list = """./main.go
./service/store.go
README.md
./service/missing.go
"""

    write_text(samples_dir / "main.go", server_go)
    write_text(samples_dir / "service" / "store.go", store_go)
    write_text(samples_dir / "files.txt", file_list)

    console.print("[green]Sample files created successfully![/green]")


if __name__ == "__main__":
    app()
