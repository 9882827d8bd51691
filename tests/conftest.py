from pathlib import Path
from typing import Dict, List, Optional
import pytest
from errdigest.utils import load_config


class InMemoryFileAccess:
    """FileAccess over a dict of path -> content, for pipeline tests."""

    def __init__(self, files: Dict[str, str], file_list: Optional[List[str]] = None,
                 unreadable: Optional[List[str]] = None, fail_write: bool = False):
        self.files = files
        self.file_list = file_list
        self.unreadable = set(unreadable or [])
        self.fail_write = fail_write
        self.reads: List[str] = []
        self.outputs: Dict[str, str] = {}

    def read_file_list(self, path) -> List[str]:
        if self.file_list is None:
            raise FileNotFoundError(f"No such file: {path}")
        return [line.strip() for line in self.file_list if line.strip()]

    def resolve(self, base_dir, relative: str) -> Path:
        return Path(base_dir) / relative

    def exists(self, path: Path) -> bool:
        return str(path) in self.files

    def read_file(self, path: Path) -> str:
        self.reads.append(str(path))
        if str(path) in self.unreadable:
            raise PermissionError(f"Permission denied: {path}")
        return self.files[str(path)]

    def write_output(self, path, content: str) -> None:
        if self.fail_write:
            raise PermissionError(f"Permission denied: {path}")
        self.outputs[str(path)] = content


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep env overrides and .env files from leaking into tests."""
    for name in ("ERRDIGEST_BASE_DIR", "ERRDIGEST_OUTPUT", "ERRDIGEST_EXTENSIONS"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def config():
    cfg = load_config()
    cfg["logging"]["file"] = ""
    return cfg


@pytest.fixture
def go_tree(tmp_path):
    """A base directory with a couple of Go files and a list file."""
    base = tmp_path / "repo"
    (base / "pkg").mkdir(parents=True)
    (base / "a.go").write_text("line1\nERROR: bad thing\nline3", encoding="utf-8")
    (base / "pkg" / "b.go").write_text(
        "package pkg\n"
        "// error: first | second\n"
        "func f() {}\n"
        "    return fmt.Errorf(\"Error: wrapped\")  \n",
        encoding="utf-8"
    )
    (base / "notes.txt").write_text("error: not a source file\n", encoding="utf-8")
    list_file = tmp_path / "files.txt"
    list_file.write_text("./a.go\n\nnotes.txt\n./pkg/b.go\nmissing.go\n", encoding="utf-8")
    return base, list_file


@pytest.fixture
def memory_access():
    return InMemoryFileAccess
