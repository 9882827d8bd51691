from pathlib import Path
from typing import List, Protocol, Union
from errdigest.utils.io_helpers import read_lines, read_text, write_text


class FileAccess(Protocol):
    """File-system capabilities used by the pipeline."""

    def read_file_list(self, path: Union[str, Path]) -> List[str]:
        """Return the non-blank, trimmed lines of the list file."""
        ...

    def resolve(self, base_dir: Union[str, Path], relative: str) -> Path:
        ...

    def exists(self, path: Path) -> bool:
        ...

    def read_file(self, path: Path) -> str:
        ...

    def write_output(self, path: Union[str, Path], content: str) -> None:
        """Create or truncate ``path`` and write ``content`` to it."""
        ...


class LocalFileAccess:
    """FileAccess backed by the local disk."""

    def read_file_list(self, path: Union[str, Path]) -> List[str]:
        return read_lines(path)

    def resolve(self, base_dir: Union[str, Path], relative: str) -> Path:
        return Path(base_dir) / relative

    def exists(self, path: Path) -> bool:
        return path.is_file()

    def read_file(self, path: Path) -> str:
        # Undecodable bytes must not cost us the rest of the file
        return read_text(path, errors='replace')

    def write_output(self, path: Union[str, Path], content: str) -> None:
        write_text(path, content)
