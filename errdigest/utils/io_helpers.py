from pathlib import Path
from typing import List, Union


def read_text(path: Union[str, Path], errors: str = 'strict') -> str:
    """Read text file and return contents."""
    with open(path, 'r', encoding='utf-8', errors=errors) as f:
        return f.read()


def read_lines(path: Union[str, Path]) -> List[str]:
    """Read a text file and return its stripped, non-blank lines."""
    lines = []
    with open(path, 'r', encoding='utf-8-sig') as f:
        for line in f:
            line = line.strip()
            if line:
                lines.append(line)
    return lines


def write_text(path: Union[str, Path], content: str) -> None:
    """Write text to file, replacing any previous content."""
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        f.write(content)


def ensure_dir(path: Union[str, Path]) -> Path:
    """Ensure directory exists."""
    p = Path(path)
    p.mkdir(parents=True, exist_ok=True)
    return p
