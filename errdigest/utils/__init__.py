from .io_helpers import read_text, read_lines, write_text, ensure_dir
from .file_access import FileAccess, LocalFileAccess
from .timers import Timer
from .config_loader import load_config, normalize_extensions
from .validators import validate_config

__all__ = [
    "read_text", "read_lines", "write_text", "ensure_dir",
    "FileAccess", "LocalFileAccess", "Timer", "load_config", "normalize_extensions",
    "validate_config"
]
