class DigestError(Exception):
    """Base class for failures that abort a run."""


class FileListError(DigestError):
    """The input file list could not be opened or read."""


class OutputWriteError(DigestError):
    """The Markdown report could not be created or written."""


class ConfigError(DigestError):
    """The configuration file is unreadable or invalid."""
