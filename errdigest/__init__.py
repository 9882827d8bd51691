"""Scan listed source files for error lines and summarize them as a Markdown table."""

__version__ = "0.1.0"
