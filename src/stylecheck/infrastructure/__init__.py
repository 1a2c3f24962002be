"""Infrastructure: input parsing and configuration files."""

from stylecheck.infrastructure.config_loader import find_pyproject, load_config
from stylecheck.infrastructure.record_reader import parse_line, read_lines, read_path

__all__ = [
    "find_pyproject",
    "load_config",
    "parse_line",
    "read_lines",
    "read_path",
]
