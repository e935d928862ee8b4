"""
Shared test infrastructure for hilite.

Modules:
- file_utils: writing source and config files
- highlight_utils: running pipeline stages and reading semantic-theme markup
- cli_utils: running the CLI as a subprocess
"""

from .file_utils import write, write_config
from .highlight_utils import classified, hl, marked, semantic_highlighter, shielded
from .cli_utils import run_cli, jload

__all__ = [
    "write",
    "write_config",
    "classified",
    "hl",
    "marked",
    "semantic_highlighter",
    "shielded",
    "run_cli",
    "jload",
]
