"""
Syntax nodes produced by the CSS-module output parser.

The parser only models the local-to-global class name mapping; the
generated values are kept as raw source text and never evaluated.
"""

from dataclasses import dataclass, field
from typing import List


@dataclass
class ExportEntry:
    """A single `"key": value` entry of the exports object."""
    key: str
    value: str = ''
    line: int = 0
    column: int = 0


@dataclass
class ExportsBlock:
    """The `module.exports = { ... }` assignment."""
    entries: List[ExportEntry] = field(default_factory=list)
    line: int = 0
    column: int = 0

    @property
    def keys(self) -> List[str]:
        return [entry.key for entry in self.entries]
