"""
Parser module for the typed-css declaration generator.

This module provides the syntax nodes and the parser that locates the
class name mapping inside generated CSS-module output.
"""

from .ast_nodes import ExportEntry, ExportsBlock
from .parser import Parser, parse_exports_block, get_css_module_keys

__all__ = [
    'ExportEntry',
    'ExportsBlock',
    'Parser',
    'parse_exports_block',
    'get_css_module_keys',
]
