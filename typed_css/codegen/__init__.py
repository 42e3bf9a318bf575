"""
Code generation module for the typed-css declaration generator.

This module provides TypeScript declaration generation from CSS-module
class names.
"""

from .keywords import RESERVED_KEYWORDS
from .naming import is_reserved_keyword, is_kebab_case, sanitise_kebab_case
from .declarations import (
    BannerOptions,
    DEFAULT_BANNER,
    RESERVED_KEYWORD_COMMENT,
    KEBAB_CASE_COMMENT,
    build_banner,
    build_named_exports,
    build_default_export,
    build_ts_exports,
)
from .diagnostics import GeneratorDiagnostics, Diagnostic, DiagnosticSeverity

__all__ = [
    'RESERVED_KEYWORDS',
    'is_reserved_keyword',
    'is_kebab_case',
    'sanitise_kebab_case',
    'BannerOptions',
    'DEFAULT_BANNER',
    'RESERVED_KEYWORD_COMMENT',
    'KEBAB_CASE_COMMENT',
    'build_banner',
    'build_named_exports',
    'build_default_export',
    'build_ts_exports',
    'GeneratorDiagnostics',
    'Diagnostic',
    'DiagnosticSeverity',
]
