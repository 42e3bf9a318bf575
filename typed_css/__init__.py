"""
Typed CSS

Generates TypeScript ambient declarations for the class names exported by
CSS-module build output.

Module Structure:
- lexer/: Tokenization (TokenType, Token, Lexer)
- parser/: Exports block parsing (Parser, get_css_module_keys)
- codegen/: Declaration builders and diagnostics
- typed_css.py: File/directory driver and command line entry point

Usage:
    from typed_css import get_css_module_keys, build_banner, build_ts_exports

    keys = get_css_module_keys(source)
    if keys:
        declaration = build_banner() + build_ts_exports(keys)
"""

from .parser import get_css_module_keys
from .codegen import (
    BannerOptions,
    build_banner,
    build_default_export,
    build_named_exports,
    build_ts_exports,
    is_reserved_keyword,
    sanitise_kebab_case,
)
from .typed_css import TypedCss, build_declaration, main

__all__ = [
    'get_css_module_keys',
    'BannerOptions',
    'build_banner',
    'build_default_export',
    'build_named_exports',
    'build_ts_exports',
    'is_reserved_keyword',
    'sanitise_kebab_case',
    'TypedCss',
    'build_declaration',
    'main',
]
