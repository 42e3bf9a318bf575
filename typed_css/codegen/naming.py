"""
Identifier classification for generated declarations.
"""

from .keywords import RESERVED_KEYWORDS


def is_reserved_keyword(name: str) -> bool:
    """Check if a class name is a reserved JavaScript keyword."""
    return name in RESERVED_KEYWORDS


def is_kebab_case(name: str) -> bool:
    """Check if a class name contains a hyphen."""
    return '-' in name


def sanitise_kebab_case(name: str) -> str:
    """Quote a hyphenated class name so it is a valid object property key."""
    if is_kebab_case(name):
        return f'"{name}"'
    return name
