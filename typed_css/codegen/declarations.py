"""
TypeScript declaration builders.

Each builder is a pure function from a list of class names (and, for the
banner, the generator options) to a block of declaration text. The
orchestrator `build_ts_exports` sorts the names and joins the named and
default export blocks.
"""

from dataclasses import dataclass
from typing import List, Mapping, Optional, Union

from .naming import is_kebab_case, is_reserved_keyword, sanitise_kebab_case


# =============================================================================
# MESSAGES
# =============================================================================

DEFAULT_BANNER = '// This is an auto generated file.\n// Please do not edit.\n\n'

COMMENT_PREFIX = "Hey, Typed CSS here! Just to let you know I commented this type because"
RESERVED_KEYWORD_COMMENT = f"// {COMMENT_PREFIX} it's a reserved Javascript keyword."
KEBAB_CASE_COMMENT = f"// {COMMENT_PREFIX} it contains a hyphen."

INDENT = '\t'


@dataclass
class BannerOptions:
    """Generator options. `banner` is False (none), a custom line, or None (default)."""
    banner: Union[bool, str, None] = None

    @classmethod
    def from_mapping(cls, options: Optional[Mapping]) -> 'BannerOptions':
        if not options:
            return cls()
        return cls(banner=options.get('banner'))


OptionsLike = Union[BannerOptions, Mapping, None]


# =============================================================================
# BUILDERS
# =============================================================================

def build_banner(options: OptionsLike = None) -> str:
    """Build the comment banner placed at the top of a declaration file."""
    if not isinstance(options, BannerOptions):
        options = BannerOptions.from_mapping(options)

    if options.banner is False:
        return ''
    # An empty custom banner falls back to the default notice
    if not options.banner:
        return DEFAULT_BANNER
    return f'// {options.banner}\n\n'


def _named_export(key: str) -> str:
    return f'export const {key}: string;'


def build_named_exports(keys: List[str]) -> str:
    """Build one `export const` line per class name.

    Names that can never be a `const` binding (reserved keywords and
    hyphenated names) are commented out with an explanation.
    """
    lines = []
    for key in keys:
        if is_reserved_keyword(key):
            lines.append(RESERVED_KEYWORD_COMMENT)
            lines.append(f'// {_named_export(key)}')
        elif is_kebab_case(key):
            lines.append(KEBAB_CASE_COMMENT)
            lines.append(f'// {_named_export(key)}')
        else:
            lines.append(_named_export(key))
    return ''.join(f'{line}\n' for line in lines)


def build_default_export(keys: List[str]) -> str:
    """Build the `styles` object declaration and its default export."""
    if not keys:
        return ''

    lines = ['declare const styles: {']
    for key in keys:
        lines.append(f'{INDENT}{sanitise_kebab_case(key)}: string;')
    lines.append('};')
    lines.append('')
    lines.append('export default styles;')
    return '\n'.join(lines) + '\n'


def build_ts_exports(keys: Optional[List[str]]) -> str:
    """Build the named and default exports for the given class names.

    Names are sorted so the output does not depend on the order the build
    step emitted them in.
    """
    if not keys:
        return ''

    sorted_keys = sorted(keys)
    return build_named_exports(sorted_keys) + '\n' + build_default_export(sorted_keys)
