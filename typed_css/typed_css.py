#!/usr/bin/env python3
"""
Typed CSS: TypeScript declarations for CSS modules.

Reads the JavaScript emitted by a CSS-module build step, e.g.

    module.exports = {
        "main": "page_main__ibFHK",
        "code": "page_code__Cdcue",
    };
    module.exports.__checksum = "ae6837329564"

and writes a sibling `.d.ts` file exposing each class name as a typed
named export plus a default `styles` object.

Usage:
    typed-css dist/styles/
    typed-css dist/button.module.css.js --stdout

Module structure:
- lexer: Tokenization (tokens.py, lexer.py)
- parser: Exports block parsing (ast_nodes.py, parser.py)
- codegen: Declaration builders and diagnostics
"""

import json
import sys
from pathlib import Path
from typing import Dict, List, Mapping, Optional

from .parser import get_css_module_keys, parse_exports_block
from .codegen import (
    BannerOptions,
    GeneratorDiagnostics,
    build_banner,
    build_ts_exports,
    is_kebab_case,
    is_reserved_keyword,
)


CONFIG_FILE_NAME = 'typed-css.json'
DEFAULT_PATTERN = '**/*.css.js'


def build_declaration(source: str, options: Optional[Mapping] = None) -> Optional[str]:
    """Build the full declaration file for CSS-module output.

    Returns None when the source has no class names to declare.
    """
    keys = get_css_module_keys(source)
    if not keys:
        return None
    return build_banner(options) + build_ts_exports(keys)


class TypedCss:
    """Main generator class that orchestrates reading, building and writing declarations."""

    def __init__(
        self,
        options: Optional[Mapping] = None,
        output_dir: Optional[str] = None,
        config_file: Optional[str] = None,
        diagnostics: Optional[GeneratorDiagnostics] = None,
    ):
        self.output_dir = Path(output_dir) if output_dir else None
        self.diagnostics = diagnostics or GeneratorDiagnostics()

        # Options passed in take precedence over the config file
        merged: Dict = {}
        if config_file:
            merged.update(self._load_config(Path(config_file)))
        if options:
            merged.update(options)
        self.options = BannerOptions.from_mapping(merged)

    def _load_config(self, config_path: Path) -> Dict:
        """Load generator options from a JSON config file."""
        if not config_path.exists():
            return {}
        try:
            with open(config_path, 'r') as f:
                config = json.load(f)
            if not isinstance(config, dict):
                raise ValueError('expected a JSON object')
            return config
        except (json.JSONDecodeError, ValueError, OSError) as e:
            print(f"Warning: Failed to load {config_path}: {e}", file=sys.stderr)
            return {}

    def transpile_source(self, source: str, file_path: str = '') -> Optional[str]:
        """Build the declaration for CSS-module output, recording diagnostics."""
        try:
            block = parse_exports_block(source)
        except SyntaxError:
            block = None

        if block is None or not block.entries:
            self.diagnostics.info_no_exports(file_path)
            return None

        seen = set()
        for entry in block.entries:
            if is_reserved_keyword(entry.key):
                self.diagnostics.warn_reserved_keyword(entry.key, file_path, entry.line)
            elif is_kebab_case(entry.key):
                self.diagnostics.warn_hyphenated_name(entry.key, file_path, entry.line)
            if entry.key in seen:
                self.diagnostics.warn_duplicate_key(entry.key, file_path, entry.line)
            seen.add(entry.key)

        return build_banner(self.options) + build_ts_exports(block.keys)

    def transpile_file(self, filepath: str) -> Optional[str]:
        """Build the declaration for a single CSS-module output file."""
        with open(filepath, 'r', encoding='utf-8') as f:
            source = f.read()
        return self.transpile_source(source, filepath)

    def declaration_path(self, filepath: str) -> Path:
        """Return where the declaration for a file goes.

        `button.module.css.js` becomes `button.module.css.d.ts`, next to the
        input unless an output directory was given.
        """
        path = Path(filepath)
        name = path.stem if path.suffix == '.js' else path.name
        directory = self.output_dir if self.output_dir is not None else path.parent
        return directory / f'{name}.d.ts'

    def transpile_directory(self, directory: str, pattern: str = DEFAULT_PATTERN) -> Dict[str, str]:
        """Build declarations for all files matching the pattern.

        Files without class names are skipped. Output keeps the directory
        layout relative to `directory` when an output directory is set.
        """
        source_dir = Path(directory)
        results = {}
        for css_file in sorted(source_dir.glob(pattern)):
            try:
                declaration = self.transpile_file(str(css_file))
            except (OSError, UnicodeDecodeError) as e:
                print(f"Error transpiling {css_file}: {e}", file=sys.stderr)
                continue
            if declaration is None:
                continue

            out_path = self.declaration_path(str(css_file))
            if self.output_dir is not None:
                rel_parent = css_file.parent.relative_to(source_dir)
                out_path = self.output_dir / rel_parent / out_path.name
            results[str(out_path)] = declaration
        return results

    def write_output(self, results: Dict[str, str]) -> None:
        """Write declaration files to disk."""
        for filepath, content in results.items():
            path = Path(filepath)
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, 'w', encoding='utf-8') as f:
                f.write(content)
            print(f"Written: {filepath}")


# =============================================================================
# CLI INTERFACE
# =============================================================================

def main(argv: Optional[List[str]] = None):
    import argparse

    parser = argparse.ArgumentParser(description='Generate TypeScript declarations for CSS modules')
    parser.add_argument('input', help='CSS-module output file or directory')
    parser.add_argument('-o', '--output', help='Output directory (default: next to each input)')
    parser.add_argument('--stdout', action='store_true', help='Print to stdout instead of file')
    parser.add_argument('--pattern', default=DEFAULT_PATTERN,
                        help='Glob for CSS-module output files in directory mode')
    parser.add_argument('--config', metavar='FILE',
                        help=f'JSON options file (default: ./{CONFIG_FILE_NAME} if present)')
    banner_group = parser.add_mutually_exclusive_group()
    banner_group.add_argument('--banner', metavar='TEXT', help='Custom banner comment')
    banner_group.add_argument('--no-banner', action='store_true', help='Omit the banner comment')
    parser.add_argument('-v', '--verbose', action='store_true', help='List every diagnostic')

    args = parser.parse_args(argv)

    options = {}
    if args.no_banner:
        options['banner'] = False
    elif args.banner is not None:
        options['banner'] = args.banner

    input_path = Path(args.input)
    typed_css = TypedCss(
        options=options,
        output_dir=args.output,
        config_file=args.config or CONFIG_FILE_NAME,
        diagnostics=GeneratorDiagnostics(verbose=args.verbose),
    )

    if input_path.is_file():
        declaration = typed_css.transpile_file(str(input_path))
        if declaration is None:
            print(f"No CSS module exports found in {input_path}", file=sys.stderr)
        elif args.stdout:
            print(declaration, end='')
        else:
            typed_css.write_output({str(typed_css.declaration_path(str(input_path))): declaration})

    elif input_path.is_dir():
        results = typed_css.transpile_directory(str(input_path), args.pattern)
        if args.stdout:
            for filepath, declaration in results.items():
                print(f"// {filepath}")
                print(declaration, end='')
        else:
            typed_css.write_output(results)
    else:
        print(f"Error: {args.input} is not a valid file or directory")
        sys.exit(1)

    typed_css.diagnostics.print_summary()


if __name__ == '__main__':
    main()
