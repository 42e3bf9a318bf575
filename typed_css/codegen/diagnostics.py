"""
Diagnostic/warning system for the declaration generator.

Collects and reports class names that could not be exposed as named
exports, and generated files that had nothing to declare.
"""

import sys
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional


class DiagnosticSeverity(Enum):
    """Severity levels for generator diagnostics."""
    WARNING = 'warning'
    INFO = 'info'


@dataclass
class Diagnostic:
    """A single diagnostic message."""
    severity: DiagnosticSeverity
    code: str
    message: str
    file_path: str = ''
    line: Optional[int] = None
    construct: str = ''  # e.g., 'reserved keyword', 'hyphen'

    def __str__(self) -> str:
        location = self.file_path
        if self.line:
            location = f'{location}:{self.line}'
        if location:
            return f'[{self.severity.value}] {location}: {self.message} ({self.code})'
        return f'[{self.severity.value}] {self.message} ({self.code})'


class GeneratorDiagnostics:
    """
    Collects generator warnings/diagnostics while declarations are built.

    Usage:
        diag = GeneratorDiagnostics()
        diag.warn_reserved_keyword("class", "button.module.css.js", line=3)
        # ... after generation ...
        diag.print_summary()
    """

    def __init__(self, verbose: bool = False):
        self._diagnostics: List[Diagnostic] = []
        self._verbose = verbose

    @property
    def diagnostics(self) -> List[Diagnostic]:
        """Get all collected diagnostics."""
        return list(self._diagnostics)

    @property
    def warnings(self) -> List[Diagnostic]:
        """Get only warning-level diagnostics."""
        return [d for d in self._diagnostics if d.severity == DiagnosticSeverity.WARNING]

    # =========================================================================
    # SPECIFIC WARNING METHODS
    # =========================================================================

    def warn_reserved_keyword(
        self,
        class_name: str,
        file_path: str = '',
        line: Optional[int] = None,
    ) -> None:
        """Warn that a named export was commented out because it is a keyword."""
        self._diagnostics.append(Diagnostic(
            severity=DiagnosticSeverity.WARNING,
            code='W001',
            message=f'Class "{class_name}" is a reserved keyword; '
                    f'use styles["{class_name}"] instead of a named import.',
            file_path=file_path,
            line=line,
            construct='reserved keyword',
        ))

    def warn_hyphenated_name(
        self,
        class_name: str,
        file_path: str = '',
        line: Optional[int] = None,
    ) -> None:
        """Warn that a named export was commented out because it has a hyphen."""
        self._diagnostics.append(Diagnostic(
            severity=DiagnosticSeverity.WARNING,
            code='W002',
            message=f'Class "{class_name}" contains a hyphen; '
                    f'use styles["{class_name}"] instead of a named import.',
            file_path=file_path,
            line=line,
            construct='hyphen',
        ))

    def warn_duplicate_key(
        self,
        class_name: str,
        file_path: str = '',
        line: Optional[int] = None,
    ) -> None:
        """Warn that the exports object lists the same class name twice."""
        self._diagnostics.append(Diagnostic(
            severity=DiagnosticSeverity.WARNING,
            code='W003',
            message=f'Class "{class_name}" appears more than once; '
                    f'the declaration will repeat it.',
            file_path=file_path,
            line=line,
            construct='duplicate',
        ))

    def info_no_exports(self, file_path: str = '') -> None:
        """Info that a file had no class names, so nothing was generated."""
        self._diagnostics.append(Diagnostic(
            severity=DiagnosticSeverity.INFO,
            code='I001',
            message='No CSS module exports found; no declaration generated.',
            file_path=file_path,
            construct='empty',
        ))

    # =========================================================================
    # REPORTING
    # =========================================================================

    def _group_warnings(self) -> Dict[str, List[Diagnostic]]:
        by_construct: Dict[str, List[Diagnostic]] = {}
        for w in self.warnings:
            by_construct.setdefault(w.construct or 'other', []).append(w)
        return by_construct

    def print_summary(self, file=None) -> None:
        """Print a summary of all diagnostics to stderr (or specified file)."""
        if file is None:
            file = sys.stderr

        if not self._diagnostics:
            return

        warnings = self.warnings
        infos = [d for d in self._diagnostics if d.severity == DiagnosticSeverity.INFO]

        if warnings:
            print(f'\nTyped CSS warnings ({len(warnings)}):', file=file)
            for construct, diags in sorted(self._group_warnings().items()):
                print(f'  {construct}: {len(diags)} occurrence(s)', file=file)
                if self._verbose:
                    for d in diags:
                        print(f'    {d}', file=file)

        if infos and self._verbose:
            print(f'\nTyped CSS info ({len(infos)}):', file=file)
            for d in infos:
                print(f'  {d}', file=file)

    def get_summary(self) -> str:
        """Get a summary string of all warnings."""
        if not self.warnings:
            return 'No Typed CSS warnings.'

        parts = [
            f'{len(diags)} {construct}'
            for construct, diags in sorted(self._group_warnings().items())
        ]
        return f'Typed CSS warnings: {", ".join(parts)}'
