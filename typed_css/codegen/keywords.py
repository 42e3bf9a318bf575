"""
Reserved JavaScript identifiers.

A class name in this set cannot be used as a bare `const` binding in the
generated declarations, so the named export for it is commented out.
"""

RESERVED_KEYWORDS = frozenset({
    # Keywords
    'break',
    'case',
    'catch',
    'class',
    'const',
    'continue',
    'debugger',
    'default',
    'delete',
    'do',
    'else',
    'export',
    'extends',
    'finally',
    'for',
    'function',
    'if',
    'import',
    'in',
    'instanceof',
    'new',
    'return',
    'super',
    'switch',
    'this',
    'throw',
    'try',
    'typeof',
    'var',
    'void',
    'while',
    'with',
    'yield',
    # Future reserved words
    'enum',
    'await',
    # Reserved in strict mode, which ES modules always are
    'implements',
    'interface',
    'let',
    'package',
    'private',
    'protected',
    'public',
    'static',
    # Literals
    'null',
    'true',
    'false',
})
