"""
CSS-module output parser.

The Parser walks the token stream from the Lexer, finds the
`module.exports = {` assignment and enumerates the keys of that object
literal up to its matching closing brace. Anything outside the block
(banner comments, the trailing `module.exports.__checksum = ...` line)
never matches the prefix and is ignored.
"""

from typing import List, Optional

from ..lexer import Lexer, Token, TokenType, QUOTES
from .ast_nodes import ExportEntry, ExportsBlock


OPENERS = (TokenType.LPAREN, TokenType.LBRACE, TokenType.LBRACKET)
CLOSERS = (TokenType.RPAREN, TokenType.RBRACE, TokenType.RBRACKET)


class Parser:
    """
    Parser for the class name mapping in CSS-module output.

    Grammar:
        block  := 'module' '.' 'exports' '=' '{' [entry (',' entry)* [',']] '}'
        entry  := key ':' value
        key    := STRING_LITERAL | IDENTIFIER | NUMBER
        value  := token+ (balanced brackets, up to ',' or '}' at depth 0)
    """

    def __init__(self, tokens: List[Token]):
        self.tokens = tokens
        self.pos = 0

    def peek(self, offset: int = 0) -> Token:
        """Look ahead in the token stream without consuming."""
        pos = self.pos + offset
        if pos >= len(self.tokens):
            return self.tokens[-1]  # Return EOF
        return self.tokens[pos]

    def current(self) -> Token:
        """Return the current token."""
        return self.peek()

    def advance(self) -> Token:
        """Consume and return the current token."""
        token = self.current()
        self.pos += 1
        return token

    def match(self, *types: TokenType) -> bool:
        """Check if current token matches any of the given types."""
        return self.current().type in types

    def expect(self, token_type: TokenType, message: str = '') -> Token:
        """Consume the current token if it matches, otherwise raise an error."""
        if self.current().type != token_type:
            raise SyntaxError(
                f"Expected {token_type.name} but got {self.current().type.name} "
                f"at line {self.current().line}, column {self.current().column}: {message}"
            )
        return self.advance()

    def _error(self, message: str) -> SyntaxError:
        token = self.current()
        return SyntaxError(f"{message} at line {token.line}, column {token.column}")

    # =========================================================================
    # BLOCK LOCATION
    # =========================================================================

    def _at_exports_prefix(self) -> bool:
        """Check for the literal `module . exports = {` token sequence."""
        expected = (
            (TokenType.IDENTIFIER, 'module'),
            (TokenType.DOT, '.'),
            (TokenType.IDENTIFIER, 'exports'),
            (TokenType.EQ, '='),
            (TokenType.LBRACE, '{'),
        )
        for offset, (token_type, value) in enumerate(expected):
            token = self.peek(offset)
            if token.type != token_type or token.value != value:
                return False
        return True

    def find_exports_block(self) -> bool:
        """Advance to the first exports assignment. Returns False if there is none."""
        while not self.match(TokenType.EOF):
            if self._at_exports_prefix():
                return True
            self.advance()
        return False

    # =========================================================================
    # BLOCK PARSING
    # =========================================================================

    def parse(self) -> Optional[ExportsBlock]:
        """Parse the exports block, or return None if the source has none."""
        if not self.find_exports_block():
            return None

        start = self.current()
        block = ExportsBlock(line=start.line, column=start.column)
        for _ in range(4):
            self.advance()  # module . exports =
        self.expect(TokenType.LBRACE, 'exports object')

        while not self.match(TokenType.RBRACE):
            if self.match(TokenType.EOF):
                raise self._error("Unterminated exports object")
            block.entries.append(self.parse_entry())
            if self.match(TokenType.COMMA):
                self.advance()
            elif not self.match(TokenType.RBRACE):
                raise self._error(f"Unexpected '{self.current().value}' after entry")

        self.expect(TokenType.RBRACE, 'end of exports object')
        return block

    def parse_entry(self) -> ExportEntry:
        """Parse a single `key: value` entry."""
        token = self.advance()
        if token.type == TokenType.STRING_LITERAL:
            key = self._strip_quotes(token)
        elif token.type in (TokenType.IDENTIFIER, TokenType.NUMBER):
            key = token.value
        else:
            raise SyntaxError(
                f"Expected a class name but got '{token.value}' "
                f"at line {token.line}, column {token.column}"
            )

        self.expect(TokenType.COLON, f"after key '{key}'")
        value = self.skip_value()
        return ExportEntry(key=key, value=value, line=token.line, column=token.column)

    def skip_value(self) -> str:
        """Step over an entry value and return its raw token text.

        Values are usually a single string, but composed classes can produce
        expressions such as `"a " + imported["b"]`, so brackets are balanced.
        """
        parts = []
        depth = 0
        while True:
            if self.match(TokenType.EOF):
                raise self._error("Unterminated value")
            if depth == 0 and self.match(TokenType.COMMA, TokenType.RBRACE):
                break
            if self.match(*OPENERS):
                depth += 1
            elif self.match(*CLOSERS):
                depth -= 1
            parts.append(self.advance().value)

        if not parts:
            raise self._error("Missing value")
        return ' '.join(parts)

    @staticmethod
    def _strip_quotes(token: Token) -> str:
        value = token.value
        if len(value) < 2 or value[-1] != value[0] or value[0] not in QUOTES:
            raise SyntaxError(
                f"Unterminated string at line {token.line}, column {token.column}"
            )
        return value[1:-1]


# =============================================================================
# CONVENIENCE
# =============================================================================

def parse_exports_block(source: str) -> Optional[ExportsBlock]:
    """Tokenize and parse CSS-module output. Raises SyntaxError if malformed."""
    tokens = Lexer(source).tokenize()
    return Parser(tokens).parse()


def get_css_module_keys(source: str) -> Optional[List[str]]:
    """
    Return the class names of the exports block in source order.

    Returns None when there is no exports block, when it has no entries,
    or when it cannot be parsed.
    """
    try:
        block = parse_exports_block(source)
    except SyntaxError:
        return None
    if block is None or not block.entries:
        return None
    return block.keys
