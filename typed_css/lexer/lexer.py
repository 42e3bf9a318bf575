"""
Lexer implementation for generated CSS-module output.

The Lexer tokenizes the JavaScript text emitted by the CSS-module build
step into a stream of tokens that can be consumed by the parser. Only the
shapes that build step produces are recognized; everything else is kept as
OTHER tokens so the parser can step over it.
"""

from typing import List

from .tokens import Token, TokenType, SINGLE_CHAR_OPS, QUOTES


# Characters that form multi-character operators like '===', '=>' or '+='
OPERATOR_CHARS = '=!<>+-*/%&|^~?'


class Lexer:
    """
    Lexer for CSS-module output.

    Converts source text into a list of tokens for parsing.
    """

    def __init__(self, source: str):
        self.source = source
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens: List[Token] = []

    def peek(self, offset: int = 0) -> str:
        """Look ahead in the source without consuming."""
        pos = self.pos + offset
        if pos >= len(self.source):
            return ''
        return self.source[pos]

    def advance(self) -> str:
        """Consume and return the current character."""
        ch = self.peek()
        self.pos += 1
        if ch == '\n':
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        return ch

    def skip_whitespace(self) -> None:
        """Skip over whitespace characters."""
        ch = self.peek()
        while ch and ch.isspace():
            self.advance()
            ch = self.peek()

    def skip_comment(self) -> None:
        """Skip the comment starting at the current position.

        Callers check `at_comment()` first. An unterminated block comment
        runs to the end of the source.
        """
        self.advance()  # /
        if self.advance() == '/':
            while self.peek() and self.peek() != '\n':
                self.advance()
            return
        while self.peek() and not (self.peek() == '*' and self.peek(1) == '/'):
            self.advance()
        if self.peek():
            self.advance()  # *
            self.advance()  # /

    def read_string(self) -> str:
        """Read a string literal including its quotes.

        Escapes are kept verbatim. An unterminated literal runs to the end
        of the source and is returned without a closing quote.
        """
        start = self.pos
        quote = self.advance()
        while self.peek() and self.peek() != quote:
            if self.advance() == '\\' and self.peek():
                self.advance()
        if self.peek() == quote:
            self.advance()
        return self.source[start:self.pos]

    def read_number(self) -> str:
        """Read a numeric literal."""
        result = ''
        while self.peek() and (self.peek().isalnum() or self.peek() in '._'):
            result += self.advance()
        return result

    def read_identifier(self) -> str:
        """Read an identifier. JavaScript allows '$' alongside '_'."""
        result = ''
        while self.peek() and (self.peek().isalnum() or self.peek() in '_$'):
            result += self.advance()
        return result

    def at_comment(self, offset: int = 0) -> bool:
        """Check whether a comment opens at the given offset."""
        return self.peek(offset) == '/' and self.peek(offset + 1) in ('/', '*')

    def at_operator(self, offset: int = 0) -> bool:
        """Check whether an operator character (not a comment) is at the given offset."""
        ch = self.peek(offset)
        return ch != '' and ch in OPERATOR_CHARS and not self.at_comment(offset)

    def read_operator(self) -> str:
        """Read a run of operator characters, e.g. '===' or '=>'."""
        result = self.advance()
        while self.at_operator():
            result += self.advance()
        return result

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source and return a list of tokens.

        Returns:
            List of Token objects, ending with an EOF token.
        """
        while self.pos < len(self.source):
            self.skip_whitespace()

            if self.pos >= len(self.source):
                break

            if self.at_comment():
                self.skip_comment()
                continue

            start_line = self.line
            start_col = self.column
            ch = self.peek()

            if ch in QUOTES:
                value = self.read_string()
                self.tokens.append(Token(TokenType.STRING_LITERAL, value, start_line, start_col))
                continue

            if ch.isdigit():
                value = self.read_number()
                self.tokens.append(Token(TokenType.NUMBER, value, start_line, start_col))
                continue

            if ch.isalpha() or ch in '_$':
                value = self.read_identifier()
                self.tokens.append(Token(TokenType.IDENTIFIER, value, start_line, start_col))
                continue

            # A lone '=' is an assignment; '==', '=>' and friends are not
            if ch == '=' and not self.at_operator(1):
                self.advance()
                self.tokens.append(Token(TokenType.EQ, ch, start_line, start_col))
                continue

            if ch in OPERATOR_CHARS:
                value = self.read_operator()
                self.tokens.append(Token(TokenType.OTHER, value, start_line, start_col))
                continue

            if ch in SINGLE_CHAR_OPS:
                self.advance()
                self.tokens.append(Token(SINGLE_CHAR_OPS[ch], ch, start_line, start_col))
                continue

            self.advance()
            self.tokens.append(Token(TokenType.OTHER, ch, start_line, start_col))

        self.tokens.append(Token(TokenType.EOF, '', self.line, self.column))
        return self.tokens
