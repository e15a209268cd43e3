from __future__ import annotations

import re

from tinyc.LexicalAnalysis.Tokens import Token, TokenType
from tinyc.Compiler.Exceptions import LexicalError, UnterminatedLiteralError


WHITESPACE = " \n\t"
ESCAPE = "\\"


class Lexer:
    _code: str
    _current: int

    def __init__(self, code: str):
        self._code = code
        self._current = 0

    def lex(self) -> list[Token]:
        output = []

        # The order of the TokenType members is the priority order of the token classes. Brackets are single
        # characters, the quoted literals are scanned by hand (their escape rule can't be expressed as a simple regex),
        # and every other lexeme is matched by its regex anchored at the current position.
        available_tokens = list(TokenType)
        patterns = {t: re.compile(t.value) for t in available_tokens if t.name.startswith("Lx") and not t.is_quoted}

        while self._current < len(self._code):
            character = self._code[self._current]

            # Whitespace only separates tokens, so it is skipped without producing anything.
            if character in WHITESPACE:
                self._current += 1
                continue

            for token in available_tokens:
                match token.name[:2]:
                    # Match a bracket by comparing the current character against the token's value.
                    case "Tk" if character == token.value:
                        output.append(Token(character, token, self._current))
                        self._current += 1
                        break

                    # A quoted literal only starts at an unescaped delimiter. If this isn't one, fall through to the
                    # next token class.
                    case "Lx" if token.is_quoted:
                        if character == token.value and not self._is_escaped(self._current):
                            output.append(self._lex_quoted(token))
                            break

                    # Match a lexeme by its regex. The regex is greedy, so the longest run is captured.
                    case "Lx" if matched := patterns[token].match(self._code, self._current):
                        output.append(Token(matched.group(0), token, self._current))
                        self._current = matched.end()
                        break
            else:
                # Nothing matched, so lexing stops here: no more tokens are produced.
                raise LexicalError(character, self._current)

        return output

    def _lex_quoted(self, token: TokenType) -> Token:
        # Capture everything between the opening delimiter and the first closing one. The delimiters themselves are
        # not part of the token, and the captured text is kept exactly as written (escapes are not interpreted).
        start = self._current
        end = start + 1
        while end < len(self._code):
            if self._code[end] == token.value and self._is_closing(end):
                self._current = end + 1
                return Token(self._code[start + 1:end], token, start)
            end += 1

        raise UnterminatedLiteralError(token.value, start)

    def _is_escaped(self, index: int) -> bool:
        return index > 0 and self._code[index - 1] == ESCAPE

    def _is_closing(self, index: int) -> bool:
        # A delimiter closes the literal unless it is escaped. A delimiter after an escaped backslash ("\\") is not
        # escaped itself.
        return not self._is_escaped(index) or self._is_escaped(index - 1)


def tokenize(source: str) -> list[Token]:
    return Lexer(source).lex()
