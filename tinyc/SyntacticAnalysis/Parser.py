from __future__ import annotations

from typing import Callable, Generic, Optional, TypeVar

from tinyc.SyntacticAnalysis import Ast
from tinyc.LexicalAnalysis.Tokens import Token, TokenType
from tinyc.Compiler.Exceptions import (
    ParseNestingError, ParseSyntaxError, UnexpectedEndOfInputError, UnexpectedTokenError)


T = TypeVar("T")

# Each nesting level costs a handful of interpreter frames, so this has to stay well below the recursion limit.
DEFAULT_MAX_DEPTH = 100

EOF = "<EOF>"


class BoundParser(Generic[T]):
    _rule: Optional[Callable[[], T]]
    _parser: Parser
    _delayed: bool
    _ast: Optional[T]

    def __init__(self, parser: Parser, rule: Optional[Callable[[], T]]):
        self._rule = rule
        self._parser = parser
        self._delayed = False
        self._ast = None

    def parse_once(self) -> T:
        self._ast = self._rule()
        return self._ast

    def parse_zero_or_more(self) -> list[T]:
        results = []

        # Keep parsing the rule until it fails. A failed attempt may have consumed tokens, so the index is restored to
        # where that attempt started, and the results so far are returned.
        while True:
            restore_index = self._parser.current
            try:
                results.append(self.parse_once())
            except ParseSyntaxError:
                self._parser.current = restore_index
                self._ast = results
                return self._ast

    def delay_parse(self) -> BoundParser:
        self._delayed = True
        return self

    def __or__(self, that: BoundParser) -> BoundParser:
        # Chain n parsers, of which the first to succeed is used.
        if not (self._delayed and that._delayed):
            raise ValueError("Both parsers must be delayed")

        if isinstance(self, MultiBoundParser):
            self.add_bound_parser(that)
            return self

        multi_bound_parser = MultiBoundParser(self._parser)
        multi_bound_parser.delay_parse()
        multi_bound_parser.add_bound_parser(self)
        multi_bound_parser.add_bound_parser(that)
        return multi_bound_parser


class MultiBoundParser(BoundParser):
    _bound_parsers: list[BoundParser]

    def __init__(self, parser: Parser):
        super().__init__(parser, None)
        self._bound_parsers = []

    def add_bound_parser(self, bound_parser: BoundParser):
        self._bound_parsers.append(bound_parser)

    def parse_once(self):
        for bound_parser in self._bound_parsers:
            restore_index = self._parser.current
            try:
                self._ast = bound_parser.parse_once()
                return self._ast
            except ParseSyntaxError:
                self._parser.current = restore_index

        raise self._parser.furthest_error()


class Parser:
    _tokens: list[Token]
    _current: int
    _depth: int
    _max_depth: int
    _deepest: tuple[int, int]
    _error_index: int
    _expected: list[str]

    def __init__(self, tokens: list[Token], max_depth: int = DEFAULT_MAX_DEPTH):
        self._tokens = tokens
        self._current = 0
        self._depth = 0
        self._max_depth = max_depth
        self._deepest = (0, 0)
        self._error_index = -1
        self._expected = []

    def _current_token_index(self) -> int:
        return self._current

    def parse(self) -> Ast.ProgramAst:
        # Alternatives and repetitions swallow failures while backtracking, so the error reported is the one that got
        # furthest into the token stream, listing everything that would have been accepted there.
        try:
            return self._parse_program().parse_once()
        except ParseSyntaxError:
            raise self.furthest_error() from None

        # A max_depth above what the interpreter stack can hold runs out of frames first. That is still a nesting
        # error, reported at the deepest bracket that was opened.
        except RecursionError:
            depth, position = self._deepest
            raise ParseNestingError(depth, position) from None

    def _parse_program(self) -> BoundParser:
        """
        [Program] => [CallExpression]* [EOF]

        Only call expressions are allowed at the top level. The [EOF] check makes anything else (a stray literal, name
        or closing bracket) a syntax error, rather than leaving the rest of the tokens silently unparsed.
        """
        def inner():
            p1 = self._parse_call_expression().parse_zero_or_more()
            self._parse_eof().parse_once()
            return Ast.ProgramAst(p1)
        return BoundParser(self, inner)

    def _parse_eof(self) -> BoundParser:
        def inner():
            if self._current < len(self._tokens):
                raise self._syntax_error(EOF)
            return None
        return BoundParser(self, inner)

    def _parse_call_expression(self) -> BoundParser:
        """
        [CallExpression] => [Token(ParenL)] [Identifier] [Argument]* [Token(ParenR)]

        Nested call expressions recurse through [Argument], so the depth is checked here.
        """
        def inner():
            c1 = self._current_token_index()
            self._parse_token(TokenType.TkParenL).parse_once()

            if self._depth >= self._max_depth:
                raise ParseNestingError(self._max_depth, self._tokens[c1].position)

            self._depth += 1
            if self._depth > self._deepest[0]:
                self._deepest = (self._depth, self._tokens[c1].position)
            try:
                p1 = self._parse_lexeme(TokenType.LxIdentifier).parse_once()
                p2 = self._parse_argument().parse_zero_or_more()
                self._parse_token(TokenType.TkParenR).parse_once()
            finally:
                self._depth -= 1
            return Ast.CallExpressionAst(p1, p2, c1)
        return BoundParser(self, inner)

    def _parse_argument(self) -> BoundParser:
        def inner():
            p1 = self._parse_call_expression().delay_parse()
            p2 = self._parse_number_literal().delay_parse()
            p3 = self._parse_string_literal(TokenType.LxCharLiteral).delay_parse()
            p4 = self._parse_string_literal(TokenType.LxStringLiteral).delay_parse()
            return (p1 | p2 | p3 | p4).parse_once()
        return BoundParser(self, inner)

    # Literals

    def _parse_number_literal(self) -> BoundParser:
        def inner():
            c1 = self._current_token_index()
            p1 = self._parse_lexeme(TokenType.LxNumber).parse_once()
            return Ast.NumberLiteralAst(p1, c1)
        return BoundParser(self, inner)

    def _parse_string_literal(self, lexeme: TokenType) -> BoundParser:
        # Character and string literals are only different to the lexer, both are string literals from here on.
        def inner():
            c1 = self._current_token_index()
            p1 = self._parse_lexeme(lexeme).parse_once()
            return Ast.StringLiteralAst(p1, c1)
        return BoundParser(self, inner)

    # Misc

    def _parse_token(self, token: TokenType) -> BoundParser:
        def inner():
            if self._current >= len(self._tokens) or self._tokens[self._current].token_type != token:
                raise self._syntax_error(_describe(token))

            self._current += 1
            return self._tokens[self._current - 1]
        return BoundParser(self, inner)

    def _parse_lexeme(self, lexeme: TokenType) -> BoundParser:
        def inner():
            p1 = self._parse_token(lexeme).parse_once()
            return p1.token_metadata
        return BoundParser(self, inner)

    # Errors

    def _syntax_error(self, expected: str) -> ParseSyntaxError:
        # Remember what was expected at the furthest index reached so far. Failures before that index are only used for
        # backtracking, and never reported.
        if self._current > self._error_index:
            self._error_index = self._current
            self._expected = []
        if self._current == self._error_index and expected not in self._expected:
            self._expected.append(expected)
        return self._make_error(self._current, [expected])

    def furthest_error(self) -> ParseSyntaxError:
        return self._make_error(self._error_index, self._expected)

    def _make_error(self, index: int, expected: list[str]) -> ParseSyntaxError:
        expected_string = ", ".join(expected)

        if index >= len(self._tokens):
            last = self._tokens[-1] if self._tokens else None
            position = last.position + _source_length(last) if last else 0
            return UnexpectedEndOfInputError(
                f"Expected one of {expected_string}, got {EOF}.", position, 1, index, expected)

        token = self._tokens[index]
        got = _describe(token.token_type)
        if token.token_type.name.startswith("Lx"):
            got += f" '{token.token_metadata}'"
        return UnexpectedTokenError(
            f"Expected one of {expected_string}, got {got}.", token.position, _source_length(token), index, expected)

    @property
    def current(self) -> int:
        return self._current

    @current.setter
    def current(self, value: int) -> None:
        self._current = value


def _describe(token: TokenType) -> str:
    return f"'{token.value}'" if token.name.startswith("Tk") else token.kind_name


def _source_length(token: Token) -> int:
    # Quoted literals don't keep their delimiters in the token text.
    return len(token.token_metadata) + (2 if token.token_type.is_quoted else 0)


def parse(tokens: list[Token], max_depth: int = DEFAULT_MAX_DEPTH) -> Ast.ProgramAst:
    return Parser(tokens, max_depth).parse()
