import logging

from tinyc.LexicalAnalysis.Tokens import Token
from tinyc.LexicalAnalysis.Lexer import Lexer
from tinyc.SyntacticAnalysis.Ast import ProgramAst
from tinyc.SyntacticAnalysis.Parser import Parser, DEFAULT_MAX_DEPTH
from tinyc.CodeGen.CodeGen import CodeGen
from tinyc.Compiler.ErrFmt import ErrFmt
from tinyc.Compiler.Exceptions import CompilerError


logger = logging.getLogger(__name__)


class Compiler:
    _code: str
    _file_path: str
    _tokens: list[Token]
    _ast: ProgramAst
    _output: str

    def __init__(self, code: str, file_path: str = "<stdin>", indent: str = "", max_depth: int = DEFAULT_MAX_DEPTH):
        # Load the code into the Compiler class. Any error stops the pipeline where it happened, so a later stage never
        # sees the output of a failed one.
        self._code = code
        self._file_path = file_path

        # Lex the code into a stream of tokens.
        self._tokens = Lexer(code).lex()
        logger.debug("%s: lexed %d tokens", file_path, len(self._tokens))

        # Parse the tokens into an AST.
        self._ast = Parser(self._tokens, max_depth).parse()
        logger.debug("%s: parsed %d top-level call expressions", file_path, len(self._ast.body))

        # Generate the target code from the AST.
        self._output = CodeGen(indent).generate(self._ast)
        logger.debug("%s: generated %d characters", file_path, len(self._output))

    @property
    def code(self) -> str:
        return self._code

    @property
    def file_path(self) -> str:
        return self._file_path

    @property
    def tokens(self) -> list[Token]:
        return self._tokens

    @property
    def ast(self) -> ProgramAst:
        return self._ast

    @property
    def output(self) -> str:
        return self._output

    @staticmethod
    def format_error(error: CompilerError, code: str, file_path: str = "<stdin>") -> str:
        ErrFmt.CODE = code
        ErrFmt.FILE_PATH = file_path
        return ErrFmt.format(error)


def compile_source(code: str, **options) -> str:
    return Compiler(code, **options).output
