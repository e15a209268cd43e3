from multimethod import multimethod

from tinyc.SyntacticAnalysis import Ast


@multimethod
def generate_ast(ast: Ast.CallExpressionAst) -> str:
    # Nested calls are rendered inline, so no indentation is passed down.
    return ast.name + "(" + ",".join([generate_ast(argument) for argument in ast.arguments]) + ")"


@multimethod
def generate_ast(ast: Ast.NumberLiteralAst) -> str:
    return ast.value


@multimethod
def generate_ast(ast: Ast.StringLiteralAst) -> str:
    return "\"" + ast.value + "\""


class CodeGen:
    """
    Render a program in the C-like target language: one line per top-level call expression, in program order, each
    prefixed with the indent and terminated by a newline.
    """
    _indent: str

    def __init__(self, indent: str = ""):
        self._indent = indent

    def generate(self, ast: Ast.ProgramAst) -> str:
        return "".join([self._indent + generate_ast(expression) + "\n" for expression in ast.body])


def generate(ast: Ast.ProgramAst, indent: str = "") -> str:
    return CodeGen(indent).generate(ast)
