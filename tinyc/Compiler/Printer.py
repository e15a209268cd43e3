import dataclasses
import json
from typing import Any

from multimethod import multimethod

from tinyc.LexicalAnalysis.Tokens import Token
from tinyc.SyntacticAnalysis import Ast


INDENT = "  "


def token_dump(tokens: list[Token]) -> str:
    lines = ["Token is:"]
    lines += [f"{INDENT}type = {token.token_type.kind_name:<13}  value = {token.token_metadata}" for token in tokens]
    return "\n".join(lines) + "\n"


def ast_dump(ast: Ast.ProgramAst) -> str:
    lines = ["AST is:"]
    for expression in ast.body:
        lines += dump_ast(expression, 1)
    return "\n".join(lines) + "\n"


@multimethod
def dump_ast(ast: Ast.CallExpressionAst, depth: int) -> list[str]:
    lines = [f"{INDENT * depth}type = CallExpression  name = {ast.name}"]
    for argument in ast.arguments:
        lines += dump_ast(argument, depth + 1)
    return lines


@multimethod
def dump_ast(ast: Ast.NumberLiteralAst, depth: int) -> list[str]:
    return [f"{INDENT * depth}type = NumberLiteral  value = {ast.value}"]


@multimethod
def dump_ast(ast: Ast.StringLiteralAst, depth: int) -> list[str]:
    return [f"{INDENT * depth}type = StringLiteral  value = {ast.value}"]


def ast_json(ast: Ast.ProgramAst) -> dict[str, Any]:
    # Walk the dataclass fields by hand, so that every node keeps its type in the output.
    def tag(node) -> dict[str, Any]:
        d = {"type": type(node).__name__.removesuffix("Ast")}
        for f in dataclasses.fields(node):
            value = getattr(node, f.name)
            d[f.name] = [tag(v) for v in value] if isinstance(value, list) else value
        return d
    return tag(ast)


def save_json(ast: Ast.ProgramAst, file_path: str) -> None:
    with open(file_path, "w") as file:
        json.dump(ast_json(ast), file, indent=1)
