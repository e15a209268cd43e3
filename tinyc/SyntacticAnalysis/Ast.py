from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass
class ProgramAst:
    body: list[CallExpressionAst] = field(default_factory=list)

    def __str__(self):
        return "\n".join([str(expression) for expression in self.body])


@dataclass
class CallExpressionAst:
    name: str
    arguments: list[ArgumentAst]
    _tok: int = -1

    def __post_init__(self):
        if not self.name:
            raise ValueError("A call expression must have a name")

    def __str__(self):
        return "(" + " ".join([self.name, *[str(argument) for argument in self.arguments]]) + ")"


@dataclass
class NumberLiteralAst:
    value: str
    _tok: int = -1

    def __str__(self):
        return self.value


@dataclass
class StringLiteralAst:
    value: str
    _tok: int = -1

    def __str__(self):
        return "\"" + self.value + "\""


LiteralAst = Union[NumberLiteralAst, StringLiteralAst]
ArgumentAst = Union[CallExpressionAst, LiteralAst]
