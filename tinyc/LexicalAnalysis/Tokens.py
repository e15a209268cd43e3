from dataclasses import dataclass
from enum import Enum


class TokenType(Enum):
    # Brackets
    TkParenL = "("
    TkParenR = ")"

    # Don't change order of these (lexemes are tried in this order)
    # Literals are checked before identifiers so that a quote is never part of a name.
    LxNumber = r"[0-9]+"
    LxCharLiteral = "'"
    LxStringLiteral = "\""
    LxIdentifier = r"[_a-zA-Z][_a-zA-Z0-9]*"

    @property
    def kind_name(self) -> str:
        return _KIND_NAMES[self]

    @property
    def is_quoted(self) -> bool:
        return self in (TokenType.LxCharLiteral, TokenType.LxStringLiteral)


_KIND_NAMES = {
    TokenType.TkParenL: "OpenParen",
    TokenType.TkParenR: "CloseParen",
    TokenType.LxNumber: "Number",
    TokenType.LxCharLiteral: "CharLiteral",
    TokenType.LxStringLiteral: "StringLiteral",
    TokenType.LxIdentifier: "Identifier",
}


@dataclass(frozen=True)
class Token:
    token_metadata: str
    token_type: TokenType
    position: int = -1

    def __str__(self):
        return f"{self.token_type.kind_name}({self.token_metadata})"
