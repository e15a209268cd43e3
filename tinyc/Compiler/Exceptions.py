from typing import Optional


class CompilerError(Exception):
    """
    Base class of every error raised by the pipeline. The position is the character offset into the source code that
    the error refers to, and the length is how many characters from there are underlined when the error is formatted.
    """
    code = "E000"

    def __init__(self, message: str, position: int, length: int = 1):
        Exception.__init__(self, f"[{self.code}] {message}")
        self.message = message
        self.position = position
        self.length = max(1, length)


# Lexical analysis

class LexicalError(CompilerError):
    code = "E001"

    def __init__(self, character: str, position: int):
        CompilerError.__init__(self, f"Unknown token at {position}: {character!r}", position)
        self.character = character


class UnterminatedLiteralError(LexicalError):
    code = "E002"

    def __init__(self, delimiter: str, position: int):
        CompilerError.__init__(self, f"Unterminated literal, expected a closing {delimiter} before the end of input", position)
        self.character = delimiter


# Syntactic analysis

class ParseSyntaxError(CompilerError):
    def __init__(self, message: str, position: int, length: int = 1, token_index: int = -1, expected: Optional[list[str]] = None):
        CompilerError.__init__(self, message, position, length)
        self.token_index = token_index
        self.expected = list(expected or [])


class UnexpectedTokenError(ParseSyntaxError):
    code = "E101"


class UnexpectedEndOfInputError(ParseSyntaxError):
    code = "E102"


class ParseNestingError(CompilerError):
    code = "E103"

    def __init__(self, max_depth: int, position: int):
        CompilerError.__init__(self, f"Call expressions nested deeper than {max_depth} levels", position)
        self.max_depth = max_depth
