import unittest

from tinyc.LexicalAnalysis.Lexer import Lexer, tokenize
from tinyc.LexicalAnalysis.Tokens import Token, TokenType
from tinyc.Compiler.Exceptions import LexicalError, UnterminatedLiteralError


def kinds(code: str) -> list[str]:
    return [token.token_type.kind_name for token in tokenize(code)]


def texts(code: str) -> list[str]:
    return [token.token_metadata for token in tokenize(code)]


class TestLexingTokens(unittest.TestCase):
    def test_nested_call(self):
        self.assertEqual(
            kinds("(add 2 (subtract 4 2))"),
            ["OpenParen", "Identifier", "Number", "OpenParen", "Identifier", "Number", "Number", "CloseParen", "CloseParen"])
        self.assertEqual(texts("(add 2 (subtract 4 2))"), ["(", "add", "2", "(", "subtract", "4", "2", ")", ")"])

    def test_positions(self):
        tokens = tokenize("(add  12)")
        self.assertEqual(tokens[0], Token("(", TokenType.TkParenL, 0))
        self.assertEqual(tokens[1], Token("add", TokenType.LxIdentifier, 1))
        self.assertEqual(tokens[2], Token("12", TokenType.LxNumber, 6))
        self.assertEqual(tokens[3], Token(")", TokenType.TkParenR, 8))

    def test_whitespace_is_skipped(self):
        self.assertEqual(texts(" \t(\nadd\t1 )\n"), ["(", "add", "1", ")"])
        self.assertEqual(tokenize("  \n\t "), [])
        self.assertEqual(tokenize(""), [])

    def test_digit_run_is_one_number(self):
        self.assertEqual(texts("12345"), ["12345"])
        self.assertEqual(kinds("007"), ["Number"])

    def test_number_then_identifier(self):
        self.assertEqual(kinds("2abc"), ["Number", "Identifier"])
        self.assertEqual(texts("2abc"), ["2", "abc"])

    def test_identifiers(self):
        self.assertEqual(texts("_private snake_case x1 CamelCase"), ["_private", "snake_case", "x1", "CamelCase"])
        self.assertEqual(kinds("_"), ["Identifier"])

    def test_parens_have_no_separator(self):
        self.assertEqual(texts("(()))"), ["(", "(", ")", ")", ")"])


class TestLexingLiterals(unittest.TestCase):
    def test_char_literal(self):
        tokens = tokenize("'h'")
        self.assertEqual(tokens, [Token("h", TokenType.LxCharLiteral, 0)])

    def test_string_literal(self):
        tokens = tokenize("(greet \"hello world\")")
        self.assertEqual(tokens[2], Token("hello world", TokenType.LxStringLiteral, 7))
        self.assertEqual(tokens[3].token_type, TokenType.TkParenR)

    def test_empty_literals(self):
        self.assertEqual(texts("'' \"\""), ["", ""])
        self.assertEqual(kinds("'' \"\""), ["CharLiteral", "StringLiteral"])

    def test_literal_may_contain_anything(self):
        self.assertEqual(texts("\"(add #1) 'x'\""), ["(add #1) 'x'"])
        self.assertEqual(texts("'\"'"), ["\""])

    def test_escaped_delimiter_does_not_close(self):
        self.assertEqual(texts(r'"say \"hi\""'), [r'say \"hi\"'])
        self.assertEqual(texts(r"'\''"), [r"\'"])

    def test_escaped_backslash_then_delimiter_closes(self):
        self.assertEqual(texts(r'"a\\" 1'), [r"a\\", "1"])
        self.assertEqual(kinds(r'"a\\" 1'), ["StringLiteral", "Number"])

    def test_literal_text_is_not_unescaped(self):
        self.assertEqual(texts(r'"tab\there"'), [r"tab\there"])


class TestLexingErrors(unittest.TestCase):
    def test_unknown_character(self):
        with self.assertRaises(LexicalError) as context:
            tokenize("(add 1 #)")
        self.assertEqual(context.exception.position, 7)
        self.assertEqual(context.exception.character, "#")
        self.assertIn("[E001]", str(context.exception))

    def test_unknown_character_at_start(self):
        with self.assertRaises(LexicalError) as context:
            tokenize("-1")
        self.assertEqual(context.exception.position, 0)

    def test_backslash_outside_literal(self):
        with self.assertRaises(LexicalError) as context:
            tokenize("(f \\'a')")
        self.assertEqual(context.exception.position, 3)

    def test_unterminated_string(self):
        with self.assertRaises(UnterminatedLiteralError) as context:
            tokenize("(greet \"hello)")
        self.assertEqual(context.exception.position, 7)
        self.assertIn("[E002]", str(context.exception))

    def test_unterminated_char(self):
        with self.assertRaises(UnterminatedLiteralError) as context:
            tokenize("'a")
        self.assertEqual(context.exception.position, 0)

    def test_escaped_closing_delimiter_is_unterminated(self):
        with self.assertRaises(UnterminatedLiteralError):
            tokenize(r'"abc\"')

    def test_unterminated_is_lexical_error(self):
        with self.assertRaises(LexicalError):
            Lexer("\"").lex()


class TestLexingProperties(unittest.TestCase):
    def test_balanced_parens(self):
        for code in ["(add 2 2)", "(add 2 (subtract 4 2))", "(a (b (c 'x' \"y\")))\n(d)"]:
            tokens = tokenize(code)
            opened = [t for t in tokens if t.token_type == TokenType.TkParenL]
            closed = [t for t in tokens if t.token_type == TokenType.TkParenR]
            self.assertEqual(len(opened), len(closed), code)

    def test_str(self):
        self.assertEqual(str(tokenize("add")[0]), "Identifier(add)")


if __name__ == "__main__":
    unittest.main()
