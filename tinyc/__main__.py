import argparse
import logging
import sys
from typing import Optional

from tinyc.Compiler.Compiler import Compiler
from tinyc.Compiler.Exceptions import CompilerError
from tinyc.Compiler.Printer import ast_dump, save_json, token_dump
from tinyc.SyntacticAnalysis.Parser import DEFAULT_MAX_DEPTH

__version__ = "1.0.0"


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tinyc", description="Compile LISP-style calls into C-style calls.")
    parser.add_argument("file", nargs="?", default="-", help="source file to compile (default: stdin)")
    parser.add_argument("-o", "--output", default="-", help="file to write the generated code to (default: stdout)")
    parser.add_argument("--tokens", action="store_true", help="print the token stream to stderr")
    parser.add_argument("--ast", action="store_true", help="print the AST to stderr")
    parser.add_argument("--json", metavar="PATH", help="save the AST as JSON")
    parser.add_argument("--indent", type=int, default=0, help="spaces before each generated line")
    parser.add_argument("--max-depth", type=int, default=DEFAULT_MAX_DEPTH, help="deepest call nesting accepted")
    parser.add_argument("-v", "--verbose", action="store_true", help="log each compiler stage")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    arg_parser = _build_arg_parser()
    args = arg_parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    if args.file == "-":
        file_path, code = "<stdin>", sys.stdin.read()
    else:
        file_path = args.file
        try:
            with open(file_path, encoding="utf-8") as file:
                code = file.read()
        except OSError as e:
            arg_parser.error(f"can't read {file_path}: {e.strerror}")

    try:
        compiler = Compiler(code, file_path, indent=" " * args.indent, max_depth=args.max_depth)
    except CompilerError as e:
        print(Compiler.format_error(e, code, file_path), file=sys.stderr)
        return 1

    if args.tokens:
        print(token_dump(compiler.tokens), file=sys.stderr)
    if args.ast:
        print(ast_dump(compiler.ast), file=sys.stderr)
    if args.json:
        save_json(compiler.ast, args.json)

    if args.output == "-":
        sys.stdout.write(compiler.output)
    else:
        with open(args.output, "w", encoding="utf-8") as file:
            file.write(compiler.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
