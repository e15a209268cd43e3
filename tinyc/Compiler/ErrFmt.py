import re

import colorama

from tinyc.Compiler.Exceptions import CompilerError


colorama.init()


class ErrFmt:
    CODE: str = ""
    FILE_PATH: str = ""

    @staticmethod
    def escape_ansi(line: str) -> str:
        ansi_escape = re.compile(r'(?:\x1B[@-_]|[\x80-\x9F])[0-?]*[ -/]*[@-~]')
        return ansi_escape.sub('', line)

    @staticmethod
    def err(position: int, length: int = 1) -> str:
        code = ErrFmt.CODE

        # An error at the end of the input points one past the last character. Move it back over any trailing newlines
        # so that the caret is shown after the last line that has code on it.
        position = max(0, min(position, len(code)))
        if position == len(code):
            while position > 0 and code[position - 1] == "\n":
                position -= 1

        # Find the line containing the error by scanning back and forward from the error position to the nearest
        # newlines. The line number is the number of newlines before the start of the line.
        start = code.rfind("\n", 0, position) + 1
        end = code.find("\n", position)
        end = len(code) if end == -1 else end
        line = code[start:end].replace("\t", " ")
        column = position - start
        error_length = max(1, min(length, len(line) - column)) if column < len(line) else 1

        line_number = "".join([
            f"{colorama.Fore.WHITE}{colorama.Style.BRIGHT}",
            str(code.count("\n", 0, start) + 1),
            f" | {colorama.Style.RESET_ALL}"])

        line_containing_error_string = "".join([
            line_number,
            f"{colorama.Fore.GREEN}",
            line,
            f"{colorama.Style.RESET_ALL}"])

        number_margin_len = len(ErrFmt.escape_ansi(line_number)) - 2

        file_path_string = "".join([
            "-> ",
            f"{colorama.Fore.WHITE}{colorama.Style.BRIGHT}",
            ErrFmt.FILE_PATH,
            f": [Pos: {position}]",
            f"{colorama.Style.RESET_ALL}"])

        top_line_padding_string = "".join([
            " " * number_margin_len,
            f"{colorama.Fore.WHITE}{colorama.Style.BRIGHT}| {colorama.Style.RESET_ALL}"])

        error_description_string = "".join([
            " " * number_margin_len,
            f"{colorama.Fore.WHITE}{colorama.Style.BRIGHT}| {colorama.Style.RESET_ALL}",
            f"{colorama.Fore.RED}{colorama.Style.BRIGHT}",
            "".join([" " * column, "^" * error_length]),
            f"{colorama.Style.RESET_ALL}",
            " <- "])

        final_string = "\n".join([
            "",
            file_path_string,
            top_line_padding_string,
            line_containing_error_string,
            error_description_string])
        return final_string

    @staticmethod
    def format(error: CompilerError) -> str:
        return ErrFmt.err(error.position, error.length) + str(error)
