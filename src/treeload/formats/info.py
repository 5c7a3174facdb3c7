"""INFO format adapter.

The INFO format is the compact, brace-structured syntax of property trees::

    ; comment until the end of the line
    IncludeFile common.info
    server
    {
        host "example.org"      ; quoted strings accept C escapes
        port 8080
        motd "first line\\n" \\
             "second line"      ; a trailing backslash continues a string
    }
    empty { }

Each entry is a key optionally followed, on the same line, by a value. A
block of children opens with ``{`` on the same line or on the next one. The
native ``#include`` directive is not supported: use the include key instead.
"""

from dataclasses import dataclass
from typing import List

from ..errors import TreeParseError
from ..tree import Tree
from .base import FormatAdapter

__all__ = ["InfoAdapter"]

INDENT = " " * 4

_ESCAPES = {
    "0": "\0",
    "a": "\a",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
    '"': '"',
    "'": "'",
    "\\": "\\",
}
_REVERSE_ESCAPES = {
    value: f"\\{key}" for key, value in _ESCAPES.items() if key != "'"
}

_SEPARATORS = " \t\r\n;{}\""

WORD, STRING, OPEN, CLOSE, NEWLINE = "word", "string", "{", "}", "newline"


@dataclass
class Token:
    """Lexical unit of an INFO document.

    Attributes
    ----------
    kind : str
        One of 'word', 'string', '{', '}' or 'newline'
    text : str
        Unescaped content of the token
    line : int
        Line number, starting at 1
    """

    kind: str
    text: str
    line: int


def tokenize(stream) -> List[Token]:
    """Split an INFO document into tokens.

    Parameters
    ----------
    stream : TextIO
        Document to tokenize

    Returns
    -------
    List[Token]
        Tokens, each line terminated by a 'newline' token
    """
    tokens = []
    for line_no, line in enumerate(stream, start=1):
        i, size = 0, len(line)
        while i < size:
            char = line[i]
            if char in " \t\r\n":
                i += 1
            elif char == ";":
                break
            elif char in "{}":
                tokens.append(Token(char, char, line_no))
                i += 1
            elif char == '"':
                text, i = _read_string(line, i + 1, line_no)
                tokens.append(Token(STRING, text, line_no))
            else:
                start = i
                while i < size and line[i] not in _SEPARATORS:
                    i += 1
                tokens.append(Token(WORD, line[start:i], line_no))

        tokens.append(Token(NEWLINE, "\n", line_no))

    return tokens


def _read_string(line, start, line_no):
    """Read a quoted string whose opening quote precedes `start`."""
    chars = []
    i = start
    while i < len(line):
        char = line[i]
        if char == '"':
            return "".join(chars), i + 1
        if char == "\\":
            if i + 1 >= len(line) or line[i + 1] not in _ESCAPES:
                raise TreeParseError(
                    f"line {line_no}: invalid escape sequence in string"
                )
            chars.append(_ESCAPES[line[i + 1]])
            i += 2
        else:
            chars.append(char)
            i += 1

    raise TreeParseError(f"line {line_no}: unterminated string")


class _Parser:
    """Recursive descent over the token list of one document."""

    def __init__(self, tokens):
        self.tokens = tokens
        self.pos = 0

    def peek(self, skip_newlines=False):
        pos = self.pos
        while skip_newlines and pos < len(self.tokens):
            if self.tokens[pos].kind != NEWLINE:
                break
            pos += 1

        if pos < len(self.tokens):
            return self.tokens[pos], pos

        return None, pos

    def next(self, skip_newlines=False):
        token, pos = self.peek(skip_newlines)
        self.pos = pos + 1

        return token

    def parse_block(self, tree, nested=False):
        """Parse entries into `tree` until the end of the block."""
        while True:
            token = self.next(skip_newlines=True)
            if token is None:
                if nested:
                    raise TreeParseError("unexpected end of file, missing '}'")
                return

            if token.kind == CLOSE:
                if not nested:
                    raise TreeParseError(f"line {token.line}: unmatched '}}'")
                return

            if token.kind == OPEN:
                raise TreeParseError(f"line {token.line}: block without a key")

            if token.kind == WORD and token.text == "#include":
                raise TreeParseError(
                    f"line {token.line}: '#include' is not supported, "
                    "use an include key instead"
                )

            self.parse_entry(tree.add_child(token.text))

    def parse_entry(self, child):
        """Parse the optional value and block which follow a key."""
        token, _ = self.peek()
        if token is not None and token.kind in (WORD, STRING):
            self.next()
            child.value = token.text
            if token.kind == STRING:
                child.value += self.parse_continuation()

        token, _ = self.peek()
        if token is not None and token.kind not in (NEWLINE, OPEN, CLOSE):
            raise TreeParseError(
                f"line {token.line}: unexpected '{token.text}' after value"
            )

        token, _ = self.peek(skip_newlines=True)
        if token is not None and token.kind == OPEN:
            self.next(skip_newlines=True)
            self.parse_block(child, nested=True)

    def parse_continuation(self):
        """Concatenate strings continued with a trailing backslash."""
        text = ""
        while True:
            token, pos = self.peek()
            if token is None or token.kind != WORD or token.text != "\\":
                return text

            self.pos = pos + 1
            newline = self.next()
            if newline is None or newline.kind != NEWLINE:
                raise TreeParseError(
                    f"line {token.line}: continuation must end the line"
                )
            string = self.next()
            if string is None or string.kind != STRING:
                raise TreeParseError(
                    f"line {token.line + 1}: expected a string after continuation"
                )
            text += string.text


def quote(text: str) -> str:
    """Format a key or value, quoting it when it is not a plain word.

    Parameters
    ----------
    text : str
        Key or value to format

    Returns
    -------
    str
        Text as it should appear in an INFO document
    """
    if text and not any(c in _SEPARATORS or c == "\\" for c in text):
        if not text.startswith("#"):
            return text

    escaped = "".join(_REVERSE_ESCAPES.get(c, c) for c in text)

    return f'"{escaped}"'


class InfoAdapter(FormatAdapter):
    """Reads and writes INFO documents."""

    name = "info"
    extensions = (".info",)

    def parse_stream(self, stream) -> Tree:
        tree = Tree()
        _Parser(tokenize(stream)).parse_block(tree)

        return tree

    def write(self, tree: Tree, stream):
        self._write_children(tree, stream, 0)

    def _write_children(self, tree, stream, level):
        """Write every child of `tree` at a given indentation level."""
        pad = INDENT * level
        for key, child in tree:
            stream.write(pad + quote(key))
            if child.value or child.is_leaf():
                stream.write(" " + quote(child.value))
            stream.write("\n")

            if not child.is_leaf():
                stream.write(pad + "{\n")
                self._write_children(child, stream, level + 1)
                stream.write(pad + "}\n")
