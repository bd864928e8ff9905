"""
Line Scanning
=============
Shared tokenizer for the line-oriented OBJ and MTL formats.

Both formats are read one line at a time; a line is split on spaces and tabs
and its first token is the command keyword. Blank lines never reach the readers.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
import os
import re
from typing import Iterator, List

from objmesh.model.errors import MeshIOError, ParseError

logger = logging.getLogger(__name__)

SEPARATOR = re.compile(r"[ \t]+")
FLOAT_PATTERN = re.compile(
    r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?|[+-]?(inf|infinity|nan)",
    re.ASCII | re.IGNORECASE,
)
INDEX_PATTERN = re.compile(r"[+-]?\d+", re.ASCII)


@dataclass(frozen=True)
class Line:
    """One non-blank line of an OBJ or MTL file, already tokenized."""
    filename: str
    number: int
    tokens: List[str]

    @property
    def keyword(self) -> str:
        return self.tokens[0]

    @property
    def args(self) -> List[str]:
        return self.tokens[1:]

    def error(self, message: str, token: str | None = None) -> ParseError:
        return ParseError(message, filename=self.filename, line_number=self.number, token=token)

    def parse_float(self, token: str) -> float:
        # ASCII digits only, '.' is always the decimal separator
        if not FLOAT_PATTERN.fullmatch(token):
            raise self.error(f"'{self.keyword}' expects a number", token=token)
        return float(token)

    def floats(self, count: int) -> List[float]:
        """
        Parse the first `count` arguments as floats.

        Extra arguments are ignored; missing ones are an error.
        """
        args = self.args
        if len(args) < count:
            raise self.error(
                f"'{self.keyword}' expects {count} numeric values, got {len(args)}",
                token=self.keyword,
            )
        return [self.parse_float(token) for token in args[:count]]

    def name(self) -> str:
        """The single name/path argument of commands like `usemtl` or `map_Kd`."""
        if not self.args:
            raise self.error(f"'{self.keyword}' expects a name", token=self.keyword)
        return self.args[0]


def scan_lines(path: str | os.PathLike, encoding: str = "utf-8") -> Iterator[Line]:
    """
    Yield the tokenized non-blank lines of a text file.

    The file is closed when the iterator is exhausted or closed; wrap the
    iterator in `contextlib.closing` when the consumer may stop early.

    Raises:
        MeshIOError: If the file cannot be opened, read or decoded.
    """
    filename = os.fspath(path)
    try:
        with open(filename, "r", encoding=encoding) as file:
            for number, text in enumerate(file, start=1):
                tokens = [token for token in SEPARATOR.split(text.strip(" \t\r\n")) if token]
                if tokens:
                    yield Line(filename=filename, number=number, tokens=tokens)
    except UnicodeDecodeError as e:
        raise MeshIOError(filename, f"not valid {encoding} text ({e.reason})") from e
    except OSError as e:
        raise MeshIOError(filename, e.strerror or str(e)) from e
