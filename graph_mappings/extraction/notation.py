"""Formatting and parsing of Pig-style map literal notation.

The notation looks like::

    [ 'source' # 'ssn', 'target' # 'mother', 'properties' # ( 'dob' ) ]

Strings are single quoted with backslash escapes, tuples are parenthesized
and maps may nest.
"""
from typing import Any, Dict, Iterable, List, Tuple
import re

from ..exceptions import NotationSyntaxError

_TOKEN_PATTERN = re.compile(
    r"""
    (?P<space>\s+)
    |(?P<string>'(?:[^'\\]|\\.)*')
    |(?P<punct>[\[\]()\#,])
    |(?P<word>[^\s\[\]()\#,']+)
    """,
    re.VERBOSE | re.DOTALL,
)
_ESCAPE_PATTERN = re.compile(r"\\(.)", re.DOTALL)

Token = Tuple[str, str, int]


def quote(value: str) -> str:
    """Quote a string, escaping backslashes and single quotes."""
    escaped = value.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


def unquote(token: str) -> str:
    """Reverse of :func:`quote`."""
    return _ESCAPE_PATTERN.sub(r"\1", token[1:-1])


def format_pair(key: str, value: str) -> str:
    """Format a single ``'key' # 'value'`` entry."""
    return f"{quote(key)} # {quote(value)}"


def format_tuple_pair(key: str, values: Iterable[str]) -> str:
    """Format a ``'key' # ( 'a', 'b' )`` entry."""
    items = ", ".join(quote(value) for value in values)
    return f"{quote(key)} # ( {items} )"


def format_map(entries: Iterable[str]) -> str:
    """Wrap already formatted entries in map brackets."""
    return f"[ {', '.join(entries)} ]"


def tokenize(text: str) -> List[Token]:
    """Split notation text into ``(kind, value, position)`` tokens."""
    tokens: List[Token] = []
    position = 0
    while position < len(text):
        match = _TOKEN_PATTERN.match(text, position)
        if match is None:
            if text[position] == "'":
                raise NotationSyntaxError("Unterminated string", position)
            raise NotationSyntaxError(f"Unexpected character {text[position]!r}", position)
        kind = match.lastgroup
        if kind != "space":
            tokens.append((kind, match.group(), position))
        position = match.end()
    return tokens


class _Parser:
    """Recursive descent parser over the token list."""

    def __init__(self, text: str):
        self.text = text
        self.tokens = tokenize(text)
        self.index = 0

    def _peek(self) -> Token:
        if self.index >= len(self.tokens):
            return ("end", "", len(self.text))
        return self.tokens[self.index]

    def _next(self) -> Token:
        token = self._peek()
        self.index += 1
        return token

    def _expect(self, value: str) -> Token:
        token = self._next()
        if token[1] != value or token[0] != "punct":
            raise NotationSyntaxError(
                f"Expected {value!r} but found {token[1] or 'end of input'!r}", token[2]
            )
        return token

    def parse(self) -> Dict[str, Any]:
        result = self._parse_map()
        kind, value, position = self._peek()
        if kind != "end":
            raise NotationSyntaxError(f"Unexpected trailing input {value!r}", position)
        return result

    def _parse_map(self) -> Dict[str, Any]:
        self._expect("[")
        result: Dict[str, Any] = {}
        if self._peek()[1] == "]":
            self._next()
            return result
        while True:
            kind, value, position = self._next()
            if kind != "string":
                raise NotationSyntaxError("Map keys must be quoted strings", position)
            self._expect("#")
            result[unquote(value)] = self._parse_value(coerce_words=True)
            separator = self._next()
            if separator[:2] == ("punct", "]"):
                return result
            if separator[:2] != ("punct", ","):
                raise NotationSyntaxError("Expected ',' or ']'", separator[2])

    def _parse_tuple(self) -> Tuple[Any, ...]:
        self._expect("(")
        items: List[Any] = []
        if self._peek()[1] == ")":
            self._next()
            return ()
        while True:
            items.append(self._parse_value())
            separator = self._next()
            if separator[:2] == ("punct", ")"):
                return tuple(items)
            if separator[:2] != ("punct", ","):
                raise NotationSyntaxError("Expected ',' or ')'", separator[2])

    def _parse_value(self, coerce_words: bool = False) -> Any:
        kind, value, position = self._peek()
        if kind == "string":
            self._next()
            return unquote(value)
        if kind == "word":
            self._next()
            # Only direct map values are booleans, tuple items stay strings
            lowered = value.lower()
            if coerce_words and lowered in ("true", "false"):
                return lowered == "true"
            return value
        if (kind, value) == ("punct", "("):
            return self._parse_tuple()
        if (kind, value) == ("punct", "["):
            return self._parse_map()
        raise NotationSyntaxError(
            f"Expected a value but found {value or 'end of input'!r}", position
        )


def parse_map_literal(text: str) -> Dict[str, Any]:
    """Parse map notation into an ordered dictionary.

    Args:
        text: Notation text

    Returns:
        Dict[str, Any]: Parsed map; tuples become Python tuples

    Raises:
        NotationSyntaxError: If the text is not a well formed map literal
    """
    return _Parser(text).parse()
