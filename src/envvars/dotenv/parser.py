"""Single-pass parser for the ``.env`` dialect.

Supported grammar:
- ``KEY=VALUE`` lines; blank lines are ignored
- ``#`` starts a comment outside quotes, on its own line or after a value
- values may be wrapped in ``"``, ``'`` or backticks and may then span lines
- ``{...}`` values keep their braces and close on the first ``}``
- ``\\n`` inside double quotes becomes a newline; nothing else is unescaped
- the first character after ``=`` decides the value mode; a leading blank
  makes the value unquoted, so quotes after it are content
- unquoted values and keys are trimmed of surrounding whitespace

The parser never raises. Malformed input degrades to whatever the state
machine produced for it.

Example:
    >>> parse('A=1\\nB="two words" # comment\\n')
    {'A': '1', 'B': 'two words'}
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional

__all__ = ["EnvMap", "DotEnvParser", "parse"]

EnvMap = Dict[str, str]

QUOTES = frozenset('"\'`')
BRACE_OPEN = "{"
BRACE_CLOSE = "}"
LINE_TERMINATORS = frozenset("\r\n")
COMMENT = "#"


class _State(Enum):
    KEY = "key"
    BEFORE_VALUE = "before_value"
    VALUE = "value"
    QUOTED_VALUE = "quoted_value"
    AFTER_QUOTE = "after_quote"
    COMMENT = "comment"


class DotEnvParser:
    """State machine turning ``.env`` text into an ``EnvMap``.

    A parser instance holds the state of one ``parse`` call only; use the
    module-level :func:`parse` unless you need to subclass.
    """

    def __init__(self) -> None:
        self._reset()

    def _reset(self) -> None:
        self._output: EnvMap = {}
        self._state = _State.KEY
        # Closing character of the active quote, set in QUOTED_VALUE/AFTER_QUOTE
        self._quote: Optional[str] = None
        self._key: List[str] = []
        self._value: List[str] = []

    def parse(self, text: str) -> EnvMap:
        self._reset()
        for char in text:
            self._feed(char)
        self._finish_value()
        output = self._output
        self._reset()
        return output

    def _feed(self, char: str) -> None:
        state = self._state

        if char in LINE_TERMINATORS and state is not _State.QUOTED_VALUE:
            self._finish_value()
            self._state = _State.KEY
            self._quote = None
            return

        if char == COMMENT and state in (_State.KEY, _State.BEFORE_VALUE, _State.VALUE):
            self._state = _State.COMMENT
            return

        if state is _State.KEY:
            if char == "=":
                self._state = _State.BEFORE_VALUE
            else:
                self._key.append(char)

        elif state is _State.BEFORE_VALUE:
            if char in QUOTES:
                self._open_quote(char)
            elif char == BRACE_OPEN:
                self._open_quote(BRACE_CLOSE)
                self._value.append(char)
            else:
                self._value.append(char)
                self._state = _State.VALUE

        elif state is _State.QUOTED_VALUE:
            if char == self._quote:
                if char == BRACE_CLOSE:
                    self._value.append(char)
                self._state = _State.AFTER_QUOTE
            else:
                self._value.append(char)

        elif state is _State.VALUE:
            self._value.append(char)

        # AFTER_QUOTE and COMMENT discard everything up to the line terminator

    def _open_quote(self, closing: str) -> None:
        self._quote = closing
        self._state = _State.QUOTED_VALUE

    def _finish_value(self) -> None:
        key = "".join(self._key).strip()
        if key:
            value = "".join(self._value)
            if self._state is _State.AFTER_QUOTE:
                if self._quote == '"':
                    value = value.replace("\\n", "\n")
            else:
                value = value.strip()
            self._output[key] = value
        self._key = []
        self._value = []


def parse(text: str) -> EnvMap:
    """Parse ``.env`` text into a flat key to value mapping."""
    return DotEnvParser().parse(text)
