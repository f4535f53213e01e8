"""
Recursive descent parser producing ``JsonNode`` trees.

One method per grammar production. Each takes the absolute position where
its prefix starts and returns the parsed value with the position just past
it, or raises ``JSONDecodeError``. There is no tokenizer: delimiters and
whitespace are recognized inline.
"""

import os
from dataclasses import dataclass
from typing import NamedTuple

from ._errors import JSONDecodeError
from ._errors import Position
from ._errors import _Mismatch
from ._nodes import Array
from ._nodes import Boolean
from ._nodes import JsonNode
from ._nodes import Null
from ._nodes import Number
from ._nodes import Object
from ._nodes import String
from ._profiling import ProfileContext

WHITESPACE = " \t\n\r"
DIGITS = "0123456789"

_FALLBACK_MAX_DEPTH = 256


def _default_max_depth() -> int | None:
    """Reads the nesting cap from ``JSONTREE_MAX_DEPTH`` if present."""
    raw = os.environ.get("JSONTREE_MAX_DEPTH")
    if raw is None:
        return _FALLBACK_MAX_DEPTH
    if raw.strip().lower() in ("", "none", "0"):
        return None
    try:
        value = int(raw)
    except ValueError as e:
        raise ValueError(
            f"JSONTREE_MAX_DEPTH must be an integer, got {raw!r}"
        ) from e
    if value < 1:
        raise ValueError(
            f"JSONTREE_MAX_DEPTH must be a positive integer, got {raw!r}"
        )
    return value


DEFAULT_MAX_DEPTH = _default_max_depth()


@dataclass(frozen=True)
class ParseConfig:
    """
    Configures parsing behavior with immutable settings.

    ``strict`` keeps the exact bracket grammar where whitespace is only
    accepted around separators, keys and values. Non-strict parsing also
    accepts whitespace directly inside ``[ ]`` and ``{ }``.

    ``max_depth`` caps container nesting; ``None`` leaves only the
    interpreter's recursion limit.
    """

    strict: bool = True
    max_depth: int | None = DEFAULT_MAX_DEPTH

    def __post_init__(self) -> None:
        if not isinstance(self.strict, bool):
            raise TypeError("strict must be a boolean")
        if self.max_depth is not None and (
            isinstance(self.max_depth, bool)
            or not isinstance(self.max_depth, int)
            or self.max_depth < 1
        ):
            raise ValueError("max_depth must be a positive integer or None")


class ParseResult[T](NamedTuple):
    """A parsed value and the unconsumed remainder of the input."""

    value: T
    remainder: str


class Parser:
    """
    Recursive descent parser over a complete document.

    The call stack mirrors the nesting of the document; ``depth`` counts
    open containers so the configured cap can be enforced, and
    ``last_open`` is the position of the most recently opened bracket.
    """

    def __init__(self, text: str, config: ParseConfig):
        self.text = text
        self.length = len(text)
        self.config = config
        self.depth = 0
        self.last_open: Position | None = None

    def _fail(
        self, msg: str, pos: Position, production: str
    ) -> JSONDecodeError:
        return JSONDecodeError(msg, self.text, pos, production)

    def _mismatch(self, msg: str, pos: Position, production: str) -> _Mismatch:
        return _Mismatch(msg, self.text, pos, production)

    def _startswith(self, literal: str, pos: Position) -> bool:
        return self.text.startswith(literal, pos)

    def skip_whitespace(self, pos: Position) -> Position:
        """Returns the first non-whitespace position at or after ``pos``."""
        while pos < self.length and self.text[pos] in WHITESPACE:
            pos += 1
        return pos

    def _skip_digits(self, pos: Position) -> Position:
        while pos < self.length and self.text[pos] in DIGITS:
            pos += 1
        return pos

    def _enter(self, pos: Position, production: str) -> None:
        """Opens a container; the caller must decrement ``depth`` on exit."""
        max_depth = self.config.max_depth
        if max_depth is not None and self.depth >= max_depth:
            raise self._fail("Maximum nesting depth exceeded", pos, production)
        self.depth += 1
        self.last_open = pos

    def parse_json(self, pos: Position) -> tuple[JsonNode, Position]:
        """
        Tries every production in a fixed order and returns the first match.

        Only mismatches fall through to the next alternative; a production
        that matched its opening marker and then failed propagates its own
        error.
        """
        with ProfileContext("parse_json", pos) as profile:
            for production in (
                self.parse_object,
                self.parse_array,
                self.parse_number,
                self.parse_string,
                self.parse_boolean,
                self.parse_null,
            ):
                try:
                    value, end = production(pos)
                except _Mismatch:
                    continue
                profile.consumed(end)
                return value, end
            raise self._fail("Expecting value", pos, "json")

    def parse_null(self, pos: Position) -> tuple[Null, Position]:
        with ProfileContext("parse_null", pos) as profile:
            if not self._startswith("null", pos):
                raise self._mismatch("Expecting 'null' literal", pos, "null")
            profile.consumed(pos + 4)
            return Null(), pos + 4

    def parse_boolean(self, pos: Position) -> tuple[Boolean, Position]:
        with ProfileContext("parse_boolean", pos) as profile:
            if self._startswith("true", pos):
                profile.consumed(pos + 4)
                return Boolean(True), pos + 4
            if self._startswith("false", pos):
                profile.consumed(pos + 5)
                return Boolean(False), pos + 5
            raise self._mismatch("Expecting boolean literal", pos, "boolean")

    def scan_number(self, pos: Position) -> Position:
        """
        Returns the end of the numeric prefix starting at ``pos``.

        Accepts an optional sign, then either digits with an optional
        fraction (``1``, ``1.``, ``1.5``) or a bare fraction (``.5``),
        then an optional exponent.
        """
        start = pos
        if pos < self.length and self.text[pos] in "+-":
            pos += 1

        int_end = self._skip_digits(pos)
        if int_end > pos:
            pos = int_end
            if pos < self.length and self.text[pos] == ".":
                pos = self._skip_digits(pos + 1)
        elif self._startswith(".", pos) and (
            self._skip_digits(pos + 1) > pos + 1
        ):
            pos = self._skip_digits(pos + 1)
        else:
            raise self._mismatch("Expecting number", start, "number")

        if pos < self.length and self.text[pos] in "eE":
            pos += 1
            if pos < self.length and self.text[pos] in "+-":
                pos += 1
            exp_end = self._skip_digits(pos)
            if exp_end == pos:
                raise self._fail("Invalid exponent", start, "number")
            pos = exp_end

        return pos

    def parse_number(self, pos: Position) -> tuple[Number, Position]:
        with ProfileContext("parse_number", pos) as profile:
            end = self.scan_number(pos)
            profile.consumed(end)
            return Number(float(self.text[pos:end])), end

    def parse_string_literal(self, pos: Position) -> tuple[str, Position]:
        """
        Returns the raw content between a pair of double quotes.

        The content runs to the next quote character; backslashes carry no
        meaning, so a quote can never be part of the content.
        """
        with ProfileContext("parse_string_literal", pos) as profile:
            if not self._startswith('"', pos):
                raise self._mismatch("Expecting string", pos, "string")
            end = self.text.find('"', pos + 1)
            if end == -1:
                raise self._fail(
                    "Unterminated string starting at", pos, "string"
                )
            profile.consumed(end + 1)
            return self.text[pos + 1 : end], end + 1

    def parse_string(self, pos: Position) -> tuple[String, Position]:
        content, pos = self.parse_string_literal(pos)
        return String(content), pos

    def parse_array(self, pos: Position) -> tuple[Array, Position]:
        with ProfileContext("parse_array", pos) as profile:
            if not self._startswith("[", pos):
                raise self._mismatch("Expecting '[' delimiter", pos, "array")
            self._enter(pos, "array")
            try:
                pos += 1
                if not self.config.strict:
                    pos = self.skip_whitespace(pos)

                items: list[JsonNode] = []
                if not self._startswith("]", pos):
                    while True:
                        item, pos = self.parse_json(pos)
                        items.append(item)

                        after = self.skip_whitespace(pos)
                        if self._startswith(",", after):
                            comma_pos = after
                            pos = self.skip_whitespace(after + 1)
                            if self._startswith("]", pos):
                                raise self._fail(
                                    "Illegal trailing comma before end of "
                                    "array",
                                    comma_pos,
                                    "array",
                                )
                            continue

                        if not self.config.strict:
                            pos = after
                        if self._startswith("]", pos):
                            break
                        raise self._fail(
                            "Expecting ',' delimiter", after, "array"
                        )
            finally:
                self.depth -= 1

            profile.consumed(pos + 1)
            return Array(tuple(items)), pos + 1

    def _parse_object_key(self, pos: Position) -> tuple[str, Position]:
        """Parses an object key, reporting a missing quote as a bad key."""
        try:
            return self.parse_string_literal(pos)
        except _Mismatch as e:
            raise self._fail(
                "Expecting property name enclosed in double quotes",
                pos,
                "object",
            ) from e

    def parse_object(self, pos: Position) -> tuple[Object, Position]:
        with ProfileContext("parse_object", pos) as profile:
            if not self._startswith("{", pos):
                raise self._mismatch("Expecting '{' delimiter", pos, "object")
            self._enter(pos, "object")
            entries: dict[str, JsonNode] = {}
            try:
                pos += 1
                if not self.config.strict:
                    after = self.skip_whitespace(pos)
                    if self._startswith("}", after):
                        pos = after

                while not self._startswith("}", pos):
                    key, pos = self._parse_object_key(self.skip_whitespace(pos))

                    pos = self.skip_whitespace(pos)
                    if not self._startswith(":", pos):
                        raise self._fail(
                            "Expecting ':' delimiter", pos, "object"
                        )

                    value, pos = self.parse_json(self.skip_whitespace(pos + 1))
                    # Later duplicates replace the value but keep the key's slot
                    entries[key] = value

                    pos = self.skip_whitespace(pos)
                    if self._startswith(",", pos):
                        comma_pos = pos
                        pos += 1
                        if self._startswith("}", self.skip_whitespace(pos)):
                            raise self._fail(
                                "Illegal trailing comma before end of object",
                                comma_pos,
                                "object",
                            )
                        continue
                    if not self._startswith("}", pos):
                        raise self._fail(
                            "Expecting ',' delimiter", pos, "object"
                        )
            finally:
                self.depth -= 1

            profile.consumed(pos + 1)
            return Object(entries), pos + 1
