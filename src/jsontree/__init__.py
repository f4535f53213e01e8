"""
Recursive descent JSON decoder producing immutable typed trees.

Every grammar production is exposed as a function returning the parsed value
together with the unconsumed remainder of the input, and ``loads``/``load``
wrap the top-level production with whole-document semantics.
"""

from collections.abc import Callable
from typing import IO
from typing import Any

from ._errors import JSONDecodeError
from ._errors import Position
from ._nodes import Array
from ._nodes import Boolean
from ._nodes import JsonNode
from ._nodes import Null
from ._nodes import Number
from ._nodes import Object
from ._nodes import String
from ._nodes import node_from_python
from ._parser import DEFAULT_MAX_DEPTH
from ._parser import ParseConfig
from ._parser import Parser
from ._parser import ParseResult
from ._profiling import HotPathStats
from ._profiling import clear_hot_path_stats
from ._profiling import disable_profiling
from ._profiling import enable_profiling
from ._profiling import get_hot_path_stats
from ._profiling import profiling_enabled

__version__ = "0.1.0"

type Production[T] = Callable[
    [Parser], Callable[[Position], tuple[T, Position]]
]


def _check_input(s: Any) -> None:
    if not isinstance(s, str):
        raise TypeError(
            f"the JSON object must be str, not {type(s).__name__}"
        )


def _run[T](
    parser: Parser, production: Production[T], start: Position
) -> tuple[T, Position]:
    """Runs one production and returns the value with the position past it."""
    try:
        return production(parser)(start)
    except RecursionError as e:
        pos = parser.last_open
        if pos is None:
            pos, where = start, "json"
        else:
            where = "object" if parser.text[pos] == "{" else "array"
        raise JSONDecodeError(
            "Maximum nesting depth exceeded", parser.text, pos, where
        ) from e
    except JSONDecodeError as e:
        if type(e) is not JSONDecodeError:
            # A bare mismatch is reported with the public error type
            raise JSONDecodeError(e.msg, e.doc, e.pos, e.production) from None
        raise


def _production[T](
    s: str, production: Production[T], kwargs: dict[str, Any]
) -> ParseResult[T]:
    _check_input(s)
    value, end = _run(Parser(s, ParseConfig(**kwargs)), production, 0)
    return ParseResult(value, s[end:])


def parse_json(s: str, **kwargs: Any) -> ParseResult[JsonNode]:
    """
    Parses any JSON value at the start of ``s``.

    Tries object, array, number, string, boolean and null in that order.
    The remainder is returned untouched, so callers wanting whole-document
    semantics should use ``loads``.
    """
    return _production(s, lambda p: p.parse_json, kwargs)


def parse_object(s: str, **kwargs: Any) -> ParseResult[Object]:
    return _production(s, lambda p: p.parse_object, kwargs)


def parse_array(s: str, **kwargs: Any) -> ParseResult[Array]:
    return _production(s, lambda p: p.parse_array, kwargs)


def parse_number(s: str, **kwargs: Any) -> ParseResult[Number]:
    return _production(s, lambda p: p.parse_number, kwargs)


def parse_string_literal(s: str, **kwargs: Any) -> ParseResult[str]:
    """Parses a quoted string and returns its raw content, without a node."""
    return _production(s, lambda p: p.parse_string_literal, kwargs)


def parse_string(s: str, **kwargs: Any) -> ParseResult[String]:
    return _production(s, lambda p: p.parse_string, kwargs)


def parse_boolean(s: str, **kwargs: Any) -> ParseResult[Boolean]:
    return _production(s, lambda p: p.parse_boolean, kwargs)


def parse_null(s: str, **kwargs: Any) -> ParseResult[Null]:
    return _production(s, lambda p: p.parse_null, kwargs)


def loads(s: str, **kwargs: Any) -> JsonNode:
    """
    Parses a complete JSON document into a tree.

    Surrounding whitespace is ignored; anything else left after the value
    is reported as extra data.
    """
    _check_input(s)

    # Check for UTF-8 BOM and reject it per JSON specification
    if s.startswith("\ufeff"):
        raise JSONDecodeError(
            "JSON input should not contain BOM (Byte Order Mark)", s, 0
        )

    parser = Parser(s, ParseConfig(**kwargs))
    value, end = _run(
        parser, lambda p: p.parse_json, parser.skip_whitespace(0)
    )

    end = parser.skip_whitespace(end)
    if end != len(s):
        raise JSONDecodeError("Extra data", s, end)

    return value


def load(fp: IO[str], **kwargs: Any) -> JsonNode:
    """Parses a complete JSON document read from a file-like object."""
    if not hasattr(fp, "read"):
        raise TypeError("fp must have a read() method")

    return loads(fp.read(), **kwargs)


__all__ = [
    "DEFAULT_MAX_DEPTH",
    "Array",
    "Boolean",
    "HotPathStats",
    "JSONDecodeError",
    "JsonNode",
    "Null",
    "Number",
    "Object",
    "ParseConfig",
    "ParseResult",
    "Parser",
    "String",
    "clear_hot_path_stats",
    "disable_profiling",
    "enable_profiling",
    "get_hot_path_stats",
    "load",
    "loads",
    "node_from_python",
    "parse_array",
    "parse_boolean",
    "parse_json",
    "parse_null",
    "parse_number",
    "parse_object",
    "parse_string",
    "parse_string_literal",
    "profiling_enabled",
]
