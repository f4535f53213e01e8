"""
Pytest configuration and shared fixtures for jsontree tests.

Provides immutable test data fixtures for the pass/fail suites.
"""

from dataclasses import dataclass
from typing import Any

import pytest


@dataclass(frozen=True)
class JsonTestCase:
    """
    Immutable container for JSON test case data.

    Holds test input and expected behavior for consistent test execution.
    """

    description: str
    input_data: str
    should_fail: bool = False
    expected_output: Any = None


@pytest.fixture
def json_fail_cases() -> list[JsonTestCase]:
    """
    Provides JSON strings that must fail parsing.

    Taken from the json.org JSON_checker suite; cases the grammar accepts
    on purpose are listed in ``json_accepted_deviations`` instead.
    """
    fail_docs = {
        # https://json.org/JSON_checker/test/fail2.json
        "fail2.json": '["Unclosed array"',
        # https://json.org/JSON_checker/test/fail3.json
        "fail3.json": '{unquoted_key: "keys must be quoted"}',
        # https://json.org/JSON_checker/test/fail4.json
        "fail4.json": '["extra comma",]',
        # https://json.org/JSON_checker/test/fail5.json
        "fail5.json": '["double extra comma",,]',
        # https://json.org/JSON_checker/test/fail6.json
        "fail6.json": '[   , "<-- missing value"]',
        # https://json.org/JSON_checker/test/fail7.json
        "fail7.json": '["Comma after the close"],',
        # https://json.org/JSON_checker/test/fail8.json
        "fail8.json": '["Extra close"]]',
        # https://json.org/JSON_checker/test/fail9.json
        "fail9.json": '{"Extra comma": true,}',
        # https://json.org/JSON_checker/test/fail10.json
        "fail10.json": (
            '{"Extra value after close": true} "misplaced quoted value"'
        ),
        # https://json.org/JSON_checker/test/fail11.json
        "fail11.json": '{"Illegal expression": 1 + 2}',
        # https://json.org/JSON_checker/test/fail12.json
        "fail12.json": '{"Illegal invocation": alert()}',
        # https://json.org/JSON_checker/test/fail14.json
        "fail14.json": '{"Numbers cannot be hex": 0x14}',
        # https://json.org/JSON_checker/test/fail16.json
        "fail16.json": "[\\naked]",
        # https://json.org/JSON_checker/test/fail19.json
        "fail19.json": '{"Missing colon" null}',
        # https://json.org/JSON_checker/test/fail20.json
        "fail20.json": '{"Double colon":: null}',
        # https://json.org/JSON_checker/test/fail21.json
        "fail21.json": '{"Comma instead of colon", null}',
        # https://json.org/JSON_checker/test/fail22.json
        "fail22.json": '["Colon instead of comma": false]',
        # https://json.org/JSON_checker/test/fail23.json
        "fail23.json": '["Bad value", truth]',
        # https://json.org/JSON_checker/test/fail24.json
        "fail24.json": "['single quote']",
        # https://json.org/JSON_checker/test/fail29.json
        "fail29.json": "[0e]",
        # https://json.org/JSON_checker/test/fail30.json
        "fail30.json": "[0e+]",
        # https://json.org/JSON_checker/test/fail31.json
        "fail31.json": "[0e+-1]",
        # https://json.org/JSON_checker/test/fail32.json
        "fail32.json": '{"Comma instead if closing brace": true,',
        # https://json.org/JSON_checker/test/fail33.json
        "fail33.json": '["mismatch"}',
    }

    return [
        JsonTestCase(description=name, input_data=doc, should_fail=True)
        for name, doc in fail_docs.items()
    ]


@pytest.fixture
def json_accepted_deviations() -> list[JsonTestCase]:
    """
    Provides JSON_checker failure documents that this grammar accepts.

    Strings are taken verbatim without escape or control character checks,
    numbers follow a relaxed float grammar, and nesting is only limited by
    the configured depth cap.
    """
    return [
        JsonTestCase(
            "fail1.json - scalar payload",
            '"A JSON payload should be an object or array, not a string."',
            expected_output=(
                "A JSON payload should be an object or array, not a string."
            ),
        ),
        JsonTestCase(
            "fail13.json - leading zeroes",
            '{"Numbers cannot have leading zeroes": 013}',
            expected_output={"Numbers cannot have leading zeroes": 13.0},
        ),
        JsonTestCase(
            "fail15.json - backslash kept verbatim",
            '["Illegal backslash escape: \\x15"]',
            expected_output=["Illegal backslash escape: \\x15"],
        ),
        JsonTestCase(
            "fail18.json - deep nesting",
            '[[[[[[[[[[[[[[[[[[[["Too deep"]]]]]]]]]]]]]]]]]]]]',
        ),
        JsonTestCase(
            "fail25.json - raw tabs in string",
            '["\ttab\tcharacter\tin\tstring\t"]',
            expected_output=["\ttab\tcharacter\tin\tstring\t"],
        ),
        JsonTestCase(
            "fail27.json - raw line break in string",
            '["line\nbreak"]',
            expected_output=["line\nbreak"],
        ),
        JsonTestCase(
            "control character in string",
            '["A\u001fZ control characters in string"]',
            expected_output=["A\u001fZ control characters in string"],
        ),
    ]


@pytest.fixture
def json_pass_cases() -> list[JsonTestCase]:
    """
    Provides JSON strings that must parse successfully.
    """
    return [
        JsonTestCase(
            description="pass2.json - deep nesting",
            input_data='[[[[[[[[[[[[[[[[[[["Not too deep"]]]]]]]]]]]]]]]]]]]',
        ),
        JsonTestCase(
            description="pass3.json - simple object",
            input_data=(
                '{"JSON Test Pattern pass3": {"The outermost value": '
                '"must be an object or array.", "In this test": '
                '"It is an object."}}'
            ),
        ),
        JsonTestCase(
            description="mixed document",
            input_data="""{
    "name": "jsontree",
    "version": 0.1,
    "tags": ["parser", "json"],
    "nested": {"empty": {}, "list": [], "flag": false},
    "nothing": null,
    "exp": -1.5E+3
}""",
        ),
    ]


@pytest.fixture
def basic_json_values() -> list[JsonTestCase]:
    """
    Provides basic JSON value test cases for fundamental parsing.

    Expected outputs are plain Python values compared via ``to_python``.
    """
    return [
        JsonTestCase("null value", "null", False, None),
        JsonTestCase("true boolean", "true", False, True),
        JsonTestCase("false boolean", "false", False, False),
        JsonTestCase("integer", "42", False, 42.0),
        JsonTestCase("negative integer", "-17", False, -17.0),
        JsonTestCase("float", "3.14", False, 3.14),
        JsonTestCase("empty string", '""', False, ""),
        JsonTestCase("simple string", '"hello"', False, "hello"),
        JsonTestCase("empty array", "[]", False, []),
        JsonTestCase("empty object", "{}", False, {}),
        JsonTestCase("simple array", "[1, 2, 3]", False, [1.0, 2.0, 3.0]),
        JsonTestCase(
            "simple object", '{"key": "value"}', False, {"key": "value"}
        ),
        JsonTestCase("bare word", "nil", True),
        JsonTestCase("empty document", "", True),
    ]
