"""pytest plugin for lenient-json.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from lenient_json import JsonSyntaxError, dumps, from_python, parse_with_empty_spans
from lenient_json.tree.nodes import Array, Boolean, Null, Number, Object, String

_NODE_TYPES = (Null, Boolean, Number, String, Object, Array)


def check_json_ast(text: str, expected: Any) -> None:
    """Assert that ``text`` parses, without spans, to ``expected``.

    Args:
        text:     Lenient JSON source.
        expected: Either an AST (built with EMPTY_SPAN spans) or a plain Python
                  value, which is converted with ``from_python`` first. Plain
                  values compare number text exactly: ``1.0`` only matches the
                  literal ``1.0``.

    Raises:
        AssertionError: When the text fails to parse or parses to a different
            tree. The message carries both trees rendered as strict JSON.
    """
    if isinstance(expected, _NODE_TYPES):
        expected_tree = expected
    else:
        expected_tree = from_python(expected)
    try:
        actual_tree = parse_with_empty_spans(text)
    except JsonSyntaxError as exc:
        raise AssertionError(
            f"JSON text did not parse: {exc}\n"
            f"  text:     {text!r}\n"
            f"  expected: {dumps(expected_tree)}"
        ) from exc
    if actual_tree != expected_tree:
        raise AssertionError(
            f"JSON trees differ\n"
            f"  text:     {text!r}\n"
            f"  actual:   {dumps(actual_tree)}\n"
            f"  expected: {dumps(expected_tree)}"
        )


@pytest.fixture(scope="session")
def assert_json_ast() -> Any:
    """Fixture that returns the ``check_json_ast`` asserter.

    Session-scoped because the returned callable is stateless (every call
    parses with a fresh cursor).

    Usage in tests::

        def test_python_literals(assert_json_ast):
            assert_json_ast("{'ok': True}", {"ok": True})

        def test_mismatch(assert_json_ast):
            with pytest.raises(AssertionError, match="JSON trees differ"):
                assert_json_ast("[1, 2]", [1, 2, 3])
    """
    return check_json_ast
