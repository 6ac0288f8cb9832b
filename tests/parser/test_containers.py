"""Tests for arrays and objects, including the relaxed-comma extension.

Trailing commas and missing commas between elements/fields are accepted and
give the same tree as the comma-correct form. Field order and duplicate keys
are preserved.
"""

from __future__ import annotations

import pytest

from lenient_json import (
    EMPTY_SPAN,
    Array,
    Boolean,
    Field,
    JsonSyntaxError,
    Null,
    Number,
    Object,
    String,
)
from lenient_json import parse_with_empty_spans as p

E = EMPTY_SPAN


def n(text: str) -> Number[object]:
    return Number(text, E)


def f(key: str, value: object) -> Field[object]:
    return Field(String(key, E), value)  # type: ignore[arg-type]


ONE_TWO_THREE = Array((n("1"), n("2"), n("3")), E)
ABC = Object((f("a", n("1")), f("b", n("2")), f("c", n("3"))), E)


# ---------------------------------------------------------------------------
# Empty containers
# ---------------------------------------------------------------------------


class TestEmpty:
    @pytest.mark.parametrize("text", ["{}", "{ }", "{\n}", " {} ", " { } "])
    def test_empty_object(self, text: str) -> None:
        assert p(text) == Object((), E)

    @pytest.mark.parametrize("text", ["[]", "[ ]", "[\n]", " [] ", " [ ] "])
    def test_empty_array(self, text: str) -> None:
        assert p(text) == Array((), E)


# ---------------------------------------------------------------------------
# Arrays
# ---------------------------------------------------------------------------


class TestArray:
    def test_strict(self) -> None:
        assert p("[ 1 , 2 , 3 ]") == ONE_TWO_THREE

    def test_trailing_comma(self) -> None:
        assert p("[1,2,3,]") == ONE_TWO_THREE

    def test_missing_comma(self) -> None:
        assert p("[1,2 3,]") == ONE_TWO_THREE

    def test_no_commas_at_all(self) -> None:
        assert p("[1 2 3]") == ONE_TWO_THREE

    def test_missing_comma_between_strings(self) -> None:
        assert p("['a' \"b\"]") == Array((String("a", E), String("b", E)), E)

    def test_mixed_values(self) -> None:
        assert p("[null, True, 'x', {}, []]") == Array(
            (Null(E), Boolean(True, E), String("x", E), Object((), E), Array((), E)),
            E,
        )

    def test_nested(self) -> None:
        assert p("[[1], [[2]]]") == Array(
            (Array((n("1"),), E), Array((Array((n("2"),), E),), E)), E
        )

    @pytest.mark.parametrize("text", ["[,1]", "[1,,2]", "[,]"])
    def test_stray_commas_rejected(self, text: str) -> None:
        with pytest.raises(JsonSyntaxError, match="Unexpected character: ','"):
            p(text)

    @pytest.mark.parametrize("text", ["[", "[1", "[1,", "[1, 2", "[[]"])
    def test_unterminated(self, text: str) -> None:
        with pytest.raises(JsonSyntaxError, match="end of input"):
            p(text)

    def test_mismatched_bracket(self) -> None:
        with pytest.raises(JsonSyntaxError, match="Unexpected character: '}'"):
            p("[1}")


# ---------------------------------------------------------------------------
# Objects
# ---------------------------------------------------------------------------


class TestObject:
    def test_strict(self) -> None:
        assert p('{ "a" : 1 , "b" : 2 , "c" : 3 }') == ABC

    def test_single_quoted_keys(self) -> None:
        assert p("{ 'a' : 1 , 'b' : 2 , 'c' : 3 }") == ABC

    def test_trailing_comma(self) -> None:
        assert p('{ "a" : 1 , "b" : 2 , "c" : 3 , }') == ABC

    def test_missing_comma(self) -> None:
        assert p('{ "a" : 1 , "b" : 2 "c" : 3 , }') == ABC

    def test_field_order_preserved(self) -> None:
        tree = p('{"z": 1, "a": 2}')
        assert isinstance(tree, Object)
        assert list(tree.keys()) == ["z", "a"]

    def test_duplicate_keys_kept(self) -> None:
        tree = p('{"a": 1, "a": 2}')
        assert tree == Object((f("a", n("1")), f("a", n("2"))), E)
        assert isinstance(tree, Object)
        assert tree.get("a") == n("1")

    def test_escaped_key_is_decoded(self) -> None:
        assert p('{"a\\u0062": null}') == Object((f("ab", Null(E)),), E)

    def test_nested(self) -> None:
        tree = p("{'outer': {'inner': [True]}}")
        assert tree == Object(
            (f("outer", Object((f("inner", Array((Boolean(True, E),), E)),), E)),), E
        )

    @pytest.mark.parametrize("text", ["{a: 1}", "{1: 1}", "{null: 1}", "{,}"])
    def test_unquoted_keys_rejected(self, text: str) -> None:
        with pytest.raises(JsonSyntaxError, match="Expected '\"' or \"'\""):
            p(text)

    def test_missing_colon(self) -> None:
        with pytest.raises(JsonSyntaxError, match="Expected ':', got '1'"):
            p('{"a" 1}')

    def test_missing_value(self) -> None:
        with pytest.raises(JsonSyntaxError, match="Unexpected character: '}'"):
            p('{"a": }')

    @pytest.mark.parametrize("text", ["{", '{"a"', '{"a":', '{"a": 1', '{"a": 1,'])
    def test_unterminated(self, text: str) -> None:
        with pytest.raises(JsonSyntaxError, match="end of input"):
            p(text)
