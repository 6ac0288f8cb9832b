"""Deterministic document generators for performance benchmarks.

All generators produce fixed, reproducible text. No random values.
Three tiers: a small flat object, a 1k-element array of records, and a
deeply nested document. Each tier is provided in strict and lenient form
(single quotes, Python literals, trailing and missing commas).
"""

from __future__ import annotations

import json
from typing import Any

import pytest


def generate_record(i: int) -> dict[str, Any]:
    """Generate one record with every kind of value."""
    return {
        "id": i,
        "name": f"item_{i}",
        "price": i * 1.25,
        "active": i % 2 == 0,
        "parent": None,
        "tags": [f"t{i % 7}", f"t{i % 11}"],
    }


def _to_lenient(strict: str) -> str:
    """Rewrite strict JSON into the lenient dialect, keeping its meaning.

    Only valid for generated documents whose strings contain no quotes.
    """
    return (
        strict.replace('"', "'")
        .replace("true", "True")
        .replace("false", "False")
        .replace("null", "None")
        .replace("]", ",]")
        .replace(", ", " ")
    )


def _make_nested(depth: int) -> dict[str, Any]:
    node: dict[str, Any] = {"leaf": [1, 2, 3]}
    for level in range(depth):
        node = {f"level_{level}": node, "value": level}
    return node


def _pair(value: Any) -> tuple[str, str]:
    strict = json.dumps(value)
    return strict, _to_lenient(strict)


# --- Fixtures for each size tier ---


@pytest.fixture
def doc_small() -> tuple[str, str]:
    """Single record, strict and lenient."""
    return _pair(generate_record(0))


@pytest.fixture
def doc_records() -> tuple[str, str]:
    """Array of 1000 records, strict and lenient."""
    return _pair([generate_record(i) for i in range(1000)])


@pytest.fixture
def doc_nested() -> tuple[str, str]:
    """Object nested 200 levels deep, strict and lenient."""
    return _pair(_make_nested(200))
