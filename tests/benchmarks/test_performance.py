"""Performance benchmark suite for lenient-json.

Compares the four span policies on the same documents, and the lenient
dialect against strict text.

Run with: pytest tests/benchmarks/ --benchmark-only -v
Skip during normal test runs: pytest --benchmark-disable
"""

from __future__ import annotations

import json

import pytest

from lenient_json import SpanMode, loads, parse

MODES = list(SpanMode)


class TestPerformanceSmall:
    """Benchmark suite for a single flat record."""

    @pytest.mark.parametrize("mode", MODES)
    def test_small_strict(self, benchmark, doc_small, mode):  # type: ignore[no-untyped-def]
        strict, _ = doc_small
        tree = benchmark(parse, strict, mode)
        assert tree.type == "object"

    def test_small_lenient(self, benchmark, doc_small):  # type: ignore[no-untyped-def]
        strict, lenient = doc_small
        result = benchmark(loads, lenient)
        # Verify the result is valid (not just timing)
        assert result == json.loads(strict)


class TestPerformanceRecords:
    """Benchmark suite for an array of 1000 records."""

    @pytest.mark.parametrize("mode", MODES)
    def test_records_strict(self, benchmark, doc_records, mode):  # type: ignore[no-untyped-def]
        strict, _ = doc_records
        tree = benchmark(parse, strict, mode)
        assert len(tree.elements) == 1000

    def test_records_lenient(self, benchmark, doc_records):  # type: ignore[no-untyped-def]
        strict, lenient = doc_records
        result = benchmark(loads, lenient)
        assert result == json.loads(strict)


class TestPerformanceNested:
    """Benchmark suite for a document nested 200 levels deep."""

    @pytest.mark.parametrize("mode", MODES)
    def test_nested_strict(self, benchmark, doc_nested, mode):  # type: ignore[no-untyped-def]
        strict, _ = doc_nested
        tree = benchmark(parse, strict, mode)
        assert tree.type == "object"

    def test_nested_lenient(self, benchmark, doc_nested):  # type: ignore[no-untyped-def]
        strict, lenient = doc_nested
        result = benchmark(loads, lenient)
        assert result == json.loads(strict)
