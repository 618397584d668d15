# topmark:header:start
#
#   project      : ThrowStream
#   file         : test_api.py
#   file_relpath : tests/unit/test_api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for the call-site helpers in :mod:`throwstream.api`.

Expected records are built from the test's own frame, so the assertions hold
wherever the test file lives.
"""

from __future__ import annotations

import logging
import sys

import pytest

from throwstream import (
    StreamConfig,
    ThrowStream,
    absorb_here,
    append_copy_here,
    append_here,
    format_record,
    stream_here,
    traced,
)


def _record(line: int, function: str) -> str:
    """Return the record expected for ``line`` in this test file."""
    return format_record(line, sys._getframe(1).f_code.co_filename, function)


def test_stream_here_records_the_caller(with_source: StreamConfig) -> None:
    """`stream_here` stamps the caller's file, line and function."""
    line = sys._getframe().f_lineno + 1
    ts = stream_here("Error: ", 42, config=with_source)
    assert ts.what() == _record(line, "test_stream_here_records_the_caller") + "Error: 42"


def test_stream_here_can_be_raised(with_source: StreamConfig) -> None:
    """The returned accumulator is raised directly by the caller."""
    with pytest.raises(ThrowStream, match="can't take"):
        raise stream_here("Error: I can't take the inverse of 0!", config=with_source)


def test_absorb_here_foreign(with_source: StreamConfig) -> None:
    """Absorbing a foreign error stamps the caller twice around the message."""
    try:
        raise ValueError("boom")
    except ValueError as ex:
        line = sys._getframe().f_lineno + 1
        ts = absorb_here(ex, "context", config=with_source)
    rec = _record(line, "test_absorb_here_foreign")
    assert ts.what() == rec + "boom" + rec + "context"


def test_absorb_here_native(with_source: StreamConfig) -> None:
    """Absorbing an accumulator copies it and adds one record at the caller."""
    inner = ThrowStream(1, "inner.py", "inner", config=with_source) << "root cause"
    line = sys._getframe().f_lineno + 1
    outer = absorb_here(inner, "Called from here: x = ", 3)
    assert outer.what() == (
        inner.what() + _record(line, "test_absorb_here_native") + "Called from here: x = 3"
    )


def test_append_here_extends_in_place(with_source: StreamConfig) -> None:
    """`append_here` adds a record to an existing accumulator without copying it."""
    ts = ThrowStream(1, "a.py", "f", config=with_source) << "first"
    before = ts.what()
    line = sys._getframe().f_lineno + 1
    returned = append_here(ts, "second")
    assert returned is ts
    assert ts.what() == before + _record(line, "test_append_here_extends_in_place") + "second"


def test_append_copy_here(with_source: StreamConfig) -> None:
    """`append_copy_here` absorbs into an existing accumulator at the caller."""
    ts = ThrowStream(1, "a.py", "f", config=with_source) << "mine"
    other = ThrowStream(2, "b.py", "g", config=with_source) << "theirs"
    line = sys._getframe().f_lineno + 1
    append_copy_here(ts, other, "joined")
    assert ts.what() == (
        "\n( a.py:1 , in f() )    ->  mine"
        "\n( b.py:2 , in g() )    ->  theirs"
        + _record(line, "test_append_copy_here")
        + "joined"
    )


def test_helpers_honour_disabled_capture(without_source: StreamConfig) -> None:
    """With capture disabled, helper records are bare newlines too."""
    ts = stream_here("one", config=without_source)
    append_here(ts, "two")
    outer = absorb_here(ts, "three")
    assert outer.what() == "\none\ntwo\nthree"


# --- traced --------------------------------------------------------------------


def test_traced_absorbs_and_chains(with_source: StreamConfig) -> None:
    """Exceptions escaping a traced function are absorbed and chained with ``from``."""
    line_of_def = sys._getframe().f_lineno + 2

    @traced(lambda a, b: f"divide: a = {a} b = {b}", config=with_source)
    def divide(a: int, b: int) -> float:
        return a / b

    with pytest.raises(ThrowStream) as excinfo:
        divide(1, 0)

    ts = excinfo.value
    assert isinstance(ts.__cause__, ZeroDivisionError)
    rec = _record(line_of_def, "divide")
    assert ts.what() == rec + str(ts.__cause__) + rec + "divide: a = 1 b = 0"


def test_traced_nested_builds_one_chain(with_source: StreamConfig) -> None:
    """Nested traced functions produce one record per level on a single chain."""

    @traced(config=with_source)
    def inner() -> None:
        raise stream_here("root", config=with_source)

    @traced(lambda: "outer context", config=with_source)
    def outer() -> None:
        inner()

    with pytest.raises(ThrowStream) as excinfo:
        outer()

    text = excinfo.value.what()
    assert text.count("\n(") == 3
    assert text.index("root") < text.rindex("in inner()") < text.index("outer context")
    assert text.endswith("in outer() )    ->  outer context")


def test_traced_passes_results_through(with_source: StreamConfig) -> None:
    """A traced function that does not raise behaves exactly like the original."""

    @traced(config=with_source)
    def add(a: int, b: int) -> int:
        """Add two numbers."""
        return a + b

    assert add(2, 3) == 5
    assert add.__name__ == "add"
    assert add.__doc__ == "Add two numbers."


def test_traced_failing_describe_keeps_the_chain(
    with_source: StreamConfig, caplog: pytest.LogCaptureFixture
) -> None:
    """A `describe` callable that raises does not replace the accumulated chain."""

    @traced(lambda key: {}[key], config=with_source)
    def lookup(key: str) -> None:
        raise ValueError("lookup failed")

    with caplog.at_level(logging.ERROR, logger="throwstream.api"):
        with pytest.raises(ThrowStream) as excinfo:
            lookup("missing")

    ts = excinfo.value
    assert isinstance(ts.__cause__, ValueError)
    assert "lookup failed" in ts.what()
    assert ts.what().endswith("<description unavailable: 'missing'>")
    assert any("Describing the call" in r.getMessage() for r in caplog.records)
