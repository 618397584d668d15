# topmark:header:start
#
#   project      : ThrowStream
#   file         : demo.py
#   file_relpath : src/throwstream/demo.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Reciprocal-product demonstration.

Computes ``(1/a) * (1/b)`` for two integers typed by a user and shows how a
`ThrowStream` collects context on its way up:

* `inverse` raises a fresh accumulator for a zero divisor.
* `multiply_inverse` absorbs whatever `inverse` raised and describes its arguments.
* `parse_operands` builds an accumulator by hand, records every operand that
  fails to parse, and raises it only if something was recorded.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from throwstream.api import absorb_here, append_here, stream_here
from throwstream.config.logging import get_logger

if TYPE_CHECKING:
    from throwstream.config.logging import ThrowstreamLogger
    from throwstream.config.model import StreamConfig
    from throwstream.stream import ThrowStream

logger: ThrowstreamLogger = get_logger(__name__)

_INTEGER_RE = re.compile(r"\s*[+-]?[0-9]+\s*", re.ASCII)


def inverse(i: int, *, config: StreamConfig | None = None) -> float:
    """Return ``1 / i``.

    Raises:
        ThrowStream: If ``i`` is zero.
    """
    if i == 0:
        raise stream_here("Error: I can't take the inverse of 0!", config=config)
    return 1.0 / i


def multiply_inverse(a: int, b: int, *, config: StreamConfig | None = None) -> float:
    """Return ``(1/a) * (1/b)``.

    Raises:
        ThrowStream: Any failure of `inverse`, with the arguments appended.
    """
    try:
        return inverse(a, config=config) * inverse(b, config=config)
    except Exception as ex:
        raise absorb_here(
            ex, "Called from MultiplyInverse: a = ", a, " b = ", b, config=config
        ) from ex


def _parse_int(text: str) -> tuple[int | None, str | None]:
    # Plain ASCII decimal only: no digit separators, no other scripts' digits.
    if _INTEGER_RE.fullmatch(text) is None:
        return None, f"invalid literal for int() with base 10: {text!r}"
    return int(text), None


def parse_operands(
    text_a: str,
    text_b: str,
    *,
    config: StreamConfig | None = None,
) -> tuple[int, int]:
    """Parse the two operands typed by the user.

    Every operand that fails to parse is recorded on a single accumulator, so
    the user sees all problems at once.

    Args:
        text_a: Raw text for ``a``.
        text_b: Raw text for ``b``.
        config: Rendering options.

    Returns:
        The parsed ``(a, b)`` pair.

    Raises:
        ThrowStream: If either operand is not an integer.
    """
    ts: ThrowStream = stream_here("Error parsing your numbers!", config=config)
    error = False

    a, reason_a = _parse_int(text_a)
    if reason_a is not None:
        error = True
        append_here(ts, "Error parsing integer 'a': ", reason_a)

    b, reason_b = _parse_int(text_b)
    if reason_b is not None:
        error = True
        append_here(ts, "Error parsing integer 'b': ", reason_b)

    if error:
        raise ts

    assert a is not None and b is not None
    return a, b


def run_demo(text_a: str, text_b: str, *, config: StreamConfig | None = None) -> float:
    """Parse both operands and return ``(1/a) * (1/b)``.

    Raises:
        ThrowStream: On unparsable operands or a zero operand.
    """
    a, b = parse_operands(text_a, text_b, config=config)
    logger.debug("Computing (1/%d)*(1/%d)", a, b)
    return multiply_inverse(a, b, config=config)
