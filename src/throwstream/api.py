# topmark:header:start
#
#   project      : ThrowStream
#   file         : api.py
#   file_relpath : src/throwstream/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Call-site helpers for building ThrowStream backtraces.

Each helper captures the file, line and function of *its caller* and records
them as the provenance of the new entry, so user code never spells out its
own location:

```python
def multiply_inverse(a: int, b: int) -> float:
    try:
        return inverse(a) * inverse(b)
    except Exception as ex:
        raise absorb_here(ex, "Called from MultiplyInverse: a = ", a, " b = ", b) from ex
```

Helpers:
    * `stream_here`: a fresh accumulator (raise it, or keep it to collect findings).
    * `absorb_here`: a new accumulator absorbing a caught exception.
    * `append_here`: a new record on an existing accumulator.
    * `append_copy_here`: absorb a caught exception into an existing accumulator.
    * `traced`: decorator absorbing anything that escapes a function.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING, ParamSpec, TypeVar

from throwstream.chain import describe_exception
from throwstream.config.logging import get_logger
from throwstream.location import SourceLocation
from throwstream.stream import ThrowStream

if TYPE_CHECKING:
    from collections.abc import Callable

    from throwstream.chain import ChainSource
    from throwstream.config.logging import ThrowstreamLogger
    from throwstream.config.model import StreamConfig

P = ParamSpec("P")
R = TypeVar("R")

logger: ThrowstreamLogger = get_logger(__name__)


def stream_here(*parts: object, config: StreamConfig | None = None) -> ThrowStream:
    """Create an accumulator whose first record is the caller's location.

    Args:
        *parts: Free text appended right after the record.
        config: Rendering options (defaults to `DEFAULT_CONFIG`).

    Returns:
        The new accumulator; the caller decides whether to raise it.
    """
    loc: SourceLocation = SourceLocation.here(stacklevel=2)
    return ThrowStream(loc.line, loc.file, loc.function, config=config).write(*parts)


def absorb_here(
    ex: BaseException | ChainSource,
    *parts: object,
    config: StreamConfig | None = None,
) -> ThrowStream:
    """Create an accumulator that absorbs ``ex`` at the caller's location.

    Args:
        ex: The caught exception (or a `ChainSource` built by the caller).
        *parts: Free text describing the calling context.
        config: Rendering options; inherited from ``ex`` when it is a `ThrowStream`.

    Returns:
        The new accumulator, ready to be raised.
    """
    loc: SourceLocation = SourceLocation.here(stacklevel=2)
    return ThrowStream.from_exception(
        ex, loc.line, loc.file, loc.function, config=config
    ).write(*parts)


def append_here(ts: ThrowStream, *parts: object) -> ThrowStream:
    """Add a record at the caller's location to an existing accumulator.

    Args:
        ts: The accumulator to extend. It is not raised.
        *parts: Free text for the new record.

    Returns:
        ``ts``.
    """
    loc: SourceLocation = SourceLocation.here(stacklevel=2)
    return ts.append(loc.line, loc.file, loc.function).write(*parts)


def append_copy_here(
    ts: ThrowStream,
    ex: BaseException | ChainSource,
    *parts: object,
) -> ThrowStream:
    """Absorb ``ex`` into an existing accumulator at the caller's location.

    Args:
        ts: The accumulator to extend. It is not raised.
        ex: The exception (or `ChainSource`) to absorb.
        *parts: Free text for the absorbing record.

    Returns:
        ``ts``.
    """
    loc: SourceLocation = SourceLocation.here(stacklevel=2)
    return ts.append_exception(ex, loc.line, loc.file, loc.function).write(*parts)


def _definition_site(function: Callable[..., object]) -> SourceLocation:
    """Return where ``function`` is defined, as precisely as it can be resolved."""
    name: str = getattr(function, "__name__", None) or type(function).__name__
    code = getattr(function, "__code__", None)
    if code is None:
        return SourceLocation(line=0, file="<unknown>", function=name)
    return SourceLocation(line=code.co_firstlineno, file=code.co_filename, function=name)


def _describe_call(
    describe: Callable[..., object],
    args: tuple[object, ...],
    kwargs: dict[str, object],
) -> object:
    """Return the description of a failed call, or a placeholder if ``describe`` fails."""
    try:
        return describe(*args, **kwargs)
    except Exception as ex:
        logger.error("Describing the call with %r failed: %r", describe, ex)
        return f"<description unavailable: {describe_exception(ex)}>"


def traced(
    describe: Callable[..., object] | None = None,
    *,
    config: StreamConfig | None = None,
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Decorator that absorbs every exception escaping the wrapped function.

    The escaping exception is absorbed into a new `ThrowStream` whose record
    names the function's definition site, optionally followed by
    ``describe(*args, **kwargs)``, and re-raised chained to the original.

    Args:
        describe: Optional callable receiving the call arguments and returning
            the free text for the record. If it raises, the error is logged and
            a placeholder naming it is written instead, so the chain still surfaces.
        config: Rendering options for the new accumulator.

    Returns:
        The decorator.
    """

    def decorator(function: Callable[P, R]) -> Callable[P, R]:
        site: SourceLocation = _definition_site(function)

        @functools.wraps(function)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            try:
                return function(*args, **kwargs)
            except Exception as ex:
                ts: ThrowStream = ThrowStream.from_exception(
                    ex, site.line, site.file, site.function, config=config
                )
                if describe is not None:
                    ts.write(_describe_call(describe, args, kwargs))
                raise ts from ex

        return wrapper

    return decorator
