# topmark:header:start
#
#   project      : ThrowStream
#   file         : stream.py
#   file_relpath : src/throwstream/stream.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The ThrowStream accumulator.

A `ThrowStream` is an exception that carries a growing, human-readable
"call-site backtrace". Each site that raises, re-raises or annotates the error
appends a provenance record followed by free text:

```text
\\n( app.py:12 , in inverse() )    ->  Error: I can't take the inverse of 0!
\\n( app.py:20 , in multiply_inverse() )    ->  Called from MultiplyInverse: a = 3 b = 0
```

The text only ever grows. Rendering (`what()`, `str()`, `text`) returns it
verbatim.

Absorbing a foreign exception writes two provenance records for a single call:
one synthesized in front of the foreign message, and one for the absorbing site
itself. Existing consumers compare rendered output byte for byte, so this shape
is kept as is.

Example:
    ```python
    def inverse(i: int) -> float:
        if i == 0:
            raise stream_here("Error: I can't take the inverse of 0!")
        return 1.0 / i
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from throwstream.chain import ChainSource, NativeChain, chain_source_of
from throwstream.config.logging import get_logger
from throwstream.config.model import DEFAULT_CONFIG, StreamConfig
from throwstream.location import format_record

if TYPE_CHECKING:
    from throwstream.config.logging import ThrowstreamLogger

logger: ThrowstreamLogger = get_logger(__name__)


class ThrowStream(Exception):
    """An exception that accumulates provenance records and free text.

    Args:
        line (int): The line on which the error occurred.
        file (str): The file in which the error occurred.
        function (str): The function in which the error occurred.
        config (StreamConfig | None): Rendering options; defaults to `DEFAULT_CONFIG`.

    Notes:
        Instances are single-owner values: build them in one execution path,
        then raise or render them. No internal locking is performed.
    """

    def __init__(
        self,
        line: int,
        file: str,
        function: str,
        *,
        config: StreamConfig | None = None,
    ) -> None:
        super().__init__()
        self._config: StreamConfig = config or DEFAULT_CONFIG
        self._buffer: list[str] = []
        self.append(line, file, function)

    @classmethod
    def _empty(cls, config: StreamConfig | None) -> ThrowStream:
        """Return an instance with an empty buffer (no initial record)."""
        obj: ThrowStream = cls.__new__(cls)
        Exception.__init__(obj)
        obj._config = config or DEFAULT_CONFIG
        obj._buffer = []
        return obj

    @classmethod
    def from_exception(
        cls,
        ex: BaseException | ChainSource,
        line: int,
        file: str,
        function: str,
        *,
        config: StreamConfig | None = None,
    ) -> ThrowStream:
        """Construct by absorbing an existing exception at a new location.

        When ``config`` is omitted and ``ex`` is itself a `ThrowStream`, its
        config is inherited so the whole chain renders consistently.

        Args:
            ex: The exception to absorb (a `ThrowStream`, any other exception,
                or a ready-made `ChainSource`).
            line: The line of the absorbing call site.
            file: The file of the absorbing call site.
            function: The function of the absorbing call site.
            config: Rendering options for the new accumulator.

        Returns:
            A new accumulator holding the absorbed history plus one record.
        """
        if config is None and isinstance(ex, ThrowStream):
            config = ex.config
        return cls._empty(config).append_exception(ex, line, file, function)

    @property
    def config(self) -> StreamConfig:
        """The rendering options of this accumulator."""
        return self._config

    @property
    def text(self) -> str:
        """The accumulated backtrace."""
        return "".join(self._buffer)

    def what(self) -> str:
        """Return the accumulated backtrace.

        Returns:
            The literal contents of the buffer; may be called while still appending.
        """
        return self.text

    def append(self, line: int, file: str, function: str) -> ThrowStream:
        """Add a new provenance record to the backtrace.

        Args:
            line: The line on which the error occurred.
            file: The file in which the error occurred.
            function: The function in which the error occurred.

        Returns:
            This accumulator, so free text can be chained right after.
        """
        record: str = format_record(
            line,
            file,
            function,
            include_source_location=self._config.include_source_location,
        )
        self._buffer.append(record)
        logger.trace("Appending record %s:%s (%s)", file, line, function)
        return self

    def append_exception(
        self,
        ex: BaseException | ChainSource,
        line: int,
        file: str,
        function: str,
    ) -> ThrowStream:
        """Absorb another exception, then add a provenance record.

        A `ThrowStream` (or any `ChainCarrier`) has its whole history copied
        verbatim. Any other exception gets a synthesized provenance record
        followed by its message, so absorbing a foreign error writes two
        records for this one call.

        Args:
            ex: The exception (or `ChainSource`) to absorb.
            line: The line of the absorbing call site.
            file: The file of the absorbing call site.
            function: The function of the absorbing call site.

        Returns:
            This accumulator.
        """
        source: ChainSource = chain_source_of(ex)
        if isinstance(source, NativeChain):
            logger.trace("Copying chain of %d characters", len(source.text))
            self._buffer.append(source.text)
        else:
            logger.trace("Absorbing foreign message %r", source.message)
            self.append(line, file, function).write(source.message)

        return self.append(line, file, function)

    def write(self, *values: object) -> ThrowStream:
        """Add information to the current entry in the backtrace.

        Each value is converted with ``str()`` and appended with no separator.

        Returns:
            This accumulator.
        """
        for value in values:
            self._buffer.append(str(value))
        return self

    def __lshift__(self, value: object) -> ThrowStream:
        """Stream-style free text: ``ts << "a = " << a``."""
        return self.write(value)

    def chain_source(self) -> ChainSource:
        """Return the full history, for absorption by another accumulator."""
        return NativeChain(self.text)

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.text!r})"

    def __reduce__(self) -> tuple[object, ...]:
        return (_restore, (type(self), self.text, self._config))


def _restore(cls: type[ThrowStream], text: str, config: StreamConfig) -> ThrowStream:
    """Rebuild a pickled accumulator from its rendered text."""
    obj: ThrowStream = cls._empty(config)  # pyright: ignore[reportPrivateUsage]
    obj._buffer.append(text)  # pyright: ignore[reportPrivateUsage]
    return obj
