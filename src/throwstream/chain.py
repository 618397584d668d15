# topmark:header:start
#
#   project      : ThrowStream
#   file         : chain.py
#   file_relpath : src/throwstream/chain.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""What an absorbed error contributes to a chain.

When an accumulator absorbs another error it needs to know whether that error
already carries an accumulated chain (copy it verbatim) or is a plain foreign
error (only its rendered message is available). This module models that
choice explicitly as a tagged variant:

* `NativeChain`: the full accumulated text of another accumulator.
* `ForeignMessage`: the textual description of any other exception.

Collaborators may build a variant themselves and hand it to the absorbing
operation, or let `chain_source_of` classify an exception. Exception types
that carry their own history opt in by implementing `ChainCarrier`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, TypeAlias, runtime_checkable


@dataclass(frozen=True, slots=True)
class NativeChain:
    """An accumulated chain, copied verbatim on absorption."""

    text: str


@dataclass(frozen=True, slots=True)
class ForeignMessage:
    """The rendered message of a foreign error.

    Absorbing it synthesizes a provenance record in front of the message.
    """

    message: str


ChainSource: TypeAlias = NativeChain | ForeignMessage


@runtime_checkable
class ChainCarrier(Protocol):
    """Structural interface for exceptions that carry an accumulated chain."""

    def chain_source(self) -> ChainSource:
        """Return what absorbing this exception should contribute."""
        ...


def describe_exception(ex: BaseException) -> str:
    """Return the textual description of an exception.

    Falls back to the exception's class name when ``str(ex)`` is empty
    (e.g. ``KeyError()``), so an absorbed error never vanishes silently.
    """
    text: str = str(ex)
    return text if text else type(ex).__name__


def chain_source_of(ex: BaseException | ChainSource) -> ChainSource:
    """Classify an exception (or pass through a ready-made variant).

    Args:
        ex: The exception to absorb, or a `ChainSource` built by the caller.

    Returns:
        `NativeChain` for chain carriers, `ForeignMessage` for anything else.
    """
    if isinstance(ex, (NativeChain, ForeignMessage)):
        return ex
    if isinstance(ex, ChainCarrier):
        return ex.chain_source()
    return ForeignMessage(describe_exception(ex))
