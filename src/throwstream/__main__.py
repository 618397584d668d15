# topmark:header:start
#
#   project      : ThrowStream
#   file         : __main__.py
#   file_relpath : src/throwstream/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running ThrowStream via ``python -m throwstream``.

Delegates directly to :func:`throwstream.cli.main.cli`, the same entry point
as the ``throwstream`` console script.

Examples:
    Run the reciprocal-product demo::

        python -m throwstream demo --a 3 --b 0
"""

from __future__ import annotations

from throwstream.cli.main import cli

if __name__ == "__main__":
    cli()
