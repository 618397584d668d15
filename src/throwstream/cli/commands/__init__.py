# topmark:header:start
#
#   project      : ThrowStream
#   file         : __init__.py
#   file_relpath : src/throwstream/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ThrowStream CLI subcommands."""
