# topmark:header:start
#
#   project      : PhpGen
#   file         : __init__.py
#   file_relpath : src/phpgen/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 PhpGen contributors
#
# topmark:header:end

"""Command-line interface for PhpGen."""
