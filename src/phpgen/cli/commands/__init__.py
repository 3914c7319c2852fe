# topmark:header:start
#
#   project      : PhpGen
#   file         : __init__.py
#   file_relpath : src/phpgen/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 PhpGen contributors
#
# topmark:header:end

"""PhpGen CLI subcommands."""
