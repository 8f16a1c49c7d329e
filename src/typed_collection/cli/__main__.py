"""
Main Entry Point for typed-collection CLI.

This module handles argument parsing and dispatches to the handlers defined
in `typed_collection.cli.commands`.
"""

import argparse
import sys
from typing import List, Optional

from pydantic import ValidationError
from rich.markup import escape

from typed_collection import __version__
from typed_collection.cli import commands
from typed_collection.config import LOG_LEVELS, RuntimeConfig
from typed_collection.utils.console import log_error


def main(argv: Optional[List[str]] = None) -> int:
  """
  Main CLI entry point.

  Args:
      argv: Optional list of command line arguments (defaults to sys.argv).

  Returns:
      int: Exit code (0 for success, non-zero for failure).
  """
  parser = argparse.ArgumentParser(description="typed-collection: runtime-checked collections")
  parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
  parser.add_argument(
    "--log-level",
    type=str.upper,
    choices=LOG_LEVELS,
    default=None,
    help="Logging verbosity (default: from pyproject.toml, else INFO)",
  )

  subparsers = parser.add_subparsers(dest="command", required=True)

  # --- Command: CHECK ---
  cmd_check = subparsers.add_parser("check", help="Check whether SOURCE collections merge into TARGET collections")
  cmd_check.add_argument("target", help="Declared type of the receiving collection (e.g. 'collections.abc.Sized')")
  cmd_check.add_argument("source", help="Declared type of the merged collection (e.g. 'builtins.list')")

  # --- Command: VALIDATE ---
  cmd_val = subparsers.add_parser("validate", help="Check literal values against a declared type")
  cmd_val.add_argument("type", help="Declared element type (e.g. 'integer')")
  cmd_val.add_argument("values", nargs="+", help="Python literals; non-literals are taken as strings")

  # --- Command: MATRIX ---
  cmd_matrix = subparsers.add_parser("matrix", help="Show merge compatibility table")
  cmd_matrix.add_argument("--types", nargs="+", default=None, help="Declared types to compare (default: from toml)")

  # --- Command: B64-UNSAFE ---
  cmd_b64 = subparsers.add_parser("b64-unsafe", help="Convert URL-safe base64 to the standard alphabet")
  cmd_b64.add_argument("text", help="URL-safe base64 text")

  args = parser.parse_args(argv)

  try:
    config = RuntimeConfig.load(
      types=getattr(args, "types", None),
      log_level=args.log_level,
    )
  except ValidationError as e:
    log_error(f"Invalid configuration: {escape(str(e))}")
    return 2
  config.apply_log_level()

  if args.command == "check":
    return commands.handle_check(args.target, args.source)

  elif args.command == "validate":
    return commands.handle_validate(args.type, args.values)

  elif args.command == "matrix":
    return commands.handle_matrix(config.types)

  elif args.command == "b64-unsafe":
    return commands.handle_b64_unsafe(args.text)

  return 0


if __name__ == "__main__":
  sys.exit(main())
