"""
CLI Command Handlers.

Each handler takes already-parsed arguments and returns a process exit code.
"""

import ast
from typing import Any, List

from rich.markup import escape

from typed_collection.cli.matrix import CompatibilityMatrix
from typed_collection.core.collection import collection_of
from typed_collection.core.compatibility import is_compatible
from typed_collection.core.descriptor import describe_type
from typed_collection.enums import TypeKind
from typed_collection.errors import InvalidElementError
from typed_collection.utils.console import console, log_error, log_info, log_success, log_warning
from typed_collection.utils.strings import to_url_unsafe


def _parse_literal(raw: str) -> Any:
  """
  Interprets a CLI argument as a Python literal.

  ``"5"`` becomes ``5``, ``"'5'"`` becomes ``"5"``, anything that is not a
  literal (e.g. ``hello``) stays a string.
  """
  try:
    return ast.literal_eval(raw)
  except (ValueError, SyntaxError):
    return raw


def handle_check(target: str, source: str) -> int:
  """
  Handles 'check' command.

  Args:
      target (str): Declared type of the receiving collection.
      source (str): Declared type of the collection being merged in.

  Returns:
      int: 0 if compatible, 1 otherwise.
  """
  target_desc = describe_type(target)
  source_desc = describe_type(source)

  for declared, desc in ((target, target_desc), (source, source_desc)):
    if desc.kind == TypeKind.UNKNOWN:
      log_warning(f"'{escape(declared)}' is neither a scalar name nor an importable class.")
    else:
      log_info(f"{escape(declared)} -> [type]{escape(desc.name)}[/type] ({desc.kind.value})")

  if is_compatible(target_desc, source_desc):
    log_success(f"{escape(source)} can be merged into {escape(target)}")
    return 0

  log_error(f"{escape(source)} cannot be merged into {escape(target)}")
  return 1


def handle_validate(declared: str, raw_values: List[str]) -> int:
  """
  Handles 'validate' command.

  Adds each value to a collection declared for `declared` and reports which
  ones are rejected.

  Returns:
      int: 0 if every value was accepted, 1 otherwise.
  """
  collection = collection_of(declared)()
  rejected = 0

  for raw in raw_values:
    value = _parse_literal(raw)
    try:
      collection.add(value)
    except InvalidElementError as e:
      rejected += 1
      log_error(escape(str(e)))
    else:
      log_success(f"Accepted {escape(repr(value))}")

  log_info(f"{collection.count()} accepted, {rejected} rejected.")
  return 1 if rejected else 0


def handle_matrix(types: List[str]) -> int:
  """Handles 'matrix' command."""
  CompatibilityMatrix(types).render()
  return 0


def handle_b64_unsafe(text: str) -> int:
  """Handles 'b64-unsafe' command."""
  console.print(to_url_unsafe(text), markup=False, highlight=False)
  return 0
